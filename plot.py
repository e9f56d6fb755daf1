#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict, Any

def plot_dual_coefficients(alpha: np.ndarray, title: str = "Dual coefficients - |α|") -> None:
	"""
	Sorted |α| of a fitted LS-SVM. No coefficient drops to zero: every training
	sample is a support vector.
	"""
	abs_a = np.sort(np.abs(np.ravel(alpha)))[::-1]
	plt.figure(figsize=(8, 4))
	plt.plot(np.arange(abs_a.size), abs_a, linewidth=2)
	plt.yscale("log")
	plt.xlabel("training sample (sorted)")
	plt.ylabel("|α|")
	plt.title(title)
	plt.tight_layout()
	plt.show()

# --- Classification ---
def print_classification_report(models_results: List[Dict], labels: List[str]) -> None:
	"""
	Shows accuracy for every model; for two classes also Prec/Rec/F1 at
	threshold 0.0 (base) and at the best threshold (best). Plus fit/predict time.
	"""
	print("\n=== Classification report ===")
	for lab, res in zip(labels, models_results):
		times = res["times"]
		line = f"{lab:>20} | Acc={res['accuracy']:.3f} | "
		if "base_metrics" in res:
			base = res["base_metrics"]   # {'acc','prec','rec','f1',...}
			best = res["best_metrics"]   # idem + 'thr'
			line += (f"base: Prec={base['prec']:.3f} Rec={base['rec']:.3f} F1={base['f1']:.3f} | "
					 f"best@thr={best['thr']:.3f}: Acc={best['acc']:.3f} F1={best['f1']:.3f} | ")
		line += f"fit={times['fit']*1000:.1f} ms | pred={times['predict']*1000:.1f} ms"
		print(line)

def print_confusion(res: Dict[str, Any], label: str) -> None:
	classes = res["classes"]
	cm = res["confusion"]
	print(f"\n{label} confusion (rows = true, cols = predicted):")
	print(" " * 12 + "".join(f"{str(c):>10}" for c in classes))
	for c, row in zip(classes, cm):
		print(f"{str(c):>12}" + "".join(f"{v:>10d}" for v in row))

def plot_roc(models_results: List[Dict[str, Any]], labels: List[str], title: str = "ROC - comparison") -> None:
	plt.figure()
	for res, lab in zip(models_results, labels):
		fpr, tpr, auc_val = res["roc"]
		plt.plot(fpr, tpr, linewidth=2, label=f"{lab} (AUC={auc_val:.3f})")
	plt.plot([0, 1], [0, 1], linestyle="--", linewidth=1)
	plt.xlabel("FPR")
	plt.ylabel("TPR")
	plt.title(title)
	plt.legend()
	plt.show()

def plot_pr(models_results: List[Dict[str, Any]], labels: List[str], title: str = "Precision-Recall - comparison") -> None:
	plt.figure()
	for res, lab in zip(models_results, labels):
		rec, prec, pr_area = res["pr"]
		bm = res["best_metrics"]
		plt.plot(rec, prec, linewidth=2, label=f"{lab} (best thr={bm['thr']:.3f}, F1={bm['f1']:.3f}, PR-AUC={pr_area:.3f})")
		# best threshold point
		plt.scatter([bm["rec"]], [bm["prec"]], s=60)
	plt.xlabel("Recall")
	plt.ylabel("Precision")
	plt.title(title)
	plt.legend()
	plt.show()

# --- Regression ---
def print_regression_report(models_results: List[Dict], labels: List[str]) -> None:
	"""
	Shows MSE / MAE / R² + time (fit/predict) for each model.
	"""
	print("\n=== Regression report ===")
	for lab, res in zip(labels, models_results):
		m = res["reg_metrics"]; t = res["times"]
		print(f"{lab:>20} | MSE={m['mse']:.4f} | MAE={m['mae']:.4f} | R²={m['r2']:.4f} | "
			  f"fit={t['fit']*1000:.1f} ms | pred={t['predict']*1000:.1f} ms")

def plot_regression_parity(y_true: np.ndarray, models_results: List[Dict], labels: List[str],
						   title: str = "Predicted vs Actual") -> None:
	plt.figure()
	ymin, ymax = np.min(y_true), np.max(y_true)
	for res, lab in zip(models_results, labels):
		plt.scatter(y_true, res["y_pred"], alpha=0.6, label=lab)
	plt.plot([ymin, ymax], [ymin, ymax], linestyle="--", linewidth=1)
	plt.xlabel("True values")
	plt.ylabel("Predictions")
	plt.title(title)
	plt.legend()
	plt.tight_layout()
	plt.show()
