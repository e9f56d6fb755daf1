#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Optuna tuner for the scratch LS-SVM.

Usage
-----
python tune_optuna.py \
  -f Data-20251001/Carseats_prepared.csv \
  -t c \
  -F High \
  --n-trials 50

python tune_optuna.py \
  -f Data-20251001/ozone_complet.txt \
  -t r \
  -F maxO3 \
  --kernel rbf \
  --n-trials 50

Notes
-----
- The search space is not hard-coded: it comes from the ParamRange
  declarations of LSSVC / LSSVR (`hyperparameters()`), restricted to the
  parameters the sampled kernel actually reads.
- For classification: maximizes accuracy (best F1 with two classes).
- For regression:   maximizes R².
- A trial whose solver hits its iteration cap (NonConvergence) is pruned.
"""

import argparse
import logging
import numpy as np
import optuna
import utils
import bench

from lssvm.errors import NonConvergence
from lssvm.hyperparams import KERNEL_PARAMS, by_name

log = logging.getLogger(__name__)

# ----------------------------- arg parsing -----------------------------

parser = argparse.ArgumentParser(
	description="Hyperparameter optimization of the LS-SVM with Optuna.",
	formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
parser.add_argument("-f", "--file", required=True, help="Input file path")
parser.add_argument("-t", "--type", choices=["r", "regression", "c", "classification"], default="c",
					help="Task type")
parser.add_argument("-F", "--to-find", required=True, help="Target/label column")
parser.add_argument("-k", "--kernel", choices=sorted(KERNEL_PARAMS), default=None,
					help="Fix the kernel instead of tuning it")
parser.add_argument("-p", "--params", default="params.yaml", help="YAML file with solver settings")
parser.add_argument("--n-trials", type=int, default=30, help="Number of Optuna trials")
parser.add_argument("--timeout", type=int, default=None, help="Global timeout in seconds")
parser.add_argument("--seed", type=int, default=0, help="Random seed for split & Optuna")

# ----------------------------- search space -----------------------------

def suggest_params(trial: optuna.Trial, model_cls, kernel: str | None = None) -> dict:
	ranges = by_name(model_cls.hyperparameters())
	par = {"kernel": kernel if kernel is not None else ranges["kernel"].suggest(trial)}
	par["gamma"] = ranges["gamma"].suggest(trial)
	for name in KERNEL_PARAMS[par["kernel"]]:
		par[name] = ranges[name].suggest(trial)
	return par

# ----------------------------- objective -----------------------------

def load_data(args, typ: str):
	df = utils.read_file_wtype(args.file, typ)
	X, y, _ = utils.features_and_target(df, args.to_find, typ)
	X_train, X_test, y_train, y_test = utils.split(X, y, test_size=0.2, random_state=args.seed)
	X_train, X_test = utils.standardize(X_train, X_test)
	return X_train, X_test, y_train, y_test

def make_objective(args, typ: str, data, solver: dict):
	X_train, X_test, y_train, y_test = data
	model_cls = utils.get_class("LSSVM", typ)

	def objective(trial: optuna.Trial) -> float:
		par = suggest_params(trial, model_cls, args.kernel)
		model = model_cls(**par, **solver)
		try:
			if typ == "c":
				res = bench.benchmark_classification(model, X_train, y_train, X_test, y_test)
				score = float(res["best_metrics"]["f1"]) if "best_metrics" in res else res["accuracy"]
			else:
				res = bench.benchmark_regression(model, X_train, y_train, X_test, y_test)
				score = float(res["reg_metrics"]["r2"])
		except NonConvergence as e:
			log.info(f"trial {trial.number} pruned: {e}")
			raise optuna.TrialPruned(str(e)) from e

		trial.set_user_attr("times", res.get("times", {}))
		return score

	return objective

# ----------------------------- run study -----------------------------

if __name__ == "__main__":
	args = parser.parse_args()
	typ = args.type[0]  # normalize to 'r' or 'c'
	solver = utils.solver_params(utils.read_params(args.params))

	study = optuna.create_study(
		study_name=f"LSSVM-{typ}",
		direction="maximize",
		sampler=optuna.samplers.TPESampler(seed=args.seed),
	)
	study.optimize(make_objective(args, typ, load_data(args, typ), solver),
				   n_trials=args.n_trials, timeout=args.timeout)

	print("\nBest trial:")
	bt = study.best_trial
	print(f"  value: {bt.value:.6f}")
	print("  params:")
	for k, v in bt.params.items():
		print(f"    {k}: {v}")

	print("\nYAML snippet to paste into params.yaml:")
	print("LSSVM:")
	print("  scratch:")
	print(f"    {typ}:")
	for k, v in bt.params.items():
		if isinstance(v, float):
			print(f"      {k}: {v:.6g}")
		else:
			print(f"      {k}: {v}")
