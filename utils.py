#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import os
import pandas as pd
import logging
import yaml
from platform import system
from typing import Any

# scikit-learn imports (aliases to avoid conflicts)
from sklearn.svm import SVC as SkSVC, SVR as SkSVR
from sklearn.kernel_ridge import KernelRidge as SkKernelRidge

from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR

logging.basicConfig(level=logging.WARNING)
log = logging.getLogger(__name__)

def getPath(script_dir, file_dir):
	plat = system()
	if plat == "Windows":
		script_dir = script_dir.replace("/", "\\")
		file_dir = file_dir.replace("/", "\\")
	else:
		script_dir = script_dir.replace("\\", "/")
		file_dir = file_dir.replace("\\", "/")
	return script_dir, file_dir

def split(X: np.ndarray, y: np.ndarray, test_size=0.2, random_state=42) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
	rng = np.random.default_rng(random_state)
	indices = rng.permutation(len(y))
	split = int(len(y) * (1 - test_size))
	train_idx, test_idx = indices[:split], indices[split:]
	y = np.asarray(y)
	return X[train_idx], X[test_idx], y[train_idx], y[test_idx]

def standardize(X_train: np.ndarray, X_test: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
	# always center/scale with the train statistics (kernels are scale sensitive)
	mu = X_train.mean(axis=0); sigma = X_train.std(axis=0); sigma[sigma == 0] = 1.0
	return (X_train - mu) / sigma, (X_test - mu) / sigma

def read_file(fname: str, sep: str) -> pd.DataFrame:
	script_dir = os.path.dirname(os.path.abspath(__file__))
	script_dir, file_dir = getPath(script_dir, fname)
	full_path = os.path.join(script_dir, file_dir)
	log.debug(f"Reading file: {full_path} (sep='{sep}')")
	return pd.read_csv(full_path, sep=sep)

def read_regression(fname: str) -> pd.DataFrame:
	df = read_file(fname, ";")
	df = df.fillna(df.mean(numeric_only=True))
	df = df.drop(columns=["id"], errors="ignore")
	return df

def read_classif(fname: str) -> pd.DataFrame:
	df = read_file(fname, ",")
	df = df.drop(columns=["Unnamed: 0", "id"], errors="ignore")
	# LS-SVM needs complete rows
	df = df.dropna()
	# simple binary encoding of Yes/No columns
	for col in df.columns:
		if not pd.api.types.is_numeric_dtype(df[col]) and set(df[col].unique()) <= {"Yes", "No"}:
			df[col] = df[col].map({"Yes": 1, "No": 0})
	return df

def read_file_wtype(fname: str, typ: str) -> pd.DataFrame:
	if typ == "r":
		return read_regression(fname)
	else:
		return read_classif(fname)

def features_and_target(df: pd.DataFrame, target: str, typ: str) -> tuple[np.ndarray, np.ndarray, list[str]]:
	if target not in df.columns:
		raise KeyError(f"target column {target!r} not in {list(df.columns)}")
	feats = df.drop(columns=[target])
	# one-hot the remaining categorical columns
	feats = pd.get_dummies(feats, drop_first=True)
	feats = feats.select_dtypes(include=[np.number, bool])
	X = feats.to_numpy(dtype=float, copy=True)
	y = df[target].to_numpy(dtype=float if typ == "r" else None)
	return X, y, feats.columns.tolist()

def read_params(fname: str = "params.yaml") -> dict[str, dict[str, Any]]:
	script_dir = os.path.dirname(os.path.abspath(__file__))
	script_dir, file_dir = getPath(script_dir, fname)
	with open(os.path.join(script_dir, file_dir), "r") as fp:
		params = yaml.safe_load(fp)
	return params or {}

def solver_params(params: dict) -> dict[str, Any]:
	"""Solver section of params.yaml (tol / max_iter / method), only for scratch models."""
	return dict(params.get("solver") or {})

def apply_params(model, algo_name: str, typ: str, params: dict, ar: list[str], is_sci=False) -> None:
	"""
	Applies the hyperparameters read from params.yaml to the model through
	model.set_params(**par). Scratch models validate every value and raise
	InvalidParameter on unknown names or out-of-range values.
	"""
	par = dict(
		params.get(algo_name, {})
			  .get("scikit" if is_sci else "scratch", {})
			  .get(typ, {})
		or {}
	)
	if not is_sci:
		par = {**solver_params(params), **par}
	if not par:
		return

	if in_args(ar, "hyperparams"):
		print(f"\nHyperparameters applied to {algo_name} "
			  f"({'scikit-learn' if is_sci else 'scratch'}) [{typ}] :")
		for k, v in par.items():
			print(f"   {k}: {v}")
		print("-" * 60)

	model.set_params(**par)

def sklearn_params(model, sk_cls) -> dict[str, Any]:
	"""
	scikit-learn parameters reproducing the kernel of a scratch LS-SVM, so the
	benchmark compares like with like:
	  - RBF:      sklearn gamma = 1 / (2σ²)
	  - poly:     gamma = 1, coef0 = bias
	  - sigmoid:  gamma = slope, coef0 = offset
	  - C = γ for SVC/SVR, alpha = 1/γ for KernelRidge
	"""
	kernel = model.kernel_
	name = kernel.name
	par: dict[str, Any] = {"kernel": name}
	if name == "rbf":
		par["gamma"] = 1.0 / (2.0 * kernel.sigma ** 2)
	elif name == "poly":
		par.update(gamma=1.0, degree=kernel.degree, coef0=kernel.bias)
	elif name == "sigmoid":
		par.update(gamma=kernel.slope, coef0=kernel.offset)

	if sk_cls is SkKernelRidge:
		par["alpha"] = 1.0 / model.gamma
	else:
		par["C"] = model.gamma
	return par

def in_args(ar: list[str], val: str) -> bool:
	return "all" in ar or val in ar

def get_class(algo: str, typ: str):
	classes = algos_map.get(algo, {})
	if typ not in classes:
		raise KeyError(f"{algo} doesn't support {type_map.get(typ, typ)}")
	return classes[typ]

type_map = {"r": "regression", "c": "classification"}
algos_map = {
	"LSSVM": {"c": LSSVC, "r": LSSVR},
}
algos_sci_map = {
	"LSSVM": {"c": SkSVC, "r": SkSVR},
	"KernelRidge": {"r": SkKernelRidge},
}
