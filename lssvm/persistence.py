#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Fitted-model persistence as a flat, versioned record.

A record holds the estimator parameters (kernel spec, γ, solver settings) and,
for every binary model, its training samples, α and b. `save_model` writes the
record as YAML, `load_model` reads it back; predictions of the reloaded model
are identical to the original ones.
"""
import logging
import numpy as np
import yaml
from typing import Any, Dict

from lssvm.binary import BinaryModel
from lssvm.errors import InvalidInput, NotFitted
from lssvm.kernels import KERNELS, kernel_to_dict, make_kernel
from lssvm.multiclass import Subproblem, get_strategy
from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR

log = logging.getLogger(__name__)

FORMAT_VERSION = 1
ESTIMATORS = {"LSSVC": LSSVC, "LSSVR": LSSVR}


def _model_to_record(model: BinaryModel) -> Dict[str, Any]:
	return {
		"support_vectors": model.support_vectors_.tolist(),
		"alpha": model.alpha_.tolist(),
		"b": float(model.b_),
		"n_iter": int(model.n_iter_),
	}


def _require(rec, keys, where: str) -> None:
	if not isinstance(rec, dict):
		raise InvalidInput(f"{where} must be a mapping, got {type(rec).__name__}")
	missing = [k for k in keys if k not in rec]
	if missing:
		raise InvalidInput(f"{where} is missing {', '.join(missing)}")


def _array(value, dtype, where: str) -> np.ndarray:
	try:
		return np.asarray(value, dtype=dtype)
	except (TypeError, ValueError) as e:
		raise InvalidInput(f"{where} is not a numeric array: {e}") from e


def _model_from_record(rec: Dict[str, Any], est) -> BinaryModel:
	_require(rec, ("support_vectors", "alpha", "b"), "model record")
	sv = _array(rec["support_vectors"], float, "support_vectors")
	alpha = _array(rec["alpha"], float, "alpha")
	if sv.ndim != 2 or sv.shape[0] == 0:
		raise InvalidInput(f"support_vectors must be a non-empty 2-D array, got shape {sv.shape}")
	if alpha.ndim != 1 or alpha.size != sv.shape[0]:
		raise InvalidInput(f"{alpha.size} alpha values for {sv.shape[0]} support vectors")
	b = _array(rec["b"], float, "b")
	if b.ndim != 0:
		raise InvalidInput(f"b must be a scalar, got shape {b.shape}")
	model = BinaryModel(kernel=est.kernel_, gamma=est.gamma, **est._solver_kwargs())
	model.support_vectors_ = sv
	model.alpha_ = alpha
	model.b_ = float(b)
	model.n_iter_ = int(rec.get("n_iter", 0))
	return model


def to_record(est) -> Dict[str, Any]:
	kind = type(est).__name__
	if kind not in ESTIMATORS:
		raise InvalidInput(f"cannot serialize {kind}")

	params = est.get_params()
	if isinstance(params["kernel"], tuple(KERNELS.values())):
		params["kernel"] = kernel_to_dict(params["kernel"])
	record = {"format_version": FORMAT_VERSION, "kind": kind, "params": params}

	if kind == "LSSVR":
		if est.model_ is None:
			raise NotFitted()
		record["models"] = [_model_to_record(est.model_)]
		return record

	if est.classes_ is None:
		raise NotFitted()
	record["classes"] = est.classes_.tolist()
	record["models"] = []
	for sp, model in zip(est.subproblems_, est.estimators_):
		rec = _model_to_record(model)
		rec["classes"] = [int(c) for c in sp.classes]
		rec["rows"] = sp.rows.tolist()
		rec["targets"] = sp.targets.tolist()
		record["models"].append(rec)
	return record


def _subproblem_from_record(rec: Dict[str, Any], n_rows: int) -> Subproblem:
	_require(rec, ("classes", "rows", "targets"), "model record")
	rows = _array(rec["rows"], int, "rows").reshape(-1)
	targets = _array(rec["targets"], float, "targets").reshape(-1)
	if rows.size != n_rows or targets.size != n_rows:
		raise InvalidInput(f"{rows.size} rows and {targets.size} targets for {n_rows} support vectors")
	pair = _array(rec["classes"], int, "classes").reshape(-1)
	return Subproblem(tuple(int(c) for c in pair), rows, targets)


def from_record(record: Dict[str, Any]):
	if not isinstance(record, dict):
		raise InvalidInput(f"a model record must be a mapping, got {type(record).__name__}")
	version = record.get("format_version")
	if version != FORMAT_VERSION:
		raise InvalidInput(f"unsupported model format version {version!r} (expected {FORMAT_VERSION})")
	kind = record.get("kind")
	cls = ESTIMATORS.get(kind)
	if cls is None:
		raise InvalidInput(f"unknown estimator kind {kind!r}")
	_require(record, ("params", "models") + (("classes",) if kind == "LSSVC" else ()), f"{kind} record")

	_require(record["params"], ("kernel",), "params")
	params = dict(record["params"])
	if isinstance(params["kernel"], dict):
		spec = dict(params["kernel"])
		_require(spec, ("name",), "kernel spec")
		params["kernel"] = make_kernel(spec.pop("name"), **spec)
	est = cls(**params)

	models = record["models"]
	if not isinstance(models, list):
		raise InvalidInput(f"models must be a list, got {type(models).__name__}")
	if kind == "LSSVR":
		if len(models) != 1:
			raise InvalidInput(f"LSSVR record must hold exactly one model, got {len(models)}")
		est.model_ = _model_from_record(models[0], est)
		return est

	classes = np.asarray(record["classes"])
	if classes.ndim != 1 or classes.size < 2:
		raise InvalidInput(f"a classifier record needs at least two classes, got {record['classes']!r}")
	strategy = get_strategy(est.strategy)
	if len(models) != strategy.n_models(len(classes)):
		raise InvalidInput(f"{len(models)} models in record, expected {strategy.n_models(len(classes))}")
	estimators = [_model_from_record(rec, est) for rec in models]
	n_features = {m.support_vectors_.shape[1] for m in estimators}
	if len(n_features) != 1:
		raise InvalidInput(f"models disagree on the number of features: {sorted(n_features)}")
	est.classes_ = classes
	est.strategy_ = strategy
	est.estimators_ = estimators
	est.subproblems_ = [_subproblem_from_record(rec, m.support_vectors_.shape[0])
						for rec, m in zip(models, estimators)]
	est.n_features_in_ = n_features.pop()
	return est


def save_model(est, path: str) -> None:
	record = to_record(est)
	with open(path, "w") as fp:
		yaml.safe_dump(record, fp, sort_keys=False)
	log.debug(f"saved {record['kind']} with {len(record['models'])} model(s) to {path}")


def load_model(path: str):
	with open(path, "r") as fp:
		record = yaml.safe_load(fp)
	if not isinstance(record, dict):
		raise InvalidInput(f"{path} does not contain a model record")
	return from_record(record)
