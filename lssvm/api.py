#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Fit/predict entry points for pipeline adapters.

Any object satisfying `Model` (a `fit(X, y)` returning the fitted model and a
`predict(X)`) can be driven by an adapter; no base class is required.
"""
import numpy as np
from typing import Protocol, runtime_checkable

from lssvm.errors import InvalidParameter
from lssvm.kernels import Kernel
from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR

TASKS = {"classification": LSSVC, "c": LSSVC, "regression": LSSVR, "r": LSSVR}


@runtime_checkable
class Model(Protocol):
	def fit(self, X: np.ndarray, y: np.ndarray) -> "Model": ...

	def predict(self, X: np.ndarray) -> np.ndarray: ...


def fit(X: np.ndarray, y: np.ndarray, kernel: str | Kernel = "rbf", gamma: float = 1.0,
		task: str = "classification", **options) -> LSSVC | LSSVR:
	cls = TASKS.get(task)
	if cls is None:
		raise InvalidParameter(f"unknown task {task!r}, expected one of {sorted(TASKS)}")
	return cls(kernel=kernel, gamma=gamma, **options).fit(X, y)


def predict(model: Model, X: np.ndarray) -> np.ndarray:
	return model.predict(X)
