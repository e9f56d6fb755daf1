#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Named, range-constrained hyperparameter declarations.

Grid/search tooling (see tune_optuna.py) enumerates these instead of poking at
estimator internals. A `ParamRange` carries two kinds of bounds:
  - validity bounds (`lower`/`upper`, `strict_lower`) enforced by `validate`;
  - a search interval (`search`, `log`) used by `grid` and `suggest`.
"""
import math
import numpy as np
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from lssvm.errors import InvalidParameter


@dataclass(frozen=True)
class ParamRange:
	name: str
	kind: type
	default: Any
	lower: float | None = None
	upper: float | None = None
	strict_lower: bool = False
	search: Tuple[float, float] | None = None
	log: bool = False
	choices: Tuple[Any, ...] | None = None
	tunable: bool = True

	def validate(self, value) -> Any:
		if self.choices is not None:
			if not isinstance(value, Hashable) or value not in self.choices:
				raise InvalidParameter(f"{self.name} must be one of {self.choices}, got {value!r}")
			return value

		if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
			raise InvalidParameter(f"{self.name} must be numeric, got {value!r}")
		if self.kind is int:
			if not float(value).is_integer():
				raise InvalidParameter(f"{self.name} must be an integer, got {value!r}")
			value = int(value)
		else:
			value = float(value)
			if not math.isfinite(value):
				raise InvalidParameter(f"{self.name} must be finite, got {value!r}")

		if self.lower is not None:
			if value < self.lower or (self.strict_lower and value == self.lower):
				op = ">" if self.strict_lower else ">="
				raise InvalidParameter(f"{self.name} must be {op} {self.lower}, got {value!r}")
		if self.upper is not None and value > self.upper:
			raise InvalidParameter(f"{self.name} must be <= {self.upper}, got {value!r}")
		return value

	def grid(self, n: int = 5) -> List[Any]:
		"""`n` evenly spaced candidate values (geometric when `log`) over the search interval."""
		if self.choices is not None:
			return list(self.choices)
		if self.search is None:
			return [self.default]
		lo, hi = self.search
		values = np.geomspace(lo, hi, n) if self.log else np.linspace(lo, hi, n)
		if self.kind is int:
			return sorted({int(round(v)) for v in values})
		return [float(v) for v in values]

	def suggest(self, trial) -> Any:
		"""Draw a value from an Optuna trial."""
		if self.choices is not None:
			return trial.suggest_categorical(self.name, list(self.choices))
		lo, hi = self.search
		if self.kind is int:
			return trial.suggest_int(self.name, int(lo), int(hi), log=self.log)
		return trial.suggest_float(self.name, float(lo), float(hi), log=self.log)


KERNEL = ParamRange("kernel", str, "rbf", choices=("linear", "poly", "rbf", "sigmoid"))
GAMMA = ParamRange("gamma", float, 1.0, lower=0.0, strict_lower=True, search=(1e-3, 1e3), log=True)
SIGMA = ParamRange("sigma", float, 1.0, lower=0.0, strict_lower=True, search=(1e-2, 1e2), log=True)
DEGREE = ParamRange("degree", int, 3, lower=1, search=(1, 5))
COEF0 = ParamRange("coef0", float, 1.0, search=(0.0, 5.0))
SLOPE = ParamRange("slope", float, 1.0, lower=0.0, strict_lower=True, search=(1e-3, 10.0), log=True)

TOL = ParamRange("tol", float, 1e-6, lower=0.0, strict_lower=True, tunable=False)
MAX_ITER = ParamRange("max_iter", int, 1000, lower=1, tunable=False)
METHOD = ParamRange("method", str, "minres", choices=("minres", "cg"), tunable=False)
STRATEGY = ParamRange("strategy", str, "ovo", choices=("ovo", "ovr"), tunable=False)
N_JOBS = ParamRange("n_jobs", int, 1, lower=-1, tunable=False)

# kernel name -> estimator params it reads
KERNEL_PARAMS: Dict[str, Tuple[str, ...]] = {
	"linear": (),
	"poly": ("degree", "coef0"),
	"rbf": ("sigma",),
	"sigmoid": ("slope", "coef0"),
}


def by_name(ranges: List[ParamRange]) -> Dict[str, ParamRange]:
	return {r.name: r for r in ranges}
