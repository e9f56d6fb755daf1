#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from typing import Any, Dict, List

from lssvm.errors import InvalidParameter
from lssvm.hyperparams import (ParamRange, KERNEL, GAMMA, SIGMA, DEGREE, COEF0, SLOPE,
							   TOL, MAX_ITER, METHOD, KERNEL_PARAMS, by_name)
from lssvm.kernels import KERNELS, Kernel, make_kernel


def _kernel_from_params(p: Dict[str, Any]) -> Kernel:
	kernel = p["kernel"]
	if isinstance(kernel, tuple(KERNELS.values())):
		return kernel
	# coef0 is the polynomial bias or the sigmoid offset
	if kernel == "poly":
		fields = {"degree": p["degree"], "bias": p["coef0"]}
	elif kernel == "sigmoid":
		fields = {"slope": p["slope"], "offset": p["coef0"]}
	else:
		fields = {name: p[name] for name in KERNEL_PARAMS[kernel]}
	return make_kernel(kernel, **fields)


class LSSVMBase:
	"""
	Hyperparameter handling shared by LSSVC and LSSVR.

	Parameters are flat (kernel name + every kernel's parameters) so that YAML
	files, Optuna and scikit-learn style `set_params` can drive them; the kernel
	spec actually used is built from them and exposed as `kernel_`.
	`kernel` may also be a ready-made kernel instance from `lssvm.kernels`, in
	which case sigma/degree/coef0/slope are ignored.
	"""

	_param_ranges: List[ParamRange] = [KERNEL, GAMMA, SIGMA, DEGREE, COEF0, SLOPE, TOL, MAX_ITER, METHOD]

	@classmethod
	def hyperparameters(cls) -> List[ParamRange]:
		return [r for r in cls._param_ranges if r.tunable]

	@classmethod
	def param_names(cls) -> List[str]:
		return [r.name for r in cls._param_ranges]

	def get_params(self, deep: bool = True) -> Dict[str, Any]:
		return {name: getattr(self, name) for name in self.param_names()}

	def set_params(self, **params) -> "LSSVMBase":
		ranges = by_name(self._param_ranges)
		unknown = sorted(set(params) - set(ranges))
		if unknown:
			raise InvalidParameter(f"unknown parameters for {type(self).__name__}: {unknown}")

		merged = {name: getattr(self, name, ranges[name].default) for name in ranges}
		for name, value in params.items():
			if name == "kernel" and isinstance(value, tuple(KERNELS.values())):
				merged[name] = value
			else:
				merged[name] = ranges[name].validate(value)
		self._check_params(merged)
		kernel_spec = _kernel_from_params(merged)

		for name, value in merged.items():
			setattr(self, name, value)
		self.kernel_ = kernel_spec
		return self

	def _check_params(self, params: Dict[str, Any]) -> None:
		pass

	def _solver_kwargs(self) -> Dict[str, Any]:
		return {"tol": self.tol, "max_iter": self.max_iter, "method": self.method}

	def __repr__(self) -> str:
		args = ", ".join(f"{k}={v!r}" for k, v in self.get_params().items())
		return f"{type(self).__name__}({args})"
