#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from lssvm.base import LSSVMBase
from lssvm.binary import BinaryModel
from lssvm.errors import NotFitted
from lssvm.kernels import Kernel


class LSSVR(LSSVMBase):
	"""
	Least Squares Support Vector Regression.

	Unlike ε-SVR there is no insensitive tube: every residual is penalized
	quadratically, which turns training into the linear system

		[ 0      1ᵗ   ] [ b ]   [ 0 ]
		[ 1   Ω+γ⁻¹I ] [ α ] = [ y ]

	solved once (see `lssvm.solver.solve`). With a linear kernel this is ridge
	regression with an unpenalized intercept and penalty 1/γ.

	Parameters
	----------
	Same as `lssvm.LSSVC.LSSVC`, without `strategy` and `n_jobs`.

	Attributes
	----------
	model_ : BinaryModel
		The fitted LS-SVM (training samples, α, b).
	typ : str
		'r' indicating a regression task.
	"""

	typ = 'r'

	def __init__(self,
				 kernel: str | Kernel = "rbf",
				 gamma: float = 1.0,
				 sigma: float = 1.0,
				 degree: int = 3,
				 coef0: float = 1.0,
				 slope: float = 1.0,
				 tol: float = 1e-6,
				 max_iter: int = 1000,
				 method: str = "minres"):
		self.set_params(kernel=kernel, gamma=gamma, sigma=sigma, degree=degree, coef0=coef0,
						slope=slope, tol=tol, max_iter=max_iter, method=method)
		self.model_: BinaryModel | None = None

	def fit(self, X: np.ndarray, y: np.ndarray) -> "LSSVR":
		model = BinaryModel(kernel=self.kernel_, gamma=self.gamma, **self._solver_kwargs())
		self.model_ = model.fit(X, y)
		return self

	@property
	def n_features_in_(self) -> int:
		if self.model_ is None:
			raise NotFitted()
		return self.model_.n_features_in_

	def predict(self, X: np.ndarray) -> np.ndarray:
		if self.model_ is None:
			raise NotFitted()
		return self.model_.decision_function(X)
