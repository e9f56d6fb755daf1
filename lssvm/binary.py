#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np

from lssvm.errors import DimensionMismatch, InvalidInput, NotFitted
from lssvm.kernels import Kernel, RBFKernel, as_matrix, gram_matrix, kernel_matrix
from lssvm.system import build_system, check_gamma
from lssvm.solver import DEFAULT_TOL, DEFAULT_MAX_ITER, check_solver_settings, solve

log = logging.getLogger(__name__)


class BinaryModel:
	"""
	One LS-SVM problem: binary classification on ±1 targets, or regression.

	Principle
	---------
	Training solves the dual system

		[ 0      1ᵗ   ] [ b ]   [ 0 ]
		[ 1   Ω+γ⁻¹I ] [ α ] = [ y ]

	with Ω the Gram matrix of the training samples. The model is not sparse:
	every training sample keeps a (generally nonzero) α and acts as a support
	vector, so the whole training matrix is retained for prediction.

	Decision function:
		f(q) = Σ_i α_i · k(x_i, q) + b
	For classification the sign of f gives the ±1 label, for regression f is
	the prediction.

	Parameters
	----------
	kernel : Kernel
		Kernel spec from `lssvm.kernels`.
	gamma : float
		Regularization constant γ > 0. Large values fit the data more tightly.
	tol, max_iter, method :
		Solver settings, see `lssvm.solver.solve`.

	Attributes
	----------
	support_vectors_ : np.ndarray
		Training samples (N x D).
	alpha_ : np.ndarray
		Dual coefficients (N,).
	b_ : float
		Bias.
	n_iter_ : int
		Solver iterations used by the last fit.
	"""

	def __init__(self, kernel: Kernel | None = None, gamma: float = 1.0,
				 tol: float = DEFAULT_TOL, max_iter: int = DEFAULT_MAX_ITER,
				 method: str = "minres"):
		self.kernel = RBFKernel() if kernel is None else kernel
		self.gamma = check_gamma(gamma)
		self.tol, self.max_iter, self.method = check_solver_settings(tol, max_iter, method)

		self.support_vectors_: np.ndarray | None = None
		self.alpha_: np.ndarray | None = None
		self.b_: float = 0.0
		self.n_iter_: int = 0

	@property
	def is_fitted(self) -> bool:
		return self.alpha_ is not None

	@property
	def n_features_in_(self) -> int:
		if not self.is_fitted:
			raise NotFitted()
		return self.support_vectors_.shape[1]

	def fit(self, X: np.ndarray, y: np.ndarray) -> "BinaryModel":
		X = as_matrix(X)
		y = np.asarray(y, dtype=float).reshape(-1)
		n = X.shape[0]
		if n == 0:
			raise InvalidInput("cannot fit on an empty dataset")
		if y.size != n:
			raise DimensionMismatch(f"{n} samples but {y.size} targets")

		omega = gram_matrix(self.kernel, X)
		A, rhs = build_system(omega, y, self.gamma)
		sol = solve(A, rhs, tol=self.tol, max_iter=self.max_iter, method=self.method)

		# only store once everything succeeded: a failed fit keeps the previous state
		self.support_vectors_ = X.copy()
		self.alpha_ = sol.alpha
		self.b_ = sol.b
		self.n_iter_ = sol.n_iter
		log.debug(f"BinaryModel fitted: n={n} d={X.shape[1]} kernel={self.kernel} gamma={self.gamma} b={self.b_:.6g}")
		return self

	def decision_function(self, X: np.ndarray) -> np.ndarray:
		if not self.is_fitted:
			raise NotFitted()
		X = as_matrix(X)
		if X.shape[1] != self.support_vectors_.shape[1]:
			raise DimensionMismatch(
				f"model was trained on {self.support_vectors_.shape[1]} features, got {X.shape[1]}")
		K = kernel_matrix(self.kernel, self.support_vectors_, X)
		return self.alpha_ @ K + self.b_

	def predict(self, X: np.ndarray) -> np.ndarray:
		return self.decision_function(X)


def fit_binary(X: np.ndarray, y: np.ndarray, gamma: float, kernel: Kernel, **solver) -> BinaryModel:
	return BinaryModel(kernel=kernel, gamma=gamma, **solver).fit(X, y)


def predict(model: BinaryModel, X: np.ndarray) -> np.ndarray:
	return model.decision_function(X)
