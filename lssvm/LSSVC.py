#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np
from typing import Any, Dict, List
from concurrent.futures import ThreadPoolExecutor, as_completed

from lssvm.base import LSSVMBase
from lssvm.binary import BinaryModel
from lssvm.errors import InvalidParameter, InvalidInput, DimensionMismatch, NotFitted
from lssvm.hyperparams import STRATEGY, N_JOBS
from lssvm.kernels import Kernel, as_matrix
from lssvm.multiclass import Subproblem, first_max, get_strategy

log = logging.getLogger(__name__)


def _fit_subproblem(X: np.ndarray, sp: Subproblem, kernel: Kernel, gamma: float,
					solver: Dict[str, Any]) -> BinaryModel:
	"""
	Train the binary model of one subproblem. Reads X only, writes nothing shared:
	safe to run on worker threads.
	"""
	model = BinaryModel(kernel=kernel, gamma=gamma, **solver)
	model.fit(X[sp.rows], sp.targets)
	log.debug(f"subproblem {sp.classes}: {sp.rows.size} samples, {model.n_iter_} solver iterations")
	return model


class LSSVC(LSSVMBase):
	"""
	Least Squares Support Vector Classifier (binary and multiclass).

	Each binary problem is an LS-SVM: its dual coefficients come from a single
	regularized linear system (see `lssvm.binary.BinaryModel`) instead of the
	quadratic program of a standard SVM.

	Principle
	---------
	Classes are put in canonical order `classes_ = np.unique(y)`.
	  - 2 classes: one binary model, classes_[0] -> +1, classes_[1] -> -1.
	  - K > 2 classes, strategy "ovo" (default): one binary model per unordered
	    pair (c_i, c_j), i < j, trained only on the samples of c_i and c_j, with
	    c_i -> +1 and c_j -> -1. At prediction time each of the K(K-1)/2 models
	    votes (decision >= 0 votes c_i) and the class with the most votes wins.
	  - strategy "ovr": one model per class against all others, highest score wins.
	Ties go to the class with the smallest index in `classes_`.

	Parameters
	----------
	kernel : {"linear", "poly", "rbf", "sigmoid"} or kernel instance
		Kernel function.
	gamma : float
		Regularization constant γ > 0.
	sigma : float
		RBF bandwidth σ > 0.
	degree : int
		Polynomial degree (>= 1).
	coef0 : float
		Polynomial bias (>= 0) or sigmoid offset.
	slope : float
		Sigmoid slope (> 0).
	tol : float
		Solver relative residual tolerance.
	max_iter : int
		Solver iteration cap; reaching it raises `NonConvergence`.
	method : {"minres", "cg"}
		Krylov solver, see `lssvm.solver.solve`.
	strategy : {"ovo", "ovr"}
		Multiclass decomposition.
	n_jobs : int
		Number of worker threads for training the subproblems.
		1 trains sequentially, -1 uses as many threads as the executor allows.

	Notes
	-----
	Subproblems share nothing but read access to X, so they are trained
	independently; results are stored by subproblem slot, never by completion
	order, so sequential and threaded training give the same model.

	Attributes
	----------
	classes_ : np.ndarray
		Class labels in canonical (sorted) order.
	estimators_ : list of BinaryModel
		One fitted model per subproblem.
	subproblems_ : list of Subproblem
		Class indices and training rows of each model.
	typ : str
		'c' indicating a classification task.
	"""

	typ = 'c'
	_param_ranges = LSSVMBase._param_ranges + [STRATEGY, N_JOBS]

	def __init__(self,
				 kernel: str | Kernel = "rbf",
				 gamma: float = 1.0,
				 sigma: float = 1.0,
				 degree: int = 3,
				 coef0: float = 1.0,
				 slope: float = 1.0,
				 tol: float = 1e-6,
				 max_iter: int = 1000,
				 method: str = "minres",
				 strategy: str = "ovo",
				 n_jobs: int = 1):
		self.set_params(kernel=kernel, gamma=gamma, sigma=sigma, degree=degree, coef0=coef0,
						slope=slope, tol=tol, max_iter=max_iter, method=method,
						strategy=strategy, n_jobs=n_jobs)

		# learned
		self.classes_: np.ndarray | None = None
		self.strategy_ = None
		self.estimators_: List[BinaryModel] = []
		self.subproblems_: List[Subproblem] = []
		self.n_features_in_: int | None = None

	def _check_params(self, params: Dict[str, Any]) -> None:
		if params["n_jobs"] == 0:
			raise InvalidParameter("n_jobs must be a positive integer or -1, got 0")

	@property
	def n_models_(self) -> int:
		return len(self.estimators_)

	def fit(self, X: np.ndarray, y: np.ndarray) -> "LSSVC":
		X = as_matrix(X)
		y = np.asarray(y).reshape(-1)
		n = X.shape[0]
		if n == 0:
			raise InvalidInput("cannot fit on an empty dataset")
		if y.size != n:
			raise DimensionMismatch(f"{n} samples but {y.size} labels")

		classes, y_idx = np.unique(y, return_inverse=True)
		y_idx = y_idx.reshape(-1)
		if len(classes) < 2:
			raise InvalidInput(f"need at least 2 distinct classes, got {len(classes)}")

		strategy = get_strategy(self.strategy)
		subproblems = strategy.subproblems(y_idx, len(classes))
		solver = self._solver_kwargs()
		estimators: List[BinaryModel | None] = [None] * len(subproblems)

		log.debug(f"LSSVC fit: n={n} d={X.shape[1]} classes={len(classes)} strategy={strategy.name} models={len(subproblems)}")
		if self.n_jobs == 1 or len(subproblems) == 1:
			for slot, sp in enumerate(subproblems):
				estimators[slot] = _fit_subproblem(X, sp, self.kernel_, self.gamma, solver)
		else:
			with ThreadPoolExecutor(max_workers=None if self.n_jobs < 0 else self.n_jobs) as ex:
				futures = {ex.submit(_fit_subproblem, X, sp, self.kernel_, self.gamma, solver): slot
						   for slot, sp in enumerate(subproblems)}
				for fut in as_completed(futures):
					estimators[futures[fut]] = fut.result()

		self.classes_ = classes
		self.strategy_ = strategy
		self.subproblems_ = subproblems
		self.estimators_ = estimators
		self.n_features_in_ = X.shape[1]
		return self

	def _decisions(self, X: np.ndarray) -> np.ndarray:
		if self.classes_ is None:
			raise NotFitted()
		return np.vstack([est.decision_function(X) for est in self.estimators_])

	def _scores(self, X: np.ndarray) -> np.ndarray:
		decisions = self._decisions(X)
		return self.strategy_.combine(decisions, self.subproblems_, len(self.classes_))

	def decision_function(self, X: np.ndarray) -> np.ndarray:
		"""
		Two classes: raw LS-SVM score, positive values favour classes_[1].
		More classes: (n_samples, n_classes) table of votes ("ovo") or scores ("ovr").
		"""
		if self.classes_ is not None and len(self.classes_) == 2:
			return -self._decisions(X)[0]
		return self._scores(X)

	def predict(self, X: np.ndarray) -> np.ndarray:
		scores = self._scores(X)
		return self.classes_[first_max(scores)]
