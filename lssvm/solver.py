#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import math
import numpy as np
from typing import NamedTuple
from scipy.sparse.linalg import minres, cg

from lssvm.errors import InvalidParameter, NonConvergence

log = logging.getLogger(__name__)

DEFAULT_TOL = 1e-6
DEFAULT_MAX_ITER = 1000
METHODS = ("minres", "cg")
_EPS = float(np.finfo(float).eps)


class DualSolution(NamedTuple):
	alpha: np.ndarray
	b: float
	n_iter: int
	residual: float


def check_solver_settings(tol, max_iter, method: str) -> tuple[float, int, str]:
	tol = float(tol)
	if not math.isfinite(tol) or tol <= 0.0:
		raise InvalidParameter(f"tol must be > 0, got {tol}")
	if isinstance(max_iter, bool) or int(max_iter) != max_iter or max_iter < 1:
		raise InvalidParameter(f"max_iter must be a positive integer, got {max_iter}")
	if method not in METHODS:
		raise InvalidParameter(f"unknown solver method {method!r}, expected one of {METHODS}")
	return tol, int(max_iter), method


def _relative_residual(A: np.ndarray, x: np.ndarray, rhs: np.ndarray) -> float:
	r = float(np.linalg.norm(A @ x - rhs))
	scale = float(np.linalg.norm(rhs))
	return r / scale if scale > 0.0 else r


def _minres(A: np.ndarray, rhs: np.ndarray, tol: float, max_iter: int, x0: np.ndarray):
	count = [0]

	def _cb(_xk):
		count[0] += 1

	x, info = minres(A, rhs, x0=x0, rtol=tol, maxiter=max_iter, callback=_cb)
	if info != 0:
		raise NonConvergence("MINRES reached its iteration cap", count[0], _relative_residual(A, x, rhs))
	return x, count[0]


def _cg_block(H: np.ndarray, v: np.ndarray, tol: float, max_iter: int):
	count = [0]

	def _cb(_xk):
		count[0] += 1

	x, info = cg(H, v, x0=np.zeros_like(v), rtol=tol, maxiter=max_iter, callback=_cb)
	if info > 0:
		raise NonConvergence("CG reached its iteration cap", count[0], _relative_residual(H, x, v))
	if info < 0:
		raise NonConvergence("CG broke down (is the kernel positive semidefinite?)", count[0], _relative_residual(H, x, v))
	return x, count[0]


def _schur_cg(A: np.ndarray, rhs: np.ndarray, tol: float, max_iter: int, x0: np.ndarray):
	# H = Ω + γ⁻¹I is positive definite for PSD kernels: solve Hη = y and Hν = 1,
	# then eliminate b through the constraint 1ᵀα = 0.
	H = A[1:, 1:]
	y = rhs[1:]
	eta, it_eta = _cg_block(H, y, tol, max_iter)
	nu, it_nu = _cg_block(H, np.ones_like(y), tol, max_iter)
	s = float(nu.sum())
	if s == 0.0 or not math.isfinite(s):
		raise NonConvergence("CG Schur complement is singular", it_eta + it_nu, float("nan"))
	b = float(eta.sum()) / s
	alpha = eta - b * nu
	return np.concatenate(([b], alpha)), it_eta + it_nu


# Krylov runs allowed per solve: the first one plus tightened reruns
MAX_RUNS = 8
_METHOD_FUNCS = {"minres": _minres, "cg": _schur_cg}


def solve(A: np.ndarray, rhs: np.ndarray, tol: float = DEFAULT_TOL,
		  max_iter: int = DEFAULT_MAX_ITER, method: str = "minres") -> DualSolution:
	"""
	Solve the augmented LS-SVM system for (α, b).

	Parameters
	----------
	A, rhs :
		Output of `lssvm.system.build_system`; unknowns are ordered [b, α].
	tol : float
		Bound on the relative residual ‖A x − rhs‖ / ‖rhs‖ of the returned solution.
	max_iter : int
		Iteration budget shared by all Krylov runs of this solve. Exhausting it
		raises `NonConvergence`.
	method : {"minres", "cg"}
		"minres" runs MINRES on the whole symmetric indefinite system.
		"cg" runs two conjugate-gradient solves on the positive definite block
		Ω+γ⁻¹I and recovers b from the Schur complement; it requires a positive
		semidefinite kernel.

	Notes
	-----
	SciPy's stopping tests are not the relative residual (MINRES uses a
	backward-error ratio and may also stop on a conditioning estimate), so the
	true residual is checked after every run. While it is above `tol` the run is
	repeated with a tighter inner tolerance, MINRES warm started from the last
	iterate, until `tol` is met, the budget is spent, or `MAX_RUNS` runs did not
	get there; the last two raise `NonConvergence`.

	The first start vector is always zero and nothing is randomized, so identical
	inputs give identical (α, b).
	"""
	tol, max_iter, method = check_solver_settings(tol, max_iter, method)
	A = np.asarray(A, dtype=float)
	rhs = np.asarray(rhs, dtype=float).reshape(-1)
	run = _METHOD_FUNCS[method]

	x = np.zeros_like(rhs)
	inner_tol = tol
	n_iter = 0
	for k in range(MAX_RUNS):
		x, used = run(A, rhs, inner_tol, max_iter - n_iter, x)
		n_iter += used
		residual = _relative_residual(A, x, rhs)
		log.debug(f"{method} run {k}: n={rhs.size - 1} iterations={n_iter} residual={residual:.3e}")
		if residual <= tol:
			return DualSolution(alpha=x[1:].copy(), b=float(x[0]), n_iter=n_iter, residual=residual)
		if n_iter >= max_iter:
			raise NonConvergence(f"{method} used its iteration budget above tol={tol:.1e}", n_iter, residual)
		inner_tol = max(inner_tol * 0.1 * tol / residual, _EPS)

	raise NonConvergence(f"{method} did not reach tol={tol:.1e} in {MAX_RUNS} runs", n_iter, residual)
