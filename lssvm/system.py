#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import math
import numpy as np
from typing import Tuple

from lssvm.errors import InvalidParameter, DimensionMismatch, InvalidInput


def check_gamma(gamma) -> float:
	gamma = float(gamma)
	if not math.isfinite(gamma) or gamma <= 0.0:
		raise InvalidParameter(f"gamma must be > 0, got {gamma}")
	return gamma


def build_system(omega: np.ndarray, y: np.ndarray, gamma: float) -> Tuple[np.ndarray, np.ndarray]:
	"""
	Assemble the augmented LS-SVM dual system.

		[ 0      1ᵗ   ] [ b ]   [ 0 ]
		[ 1   Ω+γ⁻¹I ] [ α ] = [ y ]

	The unknown vector is laid out as [b, α₁, …, α_N].
	The matrix is symmetric but indefinite (zero corner).
	"""
	gamma = check_gamma(gamma)
	omega = np.asarray(omega, dtype=float)
	y = np.asarray(y, dtype=float).reshape(-1)

	if omega.ndim != 2 or omega.shape[0] != omega.shape[1]:
		raise DimensionMismatch(f"kernel matrix must be square, got shape {omega.shape}")
	n = omega.shape[0]
	if n != y.size:
		raise DimensionMismatch(f"kernel matrix is {n}x{n} but there are {y.size} targets")
	if n == 0:
		raise InvalidInput("cannot build a system from an empty dataset")

	A = np.empty((n + 1, n + 1), dtype=float)
	A[0, 0] = 0.0
	A[0, 1:] = 1.0
	A[1:, 0] = 1.0
	A[1:, 1:] = omega
	A[1:, 1:] += np.eye(n) / gamma

	rhs = np.concatenate(([0.0], y))
	return A, rhs
