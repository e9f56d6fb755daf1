#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Kernel functions for the LS-SVM.

Every kernel is an immutable (frozen) dataclass; parameters are validated once at
construction and a bad value raises `InvalidParameter` instead of being clamped.

	Linear      k(a, b) = a·b
	Polynomial  k(a, b) = (a·b + bias)^degree
	RBF         k(a, b) = exp(-‖a - b‖² / (2σ²))
	Sigmoid     k(a, b) = tanh(slope · a·b + offset)

Nothing is cached between calls: two concurrent fits never share kernel values.
"""
import math
import numpy as np
from dataclasses import dataclass, asdict
from typing import ClassVar, Dict, Union
from scipy.spatial.distance import cdist

from lssvm.errors import InvalidParameter, DimensionMismatch


def _positive(name: str, value) -> float:
	value = float(value)
	if not math.isfinite(value) or value <= 0.0:
		raise InvalidParameter(f"{name} must be > 0, got {value}")
	return value


@dataclass(frozen=True)
class LinearKernel:
	name: ClassVar[str] = "linear"

	def scalar(self, a: np.ndarray, b: np.ndarray) -> float:
		return float(np.dot(a, b))

	def matrix(self, A: np.ndarray, B: np.ndarray) -> np.ndarray:
		return A @ B.T


@dataclass(frozen=True)
class PolynomialKernel:
	degree: int = 3
	bias: float = 1.0
	name: ClassVar[str] = "poly"

	def __post_init__(self):
		d = self.degree
		if isinstance(d, bool) or not float(d).is_integer() or d < 1:
			raise InvalidParameter(f"degree must be a positive integer, got {d}")
		bias = float(self.bias)
		if not math.isfinite(bias) or bias < 0.0:
			raise InvalidParameter(f"bias must be >= 0, got {bias}")
		object.__setattr__(self, "degree", int(d))
		object.__setattr__(self, "bias", bias)

	def scalar(self, a: np.ndarray, b: np.ndarray) -> float:
		return float((np.dot(a, b) + self.bias) ** self.degree)

	def matrix(self, A: np.ndarray, B: np.ndarray) -> np.ndarray:
		return (A @ B.T + self.bias) ** self.degree


@dataclass(frozen=True)
class RBFKernel:
	sigma: float = 1.0
	name: ClassVar[str] = "rbf"

	def __post_init__(self):
		object.__setattr__(self, "sigma", _positive("sigma", self.sigma))

	def scalar(self, a: np.ndarray, b: np.ndarray) -> float:
		diff = a - b
		return float(np.exp(-np.dot(diff, diff) / (2.0 * self.sigma ** 2)))

	def matrix(self, A: np.ndarray, B: np.ndarray) -> np.ndarray:
		# cdist works on the difference directly: the distance of a row to itself is exactly 0
		sq = cdist(A, B, "sqeuclidean")
		return np.exp(-sq / (2.0 * self.sigma ** 2))


@dataclass(frozen=True)
class SigmoidKernel:
	slope: float = 1.0
	offset: float = 0.0
	name: ClassVar[str] = "sigmoid"

	def __post_init__(self):
		object.__setattr__(self, "slope", _positive("slope", self.slope))
		offset = float(self.offset)
		if not math.isfinite(offset):
			raise InvalidParameter(f"offset must be finite, got {offset}")
		object.__setattr__(self, "offset", offset)

	def scalar(self, a: np.ndarray, b: np.ndarray) -> float:
		return float(np.tanh(self.slope * np.dot(a, b) + self.offset))

	def matrix(self, A: np.ndarray, B: np.ndarray) -> np.ndarray:
		return np.tanh(self.slope * (A @ B.T) + self.offset)


Kernel = Union[LinearKernel, PolynomialKernel, RBFKernel, SigmoidKernel]

KERNELS: Dict[str, type] = {
	k.name: k for k in (LinearKernel, PolynomialKernel, RBFKernel, SigmoidKernel)
}


def make_kernel(name: str, **params) -> Kernel:
	"""Build a kernel from its name ("linear", "poly", "rbf", "sigmoid") and fields."""
	cls = KERNELS.get(name)
	if cls is None:
		raise InvalidParameter(f"unknown kernel {name!r}, expected one of {sorted(KERNELS)}")
	try:
		return cls(**params)
	except TypeError as e:
		raise InvalidParameter(f"bad parameters for kernel {name!r}: {e}") from e


def kernel_to_dict(kernel: Kernel) -> dict:
	return {"name": kernel.name, **asdict(kernel)}


def as_matrix(X, name: str = "X") -> np.ndarray:
	X = np.asarray(X, dtype=float)
	if X.ndim == 1:
		X = X.reshape(-1, 1)
	if X.ndim != 2:
		raise DimensionMismatch(f"{name} must be 2-D (samples x features), got shape {X.shape}")
	return X


def evaluate(kernel: Kernel, a, b) -> float:
	a = np.asarray(a, dtype=float).reshape(-1)
	b = np.asarray(b, dtype=float).reshape(-1)
	if a.size == 0 or a.size != b.size:
		raise DimensionMismatch(f"kernel arguments must have equal positive length, got {a.size} and {b.size}")
	return kernel.scalar(a, b)


def gram_matrix(kernel: Kernel, X) -> np.ndarray:
	"""N x N kernel matrix of X against itself, symmetric by construction."""
	X = as_matrix(X)
	if X.shape[1] == 0:
		raise DimensionMismatch("samples must have at least one feature")
	K = kernel.matrix(X, X)
	# mirror the upper triangle so rounding in the matrix product can't break symmetry
	upper = np.triu(K)
	return upper + np.triu(K, 1).T


def kernel_matrix(kernel: Kernel, A, B) -> np.ndarray:
	"""len(A) x len(B) cross kernel matrix."""
	A = as_matrix(A, "A")
	B = as_matrix(B, "B")
	if A.shape[1] != B.shape[1]:
		raise DimensionMismatch(f"feature dimension mismatch: {A.shape[1]} vs {B.shape[1]}")
	return kernel.matrix(A, B)
