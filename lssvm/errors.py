#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #


class LSSVMError(Exception):
	"""Base class of every error raised by the LS-SVM core."""


class InvalidParameter(LSSVMError, ValueError):
	"""Non-positive regularization constant or kernel parameter."""


class DimensionMismatch(LSSVMError, ValueError):
	"""Feature/label length or feature dimension inconsistency."""


class InvalidInput(LSSVMError, ValueError):
	"""Empty dataset, fewer than two classes or an unreadable model record."""


class NotFitted(LSSVMError, RuntimeError):
	"""Prediction requested before a successful fit."""

	def __init__(self, msg: str = "The model isn't trained, call `fit` first"):
		super().__init__(msg)


class NonConvergence(LSSVMError, RuntimeError):
	"""
	The iterative solver stopped without meeting its tolerance.

	Recoverable: the caller may retry with a relaxed `tol` or a larger `max_iter`.
	"""

	def __init__(self, msg: str, n_iter: int, residual: float):
		super().__init__(f"{msg} (iterations={n_iter}, residual={residual:.3e})")
		self.n_iter = n_iter
		self.residual = residual
