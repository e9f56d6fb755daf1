#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Decomposition of a K-class problem into binary LS-SVM subproblems.

A strategy turns integer class indices (0..K-1, in canonical class order) into a
list of `Subproblem`s, and later combines the subproblem decision values back
into one (n_samples, K) score table. The predicted class is the first maximum of
that table, i.e. ties always go to the class with the smallest index.
"""
import numpy as np
from itertools import combinations
from typing import List, NamedTuple, Tuple

from lssvm.errors import InvalidParameter


class Subproblem(NamedTuple):
	classes: Tuple[int, ...]	# classes mapped to +1 (first) / -1 (rest)
	rows: np.ndarray			# indices of the training rows used
	targets: np.ndarray			# ±1 targets for those rows


def first_max(scores: np.ndarray) -> np.ndarray:
	"""Column index of the row maximum; among tied columns the smallest index wins."""
	scores = np.asarray(scores)
	best = scores.max(axis=1, keepdims=True)
	# argmax over a boolean table returns the first True
	return np.argmax(scores == best, axis=1)


def _pair_subproblem(y_idx: np.ndarray, i: int, j: int) -> Subproblem:
	rows = np.flatnonzero((y_idx == i) | (y_idx == j))
	targets = np.where(y_idx[rows] == i, 1.0, -1.0)
	return Subproblem((i, j), rows, targets)


def vote(decisions: np.ndarray, pairs: List[Tuple[int, int]], n_classes: int) -> np.ndarray:
	"""
	Count one-vs-one votes.

	decisions[m, s] is the decision value of pair model m on sample s; a value
	>= 0 is a vote for the pair's first (lower-index) class.
	"""
	decisions = np.atleast_2d(np.asarray(decisions, dtype=float))
	n_samples = decisions.shape[1]
	counts = np.zeros((n_samples, n_classes), dtype=np.int64)
	cols = np.arange(n_samples)
	for m, (i, j) in enumerate(pairs):
		winner = np.where(decisions[m] >= 0.0, i, j)
		np.add.at(counts, (cols, winner), 1)
	return counts


class OneVsOne:
	"""One model per unordered class pair (i < j), i -> +1, j -> -1, majority vote."""

	name = "ovo"

	@staticmethod
	def pairs(n_classes: int) -> List[Tuple[int, int]]:
		return list(combinations(range(n_classes), 2))

	def n_models(self, n_classes: int) -> int:
		return n_classes * (n_classes - 1) // 2

	def subproblems(self, y_idx: np.ndarray, n_classes: int) -> List[Subproblem]:
		return [_pair_subproblem(y_idx, i, j) for i, j in self.pairs(n_classes)]

	def combine(self, decisions: np.ndarray, subproblems: List[Subproblem], n_classes: int) -> np.ndarray:
		return vote(decisions, [sp.classes for sp in subproblems], n_classes)


class OneVsRest:
	"""
	One model per class (class -> +1, every other class -> -1); the class with
	the highest decision value wins. Two classes need a single model.
	"""

	name = "ovr"

	def n_models(self, n_classes: int) -> int:
		return 1 if n_classes == 2 else n_classes

	def subproblems(self, y_idx: np.ndarray, n_classes: int) -> List[Subproblem]:
		if n_classes == 2:
			return [_pair_subproblem(y_idx, 0, 1)]
		rows = np.arange(y_idx.size)
		return [Subproblem((c,), rows, np.where(y_idx == c, 1.0, -1.0)) for c in range(n_classes)]

	def combine(self, decisions: np.ndarray, subproblems: List[Subproblem], n_classes: int) -> np.ndarray:
		decisions = np.atleast_2d(np.asarray(decisions, dtype=float))
		if n_classes == 2:
			return np.column_stack([decisions[0], -decisions[0]])
		return decisions.T.copy()


STRATEGIES = {"ovo": OneVsOne, "ovr": OneVsRest}


def get_strategy(name: str):
	cls = STRATEGIES.get(name)
	if cls is None:
		raise InvalidParameter(f"unknown multiclass strategy {name!r}, expected one of {sorted(STRATEGIES)}")
	return cls()
