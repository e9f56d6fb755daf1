#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest


def blobs(centers, n_per_class: int = 20, scale: float = 0.4, seed: int = 0, labels=None):
	rng = np.random.default_rng(seed)
	X = np.vstack([rng.normal(loc=c, scale=scale, size=(n_per_class, len(c))) for c in centers])
	labels = list(range(len(centers))) if labels is None else labels
	y = np.repeat(np.asarray(labels), n_per_class)
	return X, y


@pytest.fixture
def two_blobs():
	return blobs([(-2.0, -2.0), (2.0, 2.0)], labels=["neg", "pos"])


@pytest.fixture
def three_blobs():
	return blobs([(-3.0, 0.0), (3.0, 0.0), (0.0, 4.0)], labels=["a", "b", "c"])


@pytest.fixture
def four_blobs():
	return blobs([(-3.0, -3.0), (3.0, -3.0), (-3.0, 3.0), (3.0, 3.0)])


@pytest.fixture
def linear_data():
	# noiseless y = 3 x1 - 2 x2
	rng = np.random.default_rng(1)
	X = rng.normal(size=(50, 2))
	y = 3.0 * X[:, 0] - 2.0 * X[:, 1]
	return X, y
