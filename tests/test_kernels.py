#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest

from lssvm.errors import InvalidParameter, DimensionMismatch
from lssvm.kernels import (LinearKernel, PolynomialKernel, RBFKernel, SigmoidKernel,
						   make_kernel, evaluate, gram_matrix, kernel_matrix, kernel_to_dict)

ALL_KERNELS = [LinearKernel(), PolynomialKernel(degree=3, bias=1.0), RBFKernel(sigma=0.7),
			   SigmoidKernel(slope=0.3, offset=-0.5)]


@pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
def test_evaluate_is_symmetric(kernel):
	rng = np.random.default_rng(3)
	for _ in range(20):
		a, b = rng.normal(size=(2, 5))
		assert evaluate(kernel, a, b) == evaluate(kernel, b, a)


def test_kernel_values():
	a = np.array([1.0, 2.0])
	b = np.array([3.0, -1.0])
	assert evaluate(LinearKernel(), a, b) == pytest.approx(1.0)
	assert evaluate(PolynomialKernel(degree=2, bias=1.0), a, b) == pytest.approx(4.0)
	assert evaluate(RBFKernel(sigma=1.0), a, b) == pytest.approx(np.exp(-13.0 / 2.0))
	assert evaluate(SigmoidKernel(slope=0.5, offset=0.25), a, b) == pytest.approx(np.tanh(0.75))


def test_rbf_gram_is_symmetric_with_unit_diagonal():
	X = np.random.default_rng(0).normal(size=(30, 4))
	G = gram_matrix(RBFKernel(sigma=1.3), X)
	assert G.shape == (30, 30)
	assert np.array_equal(G, G.T)
	assert np.all(np.diag(G) == 1.0)


@pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
def test_gram_matches_pointwise_evaluation(kernel):
	X = np.random.default_rng(5).normal(size=(8, 3))
	G = gram_matrix(kernel, X)
	assert np.array_equal(G, G.T)
	expected = np.array([[evaluate(kernel, a, b) for b in X] for a in X])
	np.testing.assert_allclose(G, expected, rtol=1e-12, atol=1e-12)


def test_kernel_matrix_shape_and_mismatch():
	A = np.ones((4, 3))
	B = np.zeros((6, 3))
	assert kernel_matrix(LinearKernel(), A, B).shape == (4, 6)
	with pytest.raises(DimensionMismatch):
		kernel_matrix(LinearKernel(), A, np.zeros((6, 2)))


def test_one_dimensional_input_is_a_column():
	G = gram_matrix(LinearKernel(), [1.0, 2.0, 3.0])
	np.testing.assert_allclose(G, np.outer([1, 2, 3], [1, 2, 3]))


@pytest.mark.parametrize("a, b", [([1.0, 2.0], [1.0, 2.0, 3.0]), ([], [])])
def test_evaluate_rejects_bad_lengths(a, b):
	with pytest.raises(DimensionMismatch):
		evaluate(LinearKernel(), a, b)


@pytest.mark.parametrize("factory", [
	lambda: RBFKernel(sigma=0.0),
	lambda: RBFKernel(sigma=-1.0),
	lambda: RBFKernel(sigma=float("nan")),
	lambda: PolynomialKernel(degree=0),
	lambda: PolynomialKernel(degree=2.5),
	lambda: PolynomialKernel(degree=2, bias=-1.0),
	lambda: SigmoidKernel(slope=0.0),
])
def test_invalid_parameters_fail_at_construction(factory):
	with pytest.raises(InvalidParameter):
		factory()


def test_kernels_are_immutable():
	k = RBFKernel(sigma=2.0)
	with pytest.raises(AttributeError):
		k.sigma = 3.0


def test_make_kernel():
	assert make_kernel("rbf", sigma=2.0) == RBFKernel(sigma=2.0)
	assert make_kernel("poly", degree=2, bias=0.0) == PolynomialKernel(degree=2, bias=0.0)
	assert make_kernel("linear") == LinearKernel()
	with pytest.raises(InvalidParameter):
		make_kernel("laplace")
	with pytest.raises(InvalidParameter):
		make_kernel("rbf", bandwidth=1.0)


def test_kernel_to_dict():
	assert kernel_to_dict(PolynomialKernel(degree=2, bias=0.5)) == {"name": "poly", "degree": 2, "bias": 0.5}
	assert kernel_to_dict(LinearKernel()) == {"name": "linear"}
