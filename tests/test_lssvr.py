#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest

from lssvm.LSSVR import LSSVR
from lssvm.errors import InvalidParameter, DimensionMismatch, NotFitted, NonConvergence


def test_noiseless_linear_function_is_recovered(linear_data):
	X, y = linear_data
	model = LSSVR(kernel="linear", gamma=1e5).fit(X, y)
	assert np.mean((model.predict(X) - y) ** 2) < 1e-3

	X_new = np.random.default_rng(7).normal(size=(20, 2))
	y_new = 3.0 * X_new[:, 0] - 2.0 * X_new[:, 1]
	assert np.mean((model.predict(X_new) - y_new) ** 2) < 1e-3


def test_linear_kernel_matches_ridge_with_free_intercept(linear_data):
	X, y = linear_data
	y = y + 5.0
	gamma = 2.0
	model = LSSVR(kernel="linear", gamma=gamma, tol=1e-10).fit(X, y)

	# closed form: min ||y - Xw - b||² + (1/γ)||w||², b not penalized
	Xb = np.column_stack([np.ones(len(X)), X])
	P = np.eye(3) / gamma
	P[0, 0] = 0.0
	beta = np.linalg.solve(Xb.T @ Xb + P, Xb.T @ y)
	np.testing.assert_allclose(model.predict(X), Xb @ beta, atol=1e-6)


def test_rbf_regression_fits_a_sine():
	X = np.linspace(0, 2 * np.pi, 60).reshape(-1, 1)
	y = np.sin(X[:, 0])
	model = LSSVR(kernel="rbf", sigma=0.5, gamma=100.0).fit(X, y)
	assert np.mean((model.predict(X) - y) ** 2) < 1e-2


def test_regression_errors(linear_data):
	X, y = linear_data
	with pytest.raises(NotFitted):
		LSSVR().predict(X)
	with pytest.raises(InvalidParameter):
		LSSVR(gamma=0.0)
	with pytest.raises(InvalidParameter):
		LSSVR(sigma=0.0)
	with pytest.raises(InvalidParameter):
		LSSVR(strategy="ovo")
	with pytest.raises(DimensionMismatch):
		LSSVR().fit(X, y[:10])
	model = LSSVR().fit(X, y)
	with pytest.raises(DimensionMismatch):
		model.predict(np.zeros((2, 4)))


def test_non_convergence_is_reported(linear_data):
	X, y = linear_data
	model = LSSVR(kernel="rbf", max_iter=1, tol=1e-12)
	with pytest.raises(NonConvergence):
		model.fit(X, y)
	assert model.model_ is None
	# caller-side retry with a larger budget
	model.set_params(max_iter=1000, tol=1e-6)
	assert model.fit(X, y).model_ is not None
