#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest

from lssvm import api
from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR
from lssvm.binary import BinaryModel
from lssvm.errors import InvalidParameter, NotFitted
from lssvm.kernels import RBFKernel


def test_fit_predict_entry_points(three_blobs, linear_data):
	X, y = three_blobs
	clf = api.fit(X, y, kernel="rbf", gamma=10.0)
	assert isinstance(clf, LSSVC)
	assert np.mean(api.predict(clf, X) == y) > 0.9

	X, y = linear_data
	reg = api.fit(X, y, kernel="linear", gamma=1e4, task="regression")
	assert isinstance(reg, LSSVR)
	assert np.mean((api.predict(reg, X) - y) ** 2) < 1e-3


def test_options_are_forwarded(two_blobs):
	X, y = two_blobs
	clf = api.fit(X, y, kernel=RBFKernel(sigma=2.0), gamma=1.0, method="cg", tol=1e-8)
	assert clf.method == "cg"
	assert clf.estimators_[0].method == "cg"


def test_unknown_task(two_blobs):
	X, y = two_blobs
	with pytest.raises(InvalidParameter):
		api.fit(X, y, task="ranking")


def test_models_satisfy_the_capability_contract():
	assert isinstance(LSSVC(), api.Model)
	assert isinstance(LSSVR(), api.Model)
	assert isinstance(BinaryModel(), api.Model)


def test_predict_on_unfitted_model():
	with pytest.raises(NotFitted):
		api.predict(LSSVR(), np.zeros((1, 2)))
