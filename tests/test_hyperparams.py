#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import optuna
import pytest

from lssvm.errors import InvalidParameter
from lssvm.hyperparams import GAMMA, SIGMA, DEGREE, KERNEL, COEF0, STRATEGY, KERNEL_PARAMS, by_name
from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR


def test_validate_positive_ranges():
	assert GAMMA.validate(2) == 2.0
	assert isinstance(GAMMA.validate(2), float)
	for bad in (0, 0.0, -1.0, float("inf"), "1.0", True):
		with pytest.raises(InvalidParameter):
			GAMMA.validate(bad)
	with pytest.raises(InvalidParameter):
		SIGMA.validate(0.0)


def test_validate_integer_and_choices():
	assert DEGREE.validate(3.0) == 3
	with pytest.raises(InvalidParameter):
		DEGREE.validate(2.5)
	with pytest.raises(InvalidParameter):
		DEGREE.validate(0)
	assert KERNEL.validate("rbf") == "rbf"
	with pytest.raises(InvalidParameter):
		KERNEL.validate("laplace")
	# no validity bound: any finite real
	assert COEF0.validate(-2.0) == -2.0


def test_grid():
	grid = GAMMA.grid(7)
	assert grid[0] == pytest.approx(1e-3)
	assert grid[-1] == pytest.approx(1e3)
	assert grid[3] == pytest.approx(1.0)
	assert DEGREE.grid(5) == [1, 2, 3, 4, 5]
	assert KERNEL.grid() == ["linear", "poly", "rbf", "sigmoid"]


def test_suggest_with_an_optuna_trial():
	trial = optuna.trial.FixedTrial({"gamma": 3.0, "degree": 2, "kernel": "poly"})
	assert GAMMA.suggest(trial) == 3.0
	assert DEGREE.suggest(trial) == 2
	assert KERNEL.suggest(trial) == "poly"


def test_every_kernel_param_is_declared():
	declared = by_name(LSSVR.hyperparameters())
	for params in KERNEL_PARAMS.values():
		for name in params:
			assert name in declared


@pytest.mark.parametrize("value", [np.array(["rbf", "linear"]), np.array(["rbf"]), ["rbf"], {"rbf": 1}])
def test_choices_reject_unhashable_values(value):
	with pytest.raises(InvalidParameter):
		KERNEL.validate(value)
	with pytest.raises(InvalidParameter):
		STRATEGY.validate(value)
	with pytest.raises(InvalidParameter):
		LSSVC(kernel=value)
