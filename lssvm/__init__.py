#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from lssvm.errors import (LSSVMError, InvalidParameter, DimensionMismatch, InvalidInput,
						  NotFitted, NonConvergence)
from lssvm.kernels import (LinearKernel, PolynomialKernel, RBFKernel, SigmoidKernel,
						   make_kernel, evaluate, gram_matrix, kernel_matrix)
from lssvm.binary import BinaryModel
from lssvm.LSSVC import LSSVC
from lssvm.LSSVR import LSSVR
from lssvm.hyperparams import ParamRange
from lssvm.persistence import save_model, load_model

__version__ = "0.1.0"
