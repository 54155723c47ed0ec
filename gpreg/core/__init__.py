# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpreg package.

This subpackage contains the regression engine: training-sample
containers, kernel matrix assembly and factorization, and the kriging
predictor.

Public API
----------
GaussianProcess : class
    Regression engine with a lazily rebuilt Cholesky factorization.
Sample, SampleSet : classes
    Training data containers.
"""

from .model import GaussianProcess
from .sampleset import Sample, SampleSet

__all__ = ["GaussianProcess", "Sample", "SampleSet"]
