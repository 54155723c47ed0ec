# gpreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for Gaussian process regression.

All covariance functions derive from `CovarianceFunction` and work on
log-hyperparameters.

Modules
-------
base
    Abstract covariance function (get / grad / log-hyperparameters).
squared_exponential
    CovSEiso, CovSEard.
matern
    Matérn 3/2 and 5/2 kernels.
rational_quadratic
    CovRQiso.
periodic
    CovPeriodic.
linear
    CovLinearard, CovLinearone.
noise
    CovNoise.
compound
    CovSum, CovProd.
factory
    Textual specifications to instances.
"""

from .base import CovarianceFunction
from .squared_exponential import CovSEiso, CovSEard
from .matern import matern32_kernel, matern52_kernel, CovMatern3iso, CovMatern5iso
from .rational_quadratic import CovRQiso
from .periodic import CovPeriodic
from .linear import CovLinearard, CovLinearone
from .noise import CovNoise
from .compound import CompoundCovarianceFunction, CovSum, CovProd
from .factory import create, list_kernels, register_kernel

__all__ = [
    "CovarianceFunction",
    "CompoundCovarianceFunction",
    # Atomic kernels
    "CovSEiso",
    "CovSEard",
    "CovMatern3iso",
    "CovMatern5iso",
    "CovRQiso",
    "CovPeriodic",
    "CovLinearard",
    "CovLinearone",
    "CovNoise",
    # Compound kernels
    "CovSum",
    "CovProd",
    # Kernel functions
    "matern32_kernel",
    "matern52_kernel",
    # Factory
    "create",
    "list_kernels",
    "register_kernel",
]
