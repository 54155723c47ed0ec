# gpreg/kernel/linear.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear (dot product) covariance functions.

These kernels are not stationary; combined with CovNoise they give
Bayesian linear regression.
"""
from math import exp
import gpreg.num as gnp
from .base import CovarianceFunction


class CovLinearard(CovarianceFunction):
    """Linear kernel with one scale per input dimension.

    k(x1, x2) = sum_i x1_i x2_i / ell_i^2,  loghyper = [log(ell_1), ..., log(ell_d)]
    """

    name = "CovLinearard"

    def __init__(self, input_dim):
        super().__init__(input_dim, input_dim)

    def _on_update(self):
        self._invell2 = gnp.exp(-2.0 * self._loghyper)

    def get(self, x1, x2):
        return gnp.to_scalar(gnp.sum(x1 * x2 * self._invell2))

    def grad(self, x1, x2):
        return -2.0 * (x1 * x2) * self._invell2


class CovLinearone(CovarianceFunction):
    """Linear kernel with bias, k(x1, x2) = (1 + x1.x2) / t^2,  loghyper = [log(t)]."""

    name = "CovLinearone"

    def __init__(self, input_dim):
        super().__init__(input_dim, 1)

    def _on_update(self):
        self._it2 = exp(-2.0 * self._loghyper[0])

    def get(self, x1, x2):
        return self._it2 * (1.0 + gnp.to_scalar(gnp.dot(x1, x2)))

    def grad(self, x1, x2):
        return gnp.array([-2.0 * self.get(x1, x2)])
