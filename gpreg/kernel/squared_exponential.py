# gpreg/kernel/squared_exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Squared exponential covariance functions.

.. math::
    k(x_1, x_2) = \\sigma_f^2 \\exp\\left(-\\frac{1}{2} \\sum_i
    \\frac{(x_{1,i} - x_{2,i})^2}{\\ell_i^2}\\right)
"""
from math import exp
import gpreg.num as gnp
from .base import CovarianceFunction
from .utils import squared_distance


class CovSEiso(CovarianceFunction):
    """Isotropic squared exponential.

    loghyper = [log(ell), log(sigma_f)]
    """

    name = "CovSEiso"

    def __init__(self, input_dim):
        super().__init__(input_dim, 2)

    def _on_update(self):
        self._ell = exp(self._loghyper[0])
        self._sf2 = exp(2.0 * self._loghyper[1])

    def get(self, x1, x2):
        z = squared_distance(x1, x2) / self._ell**2
        return self._sf2 * exp(-0.5 * z)

    def grad(self, x1, x2):
        z = squared_distance(x1, x2) / self._ell**2
        k = self._sf2 * exp(-0.5 * z)
        return gnp.array([k * z, 2.0 * k])


class CovSEard(CovarianceFunction):
    """Squared exponential with automatic relevance determination.

    One length scale per input dimension.

    loghyper = [log(ell_1), ..., log(ell_d), log(sigma_f)]
    """

    name = "CovSEard"

    def __init__(self, input_dim):
        super().__init__(input_dim, input_dim + 1)

    def _on_update(self):
        d = self._input_dim
        self._invell = gnp.exp(-self._loghyper[:d])
        self._sf2 = exp(2.0 * self._loghyper[d])

    def get(self, x1, x2):
        z = squared_distance(x1, x2, self._invell)
        return self._sf2 * exp(-0.5 * z)

    def grad(self, x1, x2):
        scaled = (self._invell * (x1 - x2)) ** 2
        k = self._sf2 * exp(-0.5 * gnp.to_scalar(gnp.sum(scaled)))
        return gnp.hstack((k * scaled, [2.0 * k]))
