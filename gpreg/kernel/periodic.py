# gpreg/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp, sin, cos, pi
import gpreg.num as gnp
from .base import CovarianceFunction
from .utils import distance


class CovPeriodic(CovarianceFunction):
    """Isotropic periodic kernel (MacKay).

    .. math::
        k(x_1, x_2) = \\sigma_f^2 \\exp\\left(-\\frac{2 \\sin^2(\\pi r / p)}{\\ell^2}\\right)

    loghyper = [log(ell), log(p), log(sigma_f)]
    """

    name = "CovPeriodic"

    def __init__(self, input_dim):
        super().__init__(input_dim, 3)

    def _on_update(self):
        self._ell = exp(self._loghyper[0])
        self._period = exp(self._loghyper[1])
        self._sf2 = exp(2.0 * self._loghyper[2])

    def get(self, x1, x2):
        s = sin(pi * distance(x1, x2) / self._period)
        return self._sf2 * exp(-2.0 * s * s / self._ell**2)

    def grad(self, x1, x2):
        theta = pi * distance(x1, x2) / self._period
        s, c = sin(theta), cos(theta)
        ell2 = self._ell**2
        k = self._sf2 * exp(-2.0 * s * s / ell2)
        return gnp.array(
            [
                4.0 * k * s * s / ell2,
                4.0 * k * s * c * theta / ell2,
                2.0 * k,
            ]
        )
