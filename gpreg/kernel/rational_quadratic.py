# gpreg/kernel/rational_quadratic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp, log
import gpreg.num as gnp
from .base import CovarianceFunction
from .utils import squared_distance


class CovRQiso(CovarianceFunction):
    """Isotropic rational quadratic kernel.

    .. math::
        k(x_1, x_2) = \\sigma_f^2 \\left(1 + \\frac{r^2}{2 \\alpha \\ell^2}\\right)^{-\\alpha}

    loghyper = [log(ell), log(sigma_f), log(alpha)]
    """

    name = "CovRQiso"

    def __init__(self, input_dim):
        super().__init__(input_dim, 3)

    def _on_update(self):
        self._ell = exp(self._loghyper[0])
        self._sf2 = exp(2.0 * self._loghyper[1])
        self._alpha = exp(self._loghyper[2])

    def get(self, x1, x2):
        z = squared_distance(x1, x2) / self._ell**2
        return self._sf2 * (1.0 + 0.5 * z / self._alpha) ** (-self._alpha)

    def grad(self, x1, x2):
        a = self._alpha
        z = squared_distance(x1, x2) / self._ell**2
        u = 1.0 + 0.5 * z / a
        k = self._sf2 * u ** (-a)
        return gnp.array(
            [
                self._sf2 * u ** (-a - 1.0) * z,
                2.0 * k,
                k * (0.5 * z / u - a * log(u)),
            ]
        )
