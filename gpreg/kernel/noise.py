# gpreg/kernel/noise.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp
import gpreg.num as gnp
from .base import CovarianceFunction


class CovNoise(CovarianceFunction):
    """Independent Gaussian observation noise.

    k(x1, x2) = sigma_n^2 if x1 and x2 are the same object, else 0.

    Identity, not equality, is tested: the noise belongs to an
    observation, so two distinct samples sharing the same input
    location stay uncorrelated. The Gram matrix diagonal and the
    self-covariance of a query point are the only places where an
    object meets itself.

    loghyper = [log(sigma_n)]
    """

    name = "CovNoise"

    def __init__(self, input_dim):
        super().__init__(input_dim, 1)

    def _on_update(self):
        self._s2 = exp(2.0 * self._loghyper[0])

    def get(self, x1, x2):
        if x1 is x2:
            return self._s2
        return 0.0

    def grad(self, x1, x2):
        if x1 is x2:
            return gnp.array([2.0 * self._s2])
        return gnp.zeros(1)
