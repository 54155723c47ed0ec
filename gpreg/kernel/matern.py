# gpreg/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt, exp
import gpreg.num as gnp
from .base import CovarianceFunction
from .utils import distance


def matern32_kernel(h):
    """Matérn 3/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h)

    Parameters
    ----------
    h : float
        Scaled distance r / ell.

    Returns
    -------
    float
    """
    t = sqrt(3.0) * h
    return (1.0 + t) * exp(-t)


def matern52_kernel(h):
    """Matérn 5/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{5}\\,h + \\frac{5}{3} h^2) \\exp(-\\sqrt{5}\\,h)

    Parameters
    ----------
    h : float
        Scaled distance r / ell.

    Returns
    -------
    float
    """
    t = sqrt(5.0) * h
    return (1.0 + t + t * t / 3.0) * exp(-t)


class _MaternIso(CovarianceFunction):
    """Isotropic Matérn kernel, loghyper = [log(ell), log(sigma_f)]."""

    def __init__(self, input_dim):
        super().__init__(input_dim, 2)

    def _on_update(self):
        self._ell = exp(self._loghyper[0])
        self._sf2 = exp(2.0 * self._loghyper[1])


class CovMatern3iso(_MaternIso):
    name = "CovMatern3iso"

    def get(self, x1, x2):
        return self._sf2 * matern32_kernel(distance(x1, x2) / self._ell)

    def grad(self, x1, x2):
        z = sqrt(3.0) * distance(x1, x2) / self._ell
        ez = exp(-z)
        k = self._sf2 * (1.0 + z) * ez
        return gnp.array([self._sf2 * z * z * ez, 2.0 * k])


class CovMatern5iso(_MaternIso):
    name = "CovMatern5iso"

    def get(self, x1, x2):
        return self._sf2 * matern52_kernel(distance(x1, x2) / self._ell)

    def grad(self, x1, x2):
        z = sqrt(5.0) * distance(x1, x2) / self._ell
        ez = exp(-z)
        k = self._sf2 * (1.0 + z + z * z / 3.0) * ez
        return gnp.array([self._sf2 * z * z * (1.0 + z) * ez / 3.0, 2.0 * k])
