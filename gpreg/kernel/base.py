# gpreg/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance function base class.

A covariance function k(x1, x2) is evaluated on two input vectors of
length `input_dim`. It owns a vector of `param_dim` log-hyperparameters;
working with logs lets an optimizer move in an unconstrained domain
while length scales and variances stay positive once exponentiated.

Subclasses implement `get` and `grad` and may override `_on_update`
to cache quantities derived from the log-hyperparameters.
"""
from abc import ABC, abstractmethod
import gpreg.num as gnp
from gpreg.errors import InvalidParameter


class CovarianceFunction(ABC):
    """Abstract covariance function.

    Parameters
    ----------
    input_dim : int
        Dimensionality of the input vectors.
    param_dim : int
        Number of log-hyperparameters.

    Attributes
    ----------
    name : str
        Identifier used by `to_string` and by the kernel factory.
    """

    name = None

    def __init__(self, input_dim, param_dim):
        input_dim = _positive_int(input_dim, "input_dim")
        param_dim = _positive_int(param_dim, "param_dim")
        self._input_dim = input_dim
        self._param_dim = param_dim
        self._loghyper = gnp.zeros(param_dim)
        self._on_update()

    # ------------------------------------------------------------------
    # Dimensions and parameters
    # ------------------------------------------------------------------
    @property
    def input_dim(self):
        return self._input_dim

    @property
    def param_dim(self):
        return self._param_dim

    @property
    def loghyper(self):
        return self.get_loghyper()

    def get_loghyper(self):
        """Return a copy of the log-hyperparameter vector."""
        return gnp.copy(self._loghyper)

    def set_loghyper(self, p):
        """Replace the log-hyperparameter vector.

        Parameters
        ----------
        p : array_like, shape (param_dim,)
            New log-hyperparameters.

        Returns
        -------
        bool
            True on success.

        Raises
        ------
        InvalidParameter
            If p does not have length param_dim.
        ValueError
            If p is not numeric.
        OverflowError
            If a derived hyperparameter overflows, e.g. exp(2 * 400).

        On any error the current hyperparameters, and the quantities
        derived from them, are left untouched.
        """
        p = as_vector(p, self._param_dim, "log-hyperparameter vector")
        previous = self._loghyper
        self._loghyper = gnp.copy(p)
        try:
            self._on_update()
        except (ArithmeticError, ValueError):
            self._loghyper = previous
            self._on_update()
            raise
        return True

    def _on_update(self):
        """Hook called after every change of the log-hyperparameters."""

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    @abstractmethod
    def get(self, x1, x2):
        """Covariance of two input vectors.

        Parameters
        ----------
        x1, x2 : gnp.array, shape (input_dim,)

        Returns
        -------
        float
        """

    @abstractmethod
    def grad(self, x1, x2):
        """Gradient of `get(x1, x2)` with respect to the log-hyperparameters.

        Returns
        -------
        gnp.array, shape (param_dim,)
        """

    def to_string(self):
        return self.name

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return (
            f"<{self.to_string()} input_dim={self._input_dim} "
            f"loghyper={self.get_loghyper()}>"
        )


def as_vector(p, length, what):
    """Convert p to a 1D float array and check its length."""
    p = gnp.array(p, dtype=gnp.float64)
    if p.ndim == 0:
        p = p.reshape(1)
    if p.ndim != 1:
        raise InvalidParameter(what, length, p.size)
    if p.shape[0] != length:
        raise InvalidParameter(what, length, p.shape[0])
    return p


def _positive_int(n, what):
    if isinstance(n, bool) or int(n) != n or n < 1:
        raise ValueError(f"{what} must be a positive integer, got {n!r}")
    return int(n)
