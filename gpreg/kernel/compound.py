# gpreg/kernel/compound.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Compound covariance functions.

A compound kernel owns two sub-kernels sharing the same input
dimensionality. Its log-hyperparameter vector is the concatenation of
the vectors of the first and the second sub-kernel, in that order.
"""
import gpreg.num as gnp
from .base import CovarianceFunction, as_vector


class CompoundCovarianceFunction(CovarianceFunction):
    """Base class for kernels combining two sub-kernels."""

    def __init__(self, first, second):
        if first.input_dim != second.input_dim:
            raise ValueError(
                f"{self.name}: sub-kernels have different input dimensions "
                f"({first.input_dim} and {second.input_dim})"
            )
        self.first = first
        self.second = second
        super().__init__(first.input_dim, first.param_dim + second.param_dim)

    def get_loghyper(self):
        return gnp.hstack((self.first.get_loghyper(), self.second.get_loghyper()))

    def set_loghyper(self, p):
        p = as_vector(p, self._param_dim, "log-hyperparameter vector")
        n1 = self.first.param_dim
        previous = self.first.get_loghyper()
        self.first.set_loghyper(p[:n1])
        try:
            self.second.set_loghyper(p[n1:])
        except (ArithmeticError, ValueError):
            # second is left unchanged by its own set_loghyper
            self.first.set_loghyper(previous)
            raise
        return True

    def to_string(self):
        return f"{self.name}({self.first.to_string()}, {self.second.to_string()})"


class CovSum(CompoundCovarianceFunction):
    """Sum of two covariance functions."""

    name = "CovSum"

    def get(self, x1, x2):
        return self.first.get(x1, x2) + self.second.get(x1, x2)

    def grad(self, x1, x2):
        return gnp.hstack((self.first.grad(x1, x2), self.second.grad(x1, x2)))


class CovProd(CompoundCovarianceFunction):
    """Product of two covariance functions."""

    name = "CovProd"

    def get(self, x1, x2):
        return self.first.get(x1, x2) * self.second.get(x1, x2)

    def grad(self, x1, x2):
        k1 = self.first.get(x1, x2)
        k2 = self.second.get(x1, x2)
        return gnp.hstack(
            (self.first.grad(x1, x2) * k2, self.second.grad(x1, x2) * k1)
        )
