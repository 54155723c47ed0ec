# gpreg/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Zero-mean kriging (simple kriging) from a Cholesky factorization.

This module contains the numerical routines used by
`gpreg.core.GaussianProcess`: building the factorization of the kernel
matrix over the training inputs, and computing the posterior mean and
variance at a query point from it.

Functions
---------
factorize(covf, xi, zi)
    Cholesky factor L of K(xi, xi) and weights alpha = K^{-1} zi.

posterior(covf, L, alpha, xi, x, compute_variance)
    Posterior mean kstarᵀ alpha and, if requested, the posterior
    variance k(x, x) - vᵀv with v = L^{-1} kstar.

loo(L, alpha, zi)
    Leave-one-out predictions by virtual cross-validation.
"""
import gpreg.num as gnp
from . import linalg


def factorize(covf, xi, zi):
    """Factorize the kernel matrix and solve for the kriging weights.

    Parameters
    ----------
    covf : CovarianceFunction
    xi : sequence of gnp.array, shape (d,)
        Training inputs, in insertion order.
    zi : gnp.array, shape (n,)
        Training targets.

    Returns
    -------
    L : gnp.array, shape (n, n)
        Lower Cholesky factor of K.
    alpha : gnp.array, shape (n,)
        Solution of K alpha = zi.

    Raises
    ------
    NumericalError
        If K is not positive definite.
    """
    K = linalg.gram_matrix(covf, xi)
    L = linalg.cholesky_factor(K)
    alpha = gnp.cholesky_solve_factor(L, zi)
    return L, alpha


def posterior(covf, L, alpha, xi, x, compute_variance=False):
    """Posterior mean and variance at a single point x.

    Parameters
    ----------
    covf : CovarianceFunction
    L : gnp.array, shape (n, n)
    alpha : gnp.array, shape (n,)
    xi : sequence of gnp.array, shape (d,)
    x : gnp.array, shape (d,)
    compute_variance : bool

    Returns
    -------
    mean : float
    variance : float or None
        Raw value, may be slightly negative through round-off.
    """
    kstar = linalg.cross_covariance(covf, x, xi)
    mean = gnp.to_scalar(gnp.dot(kstar, alpha))
    if not compute_variance:
        return mean, None
    v = gnp.solve_lower(L, kstar)
    variance = covf.get(x, x) - gnp.to_scalar(gnp.dot(v, v))
    return mean, variance


def loo(L, alpha, zi):
    """Leave-one-out predictions using the virtual cross-validation formula.

    .. math::
        \\sigma^2_{-i} = 1 / (K^{-1})_{ii}, \\quad
        e_{-i} = \\alpha_i \\, \\sigma^2_{-i}, \\quad
        z_{-i} = z_i - e_{-i}

    Returns
    -------
    zloo : gnp.array, shape (n,)
    sigma2loo : gnp.array, shape (n,)
    eloo : gnp.array, shape (n,)
    """
    sigma2loo = 1.0 / linalg.diag_Kinv_from_chol(L)
    eloo = alpha * sigma2loo
    zloo = zi - eloo
    return zloo, sigma2loo, eloo
