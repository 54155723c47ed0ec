# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpreg.core modules.

Kernel matrices are assembled from scalar covariance evaluations and
factorized with a Cholesky decomposition; every solve afterwards goes
through the triangular factor.
"""
import gpreg.num as gnp
from gpreg.errors import NumericalError


def gram_matrix(covf, xs):
    """Kernel matrix over a sequence of input vectors.

    Only the lower triangle is evaluated, K[j, i] = k(x_j, x_i) for
    j >= i, that is n(n+1)/2 kernel calls; the upper triangle is
    mirrored from it.

    Parameters
    ----------
    covf : CovarianceFunction
    xs : sequence of gnp.array, shape (d,)

    Returns
    -------
    K : gnp.array, shape (n, n)
        Symmetric kernel matrix.
    """
    n = len(xs)
    K = gnp.zeros((n, n))
    for i in range(n):
        for j in range(i, n):
            K[j, i] = covf.get(xs[j], xs[i])
    return gnp.symmetrize_lower(K)


def cross_covariance(covf, x, xs):
    """Vector k_i = k(x, x_i) between a point and a sequence of points."""
    kstar = gnp.empty(len(xs))
    for i, xi in enumerate(xs):
        kstar[i] = covf.get(x, xi)
    return kstar


def cholesky_factor(K):
    """Lower Cholesky factor L of K, K = L Lᵀ.

    Raises
    ------
    NumericalError
        If K contains non-finite entries or is not positive definite.
    """
    if not gnp.all(gnp.isfinite(K)):
        raise NumericalError("kernel matrix contains non-finite entries")
    try:
        return gnp.cholesky(K)
    except gnp.LinAlgError as exc:
        raise NumericalError(
            f"kernel matrix ({K.shape[0]}x{K.shape[1]}) is not positive definite"
        ) from exc


def diag_Kinv_from_chol(C):
    """Return diag(K^{-1}) from the lower Cholesky factor C of K.

    Notes
    -----
    If K = C Cᵀ, then K^{-1} = C^{-T} C^{-1}. Let T = C^{-1}; diag(K^{-1})
    equals the column-wise sum of squares of T.
    """
    n = C.shape[0]
    T = gnp.solve_lower(C, gnp.eye(n))
    return gnp.sum(T * T, axis=0)
