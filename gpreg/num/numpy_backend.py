# gpreg/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPreg.

This module defines the NumPy implementation of the gpreg.num API:
array constructors producing float64 arrays, the elementwise and
reduction functions used by the kernels, triangular solves, and a
seeded random generator for tests and examples.
"""

from typing import Any, Callable
from gpreg.config import get_config, init_backend, get_logger
from .shared import derivative_finite_diff

ArrayLike = Any

_gpreg_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _gpreg_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

# element type, read from the configuration when gpreg.num is imported
_np_dtype = numpy.dtype(_config.dtype).type

ndarray = NDArray[numpy.floating]
from numpy import (
    copy,
    any,
    all,
    isfinite,
    allclose,
    hstack,
    vstack,
    zeros_like,
    tril,
    exp,
    sin,
    cos,
    dot,
    sum,
    maximum,
)
from numpy.linalg import LinAlgError, cholesky
from numpy import float64
from scipy.linalg import solve_triangular

# ..................................................


def array(x, dtype=None):
    """Return a new array; integer input is promoted to float64."""
    out = numpy.array(x, dtype=dtype)
    if dtype is None and numpy.issubdtype(out.dtype, numpy.integer):
        return out.astype(_np_dtype)
    return out


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    out = numpy.asarray(x)
    if numpy.issubdtype(out.dtype, numpy.integer):
        return out.astype(_np_dtype)
    return out


def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


def to_scalar(x):
    return float(x)


def readonly(x):
    """Return a read-only float64 copy of x."""
    out = numpy.array(x, dtype=_np_dtype)
    out.setflags(write=False)
    return out


# ..................................................


def grad(f: Callable[[ArrayLike], ArrayLike]) -> Callable[[ArrayLike], ArrayLike]:
    """
    Return function that computes gradient of f via finite differences.

    Each partial derivative uses the 5-point central difference of
    `derivative_finite_diff`.

    Parameters
    ----------
    f : callable
        Scalar-valued function taking an array and returning a scalar.

    Returns
    -------
    callable
        Function grad_f(x) that computes nabla f(x).
    """

    def grad_f(x: ArrayLike) -> ArrayLike:
        x_arr = array(x, dtype=_np_dtype)
        grad_vec = zeros_like(x_arr)
        h = 1e-5

        for i in range(x_arr.shape[0]):

            def f_i(xi_scalar):
                x_copy = copy(x_arr)
                x_copy[i] = xi_scalar
                return f(x_copy)

            grad_vec[i] = derivative_finite_diff(f_i, float(x_arr[i]), h)

        return grad_vec

    return grad_f


# ..................................................


def symmetrize_lower(A):
    """Mirror the lower triangle of A onto its upper triangle."""
    return tril(A) + tril(A, -1).T


def solve_lower(L, b):
    """Forward substitution L x = b."""
    return solve_triangular(L, b, lower=True, check_finite=False)


def cholesky_solve_factor(L, b):
    """Solve (L L^T) x = b given the lower Cholesky factor L."""
    y = solve_triangular(L, b, lower=True, check_finite=False)
    return solve_triangular(L.T, y, lower=False, check_finite=False)


# ..................................................

_np_rng = numpy.random.default_rng(seed=1234)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)


def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
