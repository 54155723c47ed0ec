# gpreg/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpreg.core` modules.

This file hosts shape/type validation & conversion helpers for input
vectors and arrays of prediction points.
"""
import gpreg.num as gnp
from gpreg.errors import InvalidParameter


def ensure_input_vector(x, input_dim, what="input vector"):
    """Validate and convert a single input vector.

    Parameters
    ----------
    x : array_like or float
        Input vector of length `input_dim`. A scalar is accepted when
        `input_dim` is 1.
    input_dim : int
        Expected length.

    Returns
    -------
    gnp.array, shape (input_dim,)

    Raises
    ------
    InvalidParameter
        If x is not one-dimensional or has the wrong length.
    """
    x = gnp.array(x, dtype=gnp.float64)
    if x.ndim == 0:
        x = x.reshape(1)
    if x.ndim != 1:
        raise InvalidParameter(what, input_dim, x.size)
    if x.shape[0] != input_dim:
        raise InvalidParameter(what, input_dim, x.shape[0])
    return x


def ensure_input_matrix(xt, input_dim, what="prediction points"):
    """Validate and convert an (m, input_dim) array of points.

    A 1D array is read as m points when `input_dim` is 1 and as a
    single point otherwise.
    """
    xt = gnp.asarray(xt, dtype=gnp.float64)
    if xt.ndim == 1:
        xt = xt.reshape(-1, 1) if input_dim == 1 else xt.reshape(1, -1)
    if xt.ndim != 2:
        raise InvalidParameter(what, input_dim, xt.shape[-1] if xt.ndim else 1)
    if xt.shape[1] != input_dim:
        raise InvalidParameter(what, input_dim, xt.shape[1])
    return xt
