# gpreg/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp


def squared_distance(x1, x2, invrho=None):
    """Squared (optionally scaled) Euclidean distance between two vectors.

    Parameters
    ----------
    x1, x2 : gnp.array, shape (d,)
    invrho : gnp.array, shape (d,) or scalar, optional
        Inverse length scales applied coordinate-wise.

    Returns
    -------
    float
    """
    diff = x1 - x2
    if invrho is not None:
        diff = invrho * diff
    return gnp.to_scalar(gnp.dot(diff, diff))


def distance(x1, x2, invrho=None):
    """Euclidean distance, see `squared_distance`."""
    return squared_distance(x1, x2, invrho) ** 0.5
