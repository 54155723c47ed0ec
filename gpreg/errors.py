# gpreg/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpreg.

InvalidParameter and UnknownKernel derive from ValueError, and
NumericalError from numpy.linalg.LinAlgError, so that callers written
against plain NumPy/SciPy error handling keep working.
"""
from numpy.linalg import LinAlgError


class GPRegError(Exception):
    """Base class of all gpreg errors."""


class InvalidParameter(GPRegError, ValueError):
    """A vector does not have the expected dimensionality.

    Parameters
    ----------
    what : str
        Name of the offending quantity (e.g. "input vector").
    expected : int
        Expected length.
    got : int
        Actual length.
    """

    def __init__(self, what, expected, got):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f"{what} must have length {expected}, got {got}")


class NumericalError(GPRegError, LinAlgError):
    """The kernel matrix is not positive definite."""


class UnknownKernel(GPRegError, ValueError):
    """A textual kernel specification cannot be resolved."""


class ParseError(GPRegError, ValueError):
    """A persisted model description is malformed."""

    def __init__(self, message, filename=None, lineno=None):
        self.filename = filename
        self.lineno = lineno
        location = ""
        if filename is not None:
            location = f"{filename}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            message = f"{location} {message}"
        super().__init__(message)
