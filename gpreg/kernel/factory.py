# gpreg/kernel/factory.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Build covariance functions from textual specifications.

Grammar (whitespace is ignored)::

    spec     := atomic | compound
    atomic   := NAME
    compound := NAME "(" spec "," spec ")"

Examples
--------
>>> covf = create(2, "CovSum ( CovSEiso, CovNoise)")
>>> covf.to_string()
'CovSum(CovSEiso, CovNoise)'
>>> covf.param_dim
3
"""
from gpreg.errors import UnknownKernel
from .base import CovarianceFunction
from .compound import CompoundCovarianceFunction, CovSum, CovProd
from .squared_exponential import CovSEiso, CovSEard
from .matern import CovMatern3iso, CovMatern5iso
from .rational_quadratic import CovRQiso
from .periodic import CovPeriodic
from .linear import CovLinearard, CovLinearone
from .noise import CovNoise

_registry = {}


def register_kernel(cls):
    """Make a CovarianceFunction subclass available to `create` under cls.name.

    Can be used as a class decorator.
    """
    if not (isinstance(cls, type) and issubclass(cls, CovarianceFunction)):
        raise TypeError("only CovarianceFunction subclasses can be registered")
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a non-empty 'name'")
    _registry[cls.name] = cls
    return cls


for _cls in (
    CovSEiso,
    CovSEard,
    CovMatern3iso,
    CovMatern5iso,
    CovRQiso,
    CovPeriodic,
    CovLinearard,
    CovLinearone,
    CovNoise,
    CovSum,
    CovProd,
):
    register_kernel(_cls)


def list_kernels():
    """Return the sorted names of the registered covariance functions."""
    return sorted(_registry)


def create(input_dim, spec):
    """Create a covariance function from its textual specification.

    Parameters
    ----------
    input_dim : int
        Dimensionality of the input vectors.
    spec : str
        Kernel specification, e.g. "CovSEiso" or "CovProd(CovSEard, CovLinearone)".

    Returns
    -------
    CovarianceFunction
        A new instance, all log-hyperparameters set to 0.

    Raises
    ------
    UnknownKernel
        If a name is not registered, if the arity is wrong or if the
        parentheses are unbalanced.
    """
    return _build(input_dim, "".join(str(spec).split()), spec)


def _build(input_dim, s, full_spec):
    if not s:
        raise UnknownKernel(f"empty kernel specification in '{full_spec}'")
    i = s.find("(")
    if i < 0:
        cls = _lookup(s, full_spec)
        if issubclass(cls, CompoundCovarianceFunction):
            raise UnknownKernel(f"{s} requires two sub-kernels in '{full_spec}'")
        return cls(input_dim)

    name = s[:i]
    if not s.endswith(")"):
        raise UnknownKernel(f"unbalanced parentheses in '{full_spec}'")
    cls = _lookup(name, full_spec)
    if not issubclass(cls, CompoundCovarianceFunction):
        raise UnknownKernel(f"{name} does not take sub-kernels in '{full_spec}'")
    args = _split_arguments(s[i + 1 : -1], full_spec)
    if len(args) != 2:
        raise UnknownKernel(
            f"{name} requires exactly two sub-kernels, got {len(args)} in '{full_spec}'"
        )
    first = _build(input_dim, args[0], full_spec)
    second = _build(input_dim, args[1], full_spec)
    return cls(first, second)


def _lookup(name, full_spec):
    try:
        return _registry[name]
    except KeyError:
        raise UnknownKernel(
            f"unknown covariance function '{name}' in '{full_spec}'"
        ) from None


def _split_arguments(s, full_spec):
    """Split s at the commas that are not nested in parentheses."""
    args = []
    depth = 0
    start = 0
    for j, c in enumerate(s):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                raise UnknownKernel(f"unbalanced parentheses in '{full_spec}'")
        elif c == "," and depth == 0:
            args.append(s[start:j])
            start = j + 1
    if depth != 0:
        raise UnknownKernel(f"unbalanced parentheses in '{full_spec}'")
    args.append(s[start:])
    return args
