# gpreg/io.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Reading and writing GaussianProcess models as text.

File format
-----------
Blank lines and lines starting with '#' are ignored. The remaining
lines are, in order:

1. the input dimensionality d,
2. the covariance function, as given by `CovarianceFunction.to_string`,
3. the log-hyperparameters, separated by spaces,
4. zero or more data rows ``y x_1 ... x_d`` (target value first).

Example::

    # input dimensionality
    1

    # covariance function
    CovSum(CovSEiso, CovNoise)

    # log-hyperparameter
    0 0 -2.302585093

    # data (target value in first column)
    0 0
    0.8 1
    0.9 2

Malformed input raises `gpreg.errors.ParseError` with the file name and
line number; an unknown covariance function raises
`gpreg.errors.UnknownKernel`.
"""
import math
import time
from gpreg.config import get_config, get_logger
from gpreg.errors import ParseError
from gpreg.core import GaussianProcess

_logger = get_logger()


# ======================================================================
#                               Writing
# ======================================================================
def dumps(gp, precision=None):
    """Return the text description of gp.

    Parameters
    ----------
    gp : GaussianProcess
    precision : int, optional
        Number of significant digits, defaults to the configured
        precision (see `gpreg.config.set_precision`).

    Returns
    -------
    str
    """
    if precision is None:
        precision = get_config().precision
    fmt = f"{{:.{int(precision)}g}}"

    def fmt_row(values):
        return " ".join(fmt.format(float(v)) for v in values)

    lines = [
        "# " + time.strftime("%c"),
        "",
        "# input dimensionality",
        str(gp.input_dim),
        "",
        "# covariance function",
        gp.covf.to_string(),
        "",
        "# log-hyperparameter",
        fmt_row(gp.covf.get_loghyper()),
        "",
        "# data (target value in first column)",
    ]
    for sample in gp.sampleset:
        lines.append(fmt_row([sample.y, *sample.x]))
    return "\n".join(lines) + "\n"


def write(gp, filename, precision=None):
    """Write gp to filename, see `dumps`."""
    text = dumps(gp, precision)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)
    _logger.info(
        "Wrote %s (%d samples) to %s", gp.covf.to_string(), len(gp), filename
    )


# ======================================================================
#                               Reading
# ======================================================================
def loads(text, filename=None):
    """Build a GaussianProcess from its text description.

    Parameters
    ----------
    text : str
    filename : str, optional
        Used in error messages only.

    Returns
    -------
    GaussianProcess

    Raises
    ------
    ParseError
        If the dimensionality is not a positive integer, if the number
        of log-hyperparameters does not match the covariance function,
        if a token is not a finite number, if a data row does not have
        exactly 1 + d values, or if the text ends before the
        log-hyperparameters.
    UnknownKernel
        If the covariance function is not recognized.
    """
    gp = None
    stage = 0
    for lineno, line in _records(text):
        if stage == 0:
            input_dim = _parse_input_dim(line, filename, lineno)
        elif stage == 1:
            gp = GaussianProcess(input_dim, line)
        elif stage == 2:
            values = _parse_floats(line, filename, lineno)
            if len(values) != gp.param_dim:
                raise ParseError(
                    f"expected {gp.param_dim} log-hyperparameters for "
                    f"{gp.covf.to_string()}, got {len(values)}",
                    filename,
                    lineno,
                )
            gp.set_parameters(values)
        else:
            values = _parse_floats(line, filename, lineno)
            if len(values) != 1 + input_dim:
                raise ParseError(
                    f"expected {1 + input_dim} values (target and inputs), "
                    f"got {len(values)}",
                    filename,
                    lineno,
                )
            gp.add_pattern(values[1:], values[0])
        stage += 1
    if stage < 3:
        missing = ("input dimensionality", "covariance function", "log-hyperparameters")
        raise ParseError(f"unexpected end of input, missing {missing[stage]}", filename)
    return gp


def read(filename):
    """Read a GaussianProcess from filename, see `loads`."""
    with open(filename, "r", encoding="utf-8") as f:
        text = f.read()
    gp = loads(text, filename=filename)
    _logger.info(
        "Read %s (%d samples) from %s", gp.covf.to_string(), len(gp), filename
    )
    return gp


def _records(text):
    """Yield (lineno, line) for the lines that are neither blank nor comments."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if line and not line.startswith("#"):
            yield lineno, line


def _parse_input_dim(line, filename, lineno):
    tokens = line.split()
    if len(tokens) != 1:
        raise ParseError(
            f"expected a single input dimensionality, got '{line}'", filename, lineno
        )
    try:
        input_dim = int(tokens[0])
    except ValueError:
        raise ParseError(
            f"input dimensionality must be an integer, got '{tokens[0]}'",
            filename,
            lineno,
        ) from None
    if input_dim < 1:
        raise ParseError(
            f"input dimensionality must be positive, got {input_dim}", filename, lineno
        )
    return input_dim


def _parse_floats(line, filename, lineno):
    values = []
    for token in line.split():
        try:
            v = float(token)
        except ValueError:
            raise ParseError(f"not a number: '{token}'", filename, lineno) from None
        if not math.isfinite(v):
            raise ParseError(f"not a finite number: '{token}'", filename, lineno)
        values.append(v)
    return values
