# gpreg/__init__.py

from . import config
from . import num
from . import errors
from . import kernel
from . import core
from . import io
from .core import GaussianProcess, Sample, SampleSet
from .errors import InvalidParameter, NumericalError, UnknownKernel, ParseError
import os

__all__ = [
    "num",
    "kernel",
    "core",
    "io",
    "GaussianProcess",
    "Sample",
    "SampleSet",
    "InvalidParameter",
    "NumericalError",
    "UnknownKernel",
    "ParseError",
    "__version__",
]

# Read version from VERSION file at project root
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(_version_file, "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"
