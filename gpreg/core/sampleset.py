# gpreg/core/sampleset.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Training data containers.

Components
----------
Sample
    One observation: a read-only input vector *x* and a scalar target *y*.

SampleSet
    Ordered collection of samples. Insertion order is the row/column
    order of the kernel matrix. Duplicates are allowed.
"""
from typing import Iterator, List
import gpreg.num as gnp
from . import utils


Array = gnp.ndarray


# ======================================================================
#                               Sample
# ======================================================================
class Sample:
    """A single training observation (x, y)."""

    __slots__ = ("x", "y")

    def __init__(self, x: Array, y: float) -> None:
        self.x = gnp.readonly(x)
        self.y = float(y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Sample(x={self.x.tolist()}, y={self.y})"


# ======================================================================
#                               SampleSet
# ======================================================================
class SampleSet:
    """Ordered collection of samples with a fixed input dimensionality.

    Parameters
    ----------
    input_dim : int
        Length of every input vector.
    """

    def __init__(self, input_dim: int) -> None:
        self.input_dim = input_dim
        self._samples: List[Sample] = []

    # ------------------------------------------------------------- special methods
    def __len__(self) -> int:
        """Return total number of samples."""
        return len(self._samples)

    def __getitem__(self, idx: int) -> Sample:
        return self._samples[idx]

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={len(self._samples)}, "
            f"input_dim={self.input_dim})"
        )

    # ------------------------------------------------------------- mutation
    def append(self, x, y) -> Sample:
        """Append a new sample and return it.

        Raises
        ------
        InvalidParameter
            If x does not have length input_dim. The set is unchanged.
        """
        x = utils.ensure_input_vector(x, self.input_dim)
        sample = Sample(x, y)
        self._samples.append(sample)
        return sample

    # ------------------------------------------------------------- views
    def size(self) -> int:
        return len(self._samples)

    def inputs(self) -> Array:
        """Return the (n, input_dim) array of inputs."""
        if not self._samples:
            return gnp.zeros((0, self.input_dim))
        return gnp.vstack([s.x for s in self._samples])

    def targets(self) -> Array:
        """Return the (n,) array of targets."""
        return gnp.array([s.y for s in self._samples], dtype=gnp.float64)
