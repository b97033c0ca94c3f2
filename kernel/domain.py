"""
Hyper-rectangular domains of Z^n.

A domain is the bounding extent of the point sets of digital objects:
border and complement computations only look at points inside it.
"""

import itertools
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from localtypes import Point


@dataclass(frozen=True)
class HyperRectDomain:
    """
    Axis aligned box [lower_bound, upper_bound] of Z^n, bounds included.

    A box with lower_bound > upper_bound on some axis is empty. It can be
    built but is not valid (see is_valid).
    """

    lower_bound: Point
    upper_bound: Point

    def __post_init__(self):
        if len(self.lower_bound) != len(self.upper_bound):
            raise ValueError(
                f"Bounds have different dimensions: {self.lower_bound}, {self.upper_bound}"
            )
        # Normalize sequences (lists, numpy rows) to tuples of ints
        object.__setattr__(self, "lower_bound", tuple(int(c) for c in self.lower_bound))
        object.__setattr__(self, "upper_bound", tuple(int(c) for c in self.upper_bound))

    @property
    def dimension(self) -> int:
        return len(self.lower_bound)

    def extent(self) -> tuple[int, ...]:
        """Number of points along each axis."""
        extent = np.subtract(self.upper_bound, self.lower_bound) + 1
        return tuple(int(e) for e in np.maximum(extent, 0))

    def size(self) -> int:
        return int(np.prod(self.extent(), dtype=np.int64))

    def is_empty(self) -> bool:
        return self.size() == 0

    def is_valid(self) -> bool:
        return all(lo <= up for lo, up in zip(self.lower_bound, self.upper_bound))

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, tuple) or len(point) != self.dimension:
            return False
        return all(
            lo <= c <= up for lo, c, up in zip(self.lower_bound, point, self.upper_bound)
        )

    def __iter__(self) -> Iterator[Point]:
        """Points of the domain in lexicographic order."""
        ranges = (range(lo, up + 1) for lo, up in zip(self.lower_bound, self.upper_bound))
        return itertools.product(*ranges)

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        return f"[HyperRectDomain lower={self.lower_bound} upper={self.upper_bound}]"
