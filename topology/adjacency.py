"""
Adjacency definitions for digital topology.

An adjacency defines which points are "neighbors" of each other,
enabling connected component extraction. Different adjacencies
produce different decompositions of the same set.

Metric adjacencies cover the classical ones:
- 2D: 4-adjacency (max_norm1=1), 8-adjacency (max_norm1=2)
- 3D: 6-adjacency (max_norm1=1), 18-adjacency (max_norm1=2),
  26-adjacency (max_norm1=3)
"""

from __future__ import annotations

import itertools
from collections.abc import Container
from dataclasses import dataclass, field

import numpy as np

from kernel.space import difference, norm1, norm_inf, translate
from localtypes import Point, Vector


def make_offsets(dimension: int, max_norm1: int) -> tuple[Vector, ...]:
    """
    Proper displacement vectors of a metric adjacency.

    These are the non null vectors of {-1, 0, 1}^dimension whose 1-norm
    is at most max_norm1, in lexicographic order.

    Example:
        >>> make_offsets(2, 1)
        ((-1, 0), (0, -1), (0, 1), (1, 0))
    """
    cube = np.array(list(itertools.product((-1, 0, 1), repeat=dimension)), dtype=np.int64)
    norms = np.abs(cube).sum(axis=1)
    selected = cube[(norms > 0) & (norms <= max_norm1)]
    return tuple(tuple(int(c) for c in row) for row in selected)


@dataclass(frozen=True)
class MetricAdjacency:
    """
    Adjacency of Z^dimension: p and q are adjacent iff each coordinate
    differs by at most 1 and at most max_norm1 coordinates differ.

    The relation is reflexive and symmetric.
    """

    dimension: int
    max_norm1: int
    offsets: tuple[Vector, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.dimension < 1:
            raise ValueError(f"Adjacency dimension must be >= 1, got {self.dimension}")
        if not 1 <= self.max_norm1 <= self.dimension:
            raise ValueError(
                f"max_norm1 must lie in [1, {self.dimension}], got {self.max_norm1}"
            )
        object.__setattr__(self, "offsets", make_offsets(self.dimension, self.max_norm1))

    def bounding(self) -> MetricAdjacency:
        """The largest metric adjacency of the same space (8 in 2D, 26 in 3D)."""
        return MetricAdjacency(self.dimension, self.dimension)

    def neighborhood_size(self) -> int:
        """Number of proper neighbors of any point."""
        return len(self.offsets)

    def is_adjacent_to(self, p1: Point, p2: Point) -> bool:
        v = difference(p2, p1)
        return norm_inf(v) <= 1 and norm1(v) <= self.max_norm1

    def is_proper_adjacent_to(self, p1: Point, p2: Point) -> bool:
        return p1 != p2 and self.is_adjacent_to(p1, p2)

    def proper_neighbors(self, p: Point) -> tuple[Point, ...]:
        return tuple(translate(p, v) for v in self.offsets)

    def neighbors(self, p: Point) -> tuple[Point, ...]:
        """p followed by its proper neighbors."""
        return (p, *self.proper_neighbors(p))

    def proper_neighbors_in(self, p: Point, domain: Container[Point]) -> tuple[Point, ...]:
        return tuple(q for q in self.proper_neighbors(p) if q in domain)

    def neighbors_in(self, p: Point, domain: Container[Point]) -> tuple[Point, ...]:
        return tuple(q for q in self.neighbors(p) if q in domain)

    def __str__(self) -> str:
        return (
            f"[MetricAdjacency Z{self.dimension} n1<={self.max_norm1}"
            f" ({self.neighborhood_size()}-adjacency)]"
        )
