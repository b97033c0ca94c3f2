"""
Digital sets: finite sets of points of a domain.

A DigitalSet is the PointSet capability consumed by digital objects.
Iteration is ordered (lexicographic), so traversals and component
decompositions are deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from localtypes import Point

from .domain import HyperRectDomain


class DigitalSet:
    """
    A set of points attached to a HyperRectDomain.

    Points are not checked against the domain on insertion, is_valid
    reports whether every point lies in it.

    Example:
        >>> domain = HyperRectDomain((0, 0), (9, 9))
        >>> s = DigitalSet(domain, [(1, 2), (0, 0)])
        >>> list(s)
        [(0, 0), (1, 2)]
    """

    def __init__(self, domain: HyperRectDomain, points: Iterable[Point] = ()) -> None:
        self._domain = domain
        self._points: set[Point] = {tuple(p) for p in points}
        self._sorted: list[Point] | None = None

    @classmethod
    def from_mask(cls, domain: HyperRectDomain, mask: np.ndarray) -> DigitalSet:
        """
        Builds the set of points p such that mask[p - lower_bound] is true.

        Args:
            domain: Domain of the set.
            mask: Array of shape domain.extent().
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != domain.extent():
            raise ValueError(
                f"Mask of shape {mask.shape} does not match domain extent {domain.extent()}"
            )
        offsets = np.argwhere(mask) + np.asarray(domain.lower_bound, dtype=np.int64)
        return cls(domain, (tuple(int(c) for c in row) for row in offsets))

    def to_mask(self) -> np.ndarray:
        """Boolean array of shape domain.extent(), true on the points of the set."""
        mask = np.zeros(self._domain.extent(), dtype=bool)
        inside = [p for p in self._points if p in self._domain]
        if inside:
            indices = np.asarray(inside, dtype=np.int64) - np.asarray(
                self._domain.lower_bound, dtype=np.int64
            )
            mask[tuple(indices.T)] = True
        return mask

    @property
    def domain(self) -> HyperRectDomain:
        return self._domain

    # Modifiers

    def insert(self, p: Point) -> None:
        if p not in self._points:
            self._points.add(p)
            self._sorted = None

    def insert_new(self, p: Point) -> None:
        """Inserts a point known not to be in the set."""
        self._points.add(p)
        self._sorted = None

    def erase(self, p: Point) -> int:
        """Removes p, returns the number of removed points (0 or 1)."""
        if p in self._points:
            self._points.remove(p)
            self._sorted = None
            return 1
        return 0

    def clear(self) -> None:
        self._points.clear()
        self._sorted = None

    # Queries

    def size(self) -> int:
        return len(self._points)

    def empty(self) -> bool:
        return not self._points

    def copy(self) -> DigitalSet:
        clone = DigitalSet(self._domain)
        clone._points = set(self._points)
        clone._sorted = self._sorted
        return clone

    def complement(self) -> DigitalSet:
        """Points of the domain not in this set."""
        return DigitalSet(self._domain, (p for p in self._domain if p not in self._points))

    def is_valid(self) -> bool:
        return self._domain.is_valid() and all(p in self._domain for p in self._points)

    def __contains__(self, p: object) -> bool:
        return p in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        if self._sorted is None:
            self._sorted = sorted(self._points)
        return iter(self._sorted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitalSet):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"[DigitalSet size={len(self)} domain={self._domain}]"

    def __repr__(self) -> str:
        return f"DigitalSet({self._domain!r}, {list(self)!r})"
