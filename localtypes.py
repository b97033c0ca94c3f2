"""
Type definitions for digital topology.

This module contains the custom types used throughout the library:
points and vectors of Z^n, the connectedness tri-state, and the
structural protocol of the adjacency relations consumed by digital
objects.

Coordinate Convention:
    A point of Z^n is a plain tuple of n ints, e.g. (col, row) in 2D.
    Tuples compare lexicographically, which is the iteration order used
    by domains and digital sets.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, TypeAlias, runtime_checkable

# Points of the digital space and displacements between them
Point: TypeAlias = tuple[int, ...]
Vector: TypeAlias = tuple[int, ...]


class Connectedness(IntEnum):
    """Kind of connectedness of a digital object."""

    DISCONNECTED = 0
    CONNECTED = 1
    UNKNOWN = 2


class DigitalTopologyProperties(IntEnum):
    """Known properties of a (foreground, background) adjacency couple."""

    UNKNOWN_DT = 0
    NOT_JORDAN_DT = 1
    JORDAN_DT = 2


@runtime_checkable
class Adjacency(Protocol):
    """
    An adjacency relation on the points of a digital space.

    The relation should be symmetric for border and simple point
    computations to be meaningful; this is not checked.
    """

    @property
    def dimension(self) -> int: ...

    def is_adjacent_to(self, p1: Point, p2: Point) -> bool: ...

    def proper_neighbors(self, p: Point) -> tuple[Point, ...]: ...


__all__ = [
    # Point types
    "Point",
    "Vector",
    # Enumerations
    "Connectedness",
    "DigitalTopologyProperties",
    # Capabilities
    "Adjacency",
]
