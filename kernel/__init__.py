"""
Digital space primitives.

**Space** (space.py)
    Points of Z^n as int tuples and the point algebra topology needs.

**Domain** (domain.py)
    HyperRectDomain: bounding box of the point sets.

**Digital sets** (digital_set.py)
    DigitalSet: ordered set of points attached to a domain.

**Copy-on-write** (cow.py)
    CowPtr: shared handle, cloned on first write.
"""

from .cow import CowPtr
from .digital_set import DigitalSet
from .domain import HyperRectDomain
from .space import SpaceND, difference, norm1, norm_inf, translate

__all__ = [
    # Space
    "SpaceND",
    "translate",
    "difference",
    "norm1",
    "norm_inf",
    # Domain
    "HyperRectDomain",
    # Sets
    "DigitalSet",
    # Sharing
    "CowPtr",
]
