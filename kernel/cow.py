"""
Copy-on-write handles.

Several digital objects may reference the same point set or topology.
Reads go to the shared payload; the first write through a handle that
is not the only live owner clones the payload, so other holders never
observe it.
"""

from __future__ import annotations

import weakref
from typing import Generic, Protocol, TypeVar


class Copyable(Protocol):
    def copy(self): ...


V = TypeVar("V", bound=Copyable)


class _Cell(Generic[V]):
    """Payload and the live handles sharing it."""

    __slots__ = ("value", "owners")

    def __init__(self, value: V) -> None:
        self.value = value
        self.owners: weakref.WeakSet[CowPtr[V]] = weakref.WeakSet()


class CowPtr(Generic[V]):
    """
    Copy-on-write pointer on a value exposing copy().

    Example:
        >>> a = CowPtr([1, 2])
        >>> b = a.copy()
        >>> b.get_mutable().append(3)
        >>> a.get(), b.get()
        ([1, 2], [1, 2, 3])
    """

    __slots__ = ("_cell", "__weakref__")

    def __init__(self, value: V) -> None:
        self._attach(_Cell(value))

    def _attach(self, cell: _Cell[V]) -> None:
        self._cell = cell
        cell.owners.add(self)

    def copy(self) -> CowPtr[V]:
        """A new handle sharing the payload."""
        clone = CowPtr.__new__(CowPtr)
        clone._attach(self._cell)
        return clone

    __copy__ = copy

    def get(self) -> V:
        """The payload, for read access only."""
        return self._cell.value

    def get_mutable(self) -> V:
        """A payload owned by this handle alone, cloned first if shared."""
        if self.is_shared():
            self._cell.owners.discard(self)
            self._attach(_Cell(self._cell.value.copy()))
        return self._cell.value

    def is_shared(self) -> bool:
        return len(self._cell.owners) > 1

    def owners(self) -> int:
        return len(self._cell.owners)

    def shares_with(self, other: CowPtr) -> bool:
        return self._cell is other._cell

    def __repr__(self) -> str:
        return f"CowPtr({self._cell.value!r}, owners={self.owners()})"
