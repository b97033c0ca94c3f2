"""
Digital topologies: couples (kappa, lambda) of adjacencies.

kappa is the foreground adjacency, used to connect the points of an
object; lambda is the background adjacency, used to connect the points
of its complement. Border and simple point computations are only
meaningful for Jordan couples such as (4, 8) in 2D or (6, 26) in 3D,
which callers are responsible for.
"""

from __future__ import annotations

from localtypes import Adjacency, DigitalTopologyProperties


class DigitalTopology:
    """
    Immutable couple of adjacencies.

    Two topologies are equal when their adjacencies and properties are.
    A topology is hashable when both its adjacencies are.

    Example:
        >>> dt = DigitalTopology(MetricAdjacency(2, 1), MetricAdjacency(2, 2))
        >>> dt.reversed().kappa()
        MetricAdjacency(dimension=2, max_norm1=2)
    """

    __slots__ = ("_kappa", "_lambda", "_properties")

    def __init__(
        self,
        kappa: Adjacency,
        lambda_: Adjacency,
        properties: DigitalTopologyProperties = DigitalTopologyProperties.UNKNOWN_DT,
    ) -> None:
        if kappa.dimension != lambda_.dimension:
            raise ValueError(f"Adjacencies of different dimensions: {kappa}, {lambda_}")
        object.__setattr__(self, "_kappa", kappa)
        object.__setattr__(self, "_lambda", lambda_)
        object.__setattr__(self, "_properties", DigitalTopologyProperties(properties))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def dimension(self) -> int:
        return self._kappa.dimension

    def kappa(self) -> Adjacency:
        """The foreground adjacency."""
        return self._kappa

    def lambda_(self) -> Adjacency:
        """The background adjacency."""
        return self._lambda

    foreground = kappa
    background = lambda_

    def properties(self) -> DigitalTopologyProperties:
        return self._properties

    def reversed(self) -> DigitalTopology:
        """The topology of complements: foreground and background swapped."""
        return DigitalTopology(self._lambda, self._kappa, self._properties)

    def is_jordan(self) -> bool:
        return self._properties == DigitalTopologyProperties.JORDAN_DT

    def _key(self) -> tuple[Adjacency, Adjacency, DigitalTopologyProperties]:
        return (self._kappa, self._lambda, self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitalTopology):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DigitalTopology({self._kappa!r}, {self._lambda!r},"
            f" {self._properties.name})"
        )

    def __str__(self) -> str:
        return (
            f"[DigitalTopology fg={self._kappa} bg={self._lambda}"
            f" {self._properties.name}]"
        )


def geodesic_order(adjacency: Adjacency, partner: Adjacency) -> int:
    """
    Order k of the geodesic neighborhood N^k(v, X) used to count the
    components around a point in the simple point test [Bertrand, 1994].

    The full ball adjacency (8 in 2D, 26 in 3D) only needs direct
    neighbors. 6-adjacency paired with 18-adjacency needs paths of length
    3 to go around the ball, every other metric adjacency needs 2.
    """
    dimension = adjacency.dimension
    max_norm1 = getattr(adjacency, "max_norm1", dimension)
    if max_norm1 >= dimension:
        return 1
    if dimension == 3 and max_norm1 == 1 and getattr(partner, "max_norm1", 0) == 2:
        return 3
    return 2
