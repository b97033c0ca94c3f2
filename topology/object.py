"""
Digital objects: point sets equipped with a digital topology.

The digital topology induces a connectedness relation on the object
(transitive closure of the foreground adjacency kappa) and on its
complement (transitive closure of the background adjacency lambda).

Objects may be connected or not. The connectedness is cached with the
object once a traversal has established it. Objects have a border, the
points which touch the complement in the sense of lambda.

Topology and point set are held through copy-on-write handles: copies
of an object are cheap and share both until one of them writes to its
point set.

Algorithm overview:
    Neighborhoods: enumerate the kappa-neighbors of p, keep those in the
        object. O(degree).
    Border: for each point, look for a lambda-neighbor in the domain and
        outside the object. O(n x degree).
    Connectedness and components: breadth-first traversals restricted
        to the object, each point visited once. O(n x degree).
    Simple points: encode the full-ball neighborhood of v as bit masks,
        then count the components of the geodesic neighborhoods of v in
        the object (kappa) and in its complement (lambda) [Bertrand, 1994].
        Results are memoised per (topology, configuration) in a bounded
        cache.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from functools import cache, lru_cache

from constants import SIMPLE_CONFIGURATION_CACHE_SIZE
from kernel import CowPtr, DigitalSet, HyperRectDomain, translate
from localtypes import Adjacency, Connectedness, Point, Vector
from utils.bits import set_bit_indices
from utils.graph import (
    breadth_first_layers,
    count_connected_components,
    nodes_to_connected_components,
)

from .adjacency import make_offsets
from .digital_topology import DigitalTopology, geodesic_order

logger = logging.getLogger(__name__)


class DigitalObject:
    """
    A set of points of some digital space associated with a digital topology.

    The point set given to the constructor is copied, unless it is given as
    a CowPtr, in which case it is shared.

    Example:
        >>> domain = HyperRectDomain((0, 0), (9, 9))
        >>> points = DigitalSet(domain, [(0, 0), (1, 0), (0, 1), (5, 5)])
        >>> obj = DigitalObject(Z2i.dt4_8, points)
        >>> obj.compute_connectedness()
        <Connectedness.DISCONNECTED: 0>
        >>> [sorted(c.point_set) for c in obj.components()]
        [[(0, 0), (0, 1), (1, 0)], [(5, 5)]]
    """

    def __init__(
        self,
        topology: DigitalTopology | CowPtr[DigitalTopology],
        point_set: DigitalSet | CowPtr[DigitalSet],
        connectedness: Connectedness = Connectedness.UNKNOWN,
    ) -> None:
        if isinstance(topology, CowPtr):
            self._topology = topology.copy()
        else:
            self._topology = CowPtr(topology)
        if isinstance(point_set, CowPtr):
            self._point_set = point_set.copy()
        else:
            self._point_set = CowPtr(point_set.copy())
        self._connectedness = Connectedness(connectedness)

    @classmethod
    def from_domain(
        cls,
        topology: DigitalTopology | CowPtr[DigitalTopology],
        domain: HyperRectDomain,
    ) -> DigitalObject:
        """Empty object anchored to the given domain."""
        return cls.adopt(topology, DigitalSet(domain))

    @classmethod
    def adopt(
        cls,
        topology: DigitalTopology | CowPtr[DigitalTopology],
        point_set: DigitalSet,
        connectedness: Connectedness = Connectedness.UNKNOWN,
    ) -> DigitalObject:
        """
        Object taking ownership of point_set without copying it. The caller
        must not modify point_set afterwards.
        """
        return cls(topology, CowPtr(point_set), connectedness)

    def copy(self) -> DigitalObject:
        """Cheap copy: topology and point set are shared until written."""
        clone = DigitalObject.__new__(DigitalObject)
        clone._topology = self._topology.copy()
        clone._point_set = self._point_set.copy()
        clone._connectedness = self._connectedness
        return clone

    __copy__ = copy

    # Accessors

    @property
    def point_set(self) -> DigitalSet:
        """The points of the object, for read access only."""
        return self._point_set.get()

    def mutable_point_set(self) -> DigitalSet:
        """
        The points of the object, for write access. The set is duplicated
        first if shared with other objects, and the cached connectedness is
        forgotten.
        """
        self._connectedness = Connectedness.UNKNOWN
        return self._point_set.get_mutable()

    @property
    def domain(self) -> HyperRectDomain:
        return self.point_set.domain

    @property
    def topology(self) -> DigitalTopology:
        return self._topology.get()

    @property
    def adjacency(self) -> Adjacency:
        """The foreground adjacency."""
        return self.topology.foreground()

    def size(self) -> int:
        return len(self.point_set)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Point]:
        return iter(self.point_set)

    def __contains__(self, p: object) -> bool:
        return p in self.point_set

    def _with_points(self, points: Iterable[Point], **kwargs) -> DigitalObject:
        """Object of the same topology on the given points."""
        return DigitalObject.adopt(
            self._topology, DigitalSet(self.domain, points), **kwargs
        )

    # Neighborhoods

    def _kappa_neighbors(self, p: Point) -> Iterator[Point]:
        point_set = self.point_set
        yield from (q for q in self.adjacency.proper_neighbors(p) if q in point_set)

    def neighborhood(self, p: Point) -> DigitalObject:
        """
        The object intersected with the kappa-neighborhood of p, p included
        if it belongs to the object.

        Args:
            p: any point of the domain, not necessarily in the object.
        """
        points = list(self._kappa_neighbors(p))
        if p in self.point_set:
            points.append(p)
        return self._with_points(points)

    def neighborhood_size(self, p: Point) -> int:
        """Cardinal of neighborhood(p), without building it."""
        return self.proper_neighborhood_size(p) + (1 if p in self.point_set else 0)

    def proper_neighborhood(self, p: Point) -> DigitalObject:
        """The object intersected with the kappa-neighborhood of p, minus p."""
        return self._with_points(self._kappa_neighbors(p))

    def proper_neighborhood_size(self, p: Point) -> int:
        return sum(1 for _ in self._kappa_neighbors(p))

    # Border

    def border(self) -> DigitalObject:
        """
        The points of the object which are lambda-adjacent to some point of
        the domain outside the object.
        """
        background = self.topology.background()
        point_set = self.point_set
        domain = self.domain

        def touches_complement(p: Point) -> bool:
            return any(
                q in domain and q not in point_set
                for q in background.proper_neighbors(p)
            )

        return self._with_points(p for p in point_set if touches_complement(p))

    # Connectedness

    def connectedness(self) -> Connectedness:
        """The cached connectedness, UNKNOWN if never computed."""
        return self._connectedness

    def compute_connectedness(self) -> Connectedness:
        """
        Connectedness of the object, computed by a single traversal the first
        time and cached afterwards. Never returns UNKNOWN.
        """
        if self._connectedness != Connectedness.UNKNOWN:
            return self._connectedness

        point_set = self.point_set
        if point_set.empty():
            self._connectedness = Connectedness.CONNECTED
            return self._connectedness

        seed = next(iter(point_set))
        visited = breadth_first_layers([seed], self._kappa_neighbors)
        if len(visited) == len(point_set):
            self._connectedness = Connectedness.CONNECTED
        else:
            self._connectedness = Connectedness.DISCONNECTED
        logger.debug(
            f"Reached {len(visited)}/{len(point_set)} points from {seed}: "
            f"{self._connectedness.name}"
        )
        return self._connectedness

    def components(self) -> list[DigitalObject]:
        """
        The kappa-connected components of the object, in the order of their
        smallest point. Each component shares the topology of this object and
        is known to be CONNECTED.
        """
        point_set = self.point_set
        adjacency = self.adjacency
        parts = nodes_to_connected_components(point_set, adjacency.proper_neighbors)

        if self._connectedness == Connectedness.UNKNOWN:
            self._connectedness = (
                Connectedness.CONNECTED if len(parts) <= 1 else Connectedness.DISCONNECTED
            )
        logger.debug(f"Found {len(parts)} components in {len(point_set)} points")

        return [
            self._with_points(part, connectedness=Connectedness.CONNECTED)
            for part in parts
        ]

    def write_components(self, sink: Callable[[DigitalObject], object]) -> int:
        """
        Emits each connected component to sink (e.g. list.append) and returns
        their number.

        Components are all computed before the first emission, so sink may
        grow a container holding this very object.
        """
        parts = self.components()
        for part in parts:
            sink(part)
        return len(parts)

    # Geodesic neighborhoods

    def geodesic_neighborhood(
        self, adjacency: Adjacency, p: Point, k: int
    ) -> DigitalObject:
        """
        The points of the object reachable from p by a path of at most k
        adjacency steps going through points of the object.

        p is part of the result iff it belongs to the object.
        """
        point_set = self.point_set
        return self._with_points(
            _reachable(adjacency, p, k, lambda q: q in point_set)
        )

    def geodesic_neighborhood_in_complement(
        self, adjacency: Adjacency, p: Point, k: int
    ) -> DigitalObject:
        """
        Same as geodesic_neighborhood in the complement of the object within
        its domain. The result has the reversed topology.
        """
        point_set = self.point_set
        domain = self.domain
        points = _reachable(
            adjacency, p, k, lambda q: q in domain and q not in point_set
        )
        return DigitalObject.adopt(
            self.topology.reversed(), DigitalSet(domain, points)
        )

    def complement(self) -> DigitalObject:
        """The points of the domain outside the object, with the reversed topology."""
        return DigitalObject.adopt(self.topology.reversed(), self.point_set.complement())

    # Simple points

    def neighborhood_configuration(self, v: Point) -> tuple[int, int]:
        """
        Bit masks describing the proper full-ball neighborhood of v (8 points
        in 2D, 26 in 3D): bit i of the first mask is set when the i-th
        neighbor belongs to the object, bit i of the second when it lies in
        the domain.
        """
        point_set = self.point_set
        domain = self.domain
        in_object = 0
        in_domain = 0
        for i, offset in enumerate(_ball_offsets(self.topology.dimension)):
            q = translate(v, offset)
            if q in domain:
                in_domain |= 1 << i
                if q in point_set:
                    in_object |= 1 << i
        return in_object, in_domain

    def topological_numbers(self, v: Point) -> tuple[int, int]:
        """
        Number of kappa-components of the geodesic neighborhood of v in the
        object and number of lambda-components of the geodesic neighborhood
        of v in the complement.
        """
        assert v in self.domain, f"{v} is outside {self.domain}"
        in_object, in_domain = self.neighborhood_configuration(v)
        return _configuration_topological_numbers(self.topology, in_object, in_domain)

    def is_simple(self, v: Point) -> bool:
        """
        [Bertrand, 1994] A voxel v is simple for a set X if
        #C6[G6(v, X)] = #C18[G18(v, X^c)] = 1, where #Ck[Y] denotes the
        number of k-connected components of a set Y.

        This is adapted to (kappa, lambda) connectednesses, and only valid
        for Jordan couples in dimension 2 and 3.
        """
        return self.topological_numbers(v) == (1, 1)

    # Interface

    def is_valid(self) -> bool:
        """Checks the validity/consistency of the object."""
        return (
            self.point_set.is_valid()
            and self.topology.dimension == self.domain.dimension
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitalObject):
            return NotImplemented
        return self.topology == other.topology and self.point_set == other.point_set

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"[Object topology={self.topology} size={self.size()}"
            f" connectedness={self._connectedness.name} domain={self.domain}]"
        )

    def __repr__(self) -> str:
        return f"DigitalObject({self.topology!r}, {self.point_set!r})"


def _reachable(
    adjacency: Adjacency, p: Point, k: int, is_member: Callable[[Point], bool]
) -> list[Point]:
    """Members reachable from p by paths of at most k steps through members."""

    def neighbours(q: Point) -> Iterator[Point]:
        return (r for r in adjacency.proper_neighbors(q) if is_member(r))

    visited = breadth_first_layers([p], neighbours, max_depth=k)
    return [q for q in visited if q != p or is_member(p)]


@cache
def _ball_offsets(dimension: int) -> tuple[Vector, ...]:
    return make_offsets(dimension, dimension)


def _geodesic_component_count(
    adjacency: Adjacency, partner: Adjacency, members: frozenset[Vector]
) -> int:
    """
    Number of adjacency-components of the geodesic neighborhood of the origin
    within members, a subset of its proper full-ball neighborhood.
    """
    origin = (0,) * adjacency.dimension

    def neighbours(q: Vector) -> Iterator[Vector]:
        return (r for r in adjacency.proper_neighbors(q) if r in members)

    seeds = list(neighbours(origin))
    # seeds are at distance 1 from the origin
    order = geodesic_order(adjacency, partner)
    geodesic = breadth_first_layers(seeds, neighbours, max_depth=order - 1)
    return count_connected_components(geodesic.keys(), neighbours)


def _count_configuration_components(
    topology: DigitalTopology, in_object: int, in_domain: int
) -> tuple[int, int]:
    offsets = _ball_offsets(topology.dimension)
    foreground = frozenset(offsets[i] for i in set_bit_indices(in_object))
    background = frozenset(offsets[i] for i in set_bit_indices(in_domain & ~in_object))
    kappa = topology.foreground()
    lambda_ = topology.background()
    return (
        _geodesic_component_count(kappa, lambda_, foreground),
        _geodesic_component_count(lambda_, kappa, background),
    )


_cached_configuration_components = lru_cache(maxsize=SIMPLE_CONFIGURATION_CACHE_SIZE)(
    _count_configuration_components
)


def _configuration_topological_numbers(
    topology: DigitalTopology, in_object: int, in_domain: int
) -> tuple[int, int]:
    """Memoised per configuration when the adjacencies of topology are hashable."""
    try:
        hash(topology)
    except TypeError:
        return _count_configuration_components(topology, in_object, in_domain)
    return _cached_configuration_components(topology, in_object, in_domain)
