"""
Digital topology over digital sets.

**Adjacency** (adjacency.py)
    Metric adjacencies of Z^n (4, 8 in 2D; 6, 18, 26 in 3D).
    - MetricAdjacency(dimension, max_norm1)

**Digital topology** (digital_topology.py)
    Couples (kappa, lambda) of foreground and background adjacencies.
    - DigitalTopology(kappa, lambda_), reversed()

**Objects** (object.py)
    Point sets with a digital topology: neighborhoods, border,
    connectedness, connected components, simple points.
    - DigitalObject(topology, point_set)

**Standard definitions** (standard.py)
    Z2i and Z3i namespaces of classical adjacencies and Jordan couples.
"""

from .adjacency import MetricAdjacency, make_offsets
from .digital_topology import DigitalTopology, geodesic_order
from .object import DigitalObject
from .standard import Z2i, Z3i

__all__ = [
    # Adjacency
    "MetricAdjacency",
    "make_offsets",
    # Topology
    "DigitalTopology",
    "geodesic_order",
    # Objects
    "DigitalObject",
    # Standard definitions
    "Z2i",
    "Z3i",
]
