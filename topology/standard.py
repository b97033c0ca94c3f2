"""
Standard adjacencies and Jordan topologies of Z^2 and Z^3.
"""

from types import SimpleNamespace

from localtypes import DigitalTopologyProperties

from .adjacency import MetricAdjacency
from .digital_topology import DigitalTopology

_JORDAN = DigitalTopologyProperties.JORDAN_DT

_adj4 = MetricAdjacency(2, 1)
_adj8 = MetricAdjacency(2, 2)

Z2i = SimpleNamespace(
    adj4=_adj4,
    adj8=_adj8,
    dt4_8=DigitalTopology(_adj4, _adj8, _JORDAN),
    dt8_4=DigitalTopology(_adj8, _adj4, _JORDAN),
)

_adj6 = MetricAdjacency(3, 1)
_adj18 = MetricAdjacency(3, 2)
_adj26 = MetricAdjacency(3, 3)

Z3i = SimpleNamespace(
    adj6=_adj6,
    adj18=_adj18,
    adj26=_adj26,
    dt6_18=DigitalTopology(_adj6, _adj18, _JORDAN),
    dt18_6=DigitalTopology(_adj18, _adj6, _JORDAN),
    dt6_26=DigitalTopology(_adj6, _adj26, _JORDAN),
    dt26_6=DigitalTopology(_adj26, _adj6, _JORDAN),
)
