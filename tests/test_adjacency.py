"""
Tests for adjacencies and digital topologies.
"""

import pytest

from kernel import HyperRectDomain
from localtypes import DigitalTopologyProperties
from topology import DigitalTopology, MetricAdjacency, Z2i, Z3i, geodesic_order


class TestMetricAdjacency:
    @pytest.mark.parametrize(
        "dimension, max_norm1, expected",
        [(2, 1, 4), (2, 2, 8), (3, 1, 6), (3, 2, 18), (3, 3, 26)],
    )
    def test_neighborhood_size(self, dimension, max_norm1, expected):
        assert MetricAdjacency(dimension, max_norm1).neighborhood_size() == expected

    def test_four_and_eight_adjacency(self):
        assert Z2i.adj4.is_adjacent_to((0, 0), (1, 0))
        assert not Z2i.adj4.is_adjacent_to((0, 0), (1, 1))
        assert Z2i.adj8.is_adjacent_to((0, 0), (1, 1))
        assert not Z2i.adj8.is_adjacent_to((0, 0), (2, 0))

    def test_reflexive_but_not_proper(self):
        assert Z2i.adj4.is_adjacent_to((3, 3), (3, 3))
        assert not Z2i.adj4.is_proper_adjacent_to((3, 3), (3, 3))
        assert Z2i.adj4.is_proper_adjacent_to((3, 3), (3, 4))

    def test_neighbors(self):
        neighbors = Z2i.adj4.neighbors((1, 1))
        assert neighbors[0] == (1, 1)
        assert set(neighbors[1:]) == {(0, 1), (2, 1), (1, 0), (1, 2)}
        assert set(Z2i.adj4.proper_neighbors((1, 1))) == set(neighbors[1:])

    def test_neighbors_are_adjacent(self):
        for adjacency in (Z3i.adj6, Z3i.adj18, Z3i.adj26):
            p = (0, 0, 0)
            for q in adjacency.proper_neighbors(p):
                assert adjacency.is_proper_adjacent_to(p, q)
                assert adjacency.is_proper_adjacent_to(q, p)

    def test_neighbors_in_domain(self):
        domain = HyperRectDomain((0, 0), (3, 3))
        assert set(Z2i.adj4.proper_neighbors_in((0, 0), domain)) == {(1, 0), (0, 1)}
        assert set(Z2i.adj8.neighbors_in((0, 0), domain)) == {
            (0, 0), (1, 0), (0, 1), (1, 1),
        }

    @pytest.mark.parametrize("max_norm1", [0, 3])
    def test_invalid_max_norm1(self, max_norm1):
        with pytest.raises(ValueError):
            MetricAdjacency(2, max_norm1)

    def test_value_semantics(self):
        assert MetricAdjacency(2, 1) == Z2i.adj4
        assert len({MetricAdjacency(2, 1), Z2i.adj4, Z2i.adj8}) == 2

    def test_bounding(self):
        assert Z2i.adj4.bounding() == Z2i.adj8
        assert Z3i.adj6.bounding() == Z3i.adj26

    def test_str(self):
        assert "8-adjacency" in str(Z2i.adj8)


class TestDigitalTopology:
    def test_accessors(self):
        dt = Z2i.dt4_8
        assert dt.foreground() == Z2i.adj4
        assert dt.background() == Z2i.adj8
        assert dt.dimension == 2
        assert dt.is_jordan()

    def test_kappa_and_lambda(self):
        dt = Z3i.dt18_6
        assert dt.kappa() is dt.foreground() is Z3i.adj18
        assert dt.lambda_() is dt.background() is Z3i.adj6
        assert dt.properties() == DigitalTopologyProperties.JORDAN_DT
        assert dt.reversed().kappa() == Z3i.adj6

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Z2i.dt4_8._kappa = Z2i.adj8

    def test_reversed(self):
        assert Z2i.dt4_8.reversed() == Z2i.dt8_4
        assert Z3i.dt6_26.reversed().reversed() == Z3i.dt6_26

    def test_default_properties(self):
        dt = DigitalTopology(Z2i.adj4, Z2i.adj4)
        assert dt.properties() == DigitalTopologyProperties.UNKNOWN_DT
        assert not dt.is_jordan()

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            DigitalTopology(Z2i.adj4, Z3i.adj26)

    def test_hashable(self):
        assert hash(Z2i.dt4_8) == hash(DigitalTopology(
            Z2i.adj4, Z2i.adj8, DigitalTopologyProperties.JORDAN_DT
        ))

    def test_str(self):
        assert "JORDAN_DT" in str(Z2i.dt8_4)


class TestGeodesicOrder:
    @pytest.mark.parametrize(
        "adjacency, partner, expected",
        [
            (Z2i.adj4, Z2i.adj8, 2),
            (Z2i.adj8, Z2i.adj4, 1),
            (Z3i.adj6, Z3i.adj18, 3),
            (Z3i.adj6, Z3i.adj26, 2),
            (Z3i.adj18, Z3i.adj6, 2),
            (Z3i.adj26, Z3i.adj6, 1),
        ],
    )
    def test_orders(self, adjacency, partner, expected):
        assert geodesic_order(adjacency, partner) == expected
