"""
Tests for the kernel package.

Tests point algebra, domains, digital sets and copy-on-write handles.
"""

import gc

import numpy as np
import pytest

from kernel import (
    CowPtr,
    DigitalSet,
    HyperRectDomain,
    SpaceND,
    difference,
    norm1,
    norm_inf,
    translate,
)


class TestSpace:
    def test_translate_and_difference(self):
        assert translate((1, 2), (-1, 3)) == (0, 5)
        assert difference((1, 2), (3, 3)) == (-2, -1)

    def test_norms(self):
        assert norm1((1, -2, 0)) == 3
        assert norm_inf((1, -2, 0)) == 2
        assert norm_inf(()) == 0

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            translate((1, 2), (1, 2, 3))

    def test_space(self):
        space = SpaceND(3)
        assert space.origin() == (0, 0, 0)
        assert space.is_point((1, 2, 3))
        assert not space.is_point((1, 2))
        with pytest.raises(ValueError):
            SpaceND(0)


class TestHyperRectDomain:
    def test_extent_and_size(self):
        domain = HyperRectDomain((0, 0), (9, 4))
        assert domain.extent() == (10, 5)
        assert domain.size() == 50
        assert domain.dimension == 2

    def test_contains(self):
        domain = HyperRectDomain((-1, -1), (1, 1))
        assert (0, 0) in domain
        assert (-1, 1) in domain
        assert (2, 0) not in domain
        assert (0, 0, 0) not in domain

    def test_iteration_is_lexicographic(self):
        domain = HyperRectDomain((0, 0), (1, 2))
        points = list(domain)
        assert points == sorted(points)
        assert len(points) == domain.size() == 6
        assert points[:3] == [(0, 0), (0, 1), (0, 2)]

    def test_empty_box_is_not_valid(self):
        domain = HyperRectDomain((0, 3), (5, 2))
        assert not domain.is_valid()
        assert domain.size() == 0
        assert list(domain) == []

    def test_bounds_dimension_mismatch(self):
        with pytest.raises(ValueError):
            HyperRectDomain((0, 0), (1, 1, 1))

    def test_bounds_are_normalized(self):
        domain = HyperRectDomain([0, 0], np.array([2, 2]))
        assert domain == HyperRectDomain((0, 0), (2, 2))
        assert str(domain) == "[HyperRectDomain lower=(0, 0) upper=(2, 2)]"


class TestDigitalSet:
    @pytest.fixture
    def domain(self):
        return HyperRectDomain((0, 0), (4, 4))

    def test_sorted_iteration(self, domain):
        s = DigitalSet(domain, [(3, 1), (0, 2), (0, 0)])
        assert list(s) == [(0, 0), (0, 2), (3, 1)]

    def test_insert_and_erase(self, domain):
        s = DigitalSet(domain)
        assert s.empty()
        s.insert((1, 1))
        s.insert((1, 1))
        s.insert_new((2, 2))
        assert len(s) == s.size() == 2
        assert (1, 1) in s
        assert s.erase((1, 1)) == 1
        assert s.erase((1, 1)) == 0
        assert list(s) == [(2, 2)]
        s.clear()
        assert s.empty()

    def test_iteration_reflects_modifications(self, domain):
        s = DigitalSet(domain, [(1, 1)])
        assert list(s) == [(1, 1)]
        s.insert((0, 0))
        assert list(s) == [(0, 0), (1, 1)]

    def test_copy_is_independent(self, domain):
        s = DigitalSet(domain, [(1, 1)])
        clone = s.copy()
        clone.insert((2, 2))
        assert (2, 2) not in s
        assert clone != s

    def test_complement(self, domain):
        s = DigitalSet(domain, [(0, 0), (4, 4)])
        complement = s.complement()
        assert len(complement) == 23
        assert (0, 0) not in complement
        assert (2, 2) in complement

    def test_is_valid(self, domain):
        assert DigitalSet(domain, [(0, 0)]).is_valid()
        assert not DigitalSet(domain, [(5, 0)]).is_valid()

    def test_from_mask(self):
        domain = HyperRectDomain((1, 1), (3, 2))
        mask = np.array([[True, False], [False, False], [False, True]])
        s = DigitalSet.from_mask(domain, mask)
        assert list(s) == [(1, 1), (3, 2)]

    def test_to_mask(self):
        domain = HyperRectDomain((1, 1), (3, 2))
        s = DigitalSet(domain, [(1, 1), (3, 2)])
        expected = np.array([[True, False], [False, False], [False, True]])
        assert np.array_equal(s.to_mask(), expected)

    def test_mask_shape_mismatch(self, domain):
        with pytest.raises(ValueError, match="extent"):
            DigitalSet.from_mask(domain, np.zeros((2, 2), dtype=bool))

    def test_empty_mask(self, domain):
        assert not DigitalSet(domain).to_mask().any()


class TestCowPtr:
    def test_copies_share_until_written(self):
        a = CowPtr([1, 2])
        b = a.copy()
        assert a.get() is b.get()
        assert a.is_shared()
        assert a.owners() == 2

        b.get_mutable().append(3)
        assert a.get() == [1, 2]
        assert b.get() == [1, 2, 3]
        assert not a.shares_with(b)
        assert not a.is_shared()

    def test_sole_owner_writes_in_place(self):
        payload = [1]
        a = CowPtr(payload)
        assert a.get_mutable() is payload

    def test_dropped_copies_do_not_force_a_clone(self):
        payload = [1]
        a = CowPtr(payload)
        b = a.copy()
        assert a.is_shared()
        del b
        gc.collect()
        assert not a.is_shared()
        assert a.get_mutable() is payload

    def test_other_copies_keep_sharing(self):
        a = CowPtr({1})
        b = a.copy()
        c = a.copy()
        c.get_mutable().add(2)
        assert a.shares_with(b)
        assert a.owners() == 2
        assert c.get() == {1, 2}
