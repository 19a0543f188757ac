"""Tests for topology axiom verification."""

import pytest

from finite_topology import InvalidInputError, is_topology, power_set
from finite_topology.verifier import is_closed

S = frozenset("abc")


class TestIsTopology:
    """Tests for is_topology."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
    def test_discrete_topology(self, n):
        """The power set is always a topology."""
        base = frozenset(range(n))
        assert is_topology(power_set(base), base)

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
    def test_trivial_topology(self, n):
        """{empty, S} is always a topology."""
        base = frozenset(range(n))
        assert is_topology([set(), base], base)

    def test_missing_empty_set(self):
        assert not is_topology([{"a"}, S], S)

    def test_missing_base_set(self):
        assert not is_topology([set(), {"a"}, {"a", "b"}], S)

    def test_nontrivial_missing_trivial_members(self):
        """Dropping either trivial member from a valid topology breaks it."""
        t = [set(), {"a"}, {"a", "b"}, S]
        assert is_topology(t, S)
        assert not is_topology(t[1:], S)
        assert not is_topology(t[:-1], S)

    def test_not_closed_under_union(self):
        assert not is_topology([set(), {"a"}, {"b"}, S], S)

    def test_not_closed_under_intersection(self):
        assert not is_topology([set(), {"a", "b"}, {"b", "c"}, S], S)

    def test_closed_chain(self):
        assert is_topology([set(), {"c"}, {"b", "c"}, S], S)

    def test_member_outside_base(self):
        """A member that is not a subset of the base set disqualifies it."""
        assert not is_topology([set(), S, S | {"z"}], S)

    def test_empty_base(self):
        """On the empty set, {empty} is the only topology."""
        assert is_topology([[]], [])
        assert not is_topology([], [])

    def test_structural_membership(self):
        """Membership is structural, regardless of how subsets were built."""
        t = [[], ["b", "a"], ["c", "b", "a"]]
        assert is_topology(t, ["a", "b", "c"])

    def test_none_base(self):
        with pytest.raises(InvalidInputError):
            is_topology([set()], None)

    def test_none_candidate(self):
        with pytest.raises(InvalidInputError):
            is_topology(None, S)


class TestIsClosed:
    """Tests for the mask-level check."""

    def test_masks(self):
        assert is_closed({0, 0b01, 0b11}, 0b11)
        assert is_closed({0, 0b01, 0b10, 0b11}, 0b11)
        assert not is_closed({0b01, 0b11}, 0b11)
        assert not is_closed({0, 0b011, 0b110, 0b111}, 0b111)
