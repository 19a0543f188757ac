"""Tests for topology enumeration, progress reporting and cancellation."""

import threading

import pytest

from finite_topology import (
    CancellationToken,
    EnumerationCancelled,
    EnumerationConfig,
    InvalidInputError,
    KNOWN_TOPOLOGY_COUNTS,
    SizeLimitError,
    count_topologies,
    is_topology,
    power_set,
    topologies,
)


class TestTopologies:
    """Tests for the plain enumeration."""

    def test_three_points(self):
        """There are 29 topologies on a 3-point set."""
        S = frozenset("abc")
        result = list(topologies(S))
        assert len(result) == 29
        assert len(set(result)) == 29
        assert all(is_topology(t, S) for t in result)

    def test_empty_set(self):
        """The empty set carries exactly one topology, {empty}."""
        assert list(topologies([])) == [frozenset({frozenset()})]

    def test_single_point(self):
        assert list(topologies(["a"])) == [frozenset({frozenset(), frozenset({"a"})})]

    def test_two_points(self):
        S = frozenset({1, 2})
        result = set(topologies(S))
        assert result == {
            frozenset({frozenset(), S}),
            frozenset({frozenset(), frozenset({1}), S}),
            frozenset({frozenset(), frozenset({2}), S}),
            power_set(S),
        }

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
    def test_known_counts(self, n):
        assert count_topologies(range(n)) == KNOWN_TOPOLOGY_COUNTS[n]

    def test_contains_trivial_and_discrete(self):
        S = frozenset("xyz")
        result = set(topologies(S))
        assert power_set(S) in result
        assert frozenset({frozenset(), S}) in result

    def test_repeatable(self):
        """Re-running gives the same families."""
        S = ["a", "b", "c"]
        assert set(topologies(S)) == set(topologies(S))

    def test_lazy(self):
        """Only as much of the search runs as is consumed."""
        it = topologies("abc")
        first = next(it)
        assert is_topology(first, "abc")

    def test_members_are_frozensets(self):
        for t in topologies([1, 2]):
            assert isinstance(t, frozenset)
            assert all(isinstance(s, frozenset) for s in t)


class TestValidation:
    """Input and size checks happen before any iteration."""

    def test_none(self):
        with pytest.raises(InvalidInputError):
            topologies(None)

    def test_six_elements(self):
        with pytest.raises(SizeLimitError) as exc:
            topologies(range(6))
        assert exc.value.size == 6
        assert exc.value.limit == 5

    def test_five_elements_warns(self):
        """The largest size is accepted but warned about."""
        with pytest.warns(RuntimeWarning):
            topologies(range(5))

    def test_config_lowers_limit(self):
        with pytest.raises(SizeLimitError):
            topologies("abc", config=EnumerationConfig(max_size=2))

    def test_config_cannot_raise_limit(self):
        with pytest.raises(InvalidInputError):
            EnumerationConfig(max_size=6)

    def test_config_interval_positive(self):
        with pytest.raises(InvalidInputError):
            EnumerationConfig(progress_interval=0)


class TestProgress:
    """Tests for progress reporting."""

    def test_reports_and_resets(self):
        """0 at start, periodic percentages, 0 at the end."""
        reports = []
        result = list(topologies(
            "abc",
            progress=reports.append,
            config=EnumerationConfig(progress_interval=16),
        ))
        assert len(result) == 29
        # 64 candidates, one report every 16
        assert reports == [0.0, 0.0, 25.0, 50.0, 75.0, 0.0]

    def test_reports_in_range(self):
        reports = []
        count_topologies(range(4), progress=reports.append)
        assert all(0.0 <= p <= 100.0 for p in reports)
        assert reports[0] == 0.0
        assert reports[-1] == 0.0
        assert max(reports) > 90.0

    def test_reset_when_closed_early(self):
        reports = []
        it = topologies("abc", progress=reports.append)
        next(it)
        it.close()
        assert reports[-1] == 0.0


class TestCancellation:
    """Tests for cooperative cancellation."""

    def test_token_one_shot(self):
        token = CancellationToken()
        assert not token.cancelled
        token.cancel()
        assert token.cancelled
        token.cancel()
        assert token.cancelled

    def test_cancel_midway(self):
        """Cancelling stops at the next candidate and leaves progress at 0."""
        token = CancellationToken()
        reports = []

        def sink(p):
            reports.append(p)
            if p > 0:
                token.cancel()

        found = []
        with pytest.raises(EnumerationCancelled) as exc:
            for t in topologies("abc", progress=sink, token=token,
                                config=EnumerationConfig(progress_interval=10)):
                found.append(t)

        assert exc.value.iterations == 11
        assert reports == [0.0, 0.0, 15.625, 0.0]
        assert len(found) < 29

    def test_cancelled_before_start(self):
        token = CancellationToken()
        token.cancel()
        reports = []
        with pytest.raises(EnumerationCancelled):
            list(topologies("ab", progress=reports.append, token=token))
        assert reports == [0.0, 0.0]

    def test_cancelled_is_not_value_error(self):
        """Cancellation is distinguishable from bad input."""
        assert not issubclass(EnumerationCancelled, ValueError)

    def test_cancel_from_other_thread(self):
        """A cancel from another thread stops the search at its next check."""
        token = CancellationToken()
        started = threading.Event()
        released = threading.Event()
        outcome = {}

        def progress(p):
            # Hold the search at its first report until the cancel is in.
            if not started.is_set():
                started.set()
                released.wait(timeout=10)

        def worker():
            try:
                outcome["count"] = count_topologies(
                    range(4), progress=progress, token=token,
                )
            except EnumerationCancelled as e:
                outcome["cancelled"] = e

        th = threading.Thread(target=worker)
        th.start()
        assert started.wait(timeout=10)
        token.cancel()
        released.set()
        th.join(timeout=30)

        assert not th.is_alive()
        assert "count" not in outcome
        assert outcome["cancelled"].iterations == 0
