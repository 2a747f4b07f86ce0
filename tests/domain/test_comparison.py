"""Tests for Daytime ordering and wraparound interval membership."""

from __future__ import annotations

from datetime import datetime

import pytest

from daytime.domain.daytime import END_OF_DAY, START_OF_DAY, Daytime, must

D000000 = START_OF_DAY
D010000 = must(1, 0, 0)
D120000 = must(12, 0, 0)
D230000 = must(23, 0, 0)
D235959 = must(23, 59, 59)
D240000 = END_OF_DAY
DInvalid = Daytime(86401)

VALID_SAMPLE = [D000000, Daytime(1), D010000, D120000, D230000, D235959, D240000]


class TestOrdering:
    @pytest.mark.parametrize(
        "a,b,before,after,compare",
        [
            (D010000, D120000, True, False, -1),
            (D120000, D010000, False, True, 1),
            (D120000, D120000, False, False, 0),
            (D235959, D240000, True, False, -1),
            (D000000, D240000, True, False, -1),
            (D240000, D000000, False, True, 1),
            (D240000, D240000, False, False, 0),
        ],
    )
    def test_before_after_compare(
        self, a: Daytime, b: Daytime, before: bool, after: bool, compare: int
    ) -> None:
        assert a.before(b) is before
        assert a.after(b) is after
        assert a.compare(b) == compare

    def test_equal_is_raw_equality(self) -> None:
        assert D120000.equal(must(12, 0, 0))
        assert not D120000.equal(D010000)
        assert D240000.equal(END_OF_DAY)
        assert not D000000.equal(D240000)

    def test_end_of_day_sorts_last(self) -> None:
        shuffled = [D240000, D120000, D000000, D235959, D010000]
        assert sorted(shuffled) == [D000000, D010000, D120000, D235959, D240000]
        assert max(shuffled) is D240000

    def test_operators(self) -> None:
        assert D000000 < D240000
        assert D240000 > D235959
        assert D120000 <= D120000
        assert D240000 >= D240000

    def test_compare_antisymmetric_and_transitive(self) -> None:
        for a in VALID_SAMPLE:
            assert a.compare(a) == 0
            for b in VALID_SAMPLE:
                assert a.compare(b) == -b.compare(a)
                for c in VALID_SAMPLE:
                    if a.compare(b) < 0 and b.compare(c) < 0:
                        assert a.compare(c) < 0

    def test_comparison_with_other_types_is_unsupported(self) -> None:
        with pytest.raises(TypeError):
            _ = D120000 < 5  # type: ignore[operator]


class TestBetween:
    @pytest.mark.parametrize(
        "d,start,end,expected",
        [
            # Normal interval
            (D120000, D010000, D230000, True),
            (D010000, D010000, D230000, True),
            (D230000, D010000, D230000, True),
            (D000000, D010000, D230000, False),
            (D240000, D010000, D230000, False),
            # End of day as the upper bound is the latest instant
            (D240000, D120000, D240000, True),
            (D235959, D120000, D240000, True),
            (D000000, D000000, D240000, True),
            # Singleton
            (D120000, D120000, D120000, True),
            (D010000, D120000, D120000, False),
            # Wraparound
            (D230000, D230000, D010000, True),
            (D235959, D230000, D010000, True),
            (D240000, D230000, D010000, True),
            (D000000, D230000, D010000, True),
            (D010000, D230000, D010000, True),
            (D120000, D230000, D010000, False),
            # Degenerate wrap [24:00, 00:00] only holds its bounds
            (D240000, D240000, D000000, True),
            (D000000, D240000, D000000, True),
            (D120000, D240000, D000000, False),
            # Invalid operands
            (DInvalid, D000000, D240000, False),
            (D120000, DInvalid, D240000, False),
            (D120000, D000000, DInvalid, False),
        ],
    )
    def test_membership(self, d: Daytime, start: Daytime, end: Daytime, expected: bool) -> None:
        assert d.between(start, end) is expected

    def test_wraparound_law(self) -> None:
        for start in VALID_SAMPLE:
            for end in VALID_SAMPLE:
                if start.seconds <= end.seconds:
                    continue
                for d in VALID_SAMPLE:
                    expected = not d.before(start) or not d.after(end)
                    assert d.between(start, end) is expected


class TestDatetimeComparisons:
    t = datetime(2025, 1, 10, 15, 30, 0)

    def test_equal_datetime(self) -> None:
        assert must(15, 30, 0).equal_datetime(self.t)
        assert not D120000.equal_datetime(self.t)

    def test_before_datetime(self) -> None:
        assert D120000.before_datetime(self.t)
        assert not must(15, 30, 0).before_datetime(self.t)

    def test_after_datetime(self) -> None:
        assert D230000.after_datetime(self.t)
        assert not must(15, 30, 0).after_datetime(self.t)

    def test_end_of_day_after_any_datetime(self) -> None:
        assert D240000.after_datetime(datetime(2025, 1, 10, 23, 59, 59))
