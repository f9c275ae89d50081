"""Tests for daylight segment geometry."""

import math

import pytest

from daylight.geometry import DaySegment, calculate_day_segments, is_daylight

BAR = 240.0
WINDOW = 12.0

# Every quarter hour of the day plus a few awkward fractions
HOURS = [i / 4 for i in range(96)] + [0.01, 5.999, 6.001, 17.999, 18.001, 23.99]


class TestReferenceValues:
    """Known layouts for a 240px bar showing +/-12 hours."""

    def test_noon(self):
        """Noon shows today's daylight centered on the bar."""
        assert calculate_day_segments(12.0, WINDOW, BAR) == [DaySegment(60.0, 120.0)]

    def test_midnight(self):
        """Midnight shows yesterday's evening and tomorrow's morning."""
        assert calculate_day_segments(0.0, WINDOW, BAR) == [
            DaySegment(0.0, 60.0),
            DaySegment(180.0, 60.0),
        ]

    def test_afternoon(self):
        assert calculate_day_segments(13.5, WINDOW, BAR) == [DaySegment(45.0, 120.0)]

    def test_exact_sunrise_boundary(self):
        """At 6:00 daylight starts at the center; yesterday's edge is dropped."""
        assert calculate_day_segments(6.0, WINDOW, BAR) == [DaySegment(120.0, 120.0)]

    def test_exact_sunset_boundary(self):
        """At 18:00 daylight ends at the center; tomorrow's edge is dropped."""
        assert calculate_day_segments(18.0, WINDOW, BAR) == [DaySegment(0.0, 120.0)]

    def test_narrow_window(self):
        """A +/-6 hour window at 6:00 shows only the right half as day."""
        assert calculate_day_segments(6.0, 6.0, 120.0) == [DaySegment(60.0, 60.0)]

    def test_segment_end(self):
        assert DaySegment(45.0, 120.0).end == 165.0


class TestInvariants:
    """Properties that hold for every hour of the day."""

    @pytest.mark.parametrize("hour", HOURS)
    def test_segments_inside_bar(self, hour):
        for segment in calculate_day_segments(hour, WINDOW, BAR):
            assert segment.start >= 0
            assert segment.end <= BAR
            assert segment.width > 0

    @pytest.mark.parametrize("hour", HOURS)
    def test_sorted_and_non_overlapping(self, hour):
        segments = calculate_day_segments(hour, WINDOW, BAR)
        for left, right in zip(segments, segments[1:]):
            assert left.end <= right.start

    @pytest.mark.parametrize("hour", HOURS)
    def test_full_day_window_holds_twelve_hours_of_daylight(self, hour):
        """A 24-hour window always contains exactly 12 hours of day."""
        total = sum(s.width for s in calculate_day_segments(hour, WINDOW, BAR))
        assert total == pytest.approx(BAR / 2)

    def test_continuity_across_midnight(self):
        """Just before and just after midnight draw nearly the same bar."""
        before = calculate_day_segments(23.99, WINDOW, BAR)
        after = calculate_day_segments(0.01, WINDOW, BAR)

        assert len(before) == len(after) == 2
        for a, b in zip(before, after):
            assert a.start == pytest.approx(b.start, abs=0.5)
            assert a.width == pytest.approx(b.width, abs=0.5)

    def test_idempotent(self):
        first = calculate_day_segments(7.25, WINDOW, BAR)
        second = calculate_day_segments(7.25, WINDOW, BAR)
        assert first == second

    def test_hours_outside_day_wrap(self):
        assert calculate_day_segments(25.0, WINDOW, BAR) == calculate_day_segments(
            1.0, WINDOW, BAR
        )
        assert calculate_day_segments(-1.0, WINDOW, BAR) == calculate_day_segments(
            23.0, WINDOW, BAR
        )


class TestDegenerateInput:
    """Bad input yields no segments instead of raising."""

    @pytest.mark.parametrize("width", [0.0, -10.0])
    def test_non_positive_width(self, width):
        assert calculate_day_segments(12.0, WINDOW, width) == []

    @pytest.mark.parametrize("window", [0.0, -1.0])
    def test_non_positive_window(self, window):
        assert calculate_day_segments(12.0, window, BAR) == []

    @pytest.mark.parametrize(
        "args",
        [
            (math.nan, WINDOW, BAR),
            (12.0, math.inf, BAR),
            (12.0, WINDOW, math.nan),
        ],
    )
    def test_non_finite(self, args):
        assert calculate_day_segments(*args) == []


class TestIsDaylight:
    """Tests for the half-open [6, 18) daylight convention."""

    @pytest.mark.parametrize("hour", [6.0, 6.5, 12.0, 17.99])
    def test_day(self, hour):
        assert is_daylight(hour)

    @pytest.mark.parametrize("hour", [0.0, 5.99, 18.0, 23.5])
    def test_night(self, hour):
        assert not is_daylight(hour)

    def test_wraps(self):
        assert is_daylight(30.0)
        assert not is_daylight(-1.0)
