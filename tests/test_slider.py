"""Tests for time-travel slider math."""

import datetime

import pytest

from daylight.data.timezones import TimeZoneItem
from daylight.geometry import DaySegment
from daylight.slider import (
    clamp_offset,
    knob_position,
    slider_label,
    snap_offset,
    tick_marks,
    track_segments,
)

UTC = datetime.timezone.utc


@pytest.fixture
def chennai():
    return TimeZoneItem("Asia/Kolkata", "Chennai", "IST", is_home=True)


class TestSnapOffset:
    """Tests for snapping to quarter-hour clock marks."""

    def test_lands_on_clock_mark(self):
        now = datetime.datetime(2024, 1, 15, 10, 7, tzinfo=UTC)
        offset = snap_offset(1.0, now)
        assert offset == pytest.approx(1.0 - 7 / 60)
        target = now + datetime.timedelta(hours=offset)
        assert round(target.minute + target.second / 60) % 15 == 0

    def test_zero_drag_snaps_to_nearest_mark(self):
        now = datetime.datetime(2024, 1, 15, 10, 7, tzinfo=UTC)
        assert snap_offset(0.0, now) == pytest.approx(-7 / 60)

    def test_half_step_rounds_away_from_zero(self, noon_utc):
        assert snap_offset(0.125, noon_utc) == pytest.approx(0.25)
        assert snap_offset(-0.125, noon_utc) == pytest.approx(-0.25)

    def test_clamped_to_window(self, noon_utc):
        assert snap_offset(20.0, noon_utc) == 12.0
        assert snap_offset(-20.0, noon_utc) == -12.0

    def test_hourly_snapping(self):
        now = datetime.datetime(2024, 1, 15, 10, 40, tzinfo=UTC)
        offset = snap_offset(2.0, now, snap_minutes=60)
        assert offset == pytest.approx(3.0 - 40 / 60)

    def test_clamp_offset(self):
        assert clamp_offset(5.5) == 5.5
        assert clamp_offset(13) == 12
        assert clamp_offset(-13) == -12


class TestKnobAndTicks:
    """Tests for knob and tick placement."""

    @pytest.mark.parametrize(
        "offset,expected", [(0, 120.0), (12, 240.0), (-12, 0.0), (-6, 60.0)]
    )
    def test_knob_position(self, offset, expected):
        assert knob_position(offset, 240) == expected

    def test_tick_layout(self):
        ticks = tick_marks(160, 80)
        assert len(ticks) == 17
        assert [t.x for t in ticks[:3]] == [0.0, 10.0, 20.0]
        assert ticks[-1].x == 160.0
        assert [t.major for t in ticks[:4]] == [True, False, True, False]

    def test_tick_at_knob(self):
        ticks = tick_marks(160, 80)
        assert [i for i, t in enumerate(ticks) if t.at_knob] == [8]

    def test_no_ticks_for_empty_track(self):
        assert tick_marks(0, 0) == []
        assert tick_marks(160, 0, count=1) == []


class TestSliderLabel:
    """Tests for the slider label text."""

    def test_now(self, chennai, noon_utc):
        assert slider_label(0.005, chennai, noon_utc) == "Now"

    def test_home_time(self, chennai, noon_utc):
        assert slider_label(2.0, chennai, noon_utc) == "7:30PM"

    def test_relative_without_home(self, noon_utc):
        assert slider_label(3.0, None, noon_utc) == "3h later"
        assert slider_label(-2.0, None, noon_utc) == "2h earlier"
        assert slider_label(2.5, None, noon_utc) == "3h later"


class TestTrackSegments:
    """Tests for the slider track daylight ranges."""

    def test_without_home_uses_noon(self, noon_utc):
        assert track_segments(None, 240, noon_utc) == [DaySegment(60.0, 120.0)]

    def test_home_hour(self, chennai, noon_utc):
        # Chennai is at 17:30
        assert track_segments(chennai, 240, noon_utc) == [DaySegment(5.0, 120.0)]

    def test_zero_width_track(self, chennai, noon_utc):
        assert track_segments(chennai, 0, noon_utc) == []
