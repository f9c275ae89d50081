"""Time-travel slider math: offset snapping, knob and tick placement."""

import datetime
import math
from dataclasses import dataclass
from typing import Optional

from .data.timezones import TimeZoneItem, UTC
from .geometry import DaySegment, calculate_day_segments

# The slider always shows 12 hours either side of now
WINDOW_HALF_HOURS = 12.0
SNAP_MINUTES = 15
TICK_COUNT = 17

# Offsets closer to zero than this read as "Now"
NOW_TOLERANCE = 0.01

# Track hour used when there is no home zone
NO_HOME_HOUR = 12.0


@dataclass(frozen=True)
class TickMark:
    """A dot under the slider track."""

    x: float
    major: bool
    at_knob: bool


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def clamp_offset(offset: float, window_half_hours: float = WINDOW_HALF_HOURS) -> float:
    return max(-window_half_hours, min(window_half_hours, offset))


def snap_offset(
    raw_offset: float,
    now: Optional[datetime.datetime] = None,
    snap_minutes: int = SNAP_MINUTES,
    window_half_hours: float = WINDOW_HALF_HOURS,
) -> float:
    """
    Snap a dragged offset so the target time lands on a clock mark.

    With 15-minute snapping, dragging from 10:07 lands on :00, :15, :30
    or :45 rather than on multiples of 15 minutes from 10:07.

    Args:
        raw_offset: Unsnapped offset in hours
        now: Reference instant (default: current UTC time)
        snap_minutes: Clock interval to snap to
        window_half_hours: Offset limit either side of now

    Returns:
        Offset in hours such that now + offset falls on a snap mark
    """
    if now is None:
        now = datetime.datetime.now(UTC)
    offset = clamp_offset(raw_offset, window_half_hours)
    steps_per_hour = 60 / snap_minutes
    minute_fraction = now.minute / 60.0
    target = minute_fraction + offset
    snapped = _round_half_away(target * steps_per_hour) / steps_per_hour
    return snapped - minute_fraction


def knob_position(
    offset: float,
    track_width: float,
    window_half_hours: float = WINDOW_HALF_HOURS,
) -> float:
    """X position of the knob for an offset, center of the track being now."""
    pixels_per_hour = track_width / (2 * window_half_hours)
    return track_width / 2 + offset * pixels_per_hour


def tick_marks(
    track_width: float,
    knob_x: float,
    count: int = TICK_COUNT,
) -> list[TickMark]:
    """
    Lay out tick dots evenly across the track.

    Even-indexed ticks are major (every 3 hours with 17 ticks). A tick is
    highlighted when the knob sits within half a tick spacing of it.
    """
    if count < 2 or track_width <= 0:
        return []
    spacing = track_width / (count - 1)
    return [
        TickMark(
            x=i * spacing,
            major=i % 2 == 0,
            at_knob=abs(i * spacing - knob_x) < spacing / 2,
        )
        for i in range(count)
    ]


def slider_label(
    offset: float,
    home: Optional[TimeZoneItem],
    now: Optional[datetime.datetime] = None,
) -> str:
    """Text above the track: "Now", the home time, or a relative shift."""
    if abs(offset) < NOW_TOLERANCE:
        return "Now"
    if home is not None:
        return home.formatted_time(offset, now)
    hours = int(_round_half_away(offset))
    direction = "later" if hours > 0 else "earlier"
    return f"{abs(hours)}h {direction}"


def track_segments(
    home: Optional[TimeZoneItem],
    track_width: float,
    now: Optional[datetime.datetime] = None,
) -> list[DaySegment]:
    """Daylight ranges on the slider track, anchored on the home zone's hour."""
    current_hour = home.fractional_hour(0, now) if home is not None else NO_HOME_HOUR
    return calculate_day_segments(current_hour, WINDOW_HALF_HOURS, track_width)
