"""Daylight segment geometry shared by every day/night bar."""

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Local fractional-hour interval treated as "day", half-open [6, 18)
DAYLIGHT_START = 6.0
DAYLIGHT_END = 18.0
HOURS_PER_DAY = 24.0

# Yesterday, today, tomorrow relative to the reference point
DAY_OFFSETS = (-1, 0, 1)


@dataclass(frozen=True)
class DaySegment:
    """A horizontal pixel range to paint as daylight."""

    start: float
    width: float

    @property
    def end(self) -> float:
        return self.start + self.width


def is_daylight(hour: float) -> bool:
    """Return True if a local fractional hour falls inside [6, 18)."""
    return DAYLIGHT_START <= hour % HOURS_PER_DAY < DAYLIGHT_END


def calculate_day_segments(
    current_hour: float,
    window_half_hours: float,
    bar_width: float,
) -> list[DaySegment]:
    """
    Compute the daylight pixel ranges visible on a bar centered on "now".

    The bar spans [-window_half_hours, +window_half_hours] around the
    current local hour. Daylight intervals of the previous, current and
    next calendar day are intersected with that window and mapped to
    pixels.

    Args:
        current_hour: Local fractional hour (e.g. 13.5), already shifted
            by any time-travel offset. Values outside [0, 24) are wrapped.
        window_half_hours: Half-width of the visible window in hours
        bar_width: Bar width in pixels

    Returns:
        Segments ordered left to right. Empty for degenerate input.
    """
    if not all(math.isfinite(v) for v in (current_hour, window_half_hours, bar_width)):
        logger.debug(
            f"Non-finite bar input: hour={current_hour} "
            f"window={window_half_hours} width={bar_width}"
        )
        return []
    if bar_width <= 0 or window_half_hours <= 0:
        return []

    hour = current_hour % HOURS_PER_DAY
    pixels_per_hour = bar_width / (2 * window_half_hours)
    center_x = bar_width / 2

    segments = []
    for day_offset in DAY_OFFSETS:
        day_shift = day_offset * HOURS_PER_DAY
        hours_to_start = DAYLIGHT_START + day_shift - hour
        hours_to_end = DAYLIGHT_END + day_shift - hour

        if hours_to_end < -window_half_hours or hours_to_start > window_half_hours:
            continue

        clamped_start = max(-window_half_hours, hours_to_start)
        clamped_end = min(window_half_hours, hours_to_end)

        start_x = max(0.0, center_x + clamped_start * pixels_per_hour)
        end_x = min(bar_width, center_x + clamped_end * pixels_per_hour)
        width = end_x - start_x

        if width > 0:
            segments.append(DaySegment(start=start_x, width=width))

    return segments
