"""Color definitions and hex parsing."""

import logging
import string

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]


def hex_to_rgba(value: str) -> RGBA:
    """
    Parse a 3, 6 or 8 digit hex color ("F90", "FF9900", "80FF9900").

    Eight-digit values carry alpha first (AARRGGBB). Anything else parses
    as opaque black.
    """
    digits = "".join(c for c in value if c.isalnum())
    if not digits or any(c not in string.hexdigits for c in digits):
        number = 0
    else:
        number = int(digits, 16)

    if len(digits) == 3:
        return (
            (number >> 8) * 17,
            (number >> 4 & 0xF) * 17,
            (number & 0xF) * 17,
            255,
        )
    if len(digits) == 6:
        return (number >> 16, number >> 8 & 0xFF, number & 0xFF, 255)
    if len(digits) == 8:
        return (
            number >> 16 & 0xFF,
            number >> 8 & 0xFF,
            number & 0xFF,
            number >> 24,
        )
    logger.debug(f"Unparseable hex color '{value}', using black")
    return (0, 0, 0, 255)


def hex_to_rgb(value: str) -> RGB:
    r, g, b, _ = hex_to_rgba(value)
    return (r, g, b)


def blend(foreground: RGB, background: RGB, opacity: float) -> RGB:
    """Composite a translucent color over an opaque background."""
    return tuple(
        round(f * opacity + b * (1 - opacity)) for f, b in zip(foreground, background)
    )


def interpolate(start: RGB, end: RGB, t: float) -> RGB:
    return tuple(round(a + (b - a) * t) for a, b in zip(start, end))


class Colors:
    """Semantic color organization for Daylight."""

    class Daylight:
        """Day segment gradient, left to right."""

        START = hex_to_rgb("FFD900")
        END = hex_to_rgb("FF9900")

    class Accent:
        HOME = hex_to_rgb("FF9900")

    class Base:
        BLACK = (0, 0, 0)
        WHITE = (255, 255, 255)


BLACK = Colors.Base.BLACK
WHITE = Colors.Base.WHITE
DAYLIGHT_START = Colors.Daylight.START
DAYLIGHT_END = Colors.Daylight.END
HOME_ACCENT = Colors.Accent.HOME
