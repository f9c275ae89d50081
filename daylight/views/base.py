"""Base view class and shared day/night bar drawing."""

import datetime
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from ..data.timezones import UTC
from ..geometry import DaySegment
from .colors import DAYLIGHT_END, DAYLIGHT_START, interpolate
from .theme import Theme, get_theme

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Font paths (in order of preference)
FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
]

BOLD_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
]


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False) -> Font:
    """
    Load a system font at a size, cached per (size, bold).

    Falls back to the regular face when no bold face exists, and to the
    PIL default font when no system font exists.
    """
    for path in BOLD_FONT_PATHS if bold else FONT_PATHS:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    if bold:
        return load_font(size, bold=False)
    logger.warning(f"No system fonts found for size {size}, using default")
    return ImageFont.load_default()


def text_width(draw: ImageDraw.ImageDraw, text: str, font: Font) -> int:
    bbox = draw.textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0]


def _gradient_strip(
    width: int,
    height: int,
    start: tuple[int, int, int],
    end: tuple[int, int, int],
) -> Image.Image:
    """Horizontal gradient from start (left) to end (right)."""
    strip = Image.new("RGB", (width, height))
    draw = ImageDraw.Draw(strip)
    for i in range(width):
        t = i / (width - 1) if width > 1 else 0.0
        draw.line(((i, 0), (i, height - 1)), fill=interpolate(start, end, t))
    return strip


def draw_day_bar(
    image: Image.Image,
    x: int,
    y: int,
    width: int,
    height: int,
    segments: Sequence[DaySegment],
    night_color: tuple[int, int, int],
    radius: Optional[int] = None,
) -> None:
    """
    Paint a day/night bar: a night capsule with daylight segments on top.

    Args:
        image: Image to paint onto
        x: Left edge of the bar
        y: Top edge of the bar
        width: Bar width in pixels (the width segments were computed for)
        height: Bar height in pixels
        segments: Daylight ranges relative to the bar's left edge
        night_color: Fill for the night background
        radius: Corner radius (default: capsule)
    """
    if width <= 0 or height <= 0:
        return
    if radius is None:
        radius = height // 2

    draw = ImageDraw.Draw(image)
    draw.rounded_rectangle(
        ((x, y), (x + width - 1, y + height - 1)), radius=radius, fill=night_color
    )

    for segment in segments:
        left = int(round(segment.start))
        right = int(round(segment.end))
        seg_width = max(1, right - left)

        strip = _gradient_strip(seg_width, height, DAYLIGHT_START, DAYLIGHT_END)
        mask = Image.new("L", (seg_width, height), 0)
        ImageDraw.Draw(mask).rounded_rectangle(
            ((0, 0), (seg_width - 1, height - 1)),
            radius=min(radius, seg_width // 2),
            fill=255,
        )
        image.paste(strip, (x + left, y), mask)


class BaseView(ABC):
    """
    Abstract base class for all preview views.

    Each view renders to a PIL Image and is responsible for its own
    layout.
    """

    name: str = "base"

    def __init__(self, config: "Config", theme: Optional[Theme] = None):
        """
        Initialize view.

        Args:
            config: Application configuration
            theme: Fixed theme (default: the global ThemeManager's choice)
        """
        self.config = config
        self._theme = theme

    @property
    def theme(self) -> Theme:
        return self._theme if self._theme is not None else get_theme()

    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Image size in pixels."""

    def get_font(self, size: int) -> Font:
        return load_font(size)

    def get_bold_font(self, size: int) -> Font:
        return load_font(size, bold=True)

    def paint_background(self, image: Image.Image) -> None:
        """Fill the whole image. Override for gradients."""
        ImageDraw.Draw(image).rectangle(
            ((0, 0), image.size), fill=self.theme.background
        )

    @abstractmethod
    def render_content(
        self,
        draw: ImageDraw.ImageDraw,
        image: Image.Image,
        now: datetime.datetime,
    ) -> None:
        """
        Render the view content.

        Args:
            draw: ImageDraw instance for the image
            image: The PIL Image being rendered to
            now: Instant being rendered
        """

    def render(self, now: Optional[datetime.datetime] = None) -> Image.Image:
        """
        Render the complete view.

        Args:
            now: Instant to render (default: current UTC time)

        Returns:
            RGB PIL Image
        """
        if now is None:
            now = datetime.datetime.now(UTC)
        image = Image.new("RGB", self.size, self.theme.background)
        self.paint_background(image)
        draw = ImageDraw.Draw(image)
        self.render_content(draw, image, now)
        return image
