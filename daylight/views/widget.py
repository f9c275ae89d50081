"""Small, medium and large widget previews."""

import datetime
from typing import TYPE_CHECKING, Optional

from PIL import Image, ImageDraw

from ..widgets import DaylightEntry, WidgetFamily, row_segments
from .base import BaseView, draw_day_bar, text_width
from .colors import interpolate
from .theme import Theme

if TYPE_CHECKING:
    from ..config import Config

PADDING_X = 16
PADDING_Y = 18
ROW_BAR_HEIGHT = 6
ROW_SPACING = 8


class WidgetView(BaseView):
    """Renders one timeline entry at a widget size."""

    def __init__(
        self,
        config: "Config",
        family: WidgetFamily,
        entry: DaylightEntry,
        theme: Optional[Theme] = None,
    ):
        super().__init__(config, theme)
        self.family = family
        self.entry = entry
        self.name = f"widget_{family.value}"

    @property
    def size(self) -> tuple[int, int]:
        return self.family.size

    @property
    def text_color(self) -> tuple[int, int, int]:
        return self.theme.header_text

    def paint_background(self, image: Image.Image) -> None:
        """Vertical gradient, top to bottom."""
        draw = ImageDraw.Draw(image)
        width, height = image.size
        top = self.theme.widget_background_top
        bottom = self.theme.widget_background_bottom
        for y in range(height):
            t = y / (height - 1) if height > 1 else 0.0
            draw.line(((0, y), (width, y)), fill=interpolate(top, bottom, t))

    def render_content(
        self,
        draw: ImageDraw.ImageDraw,
        image: Image.Image,
        now: datetime.datetime,
    ) -> None:
        if self.family is WidgetFamily.SMALL:
            self._render_small(draw, now)
        else:
            self._render_rows(draw, image, now)

    def _render_small(self, draw: ImageDraw.ImageDraw, now: datetime.datetime) -> None:
        """Single zone: offset from home, time, city and abbreviation."""
        zones = self.entry.time_zones
        if not zones:
            return
        tz = zones[0]
        home = self.entry.home_time_zone
        color = self.text_color
        x = 18
        height = self.size[1]

        if home is not None and home.identifier == tz.identifier:
            # Home marker
            draw.polygon(((x, 28), (x + 10, 18), (x + 6, 28)), fill=color)
        else:
            offset = tz.offset_from_home(home, now, match_identifier=True)
            if offset:
                draw.text((x, 16), offset, fill=color, font=self.get_font(9))

        draw.text(
            (x, 34), tz.formatted_time(0, now), fill=color, font=self.get_bold_font(24)
        )
        draw.text(
            (x, height - 48), tz.city_name, fill=color, font=self.get_bold_font(12)
        )
        draw.text(
            (x, height - 30), tz.abbreviation, fill=color, font=self.get_font(9)
        )

    def _render_rows(
        self,
        draw: ImageDraw.ImageDraw,
        image: Image.Image,
        now: datetime.datetime,
    ) -> None:
        """One labelled day/night bar per zone, with a center line."""
        width, height = self.size
        bar_width = width - 2 * PADDING_X
        font = self.get_font(9)
        color = self.text_color
        zones = self.entry.time_zones[: self.family.max_zones]

        y = PADDING_Y
        for tz in zones:
            time_text = tz.formatted_time(0, now)
            draw.text((PADDING_X, y), tz.city_name, fill=color, font=font)
            draw.text(
                (PADDING_X + bar_width - text_width(draw, time_text, font), y),
                time_text,
                fill=color,
                font=font,
            )
            bar_y = y + 14
            draw_day_bar(
                image,
                PADDING_X,
                bar_y,
                bar_width,
                ROW_BAR_HEIGHT,
                row_segments(tz, bar_width, now),
                self.theme.widget_night,
            )
            y = bar_y + ROW_BAR_HEIGHT + ROW_SPACING

        center_x = width // 2
        draw.line(
            ((center_x, 0), (center_x, height)),
            fill=self.theme.widget_center_line,
            width=1,
        )
