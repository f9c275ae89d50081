"""Main list view - one day/night card per saved timezone."""

import datetime
from typing import TYPE_CHECKING, Optional

from PIL import Image, ImageDraw

from ..geometry import calculate_day_segments
from .base import BaseView, draw_day_bar, text_width
from .colors import BLACK, HOME_ACCENT
from .theme import Theme

if TYPE_CHECKING:
    from ..config import Config
    from ..data.store import TimeZoneStore

HEADER_HEIGHT = 60
ROW_SPACING = 2
MARGIN = 16


class TimeZoneListView(BaseView):
    """Scrollable list of timezone cards, shifted by the slider offset."""

    name = "list"

    def __init__(
        self,
        config: "Config",
        store: "TimeZoneStore",
        hour_offset: float = 0.0,
        theme: Optional[Theme] = None,
    ):
        super().__init__(config, theme)
        self.store = store
        self.hour_offset = hour_offset

    @property
    def size(self) -> tuple[int, int]:
        rows = len(self.store.time_zones)
        row_block = self.config.display.row_height + ROW_SPACING
        return (self.config.display.width, HEADER_HEIGHT + rows * row_block + MARGIN)

    @property
    def card_width(self) -> int:
        return self.config.display.width - 2 * MARGIN

    def render_content(
        self,
        draw: ImageDraw.ImageDraw,
        image: Image.Image,
        now: datetime.datetime,
    ) -> None:
        draw.text(
            (15, 12), "Daylight", fill=self.theme.header_text, font=self.get_bold_font(30)
        )

        y = HEADER_HEIGHT
        row_height = self.config.display.row_height
        for tz in self.store.sorted_by_offset(now):
            self._render_card(draw, image, tz, y, now)
            y += row_height + ROW_SPACING

        if self.config.appearance.show_center_line and self.store.time_zones:
            center_x = MARGIN + self.card_width // 2
            draw.line(
                ((center_x, HEADER_HEIGHT), (center_x, y - ROW_SPACING)),
                fill=self.theme.center_line,
                width=1,
            )

    def _render_card(self, draw, image, tz, y: int, now: datetime.datetime) -> None:
        """Render one card: day/night bar with time and city overlaid."""
        theme = self.theme
        row_height = self.config.display.row_height

        segments = calculate_day_segments(
            tz.fractional_hour(self.hour_offset, now),
            self.config.display.card_window_hours,
            self.card_width,
        )
        draw_day_bar(
            image,
            MARGIN,
            y,
            self.card_width,
            row_height,
            segments,
            theme.night_block,
            radius=5,
        )

        # Text sits on either gradient or night block
        daylight = tz.is_daylight(self.hour_offset, now)
        text_color = BLACK if daylight else theme.night_text
        font_small = self.get_font(12)
        font_time = self.get_bold_font(30)
        font_city = self.get_bold_font(16)

        home = self.store.home
        if home is not None and home.id == tz.id:
            draw.ellipse(
                ((MARGIN + 12, y + 14), (MARGIN + 20, y + 22)), fill=HOME_ACCENT
            )
            header = tz.day_date_label(self.hour_offset, now)
        else:
            offset = tz.offset_from_home(home, now)
            day_date = tz.day_date_label(self.hour_offset, now)
            header = f"{offset}  {day_date}" if offset else day_date
        draw.text((MARGIN + 26, y + 10), header, fill=text_color, font=font_small)

        draw.text(
            (MARGIN + 12, y + 30),
            tz.formatted_time(self.hour_offset, now),
            fill=text_color,
            font=font_time,
        )

        draw.text(
            (MARGIN + 12, y + row_height - 30),
            tz.city_name,
            fill=text_color,
            font=font_city,
        )
        abbreviation_x = MARGIN + self.card_width - 12 - text_width(
            draw, tz.abbreviation, font_small
        )
        draw.text(
            (abbreviation_x, y + row_height - 26),
            tz.abbreviation,
            fill=text_color,
            font=font_small,
        )
