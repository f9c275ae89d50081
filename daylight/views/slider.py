"""Time-travel slider view."""

import datetime
from typing import TYPE_CHECKING, Optional

from PIL import Image, ImageDraw

from .. import slider
from .base import BaseView, draw_day_bar, text_width
from .colors import DAYLIGHT_END, HOME_ACCENT
from .theme import Theme

if TYPE_CHECKING:
    from ..config import Config
    from ..data.timezones import TimeZoneItem

SLIDER_HEIGHT = 150
TRACK_MARGIN = 36
TRACK_Y = 56
TRACK_HEIGHT = 10
KNOB_RADIUS = 14
LABEL_Y = 14
CLOSE_RADIUS = 9


class SliderView(BaseView):
    """Slider track with daylight segments, knob, ticks and time label."""

    name = "slider"

    def __init__(
        self,
        config: "Config",
        home: Optional["TimeZoneItem"],
        hour_offset: float = 0.0,
        theme: Optional[Theme] = None,
    ):
        super().__init__(config, theme)
        self.home = home
        self.hour_offset = hour_offset
        self.close_button_center: Optional[tuple[int, int]] = None

    @property
    def size(self) -> tuple[int, int]:
        return (self.config.display.width, SLIDER_HEIGHT)

    @property
    def track_width(self) -> int:
        return self.config.display.width - 2 * TRACK_MARGIN

    def render_content(
        self,
        draw: ImageDraw.ImageDraw,
        image: Image.Image,
        now: datetime.datetime,
    ) -> None:
        theme = self.theme
        track_width = self.track_width

        # Label
        label = slider.slider_label(self.hour_offset, self.home, now)
        font_label = self.get_bold_font(18)
        label_x = (self.config.display.width - text_width(draw, label, font_label)) // 2
        draw.text((label_x, LABEL_Y), label, fill=DAYLIGHT_END, font=font_label)

        # Reset button, shown only while time-travelling
        self.close_button_center = None
        if abs(self.hour_offset) >= slider.NOW_TOLERANCE:
            bx = label_x + text_width(draw, label, font_label) + 8 + CLOSE_RADIUS
            by = LABEL_Y + 11
            draw.ellipse(
                (
                    (bx - CLOSE_RADIUS, by - CLOSE_RADIUS),
                    (bx + CLOSE_RADIUS, by + CLOSE_RADIUS),
                ),
                fill=theme.close_button,
            )
            draw.line(((bx - 3, by - 3), (bx + 3, by + 3)), fill=theme.background, width=2)
            draw.line(((bx - 3, by + 3), (bx + 3, by - 3)), fill=theme.background, width=2)
            self.close_button_center = (bx, by)

        # Track
        segments = slider.track_segments(self.home, track_width, now)
        draw_day_bar(
            image,
            TRACK_MARGIN,
            TRACK_Y,
            track_width,
            TRACK_HEIGHT,
            segments,
            theme.slider_track_background,
        )

        # Knob
        knob_x = slider.knob_position(self.hour_offset, track_width)
        cx = TRACK_MARGIN + knob_x
        cy = TRACK_Y + TRACK_HEIGHT // 2
        draw.ellipse(
            ((cx - KNOB_RADIUS, cy - KNOB_RADIUS), (cx + KNOB_RADIUS, cy + KNOB_RADIUS)),
            fill=theme.slider_knob,
            outline=theme.tick_mark,
        )

        # Ticks
        tick_y = TRACK_Y + TRACK_HEIGHT + 18
        for tick in slider.tick_marks(
            track_width, knob_x, self.config.slider.tick_count
        ):
            color = HOME_ACCENT if tick.at_knob else theme.tick_mark
            tx = TRACK_MARGIN + tick.x
            r = 2 if tick.major else 1
            draw.ellipse(((tx - r, tick_y - r), (tx + r, tick_y + r)), fill=color)

        # Home city and current time
        if self.home is not None:
            font = self.get_font(14)
            caption = f"{self.home.city_name}  {self.home.formatted_time(0, now)}"
            caption_x = (
                self.config.display.width - text_width(draw, caption, font)
            ) // 2
            draw.text((caption_x, tick_y + 14), caption, fill=theme.slider_text, font=font)
