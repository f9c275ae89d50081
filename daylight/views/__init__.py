"""Preview views for Daylight."""

from .base import BaseView, draw_day_bar
from .slider import SliderView
from .theme import Theme, ThemeManager, DARK_THEME, LIGHT_THEME, get_theme
from .timezone_list import TimeZoneListView
from .widget import WidgetView

__all__ = [
    "BaseView",
    "draw_day_bar",
    "SliderView",
    "TimeZoneListView",
    "WidgetView",
    "Theme",
    "ThemeManager",
    "DARK_THEME",
    "LIGHT_THEME",
    "get_theme",
]
