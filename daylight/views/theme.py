"""Light and dark color themes."""

import datetime
import logging
import time
from dataclasses import dataclass
from typing import Literal, Optional

from ..geometry import is_daylight
from .colors import BLACK, WHITE, blend, hex_to_rgb

logger = logging.getLogger(__name__)

ThemeMode = Literal["system", "light", "dark"]


@dataclass(frozen=True)
class Theme:
    """Color theme definition. Translucent colors are pre-blended."""

    background: tuple[int, int, int]
    header_text: tuple[int, int, int]
    night_block: tuple[int, int, int]
    night_text: tuple[int, int, int]
    center_line: tuple[int, int, int]
    slider_track_background: tuple[int, int, int]
    slider_knob: tuple[int, int, int]
    slider_text: tuple[int, int, int]
    tick_mark: tuple[int, int, int]
    close_button: tuple[int, int, int]

    # Widgets draw on a vertical gradient with their own night bar color
    widget_background_top: tuple[int, int, int]
    widget_background_bottom: tuple[int, int, int]
    widget_night: tuple[int, int, int]
    widget_center_line: tuple[int, int, int]

    name: str = "unnamed"


DARK_THEME = Theme(
    name="dark",
    background=BLACK,
    header_text=WHITE,
    night_block=hex_to_rgb("1C1C1D"),
    night_text=hex_to_rgb("757575"),
    center_line=blend(WHITE, BLACK, 0.25),
    slider_track_background=blend(WHITE, BLACK, 0.2),
    slider_knob=WHITE,
    slider_text=WHITE,
    tick_mark=WHITE,
    close_button=blend(WHITE, BLACK, 0.6),
    widget_background_top=BLACK,
    widget_background_bottom=hex_to_rgb("1C1C1D"),
    widget_night=blend(hex_to_rgb("757575"), BLACK, 0.2),
    widget_center_line=blend(WHITE, BLACK, 0.3),
)

LIGHT_THEME = Theme(
    name="light",
    background=WHITE,
    header_text=BLACK,
    night_block=hex_to_rgb("E5E5EA"),
    night_text=hex_to_rgb("3C3C43"),
    center_line=blend(BLACK, WHITE, 0.15),
    slider_track_background=blend(BLACK, WHITE, 0.1),
    slider_knob=WHITE,
    slider_text=BLACK,
    tick_mark=BLACK,
    close_button=blend(BLACK, WHITE, 0.4),
    widget_background_top=WHITE,
    widget_background_bottom=hex_to_rgb("F2F2F7"),
    widget_night=hex_to_rgb("C7C7CC"),
    widget_center_line=blend(BLACK, WHITE, 0.2),
)


class ThemeManager:
    """
    Chooses the light or dark theme from a mode setting.

    In "system" mode the theme follows local daylight, with a 1-minute
    cache to avoid repeated clock reads.
    """

    _instance: Optional["ThemeManager"] = None

    def __init__(self, mode: ThemeMode = "dark"):
        self._mode: ThemeMode = "dark"
        self._cached_theme: Optional[Theme] = None
        self._cache_time: float = 0
        self._cache_duration: float = 60.0
        self.set_mode(mode)

    @classmethod
    def get_instance(cls) -> Optional["ThemeManager"]:
        return cls._instance

    @classmethod
    def initialize(cls, mode: ThemeMode = "dark") -> "ThemeManager":
        """Initialize and return the singleton instance."""
        cls._instance = cls(mode)
        logger.info(f"ThemeManager initialized in {mode} mode")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance. Used primarily for testing."""
        cls._instance = None

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    def set_mode(self, mode: ThemeMode) -> None:
        """
        Set theme mode.

        Args:
            mode: "system", "light", or "dark"

        Raises:
            ValueError: If mode is not recognized
        """
        if mode not in ("system", "light", "dark"):
            raise ValueError(f"Invalid theme mode: {mode}")
        self._mode = mode
        self._cached_theme = None
        logger.debug(f"Theme mode set to: {mode}")

    def is_daytime(self, now: Optional[datetime.datetime] = None) -> bool:
        if now is None:
            now = datetime.datetime.now()
        return is_daylight(now.hour + now.minute / 60.0)

    def get_current_theme(self) -> Theme:
        """Get the current theme, cached for up to a minute."""
        now = time.time()
        if (
            self._cached_theme is not None
            and (now - self._cache_time) < self._cache_duration
        ):
            return self._cached_theme

        if self._mode == "light":
            theme = LIGHT_THEME
        elif self._mode == "dark":
            theme = DARK_THEME
        else:
            theme = LIGHT_THEME if self.is_daytime() else DARK_THEME

        self._cached_theme = theme
        self._cache_time = now
        return theme


def get_theme() -> Theme:
    """
    Get the current theme from the global ThemeManager.

    Falls back to DARK_THEME if ThemeManager not initialized.
    """
    manager = ThemeManager.get_instance()
    if manager is None:
        return DARK_THEME
    return manager.get_current_theme()
