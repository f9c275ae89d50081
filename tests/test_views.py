"""Tests for preview views."""

from unittest.mock import patch

import pytest
from PIL import Image

from daylight.geometry import DaySegment
from daylight.views.base import draw_day_bar, load_font
from daylight.views.colors import blend, hex_to_rgb, hex_to_rgba
from daylight.views.slider import SliderView
from daylight.views.theme import (
    DARK_THEME,
    LIGHT_THEME,
    ThemeManager,
    get_theme,
)
from daylight.views.timezone_list import TimeZoneListView
from daylight.views.widget import WidgetView
from daylight.widgets import WidgetFamily, snapshot


class TestColors:
    """Tests for hex parsing and blending."""

    def test_six_digits(self):
        assert hex_to_rgb("FF9900") == (255, 153, 0)

    def test_three_digits_with_hash(self):
        assert hex_to_rgb("#F90") == (255, 153, 0)

    def test_eight_digits_alpha_first(self):
        assert hex_to_rgba("80FF9900") == (255, 153, 0, 128)

    @pytest.mark.parametrize("value", ["", "12345", "zzzzzz"])
    def test_invalid_is_black(self, value):
        assert hex_to_rgba(value) == (0, 0, 0, 255)

    def test_blend(self):
        assert blend((255, 255, 255), (0, 0, 0), 0.2) == (51, 51, 51)


class TestDayBar:
    """Tests for bar painting."""

    def test_paints_day_and_night(self):
        image = Image.new("RGB", (240, 10), (0, 0, 0))
        draw_day_bar(image, 0, 0, 240, 10, [DaySegment(60.0, 120.0)], (28, 28, 29))

        assert image.getpixel((20, 5)) == (28, 28, 29)
        r, g, b = image.getpixel((120, 5))
        assert r == 255 and b == 0
        assert 0x99 <= g <= 0xD9

    def test_gradient_runs_left_to_right(self):
        image = Image.new("RGB", (240, 10), (0, 0, 0))
        draw_day_bar(image, 0, 0, 240, 10, [DaySegment(0.0, 240.0)], (0, 0, 0))
        assert image.getpixel((10, 5))[1] > image.getpixel((230, 5))[1]

    def test_zero_size_is_noop(self):
        image = Image.new("RGB", (10, 10), (1, 2, 3))
        draw_day_bar(image, 0, 0, 0, 10, [], (0, 0, 0))
        assert image.getpixel((5, 5)) == (1, 2, 3)

    def test_font_cached(self):
        assert load_font(14) is load_font(14)


class TestThemeManager:
    """Tests for theme selection."""

    def test_fixed_modes(self):
        manager = ThemeManager("light")
        assert manager.get_current_theme() is LIGHT_THEME
        manager.set_mode("dark")
        assert manager.get_current_theme() is DARK_THEME

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            ThemeManager("sepia")

    @pytest.mark.parametrize("daytime,expected", [(True, LIGHT_THEME), (False, DARK_THEME)])
    def test_system_follows_daylight(self, daytime, expected):
        manager = ThemeManager("system")
        with patch.object(ThemeManager, "is_daytime", return_value=daytime):
            assert manager.get_current_theme() is expected

    def test_get_theme_without_manager(self):
        assert get_theme() is DARK_THEME

    def test_get_theme_uses_singleton(self):
        ThemeManager.initialize("light")
        assert get_theme() is LIGHT_THEME


class TestTimeZoneListView:
    """Tests for the main list preview."""

    def test_size_grows_with_rows(self, sample_config, store):
        view = TimeZoneListView(sample_config, store)
        assert view.size == (390, 60 + 3 * 110 + 16)

    def test_render(self, sample_config, store, noon_utc):
        image = TimeZoneListView(sample_config, store, hour_offset=3).render(noon_utc)
        assert image.mode == "RGB"
        assert image.size == (390, 406)

    def test_light_theme_background(self, sample_config, store, noon_utc):
        image = TimeZoneListView(sample_config, store, theme=LIGHT_THEME).render(
            noon_utc
        )
        assert image.getpixel((2, 2)) == (255, 255, 255)


class TestSliderView:
    """Tests for the slider preview."""

    def test_render_with_home(self, sample_config, store, noon_utc):
        image = SliderView(sample_config, store.home, hour_offset=-4).render(noon_utc)
        assert image.size == (390, 150)

    def test_render_without_home(self, sample_config, noon_utc):
        image = SliderView(sample_config, None).render(noon_utc)
        assert image.size == (390, 150)

    def test_reset_button_while_offset(self, sample_config, store, noon_utc):
        view = SliderView(sample_config, store.home, hour_offset=3)
        image = view.render(noon_utc)
        assert view.close_button_center is not None
        bx, by = view.close_button_center
        assert image.getpixel((bx, by - 6)) == DARK_THEME.close_button

    def test_no_reset_button_at_now(self, sample_config, store, noon_utc):
        view = SliderView(sample_config, store.home, hour_offset=0.005)
        view.render(noon_utc)
        assert view.close_button_center is None


class TestWidgetView:
    """Tests for widget previews."""

    @pytest.mark.parametrize("family", list(WidgetFamily))
    def test_render_sizes(self, sample_config, store, noon_utc, family):
        entry = snapshot(family, None, noon_utc, store)
        image = WidgetView(sample_config, family, entry).render(noon_utc)
        assert image.size == family.size

    def test_background_gradient(self, sample_config, noon_utc):
        entry = snapshot(WidgetFamily.SMALL, None, noon_utc)
        image = WidgetView(
            sample_config, WidgetFamily.SMALL, entry, theme=LIGHT_THEME
        ).render(noon_utc)
        assert image.getpixel((1, 0)) == (255, 255, 255)
        assert image.getpixel((1, 169)) == (242, 242, 247)
