"""Pytest fixtures for Daylight tests."""

import datetime
import json
import sys
from pathlib import Path

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from daylight.data.store import TimeZoneStore  # noqa: E402
from daylight.views.theme import ThemeManager  # noqa: E402


@pytest.fixture(autouse=True)
def reset_theme_manager():
    """Keep the theme singleton from leaking between tests."""
    ThemeManager.reset()
    yield
    ThemeManager.reset()


@pytest.fixture
def noon_utc():
    """Monday 2024-01-15 12:00 UTC (Chennai 17:30, San Francisco 04:00)."""
    return datetime.datetime(2024, 1, 15, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "timezones.json"


@pytest.fixture
def store(store_path):
    """Store seeded with the default Chennai/San Francisco/Dubai list."""
    return TimeZoneStore(store_path)


@pytest.fixture
def sample_config_dict(store_path):
    """Sample configuration dictionary."""
    return {
        "display": {"width": 390, "row_height": 108, "card_window_hours": 12},
        "store": {"path": str(store_path)},
        "appearance": {"theme": "dark", "show_center_line": True},
        "widgets": {
            "timeline_entries": 3,
            "entry_interval_minutes": 1,
            "medium": ["Asia/Tokyo_Tokyo", "Europe/London_London"],
        },
        "slider": {"snap_minutes": 15, "tick_count": 17},
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_dict):
    """Create a temporary config file."""
    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def sample_config(sample_config_dict):
    """Create a Config object from sample data."""
    from daylight.config import _dict_to_config

    return _dict_to_config(sample_config_dict)
