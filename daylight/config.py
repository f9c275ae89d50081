"""Configuration loading and validation for Daylight."""

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

logger = logging.getLogger(__name__)

# Default paths to search for config
CONFIG_PATHS = [
    Path("config.json"),
    Path.home() / ".config" / "daylight" / "config.json",
    Path("/etc/daylight/config.json"),
]

DEFAULT_STORE_PATH = "~/.config/daylight/timezones.json"


@dataclass
class DisplayConfig:
    """Main list layout."""

    width: int = 390
    row_height: int = 108
    card_window_hours: float = 12.0

    def validate(self) -> list[str]:
        errors = []
        if self.width <= 0:
            errors.append(f"Invalid display width: {self.width}")
        if self.row_height <= 0:
            errors.append(f"Invalid row_height: {self.row_height}")
        if not 0 < self.card_window_hours <= 12:
            errors.append(
                f"Invalid card_window_hours {self.card_window_hours}: must be 0-12"
            )
        return errors


@dataclass
class StoreConfig:
    """Where the timezone list is saved."""

    path: str = DEFAULT_STORE_PATH

    def validate(self) -> list[str]:
        if not self.path:
            return ["Store path must not be empty"]
        return []


@dataclass
class AppearanceConfig:
    """Appearance settings."""

    theme: Literal["system", "light", "dark"] = "dark"
    show_center_line: bool = True

    def validate(self) -> list[str]:
        errors = []
        if self.theme not in ("system", "light", "dark"):
            errors.append(
                f"Invalid theme '{self.theme}': must be 'system', 'light', or 'dark'"
            )
        return errors


@dataclass
class WidgetConfig:
    """Widget timeline settings."""

    timeline_entries: int = 60
    entry_interval_minutes: int = 1
    small: list[str] = field(default_factory=list)
    medium: list[str] = field(default_factory=list)
    large: list[str] = field(default_factory=list)

    def validate(self) -> list[str]:
        errors = []
        if self.timeline_entries < 1:
            errors.append("Timeline entries must be at least 1")
        if self.entry_interval_minutes < 1:
            errors.append("Entry interval must be at least 1 minute")
        return errors


@dataclass
class SliderConfig:
    """Time-travel slider settings."""

    snap_minutes: int = 15
    tick_count: int = 17

    def validate(self) -> list[str]:
        errors = []
        if self.snap_minutes <= 0 or 60 % self.snap_minutes != 0:
            errors.append(
                f"Invalid snap_minutes {self.snap_minutes}: must divide 60"
            )
        if self.tick_count < 2:
            errors.append(f"Invalid tick_count {self.tick_count}: must be >= 2")
        return errors


@dataclass
class Config:
    """Main configuration container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    appearance: AppearanceConfig = field(default_factory=AppearanceConfig)
    widgets: WidgetConfig = field(default_factory=WidgetConfig)
    slider: SliderConfig = field(default_factory=SliderConfig)

    def validate(self) -> list[str]:
        """Validate all configuration sections. Returns list of errors."""
        errors = []
        for section in (
            self.display,
            self.store,
            self.appearance,
            self.widgets,
            self.slider,
        ):
            try:
                errors.extend(section.validate())
            except TypeError as e:
                errors.append(f"Wrong value type in {type(section).__name__}: {e}")
        return errors


def _dataclass_from_dict(cls, data: dict):
    """Create a dataclass instance from a dict, using field defaults for missing keys."""
    if not isinstance(data, dict):
        raise ValueError(
            f"{cls.__name__} section must be an object, got {type(data).__name__}"
        )
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            kwargs[f.name] = f.default_factory()
    unknown = set(data) - {f.name for f in dataclasses.fields(cls)}
    if unknown:
        logger.warning(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**kwargs)


# Mapping from config JSON keys to their dataclass types
_CONFIG_SECTIONS = {
    "display": ("display", DisplayConfig),
    "store": ("store", StoreConfig),
    "appearance": ("appearance", AppearanceConfig),
    "widgets": ("widgets", WidgetConfig),
    "slider": ("slider", SliderConfig),
}


def _dict_to_config(data: dict) -> Config:
    """Convert a dictionary to a Config object."""
    if not isinstance(data, dict):
        raise ValueError(f"Config must be an object, got {type(data).__name__}")
    config = Config()
    for key, (attr, cls) in _CONFIG_SECTIONS.items():
        if key in data:
            setattr(config, attr, _dataclass_from_dict(cls, data[key]))
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Explicit path to config file. If None, searches default paths.

    Returns:
        Config object with loaded settings.

    Raises:
        FileNotFoundError: If no config file found and config_path was explicit.
        ValueError: If config file has validation errors.
    """
    if config_path is not None:
        paths_to_try = [config_path]
    else:
        paths_to_try = CONFIG_PATHS

    found_path = None
    for path in paths_to_try:
        if path.exists():
            found_path = path
            break

    if found_path is None:
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("No config file found, using defaults")
        config = Config()
    else:
        logger.info(f"Loading config from {found_path}")
        try:
            with open(found_path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {found_path}: {e}")
        config = _dict_to_config(data)

    store_override = get_store_path_override()
    if store_override:
        config.store.path = store_override

    errors = config.validate()
    if errors:
        error_msg = "Config validation errors:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ValueError(error_msg)

    return config


def get_store_path_override() -> Optional[str]:
    """
    Get the timezone store path from environment.

    Returns:
        Path string from DAYLIGHT_STORE_PATH, or None if not set.
    """
    return os.environ.get("DAYLIGHT_STORE_PATH") or None
