"""Timezone data for Daylight."""

from .catalog import AvailableTimeZone, CATALOG, search_catalog, find_city
from .store import TimeZoneStore, default_time_zones
from .timezones import TimeZoneItem, resolve_zone

__all__ = [
    "AvailableTimeZone",
    "CATALOG",
    "search_catalog",
    "find_city",
    "TimeZoneStore",
    "default_time_zones",
    "TimeZoneItem",
    "resolve_zone",
]
