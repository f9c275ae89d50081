"""Timezone items shown in the main list and widgets."""

import datetime
import logging
import uuid
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..geometry import is_daylight

logger = logging.getLogger(__name__)

UTC = datetime.timezone.utc


@lru_cache(maxsize=None)
def resolve_zone(identifier: str) -> datetime.tzinfo:
    """
    Resolve an IANA identifier, falling back to UTC if it is unknown.

    Args:
        identifier: IANA timezone name (e.g., "Asia/Kolkata")

    Returns:
        tzinfo for the identifier, or UTC
    """
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Unknown timezone '{identifier}', using UTC: {e}")
        return UTC


def _ordinal_suffix(day: int) -> str:
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


@dataclass
class TimeZoneItem:
    """A timezone selected by the user."""

    identifier: str
    city_name: str
    abbreviation: str
    is_home: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def tz(self) -> datetime.tzinfo:
        return resolve_zone(self.identifier)

    def local_time(
        self,
        offset_hours: float = 0,
        now: Optional[datetime.datetime] = None,
    ) -> datetime.datetime:
        """
        Get the local time in this timezone, shifted by an hour offset.

        Args:
            offset_hours: Time-travel offset in hours (may be fractional)
            now: Reference instant (default: current UTC time)

        Returns:
            Timezone-aware local datetime
        """
        if now is None:
            now = datetime.datetime.now(UTC)
        shifted = now + datetime.timedelta(hours=offset_hours)
        return shifted.astimezone(self.tz)

    def fractional_hour(
        self,
        offset_hours: float = 0,
        now: Optional[datetime.datetime] = None,
    ) -> float:
        """Local hour of day with minutes as a fraction (13:30 -> 13.5)."""
        local = self.local_time(offset_hours, now)
        return local.hour + local.minute / 60.0

    def formatted_time(
        self,
        offset_hours: float = 0,
        now: Optional[datetime.datetime] = None,
    ) -> str:
        """Format local time like 1:30PM."""
        local = self.local_time(offset_hours, now)
        hour12 = local.hour % 12 or 12
        suffix = "AM" if local.hour < 12 else "PM"
        return f"{hour12}:{local.minute:02d}{suffix}"

    def is_daylight(
        self,
        offset_hours: float = 0,
        now: Optional[datetime.datetime] = None,
    ) -> bool:
        return is_daylight(self.local_time(offset_hours, now).hour)

    def utc_offset_seconds(self, now: Optional[datetime.datetime] = None) -> int:
        offset = self.local_time(0, now).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def offset_from_home(
        self,
        home: Optional["TimeZoneItem"],
        now: Optional[datetime.datetime] = None,
        match_identifier: bool = False,
    ) -> Optional[str]:
        """
        Describe this zone's UTC offset relative to the home zone.

        Args:
            home: Home timezone item, if any
            now: Reference instant (default: current UTC time)
            match_identifier: Treat items sharing an IANA identifier as the
                home zone instead of comparing ids

        Returns:
            Text such as "+5h 30m" or "-8h", or None for the home zone itself
        """
        if home is None:
            return None
        if match_identifier and home.identifier == self.identifier:
            return None
        if not match_identifier and home.id == self.id:
            return None

        diff_seconds = self.utc_offset_seconds(now) - home.utc_offset_seconds(now)
        diff_minutes = int(diff_seconds / 60)
        hours, minutes = divmod(abs(diff_minutes), 60)

        sign = "+" if diff_minutes >= 0 else "-"
        if minutes == 0:
            return f"{sign}{hours}h"
        return f"{sign}{hours}h {minutes}m"

    def day_date_label(
        self,
        offset_hours: float = 0,
        now: Optional[datetime.datetime] = None,
    ) -> str:
        """Short weekday and ordinal day, e.g. "Mon 3rd"."""
        local = self.local_time(offset_hours, now)
        return f"{local.strftime('%a')} {local.day}{_ordinal_suffix(local.day)}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "identifier": self.identifier,
            "city_name": self.city_name,
            "abbreviation": self.abbreviation,
            "is_home": self.is_home,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TimeZoneItem":
        """
        Build an item from its stored form.

        Raises:
            KeyError: If a required field is missing
        """
        kwargs = {
            "identifier": data["identifier"],
            "city_name": data["city_name"],
            "abbreviation": data["abbreviation"],
            "is_home": bool(data.get("is_home", False)),
        }
        if data.get("id"):
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)
