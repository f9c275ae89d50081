"""Home-screen widget configuration and timeline generation."""

import datetime
import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from .data.catalog import CATALOG, AvailableTimeZone
from .data.timezones import TimeZoneItem, UTC
from .geometry import DaySegment, calculate_day_segments

if TYPE_CHECKING:
    from .data.store import TimeZoneStore

logger = logging.getLogger(__name__)

ROW_WINDOW_HALF_HOURS = 12.0
TIMELINE_ENTRIES = 60
ENTRY_INTERVAL_MINUTES = 1
RELOAD_POLICY = "at_end"


class WidgetFamily(enum.Enum):
    """Supported widget sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def max_zones(self) -> int:
        return {"small": 1, "medium": 3, "large": 6}[self.value]

    @property
    def kind(self) -> str:
        return f"{self.value.capitalize()}DaylightWidget"

    @property
    def description(self) -> str:
        if self is WidgetFamily.SMALL:
            return "View a single time zone"
        return f"View up to {self.max_zones} time zones"

    @property
    def size(self) -> tuple[int, int]:
        """Preview size in points."""
        return {"small": (170, 170), "medium": (364, 170), "large": (364, 382)}[
            self.value
        ]


@dataclass(frozen=True)
class TimeZoneEntity:
    """A selectable timezone in widget configuration."""

    id: str
    city_name: str
    abbreviation: str

    @property
    def identifier(self) -> str:
        # IANA names may contain underscores, city names never do
        return self.id.rsplit("_", 1)[0]

    def to_time_zone(self, is_home: bool = False) -> TimeZoneItem:
        return TimeZoneItem(
            identifier=self.identifier,
            city_name=self.city_name,
            abbreviation=self.abbreviation,
            is_home=is_home,
        )


def entity_id(tz: AvailableTimeZone) -> str:
    return f"{tz.identifier}_{tz.city_name}"


def _entity_for(tz: AvailableTimeZone) -> TimeZoneEntity:
    return TimeZoneEntity(entity_id(tz), tz.city_name, tz.abbreviation)


def resolve_entities(ids: Iterable[str]) -> list[TimeZoneEntity]:
    """
    Map stored widget selections back to catalog entities.

    Accepts both full entity ids and bare IANA identifiers (which resolve
    to the first catalog city in that zone). Unknown ids are dropped.
    """
    entities = []
    for wanted in ids:
        match = next(
            (
                tz
                for tz in CATALOG
                if tz.identifier == wanted or entity_id(tz) == wanted
            ),
            None,
        )
        if match is None:
            logger.debug(f"Ignoring unknown widget timezone '{wanted}'")
            continue
        entities.append(_entity_for(match))
    return entities


def suggested_entities() -> list[TimeZoneEntity]:
    return [_entity_for(tz) for tz in CATALOG]


def default_entity() -> TimeZoneEntity:
    return TimeZoneEntity("America/Los_Angeles_San Francisco", "San Francisco", "PST")


def sample_time_zones(family: WidgetFamily) -> list[TimeZoneItem]:
    """Zones shown in the widget gallery and when nothing is configured."""
    if family is WidgetFamily.SMALL:
        return [default_entity().to_time_zone()]
    samples = [
        TimeZoneItem("Asia/Kolkata", "Chennai", "IST", is_home=True),
        TimeZoneItem("America/Los_Angeles", "San Francisco", "PST"),
        TimeZoneItem("America/Chicago", "Dallas", "CST"),
        TimeZoneItem("Europe/London", "London", "GMT"),
        TimeZoneItem("Asia/Tokyo", "Tokyo", "JST"),
        TimeZoneItem("Australia/Sydney", "Sydney", "AEST"),
    ]
    return samples[: family.max_zones]


def configured_zones(
    family: WidgetFamily, ids: Optional[Iterable[str]] = None
) -> list[TimeZoneItem]:
    """Zones a widget shows for its configured selection."""
    entities = resolve_entities(ids or [])[: family.max_zones]
    if not entities:
        return sample_time_zones(family)
    return [entity.to_time_zone() for entity in entities]


@dataclass
class DaylightEntry:
    """One precomputed widget state."""

    date: datetime.datetime
    time_zones: list[TimeZoneItem]
    saved_home: Optional[TimeZoneItem] = None

    @property
    def home_time_zone(self) -> Optional[TimeZoneItem]:
        if self.saved_home is not None:
            return self.saved_home
        return self.time_zones[0] if self.time_zones else None


@dataclass
class Timeline:
    """Entries to display in order, and when to ask for more."""

    entries: list[DaylightEntry]
    policy: str = RELOAD_POLICY


def build_timeline(
    family: WidgetFamily,
    ids: Optional[Iterable[str]] = None,
    now: Optional[datetime.datetime] = None,
    store: Optional["TimeZoneStore"] = None,
    entries: int = TIMELINE_ENTRIES,
    interval_minutes: int = ENTRY_INTERVAL_MINUTES,
) -> Timeline:
    """
    Precompute widget entries at a fixed minute interval.

    Args:
        family: Widget size
        ids: Configured entity ids
        now: First entry time (default: current UTC time)
        store: Saved list supplying the home zone
        entries: Number of entries to generate
        interval_minutes: Minutes between entries

    Returns:
        Timeline reloaded once its last entry is reached
    """
    if now is None:
        now = datetime.datetime.now(UTC)
    zones = configured_zones(family, ids)
    home = store.home if store is not None else None

    timeline = Timeline(
        entries=[
            DaylightEntry(
                date=now + datetime.timedelta(minutes=i * interval_minutes),
                time_zones=list(zones),
                saved_home=home,
            )
            for i in range(entries)
        ]
    )
    logger.debug(
        f"Built {family.kind} timeline: {len(timeline.entries)} entries, "
        f"{len(zones)} zones"
    )
    return timeline


def snapshot(
    family: WidgetFamily,
    ids: Optional[Iterable[str]] = None,
    now: Optional[datetime.datetime] = None,
    store: Optional["TimeZoneStore"] = None,
) -> DaylightEntry:
    """Single entry for the current moment."""
    return build_timeline(family, ids, now, store, entries=1).entries[0]


def row_segments(
    zone: TimeZoneItem,
    width: float,
    now: Optional[datetime.datetime] = None,
) -> list[DaySegment]:
    """Daylight ranges for one widget row."""
    return calculate_day_segments(
        zone.fractional_hour(0, now), ROW_WINDOW_HALF_HOURS, width
    )
