"""Tests for widget configuration and timelines."""

import datetime

import pytest

from daylight.data.timezones import TimeZoneItem
from daylight.geometry import DaySegment
from daylight.widgets import (
    DaylightEntry,
    TimeZoneEntity,
    WidgetFamily,
    build_timeline,
    configured_zones,
    default_entity,
    resolve_entities,
    row_segments,
    sample_time_zones,
    snapshot,
    suggested_entities,
)


class TestWidgetFamily:
    """Tests for widget size metadata."""

    @pytest.mark.parametrize(
        "family,count",
        [(WidgetFamily.SMALL, 1), (WidgetFamily.MEDIUM, 3), (WidgetFamily.LARGE, 6)],
    )
    def test_max_zones(self, family, count):
        assert family.max_zones == count

    def test_kind(self):
        assert WidgetFamily.MEDIUM.kind == "MediumDaylightWidget"

    def test_description(self):
        assert WidgetFamily.SMALL.description == "View a single time zone"
        assert WidgetFamily.LARGE.description == "View up to 6 time zones"


class TestEntities:
    """Tests for widget timezone entities."""

    def test_identifier_keeps_underscores(self):
        entity = default_entity()
        assert entity.identifier == "America/Los_Angeles"

    def test_to_time_zone(self):
        entity = TimeZoneEntity("Asia/Ho_Chi_Minh_Hanoi", "Hanoi", "ICT")
        tz = entity.to_time_zone(is_home=True)
        assert tz.identifier == "Asia/Ho_Chi_Minh"
        assert tz.city_name == "Hanoi"
        assert tz.is_home

    def test_resolve_full_id(self):
        [entity] = resolve_entities(["Asia/Kolkata_Chennai"])
        assert entity.city_name == "Chennai"
        assert entity.id == "Asia/Kolkata_Chennai"

    def test_resolve_bare_identifier_uses_first_city(self):
        [entity] = resolve_entities(["Asia/Kolkata"])
        assert entity.city_name == "Mumbai"

    def test_resolve_drops_unknown(self):
        entities = resolve_entities(["Nowhere/Town", "Asia/Tokyo_Tokyo"])
        assert [e.city_name for e in entities] == ["Tokyo"]

    def test_suggested_covers_catalog(self):
        entities = suggested_entities()
        assert len(entities) == 200
        assert len({e.id for e in entities}) == 200


class TestConfiguredZones:
    """Tests for picking the zones a widget shows."""

    def test_fallback_samples(self):
        assert [tz.city_name for tz in configured_zones(WidgetFamily.SMALL)] == [
            "San Francisco"
        ]
        assert len(configured_zones(WidgetFamily.MEDIUM)) == 3
        assert len(configured_zones(WidgetFamily.LARGE, ["bogus"])) == 6

    def test_truncated_to_family(self):
        ids = [
            "Asia/Tokyo_Tokyo",
            "Europe/London_London",
            "Europe/Paris_Paris",
            "Asia/Dubai_Dubai",
        ]
        zones = configured_zones(WidgetFamily.MEDIUM, ids)
        assert [tz.city_name for tz in zones] == ["Tokyo", "London", "Paris"]

    def test_samples_have_home(self):
        assert sample_time_zones(WidgetFamily.LARGE)[0].is_home


class TestTimeline:
    """Tests for timeline generation."""

    def test_sixty_minute_entries(self, noon_utc):
        timeline = build_timeline(WidgetFamily.MEDIUM, now=noon_utc)
        assert len(timeline.entries) == 60
        assert timeline.policy == "at_end"
        assert timeline.entries[0].date == noon_utc
        assert timeline.entries[-1].date == noon_utc + datetime.timedelta(minutes=59)

    def test_entries_do_not_share_zone_lists(self, noon_utc):
        timeline = build_timeline(WidgetFamily.MEDIUM, now=noon_utc, entries=2)
        first, second = timeline.entries
        assert first.time_zones is not second.time_zones
        first.time_zones.pop()
        assert len(second.time_zones) == 3

    def test_custom_interval(self, noon_utc):
        timeline = build_timeline(
            WidgetFamily.SMALL, now=noon_utc, entries=4, interval_minutes=5
        )
        assert [e.date.minute for e in timeline.entries] == [0, 5, 10, 15]

    def test_home_from_store(self, store, noon_utc):
        timeline = build_timeline(
            WidgetFamily.MEDIUM, ["Asia/Tokyo_Tokyo"], noon_utc, store
        )
        assert timeline.entries[0].home_time_zone.city_name == "Chennai"

    def test_home_defaults_to_first_zone(self, noon_utc):
        entry = snapshot(WidgetFamily.MEDIUM, ["Asia/Tokyo_Tokyo"], noon_utc)
        assert entry.home_time_zone.city_name == "Tokyo"

    def test_empty_entry_has_no_home(self, noon_utc):
        assert DaylightEntry(date=noon_utc, time_zones=[]).home_time_zone is None


class TestRowSegments:
    """Tests for widget row bars."""

    def test_row_segments(self, noon_utc):
        london = TimeZoneItem("Europe/London", "London", "GMT")
        assert row_segments(london, 240, noon_utc) == [DaySegment(60.0, 120.0)]
