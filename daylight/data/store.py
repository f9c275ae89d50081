"""Persistent list of the user's timezones."""

import datetime
import json
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from .timezones import TimeZoneItem

logger = logging.getLogger(__name__)


def default_time_zones() -> list[TimeZoneItem]:
    """Seed list used when nothing has been saved yet."""
    return [
        TimeZoneItem("Asia/Kolkata", "Chennai", "IST", is_home=True),
        TimeZoneItem("America/Los_Angeles", "San Francisco", "PST"),
        TimeZoneItem("Asia/Dubai", "Dubai", "GST"),
    ]


class TimeZoneStore:
    """
    Ordered collection of timezone items backed by a JSON file.

    Every mutation is saved immediately and announced to change listeners
    so widgets can reload their timelines.
    """

    def __init__(
        self,
        path: Path,
        on_change: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize store and load saved items.

        Args:
            path: JSON file holding the saved list
            on_change: Called after every successful save
        """
        self.path = Path(path).expanduser()
        self.time_zones: list[TimeZoneItem] = []
        self._listeners: list[Callable[[], None]] = []
        if on_change is not None:
            self._listeners.append(on_change)

        self.load()
        if not self.time_zones:
            self.time_zones = default_time_zones()
            self.save()

    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def load(self) -> None:
        """Load items from disk, keeping an empty list if the file is unusable."""
        if not self.path.exists():
            logger.debug(f"No saved timezones at {self.path}")
            return

        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            self.time_zones = [TimeZoneItem.from_dict(entry) for entry in data]
            logger.info(f"Loaded {len(self.time_zones)} timezones from {self.path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read saved timezones {self.path}: {e}")
            return
        except (KeyError, TypeError) as e:
            logger.warning(f"Malformed timezone entry in {self.path}: {e}")
            return

        if self._normalize_home():
            self.save()

    def _normalize_home(self) -> bool:
        """
        Leave exactly one home item in a non-empty list.

        Returns:
            True if any item's home flag changed
        """
        changed = False
        seen_home = False
        for tz in self.time_zones:
            if tz.is_home and seen_home:
                tz.is_home = False
                changed = True
            seen_home = seen_home or tz.is_home
        if self.time_zones and not seen_home:
            self._ensure_home()
            changed = True
        if changed:
            logger.warning(f"Repaired home flags in {self.path}")
        return changed

    def save(self) -> bool:
        """
        Write items to disk and notify listeners.

        Returns:
            True if successful, False otherwise
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump([tz.to_dict() for tz in self.time_zones], f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save timezones to {self.path}: {e}")
            return False

        for callback in self._listeners:
            callback()
        return True

    @property
    def home(self) -> Optional[TimeZoneItem]:
        for tz in self.time_zones:
            if tz.is_home:
                return tz
        return None

    def is_already_added(self, city_name: str) -> bool:
        return any(tz.city_name == city_name for tz in self.time_zones)

    def add(self, item: TimeZoneItem) -> None:
        self.time_zones.append(item)
        self.save()

    def _ensure_home(self) -> None:
        """Promote the first item when a removal left no home."""
        if self.time_zones and self.home is None:
            self.time_zones[0].is_home = True
            logger.info(f"Promoted {self.time_zones[0].city_name} to home")

    def remove_at(self, indices: Iterable[int]) -> None:
        """Remove the items at the given positions."""
        doomed = set(indices)
        self.time_zones = [
            tz for i, tz in enumerate(self.time_zones) if i not in doomed
        ]
        self._ensure_home()
        self.save()

    def remove(self, item: TimeZoneItem) -> None:
        self.time_zones = [tz for tz in self.time_zones if tz.id != item.id]
        self._ensure_home()
        self.save()

    def set_home(self, item: TimeZoneItem) -> None:
        for tz in self.time_zones:
            tz.is_home = tz.id == item.id
        self.save()

    def move(self, source: Iterable[int], destination: int) -> None:
        """
        Move items to a new position.

        Args:
            source: Positions of the items to move
            destination: Insertion index in the list before the move
        """
        indices = sorted(set(source) & set(range(len(self.time_zones))))
        moving = [self.time_zones[i] for i in indices]
        remaining = [tz for i, tz in enumerate(self.time_zones) if i not in indices]
        insert_at = destination - sum(1 for i in indices if i < destination)
        insert_at = max(0, min(len(remaining), insert_at))
        self.time_zones = remaining[:insert_at] + moving + remaining[insert_at:]
        self.save()

    def sorted_by_offset(
        self, now: Optional[datetime.datetime] = None
    ) -> list[TimeZoneItem]:
        """
        Order items by UTC offset relative to home.

        Zones behind home come first, zones ahead of home last. Without a
        home zone the stored order is kept.
        """
        home = self.home
        if home is None:
            return list(self.time_zones)

        home_offset = home.utc_offset_seconds(now)
        return sorted(
            self.time_zones,
            key=lambda tz: tz.utc_offset_seconds(now) - home_offset,
        )
