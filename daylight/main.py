"""Main entry point for Daylight."""

import argparse
import datetime
import logging
import sys
from pathlib import Path
from typing import Optional

from PIL import Image

from .config import Config, load_config
from .data import TimeZoneStore
from .data.timezones import UTC
from .slider import snap_offset
from .views import SliderView, ThemeManager, TimeZoneListView, WidgetView
from .widgets import Timeline, WidgetFamily, build_timeline

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


class DaylightApp:
    """Renders the main list, slider and widgets for one instant."""

    def __init__(self, config: Config):
        """
        Initialize the application.

        Args:
            config: Application configuration
        """
        self.config = config
        self.widgets_stale = False
        self.store = TimeZoneStore(
            Path(config.store.path).expanduser(), on_change=self._reload_widgets
        )
        self.theme_manager = ThemeManager.initialize(config.appearance.theme)
        self.hour_offset = 0.0

    def _reload_widgets(self) -> None:
        """Mark widget timelines for regeneration after the list changed."""
        self.widgets_stale = True
        logger.debug("Timezone list changed, widget timelines need reload")

    def set_offset(
        self, raw_offset: float, now: Optional[datetime.datetime] = None
    ) -> float:
        """Apply a time-travel offset, snapped like a slider drag."""
        self.hour_offset = snap_offset(
            raw_offset, now, snap_minutes=self.config.slider.snap_minutes
        )
        return self.hour_offset

    def widget_ids(self, family: WidgetFamily) -> list[str]:
        return getattr(self.config.widgets, family.value)

    def widget_timeline(
        self, family: WidgetFamily, now: Optional[datetime.datetime] = None
    ) -> Timeline:
        timeline = build_timeline(
            family,
            self.widget_ids(family),
            now,
            self.store,
            entries=self.config.widgets.timeline_entries,
            interval_minutes=self.config.widgets.entry_interval_minutes,
        )
        self.widgets_stale = False
        return timeline

    def render_widget(
        self, family: WidgetFamily, now: Optional[datetime.datetime] = None
    ) -> list[Image.Image]:
        """Render every entry of a widget's timeline."""
        return [
            WidgetView(self.config, family, entry).render(entry.date)
            for entry in self.widget_timeline(family, now).entries
        ]

    def render_frames(
        self,
        families: list[WidgetFamily],
        now: Optional[datetime.datetime] = None,
    ) -> dict[str, Image.Image]:
        """
        Render one frame per surface.

        Returns:
            Mapping of output name to image; widgets use their first entry
        """
        if now is None:
            now = datetime.datetime.now(UTC)
        frames = {
            "list": TimeZoneListView(self.config, self.store, self.hour_offset).render(
                now
            ),
            "slider": SliderView(self.config, self.store.home, self.hour_offset).render(
                now
            ),
        }
        for family in families:
            entry = self.widget_timeline(family, now).entries[0]
            frames[f"widget_{family.value}"] = WidgetView(
                self.config, family, entry
            ).render(entry.date)
        return frames

    def save_frames(self, output_dir: Path, frames: dict[str, Image.Image]) -> list[Path]:
        output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for name, image in frames.items():
            path = output_dir / f"{name}.png"
            image.save(path)
            written.append(path)
            logger.info(f"Wrote {path}")
        return written


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Daylight - world clock day/night previews"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config.json file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="Time-travel offset in hours (-12 to 12, snapped to the slider)",
    )
    parser.add_argument(
        "--widget",
        choices=[f.value for f in WidgetFamily] + ["all", "none"],
        default="all",
        help="Widget size to render",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("previews"),
        help="Directory for PNG previews",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.widget == "all":
        families = list(WidgetFamily)
    elif args.widget == "none":
        families = []
    else:
        families = [WidgetFamily(args.widget)]

    app = DaylightApp(config)
    now = datetime.datetime.now(UTC)
    app.set_offset(args.offset, now)
    frames = app.render_frames(families, now)
    try:
        app.save_frames(args.output, frames)
    except OSError as e:
        logger.error(f"Failed to write previews to {args.output}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
