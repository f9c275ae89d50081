"""Daylight - world clock with day/night bars."""

__version__ = "1.0.0"
