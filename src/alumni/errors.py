"""Exception taxonomy shared across the alumni packages."""

from __future__ import annotations


class AlumniError(Exception):
    """Base class for errors raised by the alumni core."""


class ScheduleError(AlumniError, ValueError):
    """Raised when week windows are requested without a schedule."""


class AssetMissingError(AlumniError):
    """Raised by the asset source when an upstream weekly file is not published."""

    def __init__(self, season: int, week: int | None, url: str):
        self.season = season
        self.week = week
        self.url = url
        label = f"season={season}" if week is None else f"season={season}, week={week}"
        super().__init__(f"Asset not published yet ({label}): {url}")


class UnknownRulesError(AlumniError, KeyError):
    """Raised when a lineup rule set is not configured."""
