"""Tagged result for weekly data that may not be published yet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Available(Generic[T]):
    data: T

    @property
    def ready(self) -> bool:
        return True


@dataclass(frozen=True)
class Pending:
    """Upstream has not published the requested week yet."""

    season: int
    week: int | None = None

    @property
    def ready(self) -> bool:
        return False


WeekResult = Union[Available[T], Pending]


def weekly_stats_for(season: int, week: int, rows: list | None) -> "WeekResult":
    """Wrap a fetched batch, treating a missing or empty batch as not yet published."""

    if not rows:
        return Pending(season=season, week=week)
    return Available(rows)
