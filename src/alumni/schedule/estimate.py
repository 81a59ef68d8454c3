"""Calendar-only NFL week estimates anchored on the Labor Day week."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

from .windows import CfbWeekReference


REGULAR_SEASON_WEEKS = 18
WEEK = timedelta(weeks=1)

_MODERN_PRESEASON_CAP = 3
_LEGACY_PRESEASON_CAP = 4


@dataclass(frozen=True)
class NflWeekEstimate:
    week: int
    raw_week: Optional[int]
    start: datetime
    end: datetime


def preseason_week_cap_for_season(season: int) -> int:
    # The preseason shrank to three weeks when the 17-game season started.
    return _MODERN_PRESEASON_CAP if season >= 2021 else _LEGACY_PRESEASON_CAP


def labor_day(season: int) -> date:
    september_first = date(season, 9, 1)
    return september_first + timedelta(days=(7 - september_first.weekday()) % 7)


def week_one_cutoff(season: int) -> datetime:
    """Tuesday 10:00 UTC eight days after Labor Day."""

    return datetime.combine(labor_day(season) + timedelta(days=8), time(10), tzinfo=timezone.utc)


def clamp_week(week: int) -> int:
    return max(1, min(REGULAR_SEASON_WEEKS, int(week)))


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def last_completed_nfl_week(now: Optional[datetime] = None) -> CfbWeekReference:
    now = _utc_now(now)
    season = now.year
    cutoff = week_one_cutoff(season)
    if now < cutoff:
        season -= 1
        cutoff = week_one_cutoff(season)
    weeks = (now - cutoff) // WEEK + 1
    return CfbWeekReference(season, clamp_week(weeks))


def nfl_week_window_utc(season: int, week: int) -> Tuple[datetime, datetime]:
    """``(start, end)`` of a regular-season week; ``end`` is its Tuesday cutoff."""

    end = week_one_cutoff(season) + (clamp_week(week) - 1) * WEEK
    return end - WEEK, end


def estimate_nfl_week_for_date(
    season: int,
    kickoff: Optional[datetime],
    fallback_week: int = 1,
) -> NflWeekEstimate:
    """Estimate the NFL week for ``kickoff`` without a schedule.

    Kickoffs before week one land in preseason weeks counted back from the
    season cap (``0`` when earlier than the earliest supported preseason week).
    """

    if kickoff is None:
        week = clamp_week(fallback_week)
        start, end = nfl_week_window_utc(season, week)
        return NflWeekEstimate(week=week, raw_week=None, start=start, end=end)

    week_one_start, _ = nfl_week_window_utc(season, 1)
    raw_week = (_utc_now(kickoff) - week_one_start) // WEEK + 1
    if raw_week >= 1:
        week = clamp_week(raw_week)
        start, end = nfl_week_window_utc(season, week)
        return NflWeekEstimate(week=week, raw_week=raw_week, start=start, end=end)

    cap = preseason_week_cap_for_season(season)
    offset = max(raw_week - 1, -(cap + 1))
    start = week_one_start + offset * WEEK
    return NflWeekEstimate(
        week=max(0, min(cap, cap + raw_week)),
        raw_week=raw_week,
        start=start,
        end=start + WEEK,
    )


def guess_cfb_season(now: Optional[datetime] = None) -> int:
    """College seasons are labelled by the year they kick off in (July onward)."""

    now = _utc_now(now)
    return now.year if now.month >= 7 else now.year - 1
