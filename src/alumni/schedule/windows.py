"""NFL week windows and the mapping from college-football weeks onto them.

A window closes at the Tuesday 10:00 UTC after its last kickoff, the point at
which that week's NFL stats are treated as final.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from alumni.errors import ScheduleError

from .games import CfbGame, NflScheduleGame


logger = logging.getLogger(__name__)

FALLBACK_WEEK = 18


@dataclass(frozen=True, order=True)
class CfbWeekReference:
    season: int
    week: int


@dataclass(frozen=True)
class NflWeekWindow:
    season: int
    week: int
    cutoff: datetime
    games: int
    game_types: Tuple[str, ...]

    @property
    def is_preseason(self) -> bool:
        return any(kind.strip().upper().startswith("PRE") for kind in self.game_types)

    @property
    def is_regular(self) -> bool:
        return any(kind.strip().upper().startswith("REG") for kind in self.game_types)

    @property
    def reference(self) -> CfbWeekReference:
        return CfbWeekReference(self.season, self.week)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def tuesday_cutoff(max_kickoff: datetime) -> datetime:
    max_kickoff = _as_utc(max_kickoff)
    monday = (max_kickoff - timedelta(days=max_kickoff.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    cutoff = monday + timedelta(days=1, hours=10)
    if cutoff <= max_kickoff:
        cutoff += timedelta(days=7)
    return cutoff


def _sorted(windows: Iterable[NflWeekWindow]) -> List[NflWeekWindow]:
    return sorted(windows, key=lambda window: (window.season, window.week))


def build_week_windows(schedule: Optional[Iterable[NflScheduleGame]]) -> List[NflWeekWindow]:
    """Group games by (season, week) and close each group at its Tuesday cutoff."""

    if schedule is None:
        raise ScheduleError("NFL schedule is required to build week windows")

    latest: Dict[Tuple[int, int], datetime] = {}
    counts: Dict[Tuple[int, int], int] = {}
    kinds: Dict[Tuple[int, int], set] = {}
    for game in schedule:
        key = (game.season, game.week)
        kickoff = _as_utc(game.kickoff)
        if key not in latest or kickoff > latest[key]:
            latest[key] = kickoff
        counts[key] = counts.get(key, 0) + 1
        kinds.setdefault(key, set()).add((game.game_type or "REG").upper())

    windows = [
        NflWeekWindow(
            season=season,
            week=week,
            cutoff=tuesday_cutoff(latest[(season, week)]),
            games=counts[(season, week)],
            game_types=tuple(sorted(kinds[(season, week)])),
        )
        for season, week in latest
    ]
    return _sorted(windows)


def map_kickoff_to_nfl_week(
    kickoff: Optional[datetime],
    windows: Sequence[NflWeekWindow],
    prior_season: int,
) -> CfbWeekReference:
    """Last window whose cutoff is at or before ``kickoff``."""

    chosen: Optional[NflWeekWindow] = None
    if kickoff is not None:
        kickoff = _as_utc(kickoff)
        for window in _sorted(windows):
            if window.cutoff > kickoff:
                break
            chosen = window
    if chosen is None:
        return CfbWeekReference(prior_season, FALLBACK_WEEK)
    return chosen.reference


def _kickoff_of(game: Union[CfbGame, datetime]) -> Optional[datetime]:
    if isinstance(game, datetime):
        return game
    return game.kickoff


def map_cfb_week_to_nfl_week(
    cfb_games: Iterable[Union[CfbGame, datetime]],
    windows: Sequence[NflWeekWindow],
    cfb_week: int,
    prior_season_fallback: int,
) -> CfbWeekReference:
    """Pick the NFL week whose stats are attributed to ``cfb_week``.

    Week 1 and earlier map to the last preseason window; later weeks index the
    regular-season windows at ``cfb_week - 2``. Without usable windows the
    latest CFB kickoff decides, and without anything the prior season's final
    week is returned.
    """

    ordered = _sorted(windows)
    preseason = [window for window in ordered if window.is_preseason]
    regular = [window for window in ordered if window.is_regular]

    if cfb_week <= 1:
        if preseason:
            return preseason[-1].reference
    elif regular:
        index = max(0, min(cfb_week - 2, len(regular) - 1))
        return regular[index].reference

    kickoffs = [kickoff for kickoff in map(_kickoff_of, cfb_games) if kickoff is not None]
    if not kickoffs:
        fallback = regular[-1] if regular else (ordered[-1] if ordered else None)
        if fallback is None:
            logger.debug("No windows or games for CFB week %s; using prior season", cfb_week)
            return CfbWeekReference(prior_season_fallback, FALLBACK_WEEK)
        return fallback.reference

    latest = max(_as_utc(kickoff) for kickoff in kickoffs)
    return map_kickoff_to_nfl_week(latest, ordered, prior_season_fallback)


def map_cfb_games_to_nfl_weeks(
    games: Iterable[CfbGame],
    windows: Sequence[NflWeekWindow],
    prior_season: int,
) -> List[Tuple[CfbGame, CfbWeekReference]]:
    ordered = _sorted(windows)
    return [(game, map_kickoff_to_nfl_week(game.kickoff, ordered, prior_season)) for game in games]
