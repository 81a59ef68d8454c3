"""Turn a week's stat rows into college-credited player lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set, Union

from alumni.config import DEFENSIVE_POSITIONS, ScoringFormat
from alumni.models import SnapCount, StatLine, WeeklyPlayerLine
from alumni.scoring.points import compute_fantasy_points

from .resolver import PlayerIdentityResolver


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinReport:
    lines: List[WeeklyPlayerLine]
    matched_players: int
    missing_players: List[str]


def build_weekly_lines(
    stats: Iterable[StatLine],
    resolver: PlayerIdentityResolver,
    *,
    season: int,
    week: int,
    fmt: Union[str, ScoringFormat] = "ppr",
) -> JoinReport:
    """Score each stat row and attach the colleges its identity resolves to.

    Unresolved players are kept with no colleges so they land in "Unknown".
    """

    lines: List[WeeklyPlayerLine] = []
    missing: List[str] = []
    matched = 0
    for stat in stats:
        if stat.week and stat.week != week:
            continue
        result = resolver.match(stat, season, week)
        record = result.record
        if record is None:
            missing.append(stat.name or stat.player_id)
        else:
            matched += 1
        player_id = stat.player_id
        if record is not None and not stat.has_stable_id:
            player_id = record.player_id
        lines.append(
            WeeklyPlayerLine(
                player_id=player_id,
                name=stat.name or (record.name if record else ""),
                team=stat.team or (record.team if record else ""),
                position=(stat.position or (record.position if record else "")).upper(),
                colleges=result.colleges,
                season=season,
                week=week,
                points=compute_fantasy_points(stat, fmt),
            )
        )

    if missing:
        logger.info("Week %s: %d of %d players unresolved", week, len(missing), len(lines))
    return JoinReport(lines=lines, matched_players=matched, missing_players=missing)


def add_defensive_lines(
    lines: Sequence[WeeklyPlayerLine],
    snaps: Iterable[SnapCount],
    resolver: PlayerIdentityResolver,
    *,
    season: int,
    week: int,
) -> List[WeeklyPlayerLine]:
    """Append zero-point lines for defenders who only appear in snap counts."""

    combined = list(lines)
    present: Set[str] = {line.player_id for line in combined}
    added = 0
    for snap in snaps:
        position = snap.position.upper()
        if position not in DEFENSIVE_POSITIONS or snap.defense_snaps <= 0:
            continue
        result = resolver.match(snap, season, week)
        player_id = snap.player_id
        if result.record is not None and not snap.has_stable_id:
            player_id = result.record.player_id
        if player_id in present:
            continue
        present.add(player_id)
        combined.append(
            WeeklyPlayerLine(
                player_id=player_id,
                name=snap.name or (result.record.name if result.record else ""),
                team=snap.team,
                position=position,
                colleges=result.colleges,
                season=season,
                week=week,
                points=0.0,
            )
        )
        added += 1
    logger.debug("Week %s: added %d defensive lines from snap counts", week, added)
    return combined
