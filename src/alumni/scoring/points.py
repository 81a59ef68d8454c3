"""Fantasy point formulas for individual players and team defenses."""

from __future__ import annotations

from typing import Optional, Tuple, Union

from alumni.config import ScoringFormat, get_format
from alumni.models import StatLine, TeamDefenseLine


# (upper bound inclusive, bonus); anything above the last bound scores -4.
POINTS_ALLOWED_TIERS: Tuple[Tuple[float, float], ...] = (
    (0, 10.0),
    (6, 7.0),
    (13, 4.0),
    (20, 1.0),
    (27, 0.0),
    (34, -1.0),
)
_POINTS_ALLOWED_FLOOR = -4.0


def round_points(value: float) -> float:
    return round(value, 2)


def compute_fantasy_points(stat: StatLine, fmt: Union[str, ScoringFormat] = "ppr") -> float:
    scoring = get_format(fmt) if isinstance(fmt, str) else fmt
    passing = stat.passing_yards / 25 + stat.passing_tds * 4 - stat.interceptions * 2
    rushing = stat.rushing_yards / 10 + stat.rushing_tds * 6
    receiving = (
        stat.receiving_yards / 10
        + stat.receiving_tds * 6
        + stat.receptions * scoring.reception_points
    )
    kicking = stat.field_goals_made * 3 + stat.extra_points_made
    return round_points(passing + rushing + receiving + kicking - stat.fumbles_lost * 2)


def points_allowed_bonus(points_allowed: Optional[float]) -> float:
    # Missing reads as zero, like any other malformed stat.
    if points_allowed is None:
        points_allowed = 0.0
    for bound, bonus in POINTS_ALLOWED_TIERS:
        if points_allowed <= bound:
            return bonus
    return _POINTS_ALLOWED_FLOOR


def compute_dst_points(line: TeamDefenseLine) -> float:
    total = (
        line.sacks
        + line.interceptions * 2
        + line.fumble_recoveries * 2
        + line.safeties * 2
        + line.defensive_tds * 6
        + line.return_tds * 6
        + points_allowed_bonus(line.points_allowed)
    )
    return round_points(total)
