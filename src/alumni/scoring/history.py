"""Per-player averages over prior weeks, used to rank starters in ``avg`` mode."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Union

from alumni.config import ScoringFormat
from alumni.models import StatLine, WeeklyPlayerLine

from .points import compute_fantasy_points, round_points


def compute_historical_averages(
    rows: Iterable[Union[StatLine, WeeklyPlayerLine]],
    week: int,
    fmt: Union[str, ScoringFormat] = "ppr",
) -> Dict[str, float]:
    """Mean points per player id across weeks ``1..week-1``.

    Stat rows are scored with ``fmt``; player lines keep their own points.
    """

    if week <= 1:
        return {}
    totals: Dict[str, float] = defaultdict(float)
    counts: Dict[str, int] = defaultdict(int)
    for row in rows:
        if row.week < 1 or row.week >= week:
            continue
        if isinstance(row, WeeklyPlayerLine):
            points = row.points
        else:
            points = compute_fantasy_points(row, fmt)
        totals[row.player_id] += points
        counts[row.player_id] += 1
    return {player_id: round_points(totals[player_id] / counts[player_id]) for player_id in totals}
