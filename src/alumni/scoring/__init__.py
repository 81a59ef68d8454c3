"""Fantasy scoring, defense approximation and per-college aggregation."""

from .defense import DefenseWeek, TeamDefenseShare, build_defense_week, team_defense_from_offense
from .engine import AggregateOptions, aggregate_by_college, group_by_college, select_lineup
from .history import compute_historical_averages
from .matchups import (
    MatchupResult,
    ScheduledMatchup,
    StandingsRow,
    compute_standings,
    score_matchups,
)
from .points import compute_dst_points, compute_fantasy_points, points_allowed_bonus, round_points

__all__ = [
    "AggregateOptions",
    "DefenseWeek",
    "MatchupResult",
    "ScheduledMatchup",
    "StandingsRow",
    "TeamDefenseShare",
    "aggregate_by_college",
    "build_defense_week",
    "compute_dst_points",
    "compute_fantasy_points",
    "compute_historical_averages",
    "compute_standings",
    "group_by_college",
    "points_allowed_bonus",
    "round_points",
    "score_matchups",
    "select_lineup",
    "team_defense_from_offense",
]
