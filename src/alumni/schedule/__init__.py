"""Align college-football weeks with the NFL weeks whose stats they score."""

from .estimate import (
    REGULAR_SEASON_WEEKS,
    NflWeekEstimate,
    clamp_week,
    estimate_nfl_week_for_date,
    guess_cfb_season,
    last_completed_nfl_week,
    nfl_week_window_utc,
    preseason_week_cap_for_season,
)
from .games import (
    CfbGame,
    NflScheduleGame,
    detect_target_cfb_week,
    filter_team_games,
    parse_cfbd_games,
    parse_nfl_schedule,
)
from .windows import (
    CfbWeekReference,
    NflWeekWindow,
    build_week_windows,
    map_cfb_games_to_nfl_weeks,
    map_cfb_week_to_nfl_week,
    map_kickoff_to_nfl_week,
)

__all__ = [
    "REGULAR_SEASON_WEEKS",
    "CfbGame",
    "CfbWeekReference",
    "NflScheduleGame",
    "NflWeekEstimate",
    "NflWeekWindow",
    "build_week_windows",
    "clamp_week",
    "detect_target_cfb_week",
    "estimate_nfl_week_for_date",
    "filter_team_games",
    "guess_cfb_season",
    "last_completed_nfl_week",
    "map_cfb_games_to_nfl_weeks",
    "map_cfb_week_to_nfl_week",
    "map_kickoff_to_nfl_week",
    "nfl_week_window_utc",
    "parse_cfbd_games",
    "parse_nfl_schedule",
    "preseason_week_cap_for_season",
]
