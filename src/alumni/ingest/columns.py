"""Resolve which literal CSV column backs each logical field, once per batch."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

ColumnGroups = Mapping[str, Sequence[str]]

PLAYER_ID_COLUMNS: Tuple[str, ...] = (
    "player_id",
    "player_gsis_id",
    "gsis_id",
    "gsis_it_id",
    "gsis_player_id",
    "nfl_id",
    "pfr_id",
    "pfr_player_id",
    "esb_id",
)

GSIS_ID_COLUMNS: Tuple[str, ...] = ("gsis_id", "player_gsis_id", "gsis_it_id", "gsis_player_id")

MASTER_ID_COLUMNS: Tuple[str, ...] = PLAYER_ID_COLUMNS + (
    "espn_id",
    "sportradar_id",
    "yahoo_id",
    "rotowire_id",
    "rotoworld_id",
    "fantasypros_id",
    "cfbref_id",
    "sleeper_id",
    "draftkings_id",
    "fanduel_id",
)

TEAM_COLUMNS: Tuple[str, ...] = ("recent_team", "team", "posteam", "team_abbr", "club_code", "team_code")
WEEK_COLUMNS: Tuple[str, ...] = ("week", "game_week", "week_num", "week_number")

PLAYER_STAT_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "player_id": PLAYER_ID_COLUMNS,
    "gsis_ids": GSIS_ID_COLUMNS,
    "name": ("full_name", "player_display_name", "player", "player_name"),
    "first_name": ("first_name",),
    "last_name": ("last_name",),
    "team": TEAM_COLUMNS,
    "position": ("position", "pos", "depth_chart_position"),
    "week": WEEK_COLUMNS,
    "season": ("season",),
    "college": ("college_name", "college"),
    "passing_yards": ("passing_yards", "pass_yards", "pass_yds"),
    "passing_tds": ("passing_tds", "pass_tds", "pass_td"),
    "interceptions": ("interceptions", "int", "ints", "pass_interceptions"),
    "rushing_yards": ("rushing_yards", "rush_yards", "rush_yds"),
    "rushing_tds": ("rushing_tds", "rush_tds", "rush_td"),
    "receptions": ("receptions", "receiving_receptions", "rec", "rec_receptions"),
    "receiving_yards": ("receiving_yards", "rec_yards", "rec_yds"),
    "receiving_tds": ("receiving_tds", "rec_tds", "rec_td"),
    "fumbles_lost": ("fumbles_lost", "fumbles_lost_total", "fumbles_lost_offense"),
    "fumbles_lost_parts": (
        "rushing_fumbles_lost",
        "receiving_fumbles_lost",
        "sack_fumbles_lost",
        "kickoff_fumbles_lost",
        "punt_fumbles_lost",
    ),
    "field_goals_made": ("field_goals_made", "fg_made", "fg"),
    "extra_points_made": ("extra_points_made", "xp_made", "xpt"),
}

ROSTER_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "player_id": PLAYER_ID_COLUMNS,
    "alt_ids": MASTER_ID_COLUMNS,
    "gsis_ids": GSIS_ID_COLUMNS,
    "name": ("full_name", "player_name", "player", "name", "display_name", "player_display_name"),
    "first_name": ("first_name",),
    "last_name": ("last_name",),
    "team": TEAM_COLUMNS + ("latest_team",),
    "position": ("position", "pos", "depth_chart_position"),
    "college": ("college_name", "college"),
    "week": WEEK_COLUMNS,
    "season": ("season",),
}

SNAP_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "player_id": ("player_id", "gsis_id", "pfr_player_id", "pfr_id", "player_gsis_id"),
    "name": ("player", "player_name", "full_name"),
    "team": TEAM_COLUMNS,
    "position": ("position", "pos"),
    "defense_snaps": ("defense_snaps", "def_snaps", "defensive_snaps"),
    "week": WEEK_COLUMNS,
    "season": ("season",),
}

TEAM_DEFENSE_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "team": TEAM_COLUMNS + ("defteam",),
    "week": WEEK_COLUMNS,
    "season": ("season",),
    "sacks": ("defense_sacks", "sacks", "def_sacks"),
    "interceptions": ("defense_interceptions", "interceptions", "def_ints", "def_int"),
    "fumble_recoveries": (
        "defense_fumbles_recovered",
        "fumbles_recovered",
        "def_fumble_rec",
        "defense_fumbles",
    ),
    "forced_fumbles_recovered": ("forced_fumbles_recovered",),
    "safeties": ("defense_safeties", "safeties", "safety"),
    "defensive_tds": (
        "defensive_touchdowns",
        "defensive_tds",
        "def_tds",
        "def_td",
        "defense_touchdowns",
    ),
    "interception_tds": ("int_touchdowns", "interception_tds"),
    "return_tds": ("punt_return_tds", "special_teams_touchdowns", "return_touchdowns"),
    "kick_return_tds": ("kick_return_tds",),
    "points_allowed": ("points_allowed", "points_against", "opp_points", "opp_score", "opponent_points"),
}

TEAM_OFFENSE_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "team": ("club_code", "team", "posteam", "team_abbr"),
    "opponent": ("opp_club_code", "opponent", "opponent_team", "opp_team"),
    "week": WEEK_COLUMNS,
    "season": ("season",),
    "points_for": ("points_for", "points", "score"),
    "sacks_allowed": ("pass_sacks_allowed", "sacks_allowed", "sacks_suffered"),
    "interceptions_thrown": ("interceptions_thrown", "passing_interceptions", "interceptions"),
    "fumbles_lost": ("fumbles_lost_offense", "fumbles_lost"),
}

SCHEDULE_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "game_type": ("game_type", "gametype", "game_type2", "season_type"),
    "week": WEEK_COLUMNS + ("weeknum",),
    "kickoff": ("start_time", "start_time_utc", "game_datetime", "gamedatetime", "gametime", "kickoff"),
    "game_date": ("gamedate", "gameday", "game_date"),
    "game_time": ("gametime", "game_time"),
    "game_id": ("game_id", "gsis_id", "gsid"),
    "home_team": ("home_team", "home", "home_team_abbr"),
    "away_team": ("away_team", "away", "away_team_abbr"),
}


def _parse_float(value: object) -> Optional[float]:
    if value is None:
        return None
    text = str(value).strip().replace(",", "")
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


@dataclass(frozen=True)
class ResolvedSchema:
    """Literal columns backing each logical field, in priority order."""

    columns: Mapping[str, Tuple[str, ...]]
    missing: Tuple[str, ...] = field(default_factory=tuple)

    def has(self, name: str) -> bool:
        return bool(self.columns.get(name))

    def texts(self, row: Mapping[str, object], name: str) -> List[str]:
        values = []
        for column in self.columns.get(name, ()):
            raw = row.get(column)
            if raw is None:
                continue
            text = str(raw).strip()
            if text:
                values.append(text)
        return values

    def text(self, row: Mapping[str, object], name: str, default: str = "") -> str:
        values = self.texts(row, name)
        return values[0] if values else default

    def number(self, row: Mapping[str, object], name: str, default: float = 0.0) -> float:
        """First parseable value; malformed or absent reads as ``default``."""

        for column in self.columns.get(name, ()):
            value = _parse_float(row.get(column))
            if value is not None:
                return value
        return default

    def optional_number(self, row: Mapping[str, object], name: str) -> Optional[float]:
        for column in self.columns.get(name, ()):
            value = _parse_float(row.get(column))
            if value is not None:
                return value
        return None

    def total(self, row: Mapping[str, object], name: str) -> float:
        """Sum every backing column, for stats split across several fields."""

        return sum(_parse_float(row.get(column)) or 0.0 for column in self.columns.get(name, ()))

    def integer(self, row: Mapping[str, object], name: str, default: int = 0) -> int:
        value = self.optional_number(row, name)
        return int(value) if value is not None else default


def merge_groups(base: ColumnGroups, extra: Optional[Mapping[str, Sequence[str]]] = None) -> Dict[str, Tuple[str, ...]]:
    """Append profile-supplied aliases after the built-in ones."""

    merged = {name: tuple(aliases) for name, aliases in base.items()}
    for name, aliases in (extra or {}).items():
        existing = merged.get(name, ())
        merged[name] = existing + tuple(alias for alias in aliases if alias not in existing)
    return merged


def resolve_schema(
    sample: Optional[Mapping[str, object]],
    groups: ColumnGroups,
    *,
    required: Iterable[str] = (),
    label: str = "rows",
) -> ResolvedSchema:
    """Build the schema from one representative row (header match is case-insensitive)."""

    if not sample:
        return ResolvedSchema(columns={}, missing=tuple(groups))
    by_lower: Dict[str, str] = {}
    for key in sample.keys():
        by_lower.setdefault(str(key).strip().lower(), key)

    columns: Dict[str, Tuple[str, ...]] = {}
    missing: List[str] = []
    for name, aliases in groups.items():
        present = []
        for alias in aliases:
            literal = by_lower.get(alias.lower())
            if literal is not None and literal not in present:
                present.append(literal)
        if present:
            columns[name] = tuple(present)
        else:
            missing.append(name)

    required_missing = [name for name in required if name in missing]
    if required_missing:
        logger.warning("%s: no column found for %s", label, ", ".join(required_missing))
    elif missing:
        logger.debug("%s: optional fields absent: %s", label, ", ".join(missing))
    return ResolvedSchema(columns=columns, missing=tuple(missing))
