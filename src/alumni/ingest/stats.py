"""Parse raw provider rows into typed stat, roster, snap and team-defense lines."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from alumni.models import MasterPlayerRecord, SnapCount, StatLine, TeamDefenseLine

from .columns import (
    PLAYER_STAT_COLUMNS,
    ROSTER_COLUMNS,
    SNAP_COLUMNS,
    TEAM_DEFENSE_COLUMNS,
    ResolvedSchema,
    merge_groups,
    resolve_schema,
)
from .teams import normalize_team_code


logger = logging.getLogger(__name__)

Row = Mapping[str, object]
ExtraColumns = Optional[Mapping[str, Sequence[str]]]

_ID_SUFFIX = re.compile(r"_?id$", re.IGNORECASE)
_NON_PLAYER_ID_PREFIXES = ("game", "team", "draft", "season", "week", "old_game", "nflverse_game")

_STAT_FIELDS = (
    "passing_yards",
    "passing_tds",
    "interceptions",
    "rushing_yards",
    "rushing_tds",
    "receptions",
    "receiving_yards",
    "receiving_tds",
    "field_goals_made",
    "extra_points_made",
)


def normalize_player_name(name: object) -> str:
    """Case-fold, strip diacritics and collapse whitespace for identity matching."""

    if name is None:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(name))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.casefold().split())


def fallback_player_id(name: str, team: str) -> str:
    return f"{normalize_player_name(name)}|{team}"


def _unique(values: Sequence[str]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


def _row_name(schema: ResolvedSchema, row: Row) -> str:
    name = schema.text(row, "name")
    if name:
        return name
    parts = [schema.text(row, "first_name"), schema.text(row, "last_name")]
    return " ".join(part for part in parts if part)


def _week_matches(schema: ResolvedSchema, row: Row, week: Optional[int]) -> bool:
    if week is None or not schema.has("week"):
        return True
    return schema.integer(row, "week", default=week) == week


def parse_player_stats(
    rows: Sequence[Row],
    *,
    season: Optional[int] = None,
    week: Optional[int] = None,
    extra_columns: ExtraColumns = None,
) -> List[StatLine]:
    """Convert weekly stat rows; rows for other weeks are skipped when ``week`` is given."""

    rows = list(rows)
    if not rows:
        return []
    schema = resolve_schema(
        rows[0],
        merge_groups(PLAYER_STAT_COLUMNS, extra_columns),
        required=("name", "team"),
        label="player stats",
    )
    lines: List[StatLine] = []
    for row in rows:
        if not _week_matches(schema, row, week):
            continue
        name = _row_name(schema, row)
        team = normalize_team_code(schema.text(row, "team"))
        ids = _unique(schema.texts(row, "player_id"))
        if not ids and not name:
            logger.debug("Skipping stat row without id or name: %s", dict(row))
            continue
        fumbles = schema.optional_number(row, "fumbles_lost")
        if fumbles is None:
            fumbles = schema.total(row, "fumbles_lost_parts")
        values = {stat: schema.number(row, stat) for stat in _STAT_FIELDS}
        lines.append(
            StatLine(
                season=schema.integer(row, "season", default=season or 0),
                week=schema.integer(row, "week", default=week or 0),
                player_id=ids[0] if ids else fallback_player_id(name, team),
                alt_ids=ids[1:],
                gsis_ids=_unique(schema.texts(row, "gsis_ids")),
                has_stable_id=bool(ids),
                name=name,
                team=team,
                position=schema.text(row, "position").upper(),
                college=schema.text(row, "college") or None,
                fumbles_lost=fumbles,
                **values,
            )
        )
    return lines


def _id_suffix_columns(sample: Row, known: Sequence[str]) -> Tuple[str, ...]:
    known_lower = {column.lower() for column in known}
    extra = []
    for key in sample.keys():
        lowered = str(key).strip().lower()
        if lowered in known_lower or not _ID_SUFFIX.search(lowered):
            continue
        if lowered.startswith(_NON_PLAYER_ID_PREFIXES):
            continue
        extra.append(str(key))
    return tuple(extra)


def parse_master_rows(
    rows: Sequence[Row],
    *,
    season: Optional[int] = None,
    extra_columns: ExtraColumns = None,
) -> List[MasterPlayerRecord]:
    """Convert roster/master rows; any other ``*_id`` column counts as an alternate id."""

    rows = list(rows)
    if not rows:
        return []
    groups = merge_groups(ROSTER_COLUMNS, extra_columns)
    groups["alt_ids"] = groups["alt_ids"] + _id_suffix_columns(rows[0], groups["alt_ids"])
    schema = resolve_schema(rows[0], groups, required=("name", "college"), label="roster")

    records: List[MasterPlayerRecord] = []
    skipped = 0
    for row in rows:
        name = _row_name(schema, row)
        team = normalize_team_code(schema.text(row, "team"))
        primary_ids = _unique(schema.texts(row, "player_id"))
        alt_ids = _unique(schema.texts(row, "alt_ids"))
        if primary_ids:
            player_id = primary_ids[0]
        elif alt_ids:
            player_id = alt_ids[0]
        elif name:
            player_id = fallback_player_id(name, team)
        else:
            skipped += 1
            continue
        week_value = schema.optional_number(row, "week")
        records.append(
            MasterPlayerRecord(
                player_id=player_id,
                alt_ids=tuple(value for value in _unique(primary_ids + alt_ids) if value != player_id),
                gsis_ids=_unique(schema.texts(row, "gsis_ids")),
                name=name,
                team=team,
                position=schema.text(row, "position").upper(),
                college=schema.text(row, "college"),
                week=int(week_value) if week_value is not None else None,
            )
        )
    if skipped:
        logger.debug("Skipped %d roster rows without id or name (season=%s)", skipped, season)
    return records


def parse_snap_counts(rows: Sequence[Row], *, week: Optional[int] = None) -> List[SnapCount]:
    rows = list(rows)
    if not rows:
        return []
    schema = resolve_schema(
        rows[0],
        SNAP_COLUMNS,
        required=("team", "defense_snaps"),
        label="snap counts",
    )
    snaps: List[SnapCount] = []
    for row in rows:
        if not _week_matches(schema, row, week):
            continue
        name = schema.text(row, "name")
        team = normalize_team_code(schema.text(row, "team"))
        ids = _unique(schema.texts(row, "player_id"))
        if not ids and not name:
            continue
        snaps.append(
            SnapCount(
                season=schema.integer(row, "season"),
                week=schema.integer(row, "week", default=week or 0),
                player_id=ids[0] if ids else fallback_player_id(name, team),
                alt_ids=ids[1:],
                has_stable_id=bool(ids),
                name=name,
                team=team,
                position=schema.text(row, "position").upper(),
                defense_snaps=max(0.0, schema.number(row, "defense_snaps")),
            )
        )
    return snaps


def parse_team_defense(rows: Sequence[Row], *, week: Optional[int] = None) -> List[TeamDefenseLine]:
    rows = list(rows)
    if not rows:
        return []
    schema = resolve_schema(
        rows[0],
        TEAM_DEFENSE_COLUMNS,
        required=("team", "points_allowed"),
        label="team defense",
    )
    lines: List[TeamDefenseLine] = []
    for row in rows:
        if not _week_matches(schema, row, week):
            continue
        team = normalize_team_code(schema.text(row, "team"))
        if not team:
            continue
        lines.append(
            TeamDefenseLine(
                season=schema.integer(row, "season"),
                week=schema.integer(row, "week", default=week or 0),
                team=team,
                sacks=schema.number(row, "sacks"),
                interceptions=schema.number(row, "interceptions"),
                fumble_recoveries=schema.number(row, "fumble_recoveries")
                + schema.number(row, "forced_fumbles_recovered"),
                safeties=schema.number(row, "safeties"),
                defensive_tds=schema.number(row, "defensive_tds") + schema.number(row, "interception_tds"),
                return_tds=schema.number(row, "return_tds") + schema.number(row, "kick_return_tds"),
                points_allowed=schema.optional_number(row, "points_allowed"),
            )
        )
    return lines
