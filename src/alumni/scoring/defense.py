"""Team defense points and per-player snap shares for the approximate defense credit."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from alumni.ingest.columns import TEAM_OFFENSE_COLUMNS, resolve_schema
from alumni.ingest.teams import normalize_team_code
from alumni.models import SnapCount, TeamDefenseLine

from .points import compute_dst_points, round_points


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamDefenseShare:
    team: str
    dst_points: float
    snaps_by_player: Mapping[str, float]

    @property
    def total_snaps(self) -> float:
        return sum(self.snaps_by_player.values())

    def share(self, player_id: str) -> float:
        total = self.total_snaps
        if total <= 0:
            return 0.0
        return self.snaps_by_player.get(player_id, 0.0) / total


@dataclass(frozen=True)
class DefenseWeek:
    """Team DST points and defensive snaps for one week, keyed by club code."""

    teams: Mapping[str, TeamDefenseShare]

    def team(self, code: str) -> Optional[TeamDefenseShare]:
        return self.teams.get(normalize_team_code(code))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DefenseWeek":
        """Load the ``{"teams": [{"team", "dstPoints", "players": [...]}]}`` layout."""

        teams: Dict[str, TeamDefenseShare] = {}
        for entry in payload.get("teams", []):
            team = normalize_team_code(entry.get("team"))
            if not team:
                continue
            snaps: Dict[str, float] = defaultdict(float)
            for player in entry.get("players", []):
                player_id = str(player.get("player_id", "")).strip()
                if player_id:
                    snaps[player_id] += float(player.get("snaps") or 0)
            points = entry.get("dstPoints", entry.get("dst_points", 0))
            teams[team] = TeamDefenseShare(
                team=team,
                dst_points=round_points(float(points or 0)),
                snaps_by_player=MappingProxyType(dict(snaps)),
            )
        return cls(teams=MappingProxyType(teams))


def build_defense_week(snaps: Iterable[SnapCount], team_lines: Iterable[TeamDefenseLine]) -> DefenseWeek:
    """Sum snaps per player per club; players without defensive snaps are dropped."""

    snap_map: Dict[str, Dict[str, float]] = defaultdict(lambda: defaultdict(float))
    for snap in snaps:
        team = normalize_team_code(snap.team)
        if not team:
            continue
        snap_map[team][snap.player_id] += snap.defense_snaps
    dst_points: Dict[str, float] = {}
    for line in team_lines:
        team = normalize_team_code(line.team)
        if team:
            dst_points[team] = compute_dst_points(line)

    teams: Dict[str, TeamDefenseShare] = {}
    for team in sorted(set(snap_map) | set(dst_points)):
        players = {pid: count for pid, count in snap_map.get(team, {}).items() if count > 0}
        teams[team] = TeamDefenseShare(
            team=team,
            dst_points=dst_points.get(team, 0.0),
            snaps_by_player=MappingProxyType(players),
        )
    return DefenseWeek(teams=MappingProxyType(teams))


def team_defense_from_offense(rows: Sequence[Mapping[str, object]], *, week: Optional[int] = None) -> List[TeamDefenseLine]:
    """Derive each club's defense line from its opponent's offensive box score."""

    rows = list(rows)
    if not rows:
        return []
    schema = resolve_schema(
        rows[0],
        TEAM_OFFENSE_COLUMNS,
        required=("team", "opponent", "points_for"),
        label="team offense",
    )
    lines: List[TeamDefenseLine] = []
    for row in rows:
        row_week = schema.integer(row, "week", default=week or 0)
        if week is not None and schema.has("week") and row_week != week:
            continue
        defense_team = normalize_team_code(schema.text(row, "opponent"))
        if not defense_team:
            logger.debug("Offense row without opponent: %s", dict(row))
            continue
        lines.append(
            TeamDefenseLine(
                season=schema.integer(row, "season"),
                week=row_week,
                team=defense_team,
                sacks=schema.number(row, "sacks_allowed"),
                interceptions=schema.number(row, "interceptions_thrown"),
                fumble_recoveries=schema.number(row, "fumbles_lost"),
                points_allowed=schema.number(row, "points_for"),
            )
        )
    return lines
