"""Input adapters that normalize raw provider rows."""

from .columns import ResolvedSchema, merge_groups, resolve_schema
from .stats import (
    fallback_player_id,
    normalize_player_name,
    parse_master_rows,
    parse_player_stats,
    parse_snap_counts,
    parse_team_defense,
)
from .teams import normalize_team_code

__all__ = [
    "ResolvedSchema",
    "fallback_player_id",
    "merge_groups",
    "normalize_player_name",
    "normalize_team_code",
    "parse_master_rows",
    "parse_player_stats",
    "parse_snap_counts",
    "parse_team_defense",
    "resolve_schema",
]
