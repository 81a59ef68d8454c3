"""Player identity resolution against season-scoped master indexes."""

from .index import PlayerIndex, SeasonIndex, name_team_key
from .join import JoinReport, add_defensive_lines, build_weekly_lines
from .resolver import IdentityMatch, PlayerIdentityResolver, candidate_from

__all__ = [
    "IdentityMatch",
    "JoinReport",
    "PlayerIdentityResolver",
    "PlayerIndex",
    "SeasonIndex",
    "add_defensive_lines",
    "build_weekly_lines",
    "candidate_from",
    "name_team_key",
]
