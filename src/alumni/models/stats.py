"""Typed weekly stat, snap and team-defense lines parsed from raw rows."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class StatLine(BaseModel):
    season: int = 0
    week: int = 0
    player_id: str = Field(..., min_length=1)
    alt_ids: Tuple[str, ...] = ()
    gsis_ids: Tuple[str, ...] = ()
    has_stable_id: bool = True
    name: str = ""
    team: str = ""
    position: str = ""
    college: Optional[str] = None
    passing_yards: float = 0.0
    passing_tds: float = 0.0
    interceptions: float = 0.0
    rushing_yards: float = 0.0
    rushing_tds: float = 0.0
    receptions: float = 0.0
    receiving_yards: float = 0.0
    receiving_tds: float = 0.0
    fumbles_lost: float = 0.0
    field_goals_made: float = 0.0
    extra_points_made: float = 0.0

    model_config = ConfigDict(frozen=True)


class SnapCount(BaseModel):
    season: int = 0
    week: int = 0
    player_id: str = Field(..., min_length=1)
    alt_ids: Tuple[str, ...] = ()
    has_stable_id: bool = True
    name: str = ""
    team: str = ""
    position: str = ""
    defense_snaps: float = Field(0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)


class TeamDefenseLine(BaseModel):
    season: int = 0
    week: int = 0
    team: str = Field(..., min_length=1)
    sacks: float = 0.0
    interceptions: float = 0.0
    fumble_recoveries: float = 0.0
    safeties: float = 0.0
    defensive_tds: float = 0.0
    return_tds: float = 0.0
    points_allowed: Optional[float] = None

    model_config = ConfigDict(frozen=True)
