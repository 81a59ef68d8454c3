"""Player identity models shared across ingestion, identity and scoring layers."""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


UNKNOWN_COLLEGE = "Unknown"


class MasterPlayerRecord(BaseModel):
    """Roster/master entry loaded once per season."""

    player_id: str = Field(..., min_length=1)
    alt_ids: Tuple[str, ...] = ()
    gsis_ids: Tuple[str, ...] = ()
    name: str = ""
    team: str = ""
    position: str = ""
    college: str = ""
    week: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class IdentityCandidate(BaseModel):
    """Fallback keys pulled from a single stat row."""

    primary_id: Optional[str] = None
    alt_ids: FrozenSet[str] = frozenset()
    gsis_ids: FrozenSet[str] = frozenset()
    name: str = ""
    team: str = ""
    college: Optional[str] = None
    week: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class WeeklyPlayerLine(BaseModel):
    """A player's fantasy points for one week, credited to canonical colleges."""

    player_id: str = Field(..., min_length=1)
    name: str = ""
    team: str = ""
    position: str = ""
    colleges: Tuple[str, ...] = ()
    season: int = 0
    week: int = 0
    points: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator("colleges", mode="before")
    @classmethod
    def _dedupe_colleges(cls, value):
        if isinstance(value, str):
            value = value.split(";")
        seen: set[str] = set()
        ordered = []
        for item in value or ():
            text = " ".join(str(item).split())
            if not text or text.lower() in seen:
                continue
            seen.add(text.lower())
            ordered.append(text)
        # Unknown only survives as the sole entry.
        known = [item for item in ordered if item.lower() != UNKNOWN_COLLEGE.lower()]
        return tuple(known) if known else ()

    @property
    def college_label(self) -> str:
        return "; ".join(self.colleges) if self.colleges else UNKNOWN_COLLEGE
