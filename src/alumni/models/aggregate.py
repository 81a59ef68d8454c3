"""Per-college aggregate payloads returned by the scoring engine."""

from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DefenseContributor(BaseModel):
    label: str
    player_id: str
    points: float

    model_config = ConfigDict(frozen=True)


class Performer(BaseModel):
    """A selected starter, or the synthetic defense row."""

    name: str
    position: str
    slot: str
    team: Optional[str] = None
    points: float
    college: str
    player_id: Optional[str] = None
    contributors: Tuple[DefenseContributor, ...] = ()

    model_config = ConfigDict(frozen=True)


class SchoolAggregate(BaseModel):
    school: str = Field(..., min_length=1)
    week: int
    format: str
    mode: Literal["weekly", "avg"] = "weekly"
    total_points: float
    performers: Tuple[Performer, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def defense(self) -> Optional[Performer]:
        for performer in self.performers:
            if performer.position == "DEF":
                return performer
        return None
