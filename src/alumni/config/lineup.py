"""Lineup slots and scoring formats for college alumni rosters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from alumni.errors import UnknownRulesError


@dataclass(frozen=True)
class LineupRules:
    key: str
    slot_order: Tuple[str, ...]
    optional_slots: Tuple[str, ...]
    flex_positions: Tuple[str, ...]
    defense_positions: FrozenSet[str]
    defense_contributors: int

    def starting_counts(self, *, include_optional: bool) -> Dict[str, int]:
        """Count fixed slots per position, optionally including the toggle slots."""

        counts: Dict[str, int] = {}
        slots = self.slot_order + (self.optional_slots if include_optional else ())
        for slot in slots:
            counts[slot] = counts.get(slot, 0) + 1
        return counts


@dataclass(frozen=True)
class ScoringFormat:
    key: str
    reception_points: float


DEFENSIVE_POSITIONS: FrozenSet[str] = frozenset(
    {"LB", "DB", "DL", "DE", "DT", "S", "CB", "OLB", "ILB", "EDGE", "FS", "SS", "NT"}
)

_LINEUP_RULES: Dict[str, LineupRules] = {
    "ALUMNI": LineupRules(
        key="ALUMNI",
        slot_order=("QB", "TE", "WR", "WR", "RB", "RB"),
        optional_slots=("K",),
        flex_positions=("WR", "RB", "TE"),
        defense_positions=DEFENSIVE_POSITIONS,
        defense_contributors=11,
    ),
}

_SCORING_FORMATS: Dict[str, ScoringFormat] = {
    "ppr": ScoringFormat(key="ppr", reception_points=1.0),
    "half-ppr": ScoringFormat(key="half-ppr", reception_points=0.5),
    "standard": ScoringFormat(key="standard", reception_points=0.0),
}


def iter_rules() -> Iterable[LineupRules]:
    """Return an iterator of all configured rule sets."""

    return _LINEUP_RULES.values()


def get_rules(key: str = "ALUMNI") -> LineupRules:
    """Fetch lineup rules by key, raising KeyError if missing."""

    rules = _LINEUP_RULES.get(key.upper())
    if rules is None:
        raise UnknownRulesError(f"No lineup rules configured for key={key!r}")
    return rules


def get_format(name: str) -> ScoringFormat:
    """Resolve a scoring format, accepting ``half``/``half_ppr`` spellings."""

    key = name.strip().lower().replace("_", "-")
    if key in {"half", "halfppr"}:
        key = "half-ppr"
    if key == "std":
        key = "standard"
    if key not in _SCORING_FORMATS:
        raise UnknownRulesError(f"No scoring format configured for name={name!r}")
    return _SCORING_FORMATS[key]


# Read-only view of the formats for callers that list them.
SCORING_FORMATS: Mapping[str, ScoringFormat] = dict(_SCORING_FORMATS)
