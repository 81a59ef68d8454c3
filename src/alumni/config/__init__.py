"""Configuration helpers for lineup rules, scoring formats and env overrides."""

from .lineup import (
    DEFENSIVE_POSITIONS,
    LineupRules,
    ScoringFormat,
    get_format,
    get_rules,
    iter_rules,
)

__all__ = [
    "DEFENSIVE_POSITIONS",
    "LineupRules",
    "ScoringFormat",
    "get_format",
    "get_rules",
    "iter_rules",
]
