"""Canonical models shared across the alumni packages."""

from .aggregate import DefenseContributor, Performer, SchoolAggregate
from .player import UNKNOWN_COLLEGE, IdentityCandidate, MasterPlayerRecord, WeeklyPlayerLine
from .stats import SnapCount, StatLine, TeamDefenseLine

__all__ = [
    "DefenseContributor",
    "IdentityCandidate",
    "MasterPlayerRecord",
    "Performer",
    "SchoolAggregate",
    "SnapCount",
    "StatLine",
    "TeamDefenseLine",
    "UNKNOWN_COLLEGE",
    "WeeklyPlayerLine",
]
