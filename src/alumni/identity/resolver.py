"""Join weekly stat rows to master records and their canonical colleges."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple, Union

from alumni.models import (
    UNKNOWN_COLLEGE,
    IdentityCandidate,
    MasterPlayerRecord,
    SnapCount,
    StatLine,
)
from alumni.schools import SchoolCanonicalizer, default_canonicalizer, is_placeholder

from .index import SeasonIndex


logger = logging.getLogger(__name__)

StatLike = Union[IdentityCandidate, StatLine, SnapCount]


def candidate_from(stat: StatLike) -> IdentityCandidate:
    """Extract the fallback keys carried by a parsed row."""

    if isinstance(stat, IdentityCandidate):
        return stat
    gsis_ids = getattr(stat, "gsis_ids", ())
    return IdentityCandidate(
        primary_id=stat.player_id if stat.has_stable_id else None,
        alt_ids=frozenset(stat.alt_ids),
        gsis_ids=frozenset(gsis_ids),
        name=stat.name,
        team=stat.team,
        college=getattr(stat, "college", None),
        week=stat.week or None,
    )


@dataclass(frozen=True)
class IdentityMatch:
    record: Optional[MasterPlayerRecord]
    colleges: Tuple[str, ...]
    via: Optional[str] = None

    @property
    def college(self) -> str:
        return self.colleges[0] if self.colleges else UNKNOWN_COLLEGE


class PlayerIdentityResolver:
    """Read-only resolution against prebuilt season indexes."""

    def __init__(
        self,
        indexes: Union[SeasonIndex, Iterable[SeasonIndex]],
        canonicalizer: Optional[SchoolCanonicalizer] = None,
    ):
        if isinstance(indexes, SeasonIndex):
            indexes = [indexes]
        self._indexes = MappingProxyType({index.season: index for index in indexes})
        self._canonicalizer = canonicalizer or default_canonicalizer()

    @property
    def canonicalizer(self) -> SchoolCanonicalizer:
        return self._canonicalizer

    def index_for(self, season: int) -> Optional[SeasonIndex]:
        return self._indexes.get(season)

    def _matches(
        self, candidate: IdentityCandidate, season: int, week: Optional[int]
    ) -> Iterator[Tuple[str, MasterPlayerRecord]]:
        index = self._indexes.get(season)
        if index is None:
            return
        for scope in index.scopes(week if week is not None else candidate.week):
            yield from scope.matches(candidate)

    def match(self, stat: StatLike, season: int, week: Optional[int] = None) -> IdentityMatch:
        candidate = candidate_from(stat)
        record: Optional[MasterPlayerRecord] = None
        via: Optional[str] = None
        colleges: Tuple[str, ...] = ()
        if candidate.college and not is_placeholder(candidate.college):
            colleges = self._canonicalizer.split_colleges(candidate.college)
        for kind, found in self._matches(candidate, season, week):
            if record is None:
                record, via = found, kind
            if colleges:
                break
            if not is_placeholder(found.college):
                colleges = self._canonicalizer.split_colleges(found.college)
                if colleges:
                    break
        if record is None:
            logger.debug("No master record for %s (%s) in season %s", candidate.name, candidate.team, season)
        return IdentityMatch(record=record, colleges=colleges, via=via)

    def resolve(self, stat: StatLike, season: int, week: Optional[int] = None) -> Optional[MasterPlayerRecord]:
        for _, record in self._matches(candidate_from(stat), season, week):
            return record
        return None

    def resolve_colleges(self, stat: StatLike, season: int, week: Optional[int] = None) -> Tuple[str, ...]:
        return self.match(stat, season, week).colleges

    def resolve_college(self, stat: StatLike, season: int, week: Optional[int] = None) -> str:
        """Canonical college of the best match, or ``"Unknown"``."""

        return self.match(stat, season, week).college
