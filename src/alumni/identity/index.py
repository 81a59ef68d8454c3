"""Season-scoped lookup index over master/roster player records."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from alumni.ingest.stats import normalize_player_name, parse_master_rows
from alumni.models import IdentityCandidate, MasterPlayerRecord


logger = logging.getLogger(__name__)


def name_team_key(name: str, team: str) -> str:
    return f"{normalize_player_name(name)}|{team.upper()}"


@dataclass(frozen=True)
class PlayerIndex:
    """Four read-only maps; the first record seen for a key wins."""

    by_id: Mapping[str, MasterPlayerRecord]
    by_alt_id: Mapping[str, MasterPlayerRecord]
    by_name_team: Mapping[str, MasterPlayerRecord]
    by_name: Mapping[str, MasterPlayerRecord]

    @classmethod
    def build(cls, records: Iterable[MasterPlayerRecord]) -> "PlayerIndex":
        by_id: Dict[str, MasterPlayerRecord] = {}
        by_alt_id: Dict[str, MasterPlayerRecord] = {}
        by_name_team: Dict[str, MasterPlayerRecord] = {}
        by_name: Dict[str, MasterPlayerRecord] = {}
        for record in records:
            by_id.setdefault(record.player_id, record)
            for alt in record.alt_ids + record.gsis_ids:
                by_alt_id.setdefault(alt, record)
            name = normalize_player_name(record.name)
            if not name:
                continue
            by_name.setdefault(name, record)
            if record.team:
                by_name_team.setdefault(name_team_key(record.name, record.team), record)
        return cls(
            by_id=MappingProxyType(by_id),
            by_alt_id=MappingProxyType(by_alt_id),
            by_name_team=MappingProxyType(by_name_team),
            by_name=MappingProxyType(by_name),
        )

    def __len__(self) -> int:
        return len(self.by_id)

    def _by_any_id(self, key: str) -> Optional[MasterPlayerRecord]:
        return self.by_id.get(key) or self.by_alt_id.get(key)

    def matches(self, candidate: IdentityCandidate) -> Iterator[Tuple[str, MasterPlayerRecord]]:
        """Yield ``(via, record)`` in fallback-chain order."""

        if candidate.primary_id:
            record = self.by_id.get(candidate.primary_id)
            if record is not None:
                yield "id", record
        alt_keys = sorted(candidate.alt_ids)
        if candidate.primary_id:
            alt_keys.insert(0, candidate.primary_id)
        for key in alt_keys:
            record = self.by_alt_id.get(key) if key == candidate.primary_id else self._by_any_id(key)
            if record is not None:
                yield "alt_id", record
        for key in sorted(candidate.gsis_ids):
            record = self._by_any_id(key)
            if record is not None:
                yield "gsis_id", record
        name = normalize_player_name(candidate.name)
        if name and candidate.team:
            record = self.by_name_team.get(name_team_key(candidate.name, candidate.team))
            if record is not None:
                yield "name_team", record
        if name:
            record = self.by_name.get(name)
            if record is not None:
                yield "name", record


@dataclass(frozen=True)
class SeasonIndex:
    """Per-season index plus optional per-week roster snapshots.

    Built once, then shared read-only across resolvers and requests.
    """

    season: int
    players: PlayerIndex
    weeks: Mapping[int, PlayerIndex]

    @classmethod
    def build(
        cls,
        season: int,
        master_records: Sequence[MasterPlayerRecord],
        weekly_records: Sequence[MasterPlayerRecord] = (),
    ) -> "SeasonIndex":
        by_week: Dict[int, List[MasterPlayerRecord]] = defaultdict(list)
        for record in weekly_records:
            if record.week is not None:
                by_week[record.week].append(record)
        players = PlayerIndex.build(list(master_records) + list(weekly_records))
        weeks = {week: PlayerIndex.build(records) for week, records in sorted(by_week.items())}
        logger.info(
            "Indexed %d players for season %s (%d weekly snapshots)",
            len(players),
            season,
            len(weeks),
        )
        return cls(season=season, players=players, weeks=MappingProxyType(weeks))

    @classmethod
    def from_rows(
        cls,
        season: int,
        master_rows: Sequence[Mapping[str, object]],
        roster_rows: Sequence[Mapping[str, object]] = (),
        *,
        extra_columns: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> "SeasonIndex":
        return cls.build(
            season,
            parse_master_rows(master_rows, season=season, extra_columns=extra_columns),
            parse_master_rows(roster_rows, season=season, extra_columns=extra_columns),
        )

    def scopes(self, week: Optional[int]) -> List[PlayerIndex]:
        """Week snapshot first (when present), then the whole season."""

        scopes = []
        if week is not None and week in self.weeks:
            scopes.append(self.weeks[week])
        scopes.append(self.players)
        return scopes
