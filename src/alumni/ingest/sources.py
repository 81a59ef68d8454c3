"""Fetch raw nflverse release assets and hand decoded rows to the parsers.

Fetches are plain GETs through ``httpx.AsyncClient``; a 404 means the asset is
not published yet and surfaces as ``Pending`` from :meth:`AssetSource.load_week`.
Nothing here retries.
"""

from __future__ import annotations

import asyncio
import csv
import gzip
import io
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import httpx

from alumni.config import settings
from alumni.errors import AssetMissingError
from alumni.models import MasterPlayerRecord, SnapCount, StatLine, TeamDefenseLine
from alumni.results import Available, Pending, WeekResult
from alumni.schedule.games import NflScheduleGame, parse_nfl_schedule

from .stats import parse_master_rows, parse_player_stats, parse_snap_counts, parse_team_defense


logger = logging.getLogger(__name__)

ASSET_PATHS: Dict[str, str] = {
    "player_stats": "stats_player/stats_player_week_{season}.csv.gz",
    "snap_counts": "snap_counts/snap_counts_{season}.csv",
    "team_stats": "stats_team/stats_team_week_{season}.csv.gz",
    "schedule": "schedules/sched_{season}.csv",
    "players": "players/players.csv",
}

_GZIP_MAGIC = b"\x1f\x8b"


def decode_csv(content: bytes, *, source: str = "") -> List[Dict[str, str]]:
    """Decode CSV bytes into dict rows; gzip is detected by magic bytes, not suffix."""

    if content[:2] == _GZIP_MAGIC:
        logger.debug("Decompressing %s", source or "payload")
        content = gzip.decompress(content)
    text = content.decode("utf-8-sig")
    return [dict(row) for row in csv.DictReader(io.StringIO(text))]


@dataclass(frozen=True)
class WeekBundle:
    season: int
    week: int
    stats: Tuple[StatLine, ...]
    snaps: Tuple[SnapCount, ...]
    team_defense: Tuple[TeamDefenseLine, ...]


class AssetSource:
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.http_timeout())
        self._base_url = (base_url or settings.asset_base_url()).rstrip("/")

    async def __aenter__(self) -> "AssetSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def url_for(self, asset: str, season: Optional[int] = None) -> str:
        try:
            path = ASSET_PATHS[asset]
        except KeyError:
            raise KeyError(f"Unknown asset {asset!r}") from None
        return f"{self._base_url}/{path.format(season=season)}"

    async def fetch_rows(self, asset: str, season: int, week: Optional[int] = None) -> List[Dict[str, str]]:
        url = self.url_for(asset, season)
        response = await self._client.get(url, follow_redirects=True)
        if response.status_code == 404:
            raise AssetMissingError(season, week, url)
        response.raise_for_status()
        rows = decode_csv(response.content, source=url)
        logger.info("Fetched %d %s rows for season %s", len(rows), asset, season)
        return rows

    async def _fetch_optional(self, asset: str, season: int, week: int) -> List[Dict[str, str]]:
        try:
            return await self.fetch_rows(asset, season, week)
        except AssetMissingError as exc:
            logger.warning("%s unavailable: %s", asset, exc)
            return []

    async def load_week(self, season: int, week: int) -> WeekResult:
        """Fetch stats, snaps and team stats concurrently for one week."""

        try:
            stat_rows, snap_rows, team_rows = await asyncio.gather(
                self.fetch_rows("player_stats", season, week),
                self._fetch_optional("snap_counts", season, week),
                self._fetch_optional("team_stats", season, week),
            )
        except AssetMissingError as exc:
            logger.info("Weekly stats not published: %s", exc)
            return Pending(season=season, week=week)

        stats = parse_player_stats(stat_rows, season=season, week=week)
        if not stats:
            return Pending(season=season, week=week)
        return Available(
            WeekBundle(
                season=season,
                week=week,
                stats=tuple(stats),
                snaps=tuple(parse_snap_counts(snap_rows, week=week)),
                team_defense=tuple(parse_team_defense(team_rows, week=week)),
            )
        )

    async def load_master(self, season: Optional[int] = None) -> List[MasterPlayerRecord]:
        rows = await self.fetch_rows("players", season or 0)
        return parse_master_rows(rows, season=season)

    async def load_schedule(self, season: int) -> List[NflScheduleGame]:
        """Fetch and parse the season's NFL schedule; a missing file raises ``AssetMissingError``."""

        rows = await self.fetch_rows("schedule", season)
        return parse_nfl_schedule(rows, season)
