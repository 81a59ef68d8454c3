"""Parse NFL schedule rows and college-football game payloads."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from alumni.ingest.columns import SCHEDULE_COLUMNS, resolve_schema
from alumni.schools import SchoolCanonicalizer, default_canonicalizer


logger = logging.getLogger(__name__)

EASTERN = ZoneInfo("America/New_York")

GAME_TYPE_WHITELIST = frozenset(
    {"REG", "REGULAR", "POST", "POSTSEASON", "WC", "DIV", "CONF", "CON", "SB"}
)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?")


@dataclass(frozen=True)
class NflScheduleGame:
    season: int
    week: int
    game_type: str
    kickoff: datetime
    game_id: str = ""
    home_team: str = ""
    away_team: str = ""


@dataclass(frozen=True)
class CfbGame:
    season: int
    week: int
    season_type: str
    home: str
    away: str
    kickoff: Optional[datetime] = None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso(value: object) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into aware UTC; naive values are read as UTC."""

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def combine_eastern(date_text: object, time_text: object) -> Optional[datetime]:
    """Join a ``YYYY-MM-DD`` date and an ``HH:MM`` Eastern time into UTC."""

    if not date_text:
        return None
    try:
        day = datetime.strptime(str(date_text).strip()[:10], "%Y-%m-%d")
    except ValueError:
        return None
    hour = minute = second = 0
    match = _TIME_PATTERN.match(str(time_text or "").strip())
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        second = int(match.group(3) or 0)
    local = day.replace(hour=hour, minute=minute, second=second, tzinfo=EASTERN)
    return local.astimezone(timezone.utc)


def is_supported_game_type(game_type: str) -> bool:
    normalized = game_type.strip().upper()
    return not normalized or normalized in GAME_TYPE_WHITELIST or normalized.startswith("PRE")


def parse_nfl_schedule(rows: Sequence[Mapping[str, object]], season: int) -> List[NflScheduleGame]:
    """Keep regular, postseason and preseason games, sorted by week then kickoff."""

    rows = list(rows)
    if not rows:
        return []
    schema = resolve_schema(rows[0], SCHEDULE_COLUMNS, required=("week",), label="nfl schedule")
    fallback_kickoff = datetime(season, 9, 1, 17, 0, tzinfo=timezone.utc)

    games: List[NflScheduleGame] = []
    for row in rows:
        game_type = schema.text(row, "game_type")
        if not is_supported_game_type(game_type):
            continue
        week = schema.optional_number(row, "week")
        if week is None:
            continue
        kickoff = None
        for candidate in schema.texts(row, "kickoff"):
            kickoff = parse_iso(candidate)
            if kickoff is not None:
                break
        if kickoff is None:
            kickoff = combine_eastern(schema.text(row, "game_date"), schema.text(row, "game_time"))
        games.append(
            NflScheduleGame(
                season=season,
                week=int(week),
                game_type=game_type.upper() or "REG",
                kickoff=kickoff or fallback_kickoff,
                game_id=schema.text(row, "game_id"),
                home_team=schema.text(row, "home_team"),
                away_team=schema.text(row, "away_team"),
            )
        )
    games.sort(key=lambda game: (game.week, game.kickoff))
    logger.debug("Parsed %d schedule games for %s", len(games), season)
    return games


def _cfb_kickoff(raw: Mapping[str, Any], season: int) -> datetime:
    for key in ("start_date", "startDate", "start_time", "kickoff"):
        parsed = parse_iso(raw.get(key))
        if parsed is not None:
            return parsed
    start_date = str(raw.get("start_date") or "").split("T")[0]
    combined = combine_eastern(start_date, raw.get("start_time"))
    if combined is not None:
        return combined
    return datetime(season, 9, 1, 18, 0, tzinfo=timezone.utc)


def sort_games(games: Iterable[CfbGame]) -> List[CfbGame]:
    """Order by week, then kickoff; games without a kickoff go last in their week."""

    far_future = datetime.max.replace(tzinfo=timezone.utc)
    return sorted(games, key=lambda game: (game.week, game.kickoff is None, game.kickoff or far_future))


def parse_cfbd_games(
    payload: Optional[Iterable[Mapping[str, Any]]],
    season: int,
    week: Optional[int] = None,
    season_type: str = "regular",
    canonicalizer: Optional[SchoolCanonicalizer] = None,
) -> List[CfbGame]:
    """Map CollegeFootballData ``/games`` entries onto canonical school names.

    Games missing either side, or whose sides do not canonicalize, are dropped.
    """

    canonicalizer = canonicalizer or default_canonicalizer()
    games: List[CfbGame] = []
    for raw in payload or ():
        home = canonicalizer.canonicalize(raw.get("home_team") or raw.get("homeTeam") or raw.get("home"))
        away = canonicalizer.canonicalize(raw.get("away_team") or raw.get("awayTeam") or raw.get("away"))
        if not home or not away:
            continue
        raw_week = raw.get("week")
        try:
            game_week = int(raw_week) if raw_week not in (None, "") else int(week or 0)
        except (TypeError, ValueError):
            game_week = int(week or 0)
        games.append(
            CfbGame(
                season=season,
                week=game_week,
                season_type=str(raw.get("season_type") or raw.get("seasonType") or season_type),
                home=home,
                away=away,
                kickoff=_cfb_kickoff(raw, season),
            )
        )
    return sort_games(games)


def filter_team_games(
    games: Iterable[CfbGame],
    team: str,
    canonicalizer: Optional[SchoolCanonicalizer] = None,
) -> List[CfbGame]:
    """Games involving ``team``; falls back to substring matches on canonical names."""

    canonicalizer = canonicalizer or default_canonicalizer()
    target = canonicalizer.canonicalize(team)
    if not target:
        logger.debug("filter_team_games: %r does not canonicalize", team)
        return []
    games = [game for game in games if game.home and game.away]
    sides: List[Tuple[CfbGame, str, str]] = [
        (game, canonicalizer.canonicalize(game.home), canonicalizer.canonicalize(game.away)) for game in games
    ]
    strict = [game for game, home, away in sides if target in (home, away)]
    if strict:
        return sort_games(strict)
    loose = [
        game
        for game, home, away in sides
        if home and away and (target in home or target in away or home in target or away in target)
    ]
    return sort_games(loose)


def detect_target_cfb_week(
    games: Iterable[CfbGame],
    now: datetime,
) -> Optional[Tuple[int, int, str]]:
    """First week whose earliest kickoff is still ahead of ``now``, else the last played week.

    Regular-season games take precedence over postseason games for the same week.
    """

    now = _as_utc(now)
    by_week: Dict[int, List[CfbGame]] = {}
    for game in games:
        by_week.setdefault(game.week, []).append(game)
    fallback: Optional[Tuple[int, int, str]] = None
    for week in sorted(by_week):
        week_games = by_week[week]
        regular = [game for game in week_games if game.season_type.lower() == "regular"]
        chosen = regular or week_games
        kickoffs = [game.kickoff for game in chosen if game.kickoff is not None]
        reference = (chosen[0].season, week, chosen[0].season_type)
        if kickoffs and now < min(kickoffs):
            return reference
        fallback = reference
    return fallback
