"""Head-to-head results between college aggregates and the standings they produce."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from alumni.models import SchoolAggregate
from alumni.schools import SchoolCanonicalizer, default_canonicalizer

from .points import round_points


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledMatchup:
    home: str
    away: str
    kickoff: Optional[datetime] = None


@dataclass(frozen=True)
class MatchupResult:
    home: str
    away: str
    home_total: float
    away_total: float
    winner: str  # "home", "away" or "tie"
    kickoff: Optional[datetime] = None

    @property
    def winning_school(self) -> Optional[str]:
        if self.winner == "home":
            return self.home
        if self.winner == "away":
            return self.away
        return None


@dataclass
class StandingsRow:
    school: str
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        if not self.games:
            return 0.0
        return (self.wins + 0.5 * self.ties) / self.games

    @property
    def point_diff(self) -> float:
        return round_points(self.points_for - self.points_against)


def score_matchups(
    aggregates: Iterable[SchoolAggregate],
    games: Iterable[ScheduledMatchup],
    canonicalizer: Optional[SchoolCanonicalizer] = None,
) -> List[MatchupResult]:
    """Pair each scheduled game with both schools' totals; absent schools score zero.

    ``games`` may be any objects exposing ``home``, ``away`` and optionally
    ``kickoff``, such as parsed college games.
    """

    canonicalizer = canonicalizer or default_canonicalizer()
    totals: Dict[str, float] = {}
    for aggregate in aggregates:
        totals.setdefault(canonicalizer.canonicalize(aggregate.school), aggregate.total_points)

    results: List[MatchupResult] = []
    for game in games:
        home = canonicalizer.canonicalize(game.home)
        away = canonicalizer.canonicalize(game.away)
        if not home or not away:
            logger.debug("Skipping game with blank side: %r vs %r", game.home, game.away)
            continue
        home_total = round_points(totals.get(home, 0.0))
        away_total = round_points(totals.get(away, 0.0))
        if home_total > away_total:
            winner = "home"
        elif away_total > home_total:
            winner = "away"
        else:
            winner = "tie"
        results.append(
            MatchupResult(
                home=home,
                away=away,
                home_total=home_total,
                away_total=away_total,
                winner=winner,
                kickoff=getattr(game, "kickoff", None),
            )
        )
    return results


def compute_standings(results: Sequence[MatchupResult]) -> List[StandingsRow]:
    """Win/loss/tie records sorted by win percentage, then point differential."""

    rows: Dict[str, StandingsRow] = {}
    for result in results:
        home = rows.setdefault(result.home, StandingsRow(school=result.home))
        away = rows.setdefault(result.away, StandingsRow(school=result.away))
        home.points_for += result.home_total
        home.points_against += result.away_total
        away.points_for += result.away_total
        away.points_against += result.home_total
        if result.winner == "home":
            home.wins += 1
            away.losses += 1
        elif result.winner == "away":
            away.wins += 1
            home.losses += 1
        else:
            home.ties += 1
            away.ties += 1

    for row in rows.values():
        row.points_for = round_points(row.points_for)
        row.points_against = round_points(row.points_against)
    return sorted(rows.values(), key=lambda row: (-row.win_pct, -row.point_diff, row.school))
