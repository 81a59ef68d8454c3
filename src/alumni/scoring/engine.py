"""Per-college lineup selection and team totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from alumni.config import LineupRules, get_format, get_rules
from alumni.config import settings
from alumni.models import (
    UNKNOWN_COLLEGE,
    DefenseContributor,
    Performer,
    SchoolAggregate,
    WeeklyPlayerLine,
)
from alumni.schools import SchoolCanonicalizer, default_canonicalizer, is_placeholder

from .defense import DefenseWeek
from .points import round_points


logger = logging.getLogger(__name__)

MODES = ("weekly", "avg")
DEFENSE_MODES = ("none", "approx")


@dataclass(frozen=True)
class AggregateOptions:
    include_k: bool = True
    defense: str = "none"
    defense_data: Optional[DefenseWeek] = None
    format: str = "ppr"
    rules_key: str = "ALUMNI"
    canonicalizer: Optional[SchoolCanonicalizer] = None


def group_by_college(
    lines: Iterable[WeeklyPlayerLine],
    canonicalizer: Optional[SchoolCanonicalizer] = None,
) -> Dict[str, List[WeeklyPlayerLine]]:
    """Bucket lines under every credited canonical college; lines with none go to "Unknown"."""

    canonicalizer = canonicalizer or default_canonicalizer()
    groups: Dict[str, List[WeeklyPlayerLine]] = {}
    for line in lines:
        schools: List[str] = []
        for college in line.colleges:
            if is_placeholder(college):
                continue
            school = canonicalizer.canonicalize(college)
            if school and school not in schools:
                schools.append(school)
        for school in schools or [UNKNOWN_COLLEGE]:
            groups.setdefault(school, []).append(line)
    return groups


def _ranked(pool: Sequence[WeeklyPlayerLine], selector: Mapping[str, float]) -> List[WeeklyPlayerLine]:
    # Stable: equal selector scores keep input order.
    return sorted(pool, key=lambda line: -selector.get(line.player_id, 0.0))


def select_lineup(
    players: Sequence[WeeklyPlayerLine],
    selector: Mapping[str, float],
    rules: LineupRules,
    *,
    include_k: bool,
) -> List[Tuple[str, WeeklyPlayerLine]]:
    """Fill fixed slots by selector score, then FLEX from the best remaining."""

    pools: Dict[str, List[WeeklyPlayerLine]] = {}
    for line in players:
        pools.setdefault(line.position.upper(), []).append(line)
    ranked = {position: _ranked(pool, selector) for position, pool in pools.items()}

    chosen: List[Tuple[str, WeeklyPlayerLine]] = []
    used: Set[str] = set()
    slots = rules.slot_order + (rules.optional_slots if include_k else ())
    for slot in slots:
        for line in ranked.get(slot, []):
            if line.player_id not in used:
                chosen.append((slot, line))
                used.add(line.player_id)
                break

    flex_pool = [
        line
        for position in rules.flex_positions
        for line in ranked.get(position, [])
        if line.player_id not in used
    ]
    if flex_pool:
        chosen.append(("FLEX", _ranked(flex_pool, selector)[0]))
    return chosen


def _defense_performer(
    school: str,
    week: int,
    players: Sequence[WeeklyPlayerLine],
    defense: DefenseWeek,
    rules: LineupRules,
    cap: int,
) -> Performer:
    credits: List[Tuple[WeeklyPlayerLine, float]] = []
    seen: Set[str] = set()
    for line in players:
        if line.position.upper() not in rules.defense_positions or line.player_id in seen:
            continue
        team = defense.team(line.team)
        if team is None or team.total_snaps <= 0:
            continue
        credit = team.dst_points * team.share(line.player_id)
        if credit > 0:
            credits.append((line, credit))
            seen.add(line.player_id)

    # Equal credits order by player id so the cutoff is deterministic.
    credits.sort(key=lambda item: (-item[1], item[0].player_id))
    top = credits[:cap]
    contributors = tuple(
        DefenseContributor(
            label=line.name or f"ID {line.player_id}",
            player_id=line.player_id,
            points=round_points(credit),
        )
        for line, credit in top
    )
    return Performer(
        name="Defense",
        position="DEF",
        slot="DEF",
        team=None,
        points=round_points(sum(credit for _, credit in top)),
        college=school,
        player_id=f"DEF-{school}-{week}",
        contributors=contributors,
    )


def aggregate_by_college(
    lines: Sequence[WeeklyPlayerLine],
    week: int,
    mode: str = "weekly",
    historical_averages: Optional[Mapping[str, float]] = None,
    options: Optional[AggregateOptions] = None,
) -> List[SchoolAggregate]:
    """Score every college bucket and return aggregates sorted by total, highest first.

    ``mode="avg"`` ranks starters by ``historical_averages`` (players missing
    from it rank at zero); reported points are always this week's.
    """

    options = options or AggregateOptions()
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
    if options.defense not in DEFENSE_MODES:
        raise ValueError(f"defense must be one of {DEFENSE_MODES}, got {options.defense!r}")

    rules = get_rules(options.rules_key)
    fmt = get_format(options.format).key
    week_points = {line.player_id: line.points for line in lines}
    if mode == "avg" and historical_averages is not None:
        selector: Mapping[str, float] = historical_averages
    else:
        selector = week_points

    defense = options.defense_data if options.defense == "approx" else None
    if options.defense == "approx" and defense is None:
        logger.warning("Defense credit requested for week %s without defense data", week)
    cap = settings.defense_contributor_cap(rules.defense_contributors)

    results: List[SchoolAggregate] = []
    for school, players in group_by_college(lines, options.canonicalizer).items():
        performers = [
            Performer(
                name=line.name,
                position=line.position.upper(),
                slot=slot,
                team=line.team or None,
                points=round_points(week_points.get(line.player_id, line.points)),
                college=school,
                player_id=line.player_id,
            )
            for slot, line in select_lineup(players, selector, rules, include_k=options.include_k)
        ]
        if defense is not None:
            performers.append(_defense_performer(school, week, players, defense, rules, cap))
        results.append(
            SchoolAggregate(
                school=school,
                week=week,
                format=fmt,
                mode=mode,
                total_points=round_points(sum(performer.points for performer in performers)),
                performers=tuple(performers),
            )
        )

    results.sort(key=lambda aggregate: (-aggregate.total_points, aggregate.school))
    return results
