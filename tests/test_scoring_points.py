import pytest

from alumni.models import StatLine, TeamDefenseLine
from alumni.scoring import (
    compute_dst_points,
    compute_fantasy_points,
    points_allowed_bonus,
    team_defense_from_offense,
)


def _stat(**kwargs):
    return StatLine(player_id="p1", **kwargs)


def test_fantasy_points_by_format():
    stat = _stat(receptions=6, receiving_yards=75, receiving_tds=1, fumbles_lost=1)
    assert compute_fantasy_points(stat, "ppr") == pytest.approx(17.5)
    assert compute_fantasy_points(stat, "half") == pytest.approx(14.5)
    assert compute_fantasy_points(stat, "standard") == pytest.approx(11.5)


def test_fantasy_points_passing_and_kicking():
    stat = _stat(passing_yards=300, passing_tds=3, interceptions=1, rushing_yards=25, field_goals_made=2, extra_points_made=3)
    assert compute_fantasy_points(stat) == pytest.approx(12 + 12 - 2 + 2.5 + 6 + 3)


def test_unknown_format_raises():
    with pytest.raises(KeyError):
        compute_fantasy_points(_stat(), "superflex")


@pytest.mark.parametrize(
    "allowed, bonus",
    [(0, 10), (1, 7), (6, 7), (7, 4), (13, 4), (14, 1), (20, 1), (21, 0), (27, 0), (28, -1), (34, -1), (35, -4), (None, 10)],
)
def test_points_allowed_tiers(allowed, bonus):
    assert points_allowed_bonus(allowed) == bonus


def test_dst_points_sum_components():
    line = TeamDefenseLine(
        team="SF",
        sacks=4,
        interceptions=2,
        fumble_recoveries=1,
        safeties=1,
        defensive_tds=1,
        return_tds=0,
        points_allowed=10,
    )
    assert compute_dst_points(line) == pytest.approx(4 + 4 + 2 + 2 + 6 + 4)


def test_team_defense_from_offense_rows():
    rows = [
        {"season": "2025", "week_num": "3", "club_code": "PHI", "opp_club_code": "DAL", "points_for": "24",
         "pass_sacks_allowed": "1", "interceptions_thrown": "0", "fumbles_lost_offense": "1"},
        {"season": "2025", "week_num": "3", "club_code": "DAL", "opp_club_code": "PHI", "points_for": "21",
         "pass_sacks_allowed": "3", "interceptions_thrown": "2", "fumbles_lost_offense": "2"},
    ]
    lines = {line.team: line for line in team_defense_from_offense(rows, week=3)}

    assert lines["PHI"].points_allowed == pytest.approx(21)
    assert lines["PHI"].sacks == pytest.approx(3)
    assert compute_dst_points(lines["PHI"]) == pytest.approx(11)
    assert lines["DAL"].points_allowed == pytest.approx(24)
    assert compute_dst_points(lines["DAL"]) == pytest.approx(3)
