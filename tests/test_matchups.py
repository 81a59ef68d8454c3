import pytest

from alumni.models import SchoolAggregate
from alumni.scoring import ScheduledMatchup, compute_standings, score_matchups


def _aggregate(school, total):
    return SchoolAggregate(school=school, week=1, format="ppr", total_points=total)


def test_score_matchups_joins_by_canonical_name():
    aggregates = [_aggregate("Ohio State", 88.5), _aggregate("Michigan", 70.25)]
    games = [
        ScheduledMatchup(home="Ohio State Buckeyes", away="Michigan Wolverines"),
        ScheduledMatchup(home="Michigan", away="Vanderbilt"),
        ScheduledMatchup(home="Utah", away="Utah St"),
    ]

    first, second, third = score_matchups(aggregates, games)

    assert (first.home, first.away) == ("Ohio State", "Michigan")
    assert first.winner == "home"
    assert first.winning_school == "Ohio State"
    assert second.away_total == 0.0
    assert second.winner == "home"
    assert third.winner == "tie"
    assert third.winning_school is None


def test_compute_standings_orders_by_pct_then_differential():
    aggregates = [_aggregate("Alabama", 90), _aggregate("Auburn", 60), _aggregate("Georgia", 75), _aggregate("Florida", 75)]
    games = [
        ScheduledMatchup(home="Alabama", away="Auburn"),
        ScheduledMatchup(home="Georgia", away="Florida"),
    ]

    standings = compute_standings(score_matchups(aggregates, games))

    assert [row.school for row in standings] == ["Alabama", "Florida", "Georgia", "Auburn"]
    alabama = standings[0]
    assert (alabama.wins, alabama.losses, alabama.ties) == (1, 0, 0)
    assert alabama.points_for == pytest.approx(90)
    assert alabama.point_diff == pytest.approx(30)
    assert standings[1].win_pct == pytest.approx(0.5)
    assert standings[-1].losses == 1
