import pytest

from alumni.identity import (
    PlayerIdentityResolver,
    SeasonIndex,
    add_defensive_lines,
    build_weekly_lines,
)
from alumni.models import IdentityCandidate, MasterPlayerRecord, SnapCount, StatLine


def _record(player_id, name, team, college, **kwargs):
    return MasterPlayerRecord(player_id=player_id, name=name, team=team, college=college, **kwargs)


def _resolver(master, weekly=()):
    return PlayerIdentityResolver(SeasonIndex.build(2024, master, weekly))


def test_stable_id_wins_over_name_and_team():
    master = [
        _record("00-1", "Jordan Smith", "KC", "Ohio State Buckeyes", position="WR"),
        _record("00-2", "Jordan Smith", "KC", "Alabama", position="RB"),
    ]
    resolver = _resolver(master)
    stat = StatLine(player_id="00-2", name="Jordan Smith", team="KC", week=1)

    match = resolver.match(stat, 2024, 1)
    assert match.record.player_id == "00-2"
    assert match.via == "id"
    assert match.college == "Alabama"


def test_alternate_id_and_name_fallbacks():
    master = [_record("00-1", "Casey Long", "DAL", "Miami", alt_ids=("LongCa00",))]
    resolver = _resolver(master)

    by_alt = IdentityCandidate(alt_ids=frozenset({"LongCa00"}), name="C. Long", team="NYG")
    assert resolver.match(by_alt, 2024).via == "alt_id"

    by_name_team = IdentityCandidate(name="casey  long", team="DAL")
    match = resolver.match(by_name_team, 2024)
    assert match.via == "name_team"
    assert match.colleges == ("Miami (FL)",)

    by_name = IdentityCandidate(name="Casey Long", team="NYG")
    assert resolver.match(by_name, 2024).via == "name"


def test_week_snapshot_is_searched_before_season():
    master = [_record("00-1", "Sam Roe", "DEN", "Utah")]
    weekly = [_record("00-9", "Sam Roe", "DEN", "Utah State", week=4)]
    resolver = _resolver(master, weekly)
    candidate = IdentityCandidate(name="Sam Roe", team="DEN")

    assert resolver.resolve(candidate, 2024, week=4).player_id == "00-9"
    assert resolver.resolve(candidate, 2024, week=5).player_id == "00-1"


def test_placeholder_college_falls_through_to_next_record():
    master = [
        _record("00-1", "Lee Park", "SEA", "Unknown", alt_ids=("ParkLe00",)),
        _record("00-7", "Lee Park", "SEA", "Oregon St"),
    ]
    resolver = _resolver(master)
    candidate = IdentityCandidate(primary_id="00-1", alt_ids=frozenset({"00-7"}), name="Lee Park", team="SEA")

    match = resolver.match(candidate, 2024)
    assert match.record.player_id == "00-1"
    assert match.colleges == ("Oregon State",)


def test_row_college_beats_master_college():
    resolver = _resolver([_record("00-1", "Ty Vance", "MIN", "Iowa")])
    stat = StatLine(player_id="00-1", name="Ty Vance", team="MIN", college="Iowa State")
    assert resolver.resolve_college(stat, 2024) == "Iowa State"


def test_unresolved_player_is_unknown():
    resolver = _resolver([])
    stat = StatLine(player_id="00-5", name="Nobody", team="LV")
    assert resolver.resolve(stat, 2024) is None
    assert resolver.resolve_college(stat, 2024) == "Unknown"
    assert resolver.resolve_college(stat, 2031) == "Unknown"


def test_build_weekly_lines_keeps_unresolved_rows():
    master = [_record("00-1", "Ace Arm", "BUF", "Wyoming", position="QB")]
    resolver = _resolver(master)
    stats = [
        StatLine(player_id="00-1", name="Ace Arm", team="BUF", week=2, passing_yards=250, passing_tds=2),
        StatLine(player_id="ghost|BUF", has_stable_id=False, name="Ghost", team="BUF", week=2, rushing_yards=30),
        StatLine(player_id="00-1", name="Ace Arm", team="BUF", week=1, passing_yards=100),
    ]

    report = build_weekly_lines(stats, resolver, season=2024, week=2)
    assert report.matched_players == 1
    assert report.missing_players == ["Ghost"]
    assert len(report.lines) == 2
    ace, ghost = report.lines
    assert ace.colleges == ("Wyoming",)
    assert ace.position == "QB"
    assert ace.points == pytest.approx(18.0)
    assert ghost.colleges == ()
    assert ghost.college_label == "Unknown"


def test_build_weekly_lines_adopts_master_id_for_unstable_rows():
    resolver = _resolver([_record("00-3", "Max Field", "TB", "Baylor", position="TE")])
    stat = StatLine(player_id="max field|TB", has_stable_id=False, name="Max Field", team="TB", week=1)
    [line] = build_weekly_lines([stat], resolver, season=2024, week=1).lines
    assert line.player_id == "00-3"
    assert line.position == "TE"


def test_add_defensive_lines_adds_snap_only_defenders():
    resolver = _resolver([_record("00-8", "Cam Corner", "KC", "LSU", position="CB")])
    existing = build_weekly_lines(
        [StatLine(player_id="00-1", name="QB", team="KC", position="QB", week=1)],
        resolver,
        season=2024,
        week=1,
    ).lines
    snaps = [
        SnapCount(player_id="00-8", name="Cam Corner", team="KC", position="CB", defense_snaps=50, week=1),
        SnapCount(player_id="00-9", name="Wide Out", team="KC", position="WR", defense_snaps=0, week=1),
        SnapCount(player_id="00-8", name="Cam Corner", team="KC", position="CB", defense_snaps=5, week=1),
    ]

    lines = add_defensive_lines(existing, snaps, resolver, season=2024, week=1)
    assert [line.player_id for line in lines] == ["00-1", "00-8"]
    assert lines[1].points == 0.0
    assert lines[1].colleges == ("LSU",)
