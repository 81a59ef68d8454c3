from datetime import datetime, timezone

from alumni.schedule import (
    CfbGame,
    detect_target_cfb_week,
    filter_team_games,
    parse_cfbd_games,
    parse_nfl_schedule,
)


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def test_parse_nfl_schedule_keeps_preseason_variants():
    rows = [
        {"game_type": "PRE3", "week": "3", "start_time": "2024-08-25T00:00:00Z"},
        {"game_type": "REG", "week": "1", "start_time": "2024-09-10T00:00:00Z"},
        {"game_type": "XYZ", "week": "2", "start_time": "2024-09-15T00:00:00Z"},
    ]
    games = parse_nfl_schedule(rows, 2099)

    assert [(game.week, game.game_type) for game in games] == [(1, "REG"), (3, "PRE3")]
    assert games[0].kickoff == _utc(2024, 9, 10)
    assert all(game.season == 2099 for game in games)


def test_parse_nfl_schedule_combines_eastern_date_and_time():
    rows = [
        {"game_id": "2024_01_BAL_KC", "game_type": "REG", "week": "1", "gameday": "2024-09-05",
         "gametime": "20:20", "home_team": "KC", "away_team": "BAL"},
        {"game_id": "2024_17_X_Y", "game_type": "", "week": "17", "gameday": "2024-12-29", "gametime": "13:00",
         "home_team": "X", "away_team": "Y"},
        {"game_id": "2024_18_A_B", "game_type": "REG", "week": "18", "gameday": "", "gametime": "",
         "home_team": "A", "away_team": "B"},
    ]
    games = parse_nfl_schedule(rows, 2024)

    assert games[0].kickoff == _utc(2024, 9, 6, 0, 20)
    assert games[0].game_id == "2024_01_BAL_KC"
    assert games[0].home_team == "KC"
    assert games[1].game_type == "REG"
    assert games[1].kickoff == _utc(2024, 12, 29, 18)
    assert games[2].kickoff == _utc(2024, 9, 1, 17)


def test_parse_cfbd_games_canonicalizes_and_skips_incomplete():
    payload = [
        {"week": 13, "home_team": "Ohio State Buckeyes", "away_team": "Michigan", "start_date": "2024-11-30T17:00:00.000Z"},
        {"week": 1, "home_team": "Miami", "away_team": "Florida", "start_date": "2024-08-31T19:30:00.000Z"},
        {"week": 2, "home_team": "", "away_team": "Utah"},
    ]
    games = parse_cfbd_games(payload, 2024, season_type="regular")

    assert [(game.home, game.away) for game in games] == [("Miami (FL)", "Florida"), ("Ohio State", "Michigan")]
    assert games[1].kickoff == _utc(2024, 11, 30, 17)
    assert games[0].season_type == "regular"


def test_parse_cfbd_games_defaults_missing_kickoff():
    [game] = parse_cfbd_games([{"home": "Utah", "away": "BYU"}], 2024, week=4)
    assert game.week == 4
    assert game.kickoff == _utc(2024, 9, 1, 18)


def test_filter_team_games_matches_nicknames():
    slate = [
        CfbGame(season=2024, week=13, season_type="regular", home="Ohio State", away="Michigan",
                kickoff=_utc(2024, 11, 30, 17)),
        CfbGame(season=2024, week=12, season_type="regular", home="Indiana", away="Ohio State",
                kickoff=_utc(2024, 11, 23, 17)),
        CfbGame(season=2024, week=12, season_type="regular", home="Utah", away="BYU", kickoff=None),
    ]
    results = filter_team_games(slate, "Ohio State Buckeyes")
    assert [game.week for game in results] == [12, 13]
    assert filter_team_games(slate, "") == []


def test_filter_team_games_falls_back_to_substring():
    slate = [CfbGame(season=2024, week=3, season_type="regular", home="Texas A&M-Commerce", away="Utah")]
    assert len(filter_team_games(slate, "Texas A&M")) == 1


def test_detect_target_cfb_week():
    games = [
        CfbGame(season=2024, week=1, season_type="regular", home="A", away="B", kickoff=_utc(2024, 8, 31)),
        CfbGame(season=2024, week=2, season_type="regular", home="C", away="D", kickoff=_utc(2024, 9, 7)),
    ]
    assert detect_target_cfb_week(games, _utc(2024, 9, 3)) == (2024, 2, "regular")
    assert detect_target_cfb_week(games, _utc(2024, 12, 1)) == (2024, 2, "regular")
    assert detect_target_cfb_week([], _utc(2024, 12, 1)) is None
