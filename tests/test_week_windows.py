from datetime import datetime, timezone

import pytest

from alumni.errors import ScheduleError
from alumni.schedule import (
    CfbGame,
    CfbWeekReference,
    NflScheduleGame,
    build_week_windows,
    map_cfb_games_to_nfl_weeks,
    map_cfb_week_to_nfl_week,
    map_kickoff_to_nfl_week,
)


def _utc(text):
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


def _game(week, game_type, kickoff, season=2024):
    return NflScheduleGame(season=season, week=week, game_type=game_type, kickoff=_utc(kickoff))


def _schedule(types=("PRE", "PRE", "PRE3", "REGULAR_SEASON", "REG")):
    kickoffs = (
        "2024-08-11T00:00:00Z",
        "2024-08-18T00:00:00Z",
        "2024-08-25T00:00:00Z",
        "2024-09-10T01:15:00Z",
        "2024-09-17T01:15:00Z",
    )
    return [_game(week, kind, kickoff) for week, (kind, kickoff) in enumerate(zip(types, kickoffs), start=1)]


def _cfb(kickoff):
    return CfbGame(season=2024, week=0, season_type="regular", home="A", away="B", kickoff=_utc(kickoff))


def test_windows_close_on_tuesday_morning():
    windows = build_week_windows(_schedule())
    assert [(w.season, w.week) for w in windows] == [(2024, w) for w in range(1, 6)]
    assert windows[0].cutoff == _utc("2024-08-13T10:00:00Z")
    # A Tuesday 01:15 kickoff closes the same morning.
    assert windows[3].cutoff == _utc("2024-09-10T10:00:00Z")
    assert windows[2].game_types == ("PRE3",)
    assert windows[3].is_regular and not windows[3].is_preseason


def test_late_kickoff_rolls_cutoff_forward_a_week():
    [window] = build_week_windows([_game(1, "REG", "2024-09-10T11:00:00Z")])
    assert window.cutoff == _utc("2024-09-17T10:00:00Z")


def test_build_week_windows_counts_games_and_types():
    schedule = [
        _game(1, "REG", "2024-09-06T00:20:00Z"),
        _game(1, "reg", "2024-09-08T17:00:00Z"),
        _game(1, "REG", "2024-09-10T00:15:00Z"),
    ]
    [window] = build_week_windows(schedule)
    assert window.games == 3
    assert window.game_types == ("REG",)
    assert window.cutoff == _utc("2024-09-10T10:00:00Z")


def test_missing_schedule_raises():
    with pytest.raises(ScheduleError):
        build_week_windows(None)
    assert build_week_windows([]) == []


def test_cfb_weeks_align_to_preseason_then_regular():
    windows = build_week_windows(_schedule())
    week1 = [_cfb("2024-08-24T20:00:00Z"), _cfb("2024-08-25T02:00:00Z")]
    assert map_cfb_week_to_nfl_week(week1, windows, 1, 2023) == CfbWeekReference(2024, 3)
    assert map_cfb_week_to_nfl_week([_cfb("2024-08-31T18:00:00Z")], windows, 2, 2023) == CfbWeekReference(2024, 4)
    assert map_cfb_week_to_nfl_week([_cfb("2024-09-07T18:00:00Z")], windows, 3, 2023) == CfbWeekReference(2024, 5)


def test_cfb_weeks_align_without_kickoffs():
    windows = build_week_windows(_schedule(types=("PRE", "PRE3", "PRESEASON", "REG", "REGULAR")))
    assert map_cfb_week_to_nfl_week([], windows, 1, 2023) == CfbWeekReference(2024, 3)
    assert map_cfb_week_to_nfl_week([], windows, 2, 2023) == CfbWeekReference(2024, 4)
    assert map_cfb_week_to_nfl_week([], windows, 3, 2023) == CfbWeekReference(2024, 5)
    assert map_cfb_week_to_nfl_week([], windows, 12, 2023) == CfbWeekReference(2024, 5)


def test_cfb_week_mapping_is_monotonic():
    windows = build_week_windows(_schedule())
    mapped = [map_cfb_week_to_nfl_week([], windows, week, 2023) for week in range(0, 16)]
    assert mapped == sorted(mapped)


def test_fallbacks_without_windows():
    assert map_cfb_week_to_nfl_week([], [], 5, 2023) == CfbWeekReference(2023, 18)
    preseason_only = build_week_windows([_game(2, "PRE", "2024-08-18T00:00:00Z")])
    late_game = [_utc("2024-08-21T00:00:00Z")]
    assert map_cfb_week_to_nfl_week(late_game, preseason_only, 4, 2023) == CfbWeekReference(2024, 2)
    early_game = [_utc("2024-08-01T00:00:00Z")]
    assert map_cfb_week_to_nfl_week(early_game, preseason_only, 4, 2023) == CfbWeekReference(2023, 18)


def test_kickoff_respects_tuesday_cutoff():
    windows = build_week_windows([_game(1, "REG", "2024-09-10T01:15:00Z"), _game(2, "REG", "2024-09-17T01:15:00Z")])
    assert map_kickoff_to_nfl_week(_utc("2024-09-07T18:00:00Z"), windows, 2023) == CfbWeekReference(2023, 18)
    assert map_kickoff_to_nfl_week(_utc("2024-09-12T18:00:00Z"), windows, 2023) == CfbWeekReference(2024, 1)
    assert map_kickoff_to_nfl_week(None, windows, 2023) == CfbWeekReference(2023, 18)


def test_map_cfb_games_to_nfl_weeks_keeps_game():
    windows = build_week_windows([_game(1, "REG", "2024-09-10T01:15:00Z")])
    game = CfbGame(season=2024, week=3, season_type="regular", home="Utah", away="Baylor", kickoff=_utc("2024-09-14T19:00:00Z"))
    [(mapped_game, reference)] = map_cfb_games_to_nfl_weeks([game], windows, 2023)
    assert mapped_game is game
    assert reference == CfbWeekReference(2024, 1)


def test_naive_kickoffs_are_read_as_utc():
    [window] = build_week_windows([NflScheduleGame(season=2024, week=1, game_type="REG", kickoff=datetime(2024, 9, 8, 17))])
    assert window.cutoff == datetime(2024, 9, 10, 10, tzinfo=timezone.utc)
