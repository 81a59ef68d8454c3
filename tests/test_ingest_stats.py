import pytest

from alumni.ingest import (
    fallback_player_id,
    merge_groups,
    normalize_player_name,
    normalize_team_code,
    parse_master_rows,
    parse_player_stats,
    parse_snap_counts,
    parse_team_defense,
    resolve_schema,
)
from alumni.ingest.columns import PLAYER_STAT_COLUMNS


def _stat_row(**kwargs):
    row = {
        "player_id": "00-0001",
        "player_display_name": "Test Player",
        "recent_team": "KC",
        "position": "wr",
        "season": "2024",
        "week": "3",
        "receptions": "5",
        "receiving_yards": "80",
        "receiving_tds": "1",
    }
    row.update(kwargs)
    return row


def test_resolve_schema_matches_headers_case_insensitively():
    schema = resolve_schema({"Player_ID": "1", "FULL_NAME": "A"}, PLAYER_STAT_COLUMNS, label="stats")
    assert schema.text({"Player_ID": "1", "FULL_NAME": "A"}, "player_id") == "1"
    assert schema.has("name")
    assert "passing_yards" in schema.missing


def test_schema_number_treats_malformed_values_as_zero():
    row = {"passing_yards": "n/a", "rushing_yards": "1,204"}
    schema = resolve_schema(row, PLAYER_STAT_COLUMNS)
    assert schema.number(row, "passing_yards") == 0.0
    assert schema.number(row, "rushing_yards") == pytest.approx(1204.0)
    assert schema.optional_number(row, "passing_yards") is None


def test_merge_groups_appends_profile_aliases():
    merged = merge_groups({"name": ("full_name",)}, {"name": ["nombre", "full_name"], "team": ["club"]})
    assert merged["name"] == ("full_name", "nombre")
    assert merged["team"] == ("club",)


def test_parse_player_stats_basic_fields():
    [line] = parse_player_stats([_stat_row()], season=2024, week=3)
    assert line.player_id == "00-0001"
    assert line.has_stable_id
    assert line.team == "KC"
    assert line.position == "WR"
    assert line.receptions == pytest.approx(5)
    assert line.receiving_yards == pytest.approx(80)


def test_parse_player_stats_filters_other_weeks():
    rows = [_stat_row(week="2"), _stat_row(player_id="00-0002", week="3")]
    lines = parse_player_stats(rows, season=2024, week=3)
    assert [line.player_id for line in lines] == ["00-0002"]


def test_parse_player_stats_sums_fumble_parts_when_total_missing():
    row = _stat_row(rushing_fumbles_lost="1", receiving_fumbles_lost="1", sack_fumbles_lost="")
    [line] = parse_player_stats([row], week=3)
    assert line.fumbles_lost == pytest.approx(2)


def test_parse_player_stats_fallback_id_from_name_and_team():
    row = _stat_row(player_id="", recent_team="KAN", player_display_name="José  Núñez")
    [line] = parse_player_stats([row], week=3)
    assert not line.has_stable_id
    assert line.player_id == fallback_player_id("José Núñez", "KC")
    assert line.player_id == "jose nunez|KC"


def test_parse_player_stats_builds_name_from_parts():
    row = {"player_id": "x1", "first_name": "Pat", "last_name": "Mahomes", "team": "KC", "week": "1"}
    [line] = parse_player_stats([row], week=1)
    assert line.name == "Pat Mahomes"


def test_parse_master_rows_collects_alternate_ids():
    rows = [
        {
            "gsis_id": "00-0033873",
            "pfr_id": "MahoPa00",
            "espn_id": "3139477",
            "custom_feed_id": "abc",
            "game_id": "ignored",
            "display_name": "Patrick Mahomes",
            "latest_team": "KC",
            "position": "QB",
            "college_name": "Texas Tech",
        }
    ]
    [record] = parse_master_rows(rows, season=2024)
    assert record.player_id == "00-0033873"
    assert "MahoPa00" in record.alt_ids
    assert "3139477" in record.alt_ids
    assert "abc" in record.alt_ids
    assert "ignored" not in record.alt_ids
    assert record.gsis_ids == ("00-0033873",)
    assert record.college == "Texas Tech"


def test_parse_snap_counts_and_team_defense():
    snaps = parse_snap_counts(
        [
            {"pfr_player_id": "SmitA00", "player": "A Smith", "team": "KAN", "position": "CB", "defense_snaps": "40", "week": "1"},
            {"pfr_player_id": "JoneB00", "player": "B Jones", "team": "KC", "position": "LB", "defense_snaps": "", "week": "2"},
        ],
        week=1,
    )
    assert len(snaps) == 1
    assert snaps[0].team == "KC"
    assert snaps[0].defense_snaps == pytest.approx(40)

    [defense] = parse_team_defense(
        [
            {
                "team": "KC",
                "week": "1",
                "def_sacks": "3",
                "def_ints": "1",
                "def_fumble_rec": "1",
                "forced_fumbles_recovered": "1",
                "int_touchdowns": "1",
                "points_allowed": "17",
            }
        ],
        week=1,
    )
    assert defense.sacks == pytest.approx(3)
    assert defense.fumble_recoveries == pytest.approx(2)
    assert defense.defensive_tds == pytest.approx(1)
    assert defense.points_allowed == pytest.approx(17)


def test_normalize_helpers():
    assert normalize_player_name("  Amon-Ra   St. Brown ") == "amon-ra st. brown"
    assert normalize_team_code("kan") == "KC"
    assert normalize_team_code("Kansas City Chiefs") == "KC"
    assert normalize_team_code(None) == ""
