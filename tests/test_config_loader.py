from pathlib import Path

from alumni.config_loader import AliasProfile
from alumni.ingest import parse_player_stats


def test_alias_profile_round_trip_and_usage(tmp_path: Path):
    profile = AliasProfile(
        school_aliases={"The U": "Miami (FL)"},
        column_aliases={"name": ["Spieler"]},
    )
    path = tmp_path / "aliases.json"
    profile.save(path)

    loaded = AliasProfile.load(path)
    assert loaded == profile

    assert loaded.canonicalizer().canonicalize("The U") == "Miami (FL)"
    [line] = parse_player_stats(
        [{"player_id": "x", "Spieler": "Lukas Muller", "team": "NYJ"}],
        extra_columns=loaded.column_aliases,
    )
    assert line.name == "Lukas Muller"
