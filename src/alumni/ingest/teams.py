"""NFL club code normalization across provider and historical abbreviations."""

from __future__ import annotations

import re
from typing import Dict, List


NFL_CLUB_ALIAS_GROUPS: Dict[str, List[str]] = {
    "ARI": ["ARZ", "PHX", "ARIZONA", "ARIZONA CARDINALS", "PHOENIX CARDINALS"],
    "ATL": ["ATLANTA", "ATLANTA FALCONS"],
    "BAL": ["BLT", "BALTIMORE", "BALTIMORE RAVENS"],
    "BUF": ["BUFFALO", "BUFFALO BILLS"],
    "CAR": ["CAROLINA", "CAROLINA PANTHERS"],
    "CHI": ["CHICAGO", "CHICAGO BEARS"],
    "CIN": ["CINCINNATI", "CINCINNATI BENGALS"],
    "CLE": ["CLV", "CLEVELAND", "CLEVELAND BROWNS"],
    "DAL": ["DALLAS", "DALLAS COWBOYS"],
    "DEN": ["DENVER", "DENVER BRONCOS"],
    "DET": ["DETROIT", "DETROIT LIONS"],
    "GB": ["GBP", "GNB", "GREEN BAY", "GREEN BAY PACKERS"],
    "HOU": ["HST", "HTX", "HOUSTON", "HOUSTON TEXANS"],
    "IND": ["CLT", "INDIANAPOLIS", "INDIANAPOLIS COLTS"],
    "JAX": ["JAC", "JACKSONVILLE", "JACKSONVILLE JAGUARS"],
    "KC": ["KAN", "KCC", "KANSAS CITY", "KANSAS CITY CHIEFS"],
    "LAC": ["SD", "SDC", "SDG", "LACH", "SAN DIEGO CHARGERS", "LOS ANGELES CHARGERS"],
    "LAR": ["LA", "RAM", "STL", "ST LOUIS RAMS", "LOS ANGELES RAMS"],
    "LV": ["LVR", "OAK", "LAS VEGAS RAIDERS", "OAKLAND RAIDERS"],
    "MIA": ["MIAMI", "MIAMI DOLPHINS"],
    "MIN": ["MINNESOTA", "MINNESOTA VIKINGS"],
    "NE": ["NEW", "NWE", "NEW ENGLAND", "NEW ENGLAND PATRIOTS"],
    "NO": ["NOL", "NOR", "NEW ORLEANS", "NEW ORLEANS SAINTS"],
    "NYG": ["NEW YORK GIANTS", "NY GIANTS"],
    "NYJ": ["NEW YORK JETS", "NY JETS"],
    "PHI": ["PHL", "PHILADELPHIA", "PHILADELPHIA EAGLES"],
    "PIT": ["PITTSBURGH", "PITTSBURGH STEELERS"],
    "SEA": ["SEATTLE", "SEATTLE SEAHAWKS"],
    "SF": ["SFO", "SAN FRANCISCO", "SAN FRANCISCO 49ERS"],
    "TB": ["TBB", "TAM", "TAMPA BAY", "TAMPA BAY BUCCANEERS"],
    "TEN": ["HTN", "OIL", "TENNESSEE", "TENNESSEE TITANS"],
    "WAS": ["WFT", "WSH", "WASHINGTON", "WASHINGTON COMMANDERS", "WASHINGTON FOOTBALL TEAM"],
}


def _club_token(value: str) -> str:
    return re.sub(r"[^A-Z0-9]", "", value.upper())


def _build_club_lookup() -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for code, variants in NFL_CLUB_ALIAS_GROUPS.items():
        lookup.setdefault(code, code)
        for variant in variants:
            key = _club_token(variant)
            if key:
                lookup.setdefault(key, code)
    return lookup


CLUB_LOOKUP = _build_club_lookup()


def normalize_team_code(team: object) -> str:
    """Map a club code or name to its current abbreviation; unknown codes are upper-cased."""

    if team is None:
        return ""
    text = str(team).strip()
    token = _club_token(text)
    if not token:
        return ""
    return CLUB_LOOKUP.get(token, text.upper())
