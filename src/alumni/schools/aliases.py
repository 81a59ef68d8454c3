"""Curated token tables and alias groups for college name canonicalization.

Alias groups map a canonical display name to the spellings providers use for
it. Every variant is keyed through the same token pipeline as live input, so a
single entry also covers its punctuation, casing and mascot-suffixed forms.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple


STOP_WORDS: FrozenSet[str] = frozenset(
    {
        "university",
        "univ",
        "u",
        "the",
        "of",
        "at",
        "in",
        "on",
        "and",
        "for",
        "college",
        "campus",
    }
)

MASCOT_WORDS: FrozenSet[str] = frozenset(
    {
        "49ers",
        "aggies",
        "anteaters",
        "aztecs",
        "badgers",
        "bearcats",
        "bears",
        "beavers",
        "bison",
        "blazers",
        "blue",
        "bobcats",
        "boilermakers",
        "broncos",
        "bruins",
        "buckeyes",
        "buffaloes",
        "bulldogs",
        "bulls",
        "cajuns",
        "cardinal",
        "cardinals",
        "cavaliers",
        "chanticleers",
        "chippewas",
        "commodores",
        "cornhuskers",
        "cougars",
        "cowboys",
        "crimson",
        "cyclones",
        "deacons",
        "demon",
        "devils",
        "ducks",
        "dukes",
        "eagles",
        "falcons",
        "fighting",
        "flames",
        "flashes",
        "frogs",
        "gamecocks",
        "gators",
        "golden",
        "gophers",
        "grizzlies",
        "hawkeyes",
        "heels",
        "herd",
        "hilltoppers",
        "hokies",
        "hoosiers",
        "horned",
        "hurricanes",
        "huskers",
        "huskies",
        "illini",
        "irish",
        "jackets",
        "jackrabbits",
        "jaguars",
        "jayhawks",
        "knights",
        "lions",
        "lobos",
        "longhorns",
        "lumberjacks",
        "midshipmen",
        "miners",
        "minutemen",
        "monarchs",
        "mountaineers",
        "mustangs",
        "nittany",
        "owls",
        "pack",
        "panthers",
        "pirates",
        "ragin",
        "rainbow",
        "rams",
        "razorbacks",
        "rebels",
        "red",
        "redhawks",
        "roadrunners",
        "rockets",
        "scarlet",
        "seminoles",
        "sooners",
        "spartans",
        "sun",
        "terps",
        "terrapins",
        "thundering",
        "tide",
        "tigers",
        "trojans",
        "utes",
        "vandals",
        "volunteers",
        "vols",
        "warhawks",
        "warriors",
        "wave",
        "wildcats",
        "wolf",
        "wolfpack",
        "wolverines",
        "yellow",
        "zips",
    }
)

IRREGULAR_TOKENS: Dict[str, str] = {
    "st": "st",
    "saint": "saint",
    "ste": "saint",
    "tech": "tech",
    "technology": "tech",
    "polytechnic": "polytechnic",
}

STATE_CODES: FrozenSet[str] = frozenset(
    {
        "al", "ak", "az", "ar", "ca", "co", "ct", "dc", "de", "fl", "ga", "hi", "ia",
        "id", "il", "in", "ks", "ky", "la", "ma", "md", "me", "mi", "mn", "mo", "ms",
        "mt", "nc", "nd", "ne", "nh", "nj", "nm", "nv", "ny", "oh", "ok", "or", "pa",
        "ri", "sc", "sd", "tn", "tx", "ut", "va", "vt", "wa", "wi", "wv", "wy",
    }
)

# Parenthetical asides made of one of these survive tokenization; they carry
# meaning ("Miami (OH)") rather than venue noise ("(Ann Arbor, MI)").
STATE_QUALIFIERS: FrozenSet[str] = STATE_CODES | frozenset(
    {"ohio", "fla", "florida", "calif", "california", "penn", "minn", "ind", "tenn", "tex", "md", "ny", "nyc"}
)

# Venue cities providers append to team names. Cities that are also a school's
# own name (Houston, Memphis, Buffalo, Boston, Miami, ...) must not appear here.
LOCATION_NAMES: Tuple[str, ...] = (
    "Albuquerque",
    "Ames",
    "Ann Arbor",
    "Annapolis",
    "Athens",
    "Atlanta",
    "Austin",
    "Baton Rouge",
    "Berkeley",
    "Blacksburg",
    "Bloomington",
    "Boca Raton",
    "Boulder",
    "Champaign",
    "Chapel Hill",
    "Charlottesville",
    "Chestnut Hill",
    "College Park",
    "College Station",
    "Columbus",
    "Corvallis",
    "Dallas",
    "DeKalb",
    "Durham",
    "East Lansing",
    "El Paso",
    "Eugene",
    "Evanston",
    "Fayetteville",
    "Fort Worth",
    "Gainesville",
    "Iowa City",
    "Kalamazoo",
    "Knoxville",
    "Lawrence",
    "Lexington",
    "Lincoln",
    "Los Angeles",
    "Lubbock",
    "Madison",
    "Minneapolis",
    "Morgantown",
    "Muncie",
    "Murfreesboro",
    "Nashville",
    "New Brunswick",
    "New Orleans",
    "Norman",
    "Orlando",
    "Oxford",
    "Palo Alto",
    "Piscataway",
    "Provo",
    "Pullman",
    "Raleigh",
    "Reno",
    "Las Vegas",
    "San Antonio",
    "Seattle",
    "South Bend",
    "Starkville",
    "Stillwater",
    "Storrs",
    "Tampa",
    "Tempe",
    "Tucson",
    "Tuscaloosa",
    "University Park",
    "Urbana",
    "Waco",
    "West Lafayette",
    "West Point",
)

# Rendered verbatim instead of title-cased.
TOKEN_DISPLAY: Dict[str, str] = {
    "lsu": "LSU",
    "usc": "USC",
    "ucla": "UCLA",
    "byu": "BYU",
    "tcu": "TCU",
    "smu": "SMU",
    "ucf": "UCF",
    "usf": "USF",
    "uab": "UAB",
    "utsa": "UTSA",
    "utep": "UTEP",
    "fau": "FAU",
    "fiu": "FIU",
    "ecu": "ECU",
    "uconn": "UConn",
    "umass": "UMass",
    "unlv": "UNLV",
    "am": "A&M",
    "at": "A&T",
}

SCHOOL_ALIAS_GROUPS: Dict[str, List[str]] = {
    "Air Force": ["Air Force Academy", "United States Air Force Academy", "Air Force Falcons"],
    "Alabama": ["Bama", "Alab", "Alabama Crimson Tide", "Crimson Tide", "Alabama Tuscaloosa"],
    "Alabama A&M": ["Alabama A and M", "AAMU"],
    "Alcorn State": ["Alcorn", "Alcorn St"],
    "Appalachian State": ["App State", "Appalachian St", "App St"],
    "Arizona State": ["ASU Sun Devils", "Arizona St"],
    "Arkansas State": ["Arkansas St", "A-State"],
    "Arkansas-Pine Bluff": ["Arkansas Pine Bluff", "UAPB"],
    "Army": ["Army West Point", "Army Black Knights", "United States Military Academy"],
    "Boston College": ["BC Eagles", "Boston College Eagles"],
    "Boston University": ["BU", "Boston U", "Boston University Terriers"],
    "Bowling Green": ["Bowling Green State", "BGSU"],
    "BYU": ["Brigham Young", "Brigham Young University", "BYU Cougars"],
    "Cal Poly": ["California Polytechnic", "Cal Poly SLO", "Cal Poly San Luis Obispo"],
    "California": ["Cal", "Cal Berkeley", "UC Berkeley", "California Golden Bears"],
    "Charlotte": ["UNC Charlotte", "Charlotte 49ers"],
    "Chattanooga": ["Tennessee Chattanooga", "UT Chattanooga", "UTC"],
    "Cincinnati": ["Cincy"],
    "Coastal Carolina": ["Coastal Carolina Chanticleers", "CCU"],
    "Colorado": ["Colorado Buffaloes", "CU Boulder", "Colorado Boulder"],
    "Colorado State": ["Colorado St", "CSU Rams"],
    "Eastern Michigan": ["EMU"],
    "ECU": ["East Carolina", "East Carolina University"],
    "FAU": ["Florida Atlantic", "Florida Atlantic University"],
    "FIU": ["Florida International", "Florida International University", "Florida Intl"],
    "Florida": ["UF", "Florida Gators"],
    "Florida A&M": ["Florida A and M", "FAMU"],
    "Florida State": ["FSU", "Florida St"],
    "Georgia": ["UGA"],
    "Georgia Tech": ["Georgia Institute of Technology", "Georgia Tech Yellow Jackets"],
    "Grambling State": ["Grambling", "Grambling St"],
    "Hawaii": ["Hawaii Rainbow Warriors", "Hawai'i"],
    "Jackson State": ["Jackson St", "JSU"],
    "James Madison": ["JMU"],
    "Kansas State": ["K-State", "Kansas St", "KSU"],
    "Louisiana": ["Louisiana Lafayette", "UL Lafayette", "Louisiana Ragin Cajuns", "ULL"],
    "Louisiana Monroe": ["UL Monroe", "ULM", "Northeast Louisiana"],
    "Louisiana Tech": ["La Tech", "Louisiana Tech Bulldogs"],
    "LSU": ["Louisiana State", "Louisiana State University", "LSU Tigers", "L.S.U."],
    "Maryland": ["Maryland Terrapins", "Maryland College Park"],
    "McNeese": ["McNeese State", "McNeese St"],
    "Miami (FL)": [
        "Miami",
        "Miami FL",
        "Miami Fla",
        "Miami (Fla.)",
        "Miami Florida",
        "Miami Hurricanes",
        "University of Miami",
        "The U",
    ],
    "Miami (OH)": [
        "Miami OH",
        "Miami Ohio",
        "Miami (Ohio)",
        "Miami of Ohio",
        "Miami RedHawks",
        "Miami OH RedHawks",
        "Miami (OH) RedHawks",
        "Miami Ohio RedHawks",
        "Miami University",
        "Miami University (Ohio)",
        "Miami University RedHawks",
    ],
    "Michigan": ["Michigan Wolverines", "UMich"],
    "Michigan State": ["Michigan St", "MSU Spartans"],
    "Middle Tennessee": ["Middle Tennessee State", "MTSU", "Middle Tenn State"],
    "Mississippi State": ["Mississippi St", "Miss State", "Miss St"],
    "Mississippi Valley State": ["MVSU", "Miss Valley State"],
    "Missouri": ["Mizzou"],
    "Navy": ["Naval Academy", "United States Naval Academy", "Navy Midshipmen"],
    "NC State": ["North Carolina State", "N.C. State", "NC St", "North Carolina St", "NCSU"],
    "Nicholls": ["Nicholls State", "Nicholls St"],
    "North Carolina": ["UNC", "North Carolina Tar Heels", "UNC Chapel Hill"],
    "North Carolina A&T": ["NC A&T", "N.C. A&T", "North Carolina A and T", "NCAT", "North Carolina A&T Aggies"],
    "North Dakota State": ["NDSU", "North Dakota St"],
    "North Texas": ["UNT", "North Texas Mean Green"],
    "Northern Illinois": ["NIU"],
    "Northern Iowa": ["UNI"],
    "Notre Dame": ["Notre Dame Fighting Irish"],
    "Ohio": ["Ohio University", "Ohio Bobcats"],
    "Ohio State": ["The Ohio State", "Ohio St", "Ohio State Buckeyes", "Ohio St Buckeyes", "tOSU"],
    "Oklahoma State": ["Oklahoma St", "OK State"],
    "Old Dominion": ["ODU"],
    "Ole Miss": ["Mississippi", "University of Mississippi", "Ole Miss Rebels", "Mississippi Rebels"],
    "Oregon State": ["Oregon St"],
    "Penn": ["Pennsylvania", "University of Pennsylvania", "UPenn"],
    "Penn State": ["Pennsylvania State", "Penn St", "Pennsylvania State University"],
    "Pittsburgh": ["Pitt", "Pitt Panthers"],
    "Prairie View A&M": ["Prairie View", "Prairie View A and M", "PVAMU"],
    "Rutgers": ["Rutgers Scarlet Knights", "Rutgers New Brunswick"],
    "Sam Houston": ["Sam Houston State", "SHSU"],
    "San Diego State": ["SDSU", "San Diego St"],
    "San Jose State": ["SJSU", "San Jose St"],
    "SMU": ["Southern Methodist", "Southern Methodist University"],
    "South Dakota State": ["South Dakota St", "SDSU Jackrabbits"],
    "Southeastern Louisiana": ["SE Louisiana", "Southeastern La"],
    "Southern Miss": ["Southern Mississippi", "USM"],
    "St. John's": ["Saint John's", "St Johns", "St. John's (NY)"],
    "Stephen F. Austin": ["SFA", "Stephen F Austin", "Stephen F. Austin State"],
    "Syracuse": ["Cuse", "Syracuse Orange"],
    "TCU": ["Texas Christian", "Texas Christian University", "TCU Horned Frogs"],
    "Tennessee": ["Tennessee Volunteers", "Tennessee Knoxville"],
    "Tennessee State": ["Tennessee St", "TSU Tigers"],
    "Texas": ["Texas Longhorns", "Texas Austin", "UT Austin"],
    "Texas A&M": ["Texas A and M", "Texas AM", "Texas A M", "Texas A&M Aggies"],
    "Texas A&M-Commerce": ["Texas A&M Commerce", "East Texas A&M"],
    "Texas State": ["Southwest Texas State", "Texas State San Marcos"],
    "Texas Tech": ["TTU", "Texas Tech Red Raiders"],
    "Tulane": ["Tulane Green Wave"],
    "UAB": ["Alabama Birmingham", "UA Birmingham", "Alabama at Birmingham"],
    "UC Davis": ["California Davis", "Cal Davis"],
    "UCF": ["Central Florida", "University of Central Florida", "UCF Knights"],
    "UCLA": ["California Los Angeles", "UC Los Angeles", "U.C.L.A."],
    "UConn": ["Connecticut", "University of Connecticut", "UConn Huskies"],
    "UMass": ["Massachusetts", "University of Massachusetts", "UMass Amherst", "Massachusetts Amherst"],
    "UNLV": ["Nevada Las Vegas", "Nevada-Las Vegas", "UNLV Rebels"],
    "USC": ["Southern California", "Southern Cal", "University of Southern California", "USC Trojans", "So Cal"],
    "USF": ["South Florida", "University of South Florida"],
    "UT Martin": ["Tennessee Martin", "Tennessee-Martin", "UTM"],
    "Utah State": ["Utah St", "USU"],
    "UTEP": ["Texas El Paso", "UT El Paso", "Texas-El Paso"],
    "UTSA": ["Texas San Antonio", "UT San Antonio", "Texas-San Antonio", "UTSA Roadrunners"],
    "Vanderbilt": ["Vandy"],
    "Virginia": ["UVA", "Virginia Cavaliers"],
    "Virginia Tech": ["Virginia Polytechnic", "Virginia Polytechnic Institute", "VPI", "Virginia Tech Hokies"],
    "Wake Forest": ["Wake", "Wake Forest Demon Deacons"],
    "Washington State": ["Wash State", "Washington St", "WSU"],
    "West Virginia": ["WVU"],
    "Western Kentucky": ["WKU"],
    "Western Michigan": ["WMU"],
    "William & Mary": ["William and Mary", "W&M"],
}

PLACEHOLDER_COLLEGES: FrozenSet[str] = frozenset(
    {"", "unknown", "n/a", "na", "none", "null", "nan", "-", "--", "?", "no college"}
)
