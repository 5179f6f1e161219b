"""Reference values and dictionaries

No functional code found within this module, just a bunch of statics

.. data:: WEATHER_CHARACTERISTICS

    A dictionary mapping the METAR weather descriptor codes to their plain
    language meaning.

.. data:: WEATHER_TYPES

    A dictionary mapping the METAR precipitation, obscuration and other
    phenomena codes to their plain language meaning.

"""

# Seconds a single chunk regular expression may spend matching
MATCH_TIMEOUT = 0.5

# Prevailing metric visibility above this value (meters) is said in km
VISIBILITY_METERS_CUTOFF = 5000
# 9999 is the metric way of saying 10 km or more
UNLIMITED_VISIBILITY_METERS = 9999
# US stations top out at 10SM, P6SM is also seen
UNLIMITED_VISIBILITY_STATUTE_MILES = 10

# End of message marker
REPORT_TERMINATOR = "="
# Missing data sentinel used within weather groups
MISSING_WEATHER = "//"

# Cloud layer amounts that form a ceiling
CEILING_AMOUNTS = ("BKN", "OVC", "VV")

# Order matters within a regex alternation, but these lists carry no
# overlapping prefixes
WEATHER_CHARACTERISTICS = {
    "TS": "thunderstorm",
    "FZ": "freezing",
    "SH": "showers",
    "BL": "blowing",
    "DR": "low drifting",
    "MI": "shallow",
    "BC": "patches",
    "PR": "partial",
}

WEATHER_TYPES = {
    "DZ": "drizzle",
    "RA": "rain",
    "SN": "snow",
    "SG": "snow grains",
    "PL": "ice pellets",
    "DS": "duststorm",
    "GR": "hail",
    "GS": "small hail",
    "UP": "unknown precipitation",
    "IC": "ice crystals",
    "FG": "fog",
    "BR": "mist",
    "SA": "sand",
    "DU": "widespread dust",
    "HZ": "haze",
    "FU": "smoke",
    "VA": "volcanic ash",
    "PY": "spray",
    "PO": "dust whirls",
    "SQ": "squalls",
    "FC": "funnel cloud",
    "SS": "sandstorm",
    MISSING_WEATHER: "not observed",
}

INTENSITY_PROXIMITY = {
    "-": "light",
    "+": "heavy",
    "VC": "in the vicinity",
}

CLOUD_AMOUNTS = {
    "FEW": "few",
    "SCT": "scattered",
    "BKN": "broken",
    "OVC": "overcast",
    "VV": "vertical visibility",
    "NSC": "no significant clouds",
    "NCD": "no clouds detected",
    "CLR": "clear",
    "SKC": "sky clear",
}

CLOUD_TYPES = {
    "CB": "cumulonimbus",
    "TCU": "towering cumulus",
    "///": "cannot measure",
}
