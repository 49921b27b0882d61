"""Shared identifiers and display tokens."""

ACID_ID = "hcl"
BASE_ID = "naoh"
INDICATOR_ID = "phenolph"
PRECIPITANT_IDS = ("silver", "agno3")
SALT_ID = "salt"

NEUTRAL_PH = 7.0
PH_FLOOR = 0.5
PH_CEILING = 13.5
PH_SLOPE_DIVISOR = 5.0  # ml of excess acid/base per pH unit

COLOR_WATER = "#7fc8ff"
COLOR_PINK = "#ff88c3"
COLOR_PRECIPITATE = "#d9d9d9"
COLOR_NEUTRALIZED = "#bfffbf"

POUR_INTERVAL_MS = 120.0
POUR_UNIT_ML = 1.0
