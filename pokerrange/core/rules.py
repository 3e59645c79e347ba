"""
Range Constants.

Fixed combination counts for the 169 canonical starting hands:

1. Pocket pairs: 13 hands x 6 combos = 78
2. Suited hands: 78 hands x 4 combos = 312
3. Offsuit hands: 78 hands x 12 combos = 936

Total: 1326 two-card combinations.
"""

from enum import Enum


class Suitedness(Enum):
    """Category of a canonical starting hand."""
    PAIR = "pair"
    SUITED = "suited"
    OFFSUIT = "offsuit"


# Combos per canonical hand
COMBO_COUNTS = {
    Suitedness.PAIR: 6,
    Suitedness.SUITED: 4,
    Suitedness.OFFSUIT: 12,
}

# Hands per category
HAND_COUNTS = {
    Suitedness.PAIR: 13,
    Suitedness.SUITED: 78,
    Suitedness.OFFSUIT: 78,
}

GRID_SIZE = 13
TOTAL_HANDS = 169
TOTAL_COMBOS = 1326

# Notation
TOKEN_SEPARATOR = ","
WEIGHT_SEPARATOR = ":"
RANGE_SEPARATOR = "-"
PLUS_SUFFIX = "+"
SUITED_CHAR = "s"
OFFSUIT_CHAR = "o"
DEFAULT_WEIGHT = 1.0
MIN_WEIGHT = 0.0
MAX_WEIGHT = 1.0

# Format names accepted by the converter, mapped to canonical names
FORMAT_ALIASES = {
    "combo": "combo",
    "gtow": "combo",
    "pio": "combo",
    "format1": "combo",
    "shorthand": "shorthand",
    "flopzilla": "shorthand",
    "standard": "shorthand",
    "bracketed": "bracketed",
    "format2": "bracketed",
}

# HRC scenario import
HRC_FORMAT = "6max"
HRC_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
HRC_MAX_SPOTS = 5000

HRC_ACTION_LABELS = {
    "F": "Fold",
    "R": "Raise",
    "C": "Call",
    "X": "Check",
    "A": "All-in",
    "3B": "3-Bet",
    "4B": "4-Bet",
    "5B": "5-Bet",
}
