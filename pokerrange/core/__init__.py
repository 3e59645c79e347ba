"""
pokerrange Core - Range Notation Engine

Pure, synchronous range parsing, expansion, compression and conversion.
No I/O happens in this package.
"""

from pokerrange.core.card import Card, Rank, Suit
from pokerrange.core.hand import HandCombo, ShorthandHand, expand, all_hands
from pokerrange.core.grid import Grid, GridCell, create_grid
from pokerrange.core.parser import RangeToken, parse_range, tokenize
from pokerrange.core.compressor import compress
from pokerrange.core.converter import RangeFormat, convert
from pokerrange.core.stats import RangeStats, calculate_stats
from pokerrange.core.rules import Suitedness, TOTAL_COMBOS
from pokerrange.core.errors import (
    RangeError,
    InvalidHandNotation,
    InvalidRangeExpression,
    InvalidWeight,
    UnsupportedFormat,
    OutOfRange,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "HandCombo",
    "ShorthandHand",
    "Suitedness",
    "expand",
    "all_hands",
    "Grid",
    "GridCell",
    "create_grid",
    "RangeToken",
    "parse_range",
    "tokenize",
    "compress",
    "RangeFormat",
    "convert",
    "RangeStats",
    "calculate_stats",
    "TOTAL_COMBOS",
    "RangeError",
    "InvalidHandNotation",
    "InvalidRangeExpression",
    "InvalidWeight",
    "UnsupportedFormat",
    "OutOfRange",
]
