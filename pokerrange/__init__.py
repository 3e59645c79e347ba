"""
pokerrange - Poker Range Notation Engine

Parses, expands, compresses and converts preflop hand ranges:
- 13x13 grid model of the 169 canonical starting hands
- Plus/dash/weighted shorthand notation ("22+,ATs-A6s,KQo:0.5")
- Conversion between combo, shorthand and bracketed formats
- HRC scenario import

Usage:
    from pokerrange import parse_range, compress, convert, calculate_stats
"""

__version__ = "0.1.0"

from pokerrange.core.grid import Grid, create_grid
from pokerrange.core.hand import ShorthandHand, HandCombo, expand
from pokerrange.core.parser import parse_range
from pokerrange.core.compressor import compress
from pokerrange.core.converter import RangeFormat, convert
from pokerrange.core.stats import calculate_stats

__all__ = [
    "Grid",
    "create_grid",
    "ShorthandHand",
    "HandCombo",
    "expand",
    "parse_range",
    "compress",
    "RangeFormat",
    "convert",
    "calculate_stats",
    "__version__",
]
