"""
Pytest configuration and shared fixtures for pokerrange tests.
"""

import pytest
from pokerrange.core.grid import create_grid
from pokerrange.core.hand import ShorthandHand
from pokerrange.core.parser import parse_range


@pytest.fixture
def empty_grid():
    """Create a fresh grid with nothing selected."""
    return create_grid()


@pytest.fixture
def premium_grid():
    """Grid with AA and AKs selected at full weight."""
    return parse_range("AA,AKs")


@pytest.fixture
def hand():
    """Shortcut for building hands from strings."""
    return ShorthandHand.from_string


@pytest.fixture
def hrc_data():
    """A small HRC export with two valid spots and one broken spot."""
    return {
        "metadata": {"format": "6max"},
        "spots": {
            "EP RFI": {
                "position": "EP",
                "actions": [{"type": "F"}, {"type": "R"}],
                "hands": {
                    "AA": {"played": [0, 1], "weight": 1, "evs": [0, 2.5]},
                    "KK": {"played": [0, 1], "evs": [0, 2.1]},
                    "AKs": {"played": [0.25, 0.75]},
                    "72o": {"played": [1, 0]},
                },
            },
            "CO vs BB 3Bet": {
                "position": "CO",
                "spot_name": "CO facing BB 3-bet",
                "actions": [{"type": "C"}, {"type": "4B"}],
                "hands": {
                    "QQ": {"played": [1, 0]},
                    "AKo": {"played": [0.5, 0.5]},
                },
            },
            "Broken": {
                "actions": [{"type": "F"}],
                "hands": {},
            },
        },
    }
