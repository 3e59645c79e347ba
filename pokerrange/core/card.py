"""
Rank, Suit and Card value types.

Ranks and suits are static lookup tables built once at import time.
The suit enumeration order (clubs, diamonds, hearts, spades) is the order
used everywhere combos are generated, so expansion output is reproducible.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from enum import IntEnum

from pokerrange.core.errors import InvalidHandNotation


class Suit(IntEnum):
    """Card suits in fixed enumeration order."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Grid rows/columns run from Ace down to Two
RANKS_DESCENDING: Tuple[Rank, ...] = tuple(sorted(Rank, reverse=True))
SUITS: Tuple[Suit, ...] = tuple(Suit)


def rank_from_char(char: str, token: Optional[str] = None) -> Rank:
    """Look up a rank by its character ('A', 'k', 'T', '9', ...)."""
    rank = CHAR_TO_RANK.get(char.upper())
    if rank is None:
        raise InvalidHandNotation(f"Invalid rank: {char!r}", token=token or char)
    return rank


def rank_index(rank: Rank) -> int:
    """Row/column index of a rank in the descending grid order (Ace = 0)."""
    return Rank.ACE - rank


class Card:
    """
    A playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As") or Card.from_string("A♠")

    The integer encoding is: card_int = rank * 4 + suit
    """

    __slots__ = ("rank", "suit", "_int")

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = Rank(rank)
        self.suit = Suit(suit)
        self._int = int(self.rank) * 4 + int(self.suit)

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts "As", "Kh", "td" (rank + suit char) or "A♠" (rank + symbol).

        Raises:
            InvalidHandNotation: If the rank or suit is not recognized.
        """
        s = s.strip()
        if len(s) != 2:
            raise InvalidHandNotation(f"Invalid card string: {s!r}", token=s)

        rank = rank_from_char(s[0], token=s)
        suit_part = s[1]

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise InvalidHandNotation(f"Invalid suit: {suit_part!r}", token=s)

        return cls(rank, suit)

    def to_int(self) -> int:
        """Return the integer representation (0-51)."""
        return self._int

    def __int__(self) -> int:
        return self._int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._int == other._int
        return False

    def __hash__(self) -> int:
        return self._int

    def __lt__(self, other: Card) -> bool:
        return self._int < other._int

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return self.short_str

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse concatenated cards such as "AhKs" into Card objects.

    Raises:
        InvalidHandNotation: If the string is not a whole number of cards.
    """
    cards_str = cards_str.strip()
    if len(cards_str) % 2:
        raise InvalidHandNotation(f"Cannot parse cards: {cards_str!r}", token=cards_str)
    return [Card.from_string(cards_str[i:i + 2]) for i in range(0, len(cards_str), 2)]
