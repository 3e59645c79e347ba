"""
Canonical starting hands and their card combinations.

There are 169 canonical hands (13 pairs, 78 suited, 78 offsuit). Each one
stands for a fixed number of specific two-card combos:

- Pair (e.g. "AA"): 6 combos, every unordered pair of the 4 suits
- Suited (e.g. "AKs"): 4 combos, one per suit
- Offsuit (e.g. "AKo"): 12 combos, every (suit1, suit2) with suit1 != suit2

A shorthand without a qualifier ("AK") means both the suited and the
offsuit hand, i.e. 16 combos.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

from pokerrange.core.card import (
    Card, Rank, RANK_CHARS, RANKS_DESCENDING, SUITS,
    parse_cards, rank_from_char, rank_index,
)
from pokerrange.core.errors import InvalidHandNotation, OutOfRange
from pokerrange.core.rules import (
    COMBO_COUNTS, GRID_SIZE, OFFSUIT_CHAR, SUITED_CHAR, Suitedness,
)


QUALIFIERS = {
    SUITED_CHAR: Suitedness.SUITED,
    OFFSUIT_CHAR: Suitedness.OFFSUIT,
}


@dataclass(frozen=True)
class ShorthandHand:
    """
    One of the 169 canonical starting hands.

    Ranks are always stored high first. Pairs have high == low; suited and
    offsuit hands have high > low.
    """
    high: Rank
    low: Rank
    suitedness: Suitedness

    def __post_init__(self):
        object.__setattr__(self, "high", Rank(self.high))
        object.__setattr__(self, "low", Rank(self.low))
        if self.suitedness == Suitedness.PAIR:
            if self.high != self.low:
                raise InvalidHandNotation(f"Pair needs equal ranks: {self._text()}")
        elif self.high <= self.low:
            raise InvalidHandNotation(
                f"Non-pair needs a higher first rank: {self._text()}"
            )

    @classmethod
    def from_string(cls, text: str) -> ShorthandHand:
        """
        Create a hand from fully qualified shorthand ("AA", "AKs", "72o").

        Rank order and case are normalized, so "kAS" gives AKs.

        Raises:
            InvalidHandNotation: If the text is malformed or names a
                non-pair without a suited/offsuit qualifier.
        """
        parsed = parse_hand(text)
        if parsed.suitedness is None:
            raise InvalidHandNotation(
                f"Hand {text!r} needs an '{SUITED_CHAR}' or '{OFFSUIT_CHAR}' qualifier",
                token=text,
            )
        return cls(parsed.high, parsed.low, parsed.suitedness)

    @classmethod
    def from_coords(cls, row: int, col: int) -> ShorthandHand:
        """
        Hand at a grid position.

        Diagonal cells are pairs, cells above the diagonal are suited and
        cells below it are offsuit.

        Raises:
            OutOfRange: If row or col is outside [0, 13).
        """
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise OutOfRange(f"Grid position ({row}, {col}) is outside the grid")
        first, second = RANKS_DESCENDING[row], RANKS_DESCENDING[col]
        if row == col:
            return cls(first, second, Suitedness.PAIR)
        if row < col:
            return cls(first, second, Suitedness.SUITED)
        return cls(second, first, Suitedness.OFFSUIT)

    @property
    def is_pair(self) -> bool:
        return self.suitedness == Suitedness.PAIR

    @property
    def combos(self) -> int:
        """Number of specific card combinations for this hand."""
        return COMBO_COUNTS[self.suitedness]

    @property
    def row(self) -> int:
        if self.suitedness == Suitedness.OFFSUIT:
            return rank_index(self.low)
        return rank_index(self.high)

    @property
    def col(self) -> int:
        if self.suitedness == Suitedness.OFFSUIT:
            return rank_index(self.high)
        return rank_index(self.low)

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Key that sorts stronger ranks first."""
        return (-int(self.high), -int(self.low))

    def _text(self) -> str:
        suffix = {
            Suitedness.PAIR: "",
            Suitedness.SUITED: SUITED_CHAR,
            Suitedness.OFFSUIT: OFFSUIT_CHAR,
        }[self.suitedness]
        return f"{RANK_CHARS[Rank(self.high)]}{RANK_CHARS[Rank(self.low)]}{suffix}"

    def __str__(self) -> str:
        return self._text()

    def __repr__(self) -> str:
        return f"ShorthandHand({self._text()})"


class HandSpec(NamedTuple):
    """
    A parsed shorthand token before suitedness is resolved.

    ``suitedness`` is None for a non-pair given without a qualifier.
    """
    high: Rank
    low: Rank
    suitedness: Optional[Suitedness]

    @property
    def is_pair(self) -> bool:
        return self.high == self.low

    def hands(self) -> List[ShorthandHand]:
        """Resolve to canonical hands (two of them when unqualified)."""
        if self.suitedness is not None:
            return [ShorthandHand(self.high, self.low, self.suitedness)]
        return [
            ShorthandHand(self.high, self.low, Suitedness.SUITED),
            ShorthandHand(self.high, self.low, Suitedness.OFFSUIT),
        ]


def parse_hand(text: str) -> HandSpec:
    """
    Parse a 2-3 character shorthand token.

    Accepts "AA", "AK", "AKs", "AKo" in any case and either rank order.

    Raises:
        InvalidHandNotation: If the length is wrong, a rank is unknown,
            the qualifier is not 's'/'o', or a pair carries a qualifier.
    """
    token = text.strip()
    if len(token) not in (2, 3):
        raise InvalidHandNotation(f"Hand must be 2-3 characters: {token!r}", token=token)

    first = rank_from_char(token[0], token=token)
    second = rank_from_char(token[1], token=token)
    high, low = max(first, second), min(first, second)

    if len(token) == 2:
        if high == low:
            return HandSpec(high, low, Suitedness.PAIR)
        return HandSpec(high, low, None)

    qualifier = token[2].lower()
    if qualifier not in QUALIFIERS:
        raise InvalidHandNotation(f"Invalid suitedness qualifier: {token[2]!r}", token=token)
    if high == low:
        raise InvalidHandNotation(f"Pairs cannot be suited or offsuit: {token!r}", token=token)
    return HandSpec(high, low, QUALIFIERS[qualifier])


class HandCombo:
    """
    A specific two-card holding, e.g. AhKs.

    The pair is unordered: the higher-ranked card is always stored first,
    and for pocket pairs the lower suit comes first.
    """

    __slots__ = ("first", "second")

    def __init__(self, card1: Card, card2: Card):
        if card1 == card2:
            raise InvalidHandNotation(f"Combo uses the same card twice: {card1}{card2}")
        if (card1.rank, -card1.suit) < (card2.rank, -card2.suit):
            card1, card2 = card2, card1
        self.first = card1
        self.second = card2

    @classmethod
    def from_string(cls, s: str) -> HandCombo:
        """Create a combo from a 4-character token like "AhKs"."""
        s = s.strip()
        if len(s) != 4:
            raise InvalidHandNotation(f"Combo must be 4 characters: {s!r}", token=s)
        card1, card2 = parse_cards(s)
        try:
            return cls(card1, card2)
        except InvalidHandNotation as e:
            raise InvalidHandNotation(e.message, token=s) from e

    @property
    def cards(self) -> Tuple[Card, Card]:
        return (self.first, self.second)

    @property
    def shorthand(self) -> ShorthandHand:
        """Canonical hand this combo belongs to."""
        if self.first.rank == self.second.rank:
            suitedness = Suitedness.PAIR
        elif self.first.suit == self.second.suit:
            suitedness = Suitedness.SUITED
        else:
            suitedness = Suitedness.OFFSUIT
        return ShorthandHand(self.first.rank, self.second.rank, suitedness)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HandCombo):
            return self.cards == other.cards
        return False

    def __hash__(self) -> int:
        return hash(self.cards)

    def __repr__(self) -> str:
        return f"HandCombo({self})"

    def __str__(self) -> str:
        return f"{self.first.short_str}{self.second.short_str}"


def _combos_for(hand: ShorthandHand) -> Iterator[HandCombo]:
    """Yield the combos of one hand in fixed suit order."""
    if hand.suitedness == Suitedness.PAIR:
        for i, suit1 in enumerate(SUITS):
            for suit2 in SUITS[i + 1:]:
                yield HandCombo(Card(hand.high, suit1), Card(hand.low, suit2))
    elif hand.suitedness == Suitedness.SUITED:
        for suit in SUITS:
            yield HandCombo(Card(hand.high, suit), Card(hand.low, suit))
    else:
        for suit1 in SUITS:
            for suit2 in SUITS:
                if suit1 != suit2:
                    yield HandCombo(Card(hand.high, suit1), Card(hand.low, suit2))


class ComboExpansion:
    """
    Lazy, restartable sequence of the combos behind one or two hands.

    Every iteration generates the combos afresh in the same order.
    """

    def __init__(self, hands: Tuple[ShorthandHand, ...]):
        self.hands = hands

    def __iter__(self) -> Iterator[HandCombo]:
        for hand in self.hands:
            yield from _combos_for(hand)

    def __len__(self) -> int:
        return sum(hand.combos for hand in self.hands)

    def __repr__(self) -> str:
        names = ",".join(str(h) for h in self.hands)
        return f"ComboExpansion({names}: {len(self)} combos)"


HandLike = Union[str, ShorthandHand]


def expand(hand: HandLike) -> ComboExpansion:
    """
    Expand a shorthand hand into its specific combos.

    Args:
        hand: A ShorthandHand or a 2-3 character token ("AA", "AK", "AKs")

    Returns:
        ComboExpansion yielding 6 (pair), 4 (suited), 12 (offsuit) or
        16 (no qualifier) combos.

    Raises:
        InvalidHandNotation: If the token is malformed.
    """
    if isinstance(hand, ShorthandHand):
        return ComboExpansion((hand,))
    if not isinstance(hand, str):
        raise InvalidHandNotation(f"Cannot expand {hand!r}")
    return ComboExpansion(tuple(parse_hand(hand).hands()))


def all_hands() -> List[ShorthandHand]:
    """All 169 canonical hands in row-major grid order."""
    return [
        ShorthandHand.from_coords(row, col)
        for row in range(GRID_SIZE)
        for col in range(GRID_SIZE)
    ]
