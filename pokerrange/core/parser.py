"""
Range notation parser.

Turns a comma-separated range string into grid selections. Supported
token shapes (each optionally followed by ":<weight>"):

- Single hand:  "AA", "AKs", "T9o", "AK" (suited and offsuit)
- Plus-range:   "JJ+" (JJ-AA), "A9s+" (A9s-AKs), "KT+" (KT-KQ both kinds)
- Dash-range:   "TT-77", "ATs-A6s", "K9o-K5o"

Parsing is all-or-nothing: every token is resolved before any grid cell
is touched, and later tokens overwrite earlier ones for the same hand.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pokerrange.core.card import Rank
from pokerrange.core.errors import (
    InvalidRangeExpression, InvalidWeight, RangeError,
)
from pokerrange.core.grid import Grid, create_grid, validate_weight
from pokerrange.core.hand import HandSpec, ShorthandHand, parse_hand
from pokerrange.core.rules import (
    DEFAULT_WEIGHT, PLUS_SUFFIX, RANGE_SEPARATOR, TOKEN_SEPARATOR,
    WEIGHT_SEPARATOR, Suitedness,
)


@dataclass(frozen=True)
class RangeToken:
    """
    One parsed unit of range notation.

    Attributes:
        text: The raw token as written
        hands: Canonical hands the token resolves to
        weight: Inclusion weight (1.0 when no suffix is given)
    """
    text: str
    hands: Tuple[ShorthandHand, ...]
    weight: float = DEFAULT_WEIGHT


def split_weight(raw: str) -> Tuple[str, float]:
    """
    Split "AKs:0.5" into ("AKs", 0.5).

    Raises:
        InvalidWeight: If the suffix is empty, not a number or outside [0, 1].
    """
    if WEIGHT_SEPARATOR not in raw:
        return raw.strip(), DEFAULT_WEIGHT

    body, _, weight_text = raw.partition(WEIGHT_SEPARATOR)
    weight_text = weight_text.strip()
    if not weight_text or WEIGHT_SEPARATOR in weight_text:
        raise InvalidWeight(f"Invalid weight suffix in {raw!r}", token=raw)
    return body.strip(), validate_weight(weight_text, token=raw)


def _pair(rank: Rank) -> ShorthandHand:
    return ShorthandHand(rank, rank, Suitedness.PAIR)


def expand_plus(base: str) -> List[ShorthandHand]:
    """
    Expand the base of a plus-range ("77" for "77+").

    Pairs run from the given rank up to Aces. Non-pairs keep their high
    rank and run the low rank up to, but not including, the high rank.

    Raises:
        InvalidRangeExpression: If the base is itself a range.
        InvalidHandNotation: If the base hand is malformed.
    """
    if PLUS_SUFFIX in base or RANGE_SEPARATOR in base:
        raise InvalidRangeExpression(f"Cannot combine range operators: {base!r}", token=base)

    parsed = parse_hand(base)
    if parsed.is_pair:
        return [_pair(rank) for rank in Rank if rank >= parsed.high]

    hands: List[ShorthandHand] = []
    for low in range(parsed.low, parsed.high):
        hands.extend(HandSpec(parsed.high, Rank(low), parsed.suitedness).hands())
    return hands


def expand_dash(expr: str) -> List[ShorthandHand]:
    """
    Expand a dash-range such as "TT-77" or "ATs-A6s".

    Both ends are inclusive and may be given in either order. Non-pair
    ends must share their high rank and their qualifier.

    Raises:
        InvalidRangeExpression: If the endpoints do not fit together.
        InvalidHandNotation: If an endpoint is malformed.
    """
    parts = [part.strip() for part in expr.split(RANGE_SEPARATOR)]
    if len(parts) != 2 or not all(parts):
        raise InvalidRangeExpression(f"Dash-range needs two endpoints: {expr!r}", token=expr)

    start, end = parse_hand(parts[0]), parse_hand(parts[1])

    if start.is_pair and end.is_pair:
        lo, hi = sorted((start.high, end.high))
        return [_pair(Rank(rank)) for rank in range(lo, hi + 1)]

    if start.is_pair or end.is_pair:
        raise InvalidRangeExpression(f"Cannot mix pairs and non-pairs: {expr!r}", token=expr)
    if start.high != end.high:
        raise InvalidRangeExpression(f"Endpoints must share the high rank: {expr!r}", token=expr)
    if start.suitedness != end.suitedness:
        raise InvalidRangeExpression(f"Endpoints must share suitedness: {expr!r}", token=expr)

    lo, hi = sorted((start.low, end.low))
    hands: List[ShorthandHand] = []
    for low in range(lo, hi + 1):
        hands.extend(HandSpec(start.high, Rank(low), start.suitedness).hands())
    return hands


def parse_token(raw: str) -> RangeToken:
    """Parse one comma-separated token into a RangeToken."""
    body, weight = split_weight(raw)

    if body.endswith(PLUS_SUFFIX):
        hands = expand_plus(body[:-1])
    elif PLUS_SUFFIX in body:
        raise InvalidRangeExpression(f"'+' must end the token: {body!r}", token=raw)
    elif RANGE_SEPARATOR in body:
        hands = expand_dash(body)
    else:
        hands = parse_hand(body).hands()

    return RangeToken(text=raw.strip(), hands=tuple(hands), weight=weight)


def tokenize(text: Optional[str]) -> List[RangeToken]:
    """
    Parse every token of a range string.

    Empty tokens (",,", trailing commas, blank input) are skipped.

    Raises:
        RangeError: The first token that fails, with the token attached.
    """
    if not text or not text.strip():
        return []

    tokens = []
    for raw in text.split(TOKEN_SEPARATOR):
        if not raw.strip():
            continue
        try:
            tokens.append(parse_token(raw))
        except RangeError as e:
            token = raw.strip()
            raise type(e)(f"Invalid token {token!r}: {e.message}", token=token) from e
    return tokens


def parse_range(text: Optional[str], grid: Optional[Grid] = None) -> Grid:
    """
    Parse range notation into a grid.

    Args:
        text: Range notation, e.g. "22+,ATs-A6s,KQo:0.5"
        grid: Optional grid to reuse; it is reset before filling

    Returns:
        The filled grid (a new one when none was passed).

    Raises:
        RangeError: If any token is invalid. A passed grid is left as it was.
    """
    tokens = tokenize(text)

    if grid is None:
        grid = create_grid()
    else:
        grid.reset()

    for token in tokens:
        for hand in token.hands:
            grid.set_cell(hand, True, token.weight)
    return grid


def parse_hands(text: Optional[str]) -> Dict[ShorthandHand, float]:
    """Parse range notation into a map of hand to weight."""
    return parse_range(text).weights()
