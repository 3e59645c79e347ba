"""
Range compressor: the inverse of the parser.

Selected hands are written back as short notation. Pairs, suited hands
and offsuit hands are compressed separately (in that order). A run of
hands merges into "<start>-<end>" when each step moves the varying rank by
exactly one and every hand in the run has the same weight. Suited and
offsuit hands only merge while they share their high rank.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from pokerrange.core.grid import Grid
from pokerrange.core.hand import ShorthandHand
from pokerrange.core.parser import parse_hands
from pokerrange.core.rules import (
    DEFAULT_WEIGHT, RANGE_SEPARATOR, TOKEN_SEPARATOR, WEIGHT_SEPARATOR,
    Suitedness,
)


CompressSource = Union[Grid, Mapping[ShorthandHand, float], Iterable[ShorthandHand], str]

BUCKET_ORDER = (Suitedness.PAIR, Suitedness.SUITED, Suitedness.OFFSUIT)


def format_weight(weight: float) -> str:
    """
    Shortest text that reads back as the same weight.

    1.0 -> "1", 0.5 -> "0.5", 0.1234567 -> "0.1234567"
    """
    text = repr(float(weight))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _run_key(hand: ShorthandHand, weight: float) -> Tuple:
    """Hands can only share a run when these keys are equal."""
    if hand.is_pair:
        return (hand.suitedness, weight)
    return (hand.suitedness, hand.high, weight)


def _step(hand: ShorthandHand) -> int:
    """The rank that varies along a run."""
    return int(hand.high) if hand.is_pair else int(hand.low)


def _emit(run: List[ShorthandHand], weight: float) -> str:
    if len(run) == 1:
        token = str(run[0])
    else:
        token = f"{run[0]}{RANGE_SEPARATOR}{run[-1]}"
    if weight != DEFAULT_WEIGHT:
        token += f"{WEIGHT_SEPARATOR}{format_weight(weight)}"
    return token


def compress_weighted(weighted: Mapping[ShorthandHand, float]) -> List[str]:
    """
    Compress a hand -> weight map into notation tokens.

    Args:
        weighted: Hands with their weights; weight 0 hands are dropped

    Returns:
        Tokens ordered pairs, suited, offsuit, strongest first.
    """
    tokens: List[str] = []
    for suitedness in BUCKET_ORDER:
        bucket = sorted(
            ((hand, weight) for hand, weight in weighted.items()
             if hand.suitedness == suitedness and weight > 0),
            key=lambda item: item[0].sort_key,
        )

        run: List[ShorthandHand] = []
        run_weight = DEFAULT_WEIGHT
        for hand, weight in bucket:
            if run:
                prev = run[-1]
                consecutive = (
                    _run_key(prev, run_weight) == _run_key(hand, weight)
                    and _step(prev) - _step(hand) == 1
                )
                if not consecutive:
                    tokens.append(_emit(run, run_weight))
                    run = []
            if not run:
                run_weight = weight
            run.append(hand)

        if run:
            tokens.append(_emit(run, run_weight))

    return tokens


def compress(source: CompressSource) -> str:
    """
    Write hands back as minimal range notation.

    Args:
        source: A Grid (active cells only), a hand -> weight map, or an
            iterable of hands taken at weight 1.0. A string is parsed as
            range notation first.

    Returns:
        Comma-separated notation, e.g. "AA-QQ,AKs,ATs-A8s,AKo:0.5".
    """
    if isinstance(source, str):
        weighted: Dict[ShorthandHand, float] = parse_hands(source)
    elif isinstance(source, Grid):
        weighted = source.weights()
    elif isinstance(source, Mapping):
        weighted = dict(source)
    else:
        weighted = {hand: DEFAULT_WEIGHT for hand in source}
    return TOKEN_SEPARATOR.join(compress_weighted(weighted))
