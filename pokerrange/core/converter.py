"""
Conversion between range notation dialects.

Supported formats (names are case-insensitive):

- combo ("gtow", "pio", "format1"): specific combos with a weight,
  e.g. "AhKh:1,AsKs:1,QcQd:0.5"
- shorthand ("flopzilla", "standard"): compact notation,
  e.g. "QQ+,AKs,AQo:0.5"
- bracketed ("format2"): one section per weight,
  e.g. "[1]QQ-JJ, AKs[/1]\\n[0.5]AQo[/0.5]"

Every conversion goes through weight buckets: weight -> canonical hands.
Combo input is lossy with respect to suits: any combo of a hand selects
the whole hand at that combo's weight.
"""

from __future__ import annotations
import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from pokerrange.core.compressor import compress_weighted, format_weight
from pokerrange.core.errors import (
    InvalidRangeExpression, RangeError, UnsupportedFormat,
)
from pokerrange.core.grid import Grid, create_grid, validate_weight
from pokerrange.core.hand import HandCombo, ShorthandHand, expand
from pokerrange.core.parser import parse_range, split_weight, tokenize
from pokerrange.core.rules import (
    DEFAULT_WEIGHT, FORMAT_ALIASES, TOKEN_SEPARATOR, WEIGHT_SEPARATOR,
)


logger = logging.getLogger(__name__)


class RangeFormat(Enum):
    """Range notation dialects."""
    COMBO = "combo"
    SHORTHAND = "shorthand"
    BRACKETED = "bracketed"


# weight -> hands, hands unique within one weight
WeightBuckets = Dict[float, List[ShorthandHand]]

SECTION_RE = re.compile(r"\[([^\[\]/]*)\]([^\[]*)\[/([^\[\]]*)\]")


def resolve_format(name: Union[str, RangeFormat]) -> RangeFormat:
    """
    Map a format name or alias to a RangeFormat.

    Raises:
        UnsupportedFormat: If the name is not a known format.
    """
    if isinstance(name, RangeFormat):
        return name
    canonical = FORMAT_ALIASES.get(name.strip().lower()) if isinstance(name, str) else None
    if canonical is None:
        supported = ", ".join(sorted(FORMAT_ALIASES))
        raise UnsupportedFormat(f"Unsupported format {name!r} (supported: {supported})", token=str(name))
    return RangeFormat(canonical)


def _add(buckets: WeightBuckets, hand: ShorthandHand, weight: float) -> None:
    bucket = buckets.setdefault(weight, [])
    if hand not in bucket:
        bucket.append(hand)


def _grid_buckets(grid: Grid) -> WeightBuckets:
    buckets: WeightBuckets = {}
    for hand, weight in grid.weights().items():
        _add(buckets, hand, weight)
    return buckets


def parse_combos(text: str) -> WeightBuckets:
    """
    Group combo tokens ("AhKs:0.5") by weight into canonical hands.

    Same suit gives a suited hand, different suits an offsuit hand and
    equal ranks a pair. A missing weight means 1.0; weight 0 combos are
    dropped. A hand gets one weight: when its combos disagree, the last
    combo wins ("AhKh:1,AsKs:0.5" gives "AKs:0.5").

    Raises:
        RangeError: The first invalid token.
    """
    weights: Dict[ShorthandHand, float] = {}
    for raw in text.split(TOKEN_SEPARATOR):
        if not raw.strip():
            continue
        try:
            body, weight = split_weight(raw)
            combo = HandCombo.from_string(body)
        except RangeError as e:
            token = raw.strip()
            raise type(e)(f"Invalid combo {token!r}: {e.message}", token=token) from e
        if weight > 0:
            weights[combo.shorthand] = weight

    buckets: WeightBuckets = {}
    for hand, weight in weights.items():
        _add(buckets, hand, weight)
    return buckets


def parse_bracketed(text: str, grid: Optional[Grid] = None) -> Grid:
    """
    Parse "[w]hands[/w]" sections into a grid.

    Hands inside a section take the section weight and must not carry
    their own ":weight" suffix. Later sections overwrite earlier ones.

    Raises:
        InvalidRangeExpression: For stray text, unmatched tags or a suffix
            inside a section.
        InvalidWeight: For a section weight outside [0, 1].
    """
    selections = []
    position = 0
    for match in SECTION_RE.finditer(text):
        stray = text[position:match.start()]
        if stray.strip():
            raise InvalidRangeExpression(f"Text outside a weight section: {stray.strip()!r}", token=stray.strip())
        position = match.end()

        open_tag, body, close_tag = match.group(1).strip(), match.group(2), match.group(3).strip()
        if open_tag != close_tag:
            raise InvalidRangeExpression(
                f"Section [{open_tag}] closed by [/{close_tag}]", token=match.group(0)
            )
        if WEIGHT_SEPARATOR in body:
            raise InvalidRangeExpression(
                f"Hands in section [{open_tag}] cannot carry their own weight", token=match.group(0)
            )
        weight = validate_weight(open_tag, token=open_tag)
        for token in tokenize(body):
            selections.append((token.hands, weight))

    stray = text[position:]
    if stray.strip():
        raise InvalidRangeExpression(f"Text outside a weight section: {stray.strip()!r}", token=stray.strip())

    if grid is None:
        grid = create_grid()
    else:
        grid.reset()
    for hands, weight in selections:
        for hand in hands:
            grid.set_cell(hand, True, weight)
    return grid


def _read_shorthand(text: str) -> WeightBuckets:
    return _grid_buckets(parse_range(text))


def _read_bracketed(text: str) -> WeightBuckets:
    return _grid_buckets(parse_bracketed(text))


def _by_weight(buckets: WeightBuckets):
    return sorted(buckets.items(), key=lambda item: item[0], reverse=True)


def _write_shorthand(buckets: WeightBuckets) -> str:
    tokens: List[str] = []
    for weight, hands in _by_weight(buckets):
        tokens.extend(compress_weighted({hand: weight for hand in hands}))
    return TOKEN_SEPARATOR.join(tokens)


def _write_bracketed(buckets: WeightBuckets) -> str:
    sections = []
    for weight, hands in _by_weight(buckets):
        tag = format_weight(weight)
        tokens = compress_weighted({hand: DEFAULT_WEIGHT for hand in hands})
        sections.append(f"[{tag}]{', '.join(tokens)}[/{tag}]")
    return "\n".join(sections)


def _write_combos(buckets: WeightBuckets) -> str:
    tokens = []
    for weight, hands in _by_weight(buckets):
        suffix = f"{WEIGHT_SEPARATOR}{format_weight(weight)}"
        for hand in hands:
            tokens.extend(f"{combo}{suffix}" for combo in expand(hand))
    return TOKEN_SEPARATOR.join(tokens)


_READERS: Dict[RangeFormat, Callable[[str], WeightBuckets]] = {
    RangeFormat.COMBO: parse_combos,
    RangeFormat.SHORTHAND: _read_shorthand,
    RangeFormat.BRACKETED: _read_bracketed,
}

_WRITERS: Dict[RangeFormat, Callable[[WeightBuckets], str]] = {
    RangeFormat.COMBO: _write_combos,
    RangeFormat.SHORTHAND: _write_shorthand,
    RangeFormat.BRACKETED: _write_bracketed,
}


def convert(
    text: str,
    from_format: Union[str, RangeFormat],
    to_format: Union[str, RangeFormat],
) -> str:
    """
    Convert a range between notation formats.

    Args:
        text: Range in the source format
        from_format: Source format name or alias
        to_format: Target format name or alias

    Returns:
        The range in the target format. Input is returned unchanged when
        both formats are the same; blank input otherwise gives "".

    Raises:
        UnsupportedFormat: If either format is unknown.
        RangeError: The first notation error in the input.
    """
    source = resolve_format(from_format)
    target = resolve_format(to_format)

    if source == target:
        return text
    if not text or not text.strip():
        return ""

    buckets = _READERS[source](text)
    result = _WRITERS[target](buckets)
    logger.debug(
        f"Converted {source.value} -> {target.value}: "
        f"{sum(len(h) for h in buckets.values())} hands in {len(buckets)} weight buckets"
    )
    return result


def combos_to_shorthand(text: str) -> str:
    """Convert combo notation ("AhKh:1,...") to shorthand ("AKs")."""
    return convert(text, RangeFormat.COMBO, RangeFormat.SHORTHAND)


def shorthand_to_combos(text: str) -> str:
    """Convert shorthand ("AKs") to combo notation ("AcKc:1,...")."""
    return convert(text, RangeFormat.SHORTHAND, RangeFormat.COMBO)
