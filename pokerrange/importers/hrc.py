"""
HRC scenario import.

Turns an HRC JSON export (named spots, each with per-hand action
frequencies) into TrainerSpot records. Every hand key is mapped onto its
canonical grid hand, and each action's hands are compressed into range
notation with the action frequency as the hand weight.

A bad spot is skipped and reported in the summary; it never aborts the
rest of the import. A bad document raises HrcFormatError.
"""

from __future__ import annotations
import json
import logging
import re
from typing import Any, Dict, List

from pydantic import ValidationError

from pokerrange.core.compressor import compress
from pokerrange.core.errors import HrcFormatError, RangeError
from pokerrange.core.grid import create_grid
from pokerrange.core.hand import ShorthandHand
from pokerrange.core.rules import (
    DEFAULT_WEIGHT, HRC_ACTION_LABELS, HRC_FORMAT, HRC_MAX_FILE_SIZE,
    HRC_MAX_SPOTS,
)
from pokerrange.core.stats import calculate_stats
from pokerrange.importers.schemas import (
    HandFrequency, HrcDocument, HrcSpot, ImportResult, SpotRange, TrainerSpot,
)


logger = logging.getLogger(__name__)

VILLAIN_RE = re.compile(r"vs\s+([A-Z]{2,3})", re.IGNORECASE)
ACTION_RE = re.compile(r"(RFI|3Bet|4Bet|5Bet|Call|Raise|Fold|Check|All-in)", re.IGNORECASE)


def validate_hrc_file(raw: bytes) -> Dict[str, Any]:
    """
    Check an uploaded HRC file and decode it.

    Raises:
        HrcFormatError: If the file is too large, not JSON, not a 6max
            export, has no spots or has too many spots.
    """
    if len(raw) > HRC_MAX_FILE_SIZE:
        raise HrcFormatError("File too large: maximum 10MB")

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HrcFormatError(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        raise HrcFormatError("Invalid format: expected a JSON object")
    metadata = data.get("metadata")
    if not isinstance(metadata, dict) or metadata.get("format") != HRC_FORMAT:
        raise HrcFormatError(f'Invalid format: metadata.format must be "{HRC_FORMAT}"')
    if not isinstance(data.get("spots"), dict):
        raise HrcFormatError("Invalid format: missing spots object")

    spot_count = len(data["spots"])
    if spot_count > HRC_MAX_SPOTS:
        raise HrcFormatError(f"Too many spots: maximum {HRC_MAX_SPOTS}, found {spot_count}")

    return data


def parse_villain(spot_name: str) -> str:
    """
    Villain position from a spot name.

    "EP vs BB 3Bet" -> "BB", "EP RFI" -> "Unknown"
    """
    match = VILLAIN_RE.search(spot_name)
    return match.group(1) if match else "Unknown"


def parse_action(spot_name: str) -> str:
    """
    Primary action from a spot name.

    "CO vs BB 3Bet" -> "3Bet", anything unrecognized -> "RFI"
    """
    match = ACTION_RE.search(spot_name)
    return match.group(1) if match else "RFI"


def build_ranges(spot: HrcSpot) -> List[SpotRange]:
    """
    One SpotRange per action that at least one hand takes.

    Raises:
        InvalidHandNotation: If a hand key is not a canonical hand.
        InvalidWeight: If a frequency lies outside [0, 1].
    """
    hands = {key: (ShorthandHand.from_string(key), data) for key, data in spot.hands.items()}

    ranges = []
    for index, action in enumerate(spot.actions):
        grid = create_grid()
        range_data: Dict[str, HandFrequency] = {}

        for hand, data in hands.values():
            if not data.played or index >= len(data.played):
                continue
            frequency = data.played[index]
            if frequency <= 0:
                continue

            ev = data.evs[index] if data.evs and index < len(data.evs) else None
            weight = data.weight if data.weight is not None else DEFAULT_WEIGHT
            range_data[str(hand)] = HandFrequency(weight=weight, frequency=frequency, ev=ev)
            grid.set_cell(hand, True, frequency)

        if range_data:
            ranges.append(SpotRange(
                condition=HRC_ACTION_LABELS.get(action.type, action.type),
                range_data=range_data,
                notation=compress(grid),
                stats=calculate_stats(grid).to_dict(),
            ))
    return ranges


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "spot"
    if first["type"] == "missing":
        return f"missing {field}"
    return f"invalid {field}: {first['msg']}"


def parse_hrc_json(data: Dict[str, Any]) -> ImportResult:
    """
    Convert a decoded HRC export into TrainerSpot records.

    Args:
        data: The decoded JSON document

    Returns:
        ImportResult with the imported spots and a summary of skipped ones.

    Raises:
        HrcFormatError: If the document itself is malformed.
    """
    try:
        document = HrcDocument.model_validate(data)
    except ValidationError as e:
        raise HrcFormatError(f"Invalid HRC format: {_describe(e)}")
    if document.metadata.format != HRC_FORMAT:
        raise HrcFormatError(f'Invalid HRC format: metadata.format must be "{HRC_FORMAT}"')

    result = ImportResult()
    result.summary.total = len(document.spots)

    for spot_name, raw_spot in document.spots.items():
        try:
            spot = HrcSpot.model_validate(raw_spot)
            ranges = build_ranges(spot)
        except ValidationError as e:
            reason = _describe(e)
        except RangeError as e:
            reason = e.message
        else:
            result.spots.append(TrainerSpot(
                name=spot.spot_name or spot_name,
                position=spot.position,
                villain=parse_villain(spot_name),
                action=parse_action(spot_name),
                ranges=ranges,
            ))
            result.summary.imported += 1
            continue

        message = f'Spot "{spot_name}": {reason}'
        logger.warning(f"Skipping HRC spot: {message}")
        result.summary.skipped += 1
        result.summary.errors.append(message)

    logger.info(
        f"HRC import finished: {result.summary.imported} imported, "
        f"{result.summary.skipped} skipped of {result.summary.total}"
    )
    return result
