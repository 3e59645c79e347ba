"""
13x13 starting-hand grid.

Rows and columns index ranks from Ace (0) down to Two (12). The diagonal
holds the pairs, cells above it the suited hands and cells below it the
offsuit hands:

         A    K    Q   ...
    A   AA   AKs  AQs
    K   AKo  KK   KQs
    Q   AQo  KQo  QQ
   ...

Every cell can be addressed by (row, col), by ShorthandHand or by a hand
string such as "AKs"; all three resolve to the same GridCell object.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple, Union

from pokerrange.core.errors import InvalidHandNotation, InvalidWeight, OutOfRange
from pokerrange.core.hand import ShorthandHand
from pokerrange.core.rules import (
    DEFAULT_WEIGHT, GRID_SIZE, MAX_WEIGHT, MIN_WEIGHT, Suitedness,
)


CellKey = Union[ShorthandHand, Tuple[int, int], str]


@dataclass
class GridCell:
    """
    One cell of the grid.

    Attributes:
        hand: The canonical hand this cell represents
        selected: Whether the hand is part of the range
        weight: Inclusion frequency in [0, 1]
    """
    hand: ShorthandHand
    selected: bool = False
    weight: float = 0.0

    @property
    def row(self) -> int:
        return self.hand.row

    @property
    def col(self) -> int:
        return self.hand.col

    @property
    def active(self) -> bool:
        """Selected with a non-zero weight."""
        return self.selected and self.weight > 0

    def clear(self) -> None:
        self.selected = False
        self.weight = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "hand": str(self.hand),
            "type": self.hand.suitedness.value,
            "combos": self.hand.combos,
            "selected": self.selected,
            "weight": self.weight,
        }


def validate_weight(weight: float, token: str = None) -> float:
    """
    Check a weight lies in [0, 1].

    Raises:
        InvalidWeight: If the weight is outside the range or not a number.
    """
    try:
        value = float(weight)
    except (TypeError, ValueError):
        raise InvalidWeight(f"Weight is not a number: {weight!r}", token=token)
    # NaN fails both comparisons
    if not MIN_WEIGHT <= value <= MAX_WEIGHT:
        raise InvalidWeight(f"Weight must be between 0 and 1, got {weight!r}", token=token)
    return value


class Grid:
    """
    The full set of 169 cells.

    Usage:
        grid = Grid()
        grid.set_cell("AKs", True, 0.5)
        grid.get_cell((0, 1)).weight  # 0.5
    """

    def __init__(self):
        self._rows: List[List[GridCell]] = [
            [GridCell(ShorthandHand.from_coords(row, col)) for col in range(GRID_SIZE)]
            for row in range(GRID_SIZE)
        ]

    def _resolve(self, key: CellKey) -> Tuple[int, int]:
        if isinstance(key, ShorthandHand):
            return key.row, key.col
        if isinstance(key, str):
            try:
                hand = ShorthandHand.from_string(key)
            except InvalidHandNotation as e:
                raise OutOfRange(f"No grid cell for {key!r}: {e.message}", token=key) from e
            return hand.row, hand.col
        if isinstance(key, tuple) and len(key) == 2:
            row, col = key
            if not (isinstance(row, int) and isinstance(col, int)):
                raise OutOfRange(f"Grid position {key!r} must be a pair of integers")
            if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
                raise OutOfRange(f"Grid position ({row}, {col}) is outside the grid")
            return row, col
        raise OutOfRange(f"Cannot address a grid cell with {key!r}")

    def get_cell(self, key: CellKey) -> GridCell:
        """
        Get a cell by hand, (row, col) or hand string.

        Raises:
            OutOfRange: If the key does not name a cell.
        """
        row, col = self._resolve(key)
        return self._rows[row][col]

    def set_cell(self, key: CellKey, selected: bool, weight: float = DEFAULT_WEIGHT) -> GridCell:
        """
        Update a cell in place.

        Deselecting always clears the weight to 0.

        Raises:
            OutOfRange: If the key does not name a cell.
            InvalidWeight: If a selected weight is outside [0, 1].
        """
        cell = self.get_cell(key)
        if selected:
            cell.weight = validate_weight(weight, token=str(cell.hand))
            cell.selected = True
        else:
            cell.clear()
        return cell

    def toggle(self, key: CellKey) -> GridCell:
        """Flip a cell's selection (weight 1 when selected, 0 otherwise)."""
        cell = self.get_cell(key)
        return self.set_cell(key, not cell.selected, DEFAULT_WEIGHT)

    def reset(self) -> None:
        """Clear every selection and weight."""
        for cell in self:
            cell.clear()

    def selected_cells(self) -> List[GridCell]:
        """Cells that count towards the range (selected, weight > 0)."""
        return [cell for cell in self if cell.active]

    def weights(self) -> Dict[ShorthandHand, float]:
        """Map of active hands to their weight, in grid order."""
        return {cell.hand: cell.weight for cell in self if cell.active}

    def cells_of(self, suitedness: Suitedness) -> List[GridCell]:
        return [cell for cell in self if cell.hand.suitedness == suitedness]

    def rows(self) -> List[List[GridCell]]:
        """Nested row view of the grid."""
        return [list(row) for row in self._rows]

    def to_dict(self) -> List[List[Dict[str, Any]]]:
        """Convert to nested lists of cell dicts for JSON serialization."""
        return [[cell.to_dict() for cell in row] for row in self._rows]

    def __iter__(self) -> Iterator[GridCell]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return GRID_SIZE * GRID_SIZE

    def __repr__(self) -> str:
        return f"Grid({len(self.selected_cells())} hands selected)"


def create_grid() -> Grid:
    """Return a fresh grid with every cell unselected."""
    return Grid()


def get_cell(grid: Grid, key: CellKey) -> GridCell:
    return grid.get_cell(key)


def set_cell(grid: Grid, key: CellKey, selected: bool, weight: float = DEFAULT_WEIGHT) -> GridCell:
    return grid.set_cell(key, selected, weight)


def reset_grid(grid: Grid) -> None:
    grid.reset()
