"""
Range statistics derived from a grid snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from pokerrange.core.grid import Grid
from pokerrange.core.rules import HAND_COUNTS, TOTAL_COMBOS, Suitedness


@dataclass
class CategoryStats:
    """Selection counts for pairs, suited or offsuit hands."""
    selected: int = 0
    total: int = 0
    combos: float = 0.0


@dataclass
class RangeStats:
    """
    Summary of a range.

    Attributes:
        selected_hands: Number of active cells (weight > 0)
        selected_combos: Combos weighted by each hand's weight
        total_combos: 1326
        percentage: selected_combos as a percentage of all combos
        breakdown: Per-category counts keyed "pairs", "suited", "offsuit"
    """
    selected_hands: int = 0
    selected_combos: float = 0.0
    total_combos: int = TOTAL_COMBOS
    percentage: float = 0.0
    breakdown: Dict[str, CategoryStats] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "selected_hands": self.selected_hands,
            "selected_combos": self.selected_combos,
            "total_combos": self.total_combos,
            "percentage": self.percentage,
            "breakdown": {
                name: {
                    "selected": category.selected,
                    "total": category.total,
                    "combos": category.combos,
                }
                for name, category in self.breakdown.items()
            },
        }


BREAKDOWN_NAMES = {
    Suitedness.PAIR: "pairs",
    Suitedness.SUITED: "suited",
    Suitedness.OFFSUIT: "offsuit",
}


def calculate_stats(grid: Grid) -> RangeStats:
    """Count selected hands and weighted combos in a grid."""
    stats = RangeStats(
        breakdown={
            name: CategoryStats(total=HAND_COUNTS[suitedness])
            for suitedness, name in BREAKDOWN_NAMES.items()
        }
    )

    for cell in grid.selected_cells():
        combos = cell.hand.combos * cell.weight
        category = stats.breakdown[BREAKDOWN_NAMES[cell.hand.suitedness]]
        category.selected += 1
        category.combos += combos
        stats.selected_hands += 1
        stats.selected_combos += combos

    stats.percentage = round(stats.selected_combos / TOTAL_COMBOS * 100, 2)
    return stats
