"""
Pydantic schemas for HRC scenario documents and the records built from them.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# ============= HRC Document Schemas =============

class HrcMetadata(BaseModel):
    """Document metadata; only "6max" exports are supported."""
    format: str


class HrcAction(BaseModel):
    """One action available in a spot: F, R, C, X, A, 3B, 4B, 5B."""
    type: str


class HrcHand(BaseModel):
    """Per-hand solver output, indexed like the spot's actions list."""
    played: Optional[List[float]] = Field(default=None, description="Frequency per action")
    weight: Optional[float] = Field(default=None, ge=0, le=1)
    evs: Optional[List[Optional[float]]] = Field(default=None, description="EV per action")


class HrcSpot(BaseModel):
    """A named decision point."""
    position: str = Field(..., min_length=1)
    hands: Dict[str, HrcHand]
    actions: List[HrcAction]
    spot_name: Optional[str] = None


class HrcDocument(BaseModel):
    """Top level of an HRC export. Spots are validated one by one."""
    metadata: HrcMetadata
    spots: Dict[str, Any]


# ============= Import Result Schemas =============

class HandFrequency(BaseModel):
    """How often a hand takes an action."""
    weight: float = 1.0
    frequency: float
    ev: Optional[float] = None


class SpotRange(BaseModel):
    """Range of hands that take one action in a spot."""
    condition: str
    range_data: Dict[str, HandFrequency]
    notation: str
    stats: Dict[str, Any]


class TrainerSpot(BaseModel):
    """Storable record for one imported spot."""
    name: str
    position: str
    villain: str
    action: str
    ranges: List[SpotRange] = []


class ImportSummary(BaseModel):
    """Counts and messages for an import run."""
    total: int = 0
    imported: int = 0
    skipped: int = 0
    errors: List[str] = []


class ImportResult(BaseModel):
    """Imported spots plus the run summary."""
    spots: List[TrainerSpot] = []
    summary: ImportSummary = Field(default_factory=ImportSummary)
