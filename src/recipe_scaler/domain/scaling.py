"""Domain models for serving scaling."""

from dataclasses import dataclass
from enum import Enum


class DisplayMode(Enum):
    """Which projection of the session is produced for display."""

    SCALED = "scaled"
    SUMMARY = "summary"


@dataclass(frozen=True)
class ServingSpec:
    """Validated original and target serving counts."""

    original: float
    target: float


@dataclass(frozen=True)
class ScaledEntry:
    """An ingredient with its scaled quantity."""

    name: str
    unit: str
    original_quantity: float
    scaled_quantity: float


@dataclass(frozen=True)
class ScaleResult:
    """Scale factor applied to every entry of a ledger snapshot."""

    factor: float
    entries: tuple[ScaledEntry, ...]


@dataclass(frozen=True)
class SummaryView:
    """Summary of a scaling request."""

    original: float
    target: float
    factor: float
    entry_count: int
