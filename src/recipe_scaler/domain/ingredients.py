"""Domain models for recorded ingredients."""

from dataclasses import dataclass

DEFAULT_UNITS: tuple[str, ...] = ("g", "kg", "ml", "l", "cup", "tbsp", "tsp", "pcs")


@dataclass(frozen=True)
class IngredientEntry:
    """One recorded ingredient."""

    name: str
    quantity: float
    unit: str
