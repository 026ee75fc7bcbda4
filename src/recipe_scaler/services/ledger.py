"""Ordered ingredient list with entry validation."""

from dataclasses import dataclass, field

from recipe_scaler.domain.errors import (
    EmptyNameError,
    IndexOutOfRangeError,
    NonPositiveQuantityError,
    UnknownUnitError,
)
from recipe_scaler.domain.ingredients import DEFAULT_UNITS, IngredientEntry
from recipe_scaler.services.scaling import parse_positive


@dataclass
class IngredientLedger:
    """Owns the ordered ingredient entries of a session."""

    units: tuple[str, ...] = DEFAULT_UNITS
    _entries: list[IngredientEntry] = field(
        default_factory=list, init=False, repr=False
    )

    def add(
        self, name: str | None, quantity: object, unit: str | None
    ) -> IngredientEntry:
        """Validate and append a new entry."""
        cleaned = (name or "").strip()
        if not cleaned:
            raise EmptyNameError("Please enter an ingredient name.")
        parsed = parse_positive(quantity)
        if parsed is None:
            raise NonPositiveQuantityError("Please enter a valid quantity (> 0).")
        if unit is None:
            raise UnknownUnitError("Please choose a unit.")
        if unit not in self.units:
            raise UnknownUnitError(f"Unknown unit: {unit!r}.")
        entry = IngredientEntry(name=cleaned, quantity=parsed, unit=unit)
        self._entries.append(entry)
        return entry

    def preview_removal(self, index: int) -> IngredientEntry:
        """Return the entry that remove_at(index) would remove."""
        self._check_index(index)
        return self._entries[index]

    def remove_at(self, index: int) -> IngredientEntry:
        """Remove and return the entry at index."""
        self._check_index(index)
        return self._entries.pop(index)

    def snapshot(self) -> tuple[IngredientEntry, ...]:
        """Return an immutable copy of the entries in insertion order."""
        return tuple(self._entries)

    def count(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(f"No ingredient at position {index!r}.")
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRangeError(f"No ingredient at position {index}.")
