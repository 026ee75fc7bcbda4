"""Serving validation and quantity scaling."""

import math

from recipe_scaler.domain.errors import InvalidOriginalError, InvalidTargetError
from recipe_scaler.domain.ingredients import IngredientEntry
from recipe_scaler.domain.scaling import (
    ScaledEntry,
    ScaleResult,
    ServingSpec,
    SummaryView,
)

_INTEGER_TOLERANCE = 1e-9


def parse_positive(value: object) -> float | None:
    """Return value as a finite float greater than zero, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def validate_servings(original: object, target: object) -> ServingSpec:
    """Validate raw serving inputs and return a serving spec."""
    parsed_original = parse_positive(original)
    if parsed_original is None:
        raise InvalidOriginalError("Original servings must be a number greater than 0.")
    parsed_target = parse_positive(target)
    if parsed_target is None:
        raise InvalidTargetError("Target servings must be a number greater than 0.")
    return ServingSpec(original=parsed_original, target=parsed_target)


def compute_factor(spec: ServingSpec) -> float:
    """Return the ratio of target to original servings."""
    return spec.target / spec.original


def scale(spec: ServingSpec, snapshot: tuple[IngredientEntry, ...]) -> ScaleResult:
    """Multiply every entry quantity by the serving factor."""
    factor = compute_factor(spec)
    entries = tuple(
        ScaledEntry(
            name=entry.name,
            unit=entry.unit,
            original_quantity=entry.quantity,
            scaled_quantity=entry.quantity * factor,
        )
        for entry in snapshot
    )
    return ScaleResult(factor=factor, entries=entries)


def summarize(spec: ServingSpec, entry_count: int) -> SummaryView:
    """Build the summary view for a serving spec."""
    return SummaryView(
        original=spec.original,
        target=spec.target,
        factor=compute_factor(spec),
        entry_count=entry_count,
    )


def format_quantity(value: float | str) -> str:
    """Format a number for display with at most two decimals.

    Values within 1e-9 of a whole number print as integers; everything else
    is rounded to two places with trailing zeros dropped. Already formatted
    strings are accepted so the operation is idempotent.
    """
    number = float(value)
    if not math.isfinite(number):
        return str(value)
    nearest = round(number)
    if abs(number - nearest) < _INTEGER_TOLERANCE:
        return str(int(nearest))
    rounded = float(f"{number:.2f}")
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)
