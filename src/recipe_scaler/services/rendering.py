"""Text rendering for ingredients and scaling output."""

from recipe_scaler.domain.errors import ScalerError
from recipe_scaler.domain.ingredients import IngredientEntry
from recipe_scaler.domain.scaling import ScaleResult, SummaryView
from recipe_scaler.services.scaling import format_quantity

EMPTY_LEDGER_TEXT = "No ingredients yet — add one above."
NOTHING_TO_SCALE_TEXT = "No ingredients to scale. Add ingredients and click Calculate."
MISSING_SERVINGS_TEXT = (
    "Please enter a valid original and target serving size (original must be > 0)."
)


def ingredient_label(entry: IngredientEntry) -> str:
    """Return the list label for an ingredient."""
    return f"{format_quantity(entry.quantity)} {entry.unit} {entry.name}"


def removal_prompt(entry: IngredientEntry) -> str:
    """Return the confirmation question shown before removal."""
    return f"Remove '{entry.name}' from the list?"


def render_ingredients(entries: tuple[IngredientEntry, ...]) -> list[str]:
    """Render the ingredient list, or the empty placeholder."""
    if not entries:
        return [EMPTY_LEDGER_TEXT]
    return [ingredient_label(entry) for entry in entries]


def render_scaled(result: ScaleResult, original: float, target: float) -> list[str]:
    """Render the scaled ingredient list with its header."""
    lines = [
        f"Scale factor: {format_quantity(result.factor)} "
        f"(target {_raw_number(target)} / original {_raw_number(original)})"
    ]
    if not result.entries:
        lines.append(NOTHING_TO_SCALE_TEXT)
        return lines
    for entry in result.entries:
        lines.append(
            f"{format_quantity(entry.scaled_quantity)} {entry.unit} {entry.name} "
            f"(was {format_quantity(entry.original_quantity)} {entry.unit})"
        )
    return lines


def render_summary(view: SummaryView) -> list[str]:
    """Render the summary view."""
    return [
        f"Original servings: {format_quantity(view.original)}",
        f"Target servings: {format_quantity(view.target)}",
        f"Scale factor: {format_quantity(view.factor)}",
        f"Ingredients: {view.entry_count}",
    ]


def render_error(error: ScalerError) -> str:
    """Return user-facing text for a rejected operation."""
    return str(error) or error.code


def _raw_number(value: float) -> str:
    """Print servings as entered, without rounding or a trailing ".0"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
