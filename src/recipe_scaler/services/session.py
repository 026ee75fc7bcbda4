"""Session state for a single scaling screen."""

import logging
from dataclasses import dataclass, field

from recipe_scaler.domain.ingredients import IngredientEntry
from recipe_scaler.domain.scaling import (
    DisplayMode,
    ScaleResult,
    ServingSpec,
    SummaryView,
)
from recipe_scaler.services.ledger import IngredientLedger
from recipe_scaler.services.scaling import scale, summarize, validate_servings

_logger = logging.getLogger(__name__)


@dataclass
class ScalerSession:
    """Owns the ledger, the display mode and the last valid servings."""

    ledger: IngredientLedger = field(default_factory=IngredientLedger)
    mode: DisplayMode = DisplayMode.SCALED
    servings: ServingSpec | None = None
    debug: bool = False

    def ingredients(self) -> tuple[IngredientEntry, ...]:
        """Return the current ingredient entries."""
        return self.ledger.snapshot()

    def add_ingredient(
        self, name: str | None, quantity: object, unit: str | None
    ) -> IngredientEntry:
        """Record a new ingredient."""
        entry = self.ledger.add(name, quantity, unit)
        if self.debug:
            _logger.info(
                "Ingredient added: name=%s quantity=%s unit=%s count=%s",
                entry.name,
                entry.quantity,
                entry.unit,
                self.ledger.count(),
            )
        return entry

    def preview_removal(self, index: int) -> IngredientEntry:
        """Return the entry a confirmed removal at index would drop."""
        return self.ledger.preview_removal(index)

    def remove_ingredient(
        self, index: int, *, confirmed: bool = True
    ) -> IngredientEntry | None:
        """Remove the entry at index once the user has confirmed it."""
        if not confirmed:
            self.ledger.preview_removal(index)
            return None
        removed = self.ledger.remove_at(index)
        if self.debug:
            _logger.info(
                "Ingredient removed: index=%s name=%s count=%s",
                index,
                removed.name,
                self.ledger.count(),
            )
        return removed

    def calculate(self, original: object, target: object) -> ServingSpec:
        """Validate servings, remember them and show the scaled list."""
        spec = validate_servings(original, target)
        self.servings = spec
        self.mode = DisplayMode.SCALED
        if self.debug:
            _logger.info(
                "Servings calculated: original=%s target=%s",
                spec.original,
                spec.target,
            )
        return spec

    def set_mode(self, mode: DisplayMode) -> DisplayMode:
        """Select which projection current_output produces."""
        self.mode = mode
        return self.mode

    def current_output(self) -> ScaleResult | SummaryView | None:
        """Project the last valid servings onto the ledger for the active mode."""
        if self.servings is None:
            return None
        if self.mode is DisplayMode.SUMMARY:
            return summarize(self.servings, self.ledger.count())
        return scale(self.servings, self.ledger.snapshot())
