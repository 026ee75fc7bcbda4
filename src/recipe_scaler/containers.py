"""Dependency container wiring for the application."""

from dataclasses import dataclass

from recipe_scaler.config import Settings, parse_units
from recipe_scaler.services.ledger import IngredientLedger
from recipe_scaler.services.session import ScalerSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session: ScalerSession


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    ledger = IngredientLedger(units=parse_units(resolved_settings.units))
    session = ScalerSession(ledger=ledger, debug=resolved_settings.debug)
    return AppContainer(settings=resolved_settings, session=session)
