"""Shared test fixtures."""

import pytest

from recipe_scaler.config import Settings
from recipe_scaler.containers import AppContainer, build_container
from recipe_scaler.services.ledger import IngredientLedger


@pytest.fixture
def settings() -> Settings:
    return Settings(units="g,cup,cups,tsp,pcs", debug=True, environment="test")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def ledger() -> IngredientLedger:
    return IngredientLedger(units=("g", "cup", "cups", "tsp", "pcs"))
