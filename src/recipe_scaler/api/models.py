"""Pydantic models for API request payloads."""

from typing import Any

from pydantic import BaseModel

from recipe_scaler.domain.scaling import DisplayMode


class IngredientPayload(BaseModel):
    """Raw ingredient form values, validated by the ledger."""

    name: str | None = None
    quantity: Any = None
    unit: str | None = None


class ServingsPayload(BaseModel):
    """Raw serving form values, validated by the scaling engine."""

    original: Any = None
    target: Any = None


class ModePayload(BaseModel):
    """Display mode selection."""

    mode: DisplayMode
