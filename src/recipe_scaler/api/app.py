"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from recipe_scaler.api.models import IngredientPayload, ModePayload, ServingsPayload
from recipe_scaler.api.ui import UI_HTML
from recipe_scaler.app_logging import configure_logging
from recipe_scaler.containers import AppContainer
from recipe_scaler.domain.errors import IndexOutOfRangeError, ScalerError
from recipe_scaler.domain.ingredients import IngredientEntry
from recipe_scaler.domain.scaling import ScaleResult, SummaryView
from recipe_scaler.services.rendering import (
    MISSING_SERVINGS_TEXT,
    ingredient_label,
    removal_prompt,
    render_error,
    render_ingredients,
    render_scaled,
    render_summary,
)
from recipe_scaler.services.scaling import format_quantity
from recipe_scaler.services.session import ScalerSession

INVALID_REQUEST_CODE = "InvalidRequest"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ScalerError)
    async def scaler_error_handler(request: Request, exc: ScalerError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.code)
        status_code = 404 if isinstance(exc, IndexOutOfRangeError) else 422
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "detail": render_error(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        detail = _describe_request_error(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
        return JSONResponse(
            status_code=422,
            content={"error": INVALID_REQUEST_CODE, "detail": detail},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/units")
    async def list_units(request: Request) -> dict[str, object]:
        """Return the configured measurement units."""
        session = _session(request)
        return {"units": list(session.ledger.units)}

    @app.get("/ingredients")
    async def list_ingredients(request: Request) -> dict[str, object]:
        """Return the ingredient list in insertion order."""
        return _serialize_ingredients(_session(request))

    @app.post("/ingredients", status_code=status.HTTP_201_CREATED)
    async def add_ingredient(
        payload: IngredientPayload, request: Request
    ) -> dict[str, object]:
        """Validate and record a new ingredient."""
        session = _session(request)
        entry = session.add_ingredient(payload.name, payload.quantity, payload.unit)
        return {
            "ingredient": _serialize_entry(session.ledger.count() - 1, entry),
            **_serialize_ingredients(session),
        }

    @app.get("/ingredients/{index}")
    async def preview_removal(index: int, request: Request) -> dict[str, object]:
        """Return the entry at index and the confirmation prompt for removing it."""
        entry = _session(request).preview_removal(index)
        return {
            "ingredient": _serialize_entry(index, entry),
            "prompt": removal_prompt(entry),
        }

    @app.delete("/ingredients/{index}")
    async def remove_ingredient(
        index: int, request: Request, confirmed: bool = False
    ) -> dict[str, object]:
        """Remove the entry at index when the removal was confirmed."""
        session = _session(request)
        removed = session.remove_ingredient(index, confirmed=confirmed)
        return {
            "removed": _serialize_entry(index, removed) if removed else None,
            **_serialize_ingredients(session),
        }

    @app.post("/calculate")
    async def calculate(
        payload: ServingsPayload, request: Request
    ) -> dict[str, object]:
        """Validate servings and return the scaled list."""
        session = _session(request)
        session.calculate(payload.original, payload.target)
        return _serialize_output(session)

    @app.put("/mode")
    async def set_mode(payload: ModePayload, request: Request) -> dict[str, object]:
        """Switch the display mode and return the matching projection."""
        session = _session(request)
        session.set_mode(payload.mode)
        return _serialize_output(session)

    @app.get("/output")
    async def output(request: Request) -> dict[str, object]:
        """Return the projection for the current mode."""
        return _serialize_output(_session(request))

    @app.get("/ui", response_class=HTMLResponse)
    async def ui() -> HTMLResponse:
        """Minimal single-screen UI that consumes the API."""
        return HTMLResponse(UI_HTML)

    return app


def _describe_request_error(exc: RequestValidationError) -> str:
    """Summarize the first payload error as "field: message"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(
        str(part)
        for part in first.get("loc", ())
        if part not in {"body", "query", "path"}
    )
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def _session(request: Request) -> ScalerSession:
    container: AppContainer = request.app.state.container
    return container.session


def _serialize_entry(index: int, entry: IngredientEntry) -> dict[str, object]:
    return {
        "index": index,
        "name": entry.name,
        "quantity": entry.quantity,
        "unit": entry.unit,
        "label": ingredient_label(entry),
    }


def _serialize_ingredients(session: ScalerSession) -> dict[str, object]:
    entries = session.ingredients()
    return {
        "ingredients": [
            _serialize_entry(index, entry) for index, entry in enumerate(entries)
        ],
        "lines": render_ingredients(entries),
    }


def _serialize_output(session: ScalerSession) -> dict[str, object]:
    """Serialize the current projection together with its rendered lines."""
    payload: dict[str, object] = {
        "mode": session.mode.value,
        "servings": None,
        "scaled": None,
        "summary": None,
    }
    spec = session.servings
    result = session.current_output()
    if spec is None or result is None:
        payload["lines"] = [MISSING_SERVINGS_TEXT]
        return payload
    payload["servings"] = {"original": spec.original, "target": spec.target}
    if isinstance(result, SummaryView):
        payload["summary"] = {
            "original": result.original,
            "target": result.target,
            "factor": result.factor,
            "entry_count": result.entry_count,
        }
        payload["lines"] = render_summary(result)
        return payload
    payload["scaled"] = _serialize_scaled(result)
    payload["lines"] = render_scaled(result, spec.original, spec.target)
    return payload


def _serialize_scaled(result: ScaleResult) -> dict[str, object]:
    return {
        "factor": result.factor,
        "entries": [
            {
                "name": entry.name,
                "unit": entry.unit,
                "original_quantity": entry.original_quantity,
                "scaled_quantity": entry.scaled_quantity,
                "display_quantity": format_quantity(entry.scaled_quantity),
            }
            for entry in result.entries
        ],
    }
