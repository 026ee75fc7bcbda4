"""ASGI entrypoint for the recipe scaler API."""

from recipe_scaler.api.app import create_app
from recipe_scaler.containers import build_container

app = create_app(build_container())
