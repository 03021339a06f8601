"""ASGI entrypoint for the recipe coach API."""

from recipe_coach.api.app import create_app
from recipe_coach.containers import build_container

app = create_app(build_container())
