"""HTTP client for the recipe coach API."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_BASE_URL = "http://localhost:5000"


class RecipeCoachApi(Protocol):
    """Interface for the two AI-backed endpoints."""

    async def generate_recipes(
        self, ingredients: str, goal: str, diet: str
    ) -> dict[str, object]:
        """Request recipe suggestions and return the JSON body."""

    async def ask_coach(
        self, message: str, goal: str, recipe: Mapping[str, object] | None
    ) -> dict[str, object]:
        """Send a coach message and return the JSON body."""


def join_url(base: str, path: str) -> str:
    """Join a base URL and a path with exactly one slash between them."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


@dataclass
class HttpxRecipeCoachApi:
    """Recipe coach API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str = DEFAULT_BASE_URL) -> "HttpxRecipeCoachApi":
        """Create an API client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def generate_recipes(
        self, ingredients: str, goal: str, diet: str
    ) -> dict[str, object]:
        """Call ``POST /api/recipes/generate``."""
        url = join_url(self.base_url, "/api/recipes/generate")
        payload = {"ingredients": ingredients, "goal": goal, "diet": diet}
        response = await self.http_client.post(url, json=payload, timeout=60)
        response.raise_for_status()
        return response.json()

    async def ask_coach(
        self, message: str, goal: str, recipe: Mapping[str, object] | None
    ) -> dict[str, object]:
        """Call ``POST /api/coach``."""
        url = join_url(self.base_url, "/api/coach")
        payload: dict[str, object] = {
            "message": message,
            "goal": goal,
            "recipe": dict(recipe) if recipe is not None else None,
        }
        response = await self.http_client.post(url, json=payload, timeout=60)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
