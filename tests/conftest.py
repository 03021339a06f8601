"""Shared test fixtures."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
import pytest

from recipe_coach.client.api_client import RecipeCoachApi
from recipe_coach.client.storage import KeyValueStorage
from recipe_coach.config import Settings
from recipe_coach.containers import AppContainer
from recipe_coach.services.coach import CoachService
from recipe_coach.services.gateway import CompletionClient
from recipe_coach.services.recipes import RecipeService

AI_RECIPES = {
    "recipes": [
        {
            "id": 1,
            "title": "Masala oats upma",
            "description": "Savory oats with vegetables.",
            "ingredientsList": ["oats", "onion", "peas"],
            "steps": ["Roast oats.", "Cook with vegetables."],
            "approxTimeMins": 20,
            "nutrition": {
                "calories": 310,
                "protein_g": 11,
                "carbs_g": 45,
                "fat_g": 7,
                "tags": ["pcos_friendly", "vegetarian"],
            },
        },
        {
            "id": 2,
            "title": "Curd cucumber raita bowl",
            "description": "Cooling curd bowl.",
            "ingredientsList": ["curd", "cucumber"],
            "steps": ["Whisk curd.", "Fold in cucumber."],
            "approxTimeMins": 10,
            "nutrition": {
                "calories": 180,
                "protein_g": 9,
                "carbs_g": 14,
                "fat_g": 6,
                "tags": ["high_fiber"],
            },
        },
    ]
}


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning fixed text and recording calls."""

    text: str = json.dumps(AI_RECIPES)
    error: Exception | None = None
    calls: list[tuple[list[dict[str, str]], float]] = field(default_factory=list)

    async def complete(
        self, messages: list[dict[str, str]], *, temperature: float
    ) -> str:
        self.calls.append((messages, temperature))
        if self.error is not None:
            raise self.error
        return self.text


@dataclass
class InMemoryStorage(KeyValueStorage):
    """In-memory key/value storage for tests."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


@dataclass
class FakeRecipeCoachApi(RecipeCoachApi):
    """Fake API client with canned bodies or a transport failure."""

    recipes_body: dict[str, object] = field(default_factory=lambda: AI_RECIPES)
    coach_body: dict[str, object] = field(
        default_factory=lambda: {"reply": "Add more fiber.", "tips": ["Eat dal."]}
    )
    error: Exception | None = None
    coach_requests: list[tuple[str, str, Mapping[str, object] | None]] = field(
        default_factory=list
    )

    async def generate_recipes(
        self, ingredients: str, goal: str, diet: str
    ) -> dict[str, object]:
        if self.error is not None:
            raise self.error
        return self.recipes_body

    async def ask_coach(
        self, message: str, goal: str, recipe: Mapping[str, object] | None
    ) -> dict[str, object]:
        self.coach_requests.append((message, goal, recipe))
        if self.error is not None:
            raise self.error
        return self.coach_body


def connection_error() -> httpx.ConnectError:
    return httpx.ConnectError("connection refused")


def make_container(
    settings: Settings, client: CompletionClient | None
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=RecipeService(client=client),
        coach_service=CoachService(client=client),
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=None)


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def offline_container(settings: Settings) -> AppContainer:
    return make_container(settings, None)


@pytest.fixture
def container(completion_client: FakeCompletionClient) -> AppContainer:
    return make_container(Settings(openai_api_key="openai-key"), completion_client)
