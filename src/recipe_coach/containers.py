"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_coach.adapters.openai_completion_client import OpenAICompletionClient
from recipe_coach.config import Settings
from recipe_coach.services.coach import CoachService
from recipe_coach.services.recipes import RecipeService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    coach_service: CoachService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Without an OpenAI key the services run in fallback-only mode.
    """
    resolved_settings = settings or Settings()
    completion_client: OpenAICompletionClient | None = None
    if resolved_settings.ai_enabled and resolved_settings.openai_api_key:
        completion_client = OpenAICompletionClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
        )
    else:
        logger.warning("No OPENAI_API_KEY found, serving fallback responses only")

    recipe_service = RecipeService(
        client=completion_client,
        temperature=resolved_settings.recipe_temperature,
    )
    coach_service = CoachService(
        client=completion_client,
        temperature=resolved_settings.coach_temperature,
    )

    async def close_resources() -> None:
        if completion_client is not None:
            await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        coach_service=coach_service,
        close_resources=close_resources,
    )
