"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from recipe_coach.api.models import (
    CoachRequest,
    ErrorResponse,
    RecipeRequest,
    RecipesResponse,
)
from recipe_coach.app_logging import configure_logging
from recipe_coach.config import parse_allowed_origins
from recipe_coach.containers import AppContainer
from recipe_coach.domain.recipes import CoachReply

LIVENESS_TEXT = "AI Recipe & Nutrition Coach backend (with AI + fallback) is running"
MESSAGE_REQUIRED = "Message is required."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info("AI credential configured: %s", container.settings.ai_enabled)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Recipe & Nutrition Coach", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def liveness() -> str:
        """Plain-text liveness message."""
        return LIVENESS_TEXT

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/recipes/generate", response_model=RecipesResponse)
    async def generate_recipes(
        request: Request, body: RecipeRequest | None = None
    ) -> RecipesResponse:
        """Suggest recipes; degrades to canned recipes instead of failing."""
        body = body or RecipeRequest()
        state_container: AppContainer = request.app.state.container
        recipes = await state_container.recipe_service.generate(
            ingredients=body.ingredients, goal=body.goal, diet=body.diet
        )
        return RecipesResponse(recipes=recipes)

    @app.post(
        "/api/coach",
        response_model=CoachReply,
        responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    )
    async def coach(
        request: Request, body: CoachRequest | None = None
    ) -> CoachReply | JSONResponse:
        """Answer a coaching question about the selected recipe."""
        body = body or CoachRequest()
        if not body.message or not body.message.strip():
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"message": MESSAGE_REQUIRED},
            )
        state_container: AppContainer = request.app.state.container
        return await state_container.coach_service.reply(
            message=body.message, goal=body.goal, recipe=body.recipe
        )

    return app
