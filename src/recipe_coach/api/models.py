"""Request and response bodies for the HTTP API."""

from pydantic import BaseModel, ConfigDict, field_validator

from recipe_coach.domain.recipes import DEFAULT_DIET, DEFAULT_GOAL, Recipe


class RecipeRequest(BaseModel):
    """Body of ``POST /api/recipes/generate``."""

    model_config = ConfigDict(extra="ignore")

    ingredients: str = ""
    goal: str = DEFAULT_GOAL.value
    diet: str = DEFAULT_DIET.value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients_or_empty(cls, value: object) -> object:
        return value if isinstance(value, str) else ""

    @field_validator("goal", mode="before")
    @classmethod
    def _goal_or_default(cls, value: object) -> object:
        return value if isinstance(value, str) else DEFAULT_GOAL.value

    @field_validator("diet", mode="before")
    @classmethod
    def _diet_or_default(cls, value: object) -> object:
        return value if isinstance(value, str) else DEFAULT_DIET.value


class CoachRequest(BaseModel):
    """Body of ``POST /api/coach``.

    ``recipe`` is whatever the client currently has selected; it may come
    straight from AI output, so it is kept as a loose mapping.
    """

    model_config = ConfigDict(extra="ignore")

    message: str | None = None
    goal: str = DEFAULT_GOAL.value
    recipe: dict[str, object] | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _message_text_only(cls, value: object) -> object:
        return value if isinstance(value, str) else None

    @field_validator("recipe", mode="before")
    @classmethod
    def _recipe_mapping_only(cls, value: object) -> object:
        return value if isinstance(value, dict) else None

    @field_validator("goal", mode="before")
    @classmethod
    def _goal_or_default(cls, value: object) -> object:
        return value if isinstance(value, str) else DEFAULT_GOAL.value


class RecipesResponse(BaseModel):
    """Recipe suggestions returned to the client."""

    recipes: list[Recipe]


class ErrorResponse(BaseModel):
    """User-facing validation error."""

    message: str
