"""Recipe generation with AI and canned fallback."""

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from recipe_coach.domain.recipes import Recipe
from recipe_coach.services.fallback import generate_fallback_recipes
from recipe_coach.services.gateway import (
    CompletionClient,
    chat_messages,
    parse_json_or_default,
)
from recipe_coach.services.prompts import RECIPE_SYSTEM_PROMPT, build_recipe_prompt

logger = logging.getLogger(__name__)

_RECIPE_LIST = TypeAdapter(list[Recipe])


@dataclass
class RecipeService:
    """Generates recipe suggestions, always returning a usable list."""

    client: CompletionClient | None
    temperature: float = 0.8

    async def generate(
        self, ingredients: str | None, goal: str, diet: str
    ) -> list[Recipe]:
        """Return AI recipes, or the fallback pair when the AI path is unusable."""
        if self.client is None:
            logger.info("No AI credential configured, using fallback recipes")
            return generate_fallback_recipes(ingredients, goal, diet)

        prompt = build_recipe_prompt(ingredients, goal, diet)
        try:
            text = await self.client.complete(
                chat_messages(RECIPE_SYSTEM_PROMPT, prompt),
                temperature=self.temperature,
            )
        except Exception:
            logger.exception("Recipe generation call failed, using fallback")
            return generate_fallback_recipes(ingredients, goal, diet)

        recipes = _validate_recipes(parse_json_or_default(text, None))
        if recipes is None:
            logger.warning(
                "AI recipes missing or invalid, using fallback. Raw text: %r", text
            )
            return generate_fallback_recipes(ingredients, goal, diet)
        return recipes


def _validate_recipes(data: object) -> list[Recipe] | None:
    """Return validated recipes from parsed AI output, or None when unusable."""
    if not isinstance(data, dict):
        return None
    raw_recipes = data.get("recipes")
    if not isinstance(raw_recipes, list) or not raw_recipes:
        return None
    try:
        recipes = _RECIPE_LIST.validate_python(raw_recipes)
    except ValidationError as exc:
        logger.warning("AI recipes failed validation: %s", exc)
        return None
    ids = [recipe.id for recipe in recipes]
    if len(set(ids)) != len(ids):
        logger.warning("AI recipes have duplicate ids: %s", ids)
        return None
    return recipes
