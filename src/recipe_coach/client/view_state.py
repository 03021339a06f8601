"""In-memory client state for the recipe coach UI."""

import logging
from dataclasses import dataclass, field

import httpx
from pydantic import TypeAdapter

from recipe_coach.client.api_client import RecipeCoachApi
from recipe_coach.client.storage import (
    PROFILE_KEY,
    SAVED_RECIPES_KEY,
    KeyValueStorage,
    StoredValue,
)
from recipe_coach.domain.profile import ChatMessage, Profile, Tab
from recipe_coach.domain.recipes import DEFAULT_DIET, DEFAULT_GOAL, Diet, Goal, Recipe

logger = logging.getLogger(__name__)

_RECIPE_LIST = TypeAdapter(list[Recipe])

GREETING = (
    "Hey! I'm your gentle nutrition coach 🤍 Ask me about your meal, "
    "PCOS-friendly swaps, or healthier snack ideas."
)
EMPTY_INGREDIENTS_NOTICE = "Please enter at least some ingredients."
GENERATION_FAILED_NOTICE = (
    "Error generating recipes. Please check if the backend server is running."
)
ALREADY_SAVED_NOTICE = "This recipe is already saved ⭐"
SAVED_NOTICE = "Recipe saved ⭐ Check the Saved tab."
DEFAULT_COACH_REPLY = (
    "Here's some general guidance: keep meals balanced & listen to your body. "
    "This isn't medical advice."
)
COACH_FAILED_REPLY = (
    "I had trouble replying just now. Please check your server and try again."
)


def _greeting() -> list[ChatMessage]:
    return [ChatMessage(sender="bot", text=GREETING)]


@dataclass
class ViewState:
    """State container behind the single-page client.

    Saved recipes and the profile are written to storage explicitly after
    every transition that changes them.
    """

    api: RecipeCoachApi
    saved_store: StoredValue[list[Recipe]]
    profile_store: StoredValue[Profile]
    ingredients: str = ""
    goal: Goal = DEFAULT_GOAL
    diet: Diet = DEFAULT_DIET
    recipes: list[Recipe] = field(default_factory=list)
    selected_recipe_id: int | None = None
    transcript: list[ChatMessage] = field(default_factory=_greeting)
    saved_recipes: list[Recipe] = field(default_factory=list)
    profile: Profile = field(default_factory=Profile)
    active_tab: Tab = Tab.HOME
    loading_recipes: bool = False
    coach_loading: bool = False
    notices: list[str] = field(default_factory=list)

    @classmethod
    def create(cls, api: RecipeCoachApi, storage: KeyValueStorage) -> "ViewState":
        """Build a view state whose durable records live in ``storage``."""
        return cls(
            api=api,
            saved_store=StoredValue(
                storage=storage,
                key=SAVED_RECIPES_KEY,
                adapter=_RECIPE_LIST,
                default=list,
            ),
            profile_store=StoredValue(
                storage=storage,
                key=PROFILE_KEY,
                adapter=TypeAdapter(Profile),
                default=Profile,
            ),
        )

    @property
    def selected_recipe(self) -> Recipe | None:
        """Return the currently selected recipe, if any."""
        for recipe in self.recipes:
            if recipe.id == self.selected_recipe_id:
                return recipe
        return None

    def mount(self) -> None:
        """Restore saved recipes and the profile from storage."""
        self.saved_recipes = self.saved_store.load()
        self.profile = self.profile_store.load()
        self.goal = self.profile.goal
        self.diet = self.profile.diet

    def set_tab(self, tab: Tab) -> None:
        self.active_tab = tab

    def select_recipe(self, recipe_id: int) -> None:
        self.selected_recipe_id = recipe_id

    def set_goal(self, goal: Goal) -> None:
        """Change the working goal and remember it in the profile."""
        self.update_profile(goal=goal)

    def set_diet(self, diet: Diet) -> None:
        """Change the working diet and remember it in the profile."""
        self.update_profile(diet=diet)

    def update_profile(
        self,
        *,
        diet: Diet | None = None,
        goal: Goal | None = None,
        allergies: str | None = None,
    ) -> None:
        """Apply profile edits, sync the working goal/diet and persist."""
        changes: dict[str, object] = {}
        if diet is not None:
            changes["diet"] = diet
            self.diet = diet
        if goal is not None:
            changes["goal"] = goal
            self.goal = goal
        if allergies is not None:
            changes["allergies"] = allergies
        self.profile = self.profile.model_copy(update=changes)
        self.profile_store.save(self.profile)

    async def generate_recipes(self) -> None:
        """Replace the working recipes with a fresh set from the API."""
        if not self.ingredients.strip():
            self.notices.append(EMPTY_INGREDIENTS_NOTICE)
            return

        self.loading_recipes = True
        self.recipes = []
        self.selected_recipe_id = None
        try:
            body = await self.api.generate_recipes(
                self.ingredients, self.goal.value, self.diet.value
            )
            recipes = _RECIPE_LIST.validate_python(body.get("recipes") or [])
        except (httpx.HTTPError, ValueError, AttributeError):
            logger.exception("Recipe generation request failed")
            self.notices.append(GENERATION_FAILED_NOTICE)
            return
        finally:
            self.loading_recipes = False

        self.recipes = recipes
        if recipes:
            self.selected_recipe_id = recipes[0].id

    async def send_coach_message(self, text: str) -> None:
        """Post a message to the coach and append the answer to the transcript."""
        message = text.strip()
        if not message:
            return

        self.transcript.append(ChatMessage(sender="user", text=message))
        self.coach_loading = True
        selected = self.selected_recipe
        try:
            body = await self.api.ask_coach(
                message,
                self.goal.value,
                selected.to_payload() if selected else None,
            )
        except (httpx.HTTPError, ValueError):
            logger.exception("Coach request failed")
            self.transcript.append(ChatMessage(sender="bot", text=COACH_FAILED_REPLY))
            return
        finally:
            self.coach_loading = False

        reply = body.get("reply") if isinstance(body, dict) else None
        tips = body.get("tips") if isinstance(body, dict) else None
        self.transcript.append(
            ChatMessage(
                sender="bot",
                text=reply if isinstance(reply, str) and reply else DEFAULT_COACH_REPLY,
            )
        )
        for tip in tips if isinstance(tips, list) else []:
            self.transcript.append(ChatMessage(sender="bot", text=f"💡 Tip: {tip}"))

    def save_recipe(self, recipe: Recipe | None) -> bool:
        """Add a recipe to the saved collection unless an equal one is there."""
        if recipe is None:
            return False
        if any(
            saved.title == recipe.title
            and saved.approx_time_mins == recipe.approx_time_mins
            for saved in self.saved_recipes
        ):
            self.notices.append(ALREADY_SAVED_NOTICE)
            return False
        self.saved_recipes = [*self.saved_recipes, recipe]
        self.saved_store.save(self.saved_recipes)
        self.notices.append(SAVED_NOTICE)
        return True

    def remove_saved_recipe(self, index: int) -> None:
        """Drop the saved recipe at ``index``, keeping the others in order."""
        if not 0 <= index < len(self.saved_recipes):
            return
        self.saved_recipes = [
            recipe for position, recipe in enumerate(self.saved_recipes)
            if position != index
        ]
        self.saved_store.save(self.saved_recipes)
