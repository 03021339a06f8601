"""Client-held profile and chat transcript models."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipe_coach.domain.recipes import DEFAULT_DIET, DEFAULT_GOAL, Diet, Goal

_DIETS = frozenset(diet.value for diet in Diet)
_GOALS = frozenset(goal.value for goal in Goal)


class Tab(StrEnum):
    """Top-level screens of the client."""

    HOME = "home"
    SAVED = "saved"
    PROFILE = "profile"


class Profile(BaseModel):
    """User food preferences; unknown values fall back to the defaults."""

    diet: Diet = DEFAULT_DIET
    goal: Goal = DEFAULT_GOAL
    allergies: str = ""

    @field_validator("diet", mode="before")
    @classmethod
    def _coerce_diet(cls, value: object) -> object:
        return value if isinstance(value, str) and value in _DIETS else DEFAULT_DIET

    @field_validator("goal", mode="before")
    @classmethod
    def _coerce_goal(cls, value: object) -> object:
        return value if isinstance(value, str) and value in _GOALS else DEFAULT_GOAL

    @field_validator("allergies", mode="before")
    @classmethod
    def _coerce_allergies(cls, value: object) -> object:
        return value if isinstance(value, str) else ""


class ChatMessage(BaseModel):
    """Single line of the coach transcript."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sender: Literal["user", "bot"] = Field(alias="from")
    text: str
