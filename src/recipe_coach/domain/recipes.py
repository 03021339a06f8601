"""Models for recipes, nutrition and coach replies."""

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class Goal(StrEnum):
    """Dietary objective chosen by the user."""

    PCOS_FRIENDLY = "pcos_friendly"
    WEIGHT_LOSS = "weight_loss"
    HIGH_PROTEIN = "high_protein"
    BALANCED = "balanced"


class Diet(StrEnum):
    """Food restriction category chosen by the user."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    NON_VEG = "non_veg"


DEFAULT_GOAL = Goal.PCOS_FRIENDLY
DEFAULT_DIET = Diet.VEGETARIAN

# Whole numbers stay integers on the wire.
Amount = Annotated[int, Field(ge=0)] | Annotated[float, Field(ge=0)]


class Nutrition(BaseModel):
    """Approximate nutrition per serving."""

    calories: Amount
    protein_g: Amount
    carbs_g: Amount
    fat_g: Amount
    tags: list[str] = Field(default_factory=list)


class Recipe(BaseModel):
    """A single recipe suggestion.

    Field names follow the JSON contract shared with the browser client, so
    ``ingredientsList`` and ``approxTimeMins`` are exposed as aliases.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(ge=1)
    title: str
    description: str
    ingredients_list: list[str] = Field(alias="ingredientsList")
    steps: list[str]
    approx_time_mins: int = Field(alias="approxTimeMins", ge=1)
    nutrition: Nutrition

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready wire representation."""
        return self.model_dump(mode="json", by_alias=True)


class CoachReply(BaseModel):
    """Coach answer with optional short tips."""

    reply: str
    tips: list[str] = Field(default_factory=list)
