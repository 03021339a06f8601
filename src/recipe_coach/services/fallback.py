"""Canned recipes and coach replies used when the AI path is unavailable."""

from recipe_coach.domain.recipes import CoachReply, Nutrition, Recipe

DEFAULT_INGREDIENTS = "oats, curd, cucumber"

_GOAL_LABELS = {
    "pcos_friendly": "PCOS-friendly",
    "weight_loss": "light & weight-friendly",
    "high_protein": "high-protein",
}
_DIET_LABELS = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
}

RULE_BASED_REPLY = (
    "I can give only simple, general guidance right now. Try to keep your meals "
    "balanced with some protein, fiber, and healthy fats. This is not medical advice."
)
RULE_BASED_TIPS = (
    "Stay hydrated through the day.",
    "Include at least one protein source in each main meal.",
)

DEGRADED_REPLY = (
    "I had some trouble connecting to the AI right now, so here is general "
    "guidance: try to keep your plate balanced with protein, vegetables, and "
    "moderate carbs. This is general information, not medical advice."
)
DEGRADED_TIPS = (
    "Avoid skipping meals frequently.",
    "Try to add vegetables to common dishes like upma, dosa sides or rice bowls.",
)

UNPARSED_DEFAULT_REPLY = (
    "Here's some general nutrition guidance: try to keep meals balanced with "
    "protein, fiber and healthy fats. This is not medical advice."
)
UNPARSED_TIPS = (
    "Stay hydrated through the day.",
    "Include at least one protein source in every main meal.",
)


def goal_label(goal: str | None) -> str:
    """Return the human label for a goal; unknown goals read as balanced."""
    return _GOAL_LABELS.get(goal or "", "balanced")


def diet_label(diet: str | None) -> str:
    """Return the human label for a diet; unknown diets read as non-vegetarian."""
    return _DIET_LABELS.get(diet or "", "non-vegetarian")


def generate_fallback_recipes(
    ingredients: str | None, goal: str | None, diet: str | None
) -> list[Recipe]:
    """Build two deterministic recipes without any network call."""
    base_ingredients = (ingredients or "").strip() or DEFAULT_INGREDIENTS
    goal_text = goal_label(goal)
    diet_text = diet_label(diet)
    tags_base = [goal_text.lower(), diet_text, "home-style"]

    if goal == "weight_loss":
        bowl_calories, pan_calories = 260, 240
    elif goal == "high_protein":
        bowl_calories, pan_calories = 340, 280
    else:
        bowl_calories, pan_calories = 300, 280

    bowl = Recipe(
        id=1,
        title=f"{goal_text} {diet_text} bowl",
        description=(
            f"A quick {goal_text.lower()} {diet_text} bowl using {base_ingredients}."
        ),
        ingredients_list=[
            "Rolled oats - 1/2 cup",
            "Curd / yoghurt - 1/2 cup",
            "Cucumber - 1/4 cup (chopped)",
            "Roasted peanuts / chana - 2 tbsp",
            "Salt, pepper, spices as per taste",
        ],
        steps=[
            "Soak oats in warm water or milk for 5-10 minutes.",
            "Mix curd, cucumber and spices in a bowl.",
            "Add soaked oats, roasted peanuts and mix well.",
            "Chill for a few minutes and serve.",
        ],
        approx_time_mins=15,
        nutrition=Nutrition(
            calories=bowl_calories,
            protein_g=18 if goal == "high_protein" else 12,
            carbs_g=38,
            fat_g=8,
            tags=[*tags_base, "high_fiber", "simple"],
        ),
    )
    one_pan = Recipe(
        id=2,
        title=f"{goal_text} one-pan meal",
        description=(
            f"Comfortable one-pan {diet_text} meal with {base_ingredients}, "
            "easy for busy days."
        ),
        ingredients_list=[
            "Any mixed veggies - 1 cup",
            "Protein of choice (paneer / egg / tofu) - 1/2 cup",
            "Minimal oil - 1 tsp",
            "Spices & herbs",
        ],
        steps=[
            "Heat a pan with minimal oil.",
            "Saute chopped veggies until slightly soft.",
            "Add protein and cook till done.",
            "Season with salt, pepper and herbs.",
            "Serve with salad or a small portion of rice/millet.",
        ],
        approx_time_mins=20,
        nutrition=Nutrition(
            calories=pan_calories,
            protein_g=20,
            carbs_g=22,
            fat_g=8,
            tags=[*tags_base, "quick", "one_pan", "weekday"],
        ),
    )
    return [bowl, one_pan]


def rule_based_coach_reply() -> CoachReply:
    """Reply used when no AI credential is configured."""
    return CoachReply(reply=RULE_BASED_REPLY, tips=list(RULE_BASED_TIPS))


def degraded_coach_reply() -> CoachReply:
    """Reply used when the AI call itself fails."""
    return CoachReply(reply=DEGRADED_REPLY, tips=list(DEGRADED_TIPS))


def unparsed_coach_reply(raw_text: str) -> CoachReply:
    """Reply built from AI text that did not carry a usable ``reply`` field."""
    return CoachReply(
        reply=raw_text or UNPARSED_DEFAULT_REPLY, tips=list(UNPARSED_TIPS)
    )
