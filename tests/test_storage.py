"""Tests for client-local storage."""

from pydantic import TypeAdapter

from recipe_coach.client.storage import JsonFileStorage, StoredValue
from recipe_coach.domain.profile import Profile
from recipe_coach.domain.recipes import Diet, Goal, Recipe
from recipe_coach.services.fallback import generate_fallback_recipes
from tests.conftest import InMemoryStorage


def _profile_store(storage) -> StoredValue[Profile]:
    return StoredValue(
        storage=storage, key="nutriProfile", adapter=TypeAdapter(Profile), default=Profile
    )


def _recipes_store(storage) -> StoredValue[list[Recipe]]:
    return StoredValue(
        storage=storage,
        key="savedRecipes",
        adapter=TypeAdapter(list[Recipe]),
        default=list,
    )


def test_missing_values_load_defaults() -> None:
    storage = InMemoryStorage()

    assert _profile_store(storage).load() == Profile()
    assert _recipes_store(storage).load() == []


def test_corrupt_values_load_defaults() -> None:
    storage = InMemoryStorage(
        items={"nutriProfile": "{oops", "savedRecipes": '[{"title": 3}]'}
    )

    assert _profile_store(storage).load() == Profile()
    assert _recipes_store(storage).load() == []


def test_profile_with_unknown_enum_values_uses_defaults() -> None:
    storage = InMemoryStorage(
        items={"nutriProfile": '{"diet": "keto", "goal": 7, "allergies": "nuts"}'}
    )

    profile = _profile_store(storage).load()

    assert profile.diet == Diet.VEGETARIAN
    assert profile.goal == Goal.PCOS_FRIENDLY
    assert profile.allergies == "nuts"


def test_round_trip_through_json_file(tmp_path) -> None:
    storage = JsonFileStorage(tmp_path / "client" / "storage.json")
    profile = Profile(diet=Diet.VEGAN, goal=Goal.HIGH_PROTEIN, allergies="peanuts")
    recipes = generate_fallback_recipes("tofu", "high_protein", "vegan")

    _profile_store(storage).save(profile)
    _recipes_store(storage).save(recipes)

    reopened = JsonFileStorage(tmp_path / "client" / "storage.json")
    assert _profile_store(reopened).load() == profile
    assert _recipes_store(reopened).load() == recipes
    assert '"ingredientsList"' in reopened.get_item("savedRecipes")


def test_unreadable_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("not json", encoding="utf-8")

    assert JsonFileStorage(path).get_item("savedRecipes") is None


def test_save_notifies_subscribers_until_unsubscribed() -> None:
    store = _profile_store(InMemoryStorage())
    seen: list[Profile] = []
    unsubscribe = store.subscribe(seen.append)

    store.save(Profile(allergies="milk"))
    unsubscribe()
    store.save(Profile(allergies="eggs"))

    assert [profile.allergies for profile in seen] == ["milk"]
