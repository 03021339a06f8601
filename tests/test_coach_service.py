"""Tests for coach reply orchestration."""

import asyncio
import json

from recipe_coach.services.coach import CoachService
from recipe_coach.services.fallback import (
    DEGRADED_REPLY,
    RULE_BASED_REPLY,
    UNPARSED_DEFAULT_REPLY,
    UNPARSED_TIPS,
)
from tests.conftest import FakeCompletionClient


def test_without_client_returns_rule_based_reply() -> None:
    service = CoachService(client=None)

    result = asyncio.run(service.reply("any snack ideas?", "pcos_friendly"))

    assert result.reply == RULE_BASED_REPLY
    assert len(result.tips) == 2


def test_returns_parsed_reply_and_tips() -> None:
    client = FakeCompletionClient(
        text=json.dumps({"reply": "Try roasted chana.", "tips": ["Hydrate.", 3]})
    )
    service = CoachService(client=client, temperature=0.7)

    result = asyncio.run(
        service.reply(
            "snacks?",
            "weight_loss",
            {"title": "Upma", "ingredientsList": ["oats", "peas"]},
        )
    )

    assert result.reply == "Try roasted chana."
    assert result.tips == ["Hydrate."]
    messages, temperature = client.calls[0]
    assert temperature == 0.7
    assert "Title: Upma. Ingredients: oats, peas." in messages[1]["content"]


def test_non_list_tips_become_empty() -> None:
    client = FakeCompletionClient(text=json.dumps({"reply": "Eat greens.", "tips": "x"}))
    service = CoachService(client=client)

    result = asyncio.run(service.reply("hi", "balanced"))

    assert result.reply == "Eat greens."
    assert result.tips == []


def test_call_failure_returns_degraded_reply() -> None:
    client = FakeCompletionClient(error=TimeoutError("slow upstream"))
    service = CoachService(client=client)

    result = asyncio.run(service.reply("hi", "balanced"))

    assert result.reply == DEGRADED_REPLY
    assert len(result.tips) == 2


def test_unparseable_text_is_returned_as_reply() -> None:
    service = CoachService(client=FakeCompletionClient(text="Eat more dal."))

    result = asyncio.run(service.reply("hi", "balanced"))

    assert result.reply == "Eat more dal."
    assert result.tips == list(UNPARSED_TIPS)


def test_missing_reply_field_with_empty_text_uses_default() -> None:
    service = CoachService(client=FakeCompletionClient(text=""))

    result = asyncio.run(service.reply("hi", "balanced"))

    assert result.reply == UNPARSED_DEFAULT_REPLY


def test_reply_of_wrong_type_returns_raw_text() -> None:
    raw = json.dumps({"reply": 42, "tips": []})
    service = CoachService(client=FakeCompletionClient(text=raw))

    result = asyncio.run(service.reply("hi", "balanced"))

    assert result.reply == raw
