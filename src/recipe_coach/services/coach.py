"""Nutrition coach replies with AI and rule-based fallback."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from recipe_coach.domain.recipes import CoachReply
from recipe_coach.services.fallback import (
    degraded_coach_reply,
    rule_based_coach_reply,
    unparsed_coach_reply,
)
from recipe_coach.services.gateway import (
    CompletionClient,
    chat_messages,
    parse_json_or_default,
)
from recipe_coach.services.prompts import (
    COACH_SYSTEM_PROMPT,
    build_coach_prompt,
    summarize_recipe,
)

logger = logging.getLogger(__name__)


@dataclass
class CoachService:
    """Answers follow-up questions, never surfacing upstream errors."""

    client: CompletionClient | None
    temperature: float = 0.7

    async def reply(
        self,
        message: str,
        goal: str,
        recipe: Mapping[str, object] | None = None,
    ) -> CoachReply:
        """Return a coach reply for a non-blank user message."""
        recipe_summary = summarize_recipe(recipe)
        if self.client is None:
            logger.info("No AI credential configured, using rule-based coach")
            return rule_based_coach_reply()

        prompt = build_coach_prompt(message, goal, recipe_summary)
        try:
            text = await self.client.complete(
                chat_messages(COACH_SYSTEM_PROMPT, prompt),
                temperature=self.temperature,
            )
        except Exception:
            logger.exception("Coach call failed, using degraded reply")
            return degraded_coach_reply()

        data = parse_json_or_default(text, None)
        if not isinstance(data, dict) or not isinstance(data.get("reply"), str):
            logger.warning("Coach JSON invalid, falling back to raw text")
            return unparsed_coach_reply(text)

        tips = data.get("tips")
        if not isinstance(tips, list):
            tips = []
        return CoachReply(
            reply=data["reply"], tips=[tip for tip in tips if isinstance(tip, str)]
        )
