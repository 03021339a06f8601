"""OpenAI Chat Completions client for JSON-mode prompts."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from recipe_coach.services.gateway import CompletionClient, extract_text


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAICompletionClient":
        """Create an OpenAI completion client."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0), model=model)

    async def complete(
        self, messages: list[dict[str, str]], *, temperature: float
    ) -> str:
        """Request a JSON object response and return its text."""
        completion = await self.client.chat.completions.create(
            model=self.model,
            temperature=temperature,
            response_format={"type": "json_object"},
            messages=messages,
        )
        return extract_text(completion)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
