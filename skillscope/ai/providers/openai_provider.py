from __future__ import annotations

from typing import Optional

from openai import AsyncOpenAI


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        max_retries: int = 2,
        temperature: float = 0.2,
    ):
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is missing")
        self._model = model
        self._temperature = temperature
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self._temperature,
        )
        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise RuntimeError(f"OpenAI model '{self._model}' returned an empty response.")
        return content

    async def aclose(self) -> None:
        await self._client.close()
