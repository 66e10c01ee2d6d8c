from __future__ import annotations

from google import genai
from google.genai import types


class GeminiProvider:
    def __init__(self, model: str, api_key: str, temperature: float | None = None):
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        self._model = model
        self._config = (
            types.GenerateContentConfig(temperature=temperature) if temperature is not None else None
        )
        self._client = genai.Client(api_key=api_key)

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=self._config,
        )
        text = response.text
        if not text:
            raise RuntimeError(f"Gemini model '{self._model}' returned an empty response.")
        return text
