from typing import Protocol


class TextModel(Protocol):
    async def generate(self, prompt: str) -> str: ...
