from __future__ import annotations

import json
from typing import Any, Sequence

from hni_panel.llm.client import LLMReply


class SequenceIndexChooser:
    """Returns the given indices in order, wrapping each into range."""

    def __init__(self, indices: Sequence[int]):
        self.indices = list(indices)
        self.calls: list[int] = []

    def choose(self, n: int) -> int:
        position = len(self.calls) % len(self.indices)
        self.calls.append(n)
        return self.indices[position] % n


class FakeLLMClient:
    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content if content is not None else json.dumps({"response": "A fine reply."})
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(
        self,
        model: str,
        system_prompt: str,
        prompt: str,
        temperature: float | None = 0.7,
    ) -> LLMReply:
        self.calls.append(
            {
                "model": model,
                "system_prompt": system_prompt,
                "prompt": prompt,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return LLMReply(content=self.content, tokens=10, cost_usd=0.001)
