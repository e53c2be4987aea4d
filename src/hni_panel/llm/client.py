from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

# Reasoning models reject an explicit temperature.
_NO_TEMPERATURE_PREFIXES = ("o1", "o3", "gpt-5")


@dataclass(slots=True)
class LLMReply:
    content: str
    tokens: int = 0
    cost_usd: float | None = None


class LLMClient(Protocol):
    async def complete(
        self,
        model: str,
        system_prompt: str,
        prompt: str,
        temperature: float | None = 0.7,
    ) -> LLMReply: ...


class LiteLLMClient:
    """Chat completion client backed by litellm."""

    @retry(
        retry=retry_if_exception_type((ConnectionError, TimeoutError, OSError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def complete(
        self,
        model: str,
        system_prompt: str,
        prompt: str,
        temperature: float | None = 0.7,
    ) -> LLMReply:
        try:
            from litellm import acompletion, completion_cost  # pragma: no cover
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "litellm is not installed. Install hni-panel[llm] or pass an llm_client."
            ) from exc

        request: dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        if _should_send_temperature(model, temperature):
            request["temperature"] = temperature

        response = await acompletion(**request)
        usage = getattr(response, "usage", None)

        cost_usd: float | None = None
        try:
            cost_usd = float(completion_cost(completion_response=response))
        except Exception:
            logger.debug("No cost information for model %s", model)

        return LLMReply(
            content=response.choices[0].message.content or "",
            tokens=int(getattr(usage, "total_tokens", 0) or 0),
            cost_usd=cost_usd,
        )


def _should_send_temperature(model: str, temperature: float | None) -> bool:
    if temperature is None:
        return False
    if model.lower().startswith(_NO_TEMPERATURE_PREFIXES):
        logger.debug("Model %s does not take a temperature; dropping %.2f", model, temperature)
        return False
    return True
