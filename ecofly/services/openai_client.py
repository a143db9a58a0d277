"""Thin OpenAI client wrapper for eco-plan text generation."""

from __future__ import annotations

import logging
from typing import Any

from openai import APIError, APITimeoutError, AsyncOpenAI, RateLimitError

from ecofly.config import settings

logger = logging.getLogger("ecofly.openai")

_client: AsyncOpenAI | None = None


def get_client() -> AsyncOpenAI:
    """Return a singleton AsyncOpenAI client configured from settings."""

    global _client
    if _client is None:
        if not settings.openai_api_key:
            raise RuntimeError("OpenAI API key not configured")
        _client = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout)
        logger.info("Initialized OpenAI client for model %s", settings.openai_model)
    return _client


async def generate_text(prompt: str, *, system_message: str | None = None) -> str:
    """Send a prompt to OpenAI and return the text response."""

    messages: list[dict[str, Any]] = []
    if system_message:
        messages.append({"role": "system", "content": system_message})
    messages.append({"role": "user", "content": prompt})

    try:
        client = get_client()
        response = await client.chat.completions.create(
            model=settings.openai_model,
            messages=messages,
            temperature=0.7,
            max_tokens=500,
        )
        choice = response.choices[0].message
        return choice.content or ""
    except (APITimeoutError, RateLimitError, APIError) as exc:
        logger.error("OpenAI API error: %s", exc)
        raise RuntimeError("AI service temporarily unavailable") from exc
    except RuntimeError:
        raise
    except Exception as exc:  # pragma: no cover - safeguard
        logger.exception("Unexpected OpenAI failure")
        raise RuntimeError("AI service unavailable") from exc


__all__ = ["generate_text", "get_client"]
