"""
LLM service — wraps Google Generative AI calls.

Single-shot completion: one prompt in, the model's text out. No streaming,
no conversation memory, and no retry; a failed call raises LLMError, which
the request boundary turns into a 500.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache

import google.generativeai as genai

from reservation_agent.config import settings
from reservation_agent.errors import UpstreamError

logger = logging.getLogger(__name__)


class LLMError(UpstreamError):
    """Raised when the hosted model call fails or times out."""


@lru_cache(maxsize=1)
def _get_model() -> genai.GenerativeModel:
    genai.configure(api_key=settings.google_api_key)
    return genai.GenerativeModel(settings.llm_model)


async def call_model(prompt: str) -> str:
    """
    Send ``prompt`` to the configured model and return the raw reply text.

    The blocking SDK call runs in a worker thread, bounded by
    LLM_TIMEOUT_SECONDS.
    """
    logger.debug("LLM prompt (%s):\n%s", settings.llm_model, prompt)
    try:
        response = await asyncio.wait_for(
            asyncio.to_thread(
                _get_model().generate_content,
                prompt,
                generation_config=genai.GenerationConfig(
                    temperature=0.2,
                    max_output_tokens=1000,
                ),
            ),
            timeout=settings.llm_timeout_seconds,
        )
        text = response.text.strip()
    except Exception as exc:
        logger.error("Model '%s' call failed: %s", settings.llm_model, exc)
        raise LLMError(str(exc) or type(exc).__name__) from exc

    logger.debug("LLM response:\n%s", text)
    return text


def strip_fences(text: str) -> str:
    """Remove markdown code fences (```json ... ```) from a string."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        cleaned = "\n".join(
            lines[1:-1] if lines[-1].startswith("```") else lines[1:]
        )
    return cleaned.strip()
