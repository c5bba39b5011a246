# ai.py
"""
AI-assisted fallback.

Sends the raw workflow to the OpenAI chat completions API and returns whatever
text comes back. Nothing here goes through the loader/normalizer, and the
output carries no structural guarantees.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .languages import Language

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 1200
DEFAULT_TEMPERATURE = 0.3

SYSTEM_PROMPT = (
    "You are a CI-to-Dagger translator. Input is YAML for GitHub Actions.\n"
    "Output code using the Dagger SDK in the requested language that does the same "
    "high-level work (checkout, build, test, push image, etc.). Keep it ≤40 lines."
)


class AIConversionError(Exception):
    """Raised when the AI fallback cannot produce a translation."""
    pass


def build_messages(yaml_str: str, language: Language) -> list[dict[str, str]]:
    user_prompt = f"Convert this GitHub Actions YAML to Dagger ({language.value}):\n\n{yaml_str}"
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def _make_client(api_key: str) -> Any:
    from openai import OpenAI

    return OpenAI(api_key=api_key, max_retries=2)


def convert_with_openai(
    yaml_str: str,
    language: Union[Language, str, None],
    api_key: Optional[str],
    *,
    model: str = DEFAULT_MODEL,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
    client: Any = None,
) -> str:
    """
    Translate a workflow with an LLM.

    Args:
        yaml_str: raw workflow YAML (sent as-is)
        language: target SDK
        api_key: OpenAI API key; ignored when `client` is given
        client: optional pre-built OpenAI client

    Returns:
        The model's reply, or "" if it returned no content.

    Raises:
        AIConversionError: no API key, or the request failed
    """
    target = Language.parse(language)

    if client is None:
        if not api_key:
            raise AIConversionError("OpenAI API key is not configured (set OPENAI_API_KEY).")
        client = _make_client(api_key)

    logger.debug("AI conversion: model=%s language=%s chars=%d", model, target.value, len(yaml_str))

    try:
        resp = client.chat.completions.create(
            model=model,
            messages=build_messages(yaml_str, target),
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except Exception as e:
        logger.warning("AI conversion failed: %s", e)
        raise AIConversionError(f"AI conversion failed: {e}") from e

    if not resp.choices:
        return ""
    return resp.choices[0].message.content or ""
