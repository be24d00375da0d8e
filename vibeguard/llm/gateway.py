"""
LLM Gateway — Wraps the Groq client with retry, timeout, and token tracking.

Only used by the AI logic audit, and only when a Groq API key is configured.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

from groq import Groq

from vibeguard.config import settings

logger = logging.getLogger("vibeguard.llm")


class LLMGateway:
    """
    Groq LLM client wrapper with:
    - Configurable timeout
    - Retry with exponential backoff
    - Token usage tracking
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: Any | None = None,
    ) -> None:
        self.timeout = settings.llm_timeout
        self.client = client or Groq(
            api_key=api_key or settings.groq_api_key,
            timeout=self.timeout,
        )
        self.model = model or settings.vibeguard_model
        self.max_retries = settings.llm_max_retries
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self.total_tokens_used = 0

    async def complete(self, prompt: str, system: str | None = None) -> dict[str, Any]:
        """
        Send a prompt to the LLM and return the parsed JSON response.

        Runs the synchronous Groq SDK in a thread pool to avoid blocking
        the async event loop.

        Returns:
            dict with 'content' (raw text), 'parsed' (JSON or None),
            'tokens_used' (int), 'success' (bool).
        """
        last_error: Exception | None = None

        for attempt in range(self.max_retries):
            try:
                # Run sync SDK in thread pool
                response = await asyncio.to_thread(
                    self._sync_complete, prompt, system
                )

                content = response.choices[0].message.content or ""
                tokens = getattr(response.usage, "total_tokens", 0) if response.usage else 0
                self.total_tokens_used += tokens

                # Try to parse JSON
                parsed = None
                try:
                    parsed = json.loads(content)
                except json.JSONDecodeError:
                    # Try to extract JSON from markdown fences
                    parsed = extract_json(content)

                return {
                    "content": content,
                    "parsed": parsed,
                    "tokens_used": tokens,
                    "success": parsed is not None,
                }

            except Exception as e:
                last_error = e
                logger.warning(
                    f"LLM attempt {attempt + 1}/{self.max_retries} failed: {e}"
                )
                if attempt < self.max_retries - 1:
                    # Exponential backoff: 1s, 2s, 4s
                    await asyncio.sleep(2**attempt)

        logger.error(f"LLM gateway exhausted retries. Last error: {last_error}")
        return {
            "content": "",
            "parsed": None,
            "tokens_used": 0,
            "success": False,
            "error": str(last_error),
        }

    def _sync_complete(self, prompt: str, system: str | None = None):
        """Synchronous Groq completion call."""
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        return self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    def get_tokens_used(self) -> int:
        """Get total tokens consumed across all calls."""
        return self.total_tokens_used


_FENCE_RE = re.compile(r"```(?:json)?\s*\n(.*?)\n```", re.DOTALL)


def extract_json(text: str) -> dict | list | None:
    """Try to extract a JSON object or array from markdown-fenced or chatty text."""
    match = _FENCE_RE.search(text)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass

    # First balanced [ ... ] or { ... } block, whichever opens first
    starts = [i for i in (text.find("["), text.find("{")) if i != -1]
    if not starts:
        return None
    start = min(starts)
    opener = text[start]
    closer = "]" if opener == "[" else "}"

    depth = 0
    for i in range(start, len(text)):
        if text[i] == opener:
            depth += 1
        elif text[i] == closer:
            depth -= 1
            if depth == 0:
                try:
                    return json.loads(text[start : i + 1])
                except json.JSONDecodeError:
                    break

    return None
