"""
AI Logic Audit — External findings producer backed by the LLM gateway.

The audit is non-deterministic and may be slow or fail; it never raises.
Any failure yields an empty list so the local scan result always stands.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from vibeguard.config import settings
from vibeguard.llm.gateway import LLMGateway
from vibeguard.llm.prompt_builder import SYSTEM_PROMPT, build_audit_prompt
from vibeguard.llm.response_validator import validate_audit_response
from vibeguard.models.finding_models import Finding

logger = logging.getLogger("vibeguard.audit")


@runtime_checkable
class FindingsProducer(Protocol):
    """Anything that can contribute findings for a block of code."""

    async def produce_findings(self, code: str, language: str) -> list[Finding]: ...


class AIAuditor:
    """FindingsProducer that asks an LLM for logic-level issues."""

    def __init__(self, gateway: LLMGateway, max_chars: int | None = None) -> None:
        self.gateway = gateway
        self.max_chars = max_chars or settings.ai_audit_max_chars
        self.last_tokens_used = 0

    async def produce_findings(self, code: str, language: str) -> list[Finding]:
        prompt = build_audit_prompt(code, language, self.max_chars)
        try:
            response = await self.gateway.complete(prompt, system=SYSTEM_PROMPT)
        except Exception:
            logger.warning("AI audit call failed — continuing SAST-only", exc_info=True)
            return []

        self.last_tokens_used = response.get("tokens_used", 0)
        if not response.get("success"):
            logger.warning(f"AI audit failed: {response.get('error', 'unparseable response')}")
            return []

        try:
            validation = validate_audit_response(response.get("parsed"))
        except Exception:
            logger.warning(
                "AI audit response could not be normalised — continuing SAST-only", exc_info=True
            )
            return []

        logger.info(
            f"AI audit returned {len(validation.findings)} findings "
            f"({self.last_tokens_used} tokens)"
        )
        return validation.findings
