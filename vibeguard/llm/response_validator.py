"""
Response Validator — Normalises AI audit output into findings.

Accepts:
- a JSON array of findings
- an object wrapping that array under any key (e.g. {"findings": [...]})

Entries failing schema validation are dropped individually; the rest are
kept. Lines the model cannot vouch for become the sentinel 1.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from vibeguard.models.finding_models import Finding
from vibeguard.models.llm_models import AIAuditEntry

logger = logging.getLogger("vibeguard.llm.validator")


class ValidationResult:
    """Result of response validation."""

    def __init__(self) -> None:
        self.valid = True
        self.errors: list[str] = []
        self.findings: list[Finding] = []

    def add_error(self, error: str) -> None:
        self.valid = False
        self.errors.append(error)


def unwrap_entries(parsed: Any) -> list[Any] | None:
    """The findings array, whether bare or wrapped in an object."""
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        for value in parsed.values():
            if isinstance(value, list):
                return value
        return []
    return None


def validate_audit_response(parsed: Any) -> ValidationResult:
    """
    Validate parsed LLM output and convert it to findings.

    Args:
        parsed: JSON value parsed from the model's reply (or None)

    Returns:
        ValidationResult with .valid, .errors and .findings
    """
    result = ValidationResult()

    entries = unwrap_entries(parsed)
    if entries is None:
        result.add_error("LLM returned non-JSON or empty response")
        return result

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            result.add_error(f"Entry {index} is not an object")
            continue
        try:
            result.findings.append(AIAuditEntry(**entry).to_finding())
        except ValidationError as e:
            result.add_error(f"Entry {index} failed schema validation: {e}")
        except (TypeError, ValueError, OverflowError) as e:
            result.add_error(f"Entry {index} could not be normalised: {e}")

    if result.errors:
        logger.warning(
            f"AI audit response had {len(result.errors)} rejected entries; "
            f"kept {len(result.findings)}: {result.errors}"
        )

    return result
