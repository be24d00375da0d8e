"""
Code Hygiene Rules — debug flags, stray debug logging, silent failures, open TODOs.

CONSOLE_LOG and TODO_FIXME are repeatable: each distinct line is worth
listing, up to the rule's cap.
"""

from __future__ import annotations

import re

from vibeguard.core.languages import PYTHON
from vibeguard.models.rule_models import OccurrencePolicy, Rule, Severity, excluding, only

LOGGING_CATEGORY = "A09:2021 – Security Logging and Monitoring Failures"


DEBUG_MODE = Rule(
    id="DEBUG_MODE",
    name="Debug Mode Enabled in Production",
    severity=Severity.HIGH,
    category="A05:2021 – Security Misconfiguration",
    pattern=re.compile(
        r"\bDEBUG\s*=\s*True\b|\bapp\.run\s*\([^)]*debug\s*=\s*True",
        re.IGNORECASE,
    ),
    description=(
        "Debug mode exposes detailed stack traces, environment variables, and an interactive "
        "debugger to anyone who triggers an error, leaking sensitive server internals."
    ),
    fix=(
        'Set DEBUG = os.environ.get("DEBUG", False) and ensure it is False in production. '
        "Use a proper logging framework instead."
    ),
    applicability=only(PYTHON),
)

CONSOLE_LOG = Rule(
    id="CONSOLE_LOG",
    name="console.log() Left in Production Code",
    severity=Severity.LOW,
    category=LOGGING_CATEGORY,
    pattern=re.compile(r"\bconsole\.log\s*\(", re.IGNORECASE),
    description=(
        "Debug log statements can leak sensitive data (tokens, user info, PII) to browser "
        "devtools and server logs that may be accessible to attackers."
    ),
    fix=(
        "Remove console.log statements before deployment. Use a logging library (Winston, "
        "Pino) with configurable log levels. Set level to 'error' in production."
    ),
    applicability=excluding(PYTHON),
    occurrence=OccurrencePolicy.REPEATABLE,
)

BROAD_EXCEPT = Rule(
    id="BROAD_EXCEPT",
    name="Broad Exception Catch (Silent Failure)",
    severity=Severity.LOW,
    category=LOGGING_CATEGORY,
    pattern=re.compile(
        r"\bexcept\s*:\s*\n\s*pass|\bcatch\s*\(\s*(?:e|err|error|ex)\s*\)\s*\{\s*\}",
        re.IGNORECASE,
    ),
    description=(
        "Catching all exceptions and doing nothing silently swallows errors, making debugging "
        "impossible and potentially hiding serious security failures."
    ),
    fix=(
        "Catch specific exceptions. Always log the error with context: "
        'except ValueError as e: logger.error("Validation failed: %s", e).'
    ),
)

TODO_FIXME = Rule(
    id="TODO_FIXME",
    name="TODO / FIXME / HACK Comment",
    severity=Severity.INFO,
    category="A04:2021 – Insecure Design",
    pattern=re.compile(r"\b(?:TODO|FIXME|HACK|XXX|BUG)\b", re.IGNORECASE),
    description=(
        "Unresolved TODO/FIXME comments indicate incomplete or potentially insecure code "
        "that hasn't been fully reviewed or implemented."
    ),
    fix=(
        "Review each TODO/FIXME before deployment. Track them in your issue tracker instead "
        "of inline comments."
    ),
    occurrence=OccurrencePolicy.REPEATABLE,
)
