"""
Hardcoded Secret Rules — Credentials and API tokens embedded in source.

Presence checks: one finding is enough to make the point.
"""

from __future__ import annotations

import re

from vibeguard.models.rule_models import Rule, Severity

CATEGORY = "A02:2021 – Cryptographic Failures"


HARDCODED_PASSWORD = Rule(
    id="HARDCODED_PASSWORD",
    name="Hardcoded Password",
    severity=Severity.CRITICAL,
    category=CATEGORY,
    pattern=re.compile(
        r"""(?:password|passwd|pwd|secret)\s*[:=]\s*["'][^"']{1,100}["']""",
        re.IGNORECASE,
    ),
    description=(
        "A hardcoded password was detected. Credentials embedded in source code are "
        "exposed to anyone with repository access and cannot be rotated without a code change."
    ),
    fix=(
        "Move credentials to environment variables (process.env.PASSWORD or "
        "os.environ['PASSWORD']) and use a secrets manager (e.g., AWS Secrets Manager, "
        "HashiCorp Vault) in production."
    ),
)

HARDCODED_API_KEY = Rule(
    id="HARDCODED_API_KEY",
    name="Hardcoded API Key / Token",
    severity=Severity.CRITICAL,
    category=CATEGORY,
    pattern=re.compile(
        r"""(?:api_key|apikey|api_secret|access_token|auth_token|bearer)\s*[:=]\s*["'][^"']{6,}["']""",
        re.IGNORECASE,
    ),
    description=(
        "An API key or token is hardcoded in the source. This allows automated "
        "secret-scanning tools and anyone reading the repo to use your credentials."
    ),
    fix=(
        "Load keys via environment variables: const apiKey = process.env.API_KEY. "
        "Add .env to .gitignore and use dotenv or python-dotenv."
    ),
)
