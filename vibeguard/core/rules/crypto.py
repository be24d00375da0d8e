"""
Cryptographic Failure Rules — weak hashes, non-CSPRNG randomness, plaintext HTTP.
"""

from __future__ import annotations

import re

from vibeguard.models.rule_models import Rule, Severity

CATEGORY = "A02:2021 – Cryptographic Failures"


WEAK_HASH = Rule(
    id="WEAK_HASH",
    name="Weak Hashing Algorithm (MD5 / SHA-1)",
    severity=Severity.HIGH,
    category=CATEGORY,
    pattern=re.compile(r"\b(?:md5|sha1|sha-1)\b", re.IGNORECASE),
    description=(
        "MD5 and SHA-1 are cryptographically broken. They are vulnerable to collision attacks "
        "and should never be used for password hashing or data integrity checks."
    ),
    fix=(
        "For passwords: use bcrypt, argon2, or scrypt (e.g., Python's passlib).\n"
        "For checksums/integrity: use SHA-256 or SHA-3."
    ),
)

INSECURE_RANDOM = Rule(
    id="INSECURE_RANDOM",
    name="Insecure Random Number Generator",
    severity=Severity.MEDIUM,
    category=CATEGORY,
    pattern=re.compile(
        r"\bMath\.random\s*\(\)|\brandom\.random\s*\(\)|\brandom\.randint\b",
        re.IGNORECASE,
    ),
    description=(
        "Math.random() and Python's random module are not cryptographically secure. Using "
        "them for security-sensitive purposes (tokens, passwords, OTPs) is dangerous."
    ),
    fix=(
        "JS: use crypto.getRandomValues() or crypto.randomBytes().\n"
        "Python: use secrets.token_hex() or secrets.randbelow()."
    ),
)

# Loopback hosts are exempt
HTTP_USAGE = Rule(
    id="HTTP_USAGE",
    name="Insecure HTTP (Non-HTTPS) URL",
    severity=Severity.MEDIUM,
    category=CATEGORY,
    pattern=re.compile(
        r"http://(?!localhost|127\.0\.0\.1|0\.0\.0\.0|\[::\])[a-z]",
        re.IGNORECASE,
    ),
    description=(
        "HTTP transmits data in plaintext, exposing it to man-in-the-middle attacks. All "
        "external API calls and resources should use HTTPS."
    ),
    fix=(
        "Replace all http:// URLs with https:// for any external communications. "
        "Use HSTS in production servers."
    ),
)
