"""
Dynamic Code Execution Rules — eval(), exec() and pickle deserialization.

eval() exists in both ecosystems; exec() and pickle are Python constructs and
are scoped to Python so a JS method named ``exec`` never trips them.
"""

from __future__ import annotations

import re

from vibeguard.core.languages import PYTHON
from vibeguard.models.rule_models import Rule, Severity, only


PICKLE_DESERIALIZATION = Rule(
    id="PICKLE_DESERIALIZATION",
    name="Insecure Pickle Deserialization",
    severity=Severity.CRITICAL,
    category="A08:2021 – Software and Data Integrity Failures",
    pattern=re.compile(r"pickle\.loads?\s*\(", re.IGNORECASE),
    description=(
        "pickle.loads() can execute arbitrary Python code during deserialization. "
        "Never deserialize pickle data from untrusted sources."
    ),
    fix=(
        "Use JSON (json.loads) or safe serialization formats like MessagePack. If pickle is "
        "required, sign and verify the data with HMAC before deserializing."
    ),
    applicability=only(PYTHON),
)

EVAL_USAGE = Rule(
    id="EVAL_USAGE",
    name="Dangerous eval() Usage",
    severity=Severity.HIGH,
    category="A03:2021 – Injection",
    pattern=re.compile(r"\beval\s*\(", re.IGNORECASE),
    description=(
        "eval() executes arbitrary code strings. If any part of that string comes from user "
        "input or an external source, attackers can run arbitrary code on your server or client."
    ),
    fix=(
        "Eliminate eval(). JS: use JSON.parse() for data parsing. Python: use "
        "ast.literal_eval() for literals. Otherwise refactor logic to avoid dynamic code "
        "execution; for templating, use a proper template engine."
    ),
)

EXEC_USAGE = Rule(
    id="EXEC_USAGE",
    name="exec() Dynamic Code Execution",
    severity=Severity.HIGH,
    category="A03:2021 – Injection",
    pattern=re.compile(r"\bexec\s*\(", re.IGNORECASE),
    description=(
        "exec() executes arbitrary Python code. Combined with user input, this becomes a "
        "critical remote code execution vulnerability."
    ),
    fix=(
        "Avoid exec() entirely. Refactor to use proper data structures, AST parsing, or safe "
        "abstractions instead of dynamic code execution."
    ),
    applicability=only(PYTHON),
)
