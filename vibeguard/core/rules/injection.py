"""
Injection Rules — SQL string concatenation, DOM XSS sinks and shell commands.
"""

from __future__ import annotations

import re

from vibeguard.core.languages import PYTHON
from vibeguard.models.rule_models import Rule, Severity, excluding, only

CATEGORY = "A03:2021 – Injection"


SQL_INJECTION = Rule(
    id="SQL_INJECTION",
    name="SQL Injection (String Concatenation)",
    severity=Severity.CRITICAL,
    category=CATEGORY,
    pattern=re.compile(
        r"""(?:execute|query|cursor\.execute)\s*\(?\s*["'`]?\s*(?:SELECT|INSERT|UPDATE|DELETE|DROP)\s+.{0,80}["'`]?\s*\+"""
        r"""|["'`]\s*(?:SELECT|INSERT|UPDATE|DELETE)\s+.{0,60}\+\s*\w""",
        re.IGNORECASE,
    ),
    description=(
        "User-controlled input is concatenated directly into a SQL query. This is the most "
        "classic injection vulnerability allowing attackers to read, modify, or delete "
        "database content."
    ),
    fix=(
        "Use parameterized queries / prepared statements:\n"
        '  JS: db.query("SELECT * FROM users WHERE id = ?", [userId])\n'
        '  Python: cursor.execute("SELECT * FROM users WHERE id=%s", (user_id,))'
    ),
)

# DOM API: no counterpart in Python sources
XSS_INNER_HTML = Rule(
    id="XSS_INNER_HTML",
    name="Cross-Site Scripting (XSS) via innerHTML",
    severity=Severity.HIGH,
    category=CATEGORY,
    pattern=re.compile(r"\.innerHTML\s*=", re.IGNORECASE),
    description=(
        "Assigning to innerHTML with user-controlled data allows attackers to inject "
        "malicious scripts that run in visitors' browsers, stealing sessions, credentials, or data."
    ),
    fix=(
        "Use textContent for plain text: element.textContent = userInput.\n"
        "For rich HTML, sanitize with DOMPurify: element.innerHTML = DOMPurify.sanitize(userInput)."
    ),
    applicability=excluding(PYTHON),
)

OS_SYSTEM = Rule(
    id="OS_SYSTEM",
    name="Shell Command Injection (os.system / subprocess)",
    severity=Severity.HIGH,
    category=CATEGORY,
    pattern=re.compile(
        r"\bos\.system\s*\(|\bsubprocess\.(?:call|run|Popen|check_output)\s*\((?:[^)]*shell\s*=\s*True)",
        re.IGNORECASE,
    ),
    description=(
        "Executing shell commands with user-supplied input can allow command injection, "
        "giving attackers full control of the host system."
    ),
    fix=(
        'Avoid shell=True. Pass arguments as a list: subprocess.run(["ls", "-la"]). '
        "Sanitize and validate all inputs that touch shell commands."
    ),
    applicability=only(PYTHON),
)
