"""
Prompt Builder — Builds the AI logic audit prompt.

Unlike the local engine, the audit looks for logic hallucinations and
structural issues that regexes cannot see. Output must use the same finding
shape so the scorer can treat local and AI findings uniformly.
"""

from __future__ import annotations

from vibeguard.core.languages import line_comment


SYSTEM_PROMPT = """\
You are VibeGuard's AI Security Auditor, specialized in detecting logic hallucinations and structural issues in AI-generated code.

Your job is to analyze code for:
1. HALLUCINATED LIBRARIES: References to non-existent functions, methods, or modules (e.g., calling db.magicFetch() that doesn't exist)
2. INFINITE LOOPS: Loops with conditions that can never terminate
3. UNHANDLED PROMISES: async operations without await, .then(), or .catch()
4. RACE CONDITIONS: Concurrent modifications to shared state without proper synchronization
5. LOGIC TAUTOLOGIES: Conditions that are always true or always false (e.g., if (x === x))
6. DEAD CODE: Code after return statements or unreachable branches
7. TYPE COERCION BUGS: Dangerous implicit type conversions (e.g., "5" + 2 === "52")
8. MISSING NULL CHECKS: Accessing properties on values that could be null/undefined
9. OFF-BY-ONE ERRORS: Array bounds issues (e.g., for i <= arr.length)
10. MEMORY LEAKS: Event listeners added without removal, timers not cleared

Respond ONLY with a valid JSON array. Each element must have exactly these fields:
{
  "id": "UNIQUE_ID_IN_SNAKE_CASE",
  "name": "Short descriptive name",
  "severity": "High" | "Medium" | "Low",
  "owasp": "Relevant OWASP category or 'Logic Error'",
  "line": <estimated line number as integer or 1 if unknown>,
  "snippet": "The relevant code snippet (max 80 chars)",
  "description": "Clear explanation of the issue (1-2 sentences)",
  "fix": "Specific actionable fix with code example",
  "source": "AI Audit"
}

If no issues are found, return an empty array: []
Do NOT include any text outside the JSON array. Do NOT use markdown code blocks.
"""


def truncate_code(code: str, language: str, max_chars: int) -> str:
    """Cut ``code`` to ``max_chars`` and mark the cut with a comment in its own syntax."""
    if len(code) <= max_chars:
        return code
    return f"{code[:max_chars]}\n{line_comment(language)} ... (truncated)"


def build_audit_prompt(code: str, language: str, max_chars: int = 8000) -> str:
    """User message for the audit; pair it with SYSTEM_PROMPT."""
    lang = language or "unknown"
    return (
        f"Analyze this {lang} code for logic hallucinations and structural issues:\n\n"
        f"```{lang}\n{truncate_code(code, language, max_chars)}\n```"
    )
