"""
Language tags — normalisation and file-extension inference.
"""

from __future__ import annotations

from pathlib import PurePath

JAVASCRIPT = "javascript"
TYPESCRIPT = "typescript"
PYTHON = "python"

KNOWN_LANGUAGES: frozenset[str] = frozenset({JAVASCRIPT, TYPESCRIPT, PYTHON})

EXTENSION_LANGUAGE_MAP: dict[str, str] = {
    ".js": JAVASCRIPT,
    ".jsx": JAVASCRIPT,
    ".ts": TYPESCRIPT,
    ".tsx": TYPESCRIPT,
    ".py": PYTHON,
}

_LINE_COMMENT = {JAVASCRIPT: "//", TYPESCRIPT: "//", PYTHON: "#"}


def normalize_language(language: object) -> str:
    """Lowercase and strip a language tag; anything that is not text becomes ''."""
    if not isinstance(language, str):
        return ""
    return language.strip().lower()


def language_for_filename(filename: str | None) -> str | None:
    """Infer a language tag from a file name, or None if the extension is unknown."""
    if not filename:
        return None
    return EXTENSION_LANGUAGE_MAP.get(PurePath(filename).suffix.lower())


def line_comment(language: str) -> str:
    return _LINE_COMMENT.get(normalize_language(language), "//")
