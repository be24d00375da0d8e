"""
Scanner — Runs rule patterns over raw source text.

Produces MatchEvent records lazily, in order of appearance, each carrying its
1-based line and the trimmed line as a snippet. Read-only over its input.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from vibeguard.models.finding_models import MatchEvent
from vibeguard.models.rule_models import Rule

MAX_SNIPPET_LENGTH = 100


def line_for_offset(source: str, offset: int) -> int:
    """1 + number of newlines before ``offset``."""
    return source.count("\n", 0, offset) + 1


def snippet_for_line(lines: list[str], line: int, fallback: str) -> str:
    """Trimmed text of ``line``, or ``fallback`` when that line is blank or missing."""
    text = lines[line - 1].strip() if 0 < line <= len(lines) else ""
    return (text or fallback)[:MAX_SNIPPET_LENGTH]


class Scanner:
    """Applies rule patterns to a single block of source text."""

    def __init__(self, source: str) -> None:
        self.source = source if isinstance(source, str) else ""
        self._lines: list[str] | None = None

    @property
    def lines(self) -> list[str]:
        if self._lines is None:
            self._lines = self.source.split("\n")
        return self._lines

    def iter_matches(self, rule: Rule) -> Iterator[MatchEvent]:
        """Yield every match of ``rule`` in order of appearance."""
        for match in rule.pattern.finditer(self.source):
            offset = match.start()
            line = line_for_offset(self.source, offset)
            yield MatchEvent(
                rule_id=rule.id,
                offset=offset,
                text=match.group(0),
                line=line,
                snippet=snippet_for_line(self.lines, line, match.group(0)),
            )

    def scan(self, rules: Iterable[Rule]) -> Iterator[MatchEvent]:
        """Yield match events for each rule in turn."""
        for rule in rules:
            yield from self.iter_matches(rule)


def scan_matches(source: str, rules: Iterable[Rule]) -> list[MatchEvent]:
    """All raw match events of ``rules`` against ``source``."""
    return list(Scanner(source).scan(rules))
