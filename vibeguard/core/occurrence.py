"""
Occurrence Policy — How many findings a single rule contributes.

One dispatch per rule: a rule's events go through exactly one policy, so a
repeatable rule can never also surface a single-style representative.
"""

from __future__ import annotations

from typing import Iterable

from vibeguard.models.finding_models import MatchEvent
from vibeguard.models.rule_models import OccurrencePolicy, Rule


def first_occurrence(events: Iterable[MatchEvent]) -> list[MatchEvent]:
    """The first event, without consuming the rest of the stream."""
    for event in events:
        return [event]
    return []


def distinct_line_occurrences(events: Iterable[MatchEvent], limit: int) -> list[MatchEvent]:
    """One event per distinct line, in order, stopping once ``limit`` lines are recorded."""
    selected: list[MatchEvent] = []
    seen_lines: set[int] = set()
    for event in events:
        if len(selected) >= limit:
            break
        if event.line in seen_lines:
            continue
        seen_lines.add(event.line)
        selected.append(event)
    return selected


def select_occurrences(rule: Rule, events: Iterable[MatchEvent]) -> list[MatchEvent]:
    """Apply ``rule``'s occurrence policy to its match events."""
    if rule.occurrence == OccurrencePolicy.REPEATABLE:
        return distinct_line_occurrences(events, rule.max_occurrences)
    return first_occurrence(events)
