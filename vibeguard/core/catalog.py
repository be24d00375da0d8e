"""
Rule Catalog — Immutable registry of rules and their language applicability.

The catalog is built once and passed explicitly to the engine, so tests can
swap in a smaller one. Declaration order is the order findings come out in.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from vibeguard.core.languages import KNOWN_LANGUAGES, normalize_language
from vibeguard.models.rule_models import Rule

# Import all rule modules
from vibeguard.core.rules import (
    code_execution,
    crypto,
    hardcoded_secrets,
    hygiene,
    injection,
)


class RuleCatalog:
    """
    Ordered, read-only collection of rules.

    A language outside ``languages`` is unrecognised: only rules that apply
    to all languages are returned for it.
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        languages: Iterable[str] = KNOWN_LANGUAGES,
    ) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._by_id: dict[str, Rule] = {}
        for rule in self._rules:
            if rule.id in self._by_id:
                raise ValueError(f"Duplicate rule id: {rule.id}")
            self._by_id[rule.id] = rule
        self.languages: frozenset[str] = frozenset(normalize_language(tag) for tag in languages)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def rule_ids(self) -> list[str]:
        return [rule.id for rule in self._rules]

    def get(self, rule_id: str) -> Rule:
        """Look up a rule by id."""
        if rule_id not in self._by_id:
            raise KeyError(f"Unknown rule: {rule_id}")
        return self._by_id[rule_id]

    def resolve_language(self, language: object) -> str | None:
        """Normalised tag if the catalog knows it, else None."""
        tag = normalize_language(language)
        return tag if tag in self.languages else None

    def applicable_rules(self, language: object) -> tuple[Rule, ...]:
        """Rules in scope for ``language``, in declaration order."""
        resolved = self.resolve_language(language)
        return tuple(rule for rule in self._rules if rule.applicability.accepts(resolved))


# Declaration order: severity first, then as listed
DEFAULT_RULES: tuple[Rule, ...] = (
    # ── Critical ──
    hardcoded_secrets.HARDCODED_PASSWORD,
    hardcoded_secrets.HARDCODED_API_KEY,
    injection.SQL_INJECTION,
    code_execution.PICKLE_DESERIALIZATION,
    # ── High ──
    injection.XSS_INNER_HTML,
    code_execution.EVAL_USAGE,
    injection.OS_SYSTEM,
    crypto.WEAK_HASH,
    hygiene.DEBUG_MODE,
    code_execution.EXEC_USAGE,
    # ── Medium ──
    crypto.INSECURE_RANDOM,
    crypto.HTTP_USAGE,
    # ── Low ──
    hygiene.CONSOLE_LOG,
    hygiene.BROAD_EXCEPT,
    # ── Info ──
    hygiene.TODO_FIXME,
)

DEFAULT_CATALOG = RuleCatalog(DEFAULT_RULES)
