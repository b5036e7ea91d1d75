"""Whole-document rule collections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from smake.constants import RULE_TAG
from smake.document.loader import load_document
from smake.document.models import Tag
from smake.errors import UnknownRuleError
from smake.rules.models import Rule
from smake.rules.parser import parse_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def get(self, name: str) -> Optional[Rule]:
        return next((rule for rule in self.rules if rule.name == name), None)

    def stale(self) -> list[Rule]:
        return [rule for rule in self.rules if rule.update_needed]

    def select(self, names: Iterable[str]) -> list[Rule]:
        """Return the named rules in the requested order."""
        selected: list[Rule] = []
        for name in names:
            rule = self.get(name)
            if rule is None:
                raise UnknownRuleError(name)
            selected.append(rule)
        return selected

    def describe(self, verbose: bool = False) -> str:
        return "\n".join(rule.describe(verbose) for rule in self.rules)

    def __str__(self) -> str:
        return self.describe()


def parse_rule_set(tags: Iterable[Tag]) -> Optional[RuleSet]:
    """Parse every ``rule`` tag, or return ``None`` if any of them is invalid.

    Parsing stops at the first invalid rule; tags with other names are
    ignored.
    """
    rules: list[Rule] = []
    for tag in tags:
        if tag.name != RULE_TAG:
            continue
        rule = parse_rule(tag)
        if rule is None:
            logger.warning("Document rejected: rule #%d is invalid", len(rules) + 1)
            return None
        rules.append(rule)
    logger.debug("Parsed %d rules", len(rules))
    return RuleSet(rules=tuple(rules))


def load_rule_set(path: Path) -> Optional[RuleSet]:
    return parse_rule_set(load_document(path))
