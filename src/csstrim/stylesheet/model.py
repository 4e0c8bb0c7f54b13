"""Stylesheet model: SelectorRule, MediaRule, OtherRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class RuleKind(Enum):
    """Discriminator for the rule variants."""

    RULE = "rule"
    MEDIA = "media"
    OTHER = "other"


@dataclass
class SelectorRule:
    """A rule pairing a selector list with its declarations.

    Declarations are kept as serialized text and are never inspected.
    """

    selectors: list[str]
    declarations: list[str] = field(default_factory=list)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.RULE


@dataclass
class MediaRule:
    """An ``@media`` block owning an ordered list of nested rules."""

    condition: str
    rules: list[Rule] = field(default_factory=list)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MEDIA


@dataclass
class OtherRule:
    """Any other at-rule (font-face, keyframes, import ...), kept verbatim."""

    text: str

    @property
    def kind(self) -> RuleKind:
        return RuleKind.OTHER


Rule = Union[SelectorRule, MediaRule, OtherRule]


@dataclass
class Stylesheet:
    """An ordered collection of rules parsed from one or more CSS sources."""

    rules: list[Rule] = field(default_factory=list)

    def count_rules(self) -> int:
        """Count selector rules, including those nested in media blocks."""
        return _count(self.rules, lambda r: 1)

    def count_selectors(self) -> int:
        """Count raw selectors across all selector rules."""
        return _count(self.rules, lambda r: len(r.selectors))


def _count(rules: list[Rule], measure) -> int:
    total = 0
    for rule in rules:
        if rule.kind is RuleKind.RULE:
            total += measure(rule)
        elif rule.kind is RuleKind.MEDIA:
            total += _count(rule.rules, measure)
    return total
