"""Remove unused selectors and the rules they leave empty."""

from __future__ import annotations

from typing import Collection, Iterable

from csstrim.selectors import IgnoreEntry, matches_ignore, normalize_selector
from csstrim.stylesheet.model import Rule, RuleKind, Stylesheet

__all__ = ["filter_rules", "is_selector_used", "prune_empty_rules"]


def is_selector_used(
    selector: str, ignore: Iterable[IgnoreEntry], used: Collection[str]
) -> bool:
    """Decide whether the raw *selector* stays in the stylesheet."""
    normalized = normalize_selector(selector)
    # at-rule selectors are not processed yet
    if normalized.startswith("@"):
        return True
    if matches_ignore(normalized, ignore):
        return True
    return normalized in used


def prune_empty_rules(rules: list[Rule]) -> list[Rule]:
    """Drop selector rules with no selectors and media blocks with no rules."""
    kept: list[Rule] = []
    for rule in rules:
        if rule.kind is RuleKind.RULE:
            if rule.selectors:
                kept.append(rule)
        elif rule.kind is RuleKind.MEDIA:
            rule.rules = prune_empty_rules(rule.rules)
            if rule.rules:
                kept.append(rule)
        else:
            kept.append(rule)
    return kept


def _filter_selectors(
    rules: list[Rule], ignore: list[IgnoreEntry], used: Collection[str]
) -> None:
    for rule in rules:
        if rule.kind is RuleKind.RULE:
            rule.selectors = [s for s in rule.selectors if is_selector_used(s, ignore, used)]
        elif rule.kind is RuleKind.MEDIA:
            _filter_selectors(rule.rules, ignore, used)


def filter_rules(
    stylesheet: Stylesheet, ignore: Iterable[IgnoreEntry], used: Collection[str]
) -> Stylesheet:
    """Filter *stylesheet* in place against the *used* normalized selectors.

    Two steps: drop unused selectors from every rule (recursing into media
    blocks), then drop the rules left without selectors. Surviving rules
    and selectors keep their relative order; declarations and media
    conditions are untouched.
    """
    ignore = list(ignore)
    _filter_selectors(stylesheet.rules, ignore, used)
    stylesheet.rules = prune_empty_rules(stylesheet.rules)
    return stylesheet
