"""Selector normalization and ignore-list matching."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from csstrim.errors import ConfigurationError

__all__ = [
    "IGNORED_PSEUDOS",
    "IgnoreEntry",
    "IgnoreKind",
    "build_ignore_list",
    "matches_ignore",
    "normalize_selector",
]

# Pseudo-classes and pseudo-elements that depend on user interaction,
# element state or generated content, and so cannot be checked against a
# static DOM. Vendor-prefixed variants are deliberately not listed.
IGNORED_PSEUDOS: tuple[str, ...] = (
    # link
    ":link", ":visited",
    # user action
    ":hover", ":active", ":focus",
    # UI element states
    ":enabled", ":disabled", ":checked", ":indeterminate",
    # pseudo elements
    "::first-line", "::first-letter", "::selection", "::before", "::after",
    # CSS2 pseudo elements
    ":before", ":after",
)

_PSEUDOS_RE = re.compile("|".join(re.escape(p) for p in IGNORED_PSEUDOS))


def normalize_selector(selector: str) -> str:
    """Strip every ignored pseudo-class/element from *selector*.

    ``.clearfix:before`` becomes ``.clearfix``, so it survives exactly when
    its parent form is used.
    """
    return _PSEUDOS_RE.sub("", selector)


class IgnoreKind(Enum):
    EXACT = "exact"
    PATTERN = "pattern"


@dataclass(frozen=True)
class IgnoreEntry:
    """A selector that must be kept regardless of usage.

    EXACT entries compare equal to the normalized selector, PATTERN entries
    are searched for within it.
    """

    kind: IgnoreKind
    value: str
    pattern: re.Pattern | None = None

    @classmethod
    def exact(cls, value: str) -> IgnoreEntry:
        return cls(kind=IgnoreKind.EXACT, value=value)

    @classmethod
    def regex(cls, pattern: str | re.Pattern) -> IgnoreEntry:
        if isinstance(pattern, str):
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                raise ConfigurationError(
                    f"Invalid ignore pattern {pattern!r}: {exc}", cause=exc
                ) from exc
        else:
            compiled = pattern
        return cls(kind=IgnoreKind.PATTERN, value=compiled.pattern, pattern=compiled)

    @classmethod
    def from_value(cls, value: object) -> IgnoreEntry:
        """Build an entry from a string, a ``/regex/`` string or a compiled pattern."""
        if isinstance(value, IgnoreEntry):
            return value
        if isinstance(value, re.Pattern):
            return cls.regex(value)
        if not isinstance(value, str):
            raise TypeError(f"Unsupported ignore entry: {value!r}")
        if len(value) > 2 and value.startswith("/") and value.endswith("/"):
            return cls.regex(value[1:-1])
        return cls.exact(value)

    def matches(self, selector: str) -> bool:
        if self.kind is IgnoreKind.PATTERN:
            return self.pattern.search(selector) is not None
        return self.value == selector


def build_ignore_list(values: Iterable[object]) -> list[IgnoreEntry]:
    """Convert user supplied ignore values into IgnoreEntry objects."""
    return [IgnoreEntry.from_value(v) for v in values]


def matches_ignore(selector: str, ignore: Iterable[IgnoreEntry]) -> bool:
    """True if the normalized *selector* matches any ignore entry."""
    return any(entry.matches(selector) for entry in ignore)
