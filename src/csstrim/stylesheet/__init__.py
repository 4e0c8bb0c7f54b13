from csstrim.stylesheet.parser import parse_stylesheet, serialize_stylesheet
from csstrim.stylesheet.model import (
    MediaRule,
    OtherRule,
    Rule,
    RuleKind,
    SelectorRule,
    Stylesheet,
)

__all__ = [
    "parse_stylesheet",
    "serialize_stylesheet",
    "Stylesheet",
    "Rule",
    "RuleKind",
    "SelectorRule",
    "MediaRule",
    "OtherRule",
]
