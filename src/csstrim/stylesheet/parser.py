"""CSS parser and serializer backed by tinycss2.

Only the shape the reducer needs is modelled:

    .a, .b:hover { color: red; }           -> SelectorRule
    @media screen { .c { color: blue; } }  -> MediaRule (children recursed)
    @font-face { ... }                     -> OtherRule (kept verbatim)
"""

from __future__ import annotations

import logging

import tinycss2

from csstrim.errors import StylesheetParseError
from csstrim.stylesheet.model import (
    MediaRule,
    OtherRule,
    Rule,
    RuleKind,
    SelectorRule,
    Stylesheet,
)

__all__ = ["parse_stylesheet", "serialize_stylesheet"]

logger = logging.getLogger("csstrim")

_INDENT = "  "


def _raise_parse_error(node) -> None:
    raise StylesheetParseError(
        f"{node.kind}: {node.message}",
        line=node.source_line,
        column=node.source_column,
    )


def _split_selectors(prelude: list) -> list[str]:
    """Split a qualified rule prelude at top-level commas."""
    selectors: list[str] = []
    chunk: list = []
    for token in prelude + [None]:
        if token is None or (token.type == "literal" and token.value == ","):
            text = tinycss2.serialize(chunk).strip()
            if text:
                selectors.append(text)
            chunk = []
        else:
            chunk.append(token)
    return selectors


def _parse_declarations(content: list) -> list[str]:
    declarations: list[str] = []
    for item in tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "declaration":
            value = tinycss2.serialize(item.value).strip()
            important = " !important" if item.important else ""
            declarations.append(f"{item.name}: {value}{important}")
        elif item.type == "error":
            logger.debug(
                "Dropping invalid declaration at %s:%s (%s)",
                item.source_line,
                item.source_column,
                item.message,
            )
        else:
            declarations.append(item.serialize().strip())
    return declarations


def _convert(nodes: list) -> list[Rule]:
    rules: list[Rule] = []
    for node in nodes:
        if node.type == "error":
            _raise_parse_error(node)
        elif node.type == "qualified-rule":
            rules.append(
                SelectorRule(
                    selectors=_split_selectors(node.prelude),
                    declarations=_parse_declarations(node.content),
                )
            )
        elif node.type == "at-rule":
            if node.lower_at_keyword == "media" and node.content is not None:
                children = tinycss2.parse_rule_list(
                    node.content, skip_comments=True, skip_whitespace=True
                )
                rules.append(
                    MediaRule(
                        condition=tinycss2.serialize(node.prelude).strip(),
                        rules=_convert(children),
                    )
                )
            else:
                rules.append(OtherRule(text=node.serialize().strip()))
    return rules


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Comments and whitespace are discarded; rule order is preserved.
    Raises StylesheetParseError on a syntax error tinycss2 cannot recover
    from at rule level.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    return Stylesheet(rules=_convert(nodes))


def _serialize_rule(rule: Rule, depth: int) -> str:
    pad = _INDENT * depth
    if rule.kind is RuleKind.RULE:
        head = (",\n" + pad).join(rule.selectors)
        body = "".join(f"{pad}{_INDENT}{decl};\n" for decl in rule.declarations)
        return f"{pad}{head} {{\n{body}{pad}}}"
    if rule.kind is RuleKind.MEDIA:
        inner = "\n".join(_serialize_rule(child, depth + 1) for child in rule.rules)
        return f"{pad}@media {rule.condition} {{\n{inner}\n{pad}}}"
    return pad + rule.text


def serialize_stylesheet(stylesheet: Stylesheet) -> str:
    """Serialize a Stylesheet back to CSS text."""
    if not stylesheet.rules:
        return ""
    return "\n\n".join(_serialize_rule(rule, 0) for rule in stylesheet.rules) + "\n"
