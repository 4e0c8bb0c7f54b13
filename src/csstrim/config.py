from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReduceOptions:
    htmlroot: str | None = None  # root for "/css/x.css" style references
    csspath: str = ""  # extra path between a document and its stylesheets
    stylesheets: tuple[str, ...] = ()  # overrides the links found in documents
    ignore: tuple[object, ...] = ()  # strings, compiled patterns or "/re/" strings
    ignore_sheets: tuple[str, ...] = ()  # regexes of stylesheet locations to skip
    raw_css: str = ""
    raw_html: str = ""
    timeout: float = 10.0
    user_agent: str = "csstrim"
