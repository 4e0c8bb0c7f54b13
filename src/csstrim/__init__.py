"""csstrim: remove the CSS rules a set of documents never uses."""
from __future__ import annotations

__version__ = "0.1.0"

from csstrim.config import ReduceOptions
from csstrim.engine import reduce, reduce_sync
from csstrim.errors import (
    ConfigurationError,
    CsstrimError,
    FetchError,
    OracleError,
    PathResolutionError,
    StylesheetParseError,
)
from csstrim.filter import filter_rules
from csstrim.collector import collect_used
from csstrim.oracle import Document, DomOracle, StaticOracle
from csstrim.paths import resolve, resolve_all
from csstrim.runner import Runner, RunResult
from csstrim.selectors import IgnoreEntry, normalize_selector
from csstrim.stylesheet import (
    MediaRule,
    OtherRule,
    SelectorRule,
    Stylesheet,
    parse_stylesheet,
    serialize_stylesheet,
)

__all__ = [
    "__version__",
    # core
    "reduce",
    "reduce_sync",
    "collect_used",
    "filter_rules",
    "normalize_selector",
    "IgnoreEntry",
    "resolve",
    "resolve_all",
    # model
    "Stylesheet",
    "SelectorRule",
    "MediaRule",
    "OtherRule",
    "parse_stylesheet",
    "serialize_stylesheet",
    # collaborators
    "Document",
    "DomOracle",
    "StaticOracle",
    "ReduceOptions",
    "Runner",
    "RunResult",
    # errors
    "CsstrimError",
    "PathResolutionError",
    "FetchError",
    "OracleError",
    "StylesheetParseError",
    "ConfigurationError",
]
