"""Error hierarchy for csstrim."""
from __future__ import annotations


class CsstrimError(Exception):
    """Base error for all csstrim errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class PathResolutionError(CsstrimError):
    """A stylesheet reference could not be turned into a usable location.

    ``resolve`` itself never raises this; callers use it to report
    configuration problems such as an absolute reference without an
    ``htmlroot``.
    """


class FetchError(CsstrimError):
    """A stylesheet or document could not be read."""

    def __init__(
        self,
        message: str,
        *,
        location: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.location = location
        self.status_code = status_code


class OracleError(CsstrimError):
    """The DOM query oracle failed to evaluate selectors for a document."""

    def __init__(
        self, message: str, *, document: str, cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.document = document


class StylesheetParseError(CsstrimError):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigurationError(CsstrimError):
    """Invalid reduction options."""
