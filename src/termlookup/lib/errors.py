"""Custom exception hierarchy for termlookup sources and lookups."""

from __future__ import annotations

from enum import Enum


class Source(str, Enum):
    """Data providers queried for a term."""

    DICTIONARY = "dictionary"
    ENCYCLOPEDIA = "encyclopedia"


class TermLookupError(Exception):
    """Base exception for all termlookup errors.

    All termlookup-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI layer.
    """

    pass


class ConfigError(TermLookupError):
    """Exception raised for configuration errors.

    Raised when a CLI option or environment override resolves to a value
    that the lookup configuration cannot accept.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class TransportError(TermLookupError):
    """Exception raised when a source cannot be reached.

    Covers DNS failures, refused connections and timeouts. The request is
    never retried; the error surfaces as-is.

    Attributes:
        url: The URL that was being requested
        original_error: The underlying exception from the HTTP library
    """

    def __init__(self, url: str, original_error: Exception | None = None) -> None:
        """Initialize TransportError with URL and optional cause.

        Args:
            url: The URL that failed to respond
            original_error: The underlying exception that caused the failure
        """
        self.url = url
        self.original_error = original_error
        message = f"Request to {url} failed"
        if original_error:
            message += f": {original_error}"
        super().__init__(message)


class ParseError(TermLookupError):
    """Exception raised when a response body does not have the expected shape.

    A structurally absent optional field is valid empty data and never
    raises this error; a malformed document always does.

    Attributes:
        source: Source whose payload failed to parse
        message: Description of what was wrong with the payload
        status: HTTP status the payload was returned with, if known
    """

    def __init__(
        self,
        source: Source,
        message: str,
        status: int | None = None,
    ) -> None:
        """Initialize ParseError with source details.

        Args:
            source: Source whose payload failed to parse
            message: Description of the problem
            status: HTTP status code of the response
        """
        self.source = source
        self.message = message
        self.status = status
        full_message = f"Malformed {source.value} response: {message}"
        if status is not None:
            full_message += f" (HTTP {status})"
        super().__init__(full_message)


class LookupError(TermLookupError):
    """Exception tagging a transport or parse failure with its source.

    Attributes:
        source: Source that failed
        cause: The TransportError or ParseError that occurred
    """

    def __init__(self, source: Source, cause: TransportError | ParseError) -> None:
        """Create a source-tagged lookup error.

        Args:
            source: Source that failed
            cause: Underlying transport or parse error
        """
        self.source = source
        self.cause = cause
        super().__init__(f"{source.value} lookup failed: {cause}")
