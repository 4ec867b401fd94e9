"""Exceptions for apiservice SDK."""

from enum import Enum


class ErrorKind(str, Enum):
    """Reasons a request can fail before a usable response is available."""

    invalid_url = "invalid_url"
    request_failed = "request_failed"
    decoding_failure = "decoding_failure"


class APIServiceError(Exception):
    """Base exception for all apiservice SDK errors."""

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        """
        Initialize APIServiceError.

        Args:
            message: Error message
            kind: Failure kind if the error maps to one
        """
        self.message = message
        self.kind = kind
        super().__init__(self.message)


class InvalidURLError(APIServiceError):
    """Raised when a request cannot be resolved against the base URL."""

    def __init__(self, message: str = "Invalid URL") -> None:
        """Initialize InvalidURLError."""
        super().__init__(message, kind=ErrorKind.invalid_url)


class RequestFailedError(APIServiceError):
    """Raised when the transport did not produce a response."""

    def __init__(self, message: str = "Request failed") -> None:
        """Initialize RequestFailedError."""
        super().__init__(message, kind=ErrorKind.request_failed)


class DecodingFailureError(APIServiceError):
    """Raised when a response body cannot be decoded to the requested type."""

    def __init__(self, message: str = "Decoding failure") -> None:
        """Initialize DecodingFailureError."""
        super().__init__(message, kind=ErrorKind.decoding_failure)


class EncodingError(APIServiceError):
    """Raised when a request payload cannot be encoded to JSON."""

    def __init__(self, message: str = "Encoding failure") -> None:
        """Initialize EncodingError."""
        super().__init__(message)
