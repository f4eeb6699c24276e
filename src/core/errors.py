"""
Error kinds raised by the codec, crypto and builder layers.

Messages are rendered only at the HTTP boundary (see api.responses).
"""

from enum import Enum


class ErrorKind(Enum):
    """User-visible failure categories."""
    MISSING_FIELD = "missing_field"
    INVALID_BODY = "invalid_body"
    INVALID_ADDRESS = "invalid_address"
    INVALID_SECRET = "invalid_secret"
    INVALID_SIGNATURE_ENCODING = "invalid_signature_encoding"
    INVALID_SIGNATURE_FORMAT = "invalid_signature_format"
    INVALID_VALUE = "invalid_value"
    BUILD_FAILED = "build_failed"


class InvalidEncodingError(ValueError):
    """Raised when a base58 or base64 string cannot be decoded."""


class HelperError(Exception):
    """A request could not be served because of its input."""

    def __init__(
        self, kind: ErrorKind, field: str | None = None, detail: str | None = None
    ):
        """Initialize the error.

        Args:
            kind: Failure category
            field: Wire name of the offending request field, if any
            detail: Extra context (builder name or underlying reason)
        """
        self.kind = kind
        self.field = field
        self.detail = detail
        super().__init__(f"{kind.value}: field={field} detail={detail}")
