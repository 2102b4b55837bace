"""
Errors raised by hashing sessions and the encoding selector.
"""
from typing import Any, Optional


class HashingError(Exception):
    """Base class for recoverable hashing errors."""


class InvalidEncodingError(HashingError):
    """Raised when an encoding selector does not name a known EncodingKind."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        if message is None:
            message = (
                f"Invalid encoding {value!r}. "
                "Valid options are: 0/'utf8', 1/'base64', 2/'hex'"
            )
        super().__init__(message)


class NonUtf8DigestError(HashingError):
    """Raised when a digest rendered as UTF-8 is not valid UTF-8 text."""

    def __init__(self, algorithm: str, raw: bytes):
        self.algorithm = algorithm
        self.raw = raw
        super().__init__(
            f"{algorithm} digest ({len(raw)} bytes) is not valid UTF-8; "
            "use the base64 or hex encoding instead"
        )


class LockFailureError(HashingError):
    """Raised when a session's shared state cannot be locked or was left poisoned."""
