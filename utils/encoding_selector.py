"""
Boundary adapter between host values and the hashing core.

Hosts (the CLI, a scripting binding, a server) hand over loosely typed values:
ordinals, floats, names, raw strings. This module turns them into the
validated types HashSession works with.
"""
import math
from typing import Any

from models.encoding_kind import EncodingKind
from services.hashing_errors import InvalidEncodingError
from services.hashing_service import HashSession


def encoding_from_ordinal(ordinal: int) -> EncodingKind:
    """
    Map an ordinal (0, 1, 2) to its EncodingKind.

    Raises:
        InvalidEncodingError: For any other ordinal.
    """
    try:
        return EncodingKind(ordinal)
    except ValueError:
        raise InvalidEncodingError(
            ordinal, f"Invalid encoding ordinal {ordinal!r}. Valid ordinals are 0 (utf8), 1 (base64), 2 (hex)"
        ) from None


def encoding_from_name(name: str) -> EncodingKind:
    """
    Map a case-insensitive name ("utf8", "base64", "hex") to its EncodingKind.

    Raises:
        InvalidEncodingError: For any other name.
    """
    kind = EncodingKind.labels().get(name.lower())
    if kind is None:
        raise InvalidEncodingError(
            name, f"Invalid encoding name {name!r}. Valid names are: utf8, base64, hex"
        )
    return kind


def parse_encoding(value: Any) -> EncodingKind:
    """
    Convert a host encoding selector into an EncodingKind.

    Accepted forms:
        - EncodingKind members, returned as-is
        - int ordinals 0/1/2
        - float ordinals, truncated toward zero first
        - str or bytes names, matched case-insensitively

    Args:
        value: The selector supplied by the host.

    Returns:
        EncodingKind: The selected encoding.

    Raises:
        InvalidEncodingError: If the selector is of an unsupported type or
            does not match an encoding. Never falls back to a default.
    """
    if isinstance(value, EncodingKind):
        return value
    # bool is an int subclass; True/False are not ordinals
    if isinstance(value, bool):
        raise InvalidEncodingError(value, f"Invalid encoding {value!r}: booleans are not encoding selectors")
    if isinstance(value, int):
        return encoding_from_ordinal(value)
    if isinstance(value, float):
        if math.isfinite(value) and math.trunc(value) in range(len(EncodingKind)):
            return EncodingKind(math.trunc(value))
        raise InvalidEncodingError(
            value, f"Invalid encoding ordinal {value!r}. Valid ordinals are 0 (utf8), 1 (base64), 2 (hex)"
        )
    if isinstance(value, str):
        return encoding_from_name(value)
    if isinstance(value, (bytes, bytearray)):
        return encoding_from_name(bytes(value).decode("utf-8", errors="replace"))
    raise InvalidEncodingError(
        value,
        f"Invalid encoding selector of type {type(value).__name__}: "
        "value must be an integer, number or string",
    )


def coerce_content(value: Any) -> bytes:
    """
    Convert a host value into bytes for HashSession.update().

    Bytes-like values pass through, strings are UTF-8 encoded and numbers are
    hashed through their string form.

    Raises:
        TypeError: For any other type.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value).encode("utf-8")
    raise TypeError(f"Cannot hash a value of type {type(value).__name__}")


def digest_as(session: HashSession, selector: Any) -> str:
    """
    Produce a digest using a host encoding selector.

    The selector is validated before the session is touched, so an invalid
    selector leaves the accumulated input in place.
    """
    encoding = parse_encoding(selector)
    return session.digest(encoding)
