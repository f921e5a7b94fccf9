"""
Validation Utilities
====================

Input validation functions with security focus.
"""

from __future__ import annotations

from passlock.core.errors import ValidationError


def encode_text(value: str, field_name: str = "value") -> bytes:
    """
    Return the UTF-8 bytes of a text value.

    Any ``str`` is accepted, including empty strings and NUL characters,
    as long as it has a UTF-8 encoding (lone surrogates do not).

    Args:
        value: The string to encode
        field_name: Name of the field for error messages

    Returns:
        UTF-8 encoded bytes

    Raises:
        ValidationError: If value is not a string or cannot be encoded
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")

    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationError(f"{field_name} is not valid Unicode text") from e
