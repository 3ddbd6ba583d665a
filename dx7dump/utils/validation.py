"""
Data validation utilities for DX7 voice data.
"""

from typing import Sequence


class ValidationError(Exception):
    """Raised when a voice parameter does not fit its field."""

    pass


def validate_field(value: int, bits: int, name: str = "value") -> None:
    """
    Validate that a value fits into a bit field.

    Args:
        value: The value to validate
        bits: Width of the field in bits
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is negative or too wide
    """
    limit = (1 << bits) - 1
    if not 0 <= value <= limit:
        raise ValidationError(f"{name} must be 0-{limit}, got {value}")


def validate_byte(value: int, name: str = "value") -> None:
    """Validate that a value fits into one byte (0-255)."""
    validate_field(value, 8, name)


def validate_group(values: Sequence[int], count: int, name: str) -> None:
    """
    Validate a fixed-size group of byte values (envelope rates, levels).

    Raises:
        ValidationError: If the group has the wrong size or a value is out of range
    """
    if len(values) != count:
        raise ValidationError(f"{name} must have {count} values, got {len(values)}")

    for i, value in enumerate(values):
        validate_byte(value, f"{name}[{i}]")


def validate_name_bytes(name: bytes, length: int = 10) -> None:
    """
    Validate a raw voice name.

    Voice names are LCD character codes, not text, so only the length is checked.

    Raises:
        ValidationError: If the name has the wrong length
    """
    if len(name) != length:
        raise ValidationError(f"Voice name must be {length} bytes, got {len(name)}")
