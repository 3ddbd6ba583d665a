"""Utility functions for DX7Dump."""

from dx7dump.utils.checksum import calculate_dx7_checksum, verify_checksum
from dx7dump.utils.lcd import lcd_to_text, name_hex

__all__ = [
    "calculate_dx7_checksum",
    "verify_checksum",
    "lcd_to_text",
    "name_hex",
]
