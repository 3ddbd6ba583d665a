"""
DX7 SysEx checksum calculation utilities.

DX7 bulk dump messages end with a checksum byte calculated as:
1. Sum the low 7 bits of every data byte in an 8-bit counter
   (the counter wraps around at 256)
2. Take the two's complement of the sum
3. Keep the lower 7 bits

Header bytes (F0, 43, sub-status, format, byte count) and the trailing
F7 are not part of the sum. For a 32-voice bank the data is the 4096-byte
packed payload; for a single voice it is the 155-byte unpacked record.
"""

from typing import List, Union


def calculate_dx7_checksum(data: Union[bytes, bytearray, List[int]]) -> int:
    """
    Calculate the DX7 checksum for a block of voice data.

    Args:
        data: Payload bytes (packed bank or unpacked single voice)

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_dx7_checksum(bytes(4096))
        0
        >>> calculate_dx7_checksum(bytes([0x01]))
        127
    """
    total = 0
    for byte in data:
        total = (total + (byte & 0x7F)) & 0xFF

    # Two's complement: flip the bits and add 1
    total = (~total + 1) & 0xFF

    return total & 0x7F


def verify_checksum(data: Union[bytes, bytearray, List[int]], expected_checksum: int) -> bool:
    """
    Verify a DX7 checksum.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_dx7_checksum(data) == expected_checksum
