"""
Duplicate voice detection.

Two voices are duplicates when their packed records are identical apart
from the 10-byte name.
"""

from typing import List, Tuple

from dx7dump.formats.layout import PACKED_NAME_OFFSET
from dx7dump.formats.sysex import BANK_VOICE_COUNT, BankDump


def find_duplicates(dump: BankDump) -> List[Tuple[int, int]]:
    """
    Find duplicate voices within a bank.

    Args:
        dump: Bank to scan

    Returns:
        Zero-based (i, j) pairs with i < j, ordered by i then j
    """
    sounds = [dump.voice_bytes(i)[:PACKED_NAME_OFFSET] for i in range(BANK_VOICE_COUNT)]

    duplicates = []
    for i in range(BANK_VOICE_COUNT - 1):
        for j in range(i + 1, BANK_VOICE_COUNT):
            if sounds[i] == sounds[j]:
                duplicates.append((i, j))

    return duplicates
