"""
DX7 dump file reader.

DX7 files carry no magic number beyond the sysex header, so the shape of a
file is decided by its length alone:

    4104 bytes  32-voice bulk dump
    4096 bytes  headerless 32-voice payload
     163 bytes  single voice dump
     155 bytes  headerless single voice payload

Anything longer than a bulk dump is too big; every other length is too small.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from dx7dump.formats.sysex import (
    BANK_PAYLOAD_SIZE,
    BANK_SYSEX_SIZE,
    SINGLE_VOICE_PAYLOAD_SIZE,
    SINGLE_VOICE_SYSEX_SIZE,
    BankDump,
    SingleVoiceDump,
)

logger = logging.getLogger(__name__)


class DumpError(Exception):
    """Base class for errors while processing a dump file."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class FileSizeError(DumpError):
    """The file length does not match any known dump shape."""

    def __init__(self, message: str, path: Optional[Path] = None, size: int = 0):
        super().__init__(message, path)
        self.size = size


class FileReadError(DumpError):
    """The file could not be opened or was read short."""


class DumpShape(Enum):
    """Shapes a dump file can take."""

    FULL_BANK = "bank"
    HEADERLESS_BANK = "headerless bank"
    FULL_SINGLE_VOICE = "single voice"
    HEADERLESS_SINGLE_VOICE = "headerless single voice"
    TOO_SMALL = "too small"
    TOO_BIG = "too big"

    @property
    def is_bank(self) -> bool:
        return self in (DumpShape.FULL_BANK, DumpShape.HEADERLESS_BANK)

    @property
    def is_single_voice(self) -> bool:
        return self in (DumpShape.FULL_SINGLE_VOICE, DumpShape.HEADERLESS_SINGLE_VOICE)

    @property
    def is_headerless(self) -> bool:
        return self in (DumpShape.HEADERLESS_BANK, DumpShape.HEADERLESS_SINGLE_VOICE)

    @property
    def is_valid(self) -> bool:
        return self not in (DumpShape.TOO_SMALL, DumpShape.TOO_BIG)


# Number of bytes that must be read from the file for each shape
SHAPE_SIZES = {
    DumpShape.FULL_BANK: BANK_SYSEX_SIZE,
    DumpShape.HEADERLESS_BANK: BANK_PAYLOAD_SIZE,
    DumpShape.FULL_SINGLE_VOICE: SINGLE_VOICE_SYSEX_SIZE,
    DumpShape.HEADERLESS_SINGLE_VOICE: SINGLE_VOICE_PAYLOAD_SIZE,
}


def classify(length: int) -> DumpShape:
    """
    Classify a file by its length.

    Args:
        length: File size in bytes

    Returns:
        DumpShape
    """
    for shape, size in SHAPE_SIZES.items():
        if length == size:
            return shape

    if length > BANK_SYSEX_SIZE:
        return DumpShape.TOO_BIG
    return DumpShape.TOO_SMALL


@dataclass
class DumpFile:
    """
    One dump file read into memory.

    Attributes:
        path: Source file
        shape: Shape decided from the file length
        size: File length in bytes
        bank: Bank dump (bank shapes only)
        single_voice: Single voice dump (single voice shapes only)
    """

    path: Path
    shape: DumpShape
    size: int
    bank: Optional[BankDump] = field(default=None, repr=False)
    single_voice: Optional[SingleVoiceDump] = field(default=None, repr=False)

    @property
    def headerless(self) -> bool:
        return self.shape.is_headerless


def read_dump(filepath: Union[str, Path]) -> DumpFile:
    """
    Read and classify a dump file.

    Headerless payloads are wrapped in a synthesised canonical header.

    Args:
        filepath: Path to the file

    Returns:
        DumpFile

    Raises:
        FileReadError: If the file cannot be opened or is read short
        FileSizeError: If the file length matches no known shape
    """
    filepath = Path(filepath)

    try:
        with open(filepath, "rb") as f:
            f.seek(0, 2)
            size = f.tell()
            f.seek(0)

            shape = classify(size)
            logger.debug("%s: %d bytes, classified as %s", filepath, size, shape.value)

            if shape == DumpShape.TOO_BIG:
                raise FileSizeError(f"File too big ({size} Bytes)", filepath, size)
            if shape == DumpShape.TOO_SMALL:
                raise FileSizeError(f"File too small ({size} Bytes)", filepath, size)

            data = f.read(SHAPE_SIZES[shape])
    except OSError as e:
        raise FileReadError(f"Can't open the file: {e.strerror or e}", filepath) from e

    if len(data) != SHAPE_SIZES[shape]:
        raise FileReadError(
            f"File read error ({len(data)} of {SHAPE_SIZES[shape]} Bytes)", filepath
        )

    return parse_dump(data, shape, filepath, size)


def parse_dump(
    data: bytes,
    shape: Optional[DumpShape] = None,
    filepath: Union[str, Path] = "<memory>",
    size: Optional[int] = None,
) -> DumpFile:
    """
    Build a DumpFile from bytes already in memory.

    Raises:
        FileSizeError: If the data length matches no known shape
    """
    filepath = Path(filepath)
    if shape is None:
        shape = classify(len(data))
    if size is None:
        size = len(data)
    if not shape.is_valid:
        raise FileSizeError(f"File {shape.value} ({size} Bytes)", filepath, size)

    dump = DumpFile(path=filepath, shape=shape, size=size)

    if shape == DumpShape.FULL_BANK:
        dump.bank = BankDump(data)
    elif shape == DumpShape.HEADERLESS_BANK:
        dump.bank = BankDump.from_payload(data)
    elif shape == DumpShape.FULL_SINGLE_VOICE:
        dump.single_voice = SingleVoiceDump(data)
    else:
        dump.single_voice = SingleVoiceDump.from_payload(data)

    return dump
