"""Format handlers for DX7 bulk and single voice dumps."""

from dx7dump.formats.reader import (
    DumpError,
    DumpFile,
    DumpShape,
    FileReadError,
    FileSizeError,
    classify,
    read_dump,
)
from dx7dump.formats.sysex import BankDump, SingleVoiceDump
from dx7dump.formats.writer import BankWriter, RepairError, repair_bank

__all__ = [
    "DumpError",
    "DumpFile",
    "DumpShape",
    "FileReadError",
    "FileSizeError",
    "classify",
    "read_dump",
    "BankDump",
    "SingleVoiceDump",
    "BankWriter",
    "RepairError",
    "repair_bank",
]
