"""
DX7 bank repair and writing.

Repairs a bank whose data is intact but whose header, byte count or checksum
is wrong (or missing, for headerless files), and writes it back as a
canonical 4104-byte bulk dump.
"""

import errno
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dx7dump.formats.reader import DumpError
from dx7dump.formats.sysex import (
    BANK_FORMAT,
    BANK_SIZE_BYTES,
    OFFSET_FORMAT,
    OFFSET_SIZE_LSB,
    OFFSET_SIZE_MSB,
    OFFSET_START,
    OFFSET_SUB_STATUS,
    OFFSET_VENDOR,
    SYSEX_END,
    SYSEX_START,
    YAMAHA_ID,
    BankDump,
)

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".ORIG"


class RepairError(DumpError):
    """Raised when a repaired bank cannot be written."""

    def __init__(self, message: str, path: Path, cause: Optional[OSError] = None):
        super().__init__(message, path)
        self.cause = cause


def backup_path(filepath: Union[str, Path]) -> Path:
    """Path of the backup copy for ``filepath`` (``<name>.ORIG``)."""
    filepath = Path(filepath)
    return filepath.with_name(filepath.name + BACKUP_SUFFIX)


def canonicalize(dump: BankDump) -> BankDump:
    """
    Force header, checksum and end marker of a bank to canonical values.

    The channel nibble is reset along with the sub-status. The dump is
    modified in place and returned.
    """
    data = dump.data
    data[OFFSET_START] = SYSEX_START
    data[OFFSET_VENDOR] = YAMAHA_ID
    data[OFFSET_SUB_STATUS] = 0x00
    data[OFFSET_FORMAT] = BANK_FORMAT
    data[OFFSET_SIZE_MSB], data[OFFSET_SIZE_LSB] = BANK_SIZE_BYTES
    dump.checksum = dump.calculate_checksum()
    data[dump.end_offset] = SYSEX_END
    return dump


class BankWriter:
    """
    Writer for repaired DX7 banks.

    Example:
        dump = read_dump("broken.syx")
        BankWriter.repair(dump.bank, "broken.syx")
    """

    def __init__(self, backup: bool = True):
        """
        Initialize writer.

        Args:
            backup: Rename the original file to ``<name>.ORIG`` before writing
        """
        self.backup = backup

    @classmethod
    def repair(cls, dump: BankDump, filepath: Union[str, Path], backup: bool = True) -> None:
        """
        Canonicalise a bank and write it over ``filepath``.

        Args:
            dump: Bank to repair (modified in place)
            filepath: File to overwrite
            backup: Keep the original file as ``<name>.ORIG``

        Raises:
            RepairError: If the backup or the write fails
        """
        writer = cls(backup=backup)
        canonicalize(dump)
        writer.write(dump, filepath)

    def write(self, dump: BankDump, filepath: Union[str, Path]) -> None:
        """
        Write a bank to ``filepath``, optionally backing up the existing file.

        Nothing is written when a requested backup fails.

        Raises:
            RepairError: If the backup or the write fails
        """
        filepath = Path(filepath)

        if self.backup:
            self._backup(filepath)

        data = dump.to_bytes()
        try:
            with open(filepath, "wb") as f:
                written = f.write(data)
        except OSError as e:
            raise RepairError(
                f"Can't open the file for writing: {filepath}. {e.strerror or e}", filepath, e
            ) from e

        if written != len(data):
            raise RepairError(
                f"Error writing to file: {filepath}. Wrote {written} of {len(data)} bytes",
                filepath,
            )

        logger.debug("Wrote repaired bank to %s", filepath)

    def _backup(self, filepath: Path) -> None:
        target = backup_path(filepath)

        # os.rename silently replaces an existing target on POSIX
        if target.exists():
            error = FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(target))
            raise RepairError(
                f"File could not be renamed for backup. File-fix aborted. {error.strerror}",
                filepath,
                error,
            )

        try:
            os.rename(filepath, target)
        except OSError as e:
            raise RepairError(
                f"File could not be renamed for backup. File-fix aborted. {e.strerror or e}",
                filepath,
                e,
            ) from e

        logger.debug("Backed up %s to %s", filepath, target)


def repair_bank(dump: BankDump, filepath: Union[str, Path], backup: bool = True) -> None:
    """
    Repair a bank and write it over ``filepath``.

    Convenience wrapper around ``BankWriter.repair``.
    """
    BankWriter.repair(dump, filepath, backup=backup)
