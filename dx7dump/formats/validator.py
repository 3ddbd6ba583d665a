"""
Structural validation of DX7 SysEx dumps.

Bank dumps are checked in a fixed order. Broken message boundaries (start
marker, vendor id, end marker) are fatal and stop the checks. A wrong
sub-status, format number, byte count or checksum is recoverable: every one
of them is reported and the bank is marked as needing repair.

Single voice dumps are checked all-or-nothing and summarised as an error
code with one bit per failed check.
"""

import logging
from dataclasses import dataclass, field
from enum import IntFlag
from typing import List, Optional

from dx7dump.formats.sysex import (
    BANK_FORMAT,
    BANK_PAYLOAD_SIZE,
    BANK_SIZE_BYTES,
    OFFSET_FORMAT,
    OFFSET_SIZE_MSB,
    OFFSET_SUB_STATUS,
    OFFSET_VENDOR,
    SINGLE_VOICE_FORMAT,
    SINGLE_VOICE_SIZE_BYTES,
    SYSEX_END,
    SYSEX_START,
    YAMAHA_ID,
    BankDump,
    SingleVoiceDump,
)

logger = logging.getLogger(__name__)

SEVERITY_FATAL = "fatal"
SEVERITY_WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "fatal" or "warning"
    area: str
    offset: int
    message: str
    expected: str = ""
    actual: str = ""


@dataclass
class ValidationReport:
    """
    Result of validating a bank dump.

    Attributes:
        fatal: The fatal issue that stopped validation, if any
        warnings: Recoverable deviations, in check order
        needs_repair: True when at least one deviation can be repaired
        structural: False when the header was synthesised instead of read
    """

    fatal: Optional[ValidationIssue] = None
    warnings: List[ValidationIssue] = field(default_factory=list)
    needs_repair: bool = False
    structural: bool = True

    @property
    def passed(self) -> bool:
        return self.fatal is None

    @property
    def soft_error(self) -> bool:
        """True when the bank is usable but has recoverable problems."""
        return self.passed and bool(self.warnings)

    @property
    def fatal_message(self) -> str:
        return self.fatal.message if self.fatal else ""

    @property
    def messages(self) -> List[str]:
        """Human-readable diagnostics, fatal first."""
        issues = ([self.fatal] if self.fatal else []) + self.warnings
        return [issue.message for issue in issues]


class BankValidator:
    """Validate a 32-voice bulk dump."""

    def __init__(self, dump: BankDump):
        self.dump = dump
        self.report = ValidationReport()

    def validate(self) -> ValidationReport:
        """Run all checks and return the report."""
        self.report = ValidationReport()

        checks = (
            self._check_start,
            self._check_vendor,
            self._check_sub_status,
            self._check_format,
            self._check_size,
            self._check_end,
            self._check_checksum,
        )
        for check in checks:
            check()
            if self.report.fatal is not None:
                break

        if self.report.fatal:
            logger.debug("Bank failed validation: %s", self.report.fatal.message)
        elif self.report.needs_repair:
            logger.debug("Bank needs repair: %d issue(s)", len(self.report.warnings))

        return self.report

    def _fatal(self, area: str, offset: int, message: str, expected: int, actual: int) -> None:
        self.report.fatal = ValidationIssue(
            SEVERITY_FATAL, area, offset, message, f"0x{expected:02X}", f"0x{actual:02X}"
        )

    def _warn(self, area: str, offset: int, message: str, expected: str, actual: str) -> None:
        self.report.warnings.append(
            ValidationIssue(SEVERITY_WARNING, area, offset, message, expected, actual)
        )
        self.report.needs_repair = True

    def _check_start(self) -> None:
        if self.dump.start != SYSEX_START:
            self._fatal("Start", 0, "Did not find sysex start F0", SYSEX_START, self.dump.start)

    def _check_vendor(self) -> None:
        if self.dump.vendor_id != YAMAHA_ID:
            self._fatal(
                "Vendor", OFFSET_VENDOR, "Did not find Yamaha ID 0x43", YAMAHA_ID, self.dump.vendor_id
            )

    def _check_sub_status(self) -> None:
        # Only the sub-status nibble is checked; the low nibble is the channel
        if self.dump.sub_status != 0:
            self._warn(
                "Sub-status",
                OFFSET_SUB_STATUS,
                f"Did not find substatus 0. (substatus={self.dump.sub_status})",
                "0",
                str(self.dump.sub_status),
            )

    def _check_format(self) -> None:
        if self.dump.format_id != BANK_FORMAT:
            self._warn(
                "Format",
                OFFSET_FORMAT,
                "Did not find format 9 (32 voices)",
                f"0x{BANK_FORMAT:02X}",
                f"0x{self.dump.format_id:02X}",
            )

    def _check_size(self) -> None:
        msb, lsb = self.dump.size_bytes
        if (msb, lsb) != BANK_SIZE_BYTES:
            self._warn(
                "Byte Count",
                OFFSET_SIZE_MSB,
                f"Declared data byte count is not {BANK_PAYLOAD_SIZE}. "
                f"(sizeMSB=0x{msb:X}, sizeLSB=0x{lsb:X})",
                "0x20 0x00",
                f"0x{msb:02X} 0x{lsb:02X} ({self.dump.declared_size} bytes)",
            )

    def _check_end(self) -> None:
        if self.dump.end != SYSEX_END:
            self._fatal(
                "End", self.dump.end_offset, "Did not find sysex end F7", SYSEX_END, self.dump.end
            )

    def _check_checksum(self) -> None:
        calculated = self.dump.calculate_checksum()
        if calculated != self.dump.checksum:
            self._warn(
                "Checksum",
                self.dump.checksum_offset,
                f"CHECKSUM FAILED: Should have been 0x{calculated:X}",
                f"0x{calculated:02X}",
                f"0x{self.dump.checksum:02X}",
            )


def validate_bank(dump: BankDump) -> ValidationReport:
    """
    Validate a bank dump.

    Args:
        dump: Bank read from a 4104-byte file

    Returns:
        ValidationReport
    """
    return BankValidator(dump).validate()


def headerless_bank_report(payload_size: int = BANK_PAYLOAD_SIZE) -> ValidationReport:
    """
    Report for a bank built from a headerless payload.

    The header was synthesised, so there is nothing to check structurally;
    the file always needs repair to become a valid sysex dump.
    """
    report = ValidationReport(structural=False, needs_repair=True)
    report.warnings.append(
        ValidationIssue(
            SEVERITY_WARNING,
            "Header",
            0,
            f"File seems to be a headerless dump ({payload_size} Bytes)",
            "SysEx header",
            "none",
        )
    )
    return report


class SingleVoiceError(IntFlag):
    """Error bits of a single voice dump check."""

    NONE = 0
    END = 1
    CHECKSUM = 2
    SIZE_LSB = 4
    SIZE_MSB = 8
    FORMAT = 16
    SUB_STATUS = 32
    VENDOR = 64
    START = 128


STRUCTURAL_ERRORS = (
    SingleVoiceError.START
    | SingleVoiceError.VENDOR
    | SingleVoiceError.SUB_STATUS
    | SingleVoiceError.FORMAT
    | SingleVoiceError.SIZE_MSB
    | SingleVoiceError.SIZE_LSB
    | SingleVoiceError.END
)

SINGLE_VOICE_ERROR_MESSAGES = {
    SingleVoiceError.START: "Did not find sysex start F0",
    SingleVoiceError.VENDOR: "Did not find Yamaha ID 0x43",
    SingleVoiceError.SUB_STATUS: "Did not find substatus 0",
    SingleVoiceError.FORMAT: "Did not find format 0 (1 voice)",
    SingleVoiceError.SIZE_MSB: "Declared data byte count MSB is not 0x01",
    SingleVoiceError.SIZE_LSB: "Declared data byte count LSB is not 0x1B",
    SingleVoiceError.CHECKSUM: "CHECKSUM FAILED",
    SingleVoiceError.END: "Did not find sysex end F7",
}


@dataclass
class SingleVoiceReport:
    """
    Result of validating a single voice dump.

    Attributes:
        error: Combined error bits, NONE when the dump is valid
        calculated_checksum: Checksum of the payload, None if not evaluated
        stored_checksum: Checksum byte from the file
        structural: False when the header was synthesised instead of read
    """

    error: SingleVoiceError = SingleVoiceError.NONE
    calculated_checksum: Optional[int] = None
    stored_checksum: int = 0
    structural: bool = True

    @property
    def passed(self) -> bool:
        return self.error == SingleVoiceError.NONE

    @property
    def code(self) -> int:
        return int(self.error)

    @property
    def messages(self) -> List[str]:
        messages = []
        for flag, text in SINGLE_VOICE_ERROR_MESSAGES.items():
            if self.error & flag:
                if flag == SingleVoiceError.CHECKSUM:
                    text = f"{text}: Should have been 0x{self.calculated_checksum:02X}"
                messages.append(text)
        return messages


def validate_single_voice(dump: SingleVoiceDump) -> SingleVoiceReport:
    """
    Validate a single voice dump.

    The checksum is only verified when the message structure is intact.

    Args:
        dump: Single voice dump read from a 163-byte file

    Returns:
        SingleVoiceReport
    """
    error = SingleVoiceError.NONE
    msb, lsb = dump.size_bytes

    if dump.start != SYSEX_START:
        error |= SingleVoiceError.START
    if dump.vendor_id != YAMAHA_ID:
        error |= SingleVoiceError.VENDOR
    if dump.sub_status != 0:
        error |= SingleVoiceError.SUB_STATUS
    if dump.format_id != SINGLE_VOICE_FORMAT:
        error |= SingleVoiceError.FORMAT
    if msb != SINGLE_VOICE_SIZE_BYTES[0]:
        error |= SingleVoiceError.SIZE_MSB
    if lsb != SINGLE_VOICE_SIZE_BYTES[1]:
        error |= SingleVoiceError.SIZE_LSB
    if dump.end != SYSEX_END:
        error |= SingleVoiceError.END

    report = SingleVoiceReport(error=error, stored_checksum=dump.checksum)

    if not error & STRUCTURAL_ERRORS:
        report.calculated_checksum = dump.calculate_checksum()
        if report.calculated_checksum != dump.checksum:
            report.error |= SingleVoiceError.CHECKSUM

    logger.debug("Single voice check finished with code 0x%02X", report.code)
    return report


def headerless_single_voice_report() -> SingleVoiceReport:
    """Report for a single voice built from a headerless payload."""
    return SingleVoiceReport(structural=False)
