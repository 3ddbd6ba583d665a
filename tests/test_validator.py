"""Tests for bank and single voice validation."""

from dx7dump.formats.sysex import BankDump, SingleVoiceDump
from dx7dump.formats.validator import (
    SingleVoiceError,
    headerless_bank_report,
    headerless_single_voice_report,
    validate_bank,
    validate_single_voice,
)
from dx7dump.formats.writer import canonicalize


def corrupt(data: bytes, **changes) -> bytearray:
    """Copy ``data`` with single bytes replaced, e.g. corrupt(data, b4103=0)."""
    buffer = bytearray(data)
    for key, value in changes.items():
        buffer[int(key[1:])] = value
    return buffer


class TestBankValidator:
    """Test cases for 32-voice bulk dump validation."""

    def test_zero_bank_passes(self, zero_bank_data):
        """A canonical all-zero bank passes without repair."""
        report = validate_bank(BankDump(zero_bank_data))

        assert report.passed
        assert not report.needs_repair
        assert not report.soft_error
        assert report.messages == []

    def test_generated_bank_passes(self, init_bank):
        """Banks built from voices are canonical."""
        report = validate_bank(init_bank)

        assert report.passed
        assert not report.needs_repair

    def test_checksum_mismatch(self, zero_bank_data):
        """A wrong checksum is recoverable and repaired back to 0x00."""
        dump = BankDump(corrupt(zero_bank_data, b4102=0x01))

        report = validate_bank(dump)

        assert report.passed
        assert report.needs_repair
        assert report.soft_error
        assert report.messages == ["CHECKSUM FAILED: Should have been 0x0"]

        canonicalize(dump)
        assert dump.checksum == 0x00
        assert validate_bank(dump).messages == []

    def test_missing_start_is_fatal(self, zero_bank_data):
        """Without F0 validation stops."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b0=0x00)))

        assert not report.passed
        assert report.fatal_message == "Did not find sysex start F0"

    def test_wrong_vendor_is_fatal(self, zero_bank_data):
        """A non-Yamaha ID is fatal."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b1=0x42)))

        assert not report.passed
        assert report.fatal_message == "Did not find Yamaha ID 0x43"
        assert report.fatal.expected == "0x43"
        assert report.fatal.actual == "0x42"

    def test_missing_end_is_fatal(self, zero_bank_data):
        """Without F7 validation fails after the header checks."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b4103=0x00)))

        assert not report.passed
        assert report.fatal_message == "Did not find sysex end F7"

    def test_fatal_stops_later_checks(self, zero_bank_data):
        """No recoverable issues are collected after a fatal one."""
        data = corrupt(zero_bank_data, b0=0x00, b3=0x08, b4102=0x01)

        report = validate_bank(BankDump(data))

        assert not report.passed
        assert report.warnings == []
        assert report.messages == ["Did not find sysex start F0"]

    def test_channel_is_not_checked(self, zero_bank_data):
        """Only the sub-status nibble matters; any channel passes."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b2=0x0F)))

        assert report.passed
        assert not report.needs_repair

    def test_sub_status(self, zero_bank_data):
        """A non-zero sub-status is recoverable."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b2=0x15)))

        assert report.passed
        assert report.needs_repair
        assert report.messages == ["Did not find substatus 0. (substatus=1)"]

    def test_format(self, zero_bank_data):
        """A format other than 9 is recoverable."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b3=0x00)))

        assert report.needs_repair
        assert report.messages == ["Did not find format 9 (32 voices)"]

    def test_byte_count(self, zero_bank_data):
        """A declared byte count other than 0x20 0x00 is recoverable."""
        report = validate_bank(BankDump(corrupt(zero_bank_data, b4=0x01, b5=0x1B)))

        assert report.needs_repair
        assert report.messages == [
            "Declared data byte count is not 4096. (sizeMSB=0x1, sizeLSB=0x1B)"
        ]
        assert report.warnings[0].expected == "0x20 0x00"
        assert report.warnings[0].actual == "0x01 0x1B (155 bytes)"
        assert BankDump(zero_bank_data).declared_size == 4096

    def test_warnings_in_check_order(self, zero_bank_data):
        """Recoverable issues are reported in header order, checksum last."""
        data = corrupt(zero_bank_data, b2=0x20, b3=0x01, b4=0x00, b4102=0x05)

        report = validate_bank(BankDump(data))

        assert [issue.area for issue in report.warnings] == [
            "Sub-status",
            "Format",
            "Byte Count",
            "Checksum",
        ]

    def test_headerless_report(self):
        """Headerless banks are not checked and always need repair."""
        report = headerless_bank_report(4096)

        assert report.passed
        assert report.needs_repair
        assert not report.structural
        assert report.messages == ["File seems to be a headerless dump (4096 Bytes)"]


class TestSingleVoiceValidator:
    """Test cases for single voice dump validation."""

    def test_valid(self, single_voice_data):
        """A canonical single voice dump has error code 0."""
        report = validate_single_voice(SingleVoiceDump(single_voice_data))

        assert report.passed
        assert report.code == 0
        assert report.messages == []

    def test_checksum(self, single_voice_data):
        """A wrong checksum sets bit 1."""
        dump = SingleVoiceDump(single_voice_data)
        expected = dump.checksum
        dump.checksum = (expected + 1) & 0x7F

        report = validate_single_voice(dump)

        assert report.code == SingleVoiceError.CHECKSUM == 2
        assert report.calculated_checksum == expected
        assert report.messages == [f"CHECKSUM FAILED: Should have been 0x{expected:02X}"]

    def test_structural_bits(self, single_voice_data):
        """Each structural deviation sets its own bit."""
        data = corrupt(single_voice_data, b1=0x42, b3=0x09)

        report = validate_single_voice(SingleVoiceDump(data))

        assert report.code == 64 | 16
        assert report.messages == ["Did not find Yamaha ID 0x43", "Did not find format 0 (1 voice)"]

    def test_all_structural_bits(self, single_voice_data):
        """A fully broken header sets every structural bit."""
        data = corrupt(single_voice_data, b0=0, b1=0, b2=0x10, b3=1, b4=0, b5=0, b162=0)

        report = validate_single_voice(SingleVoiceDump(data))

        assert report.code == 0xFD

    def test_checksum_skipped_on_broken_structure(self, single_voice_data):
        """The checksum is only verified when the structure is intact."""
        data = corrupt(single_voice_data, b0=0x00, b161=0x7F)

        report = validate_single_voice(SingleVoiceDump(data))

        assert report.code == SingleVoiceError.START
        assert report.calculated_checksum is None

    def test_headerless_report(self):
        """Headerless single voices are not checked."""
        report = headerless_single_voice_report()

        assert report.passed
        assert not report.structural
