"""
DX7 SysEx dump containers.

Bulk dump (32 voices, packed):
    F0 43 0n 09 20 00 [4096 bytes: 32 x 128-byte voices] CS F7

Single voice dump (unpacked):
    F0 43 0n 00 01 1B [155 bytes: one voice] CS F7

Where:
    - 0n: Sub-status (high nibble, 0 = voice data) and MIDI channel (low nibble)
    - 09 / 00: Format number (32 voices / 1 voice)
    - 20 00 / 01 1B: Byte count, two 7-bit bytes (4096 / 155)
    - CS: Checksum over the voice data only
"""

from typing import ClassVar, List, Sequence, Union

from dx7dump.formats.layout import (
    PACKED_NAME_OFFSET,
    PACKED_VOICE_SIZE,
    UNPACKED_VOICE_SIZE,
    ByteData,
    PackedVoice,
    UnpackedVoice,
)
from dx7dump.utils.checksum import calculate_dx7_checksum

# Constants
SYSEX_START = 0xF0
SYSEX_END = 0xF7
YAMAHA_ID = 0x43

HEADER_SIZE = 6
TRAILER_SIZE = 2

BANK_VOICE_COUNT = 32
BANK_FORMAT = 0x09
BANK_SIZE_BYTES = (0x20, 0x00)
BANK_PAYLOAD_SIZE = BANK_VOICE_COUNT * PACKED_VOICE_SIZE
BANK_SYSEX_SIZE = HEADER_SIZE + BANK_PAYLOAD_SIZE + TRAILER_SIZE

SINGLE_VOICE_FORMAT = 0x00
SINGLE_VOICE_SIZE_BYTES = (0x01, 0x1B)
SINGLE_VOICE_PAYLOAD_SIZE = UNPACKED_VOICE_SIZE
SINGLE_VOICE_SYSEX_SIZE = HEADER_SIZE + SINGLE_VOICE_PAYLOAD_SIZE + TRAILER_SIZE

BANK_HEADER = bytes([SYSEX_START, YAMAHA_ID, 0x00, BANK_FORMAT, *BANK_SIZE_BYTES])
SINGLE_VOICE_HEADER = bytes(
    [SYSEX_START, YAMAHA_ID, 0x00, SINGLE_VOICE_FORMAT, *SINGLE_VOICE_SIZE_BYTES]
)

# Header offsets
OFFSET_START = 0
OFFSET_VENDOR = 1
OFFSET_SUB_STATUS = 2
OFFSET_FORMAT = 3
OFFSET_SIZE_MSB = 4
OFFSET_SIZE_LSB = 5


class SysExDump:
    """
    A complete DX7 SysEx message held in a fixed-size buffer.

    The buffer length is checked once on construction; all accessors read
    from fixed offsets after that. Subclasses set SIZE and HEADER.
    """

    SIZE: ClassVar[int] = 0
    HEADER: ClassVar[bytes] = b""

    def __init__(self, data: ByteData):
        if len(data) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} must be {self.SIZE} bytes, got {len(data)}"
            )
        self.data = bytearray(data)

    @classmethod
    def from_payload(cls, payload: ByteData):
        """
        Wrap a headerless payload in a canonical header.

        The checksum and end marker are left as zero; they are not part of
        the original data.
        """
        expected = cls.SIZE - HEADER_SIZE - TRAILER_SIZE
        if len(payload) != expected:
            raise ValueError(f"Payload must be {expected} bytes, got {len(payload)}")
        return cls(cls.HEADER + bytes(payload) + bytes(TRAILER_SIZE))

    @property
    def start(self) -> int:
        return self.data[OFFSET_START]

    @property
    def vendor_id(self) -> int:
        return self.data[OFFSET_VENDOR]

    @property
    def sub_status(self) -> int:
        """High nibble of the sub-status/channel byte."""
        return self.data[OFFSET_SUB_STATUS] >> 4

    @property
    def channel(self) -> int:
        """MIDI channel (0-15) from the low nibble of the sub-status byte."""
        return self.data[OFFSET_SUB_STATUS] & 0x0F

    @property
    def format_id(self) -> int:
        return self.data[OFFSET_FORMAT]

    @property
    def size_bytes(self) -> tuple:
        return self.data[OFFSET_SIZE_MSB], self.data[OFFSET_SIZE_LSB]

    @property
    def declared_size(self) -> int:
        """Byte count from the two 7-bit size bytes."""
        msb, lsb = self.size_bytes
        return ((msb & 0x7F) << 7) | (lsb & 0x7F)

    @property
    def payload(self) -> bytes:
        return bytes(self.data[HEADER_SIZE : self.SIZE - TRAILER_SIZE])

    @property
    def checksum(self) -> int:
        return self.data[self.SIZE - 2]

    @checksum.setter
    def checksum(self, value: int) -> None:
        self.data[self.SIZE - 2] = value & 0x7F

    @property
    def end(self) -> int:
        return self.data[self.SIZE - 1]

    @property
    def checksum_offset(self) -> int:
        return self.SIZE - 2

    @property
    def end_offset(self) -> int:
        return self.SIZE - 1

    def calculate_checksum(self) -> int:
        """Checksum of the current payload."""
        return calculate_dx7_checksum(self.data[HEADER_SIZE : self.SIZE - TRAILER_SIZE])

    def to_bytes(self) -> bytes:
        return bytes(self.data)


class BankDump(SysExDump):
    """
    32-voice bulk dump.

    Example:
        bank = BankDump(open("rom1a.syx", "rb").read())
        for number, voice in enumerate(bank.voices, 1):
            print(number, voice.name)
    """

    SIZE = BANK_SYSEX_SIZE
    HEADER = BANK_HEADER

    @classmethod
    def from_voices(cls, voices: Sequence[Union[PackedVoice, ByteData]]) -> "BankDump":
        """
        Build a canonical bank from 32 voices.

        Args:
            voices: PackedVoice objects or 128-byte packed records
        """
        if len(voices) != BANK_VOICE_COUNT:
            raise ValueError(f"A bank holds {BANK_VOICE_COUNT} voices, got {len(voices)}")

        payload = bytearray()
        for voice in voices:
            record = voice.to_bytes() if isinstance(voice, PackedVoice) else bytes(voice)
            if len(record) != PACKED_VOICE_SIZE:
                raise ValueError(f"Voice must be {PACKED_VOICE_SIZE} bytes, got {len(record)}")
            payload.extend(record)

        bank = cls.from_payload(payload)
        bank.checksum = bank.calculate_checksum()
        bank.data[bank.end_offset] = SYSEX_END
        return bank

    def voice_offset(self, index: int) -> int:
        """Buffer offset of voice ``index`` (0-31)."""
        if not 0 <= index < BANK_VOICE_COUNT:
            raise IndexError(f"Voice index must be 0-{BANK_VOICE_COUNT - 1}, got {index}")
        return HEADER_SIZE + index * PACKED_VOICE_SIZE

    def voice_bytes(self, index: int) -> bytes:
        """Raw 128-byte packed record of voice ``index``."""
        offset = self.voice_offset(index)
        return bytes(self.data[offset : offset + PACKED_VOICE_SIZE])

    def voice_name_bytes(self, index: int) -> bytes:
        offset = self.voice_offset(index) + PACKED_NAME_OFFSET
        return bytes(self.data[offset : offset + PACKED_VOICE_SIZE - PACKED_NAME_OFFSET])

    def voice(self, index: int) -> PackedVoice:
        return PackedVoice.from_bytes(self.voice_bytes(index))

    @property
    def voices(self) -> List[PackedVoice]:
        return [self.voice(i) for i in range(BANK_VOICE_COUNT)]


class SingleVoiceDump(SysExDump):
    """Single voice dump holding one unpacked voice."""

    SIZE = SINGLE_VOICE_SYSEX_SIZE
    HEADER = SINGLE_VOICE_HEADER

    @classmethod
    def from_voice(cls, voice: Union[UnpackedVoice, ByteData]) -> "SingleVoiceDump":
        """Build a canonical single voice dump."""
        record = voice.to_bytes() if isinstance(voice, UnpackedVoice) else bytes(voice)
        dump = cls.from_payload(record)
        dump.checksum = dump.calculate_checksum()
        dump.data[dump.end_offset] = SYSEX_END
        return dump

    @property
    def voice(self) -> UnpackedVoice:
        return UnpackedVoice.from_bytes(self.payload)

    @property
    def name_bytes(self) -> bytes:
        return self.payload[-10:]
