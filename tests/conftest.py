"""Test configuration and fixtures."""

import pytest

from dx7dump.formats.layout import PackedVoice, UnpackedVoice
from dx7dump.formats.sysex import BANK_HEADER, BankDump, SingleVoiceDump


def make_voice(name: bytes = b"INIT VOICE", **params) -> PackedVoice:
    """Init voice with some global parameters changed."""
    voice = PackedVoice(name=name)
    for key, value in params.items():
        setattr(voice, key, value)
    return voice


def numbered_voices():
    """32 voices that all differ in their sound data."""
    return [make_voice(f"VOICE {i + 1:<4}".encode("ascii"), lfo_speed=i) for i in range(32)]


@pytest.fixture
def zero_bank_data():
    """Canonical bank with an all-zero payload (checksum 0x00)."""
    return BANK_HEADER + bytes(4096) + bytes([0x00, 0xF7])


@pytest.fixture
def init_bank():
    """Canonical bank of 32 init voices."""
    return BankDump.from_voices([PackedVoice() for _ in range(32)])


@pytest.fixture
def numbered_bank():
    """Canonical bank of 32 distinct voices."""
    return BankDump.from_voices(numbered_voices())


@pytest.fixture
def single_voice_data():
    """Canonical single voice dump of the init voice."""
    return SingleVoiceDump.from_voice(UnpackedVoice()).to_bytes()


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes bytes to a file in a temp directory."""

    def _write(data: bytes, name: str = "bank.syx"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(bytes(data))
        return path

    return _write
