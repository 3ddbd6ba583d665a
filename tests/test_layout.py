"""Tests for the DX7 voice layouts."""

import pytest

from dx7dump.formats.layout import (
    LFO_PMS_BITS,
    PACKED_NAME_OFFSET,
    PACKED_VOICE_SIZE,
    UNPACKED_NAME_OFFSET,
    UNPACKED_VOICE_SIZE,
    PackedOperator,
    PackedVoice,
    UnpackedOperator,
    UnpackedVoice,
    decode_algorithm,
    decode_curves,
    decode_feedback_key_sync,
    decode_lfo_flags,
    decode_oscillator,
    decode_rate_scale_detune,
    decode_sensitivities,
    encode_algorithm,
    encode_curves,
    encode_feedback_key_sync,
    encode_lfo_flags,
    encode_oscillator,
    encode_rate_scale_detune,
    encode_sensitivities,
)
from dx7dump.formats import layout, sysex
from dx7dump.formats.sysex import BankDump
from dx7dump.formats.unpack import unpack_operator, unpack_voice
from dx7dump.utils.validation import ValidationError, validate_field

# r1-r4, l1-l4, bp, ld, rd, curves, rs/detune, ams/kvs, ol, mode/coarse, fine
PACKED_OPERATOR = bytes([10, 20, 30, 40, 99, 98, 97, 0, 39, 1, 2, 0x0D, 0x3D, 0x1E, 88, 0x03, 50])


class TestByteGroups:
    """Test cases for bit-field byte groups."""

    def test_curves(self):
        """Byte 11: left curve bits 0-1, right curve bits 2-3."""
        assert decode_curves(0x0D) == (1, 3)
        assert encode_curves(1, 3) == 0x0D

    def test_rate_scale_detune(self):
        """Byte 12: rate scale bits 0-2, detune bits 3-6."""
        assert decode_rate_scale_detune(0x3D) == (5, 7)
        assert decode_rate_scale_detune(0x77) == (7, 14)
        assert encode_rate_scale_detune(5, 7) == 0x3D

    def test_sensitivities(self):
        """Byte 13: AMS bits 0-1, KVS bits 2-4."""
        assert decode_sensitivities(0x1E) == (2, 7)
        assert encode_sensitivities(2, 7) == 0x1E

    def test_oscillator(self):
        """Byte 15: mode bit 0, coarse bits 1-5."""
        assert decode_oscillator(0x3F) == (1, 31)
        assert decode_oscillator(0x02) == (0, 1)
        assert encode_oscillator(1, 31) == 0x3F

    def test_algorithm(self):
        """Byte 110: algorithm in bits 0-4."""
        assert decode_algorithm(0x1F) == 31
        assert decode_algorithm(0x7F) == 31
        assert encode_algorithm(31) == 0x1F

    def test_feedback_key_sync(self):
        """Byte 111: feedback bits 0-2, key sync bit 3."""
        assert decode_feedback_key_sync(0x0F) == (7, 1)
        assert decode_feedback_key_sync(0x08) == (0, 1)
        assert encode_feedback_key_sync(7, 1) == 0x0F

    def test_lfo_flags(self):
        """Byte 116: sync bit 0, wave bits 1-3, pitch mod sensitivity bits 4-6."""
        assert LFO_PMS_BITS == 3
        assert decode_lfo_flags(0x7B) == (1, 5, 7)
        assert decode_lfo_flags(0x70) == (0, 0, 7)
        assert encode_lfo_flags(1, 5, 7) == 0x7B

    def test_decoding_is_total(self):
        """Every 7-bit byte decodes, and re-encodes to the bits the group uses."""
        groups = [
            (decode_curves, encode_curves, 0x0F),
            (decode_rate_scale_detune, encode_rate_scale_detune, 0x7F),
            (decode_sensitivities, encode_sensitivities, 0x1F),
            (decode_oscillator, encode_oscillator, 0x3F),
            (decode_feedback_key_sync, encode_feedback_key_sync, 0x0F),
            (decode_lfo_flags, encode_lfo_flags, 0x7F),
        ]
        for decode, encode, mask in groups:
            for byte in range(128):
                assert encode(*decode(byte)) == byte & mask

    def test_encode_rejects_wide_values(self):
        """Values wider than their field are rejected."""
        with pytest.raises(ValidationError):
            encode_curves(4, 0)
        with pytest.raises(ValidationError):
            encode_rate_scale_detune(0, 16)
        with pytest.raises(ValidationError):
            encode_lfo_flags(0, 0, 8)

    def test_validate_field_rejects_negative(self):
        """Negative values never fit a field."""
        with pytest.raises(ValidationError):
            validate_field(-1, 7, "value")


class TestPackedOperator:
    """Test cases for the 17-byte operator record."""

    def test_decode(self):
        """Fields are read from their byte groups."""
        op = PackedOperator.from_bytes(PACKED_OPERATOR)

        assert op.eg_rates == [10, 20, 30, 40]
        assert op.eg_levels == [99, 98, 97, 0]
        assert op.breakpoint == 39
        assert (op.left_depth, op.right_depth) == (1, 2)
        assert (op.left_curve, op.right_curve) == (1, 3)
        assert (op.rate_scale, op.detune) == (5, 7)
        assert (op.amp_mod_sensitivity, op.key_velocity_sensitivity) == (2, 7)
        assert op.output_level == 88
        assert (op.oscillator_mode, op.frequency_coarse) == (1, 1)
        assert op.frequency_fine == 50
        assert op.detune_offset == 0

    def test_encode(self):
        """Encoding a decoded record gives back the same bytes."""
        assert PackedOperator.from_bytes(PACKED_OPERATOR).to_bytes() == PACKED_OPERATOR

    def test_wrong_size(self):
        """Records of the wrong size are rejected."""
        with pytest.raises(ValueError):
            PackedOperator.from_bytes(PACKED_OPERATOR[:-1])


class TestVoices:
    """Test cases for packed and unpacked voices."""

    def test_init_voice_layout(self):
        """The init voice encodes to 128 bytes with the name at the end."""
        data = PackedVoice().to_bytes()

        assert len(data) == PACKED_VOICE_SIZE
        assert data[PACKED_NAME_OFFSET:] == b"INIT VOICE"
        assert data[117] == 24
        # Operator 1 is stored last and is the only one sounding
        assert data[5 * 17 + 14] == 99
        assert data[14] == 0

    def test_operators_stored_in_reverse(self):
        """display_operators puts operator 1 first."""
        voice = PackedVoice()
        for i, op in enumerate(voice.operators):
            op.output_level = 60 + i

        data = voice.to_bytes()
        decoded = PackedVoice.from_bytes(data)

        assert decoded.operators[0].output_level == 60
        assert decoded.display_operators[0].output_level == 65
        assert decoded.display_operators[5].output_level == 60

    def test_global_fields(self):
        """Global parameters come from bytes 102-117."""
        data = bytearray(PackedVoice().to_bytes())
        data[110] = 0x1F
        data[111] = 0x0D
        data[116] = 0x7B

        voice = PackedVoice.from_bytes(data)

        assert voice.algorithm == 31
        assert voice.algorithm_number == 32
        assert (voice.feedback, voice.osc_key_sync) == (5, 1)
        assert (voice.lfo_sync, voice.lfo_wave, voice.lfo_pitch_mod_sensitivity) == (1, 5, 7)
        assert voice.transpose_offset == 0

    def test_name_bytes_are_kept_raw(self):
        """Names are LCD codes and are not decoded as text."""
        data = bytearray(PackedVoice().to_bytes())
        data[PACKED_NAME_OFFSET:] = bytes([0x5C, 0x7E, 0x7F, 0x00, 0x41, 0x42, 0x43, 0x20, 0x20, 0x20])

        voice = PackedVoice.from_bytes(data)

        assert voice.name == bytes([0x5C, 0x7E, 0x7F, 0x00, 0x41, 0x42, 0x43, 0x20, 0x20, 0x20])

    def test_wrong_size(self):
        """Voice records of the wrong size are rejected."""
        with pytest.raises(ValueError):
            PackedVoice.from_bytes(bytes(127))
        with pytest.raises(ValueError):
            UnpackedVoice.from_bytes(bytes(156))

    def test_bad_name_length(self):
        """Names must be exactly 10 bytes."""
        with pytest.raises(ValidationError):
            PackedVoice(name=b"SHORT").to_bytes()


class TestUnpack:
    """Test cases for the packed to unpacked transform."""

    def test_operator_field_order(self):
        """Unpacked operators store one field per byte, detune last."""
        op = unpack_operator(PackedOperator.from_bytes(PACKED_OPERATOR))
        data = op.to_bytes()

        assert isinstance(op, UnpackedOperator)
        assert len(data) == 21
        assert list(data[:8]) == [10, 20, 30, 40, 99, 98, 97, 0]
        # bp, ld, rd, lc, rc, rs, ams, kvs, ol, mode, coarse, fine, detune
        assert list(data[8:]) == [39, 1, 2, 1, 3, 5, 2, 7, 88, 1, 1, 50, 7]

    def test_voice_fields_copied(self):
        """Every parameter survives unpacking, operators in stored order."""
        packed = PackedVoice(name=b"E.PIANO 1 ", algorithm=4, feedback=6, lfo_wave=4)
        packed.operators[0].output_level = 42

        unpacked = unpack_voice(packed)

        assert isinstance(unpacked, UnpackedVoice)
        assert unpacked.algorithm == 4
        assert unpacked.feedback == 6
        assert unpacked.lfo_wave == 4
        assert unpacked.name == b"E.PIANO 1 "
        assert unpacked.operators[0].output_level == 42
        assert unpacked.operators[5].output_level == 99

    def test_unpacked_voice_layout(self):
        """Unpacked voices place the globals at 126-144 and the name at 145."""
        packed = PackedVoice(algorithm=4, transpose=36)
        data = unpack_voice(packed).to_bytes()

        assert len(data) == UNPACKED_VOICE_SIZE
        assert list(data[126:130]) == [99, 99, 99, 99]
        assert list(data[130:134]) == [50, 50, 50, 50]
        assert data[134] == 4
        assert data[144] == 36
        assert data[UNPACKED_NAME_OFFSET:] == b"INIT VOICE"

    def test_unpacked_decode(self):
        """Unpacked bytes decode to the same parameters."""
        packed = PackedVoice(algorithm=7, lfo_pitch_mod_sensitivity=5)
        data = unpack_voice(packed).to_bytes()

        voice = UnpackedVoice.from_bytes(data)

        assert voice.algorithm == 7
        assert voice.lfo_pitch_mod_sensitivity == 5
        assert voice.operators[5].output_level == 99


class TestBufferTypes:
    """Test cases for the buffer types the codecs accept."""

    def test_single_byte_data_alias(self):
        """The dump classes take the same buffer types as the voice codecs."""
        assert sysex.ByteData is layout.ByteData

    def test_memoryview_input(self, zero_bank_data):
        """Voices and dumps can be read from a memoryview."""
        view = memoryview(zero_bank_data)

        dump = BankDump(view)
        voice = PackedVoice.from_bytes(view[6 : 6 + PACKED_VOICE_SIZE])

        assert dump.to_bytes() == zero_bank_data
        assert voice.name == bytes(10)
        assert voice.algorithm == 0
