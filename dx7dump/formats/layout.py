"""
DX7 voice record layouts.

A voice exists on the wire in two shapes:

Packed (32-voice bulk dump, 128 bytes per voice):
    0-101    6 operators x 17 bytes, operator 6 first
    102-109  Pitch EG R1-R4, L1-L4
    110      Algorithm (bits 0-4)
    111      Feedback (bits 0-2) | Oscillator key sync (bit 3)
    112-115  LFO speed, delay, pitch mod depth, amp mod depth
    116      LFO sync (bit 0) | LFO wave (bits 1-3) | LFO PMS (bits 4-6)
    117      Transpose (0-48, C3 = 24)
    118-127  Voice name (LCD character codes)

Packed operator (17 bytes):
    0-7      EG R1-R4, L1-L4
    8-10     Level scaling breakpoint, left depth, right depth
    11       Left curve (bits 0-1) | right curve (bits 2-3)
    12       Rate scale (bits 0-2) | detune (bits 3-6)
    13       Amp mod sensitivity (bits 0-1) | key velocity sensitivity (bits 2-4)
    14       Output level
    15       Oscillator mode (bit 0) | frequency coarse (bits 1-5)
    16       Frequency fine

Unpacked (single voice dump, 155 bytes) gives every parameter its own byte:
operators are 21 bytes (EG rates, EG levels, breakpoint, depths, curves,
rate scale, AMS, KVS, output level, mode, coarse, fine, detune), followed by
the 29 voice parameters in wire order.

Bit fields are read and written with explicit shifts and masks, one
encode/decode pair per packed byte group.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Tuple, Union

from dx7dump.utils.validation import (
    ValidationError,
    validate_byte,
    validate_field,
    validate_group,
    validate_name_bytes,
)

ByteData = Union[bytes, bytearray, memoryview]

# Packed layout revision implemented here. Revision 2 stores the LFO pitch
# mod sensitivity in bits 4-6 of the LFO byte; bit 7 is never a data bit.
FORMAT_REVISION = 2
LFO_PMS_BITS = 3

OPERATOR_COUNT = 6
NAME_LENGTH = 10

PACKED_OPERATOR_SIZE = 17
PACKED_VOICE_SIZE = 128
UNPACKED_OPERATOR_SIZE = 21
UNPACKED_VOICE_SIZE = 155

# Offset of the name inside a packed voice; everything before it is sound data
PACKED_NAME_OFFSET = PACKED_VOICE_SIZE - NAME_LENGTH
UNPACKED_NAME_OFFSET = UNPACKED_VOICE_SIZE - NAME_LENGTH


def _get_bits(byte: int, shift: int, width: int) -> int:
    return (byte >> shift) & ((1 << width) - 1)


def _check_size(data: ByteData, size: int, what: str) -> None:
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(data)}")


# ---------------------------------------------------------------------------
# Packed byte groups
# ---------------------------------------------------------------------------


def decode_curves(byte: int) -> Tuple[int, int]:
    """Split operator byte 11 into (left curve, right curve)."""
    return _get_bits(byte, 0, 2), _get_bits(byte, 2, 2)


def encode_curves(left_curve: int, right_curve: int) -> int:
    validate_field(left_curve, 2, "left_curve")
    validate_field(right_curve, 2, "right_curve")
    return left_curve | (right_curve << 2)


def decode_rate_scale_detune(byte: int) -> Tuple[int, int]:
    """Split operator byte 12 into (rate scale, detune)."""
    return _get_bits(byte, 0, 3), _get_bits(byte, 3, 4)


def encode_rate_scale_detune(rate_scale: int, detune: int) -> int:
    validate_field(rate_scale, 3, "rate_scale")
    validate_field(detune, 4, "detune")
    return rate_scale | (detune << 3)


def decode_sensitivities(byte: int) -> Tuple[int, int]:
    """Split operator byte 13 into (amp mod sensitivity, key velocity sensitivity)."""
    return _get_bits(byte, 0, 2), _get_bits(byte, 2, 3)


def encode_sensitivities(amp_mod_sensitivity: int, key_velocity_sensitivity: int) -> int:
    validate_field(amp_mod_sensitivity, 2, "amp_mod_sensitivity")
    validate_field(key_velocity_sensitivity, 3, "key_velocity_sensitivity")
    return amp_mod_sensitivity | (key_velocity_sensitivity << 2)


def decode_oscillator(byte: int) -> Tuple[int, int]:
    """Split operator byte 15 into (oscillator mode, frequency coarse)."""
    return _get_bits(byte, 0, 1), _get_bits(byte, 1, 5)


def encode_oscillator(oscillator_mode: int, frequency_coarse: int) -> int:
    validate_field(oscillator_mode, 1, "oscillator_mode")
    validate_field(frequency_coarse, 5, "frequency_coarse")
    return oscillator_mode | (frequency_coarse << 1)


def decode_algorithm(byte: int) -> int:
    """Read the algorithm (0-31) from voice byte 110."""
    return _get_bits(byte, 0, 5)


def encode_algorithm(algorithm: int) -> int:
    validate_field(algorithm, 5, "algorithm")
    return algorithm


def decode_feedback_key_sync(byte: int) -> Tuple[int, int]:
    """Split voice byte 111 into (feedback, oscillator key sync)."""
    return _get_bits(byte, 0, 3), _get_bits(byte, 3, 1)


def encode_feedback_key_sync(feedback: int, osc_key_sync: int) -> int:
    validate_field(feedback, 3, "feedback")
    validate_field(osc_key_sync, 1, "osc_key_sync")
    return feedback | (osc_key_sync << 3)


def decode_lfo_flags(byte: int) -> Tuple[int, int, int]:
    """Split voice byte 116 into (LFO sync, LFO wave, LFO pitch mod sensitivity)."""
    return _get_bits(byte, 0, 1), _get_bits(byte, 1, 3), _get_bits(byte, 4, LFO_PMS_BITS)


def encode_lfo_flags(lfo_sync: int, lfo_wave: int, lfo_pitch_mod_sensitivity: int) -> int:
    validate_field(lfo_sync, 1, "lfo_sync")
    validate_field(lfo_wave, 3, "lfo_wave")
    validate_field(lfo_pitch_mod_sensitivity, LFO_PMS_BITS, "lfo_pitch_mod_sensitivity")
    return lfo_sync | (lfo_wave << 1) | (lfo_pitch_mod_sensitivity << 4)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


@dataclass
class OperatorParams:
    """
    Parameters of one operator, independent of the wire layout.

    Attributes:
        eg_rates: Envelope rates R1-R4 (0-99)
        eg_levels: Envelope levels L1-L4 (0-99)
        breakpoint: Keyboard level scaling breakpoint (0-99, 39 = C3)
        left_depth / right_depth: Scaling depths (0-99)
        left_curve / right_curve: Scaling curves (0-3)
        rate_scale: Keyboard rate scaling (0-7)
        detune: Detune (0-14, 7 = no detune)
        amp_mod_sensitivity: Amplitude modulation sensitivity (0-3)
        key_velocity_sensitivity: Key velocity sensitivity (0-7)
        output_level: Output level (0-99)
        oscillator_mode: 0 = ratio, 1 = fixed frequency
        frequency_coarse: Coarse frequency (0-31)
        frequency_fine: Fine frequency (0-99)
    """

    eg_rates: List[int] = field(default_factory=lambda: [99, 99, 99, 99])
    eg_levels: List[int] = field(default_factory=lambda: [99, 99, 99, 0])
    breakpoint: int = 39
    left_depth: int = 0
    right_depth: int = 0
    left_curve: int = 0
    right_curve: int = 0
    rate_scale: int = 0
    detune: int = 7
    amp_mod_sensitivity: int = 0
    key_velocity_sensitivity: int = 0
    output_level: int = 0
    oscillator_mode: int = 0
    frequency_coarse: int = 1
    frequency_fine: int = 0

    @property
    def detune_offset(self) -> int:
        """Detune as shown on the synth (-7 to +7)."""
        return self.detune - 7


@dataclass
class PackedOperator(OperatorParams):
    """Operator in the 17-byte bulk dump layout."""

    SIZE: ClassVar[int] = PACKED_OPERATOR_SIZE

    @classmethod
    def from_bytes(cls, data: ByteData) -> "PackedOperator":
        """Decode a 17-byte packed operator record."""
        _check_size(data, cls.SIZE, "Packed operator")

        left_curve, right_curve = decode_curves(data[11])
        rate_scale, detune = decode_rate_scale_detune(data[12])
        ams, kvs = decode_sensitivities(data[13])
        mode, coarse = decode_oscillator(data[15])

        return cls(
            eg_rates=list(data[0:4]),
            eg_levels=list(data[4:8]),
            breakpoint=data[8],
            left_depth=data[9],
            right_depth=data[10],
            left_curve=left_curve,
            right_curve=right_curve,
            rate_scale=rate_scale,
            detune=detune,
            amp_mod_sensitivity=ams,
            key_velocity_sensitivity=kvs,
            output_level=data[14],
            oscillator_mode=mode,
            frequency_coarse=coarse,
            frequency_fine=data[16],
        )

    def to_bytes(self) -> bytes:
        """Encode as a 17-byte packed operator record."""
        validate_group(self.eg_rates, 4, "eg_rates")
        validate_group(self.eg_levels, 4, "eg_levels")
        for name in ("breakpoint", "left_depth", "right_depth", "output_level", "frequency_fine"):
            validate_byte(getattr(self, name), name)

        data = bytearray(self.eg_rates)
        data.extend(self.eg_levels)
        data.extend([self.breakpoint, self.left_depth, self.right_depth])
        data.append(encode_curves(self.left_curve, self.right_curve))
        data.append(encode_rate_scale_detune(self.rate_scale, self.detune))
        data.append(encode_sensitivities(self.amp_mod_sensitivity, self.key_velocity_sensitivity))
        data.append(self.output_level)
        data.append(encode_oscillator(self.oscillator_mode, self.frequency_coarse))
        data.append(self.frequency_fine)
        return bytes(data)


# Byte order of the scalar operator parameters in the unpacked layout
UNPACKED_OPERATOR_FIELDS = (
    "breakpoint",
    "left_depth",
    "right_depth",
    "left_curve",
    "right_curve",
    "rate_scale",
    "amp_mod_sensitivity",
    "key_velocity_sensitivity",
    "output_level",
    "oscillator_mode",
    "frequency_coarse",
    "frequency_fine",
    "detune",
)


@dataclass
class UnpackedOperator(OperatorParams):
    """Operator in the 21-byte single voice layout."""

    SIZE: ClassVar[int] = UNPACKED_OPERATOR_SIZE

    @classmethod
    def from_bytes(cls, data: ByteData) -> "UnpackedOperator":
        """Decode a 21-byte unpacked operator record."""
        _check_size(data, cls.SIZE, "Unpacked operator")

        values = {name: data[8 + i] for i, name in enumerate(UNPACKED_OPERATOR_FIELDS)}
        return cls(eg_rates=list(data[0:4]), eg_levels=list(data[4:8]), **values)

    def to_bytes(self) -> bytes:
        """Encode as a 21-byte unpacked operator record."""
        validate_group(self.eg_rates, 4, "eg_rates")
        validate_group(self.eg_levels, 4, "eg_levels")

        data = bytearray(self.eg_rates)
        data.extend(self.eg_levels)
        for name in UNPACKED_OPERATOR_FIELDS:
            value = getattr(self, name)
            validate_byte(value, name)
            data.append(value)
        return bytes(data)


# ---------------------------------------------------------------------------
# Voices
# ---------------------------------------------------------------------------


@dataclass
class VoiceParams:
    """
    Parameters of one voice, independent of the wire layout.

    Operators are kept in stored order (operator 6 first). Use
    ``display_operators`` for operator 1 first.
    """

    operators: List[OperatorParams] = field(default_factory=list)
    pitch_eg_rates: List[int] = field(default_factory=lambda: [99, 99, 99, 99])
    pitch_eg_levels: List[int] = field(default_factory=lambda: [50, 50, 50, 50])
    algorithm: int = 0
    feedback: int = 0
    osc_key_sync: int = 1
    lfo_speed: int = 35
    lfo_delay: int = 0
    lfo_pitch_mod_depth: int = 0
    lfo_amp_mod_depth: int = 0
    lfo_sync: int = 1
    lfo_wave: int = 0
    lfo_pitch_mod_sensitivity: int = 3
    transpose: int = 24
    name: bytes = b"INIT VOICE"

    @property
    def display_operators(self) -> List[OperatorParams]:
        """Operators in display order (operator 1 first)."""
        return list(reversed(self.operators))

    @property
    def algorithm_number(self) -> int:
        """Algorithm as shown on the synth (1-32)."""
        return self.algorithm + 1

    @property
    def transpose_offset(self) -> int:
        """Transpose in semitones relative to C3."""
        return self.transpose - 24


def _init_operators(operator_cls) -> List[OperatorParams]:
    # Only operator 1 (stored last) sounds in the init voice
    operators = [operator_cls() for _ in range(OPERATOR_COUNT)]
    operators[-1].output_level = 99
    return operators


@dataclass
class PackedVoice(VoiceParams):
    """Voice in the 128-byte bulk dump layout."""

    SIZE: ClassVar[int] = PACKED_VOICE_SIZE

    operators: List[PackedOperator] = field(default_factory=lambda: _init_operators(PackedOperator))

    @classmethod
    def from_bytes(cls, data: ByteData) -> "PackedVoice":
        """Decode a 128-byte packed voice record."""
        _check_size(data, cls.SIZE, "Packed voice")

        operators = [
            PackedOperator.from_bytes(data[i * PACKED_OPERATOR_SIZE : (i + 1) * PACKED_OPERATOR_SIZE])
            for i in range(OPERATOR_COUNT)
        ]
        feedback, osc_key_sync = decode_feedback_key_sync(data[111])
        lfo_sync, lfo_wave, lfo_pms = decode_lfo_flags(data[116])

        return cls(
            operators=operators,
            pitch_eg_rates=list(data[102:106]),
            pitch_eg_levels=list(data[106:110]),
            algorithm=decode_algorithm(data[110]),
            feedback=feedback,
            osc_key_sync=osc_key_sync,
            lfo_speed=data[112],
            lfo_delay=data[113],
            lfo_pitch_mod_depth=data[114],
            lfo_amp_mod_depth=data[115],
            lfo_sync=lfo_sync,
            lfo_wave=lfo_wave,
            lfo_pitch_mod_sensitivity=lfo_pms,
            transpose=data[117],
            name=bytes(data[PACKED_NAME_OFFSET:PACKED_VOICE_SIZE]),
        )

    def to_bytes(self) -> bytes:
        """Encode as a 128-byte packed voice record."""
        if len(self.operators) != OPERATOR_COUNT:
            raise ValidationError(
                f"Voice must have {OPERATOR_COUNT} operators, got {len(self.operators)}"
            )
        validate_group(self.pitch_eg_rates, 4, "pitch_eg_rates")
        validate_group(self.pitch_eg_levels, 4, "pitch_eg_levels")
        validate_name_bytes(self.name, NAME_LENGTH)

        data = bytearray()
        for operator in self.operators:
            data.extend(operator.to_bytes())
        data.extend(self.pitch_eg_rates)
        data.extend(self.pitch_eg_levels)
        data.append(encode_algorithm(self.algorithm))
        data.append(encode_feedback_key_sync(self.feedback, self.osc_key_sync))
        for name in ("lfo_speed", "lfo_delay", "lfo_pitch_mod_depth", "lfo_amp_mod_depth"):
            value = getattr(self, name)
            validate_byte(value, name)
            data.append(value)
        data.append(encode_lfo_flags(self.lfo_sync, self.lfo_wave, self.lfo_pitch_mod_sensitivity))
        validate_byte(self.transpose, "transpose")
        data.append(self.transpose)
        data.extend(self.name)
        return bytes(data)


# Byte order of the scalar voice parameters in the unpacked layout
UNPACKED_VOICE_FIELDS = (
    "algorithm",
    "feedback",
    "osc_key_sync",
    "lfo_speed",
    "lfo_delay",
    "lfo_pitch_mod_depth",
    "lfo_amp_mod_depth",
    "lfo_sync",
    "lfo_wave",
    "lfo_pitch_mod_sensitivity",
    "transpose",
)


@dataclass
class UnpackedVoice(VoiceParams):
    """Voice in the 155-byte single voice layout."""

    SIZE: ClassVar[int] = UNPACKED_VOICE_SIZE

    operators: List[UnpackedOperator] = field(
        default_factory=lambda: _init_operators(UnpackedOperator)
    )

    @classmethod
    def from_bytes(cls, data: ByteData) -> "UnpackedVoice":
        """Decode a 155-byte unpacked voice record."""
        _check_size(data, cls.SIZE, "Unpacked voice")

        operators = [
            UnpackedOperator.from_bytes(
                data[i * UNPACKED_OPERATOR_SIZE : (i + 1) * UNPACKED_OPERATOR_SIZE]
            )
            for i in range(OPERATOR_COUNT)
        ]
        values = {name: data[134 + i] for i, name in enumerate(UNPACKED_VOICE_FIELDS)}

        return cls(
            operators=operators,
            pitch_eg_rates=list(data[126:130]),
            pitch_eg_levels=list(data[130:134]),
            name=bytes(data[UNPACKED_NAME_OFFSET:UNPACKED_VOICE_SIZE]),
            **values,
        )

    def to_bytes(self) -> bytes:
        """Encode as a 155-byte unpacked voice record."""
        if len(self.operators) != OPERATOR_COUNT:
            raise ValidationError(
                f"Voice must have {OPERATOR_COUNT} operators, got {len(self.operators)}"
            )
        validate_group(self.pitch_eg_rates, 4, "pitch_eg_rates")
        validate_group(self.pitch_eg_levels, 4, "pitch_eg_levels")
        validate_name_bytes(self.name, NAME_LENGTH)

        data = bytearray()
        for operator in self.operators:
            data.extend(operator.to_bytes())
        data.extend(self.pitch_eg_rates)
        data.extend(self.pitch_eg_levels)
        for name in UNPACKED_VOICE_FIELDS:
            value = getattr(self, name)
            validate_byte(value, name)
            data.append(value)
        data.extend(self.name)
        return bytes(data)

