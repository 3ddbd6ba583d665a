"""
Packed to unpacked voice conversion.

Expands the bit fields of a bulk dump voice into the one-byte-per-parameter
single voice layout. Operator order is kept as stored (operator 6 first).
"""

from dataclasses import fields

from dx7dump.formats.layout import (
    PackedOperator,
    PackedVoice,
    UnpackedOperator,
    UnpackedVoice,
)


def _copy_fields(source, target_cls, exclude=()):
    values = {}
    for f in fields(target_cls):
        if f.name in exclude:
            continue
        value = getattr(source, f.name)
        values[f.name] = list(value) if isinstance(value, list) else value
    return target_cls(**values)


def unpack_operator(operator: PackedOperator) -> UnpackedOperator:
    """Convert one packed operator to the unpacked layout."""
    return _copy_fields(operator, UnpackedOperator)


def unpack_voice(voice: PackedVoice) -> UnpackedVoice:
    """
    Convert a packed voice to the unpacked layout.

    Args:
        voice: Voice decoded from a bulk dump

    Returns:
        The same voice as a single voice record
    """
    unpacked = _copy_fields(voice, UnpackedVoice, exclude=("operators",))
    unpacked.operators = [unpack_operator(op) for op in voice.operators]
    return unpacked
