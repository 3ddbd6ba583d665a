"""
DX7 parameter value names.

Converts raw parameter values to the strings shown on the synth or in the
owner's manual.
"""

from typing import List

OUT_OF_RANGE = "*out of range*"

NOTE_NAMES: List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

CURVE_NAMES: List[str] = ["-LIN", "-EXP", "+EXP", "+LIN"]

LFO_WAVE_NAMES: List[str] = [
    "Triangle",
    "Saw Down",
    "Saw Up",
    "Square",
    "Sine",
    "Sample & Hold",
]

OSCILLATOR_MODE_NAMES: List[str] = ["Frequency (Ratio)", "Fixed Frequency (Hz)"]
OSCILLATOR_MODE_SHORT: List[str] = ["Freq. Ratio", "Fixed Freq."]


def _lookup(names: List[str], value: int) -> str:
    if 0 <= value < len(names):
        return names[value]
    return OUT_OF_RANGE


def on_off(value: int) -> str:
    return _lookup(["Off", "On"], value)


def curve_name(value: int) -> str:
    """Keyboard level scaling curve (0-3)."""
    return _lookup(CURVE_NAMES, value)


def lfo_wave_name(value: int) -> str:
    return _lookup(LFO_WAVE_NAMES, value)


def oscillator_mode_name(value: int, short: bool = False) -> str:
    return _lookup(OSCILLATOR_MODE_SHORT if short else OSCILLATOR_MODE_NAMES, value)


def note_name(value: int) -> str:
    return NOTE_NAMES[value % 12]


def transpose_name(value: int) -> str:
    """
    Transpose (0-48) as the note that C3 is moved to.

    Example:
        >>> transpose_name(24)
        'C3'
    """
    if not 0 <= value <= 48:
        return OUT_OF_RANGE
    return f"{note_name(value)}{value // 12 + 1}"


def breakpoint_name(value: int) -> str:
    """
    Level scaling breakpoint (0-99) as a note, A-1 to C8.

    Example:
        >>> breakpoint_name(39)
        'C3'
    """
    if not 0 <= value <= 99:
        return OUT_OF_RANGE

    # Shift up an octave before dividing so that values below C0 floor correctly
    octave = (value - 3 + 12) // 12 - 1
    return f"{note_name(value + 9)}{octave}"


def operator_frequency(oscillator_mode: int, coarse: int, fine: int) -> float:
    """
    Operator frequency from the oscillator settings.

    Ratio mode returns the frequency ratio (coarse 0 means 0.5); fixed mode
    returns the frequency in Hz.
    """
    if oscillator_mode == 0:
        ratio = coarse if coarse else 0.5
        return ratio + fine * ratio / 100

    return 10 ** ((coarse % 4) + fine / 100)


def format_frequency(oscillator_mode: int, coarse: int, fine: int) -> str:
    """
    Operator frequency as display text.

    Example:
        >>> format_frequency(0, 1, 0)
        '1'
        >>> format_frequency(1, 2, 0)
        '100 Hz'
    """
    frequency = operator_frequency(oscillator_mode, coarse, fine)
    if oscillator_mode == 0:
        return f"{frequency:g}"
    return f"{frequency:g} Hz"


def format_detune(detune: int) -> str:
    """Detune (0-14) as a signed offset."""
    return f"{detune - 7:+d}"
