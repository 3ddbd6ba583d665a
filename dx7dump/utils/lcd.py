"""
DX7 LCD character tables.

Voice names are stored as character codes of the DX7's dot-matrix LCD
controller, not as ASCII. Most of 0x20-0x7D matches ASCII, but 0x5C is a
Yen sign, 0x7E/0x7F are arrows and the upper half holds Katakana and symbols.
Codes without a sensible equivalent render as "~".
"""

from typing import List

# fmt: off
LCD_UNICODE: List[str] = [
    # 0x00
    "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈",
    # 0x10
    " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ",
    # 0x20
    " ", "!", '"', "#", "$", "%", "&", "'", "(", ")", "*", "+", ",", "-", ".", "/",
    # 0x30
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", ":", ";", "<", "=", ">", "?",
    # 0x40
    "@", "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N", "O",
    # 0x50
    "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z", "[", "¥", "]", "^", "_",
    # 0x60
    "`", "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m", "n", "o",
    # 0x70
    "p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z", "{", "|", "}", "→", "←",
    # 0x80
    " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ",
    # 0x90
    " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ",
    # 0xA0
    " ", "∘", "⌈", "⌋", "~", "⋅", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~",
    # 0xB0
    "-", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~",
    # 0xC0
    "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~",
    # 0xD0
    "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "~", "°",
    # 0xE0
    "∝", "ä", "ß", "ε", "μ", "σ", "ρ", "g", "√", "~", "j", "×", "¢", "₤", "ñ", "ö",
    # 0xF0
    "p", "q", "ϴ", "∞", "Ω", "ü", "Σ", "π", "ẍ", "y", "~", "~", "~", "÷", " ", "█",
]

# Voice names in sysex are 7-bit, so the ASCII table only covers 0x00-0x7F
LCD_ASCII: List[str] = (
    [" "] * 0x20
    + list(" !\"#$%&'()*+,-./")
    + list("0123456789:;<=>?")
    + list("@ABCDEFGHIJKLMNO")
    + list("PQRSTUVWXYZ[Y]^_")
    + list("`abcdefghijklmno")
    + list("pqrstuvwxyz{|}><")
)
# fmt: on


def lcd_char(code: int, unicode: bool = True) -> str:
    """
    Translate one LCD character code.

    Args:
        code: Character code (0-255)
        unicode: Use Unicode glyphs; otherwise plain 7-bit ASCII

    Returns:
        A single display character
    """
    code &= 0xFF
    if unicode:
        return LCD_UNICODE[code]
    if code < len(LCD_ASCII):
        return LCD_ASCII[code]
    return " " if LCD_UNICODE[code] == " " else "~"


def lcd_to_text(name: bytes, unicode: bool = True) -> str:
    """
    Translate a voice name to display text.

    Example:
        >>> lcd_to_text(b"E.PIANO 1 ")
        'E.PIANO 1 '
        >>> lcd_to_text(bytes([0x5C, 0x7E]), unicode=False)
        'Y>'
    """
    return "".join(lcd_char(code, unicode) for code in name)


def name_hex(name: bytes) -> str:
    """Voice name bytes as space-separated hex."""
    return " ".join(f"{b:02X}" for b in name)
