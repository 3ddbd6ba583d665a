"""
Display formatting utilities for CLI output.

Provides bar graphics, voice name cells and other formatting helpers.
"""

from pathlib import Path
from typing import Union

from dx7dump.utils.lcd import lcd_to_text, name_hex


def value_bar(
    value: int,
    max_value: int = 99,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic for a parameter value.

    Args:
        value: Current value
        max_value: Maximum value (default 99 for DX7 levels)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like "91 [█████████░]"
    """
    if max_value <= 0:
        max_value = 1

    # Clamp value
    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:3d} [{bar}]"
    return f"[{bar}]"


def display_filename(filepath: Union[str, Path]) -> str:
    """File name as given on the command line, without a leading "./"."""
    name = str(filepath)
    if name.startswith("./"):
        name = name[2:]
    return name


def voice_name(name: bytes, unicode: bool = True) -> str:
    """Voice name translated from LCD codes, with markup characters escaped."""
    return lcd_to_text(name, unicode).replace("[", "\\[")


def voice_name_cell(name: bytes, unicode: bool = True, show_hex: bool = False) -> str:
    """
    Voice name for table cells.

    Returns:
        '|E.PIANO 1 |' style text, followed by the hex codes when requested
    """
    cell = f"|{voice_name(name, unicode)}|"
    if show_hex:
        cell += f" [dim]{name_hex(name)}[/dim]"
    return cell


def format_eg_pair(rate: int, level: int) -> str:
    """Envelope rate and level as 'R : L'."""
    return f"{rate:>4} : {level:<4}"


def status_text(valid: bool, soft_error: bool = False) -> str:
    """Colored status label for a file."""
    if not valid:
        return "[bold red]INVALID[/bold red]"
    if soft_error:
        return "[bold yellow]NEEDS REPAIR[/bold yellow]"
    return "[bold green]VALID[/bold green]"
