"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.panel import Panel

from dx7dump.formats.layout import UNPACKED_OPERATOR_SIZE, UNPACKED_VOICE_SIZE
from dx7dump.utils.checksum import calculate_dx7_checksum

console = Console()


def format_hex_lines(
    data: bytes,
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> list:
    """Format data as hex dump lines with offsets and ASCII."""
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        # Hex part
        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append(" ")  # Extra space at midpoint
            hex_parts.append(f"{b:02X}")
        hex_str = " ".join(hex_parts)

        # ASCII part
        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        ascii_str = ascii_str.replace("[", "\\[")

        addr = start_offset + offset
        lines.append(
            f"[dim]{addr:04X}[/dim]  {hex_str:<{bytes_per_line * 3 + 2}}  [cyan]{ascii_str}[/cyan]"
        )

    if len(data) > end:
        remaining = len(data) - end
        lines.append(f"[dim]... {remaining} more bytes ...[/dim]")

    return lines


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display formatted hex dump with Rich."""
    lines = format_hex_lines(data, start_offset, bytes_per_line, max_lines)
    console.print(Panel("\n".join(lines), title=title, border_style="blue", expand=False))


def display_voice_data(data: bytes, title: str = "Voice Data") -> None:
    """
    Display an unpacked voice record followed by its single voice checksum.

    One line per operator (stored order, operator 6 first), then the voice
    parameters and name. The last byte shown is the checksum a single voice
    dump of this voice would carry.
    """
    if len(data) != UNPACKED_VOICE_SIZE:
        raise ValueError(f"Voice data must be {UNPACKED_VOICE_SIZE} bytes, got {len(data)}")

    checksum = calculate_dx7_checksum(data)

    lines = []
    for op in range(6):
        chunk = data[op * UNPACKED_OPERATOR_SIZE : (op + 1) * UNPACKED_OPERATOR_SIZE]
        lines.append(f"[dim]OP{6 - op}[/dim]   " + " ".join(f"{b:02X}" for b in chunk))

    rest = data[6 * UNPACKED_OPERATOR_SIZE :]
    lines.append("[dim]VOICE[/dim] " + " ".join(f"{b:02X}" for b in rest[:19]))
    lines.append("[dim]NAME[/dim]  " + " ".join(f"{b:02X}" for b in rest[19:]))
    lines.append(f"[dim]SUM[/dim]   [bold]{checksum:02X}[/bold] [dim]\\[last byte = checksum][/dim]")

    console.print(Panel("\n".join(lines), title=title, border_style="blue", expand=False))
