"""
Show command - display the full parameter set of DX7 voices.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from dx7dump.analysis.dump_analyzer import DumpAnalyzer
from dx7dump.formats.layout import PackedVoice
from dx7dump.formats.reader import DumpError
from dx7dump.formats.sysex import BANK_VOICE_COUNT
from dx7dump.formats.unpack import unpack_voice
from cli.display.hex_view import display_hex_dump, display_voice_data
from cli.display.tables import display_file_header, display_operator_table, display_voice_summary

console = Console()
app = typer.Typer()


@app.command()
def show(
    file: Path = typer.Argument(..., help="DX7 sysex file (.syx)"),
    patch: Optional[int] = typer.Option(
        None, "--patch", "-p", min=1, max=BANK_VOICE_COUNT, help="Only show this voice (1-32)"
    ),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show voice data as hex"),
    ascii_names: bool = typer.Option(False, "--ascii", "-a", help="Plain ASCII voice names"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Also show the packed bank record"),
) -> None:
    """
    Show all parameters of the voices in a DX7 file.

    Operators are listed as on the synth, operator 1 first. With --hex the
    unpacked voice data is printed together with the checksum a single
    voice dump of it would carry.

    Examples:

        dx7dump show rom1a.syx --patch 11

        dx7dump show rom1a.syx -p 1 --hex
    """
    analyzer = DumpAnalyzer()
    try:
        analysis = analyzer.analyze_file(file)
    except DumpError as e:
        display_file_header(file, [str(e)], error=True)
        raise typer.Exit(1)

    if not analysis.valid:
        display_file_header(file, analysis.messages, error=True)
        raise typer.Exit(1)

    for message in analysis.messages:
        console.print(f"[yellow]{message}[/yellow]")

    voices = analysis.voices
    if patch is not None and patch > len(voices):
        console.print(f"[red]Error: File holds a single voice, no patch {patch}[/red]")
        raise typer.Exit(1)

    numbers = [patch] if patch is not None else range(1, len(voices) + 1)
    for number in numbers:
        voice = voices[number - 1]
        display_voice_summary(voice, number, file, unicode=not ascii_names, show_hex=show_hex)
        display_operator_table(voice)

        if show_hex:
            unpacked = unpack_voice(voice) if isinstance(voice, PackedVoice) else voice
            display_voice_data(unpacked.to_bytes(), title=f"Voice {number} Data")
        if raw and analysis.is_bank:
            bank = analysis.dump.bank
            display_hex_dump(
                bank.voice_bytes(number - 1),
                title=f"Voice {number} Packed",
                start_offset=bank.voice_offset(number - 1),
            )
        console.print()


if __name__ == "__main__":
    app()
