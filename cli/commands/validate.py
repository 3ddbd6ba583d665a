"""
Validate command - check DX7 dump file structure and checksum.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from dx7dump.analysis.dump_analyzer import DumpAnalyzer
from dx7dump.formats.reader import DumpError
from cli.display.tables import display_file_header, display_validation

console = Console()
app = typer.Typer()


@app.command()
def validate(
    files: List[Path] = typer.Argument(..., help="DX7 sysex files to validate"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate DX7 bank and single voice dumps.

    Checks for:

    - A file size matching a bank or single voice dump
    - Sysex start and end markers, Yamaha ID
    - Sub-status, format number and declared byte count
    - The data checksum

    Examples:

        dx7dump validate rom1a.syx

        dx7dump validate *.syx --strict
    """
    analyzer = DumpAnalyzer()
    failed = False

    for file in files:
        try:
            analysis = analyzer.analyze_file(file)
        except DumpError as e:
            display_file_header(file, [str(e)], error=True)
            failed = True
            continue

        display_validation(analysis)

        if not analysis.valid or (strict and analysis.soft_error):
            failed = True

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
