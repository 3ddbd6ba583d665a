"""
Fix command - repair DX7 banks with recoverable errors.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from dx7dump.analysis.dump_analyzer import DumpAnalyzer
from dx7dump.formats.reader import DumpError
from cli.commands.listing import run_fix
from cli.display.tables import display_file_header

console = Console()
app = typer.Typer()


@app.command()
def fix(
    files: List[Path] = typer.Argument(..., help="DX7 bank files to repair"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Fix without asking"),
    no_backup: bool = typer.Option(False, "--no-backup", help="Do not keep a .ORIG copy"),
) -> None:
    """
    Repair banks with a wrong header, checksum or end marker.

    Headerless banks get a canonical header. The original file is kept as
    <name>.ORIG unless --no-backup is given; if that backup already exists
    the file is left untouched.

    Examples:

        dx7dump fix broken.syx

        dx7dump fix *.syx --yes
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

        if not analysis.valid:
            display_file_header(file, analysis.messages, error=True)
            failed = True
            continue

        if not analysis.needs_repair:
            display_file_header(file, analysis.messages)
            console.print("[dim]Nothing to fix.[/dim]")
            continue

        display_file_header(file, analysis.messages)
        if not run_fix(analyzer, analysis, assume_yes=yes, backup=not no_backup):
            failed = True

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
