"""
Dupes command - find voices that differ only by name.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from dx7dump.analysis.dump_analyzer import DumpAnalyzer
from dx7dump.formats.reader import DumpError
from cli.display.tables import display_duplicates, display_file_header

console = Console()
app = typer.Typer()


@app.command()
def dupes(
    files: List[Path] = typer.Argument(..., help="DX7 bank files"),
) -> None:
    """
    Report duplicate voices within each bank.

    Two voices are duplicates when all their parameters match; the names
    may differ.

    Examples:

        dx7dump dupes rom1a.syx
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

        display_file_header(file)
        if not analyzer.find_duplicates(analysis):
            console.print("[dim]No duplicates.[/dim]")
        display_duplicates(analysis)

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
