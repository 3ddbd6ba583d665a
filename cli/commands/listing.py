"""
List command - print the voice names of DX7 dump files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List

import typer
from rich.console import Console

from dx7dump.analysis.dump_analyzer import DumpAnalysis, DumpAnalyzer
from dx7dump.formats.reader import DumpError
from cli.display.tables import display_duplicates, display_file_header, display_voice_names

console = Console()
app = typer.Typer()


@dataclass
class ListingOptions:
    """Per-run options of the list and scan commands."""

    compact: bool = False
    show_hex: bool = False
    unicode: bool = True
    errors_only: bool = False
    find_dupes: bool = False
    fix: bool = False
    assume_yes: bool = False
    backup: bool = True


def confirm_fix(filepath: Path) -> bool:
    """Ask before rewriting a file."""
    return typer.confirm("Fix this file?", default=True)


def run_fix(analyzer: DumpAnalyzer, analysis: DumpAnalysis, assume_yes: bool,
            backup: bool) -> bool:
    """
    Repair a file if it needs it, printing the outcome.

    Returns:
        False if the repair was attempted and failed
    """
    if not analysis.needs_repair:
        return True

    try:
        fixed = analyzer.fix(
            analysis,
            confirm=None if assume_yes else confirm_fix,
            backup=backup,
        )
    except DumpError as e:
        console.print(f"[red]{e}[/red]")
        return False

    if fixed:
        console.print("[green]File fixed.[/green]")
    return True


def process_file(analyzer: DumpAnalyzer, filepath: Path, options: ListingOptions) -> bool:
    """
    Run the listing pipeline on one file.

    Returns:
        True if the file could be processed
    """
    try:
        analysis = analyzer.analyze_file(filepath)
    except DumpError as e:
        display_file_header(filepath, [str(e)], error=True)
        console.print()
        return False

    if not analysis.valid:
        display_file_header(filepath, analysis.messages, error=True)
        console.print()
        return False

    if not options.errors_only:
        display_file_header(filepath, analysis.messages)
        display_voice_names(analysis, options.compact, options.show_hex, options.unicode)
    elif analysis.soft_error:
        display_file_header(filepath, analysis.messages)
        console.print()

    ok = True
    if options.fix:
        ok = run_fix(analyzer, analysis, options.assume_yes, options.backup)

    if options.find_dupes:
        analyzer.find_duplicates(analysis)
        display_duplicates(analysis)

    return ok


def process_files(files: List[Path], options: ListingOptions) -> bool:
    """Run the listing pipeline on every file; True if all succeeded."""
    analyzer = DumpAnalyzer()
    ok = True
    for filepath in files:
        if not process_file(analyzer, filepath, options):
            ok = False
    return ok


@app.command(name="list")
def list_files(
    files: List[Path] = typer.Argument(..., help="DX7 sysex files (.syx)"),
    compact: bool = typer.Option(False, "--compact", "-c", help="Compact name grid"),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show name bytes as hex"),
    ascii_names: bool = typer.Option(False, "--ascii", "-a", help="Plain ASCII voice names"),
    errors_only: bool = typer.Option(False, "--errors", "-e", help="Only report files with errors"),
    find_dupes: bool = typer.Option(False, "--find-dupes", "-d", help="Report duplicate voices"),
    fix: bool = typer.Option(False, "--fix", help="Repair files with recoverable errors"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Fix without asking"),
    no_backup: bool = typer.Option(False, "--no-backup", help="Do not keep a .ORIG copy"),
) -> None:
    """
    List the voice names of DX7 banks and single voice dumps.

    Files that cannot be read are reported and skipped; the exit code is 1
    if any file failed.

    Examples:

        dx7dump list rom1a.syx

        dx7dump list *.syx --compact --find-dupes

        dx7dump list broken.syx --fix --yes
    """
    options = ListingOptions(
        compact=compact,
        show_hex=show_hex,
        unicode=not ascii_names,
        errors_only=errors_only,
        find_dupes=find_dupes,
        fix=fix,
        assume_yes=yes,
        backup=not no_backup,
    )

    if not process_files(files, options):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
