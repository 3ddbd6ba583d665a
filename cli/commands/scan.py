"""
Scan command - list every DX7 sysex file below a directory.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from cli.commands.listing import ListingOptions, process_files

console = Console()
app = typer.Typer()

SYSEX_SUFFIX = ".syx"


def find_sysex_files(root: Path) -> List[Path]:
    """All *.syx files below ``root`` (any case), sorted by path."""
    if root.is_file():
        return [root]
    return sorted(
        path for path in root.rglob("*") if path.is_file() and path.suffix.lower() == SYSEX_SUFFIX
    )


@app.command()
def scan(
    path: Path = typer.Argument(Path("."), help="Directory to search"),
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
    Search a directory tree for .syx files and list each one.

    Takes the same options as the list command.

    Examples:

        dx7dump scan ~/patches --errors

        dx7dump scan . --errors --fix --yes
    """
    if not path.exists():
        console.print(f"[red]Error: Path not found: {path}[/red]")
        raise typer.Exit(1)

    files = find_sysex_files(path)
    if not files:
        console.print(f"[yellow]No .syx files found in {path}[/yellow]")
        return

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

    ok = process_files(files, options)
    console.print(f"[dim]Scanned {len(files)} file(s)[/dim]")
    if not ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
