"""
dx7dump - Inspect, validate and repair Yamaha DX7 voice dumps.

A CLI tool for listing and analyzing DX7 sysex bank files.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from dx7dump import __version__
from cli.commands.listing import list_files
from cli.commands.show import show
from cli.commands.validate import validate
from cli.commands.fix import fix
from cli.commands.dupes import dupes
from cli.commands.scan import scan

console = Console()

# Main app
app = typer.Typer(
    name="dx7dump",
    help="Inspect, validate and repair Yamaha DX7 voice dumps.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="list")(list_files)
app.command(name="show")(show)
app.command(name="validate")(validate)
app.command(name="fix")(fix)
app.command(name="dupes")(dupes)
app.command(name="scan")(scan)


def setup_logging(verbose: bool) -> None:
    """Send library log records through Rich; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]dx7dump[/bold] version {__version__}")
    console.print("[dim]Yamaha DX7 voice dump inspector[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    dx7dump - Inspect, validate and repair Yamaha DX7 voice dumps.

    Reads:

    - [cyan]32-voice bulk dumps[/cyan] (4104 bytes, or 4096 without header)
    - [cyan]Single voice dumps[/cyan] (163 bytes, or 155 without header)

    [bold]Quick Start:[/bold]

        dx7dump list rom1a.syx            # Voice names
        dx7dump list rom1a.syx --compact  # Names as a grid
        dx7dump show rom1a.syx -p 1       # All parameters of voice 1

    [bold]Checking Files:[/bold]

        dx7dump validate *.syx            # Structure and checksum
        dx7dump fix broken.syx            # Repair header and checksum
        dx7dump dupes rom1a.syx           # Voices that differ only by name
        dx7dump scan ~/patches --errors   # Check a whole directory

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
