"""
Rich table displays for DX7 voice data.

Provides formatted output for voice name listings, voice parameters,
validation results and duplicate reports.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dx7dump.analysis.dump_analyzer import DumpAnalysis
from dx7dump.formats.layout import VoiceParams
from dx7dump.utils.lcd import name_hex
from dx7dump.utils.params import (
    breakpoint_name,
    curve_name,
    format_detune,
    format_frequency,
    lfo_wave_name,
    on_off,
    oscillator_mode_name,
    transpose_name,
)
from cli.display.algorithms import algorithm_diagram
from cli.display.formatters import (
    display_filename,
    format_eg_pair,
    status_text,
    value_bar,
    voice_name,
    voice_name_cell,
)

console = Console()


def display_file_header(filepath, messages: Optional[List[str]] = None, error: bool = False) -> None:
    """Print the file name and any diagnostics for it."""
    console.print(f'File: "{display_filename(filepath)}"')
    style = "red" if error else "yellow"
    for message in messages or []:
        console.print(f"[{style}]{message}[/{style}]")


def display_voice_names(
    analysis: DumpAnalysis,
    compact: bool = False,
    show_hex: bool = False,
    unicode: bool = True,
) -> None:
    """
    Display the 32 voice names of a bank.

    The default listing is one column; compact mode uses 4 columns of 8
    (2 columns of 16 when the hex codes are shown). Voices run down the
    columns.
    """
    voices = analysis.voices
    rows, columns = len(voices), 1
    if compact and analysis.is_bank:
        rows, columns = (16, 2) if show_hex else (8, 4)

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
    for _ in range(columns):
        table.add_column("#", style="dim", justify="right")
        table.add_column("Name", style="cyan", no_wrap=True)

    for row in range(rows):
        cells = []
        for column in range(columns):
            index = column * rows + row
            voice = voices[index]
            cells.append(str(index + 1))
            cells.append(voice_name_cell(voice.name, unicode, show_hex))
        table.add_row(*cells)

    console.print(table)


def display_voice_summary(voice: VoiceParams, number: int, filepath, unicode: bool = True,
                          show_hex: bool = False) -> None:
    """Display the header panel and global parameters of one voice."""
    name_line = f'[bold]Name:[/bold] "{voice_name(voice.name, unicode)}"'
    if show_hex:
        name_line += f" | {name_hex(voice.name)}"

    header = (
        f'[bold]File:[/bold] "{display_filename(filepath)}"\n'
        f"[bold]Voice-#:[/bold] {number}\n"
        f"{name_line}"
    )
    console.print(Panel(header, title="[bold blue]DX7 Voice[/bold blue]", border_style="blue",
                        expand=False))

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Parameter", style="cyan", width=24)
    table.add_column("Value", width=30)

    table.add_row("Algorithm", str(voice.algorithm_number))
    table.add_row("Feedback", str(voice.feedback))
    table.add_row("Oscillator Key Sync", on_off(voice.osc_key_sync))
    table.add_row("Transpose", f"{transpose_name(voice.transpose)} ({voice.transpose_offset:+d})")
    table.add_row("[bold]LFO[/bold]", "")
    table.add_row("  Wave", lfo_wave_name(voice.lfo_wave))
    table.add_row("  Speed", str(voice.lfo_speed))
    table.add_row("  Delay", str(voice.lfo_delay))
    table.add_row("  Pitch Mod Depth", str(voice.lfo_pitch_mod_depth))
    table.add_row("  Amplitude Mod Depth", str(voice.lfo_amp_mod_depth))
    table.add_row("  Key Sync", on_off(voice.lfo_sync))
    table.add_row("  Pitch Mod Sensitivity", str(voice.lfo_pitch_mod_sensitivity))

    console.print(table)

    diagram = algorithm_diagram(voice.algorithm, unicode)
    if diagram:
        console.print(
            Panel(
                Text(diagram.rstrip("\n")),
                title=f"Algorithm {voice.algorithm_number}",
                box=box.ROUNDED if unicode else box.ASCII,
                expand=False,
            )
        )

    peg = Table(title="Pitch Envelope Generator", box=box.ROUNDED, header_style="bold magenta")
    peg.add_column("", style="cyan")
    for i in range(1, 5):
        peg.add_column(str(i), justify="right")
    peg.add_row("Rate", *(str(r) for r in voice.pitch_eg_rates))
    peg.add_row("Level", *(str(level) for level in voice.pitch_eg_levels))

    console.print(peg)


def display_operator_table(voice: VoiceParams) -> None:
    """Display the six operators side by side, operator 1 first."""
    operators = voice.display_operators

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("", style="cyan", no_wrap=True)
    for i in range(1, len(operators) + 1):
        table.add_column(f"Operator {i}", justify="right", no_wrap=True)

    def row(label: str, values) -> None:
        table.add_row(label, *values)

    row("Amplitude Mod Sens", (str(op.amp_mod_sensitivity) for op in operators))
    row("Oscillator Mode", (oscillator_mode_name(op.oscillator_mode, short=True)
                            for op in operators))
    row("Frequency", (format_frequency(op.oscillator_mode, op.frequency_coarse,
                                       op.frequency_fine) for op in operators))
    row("Detune", (format_detune(op.detune) for op in operators))
    table.add_section()
    row("[bold]Envelope Generator[/bold]", [""] * len(operators))
    for i in range(4):
        row(f"  Rate {i + 1} : Level {i + 1}",
            (format_eg_pair(op.eg_rates[i], op.eg_levels[i]) for op in operators))
    table.add_section()
    row("[bold]Keyboard Level Scaling[/bold]", [""] * len(operators))
    row("  Breakpoint", (breakpoint_name(op.breakpoint) for op in operators))
    row("  Left Curve", (curve_name(op.left_curve) for op in operators))
    row("  Right Curve", (curve_name(op.right_curve) for op in operators))
    row("  Left Depth", (str(op.left_depth) for op in operators))
    row("  Right Depth", (str(op.right_depth) for op in operators))
    table.add_section()
    row("Keyboard Rate Scaling", (str(op.rate_scale) for op in operators))
    row("Output Level", (str(op.output_level) for op in operators))
    row("Key Velocity Sens", (str(op.key_velocity_sensitivity) for op in operators))

    console.print(table)

    levels = Table(title="Output Levels", box=box.SIMPLE, show_header=False)
    levels.add_column("Operator", style="dim")
    levels.add_column("Level")
    for i, op in enumerate(operators, 1):
        levels.add_row(f"OP{i}", value_bar(op.output_level))
    console.print(levels)


def display_validation(analysis: DumpAnalysis) -> None:
    """Display the validation result of one file."""
    valid = analysis.valid
    border = "red" if not valid else ("yellow" if analysis.soft_error else "green")

    summary = (
        f'[bold]File:[/bold] {display_filename(analysis.filepath)}\n'
        f"[bold]Type:[/bold] {analysis.shape.value} ({analysis.filesize} bytes)\n"
        f"[bold]Status:[/bold] {status_text(valid, analysis.soft_error)}"
    )
    if analysis.voice_report is not None:
        summary += f"\n[bold]Error Code:[/bold] 0x{analysis.voice_report.code:02X}"
    elif analysis.bank_report is not None:
        repair = "[yellow]yes[/yellow]" if analysis.needs_repair else "no"
        summary += f"\n[bold]Needs Repair:[/bold] {repair}"

    console.print(Panel(summary, title="[bold]Validation Result[/bold]", border_style=border))

    report = analysis.bank_report
    if report is not None and (report.fatal or report.warnings):
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=8)
        table.add_column("Area", style="cyan", width=12)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message")
        table.add_column("Expected", style="dim")
        table.add_column("Actual", style="dim")

        if report.fatal:
            issue = report.fatal
            table.add_row("[red]FATAL[/red]", issue.area, f"0x{issue.offset:04X}",
                          issue.message, issue.expected, issue.actual)
        for issue in report.warnings:
            table.add_row("[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:04X}",
                          issue.message, issue.expected, issue.actual)

        console.print(table)
    elif analysis.voice_report is not None:
        for message in analysis.messages:
            console.print(f"[yellow]{message}[/yellow]")


def display_duplicates(analysis: DumpAnalysis) -> None:
    """Display the duplicate pairs found in a bank."""
    for i, j in analysis.duplicates:
        console.print(f"Found duplicate: {i + 1} = {j + 1}")
    if analysis.duplicates:
        console.print()
