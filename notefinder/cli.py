"""Command-line interface for notefinder.

Provides commands for:
- resolve: Resolve frequencies to notes and deviations
- table: Show the supported note table
- detect: Estimate the note played in an audio file
"""

import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table

from .core import NoteResult
from .core.constants import DEFAULT_TOLERANCE

app = typer.Typer(
    name="notefinder",
    help="Frequency to musical note resolution for tuners",
    rich_markup_mode="markdown",
)
console = Console()

DIRECTION_STYLES = {"flat": "yellow", "sharp": "magenta", "in tune": "green", "unknown": "red"}


def _show_results_table(
    results: List[NoteResult],
    tolerance: float = DEFAULT_TOLERANCE,
    title: str = "Resolved Notes",
) -> None:
    """Display resolved notes in a table."""
    table = Table(title=title)
    table.add_column("Frequency (Hz)", style="cyan", justify="right")
    table.add_column("Note", style="bold")
    table.add_column("Reference (Hz)", style="blue", justify="right")
    table.add_column("Deviation (%)", justify="right")
    table.add_column("Direction")

    for result in results:
        direction = result.classify(tolerance)
        style = DIRECTION_STYLES[direction]
        table.add_row(
            f"{result.frequency:.2f}",
            result.pitch_name,
            f"{result.reference_frequency:.2f}",
            f"[{style}]{result.percent_diff:+.2f}[/{style}]",
            f"[{style}]{direction}[/{style}]",
        )

    console.print(table)


@app.command()
def resolve(
    frequencies: List[float] = typer.Argument(..., help="Frequencies in Hz"),
    strict: bool = typer.Option(
        False, "--strict", help="Reject frequencies outside 16.35-5587.65 Hz"
    ),
    tie_break: str = typer.Option(
        "nearest", "--tie-break", help="Candidate comparison: nearest or signed"
    ),
    tolerance: float = typer.Option(
        DEFAULT_TOLERANCE, "--tolerance", "-t", help="Deviation (%) still reported as in tune"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Resolve one or more frequencies to notes.

    Examples:
        notefinder resolve 440
        notefinder resolve 82.4 110 146.8 --json
    """
    from .finder import ArrayNoteFinder

    try:
        finder = ArrayNoteFinder(tie_break=tie_break, strict=strict)
        results = [finder.resolve(freq) for freq in frequencies]
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data=[r.to_dict() for r in results])
        return

    for result in results:
        if not finder.in_range(result.frequency):
            console.print(
                f"[yellow]Warning: {result.frequency} Hz is outside the note table; "
                f"deviation is unreliable[/yellow]"
            )
    _show_results_table(results, tolerance=tolerance)


@app.command(name="table")
def note_table():
    """Show every note the finder can resolve."""
    from .core.constants import NOTE_FREQUENCIES
    from .finder import ArrayNoteFinder

    finder = ArrayNoteFinder()
    table = Table(title="Equal-Tempered Note Table (A4 = 440 Hz)")
    table.add_column("Index", style="dim", justify="right")
    table.add_column("Note", style="cyan")
    table.add_column("Frequency (Hz)", style="green", justify="right")

    for index, freq in enumerate(NOTE_FREQUENCIES):
        result = finder.resolve(freq)
        table.add_row(str(index), result.pitch_name, f"{freq:.4f}")

    console.print(table)


@app.command()
def detect(
    input_file: Path = typer.Argument(..., help="Input audio file"),
    method: str = typer.Option(
        "pyin", "--method", "-m", help="Pitch detection method: pyin or yin"
    ),
    offset: float = typer.Option(0.0, "--offset", help="Start time in seconds"),
    duration: Optional[float] = typer.Option(
        None, "--duration", "-d", help="Seconds of audio to analyze (default: all)"
    ),
    frames: bool = typer.Option(
        False, "--frames", "-f", help="Show a reading for every voiced frame"
    ),
    tolerance: float = typer.Option(
        DEFAULT_TOLERANCE, "--tolerance", "-t", help="Deviation (%) still reported as in tune"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Estimate the note played in an audio file."""
    import numpy as np
    from .input import AudioLoader
    from .analysis import PitchAnalyzer

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        loader = AudioLoader()
        audio, sr = loader.load(str(input_file), offset=offset, duration=duration)
        analyzer = PitchAnalyzer(sr=sr)

        if not json_output:
            console.print(f"[blue]Loaded:[/blue] {input_file} ({loader.get_duration(audio, sr):.2f}s)")

        result = analyzer.estimate(audio, method=method)

        frame_results = []
        if frames:
            times, f0 = analyzer.get_pitch_track(audio, method=method)
            voiced = np.isfinite(f0) & (f0 > 0)
            frame_results = list(zip(times[voiced], analyzer.resolve_f0(f0[voiced])))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if result is None:
        console.print("[yellow]No pitched sound detected[/yellow]")
        raise typer.Exit(1)

    if json_output:
        data = result.to_dict()
        if frames:
            data["frames"] = [
                {"time": float(t), **r.to_dict()} for t, r in frame_results
            ]
        console.print_json(data=data)
        return

    if frames:
        table = Table(title="Frame Readings")
        table.add_column("Time (s)", style="dim", justify="right")
        table.add_column("Frequency (Hz)", style="cyan", justify="right")
        table.add_column("Note", style="bold")
        table.add_column("Deviation (%)", justify="right")
        for t, r in frame_results:
            table.add_row(f"{t:.3f}", f"{r.frequency:.2f}", r.pitch_name, f"{r.percent_diff:+.2f}")
        console.print(table)

    _show_results_table([result], tolerance=tolerance, title="Estimated Note")


if __name__ == "__main__":
    app()
