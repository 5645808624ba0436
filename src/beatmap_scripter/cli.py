"""CLI interface for beatmap-scripter."""

import json
import os
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .animation import (
    DuplicatesSettings,
    OptimizeSettings,
    SimilarPointsSettings,
    SimilarPointsSlopeSettings,
    keyframes_from_raw,
    optimize_points,
)
from .constants import DEFAULT_DECIMALS, DEFAULT_PASSES
from .difficulty import Difficulty, OptimizeReport
from .lighting import LightRemapper
from .preview import render_curve_preview

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)

app = typer.Typer()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


@app.command("optimize")
def optimize(
    input_path: str = typer.Argument(..., help="Difficulty file to optimize"),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to save the result (defaults to the input file)",
    ),
    passes: int | None = typer.Option(
        None,
        "--passes",
        "-p",
        help=f"Optimizer sweeps per curve (env BEATMAP_PASSES, default {DEFAULT_PASSES})",
    ),
    decimals: int | None = typer.Option(
        None,
        "--decimals",
        help=f"Decimals kept when saving, 0 to keep all (env BEATMAP_DECIMALS, default {DEFAULT_DECIMALS})",
    ),
    no_duplicates: bool = typer.Option(False, "--no-duplicates", help="Skip the exact duplicate check"),
    no_similar: bool = typer.Option(False, "--no-similar", help="Skip the similar points check"),
    no_slope: bool = typer.Option(False, "--no-slope", help="Skip the similar slope check"),
) -> None:
    """
    Remove redundant keyframes from every animation in a difficulty.

    Examples:
      # Optimize in place
      beatmap-scripter optimize ExpertPlusStandard.dat

      # Write to another file with two passes
      beatmap-scripter optimize ExpertPlusStandard.dat -o out.dat --passes 2
    """
    try:
        passes = passes if passes is not None else _env_int("BEATMAP_PASSES", DEFAULT_PASSES)
        decimals = decimals if decimals is not None else _env_int("BEATMAP_DECIMALS", DEFAULT_DECIMALS)
        settings = OptimizeSettings(
            optimize_duplicates=DuplicatesSettings(active=not no_duplicates),
            optimize_similar_points=SimilarPointsSettings(active=not no_similar),
            optimize_similar_points_slope=SimilarPointsSlopeSettings(active=not no_slope),
        )

        difficulty = _load_difficulty(input_path)

        console.print(f"[bold blue]Optimizing animations ({passes} pass(es))...[/bold blue]")
        try:
            report = difficulty.optimize(settings, passes)
        except ValueError as e:
            raise CLIError(f"Malformed animation: {e}")
        difficulty.reduce_decimals(decimals)

        _print_report(report)
        _save_difficulty(difficulty, output or input_path)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command("preview")
def preview(
    input_path: str = typer.Argument(..., help="Difficulty file to read"),
    name: str = typer.Argument(..., help="Point definition to preview"),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="PNG file to write (defaults to <name>.png)",
    ),
    passes: int = typer.Option(DEFAULT_PASSES, "--passes", "-p", help="Optimizer sweeps"),
) -> None:
    """Render a point definition before and after optimizing, without changing the file."""
    try:
        difficulty = _load_difficulty(input_path)
        try:
            raw_points = difficulty.point_definition(name)
            original = keyframes_from_raw(raw_points)
        except KeyError:
            raise CLIError(f"Point definition '{name}' not found in '{input_path}'")
        except ValueError as e:
            raise CLIError(f"Malformed point definition '{name}': {e}")

        optimized = optimize_points(list(original), OptimizeSettings(), passes)
        output_path = output or f"{name}.png"
        render_curve_preview(original, optimized).save(output_path, format="PNG")

        console.print(
            f"[green]✓[/green] {name}: {len(original)} -> {len(optimized)} keyframes, "
            f"preview saved to {output_path}"
        )

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command("remap-test")
def remap_test(
    ids: list[int] = typer.Argument(..., help="Light IDs to run through the remapper"),
    normalize_step: float | None = typer.Option(None, "--normalize-step", help="Step of the input sequence"),
    start: float = typer.Option(1, "--start", help="Start of the input sequence"),
    offset: int = typer.Option(0, "--offset", help="Added to every light ID at the end"),
    step: int | None = typer.Option(None, "--step", help="Step of the output sequence"),
) -> None:
    """Dry-run a normalize + add-to-end light ID remap and print the event."""
    try:
        if normalize_step == 0:
            raise CLIError("--normalize-step must not be 0")

        remapper = LightRemapper(console=console)
        if normalize_step is not None:
            remapper.normalize_linear(normalize_step, start)
        if offset or step:
            remapper.add_to_end(offset, step)

        console.print("[bold blue]Remapped event:[/bold blue]")
        remapper.test(ids)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise CLIError(f"Environment variable {name} must be an integer, got '{raw}'")


def _load_difficulty(file_path: str) -> Difficulty:
    """Load a difficulty from a JSON file."""
    console.print(f"[bold blue]Loading difficulty from {file_path}...[/bold blue]")
    try:
        return Difficulty.load(file_path)
    except FileNotFoundError:
        raise CLIError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in '{file_path}': {e}")


def _save_difficulty(difficulty: Difficulty, file_path: str) -> None:
    """Save a difficulty to a JSON file."""
    try:
        difficulty.save(file_path)
        console.print(f"\n[green]✓[/green] Difficulty saved to {file_path}")
    except IOError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


def _print_report(report: OptimizeReport) -> None:
    table = Table(title="Keyframe optimization")
    table.add_column("Animations", justify="right")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")
    table.add_column("Removed", justify="right", style="green")
    table.add_row(
        str(report.animations),
        str(report.keyframes_before),
        str(report.keyframes_after),
        str(report.removed),
    )
    console.print(table)


if __name__ == "__main__":
    app()
