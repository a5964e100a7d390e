"""Command Line Interface for Floor Sketch.

This module provides a simple CLI for rendering the sample sketch, opening it
in an interactive window, inspecting its command log and measuring distances.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import config
from .core.model import Point
from .engine.factory import build_drawer
from .sample import draw_sample_bedroom
from .surface.matplotlib_surface import MatplotlibSurface
from .surface.recording import RecordingSurface
from .visualization.generator import apply_zoom, generate_sketch_image, measure_world
from .visualization.viewer import SketchViewer

app = typer.Typer(
    name="floorsketch",
    help="A CLI tool for sketching floor plans from drawing commands",
    no_args_is_help=True,
)
console = Console()


def _format_value(value: Any) -> str:
    if isinstance(value, dict) and set(value) == {"x", "y"}:
        return f"({value['x']:g}, {value['y']:g})"
    return str(value)


def _format_params(params: Dict[str, Any]) -> str:
    return ", ".join(f"{key}={_format_value(value)}" for key, value in params.items() if key != "type")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Sketch floor plans and measure them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def render(
    output: Path = typer.Option(..., "--out", "-o", help="Path to output PNG file"),
    width: int = typer.Option(config.DEFAULT_SURFACE_WIDTH, "--width", help="Image width in pixels"),
    height: int = typer.Option(config.DEFAULT_SURFACE_HEIGHT, "--height", help="Image height in pixels"),
    zoom: int = typer.Option(0, "--zoom", "-z", help="Zoom steps, negative to zoom out"),
):
    """Render the sample sketch to a PNG image."""
    if generate_sketch_image(output, width=width, height=height, zoom=zoom):
        console.print(f"[green]✓[/green] Sketch written to {output}")
    else:
        console.print(f"[red]Error: could not write {output}[/red]")
        raise typer.Exit(1)


@app.command()
def show(
    width: int = typer.Option(config.DEFAULT_SURFACE_WIDTH, "--width", help="Window width in pixels"),
    height: int = typer.Option(config.DEFAULT_SURFACE_HEIGHT, "--height", help="Window height in pixels"),
):
    """Open the sample sketch in an interactive window."""
    surface = MatplotlibSurface(width, height)
    drawer = draw_sample_bedroom(build_drawer(surface))
    console.print("[blue]ℹ[/blue] Click to anchor, move to measure, Esc to cancel, +/- to zoom")
    SketchViewer(drawer, surface).show()


@app.command()
def log():
    """Show the command log of the sample sketch."""
    drawer = draw_sample_bedroom(build_drawer(RecordingSurface()))

    table = Table(title="Command log")
    table.add_column("#", justify="right")
    table.add_column("Command", style="cyan")
    table.add_column("Parameters")

    for i, command in enumerate(drawer.commands):
        params = command.to_dict()
        table.add_row(str(i), params["type"], _format_params(params))

    console.print(table)

    point = drawer.current_point
    console.print(f"Pen at ({point.x:g}, {point.y:g}), thickness {drawer.current_thickness.value}")


@app.command()
def trace(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show at most N primitives"),
):
    """Show the surface primitives issued by one replay of the sample sketch."""
    surface = RecordingSurface()
    drawer = draw_sample_bedroom(build_drawer(surface))
    surface.reset()
    drawer.redraw()

    calls = surface.calls if limit is None else surface.calls[:limit]

    table = Table(title="Surface primitives")
    table.add_column("#", justify="right")
    table.add_column("Primitive", style="cyan")
    table.add_column("Arguments")
    for i, (name, args) in enumerate(calls):
        table.add_row(str(i), name, ", ".join(map(str, args)))

    console.print(table)
    console.print(f"{len(surface.calls)} primitives in total")


@app.command()
def measure(
    x1: float = typer.Argument(..., help="Start x in millimetres"),
    y1: float = typer.Argument(..., help="Start y in millimetres"),
    x2: float = typer.Argument(..., help="End x in millimetres"),
    y2: float = typer.Argument(..., help="End y in millimetres"),
    width: int = typer.Option(config.DEFAULT_SURFACE_WIDTH, "--width", help="Surface width in pixels"),
    height: int = typer.Option(config.DEFAULT_SURFACE_HEIGHT, "--height", help="Surface height in pixels"),
    zoom: int = typer.Option(0, "--zoom", "-z", help="Zoom steps, negative to zoom out"),
    output: Optional[Path] = typer.Option(None, "--out", "-o", help="Save the measured sketch as PNG"),
):
    """Measure the distance between two world points on the sample sketch."""
    surface = MatplotlibSurface(width, height) if output else RecordingSurface(width, height)
    try:
        drawer = apply_zoom(draw_sample_bedroom(build_drawer(surface)), zoom)
        result = measure_world(drawer, Point(x1, y1), Point(x2, y2))

        console.print(f"[bold]Distance:[/bold] {result.label}")
        console.print(f"Surface distance: {result.surface_distance:.2f} at scale {drawer.scale:.5f}")

        if output:
            surface.save(output)
            console.print(f"[green]✓[/green] Measurement written to {output}")
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        if output:
            surface.close()
