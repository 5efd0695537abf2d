"""Typer-based CLI for inspecting projections and replaying map commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .dispatcher import MapCameraDispatcher
from .errors import MapCameraError
from .geometry import GeoPoint, ViewportSize
from .projection import geo_to_pixel
from .settings import load_settings
from .simulated import SimulatedMapView
from .viewport import span_for_zoom, span_for_zoom_with_viewport, visible_region

app = typer.Typer(help="Zoom level and region conversions for native map views")
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def span(zoom: float = typer.Argument(..., help="Zoom level to convert")) -> None:
    """Print the square span used when centering at ZOOM."""

    result = span_for_zoom(zoom)
    console.print(f"latitudeDelta={result.latitude_delta:.6f} longitudeDelta={result.longitude_delta:.6f}")


@app.command()
def region(
    lat: float,
    lng: float,
    zoom: float,
    width: float,
    height: float,
) -> None:
    """Print the span and visible rectangle of a WIDTHxHEIGHT view."""

    center = GeoPoint(lat, lng)
    size = ViewportSize(width, height)
    result = span_for_zoom_with_viewport(center, int(zoom), size)
    rect = visible_region(center, zoom, size)

    table = Table(title=f"Viewport at zoom {zoom}")
    table.add_column("Value")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_row("span", f"{result.latitude_delta:.6f}", f"{result.longitude_delta:.6f}")
    table.add_row("northeast", f"{rect.northeast.latitude:.6f}", f"{rect.northeast.longitude:.6f}")
    table.add_row("southwest", f"{rect.southwest.latitude:.6f}", f"{rect.southwest.longitude:.6f}")
    console.print(table)


@app.command()
def project(lat: float, lng: float) -> None:
    """Print the reference-zoom pixel position of LAT/LNG."""

    pixel = geo_to_pixel(GeoPoint(lat, lng))
    console.print(f"x={pixel.x:.3f} y={pixel.y:.3f}")


@app.command()
def replay(
    commands_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON list of commands"),
    width: float = typer.Option(390.0, help="Simulated view width"),
    height: float = typer.Option(844.0, help="Simulated view height"),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings JSON file"),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level"),
) -> None:
    """Replay host commands against a simulated map view."""

    try:
        settings = load_settings(settings_path)
    except MapCameraError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    _configure_logging(log_level or settings.log_level)

    try:
        commands = json.loads(commands_file.read_text(encoding="utf-8"))
    except ValueError as exc:
        typer.echo(f"Error: {commands_file} is not valid JSON: {exc}", err=True)
        raise typer.Exit(1) from exc
    if not isinstance(commands, list):
        typer.echo("Error: the commands file must contain a JSON list", err=True)
        raise typer.Exit(1)

    dispatcher = MapCameraDispatcher(settings)
    dispatcher.attach(0, SimulatedMapView(size=ViewportSize(width, height)))

    for entry in commands:
        if not isinstance(entry, dict) or "method" not in entry:
            typer.echo(f"Error: malformed command {entry!r}", err=True)
            raise typer.Exit(1)
        method = str(entry["method"])
        try:
            reply = dispatcher.handle(0, method, entry.get("payload"))
        except MapCameraError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        console.print(f"{method} -> {json.dumps(reply)}", markup=False, soft_wrap=True)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    app()
