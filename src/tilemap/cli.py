"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging

import typer
from rich import print

from .config import DEFAULT_DPI
from .errors import InvalidViewportError, QuadKeyError, TileMapError
from .projection import Projection
from .tile_math import (
    ground_resolution,
    map_scale,
    map_size,
    project_geo_to_world,
    project_world_to_geo,
    quad_key_to_tile,
    tile_to_quad_key,
    world_to_tile,
)
from .viewport import compute_view_state

app = typer.Typer(help="Convert between geographic, world and screen coordinates")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (InvalidViewportError, QuadKeyError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except TileMapError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    """Configure logging before any command runs."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
@_handle_errors
def project(
    lat: float = typer.Argument(..., help="Latitude in degrees"),
    lon: float = typer.Argument(..., help="Longitude in degrees"),
    zoom: float = typer.Option(..., "--zoom", "-z"),
) -> None:
    """Project a coordinate to world pixels."""

    point = project_geo_to_world(lat, lon, zoom)
    tile_x, tile_y = world_to_tile(point.x, point.y)
    print(f"World pixel: ({point.x:.3f}, {point.y:.3f})")
    print(f"Tile: {tile_x}/{tile_y}")


@app.command()
@_handle_errors
def unproject(
    x: float = typer.Argument(..., help="World pixel x"),
    y: float = typer.Argument(..., help="World pixel y"),
    zoom: float = typer.Option(..., "--zoom", "-z"),
) -> None:
    """Convert a world pixel back to latitude and longitude."""

    coordinate = project_world_to_geo(x, y, zoom)
    print(f"Latitude: {coordinate.latitude:.6f}")
    print(f"Longitude: {coordinate.longitude:.6f}")


@app.command()
@_handle_errors
def info(
    zoom: float = typer.Option(..., "--zoom", "-z"),
    latitude: float = typer.Option(0.0, "--latitude"),
    dpi: float = typer.Option(DEFAULT_DPI, "--dpi"),
) -> None:
    """Print world size, ground resolution and scale at a zoom level."""

    print(f"Map size: {map_size(zoom)} px")
    print(f"Ground resolution: {ground_resolution(latitude, zoom):.4f} m/px")
    print(f"Map scale: 1:{map_scale(latitude, zoom, dpi):,.0f}")


@app.command()
@_handle_errors
def screen(
    lat: float = typer.Argument(...),
    lon: float = typer.Argument(...),
    center_lat: float = typer.Option(0.0, "--center-lat"),
    center_lon: float = typer.Option(0.0, "--center-lon"),
    zoom: float = typer.Option(2.0, "--zoom", "-z"),
    width: float = typer.Option(800.0, "--width"),
    height: float = typer.Option(600.0, "--height"),
) -> None:
    """Locate a coordinate inside a viewport centred on another coordinate."""

    view = compute_view_state(center_lat, center_lon, zoom, width, height)
    projection = Projection(view)
    point = projection.to_screen_pixels(lat, lon)
    rect = view.intrinsic_screen_rect
    print(f"Screen point: ({point.x:.3f}, {point.y:.3f})")
    print(f"Viewport pixel: ({point.x - rect.left:.3f}, {point.y - rect.top:.3f})")


@app.command()
@_handle_errors
def quadkey(
    tile_x: int = typer.Argument(...),
    tile_y: int = typer.Argument(...),
    zoom: int = typer.Option(..., "--zoom", "-z"),
) -> None:
    """Encode tile indices as a quad key."""

    print(tile_to_quad_key(tile_x, tile_y, zoom))


@app.command()
@_handle_errors
def tile(key: str = typer.Argument(...)) -> None:
    """Decode a quad key into tile indices."""

    tile_x, tile_y, zoom = quad_key_to_tile(key)
    print(f"{zoom}/{tile_x}/{tile_y}")


if __name__ == "__main__":  # pragma: no cover
    app()
