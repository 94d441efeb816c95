import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from civicgeo.config.logging_setup import setup_logging
from civicgeo.config.settings import get_settings
from civicgeo.middleware.request_id import set_request_id
from civicgeo.services.boundary_service import fetch_boundary
from civicgeo.services.containment_service import InvalidCoordinatesError, check_report_location
from civicgeo.utils.address_utils import has_house_number, is_on_street
from civicgeo.utils.async_utils import run_async_safe
from civicgeo.utils.geo_utils import calculate_distance_meters
from civicgeo.utils.geojson_utils import extract_polygons

app = typer.Typer(help="Geofencing and geographic search helpers for civic-issue reports")
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show INFO logs"),
):
    """Configure logging for every command."""
    level = logging.INFO if verbose else logging.WARNING
    setup_logging(default_level=level, level=level)
    set_request_id()


def _load_boundary(url: Optional[str], name: Optional[str]):
    settings = get_settings()
    return run_async_safe(
        fetch_boundary(url or settings.boundary_url, name or settings.municipality_name)
    )


@app.command()
def contains(
    latitude: float = typer.Argument(..., help="Latitude in degrees"),
    longitude: float = typer.Argument(..., help="Longitude in degrees"),
    url: Optional[str] = typer.Option(None, help="Boundary GeoJSON URL"),
    name: Optional[str] = typer.Option(None, help="Municipality name"),
):
    """
    Check whether a point is inside the municipal boundary.

    Exits with code 2 when the point is rejected.
    """
    boundary = _load_boundary(url, name)

    try:
        result = check_report_location(latitude, longitude, boundary)
    except InvalidCoordinatesError as e:
        for message in e.errors:
            console.print(f"[bold red]{message}")
        raise typer.Exit(code=1)

    color = "green" if result.allowed else "red"
    verdict = "allowed" if result.allowed else "rejected"
    console.print(f"[bold {color}]{verdict}[/] ({result.reason.value})")
    if not result.allowed:
        raise typer.Exit(code=2)


@app.command()
def distance(
    lat1: float = typer.Argument(...),
    lon1: float = typer.Argument(...),
    lat2: float = typer.Argument(...),
    lon2: float = typer.Argument(...),
):
    """Print the great-circle distance between two points."""
    meters = calculate_distance_meters(lat1, lon1, lat2, lon2)
    console.print(f"{meters:.1f} m ({meters / 1000:.3f} km)")


@app.command()
def boundary(
    url: Optional[str] = typer.Option(None, help="Boundary GeoJSON URL"),
    name: Optional[str] = typer.Option(None, help="Municipality name"),
):
    """Fetch the municipal boundary and summarize its polygons."""
    settings = get_settings()
    feature = _load_boundary(url, name)

    if feature is None:
        console.print(f"[bold red]Boundary for '{name or settings.municipality_name}' is unavailable")
        raise typer.Exit(code=1)

    rings = extract_polygons(feature)
    properties = feature.get("properties") or {}
    table = Table(title=f"Boundary: {properties.get('name', '?')}")
    table.add_column("Polygon", justify="right")
    table.add_column("Vertices", justify="right")
    for index, ring in enumerate(rings, start=1):
        table.add_row(str(index), str(len(ring)))
    console.print(table)


@app.command()
def address(
    display_address: str = typer.Argument(..., help="Display address"),
    street: Optional[str] = typer.Option(None, help="Street name to match"),
):
    """Apply the house-number and street heuristics to an address."""
    table = Table(show_header=False)
    table.add_row("House number", "yes" if has_house_number(display_address) else "no")
    if street is not None:
        table.add_row(f"On '{street}'", "yes" if is_on_street(display_address, street) else "no")
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
