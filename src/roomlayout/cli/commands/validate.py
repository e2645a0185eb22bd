"""Validate command for checking saved room documents.

This module provides the `validate` command that loads a room document,
reports anything dropped while loading, and flags elements that collide
with walls, door clearances or other cabinets.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application.config import ConfigError, load_config
from roomlayout.application.factory import ServiceFactory, get_factory
from roomlayout.application.persistence import (
    document_to_room_state,
    load_room_document,
)
from roomlayout.domain.entities import Element, RoomState
from roomlayout.domain.value_objects import wall_name

validate_app = typer.Typer()


@validate_app.command(name="validate")
def validate(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the saved room document to validate"),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to engine configuration file"),
    ] = None,
) -> None:
    """Validate a saved room document.

    Checks the document for:
    - JSON syntax errors
    - Elements of unknown types (dropped on load)
    - Elements crowding walls, blocking door swings or overlapping cabinets

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors (cannot be used)
        2 - Document is valid but has warnings

    Example:
        roomlayout validate kitchen.json
    """
    typer.echo(f"Validating {document_file}...")
    typer.echo()

    try:
        factory = load_factory(config_file)
        document = load_room_document(document_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    state = document_to_room_state(document, factory.tolerances)
    if state is None:
        typer.echo("Errors:", err=True)
        typer.echo("  Room dimensions are missing", err=True)
        raise typer.Exit(code=1)

    warnings: list[str] = []
    for element_type in document.unknown_element_types():
        warnings.append(f"Unknown element type '{element_type}' was dropped")

    detector = factory.get_collision_detector()
    for element in state.elements:
        report = detector.report(state, element)
        if report.doors:
            warnings.append(
                f"{element.id} ({element.type}) blocks door clearance: {', '.join(report.doors)}"
            )
        if report.elements:
            warnings.append(
                f"{element.id} ({element.type}) overlaps: {', '.join(report.elements)}"
            )
        if report.walls and not _is_settled(factory, state, element):
            names = ", ".join(wall_name(n) for n in report.walls)
            warnings.append(f"{element.id} ({element.type}) crowds {names}")

    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo("Validation passed with warnings")
        raise typer.Exit(code=2)

    typer.echo(f"Validation passed: {len(state.elements)} element(s), {len(state.walls)} wall(s)")
    raise typer.Exit(code=0)


def _is_settled(factory: ServiceFactory, state: RoomState, element: Element) -> bool:
    """Check whether an element already sits where push-away would leave it."""
    w, h = element.footprint(state.scale)
    pushed = factory.get_push_resolver().push_away_from_wall(
        state, element.x, element.y, w, h, element.rotation
    )
    return pushed is not None and abs(pushed.x - element.x) < 1e-6 and abs(pushed.y - element.y) < 1e-6


def load_factory(config_file: Path | None) -> ServiceFactory:
    """Build a service factory from an optional configuration file.

    Without a configuration file the shared default factory is used.

    Raises:
        ConfigError: If the configuration file cannot be loaded.
    """
    if config_file is None:
        return get_factory()
    return ServiceFactory.from_config(load_config(config_file))


def display_load_error(error: ConfigError) -> None:
    """Display a configuration or document loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the saved room document to validate"),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to engine configuration file"),
    ] = None,
) -> None:
    """Validate a saved room document.

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors (cannot be used)
        2 - Document is valid but has warnings

    Example:
        roomlayout validate kitchen.json
    """
    validate(document_file, config_file)
