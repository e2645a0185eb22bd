"""Typer CLI for room layout documents."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application.config import ConfigError
from roomlayout.application.persistence import load_room_state
from roomlayout.cli.commands import display_load_error, load_factory, validate_command
from roomlayout.domain.catalog import element_types_for_room
from roomlayout.domain.entities import RoomState
from roomlayout.domain.value_objects import ElementCategory, RoomType, wall_name

app = typer.Typer(
    name="roomlayout",
    help="Inspect, validate and price kitchen and bathroom layouts.",
)

app.command(name="validate")(validate_command)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _load_state(document_file: Path, config_file: Path | None):
    """Load the factory and room state, exiting with code 1 on errors."""
    try:
        factory = load_factory(config_file)
        state = load_room_state(document_file, factory.tolerances)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    if state is None:
        typer.echo("Error: room dimensions are missing", err=True)
        raise typer.Exit(code=1)
    return factory, state


@app.command()
def price(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the saved room document"),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to engine configuration file"),
    ] = None,
    itemize: Annotated[
        bool,
        typer.Option("--itemize", "-i", help="Show the price of each line item"),
    ] = False,
) -> None:
    """Quote the price of a saved room design.

    Example:
        roomlayout price kitchen.json --itemize
    """
    factory, state = _load_state(document_file, config_file)
    breakdown = factory.get_pricing_service().breakdown(state)

    if itemize:
        for element_id, amount in breakdown.cabinets.items():
            element = state.element(element_id)
            label = element.type if element is not None else element_id
            typer.echo(f"  {element_id:<10} {label:<24} ${amount:>10,.2f}")
        typer.echo(f"  {'colors':<35} ${breakdown.colors:>10,.2f}")
        typer.echo(f"  {'walls removed':<35} ${breakdown.walls_removed:>10,.2f}")
        typer.echo(f"  {'walls added':<35} ${breakdown.walls_added:>10,.2f}")
        typer.echo()
    typer.echo(f"Total: ${breakdown.total:,.2f}")


def _summary(state: RoomState) -> dict:
    return {
        "dimensions": {
            "widthFt": state.dimensions.width_ft,
            "heightFt": state.dimensions.height_ft,
            "wallHeightIn": state.dimensions.wall_height_in,
        },
        "scale": state.scale,
        "walls": [
            {
                "wallNumber": n,
                "name": wall_name(n),
                "present": state.is_wall_present(n),
                "lengthIn": state.wall_length_inches(n),
            }
            for n in state.all_available_walls
        ],
        "elements": [
            {
                "id": e.id,
                "type": e.type,
                "x": e.x,
                "y": e.y,
                "width": e.width,
                "depth": e.depth,
                "rotation": e.rotation,
                "material": state.material_for(e.id),
            }
            for e in state.elements
        ],
        "doors": [
            {
                "id": d.id,
                "wallNumber": d.wall_number,
                "position": d.position,
                "width": d.width,
                "type": d.type.value,
            }
            for d in state.doors
        ],
    }


@app.command()
def inspect(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the saved room document"),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to engine configuration file"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.TEXT,
) -> None:
    """Summarize the walls, doors and elements of a saved room design."""
    factory, state = _load_state(document_file, config_file)
    summary = _summary(state)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(summary, indent=2))
        return

    dims = state.dimensions
    typer.echo(f"Room: {dims.width_ft}ft x {dims.height_ft}ft, walls {dims.wall_height_in}in high")
    typer.echo(f"Scale: {state.scale:.3f} units/in")
    typer.echo()
    typer.echo("Walls:")
    for wall in summary["walls"]:
        status = "present" if wall["present"] else "removed"
        length = wall["lengthIn"]
        typer.echo(f"  {wall['name']:<16} {status:<8} {length:.1f}in")
    typer.echo()
    typer.echo(f"Elements ({len(state.elements)}):")
    for element in state.elements:
        typer.echo(
            f"  {element.id:<8} {element.type:<22} "
            f"{element.width:g}x{element.depth:g}in at ({element.x:.1f}, {element.y:.1f}) "
            f"rot {element.rotation}"
        )
    if state.doors:
        typer.echo()
        typer.echo(f"Doors ({len(state.doors)}):")
        for door in state.doors:
            typer.echo(
                f"  {door.id:<8} {door.type.value:<9} {door.width:g}in on "
                f"{wall_name(door.wall_number)} at {door.position:g}%"
            )
    typer.echo()
    typer.echo(f"Total price: ${factory.get_pricing_service().compute_price(state):,.2f}")


@app.command()
def catalog(
    room: Annotated[
        RoomType,
        typer.Argument(help="Room to list element types for"),
    ] = RoomType.KITCHEN,
    category: Annotated[
        ElementCategory | None,
        typer.Option("--category", help="Only list this category"),
    ] = None,
) -> None:
    """List the element types available in a room."""
    for spec in element_types_for_room(room, category):
        height = f"{spec.height:g}in" + (" fixed" if spec.has_fixed_height else "")
        typer.echo(
            f"  {spec.type:<24} {spec.name:<28} "
            f"{spec.default_width:g}x{spec.default_depth:g}in  {height}"
        )


if __name__ == "__main__":
    app()
