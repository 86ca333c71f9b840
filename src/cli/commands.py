"""CLI commands for the mana base advisor."""
import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.engine.colors import BASIC_LAND_NAMES, color_string, parse_colors
from src.engine.land_tables import LandTableError, land_table_names, load_land_table
from src.engine.lands import distribute_basics
from src.engine.mana_base import category_totals, get_mana_base, total_card_count
from src.engine.schemas import ManaBaseEntry

tables_app = typer.Typer(help="Inspect the bundled land tables")
console = Console()

SENTINEL_STYLES = {"Error": "red", "Warning": "yellow"}


def recommend(
    colors: Optional[List[str]] = typer.Argument(
        None, help="Deck colors, e.g. WU, 'w u', or 'white blue'"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Land type to leave out (repeatable), e.g. OGDualLand"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the recommendation as JSON"),
):
    """Recommend a mana base for 1 to 3 colors.

    Examples:
        mana-base recommend WU
        mana-base recommend W U B --exclude OGDualLand
        mana-base recommend G --json
    """
    try:
        parsed = parse_colors(" ".join(colors or []))
        entries = get_mana_base(parsed, exclude=exclude or [])
    except (LandTableError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([entry.model_dump() for entry in entries], indent=2))
        return

    console.print(f"[bold cyan]Mana base for[/bold cyan] [yellow]{color_string(parsed)}[/yellow]")
    console.print()
    for entry in entries:
        if entry.category in SENTINEL_STYLES:
            style = SENTINEL_STYLES[entry.category]
            console.print(f"[{style}]{entry.category}:[/{style}] {entry.cards[0].type}")
            return
        console.print(_entry_table(entry, parsed))

    totals = category_totals(entries)
    summary = ", ".join(f"{category} {count}" for category, count in totals.items())
    console.print(f"[bold]Total:[/bold] {total_card_count(entries)} cards ({summary})")


def _entry_table(entry: ManaBaseEntry, colors) -> Table:
    table = Table(title=entry.category, title_justify="left")
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Options")

    for card in entry.cards:
        if card.type == "basic":
            split = distribute_basics(colors, card.count)
            options = ", ".join(
                f"{BASIC_LAND_NAMES[color]} x{count}" for color, count in split.items()
            )
        elif card.options:
            options = ", ".join(option.name for option in card.options)
        else:
            options = "[dim]none for these colors[/dim]"
        table.add_row(card.type, str(card.count), options)

    return table


@tables_app.command("list")
def list_tables():
    """List the bundled land tables."""
    table = Table(title="Land Tables")
    table.add_column("Name", style="cyan")
    table.add_column("Records", justify="right")

    try:
        for name in land_table_names():
            table.add_row(name, str(len(load_land_table(name))))
    except LandTableError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(table)


@tables_app.command("show")
def show_table(
    name: str = typer.Argument(..., help="Table name, e.g. shock_lands"),
):
    """Show the records of one land table."""
    try:
        records = load_land_table(name)
    except LandTableError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=name)
    table.add_column("Name", style="cyan")
    table.add_column("Colors")
    for record in records:
        table.add_row(record.name, color_string(record.colors))

    console.print(table)
