"""Main CLI application entry point."""
import logging

import typer
from rich.console import Console

from src.cli import commands
from src.config import settings

app = typer.Typer(
    name="mana-base",
    help="Mana base recommendations for 1 to 3 color decks",
    add_completion=False,
)

app.command("recommend")(commands.recommend)
app.add_typer(commands.tables_app, name="tables", help="Inspect the bundled land tables")

console = Console()


@app.command()
def version():
    """Show version information."""
    console.print("mana-base version 0.1.0")


def main():
    """Entry point for the CLI."""
    logging.basicConfig(level=settings.log_level)
    app()


if __name__ == "__main__":
    main()
