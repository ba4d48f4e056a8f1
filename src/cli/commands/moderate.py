"""Visitor message moderation CLI command."""

import click
from rich.console import Console

from moderation import moderate_content_sync

console = Console()


@click.command()
@click.argument("message")
@click.option("-n", "--name", default="anonymous", help="Visitor name")
def moderate(message: str, name: str):
    """Classify a visitor message (prints the moderation JSON)."""
    result = moderate_content_sync(message, name)
    click.echo(result.model_dump_json())
    style = "green" if result.allowed else "red"
    console.print(f"[{style}]{'allowed' if result.allowed else 'rejected'}[/] ({result.reason})", highlight=False)
