"""Single-entry title CLI command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from journal import generate_title
from llm import is_configured

console = Console()


@click.command()
@click.argument("content", required=False)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read entry text from a file",
)
def title(content: Optional[str], file_path: Optional[Path]):
    """Generate a poetic title for a journal entry."""
    if file_path:
        content = file_path.read_text(encoding="utf-8")
    if not content:
        raise click.UsageError("Provide entry text or --file")

    if not is_configured():
        console.print("[yellow]OPENAI_API_KEY not set, using fallback title.[/]")

    click.echo(generate_title(content))
