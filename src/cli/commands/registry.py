"""Memory registry CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console

from cli.config_models import ArchivistConfig
from llm import ClientConfig
from registry import ContentAPIError, run_batch

console = Console()
logger = structlog.get_logger()


@click.group()
def registry():
    """Manage the memory title registry."""
    pass


@registry.command("build")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Registry file to overwrite (default: MEMORY_REGISTRY_PATH or mocks/data/memory-registry.json)",
)
@click.pass_obj
def registry_build(config: ArchivistConfig, output: Optional[Path]):
    """Title every thought from the content API and rewrite the registry."""
    if not config.llm.api_key:
        console.print("[red]Error:[/] OPENAI_API_KEY not found in environment or .env.local")
        sys.exit(1)

    output = output or config.paths.registry_path
    client_config = ClientConfig(api_key=config.llm.api_key, base_url=config.llm.base_url)

    with console.status("Fetching thoughts and generating titles..."):
        try:
            result = run_batch(
                client_config,
                config.content_api.url,
                config.content_api.api_key,
                output,
                model=config.llm.model,
            )
        except ContentAPIError as e:
            logger.error("registry_build_failed", error=str(e))
            raise click.ClickException(str(e))

    for content_hash, entry in result.memories.items():
        console.print(f"  [cyan]{entry.original_path}[/] [dim]{content_hash[:12]}[/] {entry.title}")
    console.print(f"\n[green]Registry saved[/] to {output} ({len(result.memories)} memories)")
