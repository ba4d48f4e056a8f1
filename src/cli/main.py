"""CLI entry point for the archivist tools."""

from pathlib import Path

import click

from cli.commands import moderate, registry, title
from cli.config import DEFAULT_ENV_FILE, load_config_model, load_env_file
from cli.logging_config import setup_logging
from llm import reset_client_config


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_ENV_FILE,
    show_default=True,
    help="Optional key=value file seeding the environment",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool, env_file: Path):
    """Poetic titles, visitor moderation, and the memory registry."""
    load_env_file(env_file)
    # Environment may have changed; resolve the LLM client afresh
    reset_client_config()

    try:
        config = load_config_model()
    except ValueError as e:
        raise click.ClickException(str(e))

    setup_logging(
        json_mode=json_logs or config.logging.json_mode,
        level="DEBUG" if verbose else config.logging.level,
    )
    ctx.obj = config


cli.add_command(registry)
cli.add_command(title)
cli.add_command(moderate)


if __name__ == "__main__":
    cli()
