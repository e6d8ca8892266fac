"""CLI entry point for Vault Index."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from vaultindex import __version__
from vaultindex.cli import progress
from vaultindex.config.loader import DEFAULT_CONFIG_PATH, load_config
from vaultindex.models.config import IndexConfig
from vaultindex.services.index_generator import IndexGenerator, IndexStatus
from vaultindex.utils.logging import configure_logging, get_logger
from vaultindex.vault.store import FilesystemVault

logger = get_logger(__name__)
console = Console()


def load_settings(config_path: Optional[Path], vault: Optional[Path]) -> tuple[Path, IndexConfig]:
    """
    Resolve vault path and index settings from config file, environment, and options.

    A --vault option replaces vault.path before validation, so an invalid or
    missing vault path in the config file does not matter, and the config file
    itself becomes optional (index settings then use their defaults).

    Args:
        config_path: Explicit config file path (default: ~/.config/vaultindex/config.yaml)
        vault: Vault directory given on the command line

    Returns:
        Tuple of (vault path, index settings)

    Raises:
        click.ClickException: If config is missing or validation fails
    """
    path = config_path or DEFAULT_CONFIG_PATH

    try:
        config = load_config(path, vault_path=vault)
        logger.info("config_loaded", path=str(path))
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(path))
        raise click.ClickException(str(e))
    except ValueError as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(f"Configuration validation failed:\n{e}")

    return Path(config.vault.path), config.index


def open_vault(vault_path: Path) -> FilesystemVault:
    """Open the vault, turning a bad path into a CLI error."""
    try:
        return FilesystemVault(vault_path.expanduser())
    except ValueError as e:
        logger.error("vault_open_error", path=str(vault_path), error=str(e))
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="vaultindex")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/vaultindex/config.yaml)",
)
@click.option("--verbose", is_flag=True, help="Show run details and log DEBUG events")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Vault Index: Generate outline index notes for markdown vault folders."""
    level = configure_logging("DEBUG" if verbose else None)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.obj["log_level"] = level


@cli.command()
@click.option(
    "--vault",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Override vault path (default: from config)",
)
@click.option(
    "--root",
    "roots",
    multiple=True,
    help="Root folder to index (repeatable; default: from config)",
)
@click.pass_context
def generate(ctx: click.Context, vault: Optional[Path], roots: tuple[str, ...]):
    """
    Generate or update index notes for the configured root folders.

    Examples:
        vaultindex generate                           # All configured roots
        vaultindex generate --root Projects           # Just one root
        vaultindex generate --vault ~/notes --root Areas
    """
    vault_path, index_config = load_settings(ctx.obj["config_path"], vault)
    store = open_vault(vault_path)

    logger.info("generate_command_started", vault=str(vault_path), roots=list(roots))

    if ctx.obj["verbose"]:
        click.echo(f"Vault: {vault_path}")
        click.echo(f"Roots: {', '.join(roots or index_config.roots)}")
        click.echo(f"Log level: {ctx.obj['log_level']}")

    generator = IndexGenerator(store, index_config, notify=progress.notify)
    try:
        results = generator.generate(list(roots) or None)
    except ValueError as e:
        logger.error("invalid_root", roots=list(roots), error=str(e))
        raise click.ClickException(str(e))

    if any(result.status == IndexStatus.FAILED for result in results):
        ctx.exit(1)


@cli.command()
@click.argument("root")
@click.option(
    "--vault",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Override vault path (default: from config)",
)
@click.pass_context
def preview(ctx: click.Context, root: str, vault: Optional[Path]):
    """
    Print the outline for ROOT without writing its index note.

    Examples:
        vaultindex preview Resources
    """
    vault_path, index_config = load_settings(ctx.obj["config_path"], vault)
    store = open_vault(vault_path)

    generator = IndexGenerator(store, index_config)
    try:
        outline = generator.preview(root)
    except ValueError as e:
        logger.error("invalid_root", root=root, error=str(e))
        raise click.ClickException(str(e))

    if outline is None:
        progress.show_error(f'Folder "{root}" not found or is empty.')
        ctx.exit(1)

    console.print(outline, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)


def main():
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
