"""Operator notifications for CLI runs.

Info goes to stdout, warnings and errors to stderr.
"""

import click

from vaultindex.services.index_generator import NotifyLevel


def show_info(message: str) -> None:
    """Show informational message.

    Args:
        message: Message to display
    """
    click.echo(message)


def show_warning(message: str) -> None:
    """Show warning message.

    Args:
        message: Warning message to display
    """
    click.echo(f"Warning: {message}", err=True)


def show_error(message: str) -> None:
    """Show error message.

    Args:
        message: Error message to display
    """
    click.echo(f"Error: {message}", err=True)


def notify(message: str, level: NotifyLevel) -> None:
    """Dispatch a generator notification to the matching display function."""
    if level == NotifyLevel.ERROR:
        show_error(message)
    elif level == NotifyLevel.WARNING:
        show_warning(message)
    else:
        show_info(message)
