"""CLI error handling helpers."""

import logging

import click

from maquitrack.domain.errors import DomainError, SpreadsheetError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Unreadable workbooks also get a pointer to the template command.
    """
    logger.debug("%s failed", ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, SpreadsheetError):
        click.echo("Hint: 'maquitrack template CATEGORY FILE' writes the expected layout", err=True)
    ctx.exit(1)
