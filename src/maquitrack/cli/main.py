"""Main CLI entry point."""

import logging

import click
from maquitrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from maquitrack.cli.commands import (
    alerts,
    company,
    equipment,
    hours,
    import_cmd,
    maintenance,
    project,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MAQUITRACK_DB_PATH environment variable)",
    envvar="MAQUITRACK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress details to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Maquitrack - Construction machinery tracking.

    Keep track of equipment, hour meters, maintenance, SOAT insurance and
    technical inspections, and load them in bulk from Excel workbooks.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
import_cmd.register_commands(cli)
company.register_commands(cli)
equipment.register_commands(cli)
project.register_commands(cli)
hours.register_commands(cli)
maintenance.register_commands(cli)
alerts.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
