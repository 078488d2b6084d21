"""Maintenance commands."""

import click
from maquitrack.cli.equipment_resolution import resolve_equipment_or_exit
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.entities import MaintenanceStatus
from maquitrack.domain.equipment import EquipmentService
from maquitrack.domain.maintenance import MaintenanceService
from maquitrack.utils.date_parser import parse_date

STATUS_CHOICE = click.Choice([s.value for s in MaintenanceStatus])


@click.group()
def maintenance_group():
    """Review and update maintenance work."""
    pass


@maintenance_group.command("list")
@click.option("--equipment", "equipment_code", help="Only maintenance of this equipment")
@click.option("--status", type=STATUS_CHOICE, help="Only maintenance in this status")
@click.pass_context
def list_maintenance(ctx, equipment_code: str | None, status: str | None):
    """List maintenance records."""
    db = ctx.obj["db"]
    service = MaintenanceService(db)
    equipment_id = None
    if equipment_code is not None:
        equipment_id = resolve_equipment_or_exit(ctx, EquipmentService(db), equipment_code)

    records = service.list_maintenances(
        equipment_id=equipment_id,
        status=MaintenanceStatus(status) if status else None,
    )
    if not records:
        click.echo("No maintenance found.")
        return

    click.echo("\nMaintenance:")
    click.echo("-" * 80)
    for record in records:
        when = record.scheduled_date or record.executed_date
        reading = f"{record.hour_meter_reading} h" if record.hour_meter_reading is not None else "-"
        click.echo(
            f"ID: {record.id:3d} | {when.isoformat() if when else '-':10s} | {record.kind.value:11s} | "
            f"{record.status.value:11s} | {reading:>10s} | {record.description}"
        )


@maintenance_group.command("status")
@click.argument("maintenance_id", type=int)
@click.argument("status", type=STATUS_CHOICE)
@click.option("--date", "date_str", help="Execution date when completing (default: today)")
@click.pass_context
def change_status(ctx, maintenance_id: int, status: str, date_str: str | None):
    """Change the status of a maintenance record.

    Examples:
        maquitrack maintenance status 12 en_proceso
        maquitrack maintenance status 12 completado --date 15/01/2024
    """
    service = MaintenanceService(ctx.obj["db"])
    try:
        service.change_status(
            maintenance_id,
            MaintenanceStatus(status),
            executed_date=parse_date(date_str) if date_str else None,
        )
        click.echo(f"Maintenance {maintenance_id} is now '{status}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register maintenance commands with main CLI."""
    cli.add_command(maintenance_group, name="maintenance")
