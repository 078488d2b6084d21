"""Hour-control commands."""

import click
from maquitrack.cli.equipment_resolution import resolve_equipment_or_exit, resolve_project_or_exit
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.entities import Shift
from maquitrack.domain.equipment import EquipmentService
from maquitrack.domain.hour_control import HourControlService
from maquitrack.domain.project import ProjectService
from maquitrack.utils.date_parser import parse_date
from maquitrack.utils.number_parser import parse_amount


@click.group()
def hours_group():
    """Record and review equipment usage."""
    pass


@hours_group.command("add")
@click.argument("equipment_code")
@click.option("--start", "start_reading", required=True, help="Hour meter at the start")
@click.option("--end", "end_reading", required=True, help="Hour meter at the end")
@click.option("--date", "date_str", default="today", help="Date of use (default: today)")
@click.option("--project", "project_code", help="Project code")
@click.option("--shift", type=click.Choice([s.value for s in Shift]), help="Work shift")
@click.option("--operator", help="Operator name")
@click.option("--activity", help="Work performed")
@click.option("--notes", help="Notes")
@click.pass_context
def add_hours(
    ctx,
    equipment_code: str,
    start_reading: str,
    end_reading: str,
    date_str: str,
    project_code: str | None,
    shift: str | None,
    operator: str | None,
    activity: str | None,
    notes: str | None,
):
    """Record hours worked by a machine.

    Examples:
        maquitrack hours add EXC-001 --start 1500 --end 1620.5
        maquitrack hours add EXC-001 --start 1620.5 --end 1628 --project P-001 --shift mañana
    """
    db = ctx.obj["db"]
    service = HourControlService(db)
    equipment_id = resolve_equipment_or_exit(ctx, EquipmentService(db), equipment_code)
    project_id = None
    if project_code is not None:
        project_id = resolve_project_or_exit(ctx, ProjectService(db), project_code)

    try:
        entry_id = service.register(
            equipment_id=equipment_id,
            date=parse_date(date_str),
            start_reading=parse_amount(start_reading),
            end_reading=parse_amount(end_reading),
            project_id=project_id,
            shift=Shift(shift) if shift else None,
            operator=operator,
            activity=activity,
            notes=notes,
        )
        click.echo(f"Recorded hours for {equipment_code} (ID: {entry_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@hours_group.command("list")
@click.option("--equipment", "equipment_code", help="Only entries of this equipment")
@click.option("--start-date", help="First date to include")
@click.option("--end-date", help="Last date to include")
@click.pass_context
def list_hours(ctx, equipment_code: str | None, start_date: str | None, end_date: str | None):
    """List hour-control entries, newest first."""
    db = ctx.obj["db"]
    service = HourControlService(db)
    equipment_id = None
    if equipment_code is not None:
        equipment_id = resolve_equipment_or_exit(ctx, EquipmentService(db), equipment_code)

    try:
        entries = service.list_entries(
            equipment_id=equipment_id,
            start_date=parse_date(start_date) if start_date else None,
            end_date=parse_date(end_date) if end_date else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No hour-control entries found.")
        return

    click.echo("\nHour control:")
    click.echo("-" * 70)
    for entry in entries:
        click.echo(
            f"{entry.date.isoformat()} | equipment {entry.equipment_id:3d} | "
            f"{entry.start_reading} -> {entry.end_reading} | {entry.worked_hours} h | "
            f"{entry.operator or '-'}"
        )


def register_commands(cli):
    """Register hour-control commands with main CLI."""
    cli.add_command(hours_group, name="hours")
