"""Equipment management commands."""

import click
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.equipment import EquipmentService
from maquitrack.utils.number_parser import parse_amount


@click.group()
def equipment_group():
    """Manage equipment."""
    pass


@equipment_group.command("add")
@click.argument("code")
@click.option("--type", "equipment_type", required=True, help="Equipment type (EXCAVADORA, CARGADOR, ...)")
@click.option("--brand", help="Brand")
@click.option("--model", help="Model")
@click.option("--serial", help="Serial number")
@click.option("--plate", help="License plate")
@click.option("--year", type=int, help="Fabrication year")
@click.option("--hour-meter", default="0", help="Current hour-meter reading")
@click.option("--rate", default="0", help="Hourly rate")
@click.option("--company-id", type=int, help="Owning company ID")
@click.option("--location", help="Location or work section")
@click.pass_context
def add_equipment(
    ctx,
    code: str,
    equipment_type: str,
    brand: str | None,
    model: str | None,
    serial: str | None,
    plate: str | None,
    year: int | None,
    hour_meter: str,
    rate: str,
    company_id: int | None,
    location: str | None,
):
    """Register a machine.

    Examples:
        maquitrack equipment add EXC-001 --type EXCAVADORA --brand CATERPILLAR
        maquitrack equipment add CAR-002 --type CARGADOR --hour-meter 1520.5 --rate 150
    """
    service = EquipmentService(ctx.obj["db"])
    try:
        equipment_id = service.create_equipment(
            code=code,
            type=equipment_type,
            brand=brand,
            model=model,
            serial=serial,
            plate=plate,
            year=year,
            hour_meter=parse_amount(hour_meter),
            hourly_rate=parse_amount(rate),
            company_id=company_id,
            location=location,
        )
        click.echo(f"Created equipment '{code}' (ID: {equipment_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@equipment_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive equipment")
@click.pass_context
def list_equipment(ctx, include_inactive: bool):
    """List equipment."""
    service = EquipmentService(ctx.obj["db"])

    machines = service.list_equipment(active_only=not include_inactive)
    if not machines:
        click.echo("No equipment found.")
        return

    click.echo("\nEquipment:")
    click.echo("-" * 80)
    for machine in machines:
        status = machine.status.value if machine.status else "-"
        click.echo(
            f"{machine.code:12s} | {machine.type:15s} | {machine.brand or '-':12s} | "
            f"{machine.hour_meter:>10} h | {status}"
        )


@equipment_group.command("show")
@click.argument("code")
@click.pass_context
def show_equipment(ctx, code: str):
    """Show the details of a machine."""
    service = EquipmentService(ctx.obj["db"])
    try:
        machine = service.get_equipment_by_code(code)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nEquipment {machine.code} (ID: {machine.id})")
    click.echo("-" * 40)
    click.echo(f"Type:        {machine.type}")
    click.echo(f"Brand/model: {machine.brand or '-'} {machine.model or ''}".rstrip())
    click.echo(f"Serial:      {machine.serial or '-'}")
    click.echo(f"Plate:       {machine.plate or '-'}")
    click.echo(f"Year:        {machine.year or '-'}")
    click.echo(f"Hour meter:  {machine.hour_meter}")
    click.echo(f"Hourly rate: {machine.hourly_rate}")
    click.echo(f"Status:      {machine.status.value if machine.status else '-'}")
    click.echo(f"Location:    {machine.location or '-'}")


def register_commands(cli):
    """Register equipment commands with main CLI."""
    cli.add_command(equipment_group, name="equipment")
