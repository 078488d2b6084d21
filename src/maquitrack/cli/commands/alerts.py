"""Alert commands."""

import click
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.alerts import AlertService
from maquitrack.utils.date_parser import parse_date


@click.group()
def alerts_group():
    """Scan for and review expiry alerts."""
    pass


@alerts_group.command("scan")
@click.option("--date", "date_str", default="today", help="Reference date (default: today)")
@click.pass_context
def scan_alerts(ctx, date_str: str):
    """Create alerts for upcoming maintenance and expiring SOAT or inspections."""
    service = AlertService(ctx.obj["db"])
    try:
        created = service.scan(parse_date(date_str))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"{len(created)} alerts created")


@alerts_group.command("list")
@click.option("--all", "include_acknowledged", is_flag=True, help="Include acknowledged alerts")
@click.pass_context
def list_alerts(ctx, include_acknowledged: bool):
    """List alerts."""
    service = AlertService(ctx.obj["db"])

    alerts = service.list_alerts(include_acknowledged=include_acknowledged)
    if not alerts:
        click.echo("No alerts found.")
        return

    click.echo("\nAlerts:")
    click.echo("-" * 80)
    for alert in alerts:
        mark = " (ack)" if alert.acknowledged else ""
        click.echo(
            f"ID: {alert.id:3d} | {alert.alert_date.isoformat()} | {alert.priority.value:8s} | "
            f"{alert.title}{mark}"
        )
        click.echo(f"         {alert.message}")


@alerts_group.command("ack")
@click.argument("alert_id", type=int)
@click.pass_context
def acknowledge_alert(ctx, alert_id: int):
    """Acknowledge an alert."""
    service = AlertService(ctx.obj["db"])
    try:
        service.acknowledge(alert_id)
        click.echo(f"Alert {alert_id} acknowledged")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register alert commands with main CLI."""
    cli.add_command(alerts_group, name="alerts")
