"""Company management commands."""

import click
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.equipment import CompanyService


@click.group()
def company_group():
    """Manage companies."""
    pass


@company_group.command("add")
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--ruc", "tax_id", help="Tax ID (RUC)")
@click.pass_context
def add_company(ctx, name: str, tax_id: str | None):
    """Register a company that owns equipment.

    The first company registered is the default company for imported
    equipment whose company name is not recognized.

    Examples:
        maquitrack company add "JLMX CONTRATISTAS"
        maquitrack company add "JOMEX S.A.C." --ruc 20123456789
    """
    service = CompanyService(ctx.obj["db"])
    try:
        company_id = service.create_company(name=name, tax_id=tax_id)
        click.echo(f"Created company '{name}' (ID: {company_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    service = CompanyService(ctx.obj["db"])

    companies = service.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 60)
    for company in companies:
        click.echo(f"ID: {company.id:3d} | {company.name:30s} | RUC: {company.tax_id or '-'}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
