"""Project management commands."""

import click
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.project import ProjectService


@click.group()
def project_group():
    """Manage projects."""
    pass


@project_group.command("add")
@click.argument("code")
@click.argument("name")
@click.option("--client", help="Client name")
@click.option("--company-id", type=int, help="Company running the project")
@click.pass_context
def add_project(ctx, code: str, name: str, client: str | None, company_id: int | None):
    """Create a project.

    Examples:
        maquitrack project add P-001 "Carretera Tramo 1" --client "MTC"
    """
    service = ProjectService(ctx.obj["db"])
    try:
        project_id = service.create_project(code=code, name=name, client=client, company_id=company_id)
        click.echo(f"Created project '{name}' (ID: {project_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@project_group.command("list")
@click.pass_context
def list_projects(ctx):
    """List all projects."""
    service = ProjectService(ctx.obj["db"])

    projects = service.list_projects()
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 60)
    for project in projects:
        click.echo(f"{project.code:10s} | {project.name:30s} | Client: {project.client or '-'}")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
