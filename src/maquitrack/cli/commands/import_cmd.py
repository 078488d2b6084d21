"""Spreadsheet import and template commands."""

import click
from maquitrack.cli.error_handling import handle_domain_error
from maquitrack.domain.import_layouts import CONTROL_IMPORT_ORDER, ImportCategory
from maquitrack.domain.import_log import ImportLog, LogEntry
from maquitrack.domain.spreadsheet_import import ImportResult, SpreadsheetImportService
from maquitrack.domain.templates import write_template

CATEGORY_CHOICE = click.Choice([c.value for c in ImportCategory], case_sensitive=False)

CATEGORY_LABELS = {
    ImportCategory.EQUIPMENT: "equipment",
    ImportCategory.INSURANCE: "insurance policies",
    ImportCategory.INSPECTION: "inspections",
    ImportCategory.MAINTENANCE: "maintenance records",
}


def _echo_entry(entry: LogEntry) -> None:
    click.echo(entry.format(), err=entry.level == "error")


def _echo_result(result: ImportResult, dry_run: bool) -> None:
    label = CATEGORY_LABELS[result.category]
    click.echo(f"\n{result.category.value}:")
    click.echo(f"  Read: {result.read} rows ({result.valid} valid, {result.invalid} invalid)")
    if dry_run:
        click.echo("  Dry run: nothing was written")
    else:
        click.echo(f"  Imported: {result.imported} {label}")
        click.echo(f"  Skipped: {result.skipped} already registered")
        if result.failed:
            click.echo(f"  Failed: {result.failed}")
    if result.errors:
        click.echo(f"  Errors: {len(result.errors)}")
        for error in result.errors:
            click.echo(f"    {error}", err=True)


def _service(ctx, strict_companies: bool, quiet: bool) -> SpreadsheetImportService:
    log = ImportLog()
    if not quiet:
        log.subscribe(_echo_entry)
    return SpreadsheetImportService(ctx.obj["db"], log=log, strict_companies=strict_companies)


@click.command("import")
@click.argument("category", type=CATEGORY_CHOICE)
@click.argument("xlsx_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Validate rows without writing anything")
@click.option(
    "--strict-companies",
    is_flag=True,
    help="Reject equipment whose company is not recognized instead of using the default company",
)
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary")
@click.pass_context
def import_spreadsheet(ctx, category: str, xlsx_file: str, dry_run: bool, strict_companies: bool, quiet: bool):
    """Import one category from a spreadsheet laid out like its template.

    CATEGORY is one of equipos, soat, revisiones or mantenimientos.

    Examples:
        maquitrack import equipos equipos.xlsx
        maquitrack import soat soat.xlsx --dry-run
    """
    service = _service(ctx, strict_companies, quiet)
    try:
        result = service.import_file(ImportCategory(category.lower()), xlsx_file, dry_run=dry_run)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    _echo_result(result, dry_run)


@click.command("import-control")
@click.argument("xlsx_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--category",
    "categories",
    type=CATEGORY_CHOICE,
    multiple=True,
    help="Only import these sheets (repeatable; defaults to all)",
)
@click.option("--dry-run", is_flag=True, help="Validate rows without writing anything")
@click.option(
    "--strict-companies",
    is_flag=True,
    help="Reject equipment whose company is not recognized instead of using the default company",
)
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary")
@click.pass_context
def import_control(
    ctx, xlsx_file: str, categories: tuple[str, ...], dry_run: bool, strict_companies: bool, quiet: bool
):
    """Import the "CONTROL DE MAQUINARIA" workbook.

    Sheets are imported in order: BD MAQUINARIA, CONTROL SOAT,
    REVISIONES TECNICAS, CONTROL MANTENIMIENTOS.

    Examples:
        maquitrack import-control control.xlsx
        maquitrack import-control control.xlsx --category equipos --category soat
    """
    service = _service(ctx, strict_companies, quiet)
    selected = [ImportCategory(c.lower()) for c in categories] or list(CONTROL_IMPORT_ORDER)
    try:
        results = service.import_control_workbook(xlsx_file, categories=selected, dry_run=dry_run)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    for result in results:
        _echo_result(result, dry_run)


@click.command("template")
@click.argument("category", type=CATEGORY_CHOICE)
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
def template(category: str, output: str):
    """Write the import template of CATEGORY to OUTPUT (.xlsx)."""
    write_template(ImportCategory(category.lower()), output)
    click.echo(f"Template written to {output}")


def register_commands(cli):
    """Register import commands with main CLI."""
    cli.add_command(import_spreadsheet)
    cli.add_command(import_control)
    cli.add_command(template)
