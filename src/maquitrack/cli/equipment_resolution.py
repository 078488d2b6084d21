"""CLI helpers for equipment and project resolution."""

from __future__ import annotations

import click
from maquitrack.domain.equipment import EquipmentService
from maquitrack.domain.project import ProjectService
from maquitrack.cli.error_handling import handle_domain_error


def resolve_equipment_or_exit(ctx: click.Context, equipment_service: EquipmentService, code: str) -> int:
    """Resolve an equipment code to its ID, or exit with a CLI error."""
    try:
        return equipment_service.get_equipment_by_code(code).id
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_project_or_exit(ctx: click.Context, project_service: ProjectService, code: str) -> int:
    """Resolve a project code to its ID, or exit with a CLI error."""
    try:
        return project_service.get_project_by_code(code).id
    except ValueError as exc:
        handle_domain_error(ctx, exc)
