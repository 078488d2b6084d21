"""Project domain service."""

from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import Project
from maquitrack.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    company_not_found,
    project_not_found,
)


class ProjectService:
    """Service for managing projects (work sites equipment is billed to)."""

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_project(
        self,
        code: str,
        name: str,
        client: Optional[str] = None,
        company_id: Optional[int] = None,
    ) -> int:
        """Create a new project.

        Args:
            code: Unique project code
            name: Project name
            client: Optional client name
            company_id: Optional company running the project

        Returns:
            Project ID

        Raises:
            ValidationError: If code or name is empty
            ConflictError: If the code is already used
            NotFoundError: If company doesn't exist
        """
        if not code.strip() or not name.strip():
            raise ValidationError("Project code and name are required")
        if self.db.get_project_by_code(code.strip()) is not None:
            raise ConflictError(f"Project with code '{code}' already exists")
        if company_id is not None and self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        return self.db.create_project(code=code.strip(), name=name.strip(), client=client, company_id=company_id)

    def get_project_by_code(self, code: str) -> Project:
        """Get project by code.

        Raises:
            NotFoundError: If no project has this code
        """
        project = self.db.get_project_by_code(code)
        if project is None:
            raise NotFoundError(project_not_found(code))
        return project

    def list_projects(self) -> list[Project]:
        return self.db.list_projects()
