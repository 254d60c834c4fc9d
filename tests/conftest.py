"""Fixtures partagées : repository en mémoire et services."""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

import pytest

from domain.entities.project import Project
from domain.errors import KeyConflictError, ProjectNotFoundError
from domain.repositories.project_repository import ProjectRepository
from application.services.project_key_service import ProjectKeyService
from application.services.project_service import ProjectService


class InMemoryProjectRepository(ProjectRepository):
    """Implémentation en mémoire de ProjectRepository pour les tests.

    Reproduit la contrainte d'unicité de la base sur la clé.
    """

    def __init__(self) -> None:
        self._projects: List[Project] = []
        self.key_lookups = 0

    def add(self, project_id: str, name: str, key: Optional[str] = None, age_days: int = 0) -> Project:
        """Insère un projet existant sans passer par le service."""
        project = Project(
            id=project_id,
            name=name,
            key=key,
            created_at=datetime(2024, 1, 1) + timedelta(days=age_days),
        )
        self._projects.append(project)
        return project

    def find_by_id(self, project_id: str) -> Optional[Project]:
        return next((p for p in self._projects if p.id == project_id), None)

    def find_all(self) -> List[Project]:
        return list(self._projects)

    def save(self, project: Project) -> Project:
        self._check_unique(project.id, project.key)
        existing = self.find_by_id(project.id)
        if existing:
            self._projects = [
                project if p.id == project.id else p for p in self._projects
            ]
        else:
            self._projects.append(project)
        return project

    def find_project_id_by_key(self, key: str) -> Optional[str]:
        self.key_lookups += 1
        return next(
            (p.id for p in self._projects if p.key is not None and p.key.upper() == key.upper()),
            None,
        )

    def list_projects_missing_key(self) -> List[Tuple[str, str]]:
        missing = [p for p in self._projects if p.key is None]
        missing.sort(key=lambda p: (p.created_at, p.id))
        return [(p.id, p.name) for p in missing]

    def persist_key(self, project_id: str, key: str) -> None:
        project = self.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        self._check_unique(project_id, key)
        project.key = key

    def _check_unique(self, project_id: str, key: Optional[str]) -> None:
        if key is None:
            return
        for p in self._projects:
            if p.id != project_id and p.key is not None and p.key.upper() == key.upper():
                raise KeyConflictError(key)


@pytest.fixture
def repo() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def key_service(repo) -> ProjectKeyService:
    return ProjectKeyService(repo)


@pytest.fixture
def project_service(repo) -> ProjectService:
    return ProjectService(repo)
