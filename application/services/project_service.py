"""
ProjectService - Service applicatif pour la gestion des projets
"""

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from domain.entities.project import Project
from domain.entities.project_key import BackfillOutcome, ValidationResult
from domain.errors import ProjectNotFoundError
from domain.repositories.project_repository import ProjectRepository
from application.services.project_key_service import ProjectKeyService

logger = logging.getLogger(__name__)


class ProjectService:
    """Service pour la gestion des projets"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        key_service: Optional[ProjectKeyService] = None
    ):
        self.project_repository = project_repository
        self.key_service = key_service or ProjectKeyService(project_repository)

    def create_project(self, name: str, key: Optional[str] = None) -> Project:
        """
        Crée un projet : nom validé, puis clé validée, puis création.

        Sans clé fournie, la clé est dérivée du nom et suffixée si besoin.
        Une clé fournie déjà prise ou mal formée lève ProjectKeyError et
        rien n'est enregistré.
        """
        # Le constructeur de l'entité valide le nom
        draft = Project(
            id=str(uuid.uuid4()),
            name=name.strip() if name else name,
            created_at=datetime.utcnow()
        )

        project = self.key_service.assign_and_persist(
            draft.name,
            lambda assigned_key: self.project_repository.save(replace(draft, key=assigned_key)),
            user_supplied_key=key,
            current_project_id=draft.id
        )
        logger.info(f"✅ Project '{project.name}' created with key {project.key}")
        return project

    def update_project(
        self,
        project_id: str,
        name: Optional[str] = None,
        key: Optional[str] = None
    ) -> Project:
        """
        Modifie un projet existant.

        La clé actuelle est conservée quand aucune nouvelle clé n'est fournie ;
        elle repasse quand même par la validation, le projet étant exclu du
        contrôle d'unicité. Un projet sans clé en reçoit une dérivée.
        """
        project = self.project_repository.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(project_id)

        draft = replace(project, name=name.strip()) if name is not None else project
        requested_key = key if key is not None and key.strip() else project.key

        updated = self.key_service.assign_and_persist(
            draft.name,
            lambda assigned_key: self.project_repository.save(replace(draft, key=assigned_key)),
            user_supplied_key=requested_key,
            current_project_id=project.id
        )
        if updated.key != project.key:
            logger.info(f"🔑 Project '{updated.name}' key changed: {project.key} -> {updated.key}")
        return updated

    def get_project(self, project_id: str) -> Optional[Project]:
        """Récupère un projet par son ID"""
        return self.project_repository.find_by_id(project_id)

    def get_all_projects(self) -> List[Project]:
        """Récupère tous les projets"""
        return self.project_repository.find_all()

    def suggest_key(self, name: str, project_id: Optional[str] = None) -> ValidationResult:
        """Clé qui serait attribuée à ce nom"""
        return self.key_service.suggest_key(name, current_project_id=project_id)

    def backfill_keys(self) -> List[BackfillOutcome]:
        """Attribue une clé aux projets existants qui n'en ont pas"""
        return self.key_service.backfill_all_missing_keys()
