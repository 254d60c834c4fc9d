"""
Implémentations des repositories SQLAlchemy
"""

import logging
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.entities import Project
from domain.errors import KeyConflictError, ProjectNotFoundError
from domain.repositories import ProjectRepository
from infrastructure.database.models import ProjectModel
from infrastructure.database.mappers import ProjectMapper

logger = logging.getLogger(__name__)


class SQLAlchemyProjectRepository(ProjectRepository):
    """Implémentation SQLAlchemy du ProjectRepository"""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, project_id: str) -> Optional[Project]:
        """Trouve un projet par son ID"""
        model = self.session.query(ProjectModel).filter(ProjectModel.id == project_id).first()
        return ProjectMapper.to_domain(model) if model else None

    def find_all(self) -> List[Project]:
        """Retourne tous les projets"""
        models = self.session.query(ProjectModel).order_by(ProjectModel.created_at.desc()).all()
        return [ProjectMapper.to_domain(model) for model in models]

    def save(self, project: Project) -> Project:
        """Sauvegarde un projet"""
        model = self.session.query(ProjectModel).filter(ProjectModel.id == project.id).first()

        if model:
            model = ProjectMapper.to_model(project, model)
        else:
            model = ProjectMapper.to_model(project)
            self.session.add(model)

        try:
            self.session.commit()
            self.session.refresh(model)
            return ProjectMapper.to_domain(model)
        except IntegrityError as e:
            self.session.rollback()
            if self._is_key_owned_by_other(project.key, project.id):
                raise KeyConflictError(project.key) from e
            logger.error(f"Error saving project: {e}")
            raise
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving project: {e}")
            raise

    def find_project_id_by_key(self, key: str) -> Optional[str]:
        """Retourne l'ID du projet qui possède cette clé (insensible à la casse)"""
        row = (
            self.session.query(ProjectModel.id)
            .filter(func.upper(ProjectModel.key) == key.upper())
            .first()
        )
        return row.id if row else None

    def list_projects_missing_key(self) -> List[Tuple[str, str]]:
        """Liste (id, nom) des projets sans clé, du plus ancien au plus récent"""
        rows = (
            self.session.query(ProjectModel.id, ProjectModel.name)
            .filter(ProjectModel.key.is_(None))
            .order_by(ProjectModel.created_at.asc(), ProjectModel.id.asc())
            .all()
        )
        return [(row.id, row.name) for row in rows]

    def persist_key(self, project_id: str, key: str) -> None:
        """Enregistre la clé d'un projet existant"""
        model = self.session.query(ProjectModel).filter(ProjectModel.id == project_id).first()
        if not model:
            raise ProjectNotFoundError(project_id)

        model.key = key
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self._is_key_owned_by_other(key, project_id):
                raise KeyConflictError(key) from e
            logger.error(f"Error saving key for project {project_id}: {e}")
            raise
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving key for project {project_id}: {e}")
            raise

    def _is_key_owned_by_other(self, key: Optional[str], project_id: str) -> bool:
        if key is None:
            return False
        owner_id = self.find_project_id_by_key(key)
        return owner_id is not None and owner_id != project_id
