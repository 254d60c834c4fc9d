"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

from typing import Optional
from infrastructure.database.models import ProjectModel
from domain.entities import Project


class ProjectMapper:
    """Mapper entre ProjectModel et Project"""

    @staticmethod
    def to_domain(model: ProjectModel) -> Project:
        """Convertit un ProjectModel en entité Project"""
        return Project(
            id=model.id,
            name=model.name,
            key=model.key,
            created_at=model.created_at
        )

    @staticmethod
    def to_model(project: Project, model: Optional[ProjectModel] = None) -> ProjectModel:
        """Convertit une entité Project en ProjectModel"""
        if model is None:
            model = ProjectModel()

        model.id = project.id
        model.name = project.name
        model.key = project.key
        if project.created_at is not None:
            model.created_at = project.created_at

        return model
