"""
Dépendances FastAPI pour l'injection de services
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends

from infrastructure.database.session import SessionLocal
from infrastructure.database.repositories import SQLAlchemyProjectRepository
from domain.repositories import ProjectRepository
from application.services.project_service import ProjectService


def get_db() -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_project_repository(db: Session = Depends(get_db)) -> ProjectRepository:
    """Dépendance pour obtenir le ProjectRepository"""
    return SQLAlchemyProjectRepository(db)


def get_project_service(
    project_repository: ProjectRepository = Depends(get_project_repository)
) -> ProjectService:
    """Dépendance pour obtenir le ProjectService"""
    return ProjectService(project_repository)
