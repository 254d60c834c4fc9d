"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import SessionLocal, engine, get_db_session
from infrastructure.database.models import Base, ProjectModel
from infrastructure.database.repositories import SQLAlchemyProjectRepository

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db_session",
    "ProjectModel",
    "SQLAlchemyProjectRepository"
]
