"""
Modèles SQLAlchemy
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

from domain.entities.project import MAX_NAME_LENGTH
from domain.entities.project_key import MAX_KEY_LENGTH

Base = declarative_base()


class ProjectModel(Base):
    """Modèle SQLAlchemy pour les projets"""
    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(MAX_NAME_LENGTH), index=True, nullable=False)
    # Toujours stockée en majuscules ; plusieurs NULL autorisés
    key = Column(String(MAX_KEY_LENGTH), unique=True, index=True, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
