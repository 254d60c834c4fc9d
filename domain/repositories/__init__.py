"""
Repositories - Interfaces pour l'accès aux données
"""

from domain.repositories.project_repository import ProjectRepository

__all__ = [
    "ProjectRepository"
]
