"""
Interface ProjectRepository - Définit les opérations d'accès aux données pour Project
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from domain.entities.project import Project


class ProjectRepository(ABC):
    """Interface pour le repository des projets"""

    @abstractmethod
    def find_by_id(self, project_id: str) -> Optional[Project]:
        """Trouve un projet par son ID"""
        pass

    @abstractmethod
    def find_all(self) -> List[Project]:
        """Retourne tous les projets"""
        pass

    @abstractmethod
    def save(self, project: Project) -> Project:
        """
        Sauvegarde un projet (création ou mise à jour).
        Lève KeyConflictError si la clé viole la contrainte d'unicité.
        """
        pass

    @abstractmethod
    def find_project_id_by_key(self, key: str) -> Optional[str]:
        """Retourne l'ID du projet qui possède cette clé (insensible à la casse)"""
        pass

    @abstractmethod
    def list_projects_missing_key(self) -> List[Tuple[str, str]]:
        """Liste (id, nom) des projets sans clé, par ordre de création puis d'ID"""
        pass

    @abstractmethod
    def persist_key(self, project_id: str, key: str) -> None:
        """
        Enregistre la clé d'un projet existant.
        Lève KeyConflictError si la clé viole la contrainte d'unicité.
        """
        pass
