"""
Entité Project - Modèle métier pour les projets
"""

import re
from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from domain.entities.project_key import MIN_KEY_LENGTH, MAX_KEY_LENGTH

MAX_NAME_LENGTH = 50
KEY_PATTERN = re.compile(r"[A-Z0-9]+")


@dataclass
class Project:
    """Entité Project du domaine"""
    id: str
    name: str
    key: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name or not self.name.strip():
            raise ValueError("Project name cannot be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"Project name must be at most {MAX_NAME_LENGTH} characters")
        if self.key is not None:
            if not MIN_KEY_LENGTH <= len(self.key) <= MAX_KEY_LENGTH:
                raise ValueError(
                    f"Project key must be between {MIN_KEY_LENGTH} and {MAX_KEY_LENGTH} characters"
                )
            if not KEY_PATTERN.fullmatch(self.key):
                raise ValueError("Project key must be uppercase alphanumeric")
