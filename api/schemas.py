"""
project-registry-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from datetime import datetime

from domain.entities.project import MAX_NAME_LENGTH

# ============================================================================
# PROJETS
# ============================================================================

class ProjectCreate(BaseModel):
    """Schéma pour créer un projet (clé dérivée du nom si absente)"""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    # Format contrôlé par le service pour renvoyer un motif précis
    key: Optional[str] = None

class ProjectUpdate(BaseModel):
    """Schéma pour modifier un projet (champs absents inchangés)"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    key: Optional[str] = None

class ProjectResponse(BaseModel):
    """Schéma pour retourner un projet"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    key: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        if dt is None:
            return None
        return dt.isoformat()

# ============================================================================
# CLÉS DE PROJET
# ============================================================================

class KeySuggestionResponse(BaseModel):
    """Clé proposée pour un nom de projet"""
    name: str
    key: Optional[str] = None
    provenance: Optional[str] = None
    reason: Optional[str] = None

class BackfillItemResponse(BaseModel):
    """Résultat du backfill pour un projet"""
    project_id: str
    key: Optional[str] = None
    error: Optional[str] = None

class BackfillResponse(BaseModel):
    """Résumé d'un passage de backfill"""
    assigned: int
    failed: int
    results: List[BackfillItemResponse] = Field(default_factory=list)

class FieldError(BaseModel):
    """Erreur de validation rattachée à un champ du formulaire"""
    field: str
    reason: str
    message: str
