"""
project-registry-api/api/endpoints.py
Endpoints de gestion des projets et de leurs clés
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.schemas import (
    ProjectCreate, ProjectUpdate, ProjectResponse,
    KeySuggestionResponse, BackfillResponse, BackfillItemResponse, FieldError
)
from application.services.project_service import ProjectService
from domain.entities import Project
from domain.errors import ProjectKeyError, ProjectNotFoundError
from infrastructure.dependencies import get_project_service

logger = logging.getLogger(__name__)
router = APIRouter()
admin_router = APIRouter(tags=["Admin Management"])

# ============================================================================
# HELPERS
# ============================================================================

def _to_response(project: Project) -> ProjectResponse:
    return ProjectResponse.model_validate(project)


def _field_error(field: str, reason: str, message: str) -> HTTPException:
    """Erreur 422 rattachée à un champ du formulaire"""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=FieldError(field=field, reason=reason, message=message).model_dump()
    )


def _key_error(e: ProjectKeyError) -> HTTPException:
    return _field_error("key", e.reason.value, str(e))

# ============================================================================
# PROJETS
# ============================================================================

@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED, tags=["Projects"])
def create_project(
    project_in: ProjectCreate,
    project_service: ProjectService = Depends(get_project_service)
):
    """Crée un projet ; la clé est dérivée du nom si elle n'est pas fournie"""
    try:
        project = project_service.create_project(project_in.name, key=project_in.key)
    except ProjectKeyError as e:
        logger.info(f"Project '{project_in.name}' rejected: key {e.reason.value}")
        raise _key_error(e)
    except ValueError as e:
        raise _field_error("name", "invalid", str(e))
    return _to_response(project)


@router.get("/projects", response_model=List[ProjectResponse], tags=["Projects"])
def list_projects(project_service: ProjectService = Depends(get_project_service)):
    """Liste tous les projets"""
    return [_to_response(p) for p in project_service.get_all_projects()]


@router.get("/projects/key-suggestion", response_model=KeySuggestionResponse, tags=["Projects"])
def suggest_project_key(
    name: str = Query(..., min_length=1),
    project_id: Optional[str] = Query(default=None),
    project_service: ProjectService = Depends(get_project_service)
):
    """Clé qui serait attribuée à ce nom (pour pré-remplir le formulaire)"""
    result = project_service.suggest_key(name, project_id=project_id)
    return KeySuggestionResponse(
        name=name,
        key=result.key,
        provenance=result.provenance.value if result.provenance else None,
        reason=result.reason.value if result.reason else None
    )


@router.get("/projects/{project_id}", response_model=ProjectResponse, tags=["Projects"])
def get_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service)
):
    """Récupère un projet par son ID"""
    project = project_service.get_project(project_id)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project '{project_id}' not found"
        )
    return _to_response(project)


@router.patch("/projects/{project_id}", response_model=ProjectResponse, tags=["Projects"])
def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    project_service: ProjectService = Depends(get_project_service)
):
    """Modifie le nom et/ou la clé d'un projet"""
    try:
        project = project_service.update_project(project_id, name=project_in.name, key=project_in.key)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ProjectKeyError as e:
        raise _key_error(e)
    except ValueError as e:
        raise _field_error("name", "invalid", str(e))
    return _to_response(project)

# ============================================================================
# ADMIN
# ============================================================================

@admin_router.post("/admin/projects/backfill-keys", response_model=BackfillResponse)
def backfill_project_keys(project_service: ProjectService = Depends(get_project_service)):
    """Attribue une clé aux projets qui n'en ont pas (relançable sans effet)"""
    outcomes = project_service.backfill_keys()
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    return BackfillResponse(
        assigned=len(outcomes) - failed,
        failed=failed,
        results=[
            BackfillItemResponse(
                project_id=outcome.project_id,
                key=outcome.key,
                error=outcome.error.value if outcome.error else None
            )
            for outcome in outcomes
        ]
    )
