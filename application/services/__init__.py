"""
Services applicatifs
"""

from application.services.project_key_service import ProjectKeyService
from application.services.project_service import ProjectService

__all__ = [
    "ProjectKeyService",
    "ProjectService"
]
