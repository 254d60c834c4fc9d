"""
Entités du domaine
"""

from domain.entities.project import Project
from domain.entities.project_key import (
    KeyProvenance,
    KeyErrorReason,
    KeyCandidate,
    ValidationResult,
    BackfillOutcome,
)

__all__ = [
    "Project",
    "KeyProvenance",
    "KeyErrorReason",
    "KeyCandidate",
    "ValidationResult",
    "BackfillOutcome"
]
