"""
Clé de projet - Valeurs métier pour les identifiants courts des projets
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

MIN_KEY_LENGTH = 2
MAX_KEY_LENGTH = 10


class KeyProvenance(str, Enum):
    """Origine d'une clé candidate"""
    USER_SUPPLIED = "user-supplied"
    DERIVED = "derived"
    DERIVED_WITH_SUFFIX = "derived-with-suffix"


class KeyErrorReason(str, Enum):
    """Motif de refus d'une clé"""
    EMPTY_NAME = "empty_name"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BAD_FORMAT = "bad_format"
    TAKEN = "taken"
    EXHAUSTED_KEY_SPACE = "exhausted_key_space"
    # Échecs du backfill sans rapport avec la clé elle-même
    PROJECT_NOT_FOUND = "project_not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class KeyCandidate:
    """Clé proposée, pas encore confirmée valide ni unique"""
    value: str
    provenance: KeyProvenance


@dataclass(frozen=True)
class ValidationResult:
    """Résultat de validation : Valid(key) ou Invalid(reason)"""
    key: Optional[str] = None
    reason: Optional[KeyErrorReason] = None
    provenance: Optional[KeyProvenance] = None

    @classmethod
    def valid(cls, key: str, provenance: KeyProvenance) -> "ValidationResult":
        return cls(key=key, provenance=provenance)

    @classmethod
    def invalid(cls, reason: KeyErrorReason) -> "ValidationResult":
        return cls(reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.reason is None


@dataclass(frozen=True)
class BackfillOutcome:
    """Résultat du backfill pour un projet"""
    project_id: str
    key: Optional[str] = None
    error: Optional[KeyErrorReason] = None

    @property
    def ok(self) -> bool:
        return self.error is None
