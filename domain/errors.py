"""
Erreurs du domaine liées aux projets et à leurs clés
"""

from domain.entities.project_key import KeyErrorReason

KEY_ERROR_MESSAGES = {
    KeyErrorReason.EMPTY_NAME: "Project name yields no usable characters, please provide a key manually",
    KeyErrorReason.TOO_SHORT: "Project key must be at least 2 characters",
    KeyErrorReason.TOO_LONG: "Project key must be at most 10 characters",
    KeyErrorReason.BAD_FORMAT: "Project key may only contain letters A-Z and digits 0-9",
    KeyErrorReason.TAKEN: "Project key is already used by another project",
    KeyErrorReason.EXHAUSTED_KEY_SPACE: "No free project key could be generated, please provide one manually",
    KeyErrorReason.PROJECT_NOT_FOUND: "Project disappeared before its key could be written",
    KeyErrorReason.STORE_ERROR: "Project key could not be written to the store",
}


class ProjectKeyError(ValueError):
    """Clé de projet refusée (récupérable par l'appelant)"""

    def __init__(self, reason: KeyErrorReason, message: str = None):
        self.reason = reason
        super().__init__(message or KEY_ERROR_MESSAGES[reason])


class KeyConflictError(Exception):
    """Écriture rejetée par la contrainte d'unicité du store"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Project key '{key}' violates the unique constraint")


class ProjectNotFoundError(LookupError):
    """Projet introuvable"""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project '{project_id}' not found")
