"""
ProjectKeyService - Attribution des clés de projet

Compose la dérivation, la validation et la résolution d'unicité. Utilisé par
les flux de création/édition et par le backfill des projets existants.
"""

import logging
from functools import partial
from typing import Callable, List, Optional, TypeVar

from domain.entities.project_key import (
    KeyCandidate, KeyErrorReason, KeyProvenance, ValidationResult, BackfillOutcome
)
from domain.errors import ProjectKeyError, KeyConflictError, ProjectNotFoundError
from domain.repositories.project_repository import ProjectRepository
from domain.services.key_derivation import (
    derive_key_from_name, canonicalize_key, check_key_format, suffixed_key
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Première écriture + un nouvel essai après une course perdue contre le store
WRITE_ATTEMPTS = 2


class ProjectKeyService:
    """Service d'attribution des clés de projet"""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def is_available(self, key: str, current_project_id: Optional[str] = None) -> bool:
        """Vrai si la clé est libre ou appartient déjà au projet courant"""
        owner_id = self.project_repository.find_project_id_by_key(key)
        return owner_id is None or owner_id == current_project_id

    def validate_key(
        self,
        key: Optional[str],
        current_project_id: Optional[str] = None,
        provenance: KeyProvenance = KeyProvenance.USER_SUPPLIED
    ) -> ValidationResult:
        """Valide une clé : longueur, format puis unicité (premier échec retenu)"""
        candidate = canonicalize_key(key or "")

        reason = check_key_format(candidate)
        if reason is not None:
            return ValidationResult.invalid(reason)

        if not self.is_available(candidate, current_project_id):
            return ValidationResult.invalid(KeyErrorReason.TAKEN)

        return ValidationResult.valid(candidate, provenance)

    def resolve_unique_key(self, base: str, current_project_id: Optional[str] = None) -> KeyCandidate:
        """
        Trouve la première variante libre d'une clé dérivée : BASE, BASE1, BASE2...

        La base est tronquée pour laisser la place au suffixe (10 caractères
        maximum). Lève ProjectKeyError(EXHAUSTED_KEY_SPACE) quand le suffixe
        ne laisse plus aucun caractère de base.
        """
        if self.is_available(base, current_project_id):
            return KeyCandidate(base, KeyProvenance.DERIVED)

        suffix = 1
        while True:
            candidate = suffixed_key(base, suffix)
            if candidate is None:
                raise ProjectKeyError(KeyErrorReason.EXHAUSTED_KEY_SPACE)
            if self.is_available(candidate, current_project_id):
                logger.warning(f"⚠️ Key '{base}' already taken, using '{candidate}'")
                return KeyCandidate(candidate, KeyProvenance.DERIVED_WITH_SUFFIX)
            suffix += 1

    def choose_candidate(
        self,
        name: str,
        user_supplied_key: Optional[str] = None,
        current_project_id: Optional[str] = None
    ) -> KeyCandidate:
        """
        Choisit la clé candidate : la saisie utilisateur telle quelle, sinon
        une clé dérivée du nom puis rendue unique. Une saisie vide compte
        comme une absence de saisie.
        """
        if user_supplied_key is not None and user_supplied_key.strip():
            return KeyCandidate(canonicalize_key(user_supplied_key), KeyProvenance.USER_SUPPLIED)

        base = derive_key_from_name(name)
        if check_key_format(base) is not None:
            # Trop court pour être suffixé, la validation le refusera
            return KeyCandidate(base, KeyProvenance.DERIVED)
        return self.resolve_unique_key(base, current_project_id)

    def assign_key(
        self,
        name: str,
        user_supplied_key: Optional[str] = None,
        current_project_id: Optional[str] = None
    ) -> ValidationResult:
        """Calcule la clé à attribuer sans rien écrire"""
        try:
            candidate = self.choose_candidate(name, user_supplied_key, current_project_id)
        except ProjectKeyError as e:
            return ValidationResult.invalid(e.reason)

        return self.validate_key(candidate.value, current_project_id, candidate.provenance)

    def suggest_key(self, name: str, current_project_id: Optional[str] = None) -> ValidationResult:
        """Clé proposée pour pré-remplir un formulaire"""
        return self.assign_key(name, None, current_project_id)

    def assign_and_persist(
        self,
        name: str,
        write: Callable[[str], T],
        user_supplied_key: Optional[str] = None,
        current_project_id: Optional[str] = None
    ) -> T:
        """
        Pipeline commun : candidat -> validation -> écriture.

        `write` reçoit la clé validée et persiste. Si le store rejette la clé
        (KeyConflictError), la clé est recalculée et l'écriture retentée une
        fois avant de remonter TAKEN.
        """
        for attempt in range(1, WRITE_ATTEMPTS + 1):
            result = self.assign_key(name, user_supplied_key, current_project_id)
            if not result.is_valid:
                raise ProjectKeyError(result.reason)

            try:
                return write(result.key)
            except KeyConflictError as e:
                logger.warning(
                    f"⚠️ Key '{e.key}' lost a race against the store "
                    f"(attempt {attempt}/{WRITE_ATTEMPTS})"
                )

        raise ProjectKeyError(KeyErrorReason.TAKEN)

    def _persist_key(self, project_id: str, key: str) -> str:
        self.project_repository.persist_key(project_id, key)
        return key

    def backfill_all_missing_keys(self) -> List[BackfillOutcome]:
        """
        Attribue une clé dérivée à chaque projet qui n'en a pas.

        Les projets ayant déjà une clé ne sont pas listés : relancer le
        backfill après un passage réussi ne fait rien. Une erreur sur un
        projet est enregistrée et n'interrompt pas le lot, y compris un échec
        du store (projet supprimé entre-temps, base indisponible).
        """
        rows = self.project_repository.list_projects_missing_key()
        if not rows:
            logger.info("✅ Every project already has a key, nothing to backfill")
            return []

        logger.info(f"Backfilling keys for {len(rows)} project(s)...")
        outcomes = []

        for project_id, name in rows:
            try:
                key = self.assign_and_persist(
                    name,
                    partial(self._persist_key, project_id),
                    current_project_id=project_id
                )
            except ProjectKeyError as e:
                if e.reason == KeyErrorReason.EXHAUSTED_KEY_SPACE:
                    logger.critical(
                        f"❌ No key available for project {project_id} ('{name}'): "
                        f"manual intervention required"
                    )
                else:
                    logger.warning(f"⚠️ Project {project_id} ('{name}') skipped: {e.reason.value}")
                outcomes.append(BackfillOutcome(project_id=project_id, error=e.reason))
                continue
            except ProjectNotFoundError:
                logger.warning(f"⚠️ Project {project_id} ('{name}') was deleted during backfill")
                outcomes.append(
                    BackfillOutcome(project_id=project_id, error=KeyErrorReason.PROJECT_NOT_FOUND)
                )
                continue
            except Exception as e:
                logger.error(f"❌ Error writing key for project {project_id}: {e}", exc_info=True)
                outcomes.append(BackfillOutcome(project_id=project_id, error=KeyErrorReason.STORE_ERROR))
                continue

            logger.info(f"🔑 Project {project_id} ('{name}') -> {key}")
            outcomes.append(BackfillOutcome(project_id=project_id, key=key))

        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(f"✅ Backfill done: {len(outcomes) - failed} assigned, {failed} failed")
        return outcomes
