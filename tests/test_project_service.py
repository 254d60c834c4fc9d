"""Tests unitaires pour ProjectService (création et édition avec clé)."""

from domain.entities.project_key import KeyErrorReason
from domain.errors import KeyConflictError, ProjectKeyError, ProjectNotFoundError
from application.services.project_service import ProjectService

from conftest import InMemoryProjectRepository


class InterleavingProjectRepository(InMemoryProjectRepository):
    """Exécute une écriture concurrente juste avant la prochaine sauvegarde."""

    def __init__(self) -> None:
        super().__init__()
        self.competing_write = None

    def save(self, project):
        if self.competing_write is not None:
            competing, self.competing_write = self.competing_write, None
            competing()
        return super().save(project)


class AlwaysConflictingProjectRepository(InMemoryProjectRepository):
    """Le store rejette toutes les écritures de clé."""

    def __init__(self) -> None:
        super().__init__()
        self.save_attempts = 0

    def save(self, project):
        self.save_attempts += 1
        raise KeyConflictError(project.key)


def test_create_project_derives_key(project_service, repo):
    project = project_service.create_project("Fiesta Lama")

    assert project.name == "Fiesta Lama"
    assert project.key == "FL"
    assert project.created_at is not None
    # Le projet est bien stocké dans le repository
    assert repo.find_by_id(project.id) is not None


def test_create_project_with_same_name_gets_suffix(project_service):
    first = project_service.create_project("Fiesta Lama")
    second = project_service.create_project("Fiesta Lama")
    third = project_service.create_project("  Fiesta Lama ")

    assert [first.key, second.key, third.key] == ["FL", "FL1", "FL2"]
    assert third.name == "Fiesta Lama"


def test_create_project_with_user_key_is_normalized(project_service):
    project = project_service.create_project("Fiesta Lama", key=" party ")
    assert project.key == "PARTY"


def test_create_project_with_taken_user_key_persists_nothing(project_service, repo):
    project_service.create_project("Fiesta Lama")

    try:
        project_service.create_project("Other", key="fl")
        assert False, "create_project aurait dû lever ProjectKeyError pour une clé prise"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.TAKEN
        assert "already used" in str(exc)

    assert len(repo.find_all()) == 1


def test_create_project_with_malformed_user_key(project_service, repo):
    try:
        project_service.create_project("Fiesta Lama", key="FL-1")
        assert False, "create_project aurait dû lever ProjectKeyError pour une clé mal formée"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.BAD_FORMAT

    assert repo.find_all() == []


def test_create_project_validates_name_before_key(project_service, repo):
    try:
        project_service.create_project("", key="FL-1")
        assert False, "create_project aurait dû lever ValueError pour un nom vide"
    except ProjectKeyError:
        assert False, "le nom doit être validé avant la clé"
    except ValueError as exc:
        assert "name cannot be empty" in str(exc)

    assert repo.key_lookups == 0


def test_create_project_name_too_short_for_key_requires_manual_key(project_service):
    try:
        project_service.create_project("A")
        assert False, "create_project aurait dû exiger une clé manuelle"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.TOO_SHORT

    project = project_service.create_project("A", key="AA")
    assert project.key == "AA"


def test_concurrent_creates_never_share_a_key():
    repo = InterleavingProjectRepository()
    service = ProjectService(repo)
    competitor = {}

    # L'autre requête vérifie et écrit "FL" entre notre vérification et notre écriture
    repo.competing_write = lambda: competitor.update(project=service.create_project("Fiesta Lama"))
    project = service.create_project("Fiesta Lama")

    assert competitor["project"].key == "FL"
    assert project.key == "FL1"
    assert sorted(p.key for p in repo.find_all()) == ["FL", "FL1"]


def test_lost_race_on_user_key_surfaces_taken():
    repo = InterleavingProjectRepository()
    service = ProjectService(repo)

    repo.competing_write = lambda: service.create_project("Someone Else", key="XY")

    try:
        service.create_project("Fiesta Lama", key="xy")
        assert False, "create_project aurait dû lever ProjectKeyError"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.TAKEN

    assert [p.name for p in repo.find_all()] == ["Someone Else"]


def test_store_conflict_is_retried_once_then_taken():
    repo = AlwaysConflictingProjectRepository()
    service = ProjectService(repo)

    try:
        service.create_project("Fiesta Lama")
        assert False, "create_project aurait dû lever ProjectKeyError"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.TAKEN

    assert repo.save_attempts == 2


def test_update_project_keeps_own_key(project_service):
    project = project_service.create_project("Fiesta Lama")

    updated = project_service.update_project(project.id, name="Fiesta Lama 2024")

    assert updated.key == "FL"
    assert updated.name == "Fiesta Lama 2024"


def test_update_project_resubmitting_own_key_is_accepted(project_service):
    project = project_service.create_project("Fiesta Lama")

    updated = project_service.update_project(project.id, key="fl")

    assert updated.key == "FL"


def test_update_project_rejects_key_of_another_project(project_service, repo):
    project_service.create_project("Fiesta Lama")
    other = project_service.create_project("Acme")

    try:
        project_service.update_project(other.id, key="FL")
        assert False, "update_project aurait dû lever ProjectKeyError"
    except ProjectKeyError as exc:
        assert exc.reason == KeyErrorReason.TAKEN

    assert repo.find_by_id(other.id).key == "ACM"


def test_update_project_reassigns_key(project_service):
    project = project_service.create_project("Fiesta Lama")

    updated = project_service.update_project(project.id, key="LAMA")

    assert updated.key == "LAMA"
    # L'ancienne clé est libérée
    assert project_service.create_project("Fiesta Lama").key == "FL"


def test_update_legacy_project_without_key_gets_derived_key(project_service, repo):
    repo.add("legacy", "Fiesta Lama")

    updated = project_service.update_project("legacy", name="Fiesta Lama")

    assert updated.key == "FL"


def test_update_unknown_project():
    service = ProjectService(InMemoryProjectRepository())

    try:
        service.update_project("missing", key="FL")
        assert False, "update_project aurait dû lever ProjectNotFoundError"
    except ProjectNotFoundError as exc:
        assert "not found" in str(exc)


def test_backfill_keys_delegates_to_key_service(project_service, repo):
    repo.add("p1", "Fiesta Lama")

    outcomes = project_service.backfill_keys()

    assert [(o.project_id, o.key) for o in outcomes] == [("p1", "FL")]
