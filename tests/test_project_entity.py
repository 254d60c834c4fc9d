"""Tests des invariants de l'entité Project."""

import pytest

from domain.entities.project import Project


def test_project_accepts_well_formed_key():
    project = Project(id="p1", name="Fiesta Lama", key="FL2")
    assert project.key == "FL2"


@pytest.mark.parametrize("key", ["FL\n", "fl", "F", "ABCDEFGHIJK", "FL-1"])
def test_project_rejects_malformed_key(key):
    with pytest.raises(ValueError):
        Project(id="p1", name="Fiesta Lama", key=key)


def test_project_without_key_is_allowed():
    assert Project(id="p1", name="Fiesta Lama").key is None


def test_project_rejects_blank_name():
    with pytest.raises(ValueError):
        Project(id="p1", name="   ")
