"""
Tests unitaires pour la couche d'accès aux données des matières.
"""

from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from app.services.subject_service import (
    create_subject,
    delete_subject,
    get_all_subjects,
    get_subject_by_id,
    update_subject,
)


def make_db_mock(rowcount=1, inserted_id=1, rows=None, first=None):
    db = MagicMock()
    result = db.execute.return_value
    result.rowcount = rowcount
    result.inserted_primary_key = (inserted_id,)
    result.mappings.return_value.all.return_value = rows or []
    result.mappings.return_value.first.return_value = first
    return db


def test_get_all_subjects():
    db = make_db_mock(rows=[{"id": 1, "name": "Algèbre"}, {"id": 2, "name": "Physique"}])
    assert [s.name for s in get_all_subjects(db)] == ["Algèbre", "Physique"]


def test_get_subject_by_id_inexistant():
    assert get_subject_by_id(make_db_mock(first=None), 5) is None


def test_create_subject_succes():
    db = make_db_mock(inserted_id=3)
    result = create_subject(db, "Chimie")
    assert result.inserted == 1
    assert result.id == 3


def test_create_subject_contrainte_violee():
    db = make_db_mock()
    db.commit.side_effect = IntegrityError("insert", None, None)
    assert create_subject(db, "Chimie").inserted == 0
    db.rollback.assert_called_once()


def test_update_subject_introuvable():
    assert update_subject(make_db_mock(rowcount=0), 404, "Chimie").updated == 0


def test_delete_subject_contrainte_violee():
    """Matière encore référencée avec une FK RESTRICT → deleted = 0, pas d'exception."""
    db = make_db_mock()
    db.commit.side_effect = IntegrityError("delete", None, None)
    assert delete_subject(db, 1).deleted == 0
    db.rollback.assert_called_once()
