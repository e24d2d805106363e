"""
Tests de la couche d'accès aux données des inscriptions.
Les cas de jointure tournent sur une vraie base SQLite en mémoire (fixture db_session).
"""

from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from app.services.enrollment_service import (
    create_enrollment,
    delete_enrollment,
    get_all_enrollments,
    get_enrollment_by_id,
    get_subjects_by_student,
    update_enrollment,
)
from app.services.student_service import create_student, delete_student
from app.services.subject_service import create_subject, delete_subject


# --- Helpers ---

def seed(db):
    """Deux élèves, deux matières. Retourne leurs identifiants."""
    ana = create_student(db, "Ana Gomez", "ana@x.com", 21).id
    ben = create_student(db, "Ben Lopez", "ben@x.com", 23).id
    algebra = create_subject(db, "Algèbre").id
    physics = create_subject(db, "Physique").id
    return ana, ben, algebra, physics


# --- Session mockée ---

def test_create_enrollment_contrainte_violee():
    db = MagicMock()
    db.commit.side_effect = IntegrityError("fk", None, None)
    result = create_enrollment(db, 1, 999, 0)
    assert result.inserted == 0
    db.rollback.assert_called_once()


def test_update_enrollment_introuvable():
    db = MagicMock()
    db.execute.return_value.rowcount = 0
    assert update_enrollment(db, 404, 1, 1, 1).updated == 0


# --- SQLite en mémoire ---

def test_get_all_enrollments_jointure(db_session):
    ana, ben, algebra, physics = seed(db_session)
    create_enrollment(db_session, ana, algebra, 1)
    create_enrollment(db_session, ben, physics, 0)

    rows = get_all_enrollments(db_session)

    assert len(rows) == 2
    by_student = {r.student_fullname: r for r in rows}
    assert by_student["Ana Gomez"].subject_name == "Algèbre"
    assert by_student["Ana Gomez"].approved == 1
    assert by_student["Ben Lopez"].subject_name == "Physique"
    assert by_student["Ben Lopez"].approved == 0


def test_get_all_enrollments_exclut_eleve_supprime(db_session):
    ana, ben, algebra, _ = seed(db_session)
    create_enrollment(db_session, ana, algebra, 0)
    create_enrollment(db_session, ben, algebra, 0)

    delete_student(db_session, ben)

    rows = get_all_enrollments(db_session)
    assert [r.student_id for r in rows] == [ana]


def test_get_all_enrollments_exclut_matiere_supprimee(db_session):
    ana, _, algebra, physics = seed(db_session)
    create_enrollment(db_session, ana, algebra, 0)
    create_enrollment(db_session, ana, physics, 1)

    delete_subject(db_session, physics)

    rows = get_all_enrollments(db_session)
    assert [r.subject_id for r in rows] == [algebra]


def test_doublons_autorises(db_session):
    ana, _, algebra, _ = seed(db_session)
    first = create_enrollment(db_session, ana, algebra, 0)
    second = create_enrollment(db_session, ana, algebra, 0)
    assert first.inserted == second.inserted == 1
    assert first.id != second.id
    assert len(get_all_enrollments(db_session)) == 2


def test_get_enrollment_by_id(db_session):
    ana, _, algebra, _ = seed(db_session)
    enrollment_id = create_enrollment(db_session, ana, algebra, 1).id

    row = get_enrollment_by_id(db_session, enrollment_id)
    assert row.student_fullname == "Ana Gomez"
    assert row.subject_name == "Algèbre"
    assert get_enrollment_by_id(db_session, enrollment_id + 100) is None


def test_update_enrollment_remplace_les_champs(db_session):
    ana, ben, algebra, physics = seed(db_session)
    enrollment_id = create_enrollment(db_session, ana, algebra, 0).id

    assert update_enrollment(db_session, enrollment_id, ben, physics, 1).updated == 1

    row = get_enrollment_by_id(db_session, enrollment_id)
    assert (row.student_id, row.subject_id, row.approved) == (ben, physics, 1)


def test_update_enrollment_identique_ne_compte_rien(db_session):
    ana, _, algebra, _ = seed(db_session)
    enrollment_id = create_enrollment(db_session, ana, algebra, 0).id

    assert update_enrollment(db_session, enrollment_id, ana, algebra, 0).updated == 0
    assert update_enrollment(db_session, enrollment_id, ana, algebra, 1).updated == 1


def test_delete_enrollment(db_session):
    ana, _, algebra, _ = seed(db_session)
    enrollment_id = create_enrollment(db_session, ana, algebra, 0).id

    assert delete_enrollment(db_session, enrollment_id).deleted == 1
    assert delete_enrollment(db_session, enrollment_id).deleted == 0
    assert get_all_enrollments(db_session) == []


def test_get_subjects_by_student(db_session):
    ana, ben, algebra, physics = seed(db_session)
    create_enrollment(db_session, ana, algebra, 1)
    create_enrollment(db_session, ana, physics, 0)
    create_enrollment(db_session, ben, physics, 1)

    subjects = get_subjects_by_student(db_session, ana)

    assert sorted((s.name, s.approved) for s in subjects) == [("Algèbre", 1), ("Physique", 0)]
    assert get_subjects_by_student(db_session, 999) == []
