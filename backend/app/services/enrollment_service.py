"""
Couche d'accès aux données pour les inscriptions élève ↔ matière (students_subjects).

La lecture dénormalise chaque inscription avec le nom complet de l'élève et
le nom de la matière via une jointure interne : une inscription dont l'élève
ou la matière n'existe plus est exclue du résultat, sans erreur.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.enrollment import StudentSubject
from app.models.student import Student
from app.models.subject import Subject
from app.schemas.common import DeleteResult, InsertResult, UpdateResult
from app.schemas.enrollment import EnrollmentResponse, StudentSubjectSummary

logger = logging.getLogger(__name__)

enrollments = StudentSubject.__table__
students = Student.__table__
subjects = Subject.__table__


def _joined_select():
    """SELECT inscriptions + student_fullname + subject_name (jointures internes)."""
    return (
        select(
            enrollments.c.id,
            enrollments.c.student_id,
            enrollments.c.subject_id,
            enrollments.c.approved,
            students.c.fullname.label("student_fullname"),
            subjects.c.name.label("subject_name"),
        )
        .select_from(enrollments)
        .join(subjects, enrollments.c.subject_id == subjects.c.id)
        .join(students, enrollments.c.student_id == students.c.id)
    )


def get_all_enrollments(db: Session) -> list[EnrollmentResponse]:
    """Retourne toutes les inscriptions dont l'élève et la matière existent encore."""
    rows = db.execute(_joined_select()).mappings().all()
    return [EnrollmentResponse.model_validate(dict(row)) for row in rows]


def get_enrollment_by_id(db: Session, enrollment_id: int) -> Optional[EnrollmentResponse]:
    """Retourne une inscription jointe, ou None si absente ou exclue par la jointure."""
    row = db.execute(
        _joined_select().where(enrollments.c.id == enrollment_id)
    ).mappings().first()
    if row is None:
        return None
    return EnrollmentResponse.model_validate(dict(row))


def get_subjects_by_student(db: Session, student_id: int) -> list[StudentSubjectSummary]:
    """Matières suivies par un élève, avec leur état d'approbation."""
    rows = db.execute(
        select(
            enrollments.c.subject_id,
            subjects.c.name,
            enrollments.c.approved,
        )
        .select_from(enrollments)
        .join(subjects, enrollments.c.subject_id == subjects.c.id)
        .where(enrollments.c.student_id == student_id)
    ).mappings().all()
    return [StudentSubjectSummary.model_validate(dict(row)) for row in rows]


def create_enrollment(db: Session, student_id: int, subject_id: int, approved: int) -> InsertResult:
    """
    Inscrit un élève à une matière.
    Aucune vérification applicative des clés étrangères ni des doublons :
    une violation de contrainte côté base donne inserted = 0.
    """
    try:
        result = db.execute(
            insert(enrollments).values(
                student_id=student_id,
                subject_id=subject_id,
                approved=approved,
            )
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(
            "Inscription élève %s / matière %s refusée par la base : %s",
            student_id, subject_id, exc.orig,
        )
        return InsertResult(inserted=0)

    # rowcount n'est pas fiable après INSERT ... RETURNING sous SQLite : on compte la clé générée
    new_id = result.inserted_primary_key[0]
    logger.info("Inscription %s créée (élève %s, matière %s).", new_id, student_id, subject_id)
    return InsertResult(inserted=0 if new_id is None else 1, id=new_id)


def update_enrollment(
    db: Session,
    enrollment_id: int,
    student_id: int,
    subject_id: int,
    approved: int,
) -> UpdateResult:
    """
    Remplace élève, matière et état d'approbation d'une inscription.
    updated = 0 si l'inscription est introuvable ou déjà identique.
    """
    try:
        result = db.execute(
            update(enrollments)
            .where(enrollments.c.id == enrollment_id)
            .where(or_(
                enrollments.c.student_id != student_id,
                enrollments.c.subject_id != subject_id,
                enrollments.c.approved != approved,
            ))
            .values(student_id=student_id, subject_id=subject_id, approved=approved)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Mise à jour inscription %s refusée par la base : %s", enrollment_id, exc.orig)
        return UpdateResult(updated=0)
    return UpdateResult(updated=result.rowcount)


def delete_enrollment(db: Session, enrollment_id: int) -> DeleteResult:
    result = db.execute(delete(enrollments).where(enrollments.c.id == enrollment_id))
    db.commit()
    if result.rowcount:
        logger.info("Inscription %s supprimée.", enrollment_id)
    return DeleteResult(deleted=result.rowcount)
