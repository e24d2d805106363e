"""
Couche d'accès aux données pour les matières.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.subject import Subject
from app.schemas.common import DeleteResult, InsertResult, UpdateResult
from app.schemas.subject import SubjectResponse

logger = logging.getLogger(__name__)

subjects = Subject.__table__


def get_all_subjects(db: Session) -> list[SubjectResponse]:
    rows = db.execute(select(subjects)).mappings().all()
    return [SubjectResponse.model_validate(dict(row)) for row in rows]


def get_subject_by_id(db: Session, subject_id: int) -> Optional[SubjectResponse]:
    """Retourne une matière par son ID, ou None si inexistante."""
    row = db.execute(
        select(subjects).where(subjects.c.id == subject_id)
    ).mappings().first()
    if row is None:
        return None
    return SubjectResponse.model_validate(dict(row))


def create_subject(db: Session, name: str) -> InsertResult:
    try:
        result = db.execute(insert(subjects).values(name=name))
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Insertion matière refusée par la base : %s", exc.orig)
        return InsertResult(inserted=0)

    # rowcount n'est pas fiable après INSERT ... RETURNING sous SQLite : on compte la clé générée
    new_id = result.inserted_primary_key[0]
    logger.info("Matière %s créée (%s).", new_id, name)
    return InsertResult(inserted=0 if new_id is None else 1, id=new_id)


def update_subject(db: Session, subject_id: int, name: str) -> UpdateResult:
    """Renomme une matière. updated = 0 si introuvable ou si le nom est identique."""
    try:
        result = db.execute(
            update(subjects)
            .where(subjects.c.id == subject_id, subjects.c.name != name)
            .values(name=name)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Mise à jour matière %s refusée par la base : %s", subject_id, exc.orig)
        return UpdateResult(updated=0)
    return UpdateResult(updated=result.rowcount)


def delete_subject(db: Session, subject_id: int) -> DeleteResult:
    """
    Supprime une matière.
    Les inscriptions qui la référencent disparaissent de la liste jointe
    (cascade côté base, ou exclusion par la jointure interne).
    """
    try:
        result = db.execute(delete(subjects).where(subjects.c.id == subject_id))
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Suppression matière %s refusée par la base : %s", subject_id, exc.orig)
        return DeleteResult(deleted=0)

    if result.rowcount:
        logger.info("Matière %s supprimée.", subject_id)
    return DeleteResult(deleted=result.rowcount)
