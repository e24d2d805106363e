"""
Couche d'accès aux données pour les élèves.
Chaque fonction exécute une seule requête paramétrée et retourne une structure simple.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.student import Student
from app.schemas.common import DeleteResult, InsertResult, UpdateResult
from app.schemas.student import StudentResponse

logger = logging.getLogger(__name__)

students = Student.__table__


def get_all_students(db: Session) -> list[StudentResponse]:
    """Retourne tous les élèves, dans l'ordre naturel de stockage."""
    rows = db.execute(select(students)).mappings().all()
    return [StudentResponse.model_validate(dict(row)) for row in rows]


def get_student_by_id(db: Session, student_id: int) -> Optional[StudentResponse]:
    """Retourne un élève par son ID, ou None si inexistant."""
    row = db.execute(
        select(students).where(students.c.id == student_id)
    ).mappings().first()
    if row is None:
        return None
    return StudentResponse.model_validate(dict(row))


def create_student(db: Session, fullname: str, email: str, age: int) -> InsertResult:
    """
    Insère un élève.
    inserted = nombre de lignes insérées ; id n'a de sens que si inserted > 0.
    """
    try:
        result = db.execute(
            insert(students).values(fullname=fullname, email=email, age=age)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Insertion élève refusée par la base : %s", exc.orig)
        return InsertResult(inserted=0)

    # rowcount n'est pas fiable après INSERT ... RETURNING sous SQLite : on compte la clé générée
    new_id = result.inserted_primary_key[0]
    logger.info("Élève %s créé (%s).", new_id, fullname)
    return InsertResult(inserted=0 if new_id is None else 1, id=new_id)


def update_student(db: Session, student_id: int, fullname: str, email: str, age: int) -> UpdateResult:
    """
    Remplace les trois champs d'un élève.
    updated = 0 si l'élève est introuvable ou si aucune valeur ne change.
    """
    try:
        result = db.execute(
            update(students)
            .where(students.c.id == student_id)
            .where(or_(
                students.c.fullname != fullname,
                students.c.email != email,
                students.c.age != age,
            ))
            .values(fullname=fullname, email=email, age=age)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Mise à jour élève %s refusée par la base : %s", student_id, exc.orig)
        return UpdateResult(updated=0)
    return UpdateResult(updated=result.rowcount)


def delete_student(db: Session, student_id: int) -> DeleteResult:
    """Supprime un élève. Les inscriptions liées suivent la règle ON DELETE de la base."""
    try:
        result = db.execute(delete(students).where(students.c.id == student_id))
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Suppression élève %s refusée par la base : %s", student_id, exc.orig)
        return DeleteResult(deleted=0)

    if result.rowcount:
        logger.info("Élève %s supprimé.", student_id)
    return DeleteResult(deleted=result.rowcount)
