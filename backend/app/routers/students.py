"""
Router pour les élèves.
GET    /api/v1/students — liste, ou un élève si le corps contient {"id"}
POST   /api/v1/students — création
PUT    /api/v1/students — mise à jour complète (fullname, email, age)
DELETE /api/v1/students — suppression
GET    /api/v1/students/{id}/subjects — matières suivies par un élève

Introuvable et erreur base de données donnent tous deux un 500 {"error"}.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse, RecordId, RecordLookup
from app.schemas.enrollment import StudentSubjectSummary
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services import enrollment_service, student_service

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])


@router.get(
    "",
    response_model=Union[List[StudentResponse], StudentResponse, None],
    summary="Lister les élèves ou lire un élève",
)
def get_students(
    id: Optional[int] = None,
    lookup: Optional[RecordLookup] = Body(None),
    db: Session = Depends(get_db),
):
    """
    Avec un id (dans le corps JSON ou en paramètre de requête) : retourne l'élève,
    ou null s'il n'existe pas. Sans id : retourne tous les élèves.
    Toujours 200.
    """
    student_id = lookup.id if lookup is not None and lookup.id is not None else id
    if student_id is not None:
        return student_service.get_student_by_id(db, student_id)
    return student_service.get_all_students(db)


@router.post(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Créer un élève",
)
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    result = student_service.create_student(db, data.fullname, data.email, data.age)
    if result.inserted > 0:
        return MessageResponse(message="Élève ajouté avec succès.", id=result.id)
    return JSONResponse(status_code=500, content={"error": "Impossible d'ajouter l'élève."})


@router.put(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Modifier un élève",
)
def update_student(data: StudentUpdate, db: Session = Depends(get_db)):
    """Remplace les trois champs de l'élève. 500 si aucune ligne n'est modifiée."""
    result = student_service.update_student(db, data.id, data.fullname, data.email, data.age)
    if result.updated > 0:
        return MessageResponse(message="Élève mis à jour avec succès.")
    return JSONResponse(status_code=500, content={"error": "Impossible de mettre à jour l'élève."})


@router.delete(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Supprimer un élève",
)
def delete_student(data: RecordId, db: Session = Depends(get_db)):
    result = student_service.delete_student(db, data.id)
    if result.deleted > 0:
        return MessageResponse(message="Élève supprimé avec succès.")
    return JSONResponse(status_code=500, content={"error": "Impossible de supprimer l'élève."})


@router.get(
    "/{student_id}/subjects",
    response_model=List[StudentSubjectSummary],
    summary="Matières suivies par un élève",
)
def get_student_subjects(student_id: int, db: Session = Depends(get_db)):
    return enrollment_service.get_subjects_by_student(db, student_id)
