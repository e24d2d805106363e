"""
Router pour les inscriptions élève ↔ matière (table students_subjects).
GET    /api/v1/students-subjects — liste jointe (student_fullname, subject_name)
POST   /api/v1/students-subjects — inscription
PUT    /api/v1/students-subjects — mise à jour (400 si un champ manque)
DELETE /api/v1/students-subjects — désinscription
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse, RecordId, RecordLookup
from app.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate
from app.services import enrollment_service

router = APIRouter(prefix="/api/v1/students-subjects", tags=["Inscriptions"])


@router.get(
    "",
    response_model=Union[List[EnrollmentResponse], EnrollmentResponse, None],
    summary="Lister les inscriptions",
)
def get_enrollments(
    id: Optional[int] = None,
    lookup: Optional[RecordLookup] = Body(None),
    db: Session = Depends(get_db),
):
    """
    Retourne les inscriptions avec le nom de l'élève et de la matière.
    Les inscriptions orphelines (élève ou matière supprimé) sont exclues.
    """
    enrollment_id = lookup.id if lookup is not None and lookup.id is not None else id
    if enrollment_id is not None:
        return enrollment_service.get_enrollment_by_id(db, enrollment_id)
    return enrollment_service.get_all_enrollments(db)


@router.post(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Inscrire un élève à une matière",
)
def create_enrollment(data: EnrollmentCreate, db: Session = Depends(get_db)):
    result = enrollment_service.create_enrollment(db, data.student_id, data.subject_id, data.approved)
    if result.inserted > 0:
        return MessageResponse(message="Inscription effectuée.", id=result.id)
    return JSONResponse(status_code=500, content={"error": "Erreur lors de l'inscription."})


@router.put(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Modifier une inscription",
)
def update_enrollment(data: EnrollmentUpdate, db: Session = Depends(get_db)):
    """
    Vérifie d'abord la présence de id, student_id, subject_id et approved :
    400 si l'un manque, sans toucher à la base.
    """
    if not data.is_complete():
        return JSONResponse(status_code=400, content={"error": "Données incomplètes."})

    result = enrollment_service.update_enrollment(
        db, data.id, data.student_id, data.subject_id, data.approved
    )
    if result.updated > 0:
        return MessageResponse(message="Inscription mise à jour.")
    return JSONResponse(status_code=500, content={"error": "Impossible de mettre à jour l'inscription."})


@router.delete(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Supprimer une inscription",
)
def delete_enrollment(data: RecordId, db: Session = Depends(get_db)):
    result = enrollment_service.delete_enrollment(db, data.id)
    if result.deleted > 0:
        return MessageResponse(message="Inscription supprimée.")
    return JSONResponse(status_code=500, content={"error": "Impossible de supprimer l'inscription."})
