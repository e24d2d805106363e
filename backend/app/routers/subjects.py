"""
Router pour les matières.
GET    /api/v1/subjects — liste, ou une matière si le corps contient {"id"}
POST   /api/v1/subjects — création
PUT    /api/v1/subjects — mise à jour complète
DELETE /api/v1/subjects — suppression
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse, RecordId, RecordLookup
from app.schemas.subject import SubjectCreate, SubjectResponse, SubjectUpdate
from app.services import subject_service

router = APIRouter(prefix="/api/v1/subjects", tags=["Matières"])


@router.get(
    "",
    response_model=Union[List[SubjectResponse], SubjectResponse, None],
    summary="Lister les matières ou lire une matière",
)
def get_subjects(
    id: Optional[int] = None,
    lookup: Optional[RecordLookup] = Body(None),
    db: Session = Depends(get_db),
):
    """Avec un id (corps ou paramètre) : la matière ou null. Sans id : toutes les matières."""
    subject_id = lookup.id if lookup is not None and lookup.id is not None else id
    if subject_id is not None:
        return subject_service.get_subject_by_id(db, subject_id)
    return subject_service.get_all_subjects(db)


@router.post(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Créer une matière",
)
def create_subject(data: SubjectCreate, db: Session = Depends(get_db)):
    result = subject_service.create_subject(db, data.name)
    if result.inserted > 0:
        return MessageResponse(message="Matière créée avec succès.", id=result.id)
    return JSONResponse(status_code=500, content={"error": "Impossible de créer la matière."})


@router.put(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Modifier une matière",
)
def update_subject(data: SubjectUpdate, db: Session = Depends(get_db)):
    result = subject_service.update_subject(db, data.id, data.name)
    if result.updated > 0:
        return MessageResponse(message="Matière mise à jour avec succès.")
    return JSONResponse(status_code=500, content={"error": "Impossible de mettre à jour la matière."})


@router.delete(
    "",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Supprimer une matière",
)
def delete_subject(data: RecordId, db: Session = Depends(get_db)):
    """Supprime une matière. Les inscriptions liées disparaissent de la liste jointe."""
    result = subject_service.delete_subject(db, data.id)
    if result.deleted > 0:
        return MessageResponse(message="Matière supprimée avec succès.")
    return JSONResponse(status_code=500, content={"error": "Impossible de supprimer la matière."})
