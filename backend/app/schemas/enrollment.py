"""
Schémas Pydantic pour les inscriptions élève ↔ matière (table students_subjects).

Le champ approved transite en entier 0/1. En entrée on accepte aussi
les booléens JSON et les chaînes "0"/"1" envoyées par les formulaires.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

# True/False se confondent avec 1/0 comme clés de dictionnaire
_APPROVED_VALUES = {
    1: 1, 0: 0,
    "1": 1, "0": 0,
    "true": 1, "false": 0,
}


def to_approved_flag(value) -> int:
    """Normalise une valeur d'approbation en 0/1. Lève ValueError sinon."""
    key = value.strip().lower() if isinstance(value, str) else value
    try:
        return _APPROVED_VALUES[key]
    except (KeyError, TypeError):
        raise ValueError("approved doit valoir 0 ou 1.")


class EnrollmentCreate(BaseModel):
    """Corps de requête POST : les trois champs sont obligatoires."""
    student_id: int
    subject_id: int
    approved: int

    @field_validator("approved", mode="before")
    @classmethod
    def approved_flag(cls, v) -> int:
        return to_approved_flag(v)


class EnrollmentUpdate(BaseModel):
    """
    Corps de requête PUT.
    Les champs sont optionnels ici : la présence des quatre champs est vérifiée
    par le router, qui répond 400 avant tout accès à la base.
    """
    id: Optional[int] = None
    student_id: Optional[int] = None
    subject_id: Optional[int] = None
    approved: Optional[int] = None

    @field_validator("approved", mode="before")
    @classmethod
    def approved_flag(cls, v) -> Optional[int]:
        if v is None:
            return None
        return to_approved_flag(v)

    def is_complete(self) -> bool:
        return None not in (self.id, self.student_id, self.subject_id, self.approved)


class EnrollmentResponse(BaseModel):
    """Ligne dénormalisée : clés brutes + nom de l'élève et de la matière (jointure)."""
    id: int
    student_id: int
    subject_id: int
    approved: int
    student_fullname: str
    subject_name: str

    model_config = {"from_attributes": True}


class StudentSubjectSummary(BaseModel):
    """Matière suivie par un élève (GET /students/{id}/subjects)."""
    subject_id: int
    name: str
    approved: int

    model_config = {"from_attributes": True}
