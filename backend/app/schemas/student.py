"""
Schémas Pydantic pour les élèves.
"""

from pydantic import BaseModel, field_validator


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students)."""
    fullname: str
    email: str
    age: int

    @field_validator("fullname", "email")
    @classmethod
    def strip(cls, v: str) -> str:
        return v.strip()


class StudentUpdate(StudentCreate):
    """Schéma de mise à jour d'un élève (PUT /students). Remplace tous les champs."""
    id: int


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève (GET /students)."""
    id: int
    fullname: str
    email: str
    age: int

    model_config = {"from_attributes": True}
