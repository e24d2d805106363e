"""
Schémas Pydantic pour les matières.
"""

from pydantic import BaseModel, field_validator


class SubjectCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def strip(cls, v: str) -> str:
        return v.strip()


class SubjectUpdate(SubjectCreate):
    id: int


class SubjectResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
