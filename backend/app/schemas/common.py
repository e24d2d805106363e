"""
Schémas Pydantic partagés par les trois entités :
identifiants dans le corps de requête, résultats de la couche d'accès aux données
et corps de réponse {message} / {error}.
"""

from typing import Optional

from pydantic import BaseModel


class RecordLookup(BaseModel):
    """Corps optionnel d'un GET : {} pour la liste, {"id": ...} pour un seul enregistrement."""
    id: Optional[int] = None


class RecordId(BaseModel):
    """Corps d'un DELETE."""
    id: int


class InsertResult(BaseModel):
    """Résultat d'un INSERT : nombre de lignes insérées et identifiant généré."""
    inserted: int
    id: Optional[int] = None


class UpdateResult(BaseModel):
    """Résultat d'un UPDATE. 0 = introuvable ou aucune modification."""
    updated: int


class DeleteResult(BaseModel):
    """Résultat d'un DELETE. 0 = introuvable."""
    deleted: int


class MessageResponse(BaseModel):
    message: str
    id: Optional[int] = None


class ErrorResponse(BaseModel):
    error: str
