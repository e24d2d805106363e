"""
Modèles de vue du client : tableaux, listes de sélection et formulaires.

Les fonctions render_* sont pures : elles transforment une liste d'enregistrements
(tels que renvoyés par l'API) en TableView, sans effet de bord.
Les formulaires gardent leurs champs en texte, comme des champs de saisie,
et to_payload() produit le corps JSON envoyé à l'API.
"""

from typing import Any, Optional

from pydantic import BaseModel


class TableAction(BaseModel):
    kind: str  # "edit" ou "delete"
    label: str
    record_id: int


class TableRow(BaseModel):
    record_id: int
    cells: list[str]
    actions: list[TableAction]


class TableView(BaseModel):
    headers: list[str]
    rows: list[TableRow] = []


class SelectOption(BaseModel):
    value: str
    label: str


def coerce_approved(value: Any) -> bool:
    """
    Convertit la valeur approved reçue du transport en booléen.
    "0" doit donner False : une chaîne non vide ne suffit pas.
    """
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return False
        try:
            return float(value) != 0
        except ValueError:
            return value.lower() == "true"
    return bool(value)


def _parse_int(text: Any) -> Optional[int]:
    """Entier saisi dans un champ texte, None si vide ou invalide."""
    try:
        return int(str(text).strip())
    except ValueError:
        return None


def _row(record: dict, cells: list[str]) -> TableRow:
    return TableRow(
        record_id=record["id"],
        cells=cells,
        actions=[
            TableAction(kind="edit", label="Modifier", record_id=record["id"]),
            TableAction(kind="delete", label="Supprimer", record_id=record["id"]),
        ],
    )


# --- Élèves ---

class StudentForm(BaseModel):
    id: str = ""
    fullname: str = ""
    email: str = ""
    age: str = ""

    @classmethod
    def from_record(cls, record: dict) -> "StudentForm":
        return cls(
            id=str(record["id"]),
            fullname=record["fullname"],
            email=record["email"],
            age=str(record["age"]),
        )

    def to_payload(self) -> dict:
        payload = {
            "fullname": self.fullname.strip(),
            "email": self.email.strip(),
            "age": _parse_int(self.age),
        }
        if self.id.strip():
            payload["id"] = _parse_int(self.id)
        return payload


def render_students(students: list[dict]) -> TableView:
    return TableView(
        headers=["Nom complet", "Email", "Âge"],
        rows=[_row(s, [s["fullname"], s["email"], str(s["age"])]) for s in students],
    )


# --- Matières ---

class SubjectForm(BaseModel):
    id: str = ""
    name: str = ""

    @classmethod
    def from_record(cls, record: dict) -> "SubjectForm":
        return cls(id=str(record["id"]), name=record["name"])

    def to_payload(self) -> dict:
        payload = {"name": self.name.strip()}
        if self.id.strip():
            payload["id"] = _parse_int(self.id)
        return payload


def render_subjects(subjects: list[dict]) -> TableView:
    return TableView(
        headers=["Matière"],
        rows=[_row(s, [s["name"]]) for s in subjects],
    )


# --- Inscriptions ---

class EnrollmentForm(BaseModel):
    """Formulaire d'inscription : deux listes de sélection et une case à cocher."""
    id: str = ""
    student_id: str = ""
    subject_id: str = ""
    approved: bool = False

    @classmethod
    def from_record(cls, record: dict) -> "EnrollmentForm":
        return cls(
            id=str(record["id"]),
            student_id=str(record["student_id"]),
            subject_id=str(record["subject_id"]),
            approved=coerce_approved(record["approved"]),
        )

    def to_payload(self) -> dict:
        payload = {
            "student_id": _parse_int(self.student_id),
            "subject_id": _parse_int(self.subject_id),
            "approved": 1 if self.approved else 0,
        }
        if self.id.strip():
            payload["id"] = _parse_int(self.id)
        return payload


def render_enrollments(enrollments: list[dict]) -> TableView:
    """approved doit déjà être un booléen (voir coerce_approved)."""
    return TableView(
        headers=["Élève", "Matière", "Approuvée"],
        rows=[
            _row(e, [e["student_fullname"], e["subject_name"], "Oui" if e["approved"] else "Non"])
            for e in enrollments
        ],
    )


def student_options(students: list[dict]) -> list[SelectOption]:
    return [SelectOption(value=str(s["id"]), label=s["fullname"]) for s in students]


def subject_options(subjects: list[dict]) -> list[SelectOption]:
    return [SelectOption(value=str(s["id"]), label=s["name"]) for s in subjects]
