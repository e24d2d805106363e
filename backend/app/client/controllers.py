"""
Contrôleurs de vue par entité : élèves, matières, inscriptions.

Chaque contrôleur garde son état dans des modèles de vue explicites
(table, form) et passe exclusivement par un ApiClient pour le réseau.
Les erreurs d'appel sont seulement journalisées : l'état reste inchangé.
"""

import abc
import logging
from typing import Callable, Optional

import httpx

from app.client.api import ApiClient, ApiError
from app.client.views import (
    EnrollmentForm,
    SelectOption,
    StudentForm,
    SubjectForm,
    TableView,
    coerce_approved,
    render_enrollments,
    render_students,
    render_subjects,
    student_options,
    subject_options,
)

logger = logging.getLogger(__name__)

CALL_ERRORS = (ApiError, httpx.HTTPError)


class CrudController(abc.ABC):
    """
    Base abstraite : chargement du tableau, édition, soumission et suppression.
    Chaque sous-classe fournit form_class et render().
    """

    label = "enregistrements"
    confirm_message = "Voulez-vous vraiment supprimer cet enregistrement ?"
    form_class: type

    def __init__(self, api: ApiClient):
        self.api = api
        self.records: list[dict] = []
        self.table = self.render([])
        self.form = self.form_class()

    @abc.abstractmethod
    def render(self, records: list[dict]) -> TableView:
        """Construit le tableau à partir des enregistrements."""

    def prepare(self, records: list[dict]) -> list[dict]:
        """Normalise les enregistrements reçus avant le rendu."""
        return records

    def start(self) -> None:
        """Équivalent du chargement de la page."""
        self.load()

    def load(self) -> None:
        try:
            records = self.api.fetch_all()
        except CALL_ERRORS as exc:
            logger.error("Erreur de chargement des %s : %s", self.label, exc)
            return
        self.records = self.prepare(records)
        self.table = self.render(self.records)

    def find(self, record_id: int) -> Optional[dict]:
        return next((r for r in self.records if r["id"] == record_id), None)

    def edit(self, record: dict) -> None:
        """Remplit le formulaire avec l'enregistrement à modifier."""
        self.form = self.form_class.from_record(record)

    def cancel(self) -> None:
        """Repasse le formulaire en mode création."""
        self.form.id = ""

    def clear_form(self) -> None:
        self.form = self.form_class()

    def submit(self, form=None) -> bool:
        """
        Crée l'enregistrement si le champ id est vide, sinon le met à jour,
        puis vide le formulaire et recharge le tableau.
        """
        if form is not None:
            self.form = form
        payload = self.form.to_payload()
        try:
            if payload.get("id"):
                self.api.update(payload)
            else:
                self.api.create(payload)
        except CALL_ERRORS as exc:
            logger.error("Erreur d'enregistrement (%s) : %s", self.label, exc)
            return False
        self.clear_form()
        self.load()
        return True

    def delete(self, record_id: int, confirm: Callable[[str], bool]) -> bool:
        """Demande confirmation, supprime puis recharge le tableau."""
        if not confirm(self.confirm_message):
            return False
        try:
            self.api.remove(record_id)
        except CALL_ERRORS as exc:
            logger.error("Erreur de suppression (%s %s) : %s", self.label, record_id, exc)
            return False
        self.load()
        return True


class StudentsController(CrudController):
    label = "élèves"
    confirm_message = "Voulez-vous vraiment supprimer cet élève ?"
    form_class = StudentForm

    def render(self, records: list[dict]) -> TableView:
        return render_students(records)


class SubjectsController(CrudController):
    label = "matières"
    confirm_message = "Voulez-vous vraiment supprimer cette matière ?"
    form_class = SubjectForm

    def render(self, records: list[dict]) -> TableView:
        return render_subjects(records)


class EnrollmentsController(CrudController):
    """
    Inscriptions élève ↔ matière.
    Remplit en plus les listes de sélection des élèves et des matières,
    et convertit approved en booléen au chargement du tableau.
    """

    label = "inscriptions"
    confirm_message = "Voulez-vous vraiment supprimer cette inscription ?"
    form_class = EnrollmentForm

    def __init__(self, api: ApiClient, students: ApiClient, subjects: ApiClient):
        self.students_api = students
        self.subjects_api = subjects
        self.student_options: list[SelectOption] = []
        self.subject_options: list[SelectOption] = []
        super().__init__(api)

    def render(self, records: list[dict]) -> TableView:
        return render_enrollments(records)

    def prepare(self, records: list[dict]) -> list[dict]:
        return [{**r, "approved": coerce_approved(r["approved"])} for r in records]

    def start(self) -> None:
        self.load_options()
        self.load()

    def load_options(self) -> None:
        try:
            self.student_options = student_options(self.students_api.fetch_all())
            self.subject_options = subject_options(self.subjects_api.fetch_all())
        except CALL_ERRORS as exc:
            logger.error("Erreur de chargement des élèves ou des matières : %s", exc)
