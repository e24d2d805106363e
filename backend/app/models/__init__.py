# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# Sans cet import, la FK students_subjects.subject_id → subjects.id échoue
# avec NoReferencedTableError si subject.py n'est pas chargé avant enrollment.py.

from app.models.student import Student  # noqa: F401
from app.models.subject import Subject  # noqa: F401  — doit précéder enrollment
from app.models.enrollment import StudentSubject  # noqa: F401
