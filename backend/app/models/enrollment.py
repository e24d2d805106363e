"""
Modèle SQLAlchemy pour la table d'association students_subjects (inscriptions).
Nommé enrollment pour la lisibilité ; la table garde son nom historique.
"""

from sqlalchemy import Column, ForeignKey, Integer, SmallInteger

from app.database import Base


class StudentSubject(Base):
    """Inscription élève ↔ matière avec son état d'approbation (0/1)."""
    __tablename__ = "students_subjects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    approved = Column(SmallInteger, nullable=False, default=0)  # 0 = non approuvé, 1 = approuvé
    # Pas de contrainte d'unicité (student_id, subject_id) : les doublons sont permis
