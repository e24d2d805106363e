"""
Modèle SQLAlchemy pour la table subjects (matières).
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
