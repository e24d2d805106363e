"""
Modèle SQLAlchemy pour la table students.
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    fullname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)  # pas d'unicité imposée
    age = Column(Integer, nullable=False)
