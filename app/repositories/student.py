from sqlalchemy.orm import Session

from app.models.student import Student
from app.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Repository for Student entity operations."""

    def __init__(self, db: Session) -> None:
        super().__init__(Student, db)
