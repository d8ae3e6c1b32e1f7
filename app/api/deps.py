from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.repositories.student import StudentRepository


def get_db() -> Generator:
    """
    Dependency để lấy database session.
    Tự động đóng session sau khi request hoàn thành.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return StudentRepository(db)
