from typing import List, Optional
import logging

from app.core.patch import copy_non_null_fields
from app.models.student import Student
from app.repositories.student import StudentRepository
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

# Columns a patch may write, id included
STUDENT_FIELDS = ("id", "name", "email", "age", "grade")

DELETED_MESSAGE = "student has been deleted"


def get_students(repo: StudentRepository) -> List[Student]:
    """Lấy danh sách tất cả học sinh"""
    return repo.find_all()


def get_student(repo: StudentRepository, student_id: int) -> Optional[Student]:
    """Lấy thông tin 1 học sinh theo ID, None nếu không có"""
    return repo.find_by_id(student_id)


def create_student(repo: StudentRepository, student: StudentCreate) -> Student:
    """Tạo học sinh mới từ các trường có trong body"""
    db_student = Student(**student.model_dump(exclude_none=True))
    return repo.save(db_student)


def update_student(repo: StudentRepository, student_id: int, student: StudentUpdate) -> Optional[Student]:
    """Cập nhật các trường khác None của học sinh"""
    db_student = repo.find_by_id(student_id)
    if db_student is None:
        logger.info(f"Student id={student_id} not found, nothing to update")
        return None
    copy_non_null_fields(student, db_student, STUDENT_FIELDS)
    return repo.save(db_student)


def delete_student(repo: StudentRepository, student_id: int) -> str:
    """Xóa học sinh; id không tồn tại không báo lỗi"""
    repo.delete_by_id(student_id)
    return DELETED_MESSAGE
