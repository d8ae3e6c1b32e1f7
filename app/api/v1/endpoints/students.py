from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from app.api.deps import get_student_repository
from app.core.config import settings
from app.core.exceptions import NotFoundException
from app.repositories.student import StudentRepository
from app.services.student import student as crud_student
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


def _found_or_none(student, student_id: int):
    if student is None and settings.STRICT_NOT_FOUND:
        raise NotFoundException(
            message="Student not found",
            details={"id": student_id}
        )
    return student


@router.get("/students", response_model=List[Student])
def get_students(repo: StudentRepository = Depends(get_student_repository)):
    """
    Lấy danh sách tất cả học sinh
    """
    return crud_student.get_students(repo)


@router.get("/student/{student_id}", response_model=Optional[Student])
def get_student(
    student_id: int,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Lấy thông tin chi tiết của 1 học sinh theo ID.

    Trả về null nếu không tìm thấy (404 khi bật STRICT_NOT_FOUND).
    """
    student = crud_student.get_student(repo, student_id=student_id)
    return _found_or_none(student, student_id)


@router.post("/student", response_model=Student)
def create_student(
    student: StudentCreate,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Tạo học sinh mới

    Body có thể chỉ chứa một phần các trường:
    - **name**, **email**, **age**, **grade**: đều không bắt buộc
    - **id**: nếu có, học sinh được lưu với id này
    """
    return crud_student.create_student(repo, student=student)


@router.put("/student/{student_id}", response_model=Optional[Student])
def update_student(
    student_id: int,
    student: StudentUpdate,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Cập nhật thông tin học sinh

    Chỉ các trường khác null trong body được ghi đè; các trường còn lại giữ nguyên.
    """
    updated_student = crud_student.update_student(repo, student_id=student_id, student=student)
    return _found_or_none(updated_student, student_id)


@router.delete("/student/{student_id}", response_class=PlainTextResponse)
def delete_student(
    student_id: int,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Xóa học sinh. Luôn trả về cùng một thông báo, kể cả khi id không tồn tại.
    """
    return crud_student.delete_student(repo, student_id=student_id)
