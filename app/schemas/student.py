from typing import Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None


class StudentCreate(StudentBase):
    # An explicit id is accepted; the store inserts or updates that row
    id: Optional[int] = None


class StudentUpdate(StudentBase):
    """
    Patch body for PUT /student/{id}.

    Fields left as None are absent and keep the stored value. A non-null id
    is copied like any other field.
    """
    id: Optional[int] = None


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass
