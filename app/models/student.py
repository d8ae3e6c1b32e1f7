from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=True)
    email = Column(String, index=True, nullable=True)
    age = Column(Integer, nullable=True)
    grade = Column(String, nullable=True)

    def __repr__(self):
        return f"<Student id={self.id} name={self.name!r}>"
