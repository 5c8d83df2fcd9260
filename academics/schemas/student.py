from datetime import date

from pydantic import EmailStr, Field

from academics.schemas.base import CamelModel


class StudentCreate(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    date_of_birth: date
    student_id: str = Field(min_length=1, max_length=50)


class StudentRead(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: EmailStr
    date_of_birth: date
    student_id: str
