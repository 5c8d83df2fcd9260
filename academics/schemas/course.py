from pydantic import Field

from academics.schemas.base import CamelModel


class CourseCreate(CamelModel):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=255)
    credits: int = Field(gt=0)


class CourseRead(CamelModel):
    id: int
    code: str
    name: str
    credits: int
