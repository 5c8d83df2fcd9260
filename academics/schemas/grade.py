from typing import Annotated

from pydantic import Field, StringConstraints

from academics.core.config import MAX_RECORD_ID, SEMESTER_MAX_LENGTH
from academics.schemas.base import CamelModel

RecordId = Annotated[int, Field(gt=0, le=MAX_RECORD_ID)]
GradeValue = Annotated[float, Field(allow_inf_nan=False)]


class GradeCreate(CamelModel):
    # Shape and type only; the 0..20 range and the academic year format are
    # checked afterwards by academics.engine.validator.
    student_id: RecordId
    course_id: RecordId
    grade: GradeValue
    semester: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=SEMESTER_MAX_LENGTH)]
    academic_year: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class GradeUpdate(CamelModel):
    grade: GradeValue


class GradeRead(CamelModel):
    id: int
    student_id: int
    course_id: int
    grade: float
    semester: str
    academic_year: str


class GradeUpdateResult(CamelModel):
    # id is echoed back as received in the path
    id: str
    grade: float
