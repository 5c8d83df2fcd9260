from academics.schemas.base import CamelModel


class GlobalStatsRead(CamelModel):
    global_average: float
    total_students: int
    total_courses: int
    average_success_rate: float


class CourseSummaryRead(CamelModel):
    course_code: str
    course_name: str
    average_grade: float
    min_grade: float
    max_grade: float
    total_students: int
    success_rate: float


class SemesterSummaryRead(CamelModel):
    semester: str
    average_grade: float
    total_credits: int
    validated_credits: int
    courses_count: int
