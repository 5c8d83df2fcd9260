from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GradeEntry:
    """Read-only view of one stored grade, detached from the ORM session."""

    id: int
    student_id: int
    course_id: int
    grade: float
    semester: str
    academic_year: str

    @classmethod
    def from_row(cls, row) -> "GradeEntry":
        return cls(
            id=row.id,
            student_id=row.student_id,
            course_id=row.course_id,
            grade=float(row.grade),
            semester=row.semester,
            academic_year=row.academic_year,
        )


@dataclass(frozen=True)
class CourseInfo:
    id: int
    code: str
    name: str
    credits: int


@dataclass(frozen=True)
class StudentInfo:
    id: int
    registration_number: str
    full_name: str


class CourseCatalog(Protocol):
    def lookup_course(self, course_id: int) -> CourseInfo | None: ...


class StudentDirectory(Protocol):
    def lookup_student(self, student_id: int) -> StudentInfo | None: ...


@dataclass(frozen=True)
class GlobalStats:
    global_average: float
    total_students: int
    total_courses: int
    average_success_rate: float


@dataclass(frozen=True)
class CourseSummary:
    course_code: str
    course_name: str
    average_grade: float
    min_grade: float
    max_grade: float
    total_students: int
    success_rate: float


@dataclass(frozen=True)
class SemesterSummary:
    semester: str
    average_grade: float
    total_credits: int
    validated_credits: int
    courses_count: int


@dataclass(frozen=True)
class TranscriptLine:
    course_code: str
    course_name: str
    credits: int
    grade: float
    validated: bool


@dataclass(frozen=True)
class TranscriptSemester:
    summary: SemesterSummary
    lines: tuple[TranscriptLine, ...]


@dataclass(frozen=True)
class Transcript:
    student: StudentInfo
    academic_year: str
    semesters: tuple[TranscriptSemester, ...]
    cumulative: SemesterSummary
