from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from academics.core.errors import DependencyError
from academics.db.session import is_storable_id
from academics.engine.types import CourseInfo, StudentInfo
from academics.models.course import Course
from academics.models.student import Student


class SqlCourseCatalog:
    """Course reference data (code, name, credit weight) read from the courses table."""

    def __init__(self, db: Session):
        self.db = db

    def lookup_course(self, course_id: int) -> CourseInfo | None:
        if not is_storable_id(course_id):
            return None
        try:
            course = self.db.get(Course, course_id)
        except SQLAlchemyError as exc:
            raise DependencyError("course lookup failed") from exc
        if course is None:
            return None
        return CourseInfo(id=course.id, code=course.code, name=course.name, credits=course.credits)


class SqlStudentDirectory:
    def __init__(self, db: Session):
        self.db = db

    def lookup_student(self, student_id: int) -> StudentInfo | None:
        if not is_storable_id(student_id):
            return None
        try:
            student = self.db.get(Student, student_id)
        except SQLAlchemyError as exc:
            raise DependencyError("student lookup failed") from exc
        if student is None:
            return None
        return StudentInfo(
            id=student.id,
            registration_number=student.student_id,
            full_name=student.full_name,
        )
