import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from academics.core.errors import DependencyError
from academics.db.session import is_storable_id
from academics.engine.types import GradeEntry
from academics.models.grade import Grade
from academics.schemas.grade import GradeCreate

logger = logging.getLogger(__name__)


class GradeStore:
    """
    Durable storage of grade entries.

    Reads return detached ``GradeEntry`` values ordered by id, so the same
    rows always come back in the same order. Database failures surface as
    ``DependencyError``; missing rows on update/delete are reported as
    ``None`` / ``False`` and left for the caller to turn into a 404.
    """

    def __init__(self, db: Session):
        self.db = db

    def _select(self, *criteria) -> list[GradeEntry]:
        try:
            rows = self.db.query(Grade).filter(*criteria).order_by(Grade.id.asc()).all()
        except SQLAlchemyError as exc:
            logger.exception("grade store read failed")
            raise DependencyError("grade store read failed") from exc
        return [GradeEntry.from_row(r) for r in rows]

    def _get(self, grade_id: int) -> Grade | None:
        if not is_storable_id(grade_id):
            return None
        try:
            return self.db.get(Grade, grade_id)
        except SQLAlchemyError as exc:
            logger.exception("grade store read failed")
            raise DependencyError("grade store read failed") from exc

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("grade store %s failed", action)
            raise DependencyError(f"grade store {action} failed") from exc

    def list_all(self, academic_year: str | None = None) -> list[GradeEntry]:
        if academic_year is None:
            return self._select()
        return self._select(Grade.academic_year == academic_year)

    def list_by_student(self, student_id: int) -> list[GradeEntry]:
        if not is_storable_id(student_id):
            return []
        return self._select(Grade.student_id == student_id)

    def list_by_course(self, course_id: int, academic_year: str | None = None) -> list[GradeEntry]:
        if not is_storable_id(course_id):
            return []
        if academic_year is None:
            return self._select(Grade.course_id == course_id)
        return self._select(Grade.course_id == course_id, Grade.academic_year == academic_year)

    def list_by_student_and_year(self, student_id: int, academic_year: str) -> list[GradeEntry]:
        if not is_storable_id(student_id):
            return []
        return self._select(Grade.student_id == student_id, Grade.academic_year == academic_year)

    def insert(self, payload: GradeCreate) -> GradeEntry:
        row = Grade(
            student_id=payload.student_id,
            course_id=payload.course_id,
            grade=payload.grade,
            semester=payload.semester,
            academic_year=payload.academic_year,
        )
        self.db.add(row)
        self._commit("insert")
        self.db.refresh(row)
        return GradeEntry.from_row(row)

    def update_grade(self, grade_id: int, grade: float) -> GradeEntry | None:
        row = self._get(grade_id)
        if row is None:
            return None
        row.grade = grade
        self._commit("update")
        self.db.refresh(row)
        return GradeEntry.from_row(row)

    def delete_by_id(self, grade_id: int) -> bool:
        row = self._get(grade_id)
        if row is None:
            return False
        self.db.delete(row)
        self._commit("delete")
        return True
