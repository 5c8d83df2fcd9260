from fastapi import Depends, Query
from sqlalchemy.orm import Session

from academics.core.config import ACADEMIC_YEAR_MESSAGE
from academics.core.errors import ValidationError
from academics.db.session import SessionLocal
from academics.engine.validator import is_valid_academic_year
from academics.repositories.catalog import SqlCourseCatalog, SqlStudentDirectory
from academics.repositories.grades import GradeStore
from academics.services.stats import StatsService


# every request that needs DB will get a fresh session, and it will always close.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_grade_store(db: Session = Depends(get_db)) -> GradeStore:
    return GradeStore(db)


def get_course_catalog(db: Session = Depends(get_db)) -> SqlCourseCatalog:
    return SqlCourseCatalog(db)


def get_student_directory(db: Session = Depends(get_db)) -> SqlStudentDirectory:
    return SqlStudentDirectory(db)


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(
        store=GradeStore(db),
        catalog=SqlCourseCatalog(db),
        directory=SqlStudentDirectory(db),
    )


def _academic_year_error(message: str) -> ValidationError:
    return ValidationError("Validation failed", errors=[{"field": "academicYear", "message": message}])


def _checked_academic_year(value: str | None) -> str | None:
    # an empty ?academicYear= counts as not supplied
    if not value:
        return None
    if not is_valid_academic_year(value):
        raise _academic_year_error(ACADEMIC_YEAR_MESSAGE)
    return value


def optional_academic_year(
    academic_year: str | None = Query(None, alias="academicYear"),
) -> str | None:
    return _checked_academic_year(academic_year)


def required_academic_year(
    academic_year: str | None = Query(None, alias="academicYear"),
) -> str:
    value = _checked_academic_year(academic_year)
    if value is None:
        raise _academic_year_error("Academic year is required")
    return value
