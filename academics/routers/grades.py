import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from academics.core.deps import (
    get_course_catalog,
    get_grade_store,
    get_stats_service,
    get_student_directory,
    required_academic_year,
)
from academics.core.errors import NotFoundError, ValidationError
from academics.engine.validator import InvalidGrade, validate_grade_create, validate_grade_update
from academics.repositories.catalog import SqlCourseCatalog, SqlStudentDirectory
from academics.repositories.grades import GradeStore
from academics.schemas.grade import GradeRead, GradeUpdateResult
from academics.services.stats import StatsService

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject(invalid: InvalidGrade) -> ValidationError:
    logger.info("grade rejected (%s): %s", invalid.rule, invalid.as_list())
    return ValidationError("Invalid data")


def _ensure_references_exist(
    directory: SqlStudentDirectory,
    catalog: SqlCourseCatalog,
    student_id: int,
    course_id: int,
) -> None:
    missing = []
    if directory.lookup_student(student_id) is None:
        missing.append("studentId")
    if catalog.lookup_course(course_id) is None:
        missing.append("courseId")
    if missing:
        logger.info("grade rejected: unknown %s", ", ".join(missing))
        raise ValidationError("Invalid data")


@router.get("", response_model=list[GradeRead])
def list_grades(store: GradeStore = Depends(get_grade_store)):
    return store.list_all()


@router.get("/student/{student_id}", response_model=list[GradeRead])
def list_student_grades(
    student_id: int,
    store: GradeStore = Depends(get_grade_store),
    directory: SqlStudentDirectory = Depends(get_student_directory),
):
    entries = store.list_by_student(student_id)
    # a known student without grades is an empty list, not a 404
    if not entries and directory.lookup_student(student_id) is None:
        raise NotFoundError("Student not found")
    return entries


@router.get(
    "/student/{student_id}/transcript",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"description": "Student not found or no grades"},
    },
)
def student_transcript(
    student_id: int,
    academic_year: str = Depends(required_academic_year),
    service: StatsService = Depends(get_stats_service),
):
    pdf = service.transcript_pdf(student_id, academic_year)
    filename = f"transcript_{student_id}_{academic_year}.pdf"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "",
    response_model=GradeRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid data"}},
)
def create_grade(
    payload: dict[str, Any] = Body(...),
    store: GradeStore = Depends(get_grade_store),
    directory: SqlStudentDirectory = Depends(get_student_directory),
    catalog: SqlCourseCatalog = Depends(get_course_catalog),
):
    result = validate_grade_create(payload)
    if isinstance(result, InvalidGrade):
        raise _reject(result)

    _ensure_references_exist(directory, catalog, result.student_id, result.course_id)
    entry = store.insert(result)
    logger.info("grade %s created for student %s", entry.id, entry.student_id)
    return entry


@router.put(
    "/{grade_id}",
    response_model=GradeUpdateResult,
    responses={400: {"description": "Invalid data"}, 404: {"description": "Grade not found"}},
)
def update_grade(
    grade_id: int,
    payload: dict[str, Any] = Body(...),
    store: GradeStore = Depends(get_grade_store),
):
    result = validate_grade_update(payload)
    if isinstance(result, InvalidGrade):
        raise _reject(result)

    entry = store.update_grade(grade_id, result.grade)
    if entry is None:
        raise NotFoundError("Grade not found")
    return {"id": str(grade_id), "grade": entry.grade}


@router.delete(
    "/{grade_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Grade not found"}},
)
def delete_grade(grade_id: int, store: GradeStore = Depends(get_grade_store)):
    if not store.delete_by_id(grade_id):
        raise NotFoundError("Grade not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
