from fastapi import APIRouter, Depends

from academics.core.deps import get_stats_service, optional_academic_year
from academics.schemas.stats import CourseSummaryRead, GlobalStatsRead, SemesterSummaryRead
from academics.services.stats import StatsService

router = APIRouter()


@router.get(
    "/global",
    response_model=GlobalStatsRead,
    responses={400: {"description": "Malformed academicYear"}},
)
def global_stats(
    academic_year: str | None = Depends(optional_academic_year),
    service: StatsService = Depends(get_stats_service),
):
    return service.global_stats(academic_year)


@router.get(
    "/course/{course_id}",
    response_model=CourseSummaryRead,
    responses={404: {"description": "Course not found"}},
)
def course_stats(
    course_id: int,
    academic_year: str | None = Depends(optional_academic_year),
    service: StatsService = Depends(get_stats_service),
):
    return service.course_stats(course_id, academic_year)


@router.get(
    "/student/{student_id}",
    response_model=list[SemesterSummaryRead],
    responses={404: {"description": "Student not found"}},
)
def student_semester_stats(
    student_id: int,
    academic_year: str | None = Depends(optional_academic_year),
    service: StatsService = Depends(get_stats_service),
):
    return service.student_semester_stats(student_id, academic_year)
