import logging

from academics.core.config import PASSING_GRADE
from academics.engine import aggregator
from academics.engine.transcript import compose_transcript
from academics.engine.types import (
    CourseCatalog,
    CourseSummary,
    GlobalStats,
    SemesterSummary,
    StudentDirectory,
)
from academics.repositories.grades import GradeStore
from academics.services.transcript_pdf import render_transcript_pdf

logger = logging.getLogger(__name__)


class StatsService:
    """
    Binds the aggregation functions to the grade store and reference data.

    Scope parameters arrive already type-checked by the routers (a malformed
    academic year never gets this far). Nothing is kept between calls.
    """

    def __init__(
        self,
        store: GradeStore,
        catalog: CourseCatalog,
        directory: StudentDirectory,
        passing_threshold: float = PASSING_GRADE,
    ):
        self.store = store
        self.catalog = catalog
        self.directory = directory
        self.passing_threshold = passing_threshold

    def global_stats(self, academic_year: str | None = None) -> GlobalStats:
        entries = self.store.list_all(academic_year)
        return aggregator.global_stats(entries, self.passing_threshold)

    def course_stats(self, course_id: int, academic_year: str | None = None) -> CourseSummary:
        entries = self.store.list_by_course(course_id, academic_year)
        return aggregator.course_stats(entries, course_id, self.catalog, self.passing_threshold)

    def student_semester_stats(
        self, student_id: int, academic_year: str | None = None
    ) -> list[SemesterSummary]:
        entries = self.store.list_by_student(student_id)
        if academic_year is None and entries:
            # no year asked for: report the student's most recent one
            academic_year = max(e.academic_year for e in entries)
            logger.info("student %s stats defaulting to academic year %s", student_id, academic_year)

        return aggregator.student_semester_stats(
            entries,
            student_id,
            self.catalog,
            academic_year=academic_year or "",
            passing_threshold=self.passing_threshold,
        )

    def transcript_pdf(self, student_id: int, academic_year: str) -> bytes:
        entries = self.store.list_by_student_and_year(student_id, academic_year)
        transcript = compose_transcript(
            entries,
            student_id,
            academic_year,
            self.catalog,
            self.directory,
            self.passing_threshold,
        )
        return render_transcript_pdf(transcript)
