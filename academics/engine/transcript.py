from typing import Iterable

from academics.core.config import PASSING_GRADE
from academics.core.errors import NotFoundError
from academics.engine.aggregator import checked_entries, course_for_entry, group_by_semester, summarize
from academics.engine.types import (
    CourseCatalog,
    GradeEntry,
    StudentDirectory,
    StudentInfo,
    Transcript,
    TranscriptLine,
    TranscriptSemester,
)


def compose_transcript(
    entries: Iterable[GradeEntry],
    student_id: int,
    academic_year: str,
    catalog: CourseCatalog,
    directory: StudentDirectory,
    passing_threshold: float = PASSING_GRADE,
) -> Transcript:
    """
    Build the transcript of one student for one academic year.

    Every entry of that student and year lands in exactly one semester block,
    in input order. "Unknown student" and "no grades this year" both raise the
    same NotFoundError.
    """
    selected = checked_entries(
        e for e in entries if e.student_id == student_id and e.academic_year == academic_year
    )
    if not selected:
        raise NotFoundError("Student not found or no grades")

    student = directory.lookup_student(student_id)
    if student is None:
        student = StudentInfo(id=student_id, registration_number=str(student_id), full_name=f"Student #{student_id}")

    semesters = []
    for semester, group in group_by_semester(selected, academic_year=academic_year).items():
        lines = []
        for entry in group:
            course = course_for_entry(catalog, entry.course_id, entry.id)
            lines.append(
                TranscriptLine(
                    course_code=course.code,
                    course_name=course.name,
                    credits=course.credits,
                    grade=entry.grade,
                    validated=entry.grade >= passing_threshold,
                )
            )
        semesters.append(
            TranscriptSemester(
                summary=summarize(semester, group, catalog, passing_threshold),
                lines=tuple(lines),
            )
        )

    return Transcript(
        student=student,
        academic_year=academic_year,
        semesters=tuple(semesters),
        cumulative=summarize(academic_year, selected, catalog, passing_threshold),
    )
