"""
Aggregate statistics over grade entries.

Everything here is a pure function of its arguments. Entries are assumed to
have been validated at write time; if one still breaks the grade bounds or
points at a course without a positive credit weight, the whole computation
is aborted with ``CorruptGradeDataError`` instead of skipping the row.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from academics.core.config import GRADE_MAX, GRADE_MIN, PASSING_GRADE, STATS_DECIMALS
from academics.core.errors import CorruptGradeDataError, NotFoundError
from academics.engine.types import (
    CourseCatalog,
    CourseInfo,
    CourseSummary,
    GlobalStats,
    GradeEntry,
    SemesterSummary,
)


_QUANTUM = Decimal(1).scaleb(-STATS_DECIMALS)


def round_stat(value: float) -> float:
    """Round half away from zero on the decimal representation, so 12.125 -> 12.13."""
    return float(Decimal(str(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def checked_entries(entries: Iterable[GradeEntry]) -> tuple[GradeEntry, ...]:
    checked = tuple(entries)
    for entry in checked:
        if math.isnan(entry.grade) or not GRADE_MIN <= entry.grade <= GRADE_MAX:
            raise CorruptGradeDataError(
                f"grade entry {entry.id} holds out-of-range grade {entry.grade!r}"
            )
    return checked


def course_for_entry(catalog: CourseCatalog, course_id: int, entry_id: int) -> CourseInfo:
    course = catalog.lookup_course(course_id)
    if course is None:
        raise CorruptGradeDataError(f"grade entry {entry_id} references unknown course {course_id}")
    if course.credits <= 0:
        raise CorruptGradeDataError(f"course {course_id} has non-positive credit weight {course.credits}")
    return course


def _success_rate(grades: Sequence[float], passing_threshold: float) -> float:
    if not grades:
        return 0.0
    passed = sum(1 for g in grades if g >= passing_threshold)
    return round_stat(passed * 100 / len(grades))


def global_stats(
    entries: Iterable[GradeEntry],
    passing_threshold: float = PASSING_GRADE,
) -> GlobalStats:
    """
    Corpus-wide figures.

    An empty corpus yields zeros everywhere (the mean of nothing is reported
    as 0, not NaN).
    """
    checked = checked_entries(entries)
    if not checked:
        return GlobalStats(global_average=0.0, total_students=0, total_courses=0, average_success_rate=0.0)

    grades = [e.grade for e in checked]
    return GlobalStats(
        global_average=round_stat(sum(grades) / len(grades)),
        total_students=len({e.student_id for e in checked}),
        total_courses=len({e.course_id for e in checked}),
        average_success_rate=_success_rate(grades, passing_threshold),
    )


def course_stats(
    entries: Iterable[GradeEntry],
    course_id: int,
    catalog: CourseCatalog,
    passing_threshold: float = PASSING_GRADE,
) -> CourseSummary:
    """
    Summary of one course.

    A course with no entries is still reported (zeroed numbers) as long as
    the catalog knows it; only an unknown course with no entries is a 404.
    """
    selected = checked_entries(e for e in entries if e.course_id == course_id)
    course = catalog.lookup_course(course_id)

    if course is None:
        if not selected:
            raise NotFoundError("Course not found")
        raise CorruptGradeDataError(f"grades reference unknown course {course_id}")

    if not selected:
        return CourseSummary(
            course_code=course.code,
            course_name=course.name,
            average_grade=0.0,
            min_grade=0.0,
            max_grade=0.0,
            total_students=0,
            success_rate=0.0,
        )

    grades = [e.grade for e in selected]
    return CourseSummary(
        course_code=course.code,
        course_name=course.name,
        average_grade=round_stat(sum(grades) / len(grades)),
        min_grade=min(grades),
        max_grade=max(grades),
        total_students=len({e.student_id for e in selected}),
        success_rate=_success_rate(grades, passing_threshold),
    )


def group_by_semester(
    entries: Iterable[GradeEntry],
    *,
    academic_year: str,
) -> dict[str, list[GradeEntry]]:
    """
    Group entries of one academic year by semester label.

    The year is mandatory so that "S1" of two different years never ends up
    in the same group. Groups keep first-seen order, entries keep input order.
    """
    groups: dict[str, list[GradeEntry]] = {}
    for entry in entries:
        if entry.academic_year != academic_year:
            continue
        groups.setdefault(entry.semester, []).append(entry)
    return groups


def summarize(
    label: str,
    entries: Sequence[GradeEntry],
    catalog: CourseCatalog,
    passing_threshold: float = PASSING_GRADE,
) -> SemesterSummary:
    """Credit-weighted summary of a set of entries (one semester or a whole year)."""
    weighted_sum = 0.0
    total_credits = 0
    validated_credits = 0
    for entry in entries:
        credits = course_for_entry(catalog, entry.course_id, entry.id).credits
        weighted_sum += entry.grade * credits
        total_credits += credits
        if entry.grade >= passing_threshold:
            validated_credits += credits

    average = weighted_sum / total_credits if total_credits else 0.0
    return SemesterSummary(
        semester=label,
        average_grade=round_stat(average),
        total_credits=total_credits,
        validated_credits=validated_credits,
        courses_count=len({e.course_id for e in entries}),
    )


def student_semester_stats(
    entries: Iterable[GradeEntry],
    student_id: int,
    catalog: CourseCatalog,
    *,
    academic_year: str,
    passing_threshold: float = PASSING_GRADE,
) -> list[SemesterSummary]:
    """
    Per-semester summaries of one student for one academic year.

    NotFoundError when the student has no entry at all in ``entries``; a
    student graded only in other years gets an empty list.
    """
    own = checked_entries(e for e in entries if e.student_id == student_id)
    if not own:
        raise NotFoundError("Student not found")

    groups = group_by_semester(own, academic_year=academic_year)
    return [
        summarize(semester, group, catalog, passing_threshold)
        for semester, group in groups.items()
    ]
