import pytest

from academics.core.errors import NotFoundError
from academics.engine.transcript import compose_transcript
from academics.engine.types import CourseInfo, GradeEntry, StudentInfo
from academics.services.transcript_pdf import render_transcript_pdf


class FakeCatalog:
    courses = {
        1: CourseInfo(1, "CS101", "Computer Science 101", 6),
        2: CourseInfo(2, "MATH101", "Calculus I", 6),
        4: CourseInfo(4, "PHYS101", "Physics I", 4),
    }

    def lookup_course(self, course_id):
        return self.courses.get(course_id)


class FakeDirectory:
    def lookup_student(self, student_id):
        if student_id == 1:
            return StudentInfo(1, "S1234", "John Doe")
        return None


ENTRIES = [
    GradeEntry(1, 1, 1, 15.0, "S1", "2023-2024"),
    GradeEntry(2, 1, 2, 8.0, "S1", "2023-2024"),
    GradeEntry(3, 1, 4, 14.0, "S2", "2023-2024"),
    GradeEntry(4, 2, 1, 18.0, "S1", "2023-2024"),
    GradeEntry(5, 1, 1, 9.0, "S1", "2022-2023"),
]


def compose(student_id=1, year="2023-2024", entries=ENTRIES):
    return compose_transcript(entries, student_id, year, FakeCatalog(), FakeDirectory())


def test_transcript_groups_semesters():
    transcript = compose()
    assert transcript.student.full_name == "John Doe"
    assert [block.summary.semester for block in transcript.semesters] == ["S1", "S2"]

    s1 = transcript.semesters[0]
    assert [line.course_code for line in s1.lines] == ["CS101", "MATH101"]
    assert [line.validated for line in s1.lines] == [True, False]
    assert s1.summary.average_grade == 11.5
    assert s1.summary.total_credits == 12
    assert s1.summary.validated_credits == 6


def test_transcript_includes_each_entry_once():
    transcript = compose()
    lines = [line for block in transcript.semesters for line in block.lines]
    assert len(lines) == 3
    assert sum(block.summary.courses_count for block in transcript.semesters) == 3


def test_cumulative_summary():
    cumulative = compose().cumulative
    assert cumulative.semester == "2023-2024"
    # (15*6 + 8*6 + 14*4) / 16
    assert cumulative.average_grade == 12.13
    assert cumulative.total_credits == 16
    assert cumulative.validated_credits == 10
    assert cumulative.courses_count == 3


def test_student_missing_from_directory_still_gets_a_transcript():
    transcript = compose(student_id=2)
    assert transcript.student.full_name == "Student #2"


def test_no_grades_for_year_is_not_found():
    with pytest.raises(NotFoundError) as exc:
        compose(year="2019-2020")
    assert exc.value.message == "Student not found or no grades"

    with pytest.raises(NotFoundError):
        compose(student_id=999)


def test_pdf_is_byte_identical_for_same_input():
    first = render_transcript_pdf(compose())
    second = render_transcript_pdf(compose())
    assert first.startswith(b"%PDF")
    assert first == second


def test_pdf_differs_when_grades_differ():
    changed = [GradeEntry(1, 1, 1, 16.0, "S1", "2023-2024"), *ENTRIES[1:]]
    assert render_transcript_pdf(compose()) != render_transcript_pdf(compose(entries=changed))
