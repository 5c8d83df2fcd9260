import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from academics.core.deps import get_db, get_grade_store, get_stats_service
from academics.engine.types import CourseInfo, GradeEntry, StudentInfo
from academics.main import app
from academics.services.stats import StatsService

INTERNAL_ERROR = {"message": "Internal server error"}


class BrokenSession:
    """A session whose database has gone away."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT grades.id FROM grades", {}, Exception("database is locked"))

    query = _fail
    get = _fail

    def close(self):
        pass


def broken_db():
    yield BrokenSession()


class ZeroCreditCatalog:
    def lookup_course(self, course_id):
        return CourseInfo(course_id, "CS101", "Computer Science 101", 0)


class OneGradeStore:
    def list_by_student(self, student_id):
        return [GradeEntry(1, student_id, 1, 15.0, "S1", "2023-2024")]

    def list_by_student_and_year(self, student_id, academic_year):
        return self.list_by_student(student_id)


class KnownStudents:
    def lookup_student(self, student_id):
        return StudentInfo(student_id, "S1234", "John Doe")


class ExplodingStore:
    def list_all(self, academic_year=None):
        raise RuntimeError("unexpected failure in grade listing")


@pytest.fixture()
def server_client():
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method,path,kwargs",
    [
        ("get", "/grades", {}),
        ("get", "/grades/student/1", {}),
        ("get", "/stats/global", {}),
        ("get", "/stats/course/1", {}),
        ("put", "/grades/1", {"json": {"grade": 12}}),
        (
            "post",
            "/grades",
            {"json": {"studentId": 1, "courseId": 1, "grade": 12, "semester": "S1", "academicYear": "2023-2024"}},
        ),
    ],
)
def test_database_failure_is_internal_error(server_client, method, path, kwargs):
    app.dependency_overrides[get_db] = broken_db
    r = getattr(server_client, method)(path, **kwargs)
    assert r.status_code == 500
    assert r.json() == INTERNAL_ERROR
    assert "locked" not in r.text


@pytest.mark.parametrize(
    "path,params",
    [
        ("/stats/student/1", {"academicYear": "2023-2024"}),
        ("/grades/student/1/transcript", {"academicYear": "2023-2024"}),
    ],
)
def test_corrupt_grade_data_is_internal_error(server_client, path, params):
    app.dependency_overrides[get_stats_service] = lambda: StatsService(
        store=OneGradeStore(), catalog=ZeroCreditCatalog(), directory=KnownStudents()
    )
    r = server_client.get(path, params=params)
    assert r.status_code == 500
    assert r.json() == INTERNAL_ERROR
    assert "credit" not in r.text


def test_unexpected_error_keeps_json_envelope(server_client):
    app.dependency_overrides[get_grade_store] = lambda: ExplodingStore()
    r = server_client.get("/grades")
    assert r.status_code == 500
    assert r.json() == INTERNAL_ERROR
    assert "unexpected failure" not in r.text
