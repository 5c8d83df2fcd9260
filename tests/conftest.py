import os
from datetime import date

TEST_DB_FILE = "test_academics.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# keep the app's own engine (startup init_db) off the development database
os.environ.setdefault("ACADEMICS_DATABASE_URL", TEST_DB_URL)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from academics.core.deps import get_db  # noqa: E402
from academics.db.base import Base  # noqa: E402
from academics.db.session import enable_sqlite_foreign_keys  # noqa: E402
from academics.main import app  # noqa: E402
from academics.models.course import Course  # noqa: E402
from academics.models.grade import Grade  # noqa: E402
from academics.models.student import Student  # noqa: E402

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """
    Seed a clean dataset for each test.

    Students: 1 John Doe, 2 Jane Smith (both graded), 3 Paul Martin (no grades).
    Courses:  1 CS101 (6 cr), 2 MATH101 (6 cr), 3 BIO101 (5 cr, no grades), 4 PHYS101 (4 cr).
    Grades (id: student, course, grade, semester, year):
        1: 1, 1, 15, S1, 2023-2024
        2: 1, 2,  8, S1, 2023-2024
        3: 1, 4, 14, S2, 2023-2024
        4: 2, 1, 18, S1, 2023-2024
        5: 2, 2, 11, S2, 2023-2024
        6: 1, 1,  9, S1, 2022-2023
    """
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(Grade).delete()
        db.query(Course).delete()
        db.query(Student).delete()
        db.commit()

        db.add_all([
            Student(first_name="John", last_name="Doe", email="john.doe@example.com",
                    date_of_birth=date(2000, 1, 1), student_id="S1234"),
            Student(first_name="Jane", last_name="Smith", email="jane.smith@example.com",
                    date_of_birth=date(1999, 5, 10), student_id="S5678"),
            Student(first_name="Paul", last_name="Martin", email="paul.martin@example.com",
                    date_of_birth=date(2001, 9, 23), student_id="S9012"),
        ])
        db.commit()

        db.add_all([
            Course(code="CS101", name="Computer Science 101", credits=6),
            Course(code="MATH101", name="Calculus I", credits=6),
            Course(code="BIO101", name="Biology Basics", credits=5),
            Course(code="PHYS101", name="Physics I", credits=4),
        ])
        db.commit()

        for student_id, course_id, grade, semester, year in [
            (1, 1, 15, "S1", "2023-2024"),
            (1, 2, 8, "S1", "2023-2024"),
            (1, 4, 14, "S2", "2023-2024"),
            (2, 1, 18, "S1", "2023-2024"),
            (2, 2, 11, "S2", "2023-2024"),
            (1, 1, 9, "S1", "2022-2023"),
        ]:
            db.add(Grade(student_id=student_id, course_id=course_id, grade=grade,
                         semester=semester, academic_year=year))
            db.commit()

        yield
    finally:
        db.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
