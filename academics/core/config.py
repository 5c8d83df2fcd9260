import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default is a local SQLite file; point ACADEMICS_DATABASE_URL elsewhere in production.
DATABASE_URL = os.getenv("ACADEMICS_DATABASE_URL", f"sqlite:///{BASE_DIR}/academics.db")

# Grading scale
GRADE_MIN = 0
GRADE_MAX = 20
PASSING_GRADE = 10  # grade >= 10 validates the course credits

ACADEMIC_YEAR_PATTERN = r"^\d{4}-\d{4}$"
ACADEMIC_YEAR_MESSAGE = "Academic year must be in the format YYYY-YYYY"

# grades.semester is a String(10) column
SEMESTER_MAX_LENGTH = 10

# Largest id a SQLite INTEGER column can hold; no row can match a larger one
MAX_RECORD_ID = 2**63 - 1

# Statistics are rounded for display only
STATS_DECIMALS = 2

INSTITUTION_NAME = os.getenv("ACADEMICS_INSTITUTION_NAME", "Academic Records Office")
