"""create students, courses and grades

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 09:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("student_id", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_students_id", "students", ["id"])
    op.create_index("ix_students_email", "students", ["email"], unique=True)
    op.create_index("ix_students_student_id", "students", ["student_id"], unique=True)

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("credits", sa.Integer(), nullable=False),
        sa.CheckConstraint("credits > 0", name="ck_courses_credits_positive"),
    )
    op.create_index("ix_courses_id", "courses", ["id"])
    op.create_index("ix_courses_code", "courses", ["code"], unique=True)

    op.create_table(
        "grades",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id", ondelete="CASCADE"), nullable=False),
        sa.Column("grade", sa.Float(), nullable=False),
        sa.Column("semester", sa.String(length=10), nullable=False),
        sa.Column("academic_year", sa.String(length=9), nullable=False),
        sa.CheckConstraint("grade >= 0 AND grade <= 20", name="ck_grades_grade_range"),
    )
    op.create_index("ix_grades_id", "grades", ["id"])
    op.create_index("ix_grades_student_id", "grades", ["student_id"])
    op.create_index("ix_grades_course_id", "grades", ["course_id"])
    op.create_index("ix_grades_academic_year", "grades", ["academic_year"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("grades")
    op.drop_table("courses")
    op.drop_table("students")
