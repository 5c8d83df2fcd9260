from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from academics.db.base_class import Base


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, index=True)

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)

    grade = Column(Float, nullable=False)
    semester = Column(String(10), nullable=False)
    academic_year = Column(String(9), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("grade >= 0 AND grade <= 20", name="ck_grades_grade_range"),
    )

    student = relationship("Student", back_populates="grades")
    course = relationship("Course", back_populates="grades")
