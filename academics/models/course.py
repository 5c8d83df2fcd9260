from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academics.db.base_class import Base


class Course(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    code: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    credits: Mapped[int] = mapped_column(nullable=False)

    __table_args__ = (CheckConstraint("credits > 0", name="ck_courses_credits_positive"),)

    grades = relationship(
        "Grade", back_populates="course", cascade="all, delete-orphan", passive_deletes=True
    )
