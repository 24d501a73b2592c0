"""Student domain model."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db import Base
from course_management.db.models.enrollment import enrollments
from course_management.db.models.mixins import IdentifierMixin, TimestampMixin


class Student(IdentifierMixin, TimestampMixin, Base):
    """Represents a student who can enroll in many courses."""

    __tablename__ = "students"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    courses: Mapped[list["Course"]] = relationship(
        "Course",
        secondary=enrollments,
        back_populates="students",
        order_by="Course.title",
    )
    # No cascade: a student's reviews survive with ``student_id`` set to NULL.
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="student")

    @hybrid_property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @full_name.inplace.expression
    @classmethod
    def _full_name_expression(cls):
        return cls.first_name + " " + cls.last_name

    def is_enrolled_in(self, course: "Course") -> bool:
        return course in self.courses

    def __repr__(self) -> str:  # pragma: no cover
        return f"Student(id={self.id!r}, email={self.email!r})"
