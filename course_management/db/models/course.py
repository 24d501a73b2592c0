"""Course model."""
from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db import Base
from course_management.db.models.enrollment import enrollments
from course_management.db.models.mixins import IdentifierMixin, TimestampMixin


class Course(IdentifierMixin, TimestampMixin, Base):
    """A course taught by exactly one instructor."""

    __tablename__ = "courses"
    __table_args__ = (
        UniqueConstraint("title", "instructor_id", name="uq_courses_title_instructor"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    instructor_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("instructors.id", ondelete="CASCADE"), nullable=False, index=True
    )

    instructor: Mapped["Instructor"] = relationship("Instructor", back_populates="courses")
    # Reviews are removed by the database foreign key only; the ORM must not
    # load, detach or delete them when a course is deleted.
    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="course",
        passive_deletes="all",
        order_by="Review.created_at",
    )
    students: Mapped[list["Student"]] = relationship(
        "Student",
        secondary=enrollments,
        back_populates="courses",
        order_by="Student.last_name",
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"Course(id={self.id!r}, title={self.title!r})"
