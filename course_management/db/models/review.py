"""Review model."""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db import Base
from course_management.db.models.mixins import IdentifierMixin, TimestampMixin


class Review(IdentifierMixin, TimestampMixin, Base):
    """A student's comment on a course."""

    __tablename__ = "reviews"

    comment: Mapped[str] = mapped_column(Text, nullable=False)
    course_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True, index=True
    )

    course: Mapped[Optional["Course"]] = relationship("Course", back_populates="reviews")
    student: Mapped[Optional["Student"]] = relationship("Student", back_populates="reviews")

    def __repr__(self) -> str:  # pragma: no cover
        return f"Review(id={self.id!r}, course_id={self.course_id!r})"
