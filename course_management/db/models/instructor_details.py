"""Instructor details model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db import Base
from course_management.db.models.mixins import IdentifierMixin, TimestampMixin


class InstructorDetails(IdentifierMixin, TimestampMixin, Base):
    """Optional profile information that can be linked to one instructor.

    A details record may exist on its own ("orphaned") and be linked later.
    """

    __tablename__ = "instructor_details"

    youtube_channel: Mapped[str] = mapped_column(String(255), nullable=False)
    hobby: Mapped[str | None] = mapped_column(Text, nullable=True)

    # The foreign key lives on ``instructors``; this side never owns it.
    instructor: Mapped[Optional["Instructor"]] = relationship(
        "Instructor", back_populates="details", uselist=False
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"InstructorDetails(id={self.id!r}, youtube_channel={self.youtube_channel!r})"
