"""Instructor domain model."""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db import Base
from course_management.db.models.mixins import IdentifierMixin, TimestampMixin


class Instructor(IdentifierMixin, TimestampMixin, Base):
    """Represents an instructor who teaches courses."""

    __tablename__ = "instructors"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    instructor_details_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("instructor_details.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    # Deleting an instructor deletes the linked details; unlinking does not.
    details: Mapped[Optional["InstructorDetails"]] = relationship(
        "InstructorDetails",
        back_populates="instructor",
        cascade="all",
    )
    courses: Mapped[list["Course"]] = relationship(
        "Course",
        back_populates="instructor",
        cascade="all, delete-orphan",
        order_by="Course.created_at",
    )

    @hybrid_property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @full_name.inplace.expression
    @classmethod
    def _full_name_expression(cls):
        return cls.first_name + " " + cls.last_name

    def __repr__(self) -> str:  # pragma: no cover - repr not critical
        return f"Instructor(id={self.id!r}, email={self.email!r})"
