"""Association table linking students to the courses they are enrolled in."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Table

from course_management.db import Base
from course_management.db.models.mixins import UTCDateTime, utcnow

# The composite primary key gives the enrollment set semantics.
enrollments = Table(
    "enrollments",
    Base.metadata,
    Column(
        "student_id",
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "course_id",
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column("enrolled_at", UTCDateTime, nullable=False, default=utcnow),
)
