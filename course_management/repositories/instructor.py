"""Instructor queries."""
from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy import exists, or_, select

from course_management.db.models import Instructor
from course_management.repositories.base import BaseRepository, contains_pattern


class InstructorRepository(BaseRepository[Instructor]):
    model = Instructor

    def get_by_email(self, email: str) -> Instructor | None:
        return self.session.scalar(select(Instructor).where(Instructor.email == email))

    def exists_by_email(self, email: str) -> bool:
        return bool(self.session.scalar(select(exists().where(Instructor.email == email))))

    def get_by_details_id(self, details_id: uuid.UUID) -> Instructor | None:
        return self.session.scalar(
            select(Instructor).where(Instructor.instructor_details_id == details_id)
        )

    def search_by_name(self, name: str) -> Sequence[Instructor]:
        pattern = contains_pattern(name)
        stmt = (
            select(Instructor)
            .where(
                or_(
                    Instructor.full_name.ilike(pattern),
                    Instructor.first_name.ilike(pattern),
                    Instructor.last_name.ilike(pattern),
                )
            )
            .order_by(Instructor.last_name, Instructor.first_name)
        )
        return self.session.scalars(stmt).all()

    def list_with_details(self) -> Sequence[Instructor]:
        stmt = (
            select(Instructor)
            .where(Instructor.instructor_details_id.is_not(None))
            .order_by(Instructor.created_at)
        )
        return self.session.scalars(stmt).all()

    def list_without_details(self) -> Sequence[Instructor]:
        stmt = (
            select(Instructor)
            .where(Instructor.instructor_details_id.is_(None))
            .order_by(Instructor.created_at)
        )
        return self.session.scalars(stmt).all()
