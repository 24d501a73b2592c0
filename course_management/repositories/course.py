"""Course queries."""
from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import selectinload

from course_management.db.models import Course, Instructor
from course_management.repositories.base import BaseRepository, contains_pattern


class CourseRepository(BaseRepository[Course]):
    model = Course

    def list_by_instructor(self, instructor_id: uuid.UUID) -> Sequence[Course]:
        stmt = (
            select(Course)
            .where(Course.instructor_id == instructor_id)
            .order_by(Course.created_at)
        )
        return self.session.scalars(stmt).all()

    def search_by_title(self, title: str) -> Sequence[Course]:
        stmt = (
            select(Course)
            .where(Course.title.ilike(contains_pattern(title)))
            .order_by(Course.title)
        )
        return self.session.scalars(stmt).all()

    def search_by_instructor_name(self, name: str) -> Sequence[Course]:
        pattern = contains_pattern(name)
        stmt = (
            select(Course)
            .join(Course.instructor)
            .where(
                or_(
                    Instructor.first_name.ilike(pattern),
                    Instructor.last_name.ilike(pattern),
                    Instructor.full_name.ilike(pattern),
                )
            )
            .order_by(Course.title)
        )
        return self.session.scalars(stmt).all()

    def exists_by_title_and_instructor_id(self, title: str, instructor_id: uuid.UUID) -> bool:
        stmt = select(
            exists().where(Course.title == title, Course.instructor_id == instructor_id)
        )
        return bool(self.session.scalar(stmt))

    def count_by_instructor(self, instructor_id: uuid.UUID) -> int:
        stmt = select(func.count(Course.id)).where(Course.instructor_id == instructor_id)
        return self.session.scalar(stmt) or 0

    def get_with_reviews(self, course_id: uuid.UUID) -> Course | None:
        stmt = select(Course).where(Course.id == course_id).options(selectinload(Course.reviews))
        return self.session.scalar(stmt)

    def list_with_reviews(self) -> Sequence[Course]:
        stmt = select(Course).options(selectinload(Course.reviews)).order_by(Course.created_at)
        return self.session.scalars(stmt).all()

    def list_by_instructor_with_reviews(self, instructor_id: uuid.UUID) -> Sequence[Course]:
        stmt = (
            select(Course)
            .where(Course.instructor_id == instructor_id)
            .options(selectinload(Course.reviews))
            .order_by(Course.created_at)
        )
        return self.session.scalars(stmt).all()
