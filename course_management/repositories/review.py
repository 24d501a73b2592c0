"""Review queries."""
from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy import func, or_, select

from course_management.db.models import Course, Review, Student
from course_management.repositories.base import BaseRepository, contains_pattern


class ReviewRepository(BaseRepository[Review]):
    model = Review

    def list_by_course(self, course_id: uuid.UUID) -> Sequence[Review]:
        stmt = select(Review).where(Review.course_id == course_id).order_by(Review.created_at)
        return self.session.scalars(stmt).all()

    def list_by_course_newest_first(self, course_id: uuid.UUID) -> Sequence[Review]:
        stmt = (
            select(Review)
            .where(Review.course_id == course_id)
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def search_by_comment(self, keyword: str) -> Sequence[Review]:
        stmt = (
            select(Review)
            .where(Review.comment.ilike(contains_pattern(keyword)))
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def list_by_instructor(self, instructor_id: uuid.UUID) -> Sequence[Review]:
        stmt = (
            select(Review)
            .join(Review.course)
            .where(Course.instructor_id == instructor_id)
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def search_by_course_title(self, title: str) -> Sequence[Review]:
        stmt = (
            select(Review)
            .join(Review.course)
            .where(Course.title.ilike(contains_pattern(title)))
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def count_by_course(self, course_id: uuid.UUID) -> int:
        stmt = select(func.count(Review.id)).where(Review.course_id == course_id)
        return self.session.scalar(stmt) or 0

    def list_latest(self) -> Sequence[Review]:
        return self.session.scalars(select(Review).order_by(Review.created_at.desc())).all()

    def list_by_student(self, student_id: uuid.UUID) -> Sequence[Review]:
        stmt = select(Review).where(Review.student_id == student_id).order_by(Review.created_at)
        return self.session.scalars(stmt).all()

    def list_by_student_newest_first(self, student_id: uuid.UUID) -> Sequence[Review]:
        stmt = (
            select(Review)
            .where(Review.student_id == student_id)
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def list_by_course_and_student(
        self, course_id: uuid.UUID, student_id: uuid.UUID
    ) -> Sequence[Review]:
        stmt = (
            select(Review)
            .where(Review.course_id == course_id, Review.student_id == student_id)
            .order_by(Review.created_at)
        )
        return self.session.scalars(stmt).all()

    def count_by_student(self, student_id: uuid.UUID) -> int:
        stmt = select(func.count(Review.id)).where(Review.student_id == student_id)
        return self.session.scalar(stmt) or 0

    def search_by_student_email(self, email: str) -> Sequence[Review]:
        stmt = (
            select(Review)
            .join(Review.student)
            .where(Student.email.ilike(contains_pattern(email)))
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()

    def search_by_student_name(self, name: str) -> Sequence[Review]:
        pattern = contains_pattern(name)
        stmt = (
            select(Review)
            .join(Review.student)
            .where(
                or_(
                    Student.first_name.ilike(pattern),
                    Student.last_name.ilike(pattern),
                    Student.full_name.ilike(pattern),
                )
            )
            .order_by(Review.created_at.desc())
        )
        return self.session.scalars(stmt).all()
