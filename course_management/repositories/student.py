"""Student queries, including the enrollment relation."""
from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import selectinload

from course_management.db.models import Course, Student, enrollments
from course_management.repositories.base import BaseRepository, contains_pattern


class StudentRepository(BaseRepository[Student]):
    model = Student

    def get_by_email(self, email: str) -> Student | None:
        return self.session.scalar(select(Student).where(Student.email == email))

    def exists_by_email(self, email: str) -> bool:
        return bool(self.session.scalar(select(exists().where(Student.email == email))))

    def search_by_name(self, name: str) -> Sequence[Student]:
        pattern = contains_pattern(name)
        stmt = (
            select(Student)
            .where(
                or_(
                    Student.first_name.ilike(pattern),
                    Student.last_name.ilike(pattern),
                    Student.full_name.ilike(pattern),
                )
            )
            .order_by(Student.last_name, Student.first_name)
        )
        return self.session.scalars(stmt).all()

    def search_by_email(self, email: str) -> Sequence[Student]:
        stmt = (
            select(Student)
            .where(Student.email.ilike(contains_pattern(email)))
            .order_by(Student.email)
        )
        return self.session.scalars(stmt).all()

    def get_with_courses(self, student_id: uuid.UUID) -> Student | None:
        stmt = (
            select(Student)
            .where(Student.id == student_id)
            .options(selectinload(Student.courses).selectinload(Course.instructor))
        )
        return self.session.scalar(stmt)

    def list_with_courses(self) -> Sequence[Student]:
        stmt = (
            select(Student)
            .options(selectinload(Student.courses).selectinload(Course.instructor))
            .order_by(Student.created_at)
        )
        return self.session.scalars(stmt).all()

    def list_enrolled_in_course(self, course_id: uuid.UUID) -> Sequence[Student]:
        stmt = (
            select(Student)
            .join(enrollments, enrollments.c.student_id == Student.id)
            .where(enrollments.c.course_id == course_id)
            .order_by(enrollments.c.enrolled_at)
        )
        return self.session.scalars(stmt).all()

    def list_not_enrolled_in_course(self, course_id: uuid.UUID) -> Sequence[Student]:
        enrolled = select(enrollments.c.student_id).where(enrollments.c.course_id == course_id)
        stmt = (
            select(Student)
            .where(Student.id.not_in(enrolled))
            .order_by(Student.last_name, Student.first_name)
        )
        return self.session.scalars(stmt).all()

    def is_enrolled(self, student_id: uuid.UUID, course_id: uuid.UUID) -> bool:
        stmt = select(
            exists().where(
                enrollments.c.student_id == student_id,
                enrollments.c.course_id == course_id,
            )
        )
        return bool(self.session.scalar(stmt))

    def count_in_course(self, course_id: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(enrollments).where(
            enrollments.c.course_id == course_id
        )
        return self.session.scalar(stmt) or 0

    def list_by_instructor(self, instructor_id: uuid.UUID) -> Sequence[Student]:
        """Distinct students enrolled in any course taught by the instructor."""
        taught = (
            select(enrollments.c.student_id)
            .join(Course, Course.id == enrollments.c.course_id)
            .where(Course.instructor_id == instructor_id)
        )
        stmt = (
            select(Student)
            .where(Student.id.in_(taught))
            .order_by(Student.last_name, Student.first_name)
        )
        return self.session.scalars(stmt).all()

    def list_without_courses(self) -> Sequence[Student]:
        stmt = select(Student).where(~Student.courses.any()).order_by(Student.created_at)
        return self.session.scalars(stmt).all()

    def list_with_more_than_n_courses(self, minimum: int) -> Sequence[Student]:
        enrolled_count = (
            select(func.count())
            .select_from(enrollments)
            .where(enrollments.c.student_id == Student.id)
            .scalar_subquery()
        )
        stmt = select(Student).where(enrolled_count > minimum).order_by(Student.created_at)
        return self.session.scalars(stmt).all()

    def clear_enrollments(self, student: Student) -> None:
        """Remove every enrollment row of ``student``; the courses are untouched."""
        student.courses.clear()
        self.session.flush()
