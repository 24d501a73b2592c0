"""Course service: title-per-instructor uniqueness and instructor existence."""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from course_management.db.models import Course, Instructor
from course_management.repositories import CourseRepository, InstructorRepository
from course_management.schemas import CourseRequest, CourseResponse
from course_management.services.errors import ResourceAlreadyExistsError, ResourceNotFoundError
from course_management.services.mappers import course_response

LOGGER = logging.getLogger(__name__)


class CourseService:
    """Create, update and query courses."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.courses = CourseRepository(session)
        self.instructors = InstructorRepository(session)

    def _require_course(self, course_id: uuid.UUID) -> Course:
        course = self.courses.get(course_id)
        if course is None:
            raise ResourceNotFoundError("Course", "id", course_id)
        return course

    def _require_instructor(self, instructor_id: uuid.UUID) -> Instructor:
        instructor = self.instructors.get(instructor_id)
        if instructor is None:
            raise ResourceNotFoundError("Instructor", "id", instructor_id)
        return instructor

    def _ensure_title_available(self, title: str, instructor: Instructor) -> None:
        if self.courses.exists_by_title_and_instructor_id(title, instructor.id):
            LOGGER.warning("Duplicate course title %r for instructor %s", title, instructor.id)
            raise ResourceAlreadyExistsError(
                "Course", "title", f"{title} for instructor {instructor.full_name}"
            )

    def create_course(self, request: CourseRequest) -> CourseResponse:
        instructor = self._require_instructor(request.instructor_id)
        self._ensure_title_available(request.title, instructor)

        course = self.courses.add(Course(title=request.title, instructor=instructor))
        LOGGER.info("Created course %s for instructor %s", course.id, instructor.id)
        return course_response(course)

    def get_course_by_id(self, course_id: uuid.UUID) -> CourseResponse:
        return course_response(self._require_course(course_id))

    def get_course_by_id_with_reviews(self, course_id: uuid.UUID) -> CourseResponse:
        course = self.courses.get_with_reviews(course_id)
        if course is None:
            raise ResourceNotFoundError("Course", "id", course_id)
        return course_response(course, include_reviews=True)

    def get_all_courses(self) -> List[CourseResponse]:
        return [course_response(course) for course in self.courses.list_all()]

    def get_all_courses_with_reviews(self) -> List[CourseResponse]:
        return [
            course_response(course, include_reviews=True)
            for course in self.courses.list_with_reviews()
        ]

    def update_course(self, course_id: uuid.UUID, request: CourseRequest) -> CourseResponse:
        """Update title and instructor.

        Uniqueness is re-checked only when the title itself changes; moving a
        course to another instructor under the same title relies on the
        ``uq_courses_title_instructor`` constraint.
        """
        course = self._require_course(course_id)
        instructor = self._require_instructor(request.instructor_id)

        if course.title != request.title:
            self._ensure_title_available(request.title, instructor)

        course.title = request.title
        course.instructor = instructor
        self.courses.save(course)
        LOGGER.info("Updated course %s", course.id)
        return course_response(course)

    def delete_course(self, course_id: uuid.UUID) -> None:
        course = self._require_course(course_id)
        # Enrollment rows go with the course; reviews are left to the database.
        self.courses.delete(course)
        LOGGER.info("Deleted course %s", course_id)

    def get_courses_by_instructor_id(self, instructor_id: uuid.UUID) -> List[CourseResponse]:
        if not self.instructors.exists(instructor_id):
            raise ResourceNotFoundError("Instructor", "id", instructor_id)
        return [course_response(course) for course in self.courses.list_by_instructor(instructor_id)]

    def get_courses_by_instructor_id_with_reviews(
        self, instructor_id: uuid.UUID
    ) -> List[CourseResponse]:
        if not self.instructors.exists(instructor_id):
            raise ResourceNotFoundError("Instructor", "id", instructor_id)
        return [
            course_response(course, include_reviews=True)
            for course in self.courses.list_by_instructor_with_reviews(instructor_id)
        ]

    def search_courses_by_title(self, title: str) -> List[CourseResponse]:
        return [course_response(course) for course in self.courses.search_by_title(title)]

    def search_courses_by_instructor_name(self, name: str) -> List[CourseResponse]:
        return [course_response(course) for course in self.courses.search_by_instructor_name(name)]

    def count_courses_by_instructor_id(self, instructor_id: uuid.UUID) -> int:
        return self.courses.count_by_instructor(instructor_id)

    def exists_by_id(self, course_id: uuid.UUID) -> bool:
        return self.courses.exists(course_id)

    def exists_by_title_and_instructor_id(self, title: str, instructor_id: uuid.UUID) -> bool:
        return self.courses.exists_by_title_and_instructor_id(title, instructor_id)
