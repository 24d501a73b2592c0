"""Student service: email uniqueness and the enrollment relation."""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from course_management.db.models import Course, Student
from course_management.repositories import CourseRepository, InstructorRepository, StudentRepository
from course_management.schemas import (
    CourseInfo,
    EnrollmentResponse,
    StudentRequest,
    StudentResponse,
    UnenrollmentResponse,
    normalize_email,
)
from course_management.services.errors import ResourceAlreadyExistsError, ResourceNotFoundError
from course_management.services.mappers import course_info, student_info, student_response

LOGGER = logging.getLogger(__name__)


def _responses(students) -> List[StudentResponse]:
    return [student_response(student) for student in students]


class StudentService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.students = StudentRepository(session)
        self.courses = CourseRepository(session)
        self.instructors = InstructorRepository(session)

    def _require_student(self, student_id: uuid.UUID) -> Student:
        student = self.students.get(student_id)
        if student is None:
            raise ResourceNotFoundError("Student", "id", student_id)
        return student

    def _require_course(self, course_id: uuid.UUID) -> Course:
        course = self.courses.get(course_id)
        if course is None:
            raise ResourceNotFoundError("Course", "id", course_id)
        return course

    def _ensure_email_available(self, email: str) -> None:
        if self.students.exists_by_email(email):
            LOGGER.warning("Student email %s already in use", email)
            raise ResourceAlreadyExistsError("Student", "email", email)

    # -- CRUD ---------------------------------------------------------------

    def create_student(self, request: StudentRequest) -> StudentResponse:
        self._ensure_email_available(request.email)
        student = self.students.add(
            Student(first_name=request.first_name, last_name=request.last_name, email=request.email)
        )
        LOGGER.info("Created student %s", student.id)
        return student_response(student)

    def get_student_by_id(self, student_id: uuid.UUID) -> StudentResponse:
        return student_response(self._require_student(student_id))

    def get_student_by_id_with_courses(self, student_id: uuid.UUID) -> StudentResponse:
        student = self.students.get_with_courses(student_id)
        if student is None:
            raise ResourceNotFoundError("Student", "id", student_id)
        return student_response(student, include_courses=True)

    def get_all_students(self) -> List[StudentResponse]:
        return _responses(self.students.list_all())

    def get_all_students_with_courses(self) -> List[StudentResponse]:
        return [
            student_response(student, include_courses=True)
            for student in self.students.list_with_courses()
        ]

    def update_student(self, student_id: uuid.UUID, request: StudentRequest) -> StudentResponse:
        student = self._require_student(student_id)
        if student.email != request.email:
            self._ensure_email_available(request.email)

        student.first_name = request.first_name
        student.last_name = request.last_name
        student.email = request.email
        self.students.save(student)
        LOGGER.info("Updated student %s", student.id)
        return student_response(student)

    def delete_student(self, student_id: uuid.UUID) -> None:
        student = self._require_student(student_id)
        self.students.clear_enrollments(student)
        self.students.delete(student)
        LOGGER.info("Deleted student %s", student_id)

    # -- enrollment ---------------------------------------------------------

    def enroll_student_in_course(
        self, student_id: uuid.UUID, course_id: uuid.UUID
    ) -> EnrollmentResponse:
        student = self._require_student(student_id)
        course = self._require_course(course_id)

        if student.is_enrolled_in(course):
            LOGGER.warning("Student %s already enrolled in course %s", student_id, course_id)
            raise ResourceAlreadyExistsError(
                "Enrollment", "student and course", f"{student_id}, {course_id}"
            )

        student.courses.append(course)
        self.session.flush()
        LOGGER.info("Enrolled student %s in course %s", student_id, course_id)
        return EnrollmentResponse(
            message="Student successfully enrolled in course",
            student=student_info(student),
            course=course_info(course),
        )

    def unenroll_student_from_course(
        self, student_id: uuid.UUID, course_id: uuid.UUID
    ) -> UnenrollmentResponse:
        student = self._require_student(student_id)
        course = self._require_course(course_id)

        if not student.is_enrolled_in(course):
            raise ResourceNotFoundError(
                f"Enrollment not found for student {student_id} in course {course_id}"
            )

        student.courses.remove(course)
        self.session.flush()
        LOGGER.info("Unenrolled student %s from course %s", student_id, course_id)
        return UnenrollmentResponse(
            message="Student successfully unenrolled from course",
            student=student_info(student),
            course=course_info(course),
        )

    def get_student_courses(self, student_id: uuid.UUID) -> List[CourseInfo]:
        student = self._require_student(student_id)
        return [course_info(course) for course in student.courses]

    def get_students_enrolled_in_course(self, course_id: uuid.UUID) -> List[StudentResponse]:
        self._require_course(course_id)
        return _responses(self.students.list_enrolled_in_course(course_id))

    def get_students_not_enrolled_in_course(self, course_id: uuid.UUID) -> List[StudentResponse]:
        self._require_course(course_id)
        return _responses(self.students.list_not_enrolled_in_course(course_id))

    def is_student_enrolled_in_course(self, student_id: uuid.UUID, course_id: uuid.UUID) -> bool:
        return self.students.is_enrolled(student_id, course_id)

    def count_students_in_course(self, course_id: uuid.UUID) -> int:
        return self.students.count_in_course(course_id)

    # -- lookups ------------------------------------------------------------

    def search_students_by_name(self, name: str) -> List[StudentResponse]:
        return _responses(self.students.search_by_name(name))

    def search_students_by_email(self, email: str) -> List[StudentResponse]:
        return _responses(self.students.search_by_email(email))

    def get_student_by_email(self, email: str) -> StudentResponse:
        student = self.students.get_by_email(normalize_email(email))
        if student is None:
            raise ResourceNotFoundError("Student", "email", email)
        return student_response(student)

    def get_students_with_no_courses(self) -> List[StudentResponse]:
        return _responses(self.students.list_without_courses())

    def get_students_with_more_than_n_courses(self, minimum: int) -> List[StudentResponse]:
        return _responses(self.students.list_with_more_than_n_courses(minimum))

    def get_students_by_instructor(self, instructor_id: uuid.UUID) -> List[StudentResponse]:
        if not self.instructors.exists(instructor_id):
            raise ResourceNotFoundError("Instructor", "id", instructor_id)
        return _responses(self.students.list_by_instructor(instructor_id))

    def exists_by_id(self, student_id: uuid.UUID) -> bool:
        return self.students.exists(student_id)

    def exists_by_email(self, email: str) -> bool:
        return self.students.exists_by_email(normalize_email(email))
