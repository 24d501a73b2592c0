"""Entity to response conversions shared by the services."""
from __future__ import annotations

from course_management.db.models import Course, Instructor, InstructorDetails, Review, Student
from course_management.schemas import (
    CourseInfo,
    CourseResponse,
    InstructorDetailsResponse,
    InstructorInfo,
    InstructorResponse,
    ReviewResponse,
    StudentInfo,
    StudentResponse,
)


def instructor_details_response(details: InstructorDetails) -> InstructorDetailsResponse:
    return InstructorDetailsResponse.model_validate(details)


def instructor_response(instructor: Instructor) -> InstructorResponse:
    details = instructor.details
    return InstructorResponse(
        id=instructor.id,
        first_name=instructor.first_name,
        last_name=instructor.last_name,
        full_name=instructor.full_name,
        email=instructor.email,
        created_at=instructor.created_at,
        updated_at=instructor.updated_at,
        instructor_details=instructor_details_response(details) if details else None,
    )


def instructor_info(instructor: Instructor) -> InstructorInfo:
    return InstructorInfo(id=instructor.id, full_name=instructor.full_name, email=instructor.email)


def student_info(student: Student) -> StudentInfo:
    return StudentInfo(id=student.id, full_name=student.full_name, email=student.email)


def course_info(course: Course) -> CourseInfo:
    return CourseInfo(id=course.id, title=course.title, instructor_name=course.instructor.full_name)


def review_response(review: Review) -> ReviewResponse:
    # The course may already be gone when only the database cascade removes reviews.
    return ReviewResponse(
        id=review.id,
        comment=review.comment,
        created_at=review.created_at,
        updated_at=review.updated_at,
        course=course_info(review.course) if review.course else None,
        student=student_info(review.student) if review.student else None,
    )


def course_response(course: Course, include_reviews: bool = False) -> CourseResponse:
    reviews = None
    if include_reviews:
        reviews = [review_response(review) for review in course.reviews]
    return CourseResponse(
        id=course.id,
        title=course.title,
        created_at=course.created_at,
        updated_at=course.updated_at,
        instructor=instructor_info(course.instructor),
        reviews=reviews,
    )


def student_response(student: Student, include_courses: bool = False) -> StudentResponse:
    courses = None
    if include_courses:
        courses = [course_info(course) for course in student.courses]
    return StudentResponse(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        full_name=student.full_name,
        email=student.email,
        created_at=student.created_at,
        updated_at=student.updated_at,
        courses=courses,
    )
