"""Domain services enforcing uniqueness and referential existence before writes."""
from course_management.services.course import CourseService
from course_management.services.errors import (
    CourseManagementError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from course_management.services.instructor import InstructorService
from course_management.services.instructor_details import InstructorDetailsService
from course_management.services.review import ReviewService
from course_management.services.student import StudentService

__all__ = [
    "CourseManagementError",
    "CourseService",
    "InstructorDetailsService",
    "InstructorService",
    "ResourceAlreadyExistsError",
    "ResourceNotFoundError",
    "ReviewService",
    "StudentService",
]
