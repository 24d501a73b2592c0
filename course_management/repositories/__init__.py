"""Query surface per entity."""
from course_management.repositories.course import CourseRepository
from course_management.repositories.instructor import InstructorRepository
from course_management.repositories.instructor_details import InstructorDetailsRepository
from course_management.repositories.review import ReviewRepository
from course_management.repositories.student import StudentRepository

__all__ = [
    "CourseRepository",
    "InstructorDetailsRepository",
    "InstructorRepository",
    "ReviewRepository",
    "StudentRepository",
]
