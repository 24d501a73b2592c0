"""One APIRouter per resource."""
from course_management.routers import courses, instructor_details, instructors, reviews, students

ROUTERS = (
    instructors.router,
    instructor_details.router,
    courses.router,
    students.router,
    reviews.router,
)

__all__ = ["ROUTERS"]
