"""SQLAlchemy model package.

Deletion policy per relationship:

* Instructor -> InstructorDetails: deleting the instructor deletes the details;
  unlinking leaves the details record in place (orphaned).
* Instructor -> Course: deleting the instructor deletes their courses.
* Course -> Review: never cascaded by the ORM; only the ``reviews.course_id``
  foreign key (``ON DELETE CASCADE``) may remove reviews.
* Course <-> Student: only ``enrollments`` rows are affected on either side.
* Student -> Review: reviews are kept with ``student_id`` set to NULL.
"""
from course_management.db.models.course import Course
from course_management.db.models.enrollment import enrollments
from course_management.db.models.instructor import Instructor
from course_management.db.models.instructor_details import InstructorDetails
from course_management.db.models.review import Review
from course_management.db.models.student import Student

__all__ = [
    "Course",
    "Instructor",
    "InstructorDetails",
    "Review",
    "Student",
    "enrollments",
]
