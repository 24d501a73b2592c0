"""Development fixture helpers."""
from __future__ import annotations

from sqlalchemy.orm import Session

from course_management.schemas import (
    CourseRequest,
    InstructorDetailsRequest,
    InstructorRequest,
    ReviewRequest,
    StudentRequest,
)
from course_management.services import (
    CourseService,
    InstructorService,
    ReviewService,
    StudentService,
)

DEMO_INSTRUCTOR_EMAIL = "john.doe@example.com"
DEMO_STUDENT_EMAIL = "jane.smith@example.com"


def seed_dev_data(session: Session) -> None:
    """Populate the database with a demo instructor, course, student and review.

    Running it twice is harmless: nothing is added once the demo instructor exists.
    """
    instructors = InstructorService(session)
    if instructors.exists_by_email(DEMO_INSTRUCTOR_EMAIL):
        return

    instructor = instructors.create_instructor(
        InstructorRequest(
            first_name="John",
            last_name="Doe",
            email=DEMO_INSTRUCTOR_EMAIL,
            instructor_details=InstructorDetailsRequest(
                youtube_channel="https://youtube.com/@johndoe-codes",
                hobby="Rock climbing",
            ),
        )
    )
    course = CourseService(session).create_course(
        CourseRequest(title="Java Basics", instructor_id=instructor.id)
    )

    students = StudentService(session)
    student = students.create_student(
        StudentRequest(first_name="Jane", last_name="Smith", email=DEMO_STUDENT_EMAIL)
    )
    students.enroll_student_in_course(student.id, course.id)

    ReviewService(session).create_review(
        course.id,
        ReviewRequest(comment="Great introduction to the language!", student_id=student.id),
    )
