from __future__ import annotations

import uuid

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_management.schemas import CourseRequest, InstructorRequest, ReviewRequest
from course_management.services import (
    CourseService,
    InstructorService,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ReviewService,
)


def _other_instructor(session: Session):
    return InstructorService(session).create_instructor(
        InstructorRequest(first_name="Maria", last_name="Garcia", email="maria@x.com")
    )


def test_create_course_embeds_instructor_summary(session: Session, instructor) -> None:
    course = CourseService(session).create_course(
        CourseRequest(title="Java Basics", instructor_id=instructor.id)
    )

    assert course.title == "Java Basics"
    assert course.instructor.id == instructor.id
    assert course.instructor.full_name == "John Doe"
    assert course.reviews is None


def test_create_course_requires_existing_instructor(session: Session) -> None:
    with pytest.raises(ResourceNotFoundError, match="Instructor not found"):
        CourseService(session).create_course(
            CourseRequest(title="Java Basics", instructor_id=uuid.uuid4())
        )


def test_title_unique_per_instructor_only(session: Session, instructor) -> None:
    service = CourseService(session)
    service.create_course(CourseRequest(title="Java Basics", instructor_id=instructor.id))

    with pytest.raises(ResourceAlreadyExistsError, match="Course already exists"):
        service.create_course(CourseRequest(title="Java Basics", instructor_id=instructor.id))

    other = _other_instructor(session)
    reused = service.create_course(CourseRequest(title="Java Basics", instructor_id=other.id))
    assert reused.instructor.id == other.id


def test_update_course_rechecks_changed_title(session: Session, instructor) -> None:
    service = CourseService(session)
    service.create_course(CourseRequest(title="Java Basics", instructor_id=instructor.id))
    course = service.create_course(CourseRequest(title="Python", instructor_id=instructor.id))

    with pytest.raises(ResourceAlreadyExistsError):
        service.update_course(
            course.id, CourseRequest(title="Java Basics", instructor_id=instructor.id)
        )

    renamed = service.update_course(
        course.id, CourseRequest(title="Python Basics", instructor_id=instructor.id)
    )
    assert renamed.title == "Python Basics"


def test_update_course_keeps_title_without_self_conflict(session: Session, course, instructor) -> None:
    updated = CourseService(session).update_course(
        course.id, CourseRequest(title=course.title, instructor_id=instructor.id)
    )
    assert updated.id == course.id


def test_moving_course_onto_duplicate_title_hits_database_constraint(
    session: Session, course
) -> None:
    other = _other_instructor(session)
    service = CourseService(session)
    service.create_course(CourseRequest(title=course.title, instructor_id=other.id))

    with pytest.raises(IntegrityError):
        service.update_course(course.id, CourseRequest(title=course.title, instructor_id=other.id))


def test_update_course_requires_course_and_instructor(session: Session, course) -> None:
    service = CourseService(session)
    with pytest.raises(ResourceNotFoundError, match="Course"):
        service.update_course(
            uuid.uuid4(), CourseRequest(title="Anything", instructor_id=course.instructor.id)
        )
    with pytest.raises(ResourceNotFoundError, match="Instructor"):
        service.update_course(course.id, CourseRequest(title="Anything", instructor_id=uuid.uuid4()))


def test_delete_course(session: Session, course) -> None:
    service = CourseService(session)
    service.delete_course(course.id)

    assert not service.exists_by_id(course.id)
    with pytest.raises(ResourceNotFoundError):
        service.delete_course(course.id)


def test_search_courses(session: Session, course) -> None:
    service = CourseService(session)

    assert [item.id for item in service.search_courses_by_title("java")] == [course.id]
    assert service.search_courses_by_title("rust") == []
    assert [item.id for item in service.search_courses_by_instructor_name("doe")] == [course.id]
    assert [item.id for item in service.search_courses_by_instructor_name("john d")] == [course.id]


def test_courses_by_instructor(session: Session, course, instructor) -> None:
    service = CourseService(session)

    assert [item.id for item in service.get_courses_by_instructor_id(instructor.id)] == [course.id]
    assert service.count_courses_by_instructor_id(instructor.id) == 1
    assert service.exists_by_title_and_instructor_id("Java Basics", instructor.id)
    assert not service.exists_by_title_and_instructor_id("Java Basics", uuid.uuid4())
    with pytest.raises(ResourceNotFoundError):
        service.get_courses_by_instructor_id(uuid.uuid4())


def test_course_with_reviews(session: Session, course, student) -> None:
    ReviewService(session).create_review(
        course.id, ReviewRequest(comment="Great!", student_id=student.id)
    )
    session.expire_all()
    service = CourseService(session)

    detailed = service.get_course_by_id_with_reviews(course.id)
    assert [review.comment for review in detailed.reviews] == ["Great!"]
    assert detailed.reviews[0].student.full_name == "Jane Smith"

    listed = service.get_all_courses_with_reviews()
    assert len(listed[0].reviews) == 1
    by_instructor = service.get_courses_by_instructor_id_with_reviews(course.instructor.id)
    assert len(by_instructor[0].reviews) == 1
    assert service.get_course_by_id(course.id).reviews is None
