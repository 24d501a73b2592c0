from __future__ import annotations

import uuid

import pytest
from sqlalchemy.orm import Session

from course_management.schemas import (
    CourseRequest,
    InstructorDetailsRequest,
    InstructorRequest,
)
from course_management.services import (
    CourseService,
    InstructorDetailsService,
    InstructorService,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)


def _request(email: str = "john@x.com", details: InstructorDetailsRequest | None = None):
    return InstructorRequest(
        first_name="John", last_name="Doe", email=email, instructor_details=details
    )


def test_create_instructor_with_details(session: Session) -> None:
    details = InstructorDetailsRequest(youtube_channel="johndoe", hobby="Chess")
    created = InstructorService(session).create_instructor(_request(details=details))

    assert created.full_name == "John Doe"
    assert created.instructor_details is not None
    assert created.instructor_details.youtube_channel == "johndoe"


def test_duplicate_email_is_rejected(session: Session, instructor) -> None:
    service = InstructorService(session)
    with pytest.raises(ResourceAlreadyExistsError, match="email: john@x.com"):
        service.create_instructor(_request())

    fresh = service.create_instructor(_request(email="johnny@x.com"))
    assert fresh.full_name == "John Doe"


def test_update_with_same_email_does_not_conflict(session: Session, instructor) -> None:
    service = InstructorService(session)
    updated = service.update_instructor(
        instructor.id,
        InstructorRequest(first_name="Jonathan", last_name="Doe", email=instructor.email),
    )
    assert updated.full_name == "Jonathan Doe"


def test_update_to_taken_email_fails(session: Session, instructor) -> None:
    service = InstructorService(session)
    other = service.create_instructor(_request(email="other@x.com"))

    with pytest.raises(ResourceAlreadyExistsError):
        service.update_instructor(other.id, _request(email=instructor.email))


def test_update_creates_updates_and_unlinks_details(session: Session, instructor) -> None:
    service = InstructorService(session)

    created = service.update_instructor(
        instructor.id, _request(details=InstructorDetailsRequest(youtube_channel="first"))
    )
    details_id = created.instructor_details.id

    changed = service.update_instructor(
        instructor.id,
        _request(details=InstructorDetailsRequest(youtube_channel="second", hobby="Go")),
    )
    assert changed.instructor_details.id == details_id
    assert changed.instructor_details.youtube_channel == "second"

    unlinked = service.update_instructor(instructor.id, _request())
    assert unlinked.instructor_details is None
    assert InstructorDetailsService(session).exists_by_id(details_id)


def test_add_and_remove_instructor_details(session: Session, instructor) -> None:
    details = InstructorDetailsService(session).create_instructor_details(
        InstructorDetailsRequest(youtube_channel="standalone")
    )
    service = InstructorService(session)

    linked = service.add_instructor_details(instructor.id, details.id)
    assert linked.instructor_details.id == details.id
    assert [item.id for item in service.get_instructors_with_details()] == [instructor.id]

    removed = service.remove_instructor_details(instructor.id)
    assert removed.instructor_details is None
    assert [item.id for item in service.get_instructors_without_details()] == [instructor.id]
    assert InstructorDetailsService(session).exists_by_id(details.id)


def test_add_instructor_details_moves_record_between_instructors(
    session: Session, instructor
) -> None:
    service = InstructorService(session)
    owner = service.create_instructor(
        _request(email="owner@x.com", details=InstructorDetailsRequest(youtube_channel="shared"))
    )
    details_id = owner.instructor_details.id

    moved = service.add_instructor_details(instructor.id, details_id)

    assert moved.instructor_details.id == details_id
    assert service.get_instructor_by_id(owner.id).instructor_details is None


def test_add_instructor_details_requires_both_sides(session: Session, instructor) -> None:
    service = InstructorService(session)
    with pytest.raises(ResourceNotFoundError, match="InstructorDetails"):
        service.add_instructor_details(instructor.id, uuid.uuid4())
    with pytest.raises(ResourceNotFoundError, match="Instructor not found"):
        service.remove_instructor_details(uuid.uuid4())


def test_delete_instructor_cascades_details_and_courses(session: Session) -> None:
    service = InstructorService(session)
    created = service.create_instructor(
        _request(details=InstructorDetailsRequest(youtube_channel="johndoe"))
    )
    course = CourseService(session).create_course(
        CourseRequest(title="Java Basics", instructor_id=created.id)
    )

    service.delete_instructor(created.id)

    assert not service.exists_by_id(created.id)
    assert not InstructorDetailsService(session).exists_by_id(created.instructor_details.id)
    assert not CourseService(session).exists_by_id(course.id)
    with pytest.raises(ResourceNotFoundError):
        service.delete_instructor(created.id)


def test_lookup_by_email_and_name(session: Session, instructor) -> None:
    service = InstructorService(session)

    assert service.get_instructor_by_email("john@x.com").id == instructor.id
    assert service.exists_by_email("john@x.com")
    assert not service.exists_by_email("nobody@x.com")
    with pytest.raises(ResourceNotFoundError, match="email: nobody@x.com"):
        service.get_instructor_by_email("nobody@x.com")

    assert [item.id for item in service.search_instructors_by_name("JOHN")] == [instructor.id]
    assert [item.id for item in service.search_instructors_by_name("n do")] == [instructor.id]
    assert service.search_instructors_by_name("smith") == []


def test_email_lookup_accepts_the_address_as_registered(session: Session) -> None:
    service = InstructorService(session)
    created = service.create_instructor(_request(email="John.Doe@Example.COM"))

    assert service.get_instructor_by_email("John.Doe@Example.COM").id == created.id
    assert service.exists_by_email("John.Doe@Example.COM")
    assert not service.exists_by_email("not-an-address")
