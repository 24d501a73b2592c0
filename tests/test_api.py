from __future__ import annotations

import sys
import uuid
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from course_management.app import create_app  # noqa: E402
from course_management.config import API_PREFIX  # noqa: E402
from course_management.db import Base, build_engine  # noqa: E402
from course_management.db import models  # noqa: E402,F401
from course_management.dependencies import get_db  # noqa: E402


@pytest.fixture()
def app():
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    application = create_app()
    application.dependency_overrides[get_db] = override_get_db
    yield application
    engine.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


def url(path: str) -> str:
    return f"{API_PREFIX}{path}"


def create_instructor(client: TestClient, email: str = "john@x.com", **extra) -> dict:
    payload = {"first_name": "John", "last_name": "Doe", "email": email, **extra}
    response = client.post(url("/instructors"), json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_course(client: TestClient, instructor_id: str, title: str = "Java Basics") -> dict:
    response = client.post(url("/courses"), json={"title": title, "instructor_id": instructor_id})
    assert response.status_code == 201, response.text
    return response.json()


def create_student(client: TestClient, email: str = "jane@x.com") -> dict:
    response = client.post(
        url("/students"), json={"first_name": "Jane", "last_name": "Smith", "email": email}
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_enrollment_scenario(client: TestClient) -> None:
    instructor = create_instructor(client)
    assert instructor["full_name"] == "John Doe"
    course = create_course(client, instructor["id"])
    student = create_student(client)

    enrolled = client.post(
        url(f"/students/{student['id']}/enroll"), json={"course_id": course["id"]}
    )
    assert enrolled.status_code == 201
    assert enrolled.json()["course"]["instructor_name"] == "John Doe"

    students = client.get(url(f"/courses/{course['id']}/students")).json()
    assert [item["id"] for item in students] == [student["id"]]
    count = client.get(url(f"/courses/{course['id']}/students/count")).json()
    assert count["count"] == 1
    assert count["resource_type"] == "Student"

    again = client.post(url(f"/students/{student['id']}/enroll"), json={"course_id": course["id"]})
    assert again.status_code == 409
    assert again.json()["error"] == "CONFLICT"

    check = client.get(url(f"/students/{student['id']}/enrollment/courses/{course['id']}"))
    assert check.json() == {"exists": True}

    left = client.request(
        "DELETE", url(f"/students/{student['id']}/unenroll"), json={"course_id": course["id"]}
    )
    assert left.status_code == 200
    assert "unenrollment_date" in left.json()

    missing = client.request(
        "DELETE", url(f"/students/{student['id']}/unenroll"), json={"course_id": course["id"]}
    )
    assert missing.status_code == 404


def test_duplicate_instructor_email(client: TestClient) -> None:
    create_instructor(client)
    response = client.post(
        url("/instructors"),
        json={"first_name": "Other", "last_name": "Person", "email": "john@x.com"},
    )

    assert response.status_code == 409
    body = response.json()
    assert body["status"] == 409
    assert body["error"] == "CONFLICT"
    assert body["message"] == "Instructor already exists with email: john@x.com"
    assert body["path"] == url("/instructors")
    assert "timestamp" in body
    assert "validation_errors" not in body


def test_course_title_unique_per_instructor(client: TestClient) -> None:
    first = create_instructor(client)
    second = create_instructor(client, email="maria@x.com")
    create_course(client, first["id"])

    duplicate = client.post(
        url("/courses"), json={"title": "Java Basics", "instructor_id": first["id"]}
    )
    assert duplicate.status_code == 409

    create_course(client, second["id"])


def test_moving_course_onto_taken_title_is_integrity_violation(client: TestClient) -> None:
    first = create_instructor(client)
    second = create_instructor(client, email="maria@x.com")
    course = create_course(client, first["id"])
    create_course(client, second["id"])

    response = client.put(
        url(f"/courses/{course['id']}"),
        json={"title": "Java Basics", "instructor_id": second["id"]},
    )

    assert response.status_code == 409
    assert response.json()["error"] == "DATA_INTEGRITY_VIOLATION"
    assert response.json()["message"] == "Unique constraint violation"
    # The failed request was rolled back.
    assert client.get(url(f"/courses/{course['id']}")).json()["instructor"]["id"] == first["id"]


def test_validation_errors(client: TestClient) -> None:
    response = client.post(
        url("/instructors"), json={"first_name": "", "last_name": "Doe", "email": "not-an-email"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_FAILED"
    assert body["message"] == "Validation failed for one or more fields"
    fields = {item["field"] for item in body["validation_errors"]}
    assert {"first_name", "email"} <= fields


def test_malformed_identifier_is_validation_error(client: TestClient) -> None:
    response = client.get(url("/courses/not-a-uuid"))

    assert response.status_code == 400
    assert response.json()["validation_errors"][0]["field"] == "course_id"


def test_not_found_body(client: TestClient) -> None:
    missing = uuid.uuid4()
    response = client.get(url(f"/students/{missing}"))

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NOT_FOUND"
    assert body["message"] == f"Student not found with id: {missing}"


def test_review_on_missing_course(client: TestClient) -> None:
    student = create_student(client)
    response = client.post(
        url(f"/courses/{uuid.uuid4()}/reviews"),
        json={"comment": "Great!", "student_id": student["id"]},
    )

    assert response.status_code == 404
    assert response.json()["message"].startswith("Course not found")


def test_reviews_flow(client: TestClient) -> None:
    instructor = create_instructor(client)
    course = create_course(client, instructor["id"])
    student = create_student(client)

    created = client.post(
        url(f"/courses/{course['id']}/reviews"),
        json={"comment": "Great!", "student_id": student["id"]},
    )
    assert created.status_code == 201
    review = created.json()
    assert review["student"]["full_name"] == "Jane Smith"

    with_reviews = client.get(url(f"/courses/{course['id']}"), params={"include_reviews": True})
    assert [item["id"] for item in with_reviews.json()["reviews"]] == [review["id"]]
    assert client.get(url(f"/courses/{course['id']}")).json()["reviews"] is None

    updated = client.put(
        url(f"/reviews/{review['id']}"),
        json={"comment": "Even better", "student_id": student["id"]},
    )
    assert updated.json()["comment"] == "Even better"

    assert len(client.get(url("/reviews/search/comment"), params={"keyword": "better"}).json()) == 1
    assert client.get(url(f"/students/{student['id']}/reviews/count")).json()["count"] == 1

    deleted = client.delete(url(f"/reviews/{review['id']}"))
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Review deleted successfully"
    assert client.get(url(f"/reviews/{review['id']}/exists")).json() == {"exists": False}


def test_course_search_is_case_insensitive(client: TestClient) -> None:
    instructor = create_instructor(client)
    course = create_course(client, instructor["id"])

    found = client.get(url("/courses/search/title"), params={"title": "java"}).json()
    assert [item["id"] for item in found] == [course["id"]]


def test_instructor_delete_returns_no_content(client: TestClient) -> None:
    instructor = create_instructor(
        client, instructor_details={"youtube_channel": "johndoe", "hobby": "Chess"}
    )
    details_id = instructor["instructor_details"]["id"]

    response = client.delete(url(f"/instructors/{instructor['id']}"))

    assert response.status_code == 204
    assert client.get(url(f"/instructors/{instructor['id']}")).status_code == 404
    assert client.get(url(f"/instructor-details/{details_id}")).status_code == 404


def test_instructor_details_linking(client: TestClient) -> None:
    instructor = create_instructor(client)
    details = client.post(url("/instructor-details"), json={"youtube_channel": "standalone"})
    assert details.status_code == 201
    details_id = details.json()["id"]

    orphaned = client.get(url("/instructor-details/orphaned")).json()
    assert [item["id"] for item in orphaned] == [details_id]

    linked = client.put(url(f"/instructors/{instructor['id']}/details/{details_id}"))
    assert linked.json()["instructor_details"]["id"] == details_id
    assert client.get(url("/instructor-details/orphaned")).json() == []

    unlinked = client.delete(url(f"/instructors/{instructor['id']}/details"))
    assert unlinked.json()["instructor_details"] is None
    without = client.get(url("/instructors/without-details")).json()
    assert [item["id"] for item in without] == [instructor["id"]]


def test_delete_student_with_enrollments(client: TestClient) -> None:
    instructor = create_instructor(client)
    course = create_course(client, instructor["id"])
    student = create_student(client)
    client.post(url(f"/students/{student['id']}/enroll"), json={"course_id": course["id"]})

    response = client.delete(url(f"/students/{student['id']}"))

    assert response.status_code == 200
    body = response.json()
    assert body["deleted_id"] == student["id"]
    assert body["resource_type"] == "Student"
    assert body["success"] is True
    assert client.get(url(f"/courses/{course['id']}/students")).json() == []


def test_update_instructor_with_same_email(client: TestClient) -> None:
    instructor = create_instructor(client)

    response = client.put(
        url(f"/instructors/{instructor['id']}"),
        json={"first_name": "Jonathan", "last_name": "Doe", "email": "john@x.com"},
    )

    assert response.status_code == 200
    assert response.json()["full_name"] == "Jonathan Doe"


def test_unexpected_errors_are_hidden(app) -> None:
    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("secret detail")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_SERVER_ERROR"
    assert body["message"] == "An unexpected error occurred"
    assert "secret" not in response.text


def test_value_error_is_bad_request(app) -> None:
    @app.get("/bad")
    def bad() -> None:
        raise ValueError("minimum must be positive")

    response = TestClient(app).get("/bad")

    assert response.status_code == 400
    assert response.json()["error"] == "BAD_REQUEST"
    assert response.json()["message"] == "minimum must be positive"


def test_email_routes_find_mixed_case_addresses(client: TestClient) -> None:
    instructor = create_instructor(client, email="John.Doe@Example.COM")
    student = create_student(client, email="Jane.Smith@Example.COM")

    found = client.get(url("/instructors/email/John.Doe@Example.COM"))
    assert found.status_code == 200
    assert found.json()["id"] == instructor["id"]
    assert client.get(url("/instructors/email/John.Doe@Example.COM/exists")).json() == {
        "exists": True
    }

    found = client.get(url("/students/email/Jane.Smith@Example.COM"))
    assert found.status_code == 200
    assert found.json()["id"] == student["id"]
    assert client.get(url("/students/email/Jane.Smith@Example.COM/exists")).json() == {
        "exists": True
    }


def test_timestamps_serialize_the_same_after_reload(client: TestClient) -> None:
    instructor = create_instructor(client)
    course = create_course(client, instructor["id"])

    fetched = client.get(url(f"/courses/{course['id']}")).json()

    assert fetched["created_at"] == course["created_at"]
    assert fetched["updated_at"] == course["updated_at"]
    assert client.get(url(f"/instructors/{instructor['id']}")).json()["created_at"] == (
        instructor["created_at"]
    )
