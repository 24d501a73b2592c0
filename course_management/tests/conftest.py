from __future__ import annotations

import pytest
from sqlalchemy.orm import Session, sessionmaker

from course_management.db import Base, build_engine
from course_management.db import models  # noqa: F401
from course_management.schemas import CourseRequest, InstructorRequest, StudentRequest
from course_management.services import CourseService, InstructorService, StudentService


@pytest.fixture()
def session() -> Session:
    engine = build_engine("sqlite:///:memory:")
    TestingSession = sessionmaker(bind=engine, future=True, expire_on_commit=False)
    Base.metadata.create_all(engine)
    with TestingSession() as session:
        yield session
        session.rollback()
    engine.dispose()


@pytest.fixture()
def instructor(session: Session):
    return InstructorService(session).create_instructor(
        InstructorRequest(first_name="John", last_name="Doe", email="john@x.com")
    )


@pytest.fixture()
def course(session: Session, instructor):
    return CourseService(session).create_course(
        CourseRequest(title="Java Basics", instructor_id=instructor.id)
    )


@pytest.fixture()
def student(session: Session):
    return StudentService(session).create_student(
        StudentRequest(first_name="Jane", last_name="Smith", email="jane@x.com")
    )
