"""FastAPI dependencies: one session per request and the services built on it."""
from __future__ import annotations

from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from course_management.db import SessionLocal
from course_management.services import (
    CourseService,
    InstructorDetailsService,
    InstructorService,
    ReviewService,
    StudentService,
)


def get_db() -> Iterator[Session]:
    """Yield a session committed on success and rolled back on any error."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(db)


def get_instructor_service(db: Session = Depends(get_db)) -> InstructorService:
    return InstructorService(db)


def get_instructor_details_service(db: Session = Depends(get_db)) -> InstructorDetailsService:
    return InstructorDetailsService(db)


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(db)
