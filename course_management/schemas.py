"""Pydantic schemas shared across the course management API."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """Return ``value`` in the form ``EmailStr`` stores it (domain lowercased).

    Strings that are not addresses are returned unchanged so lookups simply miss.
    """
    try:
        return _EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return value


class RequestModel(BaseModel):
    """Incoming payloads: surrounding whitespace is ignored."""

    model_config = ConfigDict(str_strip_whitespace=True)


class PersonRequest(RequestModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, value: str) -> str:
        if len(value) > 255:
            raise ValueError("Email must not exceed 255 characters")
        return value


# ---------------------------------------------------------------------------
# Embedded summaries
# ---------------------------------------------------------------------------


class InstructorInfo(BaseModel):
    id: uuid.UUID
    full_name: str
    email: str


class StudentInfo(BaseModel):
    id: uuid.UUID
    full_name: str
    email: str


class CourseInfo(BaseModel):
    id: uuid.UUID
    title: str
    instructor_name: str


# ---------------------------------------------------------------------------
# Instructor details
# ---------------------------------------------------------------------------


class InstructorDetailsRequest(RequestModel):
    youtube_channel: str = Field(..., min_length=1, max_length=255)
    hobby: Optional[str] = Field(default=None, max_length=500)


class InstructorDetailsResponse(BaseModel):
    id: uuid.UUID
    youtube_channel: str
    hobby: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Instructors
# ---------------------------------------------------------------------------


class InstructorRequest(PersonRequest):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    instructor_details: Optional[InstructorDetailsRequest] = None


class InstructorResponse(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    instructor_details: Optional[InstructorDetailsResponse] = None


# ---------------------------------------------------------------------------
# Courses and reviews
# ---------------------------------------------------------------------------


class CourseRequest(RequestModel):
    title: str = Field(..., min_length=3, max_length=255)
    instructor_id: uuid.UUID


class ReviewRequest(RequestModel):
    comment: str = Field(..., min_length=1)
    student_id: uuid.UUID
    # Ignored on create, where the course comes from the URL.
    course_id: Optional[uuid.UUID] = None


class ReviewResponse(BaseModel):
    id: uuid.UUID
    comment: str
    created_at: datetime
    updated_at: datetime
    course: Optional[CourseInfo] = None
    student: Optional[StudentInfo] = None


class CourseResponse(BaseModel):
    id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime
    instructor: InstructorInfo
    reviews: Optional[List[ReviewResponse]] = None


# ---------------------------------------------------------------------------
# Students and enrollment
# ---------------------------------------------------------------------------


class StudentRequest(PersonRequest):
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)


class StudentResponse(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    courses: Optional[List[CourseInfo]] = None


class EnrollmentRequest(BaseModel):
    course_id: uuid.UUID


class EnrollmentResponse(BaseModel):
    message: str
    enrollment_date: datetime = Field(default_factory=_utcnow)
    student: StudentInfo
    course: CourseInfo


class UnenrollmentResponse(BaseModel):
    message: str
    unenrollment_date: datetime = Field(default_factory=_utcnow)
    student: StudentInfo
    course: CourseInfo


# ---------------------------------------------------------------------------
# Generic responses
# ---------------------------------------------------------------------------


class DeletionResponse(BaseModel):
    deleted_id: uuid.UUID
    resource_type: str
    message: str
    deletion_timestamp: datetime = Field(default_factory=_utcnow)
    success: bool = True

    @classmethod
    def for_resource(cls, deleted_id: uuid.UUID, resource_type: str) -> "DeletionResponse":
        return cls(
            deleted_id=deleted_id,
            resource_type=resource_type,
            message=f"{resource_type} deleted successfully",
        )


class CountResponse(BaseModel):
    count: int
    resource_type: str
    description: Optional[str] = None


class ExistsResponse(BaseModel):
    exists: bool


class ValidationErrorDetail(BaseModel):
    field: str
    rejected_value: Any = None
    message: str


class ErrorResponse(BaseModel):
    status: int
    error: str
    message: Optional[str] = None
    path: str
    timestamp: datetime = Field(default_factory=_utcnow)
    validation_errors: Optional[List[ValidationErrorDetail]] = None

    @field_validator("validation_errors")
    @classmethod
    def drop_empty_errors(
        cls, value: Optional[List[ValidationErrorDetail]]
    ) -> Optional[List[ValidationErrorDetail]]:
        return value or None
