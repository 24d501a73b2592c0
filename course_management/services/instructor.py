"""Instructor service: email uniqueness and details linkage."""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from course_management.db.models import Instructor, InstructorDetails
from course_management.repositories import InstructorDetailsRepository, InstructorRepository
from course_management.schemas import (
    InstructorDetailsRequest,
    InstructorRequest,
    InstructorResponse,
    normalize_email,
)
from course_management.services.errors import ResourceAlreadyExistsError, ResourceNotFoundError
from course_management.services.mappers import instructor_response

LOGGER = logging.getLogger(__name__)


class InstructorService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.instructors = InstructorRepository(session)
        self.details = InstructorDetailsRepository(session)

    def _require(self, instructor_id: uuid.UUID) -> Instructor:
        instructor = self.instructors.get(instructor_id)
        if instructor is None:
            raise ResourceNotFoundError("Instructor", "id", instructor_id)
        return instructor

    def _ensure_email_available(self, email: str) -> None:
        if self.instructors.exists_by_email(email):
            LOGGER.warning("Instructor email %s already in use", email)
            raise ResourceAlreadyExistsError("Instructor", "email", email)

    def _link_details(self, instructor: Instructor, details: InstructorDetails | None) -> None:
        """Point ``instructor`` at ``details``, detaching it from any previous owner."""
        if details is not None:
            previous_owner = self.instructors.get_by_details_id(details.id)
            if previous_owner is not None and previous_owner is not instructor:
                previous_owner.details = None
                # The unique details column must be cleared before it is reused.
                self.session.flush()
        instructor.details = details

    def create_instructor(self, request: InstructorRequest) -> InstructorResponse:
        self._ensure_email_available(request.email)

        instructor = Instructor(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
        )
        if request.instructor_details is not None:
            instructor.details = InstructorDetails(
                youtube_channel=request.instructor_details.youtube_channel,
                hobby=request.instructor_details.hobby,
            )
        self.instructors.add(instructor)
        LOGGER.info("Created instructor %s", instructor.id)
        return instructor_response(instructor)

    def get_instructor_by_id(self, instructor_id: uuid.UUID) -> InstructorResponse:
        return instructor_response(self._require(instructor_id))

    def get_all_instructors(self) -> List[InstructorResponse]:
        return [instructor_response(instructor) for instructor in self.instructors.list_all()]

    def update_instructor(
        self, instructor_id: uuid.UUID, request: InstructorRequest
    ) -> InstructorResponse:
        """Replace the instructor's fields.

        A request without details unlinks the current details record (it is
        kept as an orphan, not deleted).
        """
        instructor = self._require(instructor_id)
        if instructor.email != request.email:
            self._ensure_email_available(request.email)

        instructor.first_name = request.first_name
        instructor.last_name = request.last_name
        instructor.email = request.email
        self._apply_details(instructor, request.instructor_details)

        self.instructors.save(instructor)
        LOGGER.info("Updated instructor %s", instructor.id)
        return instructor_response(instructor)

    def _apply_details(
        self, instructor: Instructor, payload: InstructorDetailsRequest | None
    ) -> None:
        if payload is None:
            instructor.details = None
        elif instructor.details is not None:
            instructor.details.youtube_channel = payload.youtube_channel
            instructor.details.hobby = payload.hobby
        else:
            instructor.details = InstructorDetails(
                youtube_channel=payload.youtube_channel, hobby=payload.hobby
            )

    def delete_instructor(self, instructor_id: uuid.UUID) -> None:
        instructor = self._require(instructor_id)
        # Cascades to the linked details and to the instructor's courses.
        self.instructors.delete(instructor)
        LOGGER.info("Deleted instructor %s", instructor_id)

    def get_instructor_by_email(self, email: str) -> InstructorResponse:
        instructor = self.instructors.get_by_email(normalize_email(email))
        if instructor is None:
            raise ResourceNotFoundError("Instructor", "email", email)
        return instructor_response(instructor)

    def search_instructors_by_name(self, name: str) -> List[InstructorResponse]:
        return [instructor_response(instructor) for instructor in self.instructors.search_by_name(name)]

    def get_instructors_with_details(self) -> List[InstructorResponse]:
        return [instructor_response(instructor) for instructor in self.instructors.list_with_details()]

    def get_instructors_without_details(self) -> List[InstructorResponse]:
        return [
            instructor_response(instructor) for instructor in self.instructors.list_without_details()
        ]

    def add_instructor_details(
        self, instructor_id: uuid.UUID, details_id: uuid.UUID
    ) -> InstructorResponse:
        instructor = self._require(instructor_id)
        details = self.details.get(details_id)
        if details is None:
            raise ResourceNotFoundError("InstructorDetails", "id", details_id)

        self._link_details(instructor, details)
        self.instructors.save(instructor)
        LOGGER.info("Linked instructor details %s to instructor %s", details_id, instructor_id)
        return instructor_response(instructor)

    def remove_instructor_details(self, instructor_id: uuid.UUID) -> InstructorResponse:
        instructor = self._require(instructor_id)
        instructor.details = None
        self.instructors.save(instructor)
        LOGGER.info("Unlinked instructor details from instructor %s", instructor_id)
        return instructor_response(instructor)

    def exists_by_id(self, instructor_id: uuid.UUID) -> bool:
        return self.instructors.exists(instructor_id)

    def exists_by_email(self, email: str) -> bool:
        return self.instructors.exists_by_email(normalize_email(email))
