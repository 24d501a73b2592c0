"""Standalone instructor details records."""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from course_management.db.models import InstructorDetails
from course_management.repositories import InstructorDetailsRepository
from course_management.schemas import InstructorDetailsRequest, InstructorDetailsResponse
from course_management.services.errors import ResourceNotFoundError
from course_management.services.mappers import instructor_details_response

LOGGER = logging.getLogger(__name__)

RESOURCE = "InstructorDetails"


class InstructorDetailsService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.details = InstructorDetailsRepository(session)

    def _require(self, details_id: uuid.UUID) -> InstructorDetails:
        details = self.details.get(details_id)
        if details is None:
            raise ResourceNotFoundError(RESOURCE, "id", details_id)
        return details

    def create_instructor_details(
        self, request: InstructorDetailsRequest
    ) -> InstructorDetailsResponse:
        details = self.details.add(
            InstructorDetails(youtube_channel=request.youtube_channel, hobby=request.hobby)
        )
        LOGGER.info("Created instructor details %s", details.id)
        return instructor_details_response(details)

    def get_instructor_details_by_id(self, details_id: uuid.UUID) -> InstructorDetailsResponse:
        return instructor_details_response(self._require(details_id))

    def get_all_instructor_details(self) -> List[InstructorDetailsResponse]:
        return [instructor_details_response(details) for details in self.details.list_all()]

    def update_instructor_details(
        self, details_id: uuid.UUID, request: InstructorDetailsRequest
    ) -> InstructorDetailsResponse:
        details = self._require(details_id)
        details.youtube_channel = request.youtube_channel
        details.hobby = request.hobby
        self.details.save(details)
        LOGGER.info("Updated instructor details %s", details_id)
        return instructor_details_response(details)

    def delete_instructor_details(self, details_id: uuid.UUID) -> None:
        details = self._require(details_id)
        # A linked instructor keeps existing without details.
        self.details.delete(details)
        LOGGER.info("Deleted instructor details %s", details_id)

    def search_by_youtube_channel(self, youtube_channel: str) -> List[InstructorDetailsResponse]:
        return [
            instructor_details_response(details)
            for details in self.details.search_by_youtube_channel(youtube_channel)
        ]

    def search_by_hobby(self, hobby: str) -> List[InstructorDetailsResponse]:
        return [instructor_details_response(details) for details in self.details.search_by_hobby(hobby)]

    def get_orphaned_instructor_details(self) -> List[InstructorDetailsResponse]:
        return [instructor_details_response(details) for details in self.details.list_orphaned()]

    def exists_by_id(self, details_id: uuid.UUID) -> bool:
        return self.details.exists(details_id)
