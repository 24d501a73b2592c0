"""Instructor details queries."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import exists, select

from course_management.db.models import Instructor, InstructorDetails
from course_management.repositories.base import BaseRepository, contains_pattern


class InstructorDetailsRepository(BaseRepository[InstructorDetails]):
    model = InstructorDetails

    def search_by_youtube_channel(self, youtube_channel: str) -> Sequence[InstructorDetails]:
        stmt = select(InstructorDetails).where(
            InstructorDetails.youtube_channel.ilike(contains_pattern(youtube_channel))
        )
        return self.session.scalars(stmt.order_by(InstructorDetails.created_at)).all()

    def search_by_hobby(self, hobby: str) -> Sequence[InstructorDetails]:
        stmt = select(InstructorDetails).where(
            InstructorDetails.hobby.ilike(contains_pattern(hobby))
        )
        return self.session.scalars(stmt.order_by(InstructorDetails.created_at)).all()

    def list_orphaned(self) -> Sequence[InstructorDetails]:
        """Details records that no instructor currently links to."""
        stmt = (
            select(InstructorDetails)
            .where(~exists().where(Instructor.instructor_details_id == InstructorDetails.id))
            .order_by(InstructorDetails.created_at)
        )
        return self.session.scalars(stmt).all()
