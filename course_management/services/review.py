"""Review service."""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from course_management.db.models import Course, Review, Student
from course_management.repositories import CourseRepository, ReviewRepository, StudentRepository
from course_management.schemas import ReviewRequest, ReviewResponse
from course_management.services.errors import ResourceNotFoundError
from course_management.services.mappers import review_response

LOGGER = logging.getLogger(__name__)


def _responses(reviews) -> List[ReviewResponse]:
    return [review_response(review) for review in reviews]


class ReviewService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.reviews = ReviewRepository(session)
        self.courses = CourseRepository(session)
        self.students = StudentRepository(session)

    def _require_review(self, review_id: uuid.UUID) -> Review:
        review = self.reviews.get(review_id)
        if review is None:
            raise ResourceNotFoundError("Review", "id", review_id)
        return review

    def _require_course(self, course_id: uuid.UUID) -> Course:
        course = self.courses.get(course_id)
        if course is None:
            LOGGER.warning("Review references missing course %s", course_id)
            raise ResourceNotFoundError("Course", "id", course_id)
        return course

    def _require_student(self, student_id: uuid.UUID) -> Student:
        student = self.students.get(student_id)
        if student is None:
            LOGGER.warning("Review references missing student %s", student_id)
            raise ResourceNotFoundError("Student", "id", student_id)
        return student

    def create_review(self, course_id: uuid.UUID, request: ReviewRequest) -> ReviewResponse:
        course = self._require_course(course_id)
        student = self._require_student(request.student_id)

        review = self.reviews.add(Review(comment=request.comment, course=course, student=student))
        LOGGER.info("Created review %s on course %s", review.id, course.id)
        return review_response(review)

    def update_review(self, review_id: uuid.UUID, request: ReviewRequest) -> ReviewResponse:
        """Update the comment and, when they differ, the author and course."""
        review = self._require_review(review_id)

        review.comment = request.comment
        if review.student_id != request.student_id:
            review.student = self._require_student(request.student_id)
        if request.course_id is not None and review.course_id != request.course_id:
            review.course = self._require_course(request.course_id)

        self.reviews.save(review)
        LOGGER.info("Updated review %s", review.id)
        return review_response(review)

    def delete_review(self, review_id: uuid.UUID) -> None:
        review = self._require_review(review_id)
        self.reviews.delete(review)
        LOGGER.info("Deleted review %s", review_id)

    def get_review_by_id(self, review_id: uuid.UUID) -> ReviewResponse:
        return review_response(self._require_review(review_id))

    def get_all_reviews(self) -> List[ReviewResponse]:
        return _responses(self.reviews.list_all())

    def get_reviews_by_course_id(self, course_id: uuid.UUID) -> List[ReviewResponse]:
        self._require_course(course_id)
        return _responses(self.reviews.list_by_course(course_id))

    def get_reviews_by_course_id_ordered_by_date(
        self, course_id: uuid.UUID
    ) -> List[ReviewResponse]:
        self._require_course(course_id)
        return _responses(self.reviews.list_by_course_newest_first(course_id))

    def search_reviews_by_comment(self, keyword: str) -> List[ReviewResponse]:
        return _responses(self.reviews.search_by_comment(keyword))

    def search_reviews_by_course_title(self, title: str) -> List[ReviewResponse]:
        return _responses(self.reviews.search_by_course_title(title))

    def get_reviews_by_instructor_id(self, instructor_id: uuid.UUID) -> List[ReviewResponse]:
        return _responses(self.reviews.list_by_instructor(instructor_id))

    def get_latest_reviews(self) -> List[ReviewResponse]:
        return _responses(self.reviews.list_latest())

    def count_reviews_by_course_id(self, course_id: uuid.UUID) -> int:
        return self.reviews.count_by_course(course_id)

    def exists_by_id(self, review_id: uuid.UUID) -> bool:
        return self.reviews.exists(review_id)

    def get_reviews_by_student_id(self, student_id: uuid.UUID) -> List[ReviewResponse]:
        self._require_student(student_id)
        return _responses(self.reviews.list_by_student(student_id))

    def get_reviews_by_student_id_ordered_by_date(
        self, student_id: uuid.UUID
    ) -> List[ReviewResponse]:
        self._require_student(student_id)
        return _responses(self.reviews.list_by_student_newest_first(student_id))

    def get_reviews_by_course_and_student(
        self, course_id: uuid.UUID, student_id: uuid.UUID
    ) -> List[ReviewResponse]:
        self._require_course(course_id)
        self._require_student(student_id)
        return _responses(self.reviews.list_by_course_and_student(course_id, student_id))

    def count_reviews_by_student_id(self, student_id: uuid.UUID) -> int:
        return self.reviews.count_by_student(student_id)

    def search_reviews_by_student_email(self, email: str) -> List[ReviewResponse]:
        return _responses(self.reviews.search_by_student_email(email))

    def search_reviews_by_student_name(self, name: str) -> List[ReviewResponse]:
        return _responses(self.reviews.search_by_student_name(name))
