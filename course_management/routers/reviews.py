"""Review endpoints. Reviews are created through ``/courses/{id}/reviews``."""
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_review_service
from ..schemas import DeletionResponse, ExistsResponse, ReviewRequest, ReviewResponse
from ..services import ReviewService


router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=List[ReviewResponse])
def list_reviews(service: ReviewService = Depends(get_review_service)) -> List[ReviewResponse]:
    return service.get_all_reviews()


@router.get("/latest", response_model=List[ReviewResponse])
def latest_reviews(service: ReviewService = Depends(get_review_service)) -> List[ReviewResponse]:
    return service.get_latest_reviews()


@router.get("/search/comment", response_model=List[ReviewResponse])
def search_by_comment(
    keyword: str = Query(..., min_length=1), service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    return service.search_reviews_by_comment(keyword)


@router.get("/search/course", response_model=List[ReviewResponse])
def search_by_course_title(
    title: str = Query(..., min_length=1), service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    return service.search_reviews_by_course_title(title)


@router.get("/search/student/email", response_model=List[ReviewResponse])
def search_by_student_email(
    email: str = Query(..., min_length=1), service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    return service.search_reviews_by_student_email(email)


@router.get("/search/student/name", response_model=List[ReviewResponse])
def search_by_student_name(
    name: str = Query(..., min_length=1), service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    return service.search_reviews_by_student_name(name)


@router.get("/instructor/{instructor_id}", response_model=List[ReviewResponse])
def reviews_by_instructor(
    instructor_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    return service.get_reviews_by_instructor_id(instructor_id)


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(
    review_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> ReviewResponse:
    return service.get_review_by_id(review_id)


@router.put("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: uuid.UUID,
    payload: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    return service.update_review(review_id, payload)


@router.delete("/{review_id}", response_model=DeletionResponse)
def delete_review(
    review_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> DeletionResponse:
    service.delete_review(review_id)
    return DeletionResponse.for_resource(review_id, "Review")


@router.get("/{review_id}/exists", response_model=ExistsResponse)
def review_exists(
    review_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_id(review_id))
