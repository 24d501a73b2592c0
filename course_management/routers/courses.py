"""Course endpoints, including the course's students and reviews."""
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_course_service, get_review_service, get_student_service
from ..schemas import (
    CountResponse,
    CourseRequest,
    CourseResponse,
    DeletionResponse,
    ExistsResponse,
    ReviewRequest,
    ReviewResponse,
    StudentResponse,
)
from ..services import CourseService, ReviewService, StudentService


router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    payload: CourseRequest, service: CourseService = Depends(get_course_service)
) -> CourseResponse:
    return service.create_course(payload)


@router.get("", response_model=List[CourseResponse])
def list_courses(service: CourseService = Depends(get_course_service)) -> List[CourseResponse]:
    return service.get_all_courses()


@router.get("/with-reviews", response_model=List[CourseResponse])
def list_courses_with_reviews(
    service: CourseService = Depends(get_course_service),
) -> List[CourseResponse]:
    return service.get_all_courses_with_reviews()


@router.get("/search/title", response_model=List[CourseResponse])
def search_by_title(
    title: str = Query(..., min_length=1), service: CourseService = Depends(get_course_service)
) -> List[CourseResponse]:
    return service.search_courses_by_title(title)


@router.get("/search/instructor", response_model=List[CourseResponse])
def search_by_instructor_name(
    name: str = Query(..., min_length=1), service: CourseService = Depends(get_course_service)
) -> List[CourseResponse]:
    return service.search_courses_by_instructor_name(name)


@router.get("/instructor/{instructor_id}", response_model=List[CourseResponse])
def courses_by_instructor(
    instructor_id: uuid.UUID, service: CourseService = Depends(get_course_service)
) -> List[CourseResponse]:
    return service.get_courses_by_instructor_id(instructor_id)


@router.get("/instructor/{instructor_id}/with-reviews", response_model=List[CourseResponse])
def courses_by_instructor_with_reviews(
    instructor_id: uuid.UUID, service: CourseService = Depends(get_course_service)
) -> List[CourseResponse]:
    return service.get_courses_by_instructor_id_with_reviews(instructor_id)


@router.get("/instructor/{instructor_id}/count", response_model=CountResponse)
def count_courses_by_instructor(
    instructor_id: uuid.UUID, service: CourseService = Depends(get_course_service)
) -> CountResponse:
    return CountResponse(
        count=service.count_courses_by_instructor_id(instructor_id),
        resource_type="Course",
        description=f"Courses taught by instructor {instructor_id}",
    )


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(
    course_id: uuid.UUID,
    include_reviews: bool = Query(default=False),
    service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    if include_reviews:
        return service.get_course_by_id_with_reviews(course_id)
    return service.get_course_by_id(course_id)


@router.put("/{course_id}", response_model=CourseResponse)
def update_course(
    course_id: uuid.UUID,
    payload: CourseRequest,
    service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    return service.update_course(course_id, payload)


@router.delete("/{course_id}", response_model=DeletionResponse)
def delete_course(
    course_id: uuid.UUID, service: CourseService = Depends(get_course_service)
) -> DeletionResponse:
    service.delete_course(course_id)
    return DeletionResponse.for_resource(course_id, "Course")


@router.get("/{course_id}/exists", response_model=ExistsResponse)
def course_exists(
    course_id: uuid.UUID, service: CourseService = Depends(get_course_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_id(course_id))


@router.get("/{course_id}/students", response_model=List[StudentResponse])
def enrolled_students(
    course_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.get_students_enrolled_in_course(course_id)


@router.get("/{course_id}/students/count", response_model=CountResponse)
def count_enrolled_students(
    course_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> CountResponse:
    return CountResponse(
        count=service.count_students_in_course(course_id),
        resource_type="Student",
        description=f"Students enrolled in course {course_id}",
    )


@router.get("/{course_id}/students/not-enrolled", response_model=List[StudentResponse])
def students_not_enrolled(
    course_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.get_students_not_enrolled_in_course(course_id)


@router.post(
    "/{course_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    course_id: uuid.UUID,
    payload: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    return service.create_review(course_id, payload)


@router.get("/{course_id}/reviews", response_model=List[ReviewResponse])
def course_reviews(
    course_id: uuid.UUID,
    newest_first: bool = Query(default=False),
    service: ReviewService = Depends(get_review_service),
) -> List[ReviewResponse]:
    if newest_first:
        return service.get_reviews_by_course_id_ordered_by_date(course_id)
    return service.get_reviews_by_course_id(course_id)


@router.get("/{course_id}/reviews/count", response_model=CountResponse)
def count_course_reviews(
    course_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> CountResponse:
    return CountResponse(
        count=service.count_reviews_by_course_id(course_id),
        resource_type="Review",
        description=f"Reviews for course {course_id}",
    )


@router.get("/{course_id}/students/{student_id}/reviews", response_model=List[ReviewResponse])
def course_student_reviews(
    course_id: uuid.UUID,
    student_id: uuid.UUID,
    service: ReviewService = Depends(get_review_service),
) -> List[ReviewResponse]:
    return service.get_reviews_by_course_and_student(course_id, student_id)
