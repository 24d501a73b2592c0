"""Student endpoints, enrollment included."""
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Body, Depends, Path, Query, status

from ..dependencies import get_review_service, get_student_service
from ..schemas import (
    CountResponse,
    CourseInfo,
    DeletionResponse,
    EnrollmentRequest,
    EnrollmentResponse,
    ExistsResponse,
    ReviewResponse,
    StudentRequest,
    StudentResponse,
    UnenrollmentResponse,
)
from ..services import ReviewService, StudentService


router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentRequest, service: StudentService = Depends(get_student_service)
) -> StudentResponse:
    return service.create_student(payload)


@router.get("", response_model=List[StudentResponse])
def list_students(
    include_courses: bool = Query(default=False),
    service: StudentService = Depends(get_student_service),
) -> List[StudentResponse]:
    if include_courses:
        return service.get_all_students_with_courses()
    return service.get_all_students()


@router.get("/search/name", response_model=List[StudentResponse])
def search_by_name(
    name: str = Query(..., min_length=1), service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.search_students_by_name(name)


@router.get("/search/email", response_model=List[StudentResponse])
def search_by_email(
    email: str = Query(..., min_length=1), service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.search_students_by_email(email)


@router.get("/no-courses", response_model=List[StudentResponse])
def students_without_courses(
    service: StudentService = Depends(get_student_service),
) -> List[StudentResponse]:
    return service.get_students_with_no_courses()


@router.get("/enrolled-in-more-than/{minimum}", response_model=List[StudentResponse])
def students_with_many_courses(
    minimum: int = Path(..., ge=0), service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.get_students_with_more_than_n_courses(minimum)


@router.get("/email/{email}", response_model=StudentResponse)
def get_student_by_email(
    email: str, service: StudentService = Depends(get_student_service)
) -> StudentResponse:
    return service.get_student_by_email(email)


@router.get("/email/{email}/exists", response_model=ExistsResponse)
def student_email_exists(
    email: str, service: StudentService = Depends(get_student_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_email(email))


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: uuid.UUID,
    include_courses: bool = Query(default=False),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    if include_courses:
        return service.get_student_by_id_with_courses(student_id)
    return service.get_student_by_id(student_id)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: uuid.UUID,
    payload: StudentRequest,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    return service.update_student(student_id, payload)


@router.delete("/{student_id}", response_model=DeletionResponse)
def delete_student(
    student_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> DeletionResponse:
    service.delete_student(student_id)
    return DeletionResponse.for_resource(student_id, "Student")


@router.get("/{student_id}/exists", response_model=ExistsResponse)
def student_exists(
    student_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_id(student_id))


@router.get("/{student_id}/courses", response_model=List[CourseInfo])
def student_courses(
    student_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> List[CourseInfo]:
    return service.get_student_courses(student_id)


@router.post(
    "/{student_id}/enroll",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def enroll(
    student_id: uuid.UUID,
    payload: EnrollmentRequest,
    service: StudentService = Depends(get_student_service),
) -> EnrollmentResponse:
    return service.enroll_student_in_course(student_id, payload.course_id)


@router.delete("/{student_id}/unenroll", response_model=UnenrollmentResponse)
def unenroll(
    student_id: uuid.UUID,
    payload: EnrollmentRequest = Body(...),
    service: StudentService = Depends(get_student_service),
) -> UnenrollmentResponse:
    return service.unenroll_student_from_course(student_id, payload.course_id)


@router.get("/{student_id}/enrollment/courses/{course_id}", response_model=ExistsResponse)
def enrollment_exists(
    student_id: uuid.UUID,
    course_id: uuid.UUID,
    service: StudentService = Depends(get_student_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.is_student_enrolled_in_course(student_id, course_id))


@router.get("/{student_id}/reviews", response_model=List[ReviewResponse])
def student_reviews(
    student_id: uuid.UUID,
    newest_first: bool = Query(default=False),
    service: ReviewService = Depends(get_review_service),
) -> List[ReviewResponse]:
    if newest_first:
        return service.get_reviews_by_student_id_ordered_by_date(student_id)
    return service.get_reviews_by_student_id(student_id)


@router.get("/{student_id}/reviews/count", response_model=CountResponse)
def count_student_reviews(
    student_id: uuid.UUID, service: ReviewService = Depends(get_review_service)
) -> CountResponse:
    return CountResponse(
        count=service.count_reviews_by_student_id(student_id),
        resource_type="Review",
        description=f"Reviews written by student {student_id}",
    )
