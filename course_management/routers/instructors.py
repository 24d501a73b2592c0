"""Instructor endpoints."""
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_instructor_service, get_student_service
from ..schemas import ExistsResponse, InstructorRequest, InstructorResponse, StudentResponse
from ..services import InstructorService, StudentService


router = APIRouter(prefix="/instructors", tags=["instructors"])


@router.post("", response_model=InstructorResponse, status_code=status.HTTP_201_CREATED)
def create_instructor(
    payload: InstructorRequest,
    service: InstructorService = Depends(get_instructor_service),
) -> InstructorResponse:
    return service.create_instructor(payload)


@router.get("", response_model=List[InstructorResponse])
def list_instructors(
    service: InstructorService = Depends(get_instructor_service),
) -> List[InstructorResponse]:
    return service.get_all_instructors()


@router.get("/search", response_model=List[InstructorResponse])
def search_instructors(
    name: str = Query(..., min_length=1),
    service: InstructorService = Depends(get_instructor_service),
) -> List[InstructorResponse]:
    return service.search_instructors_by_name(name)


@router.get("/with-details", response_model=List[InstructorResponse])
def instructors_with_details(
    service: InstructorService = Depends(get_instructor_service),
) -> List[InstructorResponse]:
    return service.get_instructors_with_details()


@router.get("/without-details", response_model=List[InstructorResponse])
def instructors_without_details(
    service: InstructorService = Depends(get_instructor_service),
) -> List[InstructorResponse]:
    return service.get_instructors_without_details()


@router.get("/email/{email}", response_model=InstructorResponse)
def get_instructor_by_email(
    email: str, service: InstructorService = Depends(get_instructor_service)
) -> InstructorResponse:
    return service.get_instructor_by_email(email)


@router.get("/email/{email}/exists", response_model=ExistsResponse)
def instructor_email_exists(
    email: str, service: InstructorService = Depends(get_instructor_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_email(email))


@router.get("/{instructor_id}", response_model=InstructorResponse)
def get_instructor(
    instructor_id: uuid.UUID, service: InstructorService = Depends(get_instructor_service)
) -> InstructorResponse:
    return service.get_instructor_by_id(instructor_id)


@router.put("/{instructor_id}", response_model=InstructorResponse)
def update_instructor(
    instructor_id: uuid.UUID,
    payload: InstructorRequest,
    service: InstructorService = Depends(get_instructor_service),
) -> InstructorResponse:
    return service.update_instructor(instructor_id, payload)


@router.delete("/{instructor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_instructor(
    instructor_id: uuid.UUID, service: InstructorService = Depends(get_instructor_service)
) -> Response:
    service.delete_instructor(instructor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{instructor_id}/details/{details_id}", response_model=InstructorResponse)
def link_instructor_details(
    instructor_id: uuid.UUID,
    details_id: uuid.UUID,
    service: InstructorService = Depends(get_instructor_service),
) -> InstructorResponse:
    return service.add_instructor_details(instructor_id, details_id)


@router.delete("/{instructor_id}/details", response_model=InstructorResponse)
def unlink_instructor_details(
    instructor_id: uuid.UUID, service: InstructorService = Depends(get_instructor_service)
) -> InstructorResponse:
    return service.remove_instructor_details(instructor_id)


@router.get("/{instructor_id}/exists", response_model=ExistsResponse)
def instructor_exists(
    instructor_id: uuid.UUID, service: InstructorService = Depends(get_instructor_service)
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_id(instructor_id))


@router.get("/{instructor_id}/students", response_model=List[StudentResponse])
def instructor_students(
    instructor_id: uuid.UUID, service: StudentService = Depends(get_student_service)
) -> List[StudentResponse]:
    return service.get_students_by_instructor(instructor_id)
