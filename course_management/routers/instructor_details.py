"""Standalone instructor details endpoints."""
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_instructor_details_service
from ..schemas import (
    DeletionResponse,
    ExistsResponse,
    InstructorDetailsRequest,
    InstructorDetailsResponse,
)
from ..services import InstructorDetailsService


router = APIRouter(prefix="/instructor-details", tags=["instructor-details"])


@router.post("", response_model=InstructorDetailsResponse, status_code=status.HTTP_201_CREATED)
def create_details(
    payload: InstructorDetailsRequest,
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> InstructorDetailsResponse:
    return service.create_instructor_details(payload)


@router.get("", response_model=List[InstructorDetailsResponse])
def list_details(
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> List[InstructorDetailsResponse]:
    return service.get_all_instructor_details()


@router.get("/search/youtube", response_model=List[InstructorDetailsResponse])
def search_by_channel(
    channel: str = Query(..., min_length=1),
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> List[InstructorDetailsResponse]:
    return service.search_by_youtube_channel(channel)


@router.get("/search/hobby", response_model=List[InstructorDetailsResponse])
def search_by_hobby(
    hobby: str = Query(..., min_length=1),
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> List[InstructorDetailsResponse]:
    return service.search_by_hobby(hobby)


@router.get("/orphaned", response_model=List[InstructorDetailsResponse])
def orphaned_details(
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> List[InstructorDetailsResponse]:
    return service.get_orphaned_instructor_details()


@router.get("/{details_id}", response_model=InstructorDetailsResponse)
def get_details(
    details_id: uuid.UUID,
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> InstructorDetailsResponse:
    return service.get_instructor_details_by_id(details_id)


@router.put("/{details_id}", response_model=InstructorDetailsResponse)
def update_details(
    details_id: uuid.UUID,
    payload: InstructorDetailsRequest,
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> InstructorDetailsResponse:
    return service.update_instructor_details(details_id, payload)


@router.delete("/{details_id}", response_model=DeletionResponse)
def delete_details(
    details_id: uuid.UUID,
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> DeletionResponse:
    service.delete_instructor_details(details_id)
    return DeletionResponse.for_resource(details_id, "InstructorDetails")


@router.get("/{details_id}/exists", response_model=ExistsResponse)
def details_exists(
    details_id: uuid.UUID,
    service: InstructorDetailsService = Depends(get_instructor_details_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists_by_id(details_id))
