"""Personality Routes — CRUD endpoints over /api/personalities.

Invariants:
    - {personality_id} only matches digits (int path convertor); anything else is a routing 404
    - personality_id above MAX_PERSONALITY_ID → 400 "Invalid ID" (decoding, not business rule)
    - Bodies are validated by core/validate_personality before the service is called
    - Status codes: 201 create, 200 read/update, 204 delete
    - No business logic here: the service owns uniqueness, partial updates and not-found

Design Decisions:
    - Validation failures raised as RequestValidationFailedError so one handler renders all
      domain errors in the shared envelope
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from personality_api.api.dependencies import get_personality_service
from personality_api.core.domain_types import MAX_PERSONALITY_ID, PersonalityId
from personality_api.core.errors import RequestValidationFailedError
from personality_api.core.validate_personality import (
    validate_create, validate_update,
)
from personality_api.schemas.personality import (
    ErrorResponse, PersonalityCreate, PersonalityResponse, PersonalityUpdate,
)
from personality_api.services.personality_service import PersonalityService

router = APIRouter(
    prefix="/api/personalities",
    tags=["personalities"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)

PersonalityIdParam = Annotated[int, Path(ge=0, le=MAX_PERSONALITY_ID)]


@router.post(
    "", response_model=PersonalityResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_personality(
    body: PersonalityCreate,
    service: PersonalityService = Depends(get_personality_service),
):
    """Create a personality with a unique name."""
    if violations := validate_create(body):
        raise RequestValidationFailedError(violations)
    return await service.create(body.name, body.history)


@router.get("", response_model=list[PersonalityResponse])
async def list_personalities(
    service: PersonalityService = Depends(get_personality_service),
):
    """List all personalities, ascending by id."""
    return await service.get_all()


@router.get("/{personality_id:int}", response_model=PersonalityResponse)
async def get_personality(
    personality_id: PersonalityIdParam,
    service: PersonalityService = Depends(get_personality_service),
):
    return await service.get_by_id(PersonalityId(personality_id))


@router.put("/{personality_id:int}", response_model=PersonalityResponse)
async def update_personality(
    body: PersonalityUpdate,
    personality_id: PersonalityIdParam,
    service: PersonalityService = Depends(get_personality_service),
):
    """Partially update a personality. Empty fields are left unchanged."""
    if violations := validate_update(body):
        raise RequestValidationFailedError(violations)
    return await service.update(
        PersonalityId(personality_id), name=body.name, history=body.history,
    )


@router.delete(
    "/{personality_id:int}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_personality(
    personality_id: PersonalityIdParam,
    service: PersonalityService = Depends(get_personality_service),
):
    await service.delete(PersonalityId(personality_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
