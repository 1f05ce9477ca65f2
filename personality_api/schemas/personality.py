"""Personality Schemas — request/response shapes for the personality endpoints.

Invariants:
    - Request shapes carry types only; length/required rules live in core/validate_personality
    - Unknown keys (including a client-supplied "id") are ignored
    - PersonalityUpdate: None, omitted and "" all mean "leave unchanged"
    - ErrorResponse.details is omitted from JSON when there are no field violations

Design Decisions:
    - PersonalityCreate fields default to "": a missing field is reported as "required"
      by the validator instead of a generic body error
"""

from pydantic import BaseModel, ConfigDict


class PersonalityCreate(BaseModel):
    """Create request. Both fields are required, checked by the validator."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    history: str = ""


class PersonalityUpdate(BaseModel):
    """Partial update request."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    history: str | None = None


class PersonalityResponse(BaseModel):
    """Public projection of a stored personality."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    history: str


class ErrorResponse(BaseModel):
    """Shared error envelope."""
    error: str
    message: str
    details: dict[str, str] | None = None


class WelcomeResponse(BaseModel):
    message: str
