"""Home — API welcome message."""

from fastapi import APIRouter

from personality_api.schemas.personality import WelcomeResponse

router = APIRouter(tags=["home"])

WELCOME_MESSAGE = "Welcome to the Personalities REST API!"


@router.get("/", response_model=WelcomeResponse)
async def home():
    return WelcomeResponse(message=WELCOME_MESSAGE)
