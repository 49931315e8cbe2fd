"""Writing hint endpoint for the entry composer."""

from fastapi import APIRouter

from easylog.application.schemas import SuggestionRequest, SuggestionResponse
from easylog.application.services import suggest
from easylog.config import get_settings

router = APIRouter(prefix="/suggestions", tags=["Suggestions"])


@router.post("", response_model=SuggestionResponse)
async def get_suggestion(data: SuggestionRequest) -> SuggestionResponse:
    """Return the hint for a draft, or null while the draft is short."""
    return SuggestionResponse(
        suggestion=suggest(data.text, get_settings().suggestion_min_length)
    )
