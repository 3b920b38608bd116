"""Display preference endpoints."""

from fastapi import APIRouter

from studentdash.api.dependencies import SessionDep
from studentdash.api.models import APIResponse, PreferencesResponse

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=APIResponse[PreferencesResponse])
async def get_preferences(session: SessionDep) -> APIResponse[PreferencesResponse]:
    """Current display preferences."""
    return APIResponse(data=PreferencesResponse(dark_mode=session.dark_mode))


@router.post("/dark-mode/toggle", response_model=APIResponse[PreferencesResponse])
async def toggle_dark_mode(session: SessionDep) -> APIResponse[PreferencesResponse]:
    """Switch between dark and light mode."""
    return APIResponse(data=PreferencesResponse(dark_mode=session.toggle_dark_mode()))
