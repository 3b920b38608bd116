"""Toast notification endpoints."""

from fastapi import APIRouter, status

from studentdash.api.dependencies import SessionDep
from studentdash.api.models import APIResponse, ToastResponse, toast_to_response

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=APIResponse[list[ToastResponse]])
async def list_notifications(session: SessionDep) -> APIResponse[list[ToastResponse]]:
    """Visible toasts in the order they were raised."""
    return APIResponse(data=[toast_to_response(t) for t in session.notifier.toasts])


@router.delete("/{toast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_notification(toast_id: str, session: SessionDep) -> None:
    """Dismiss a toast. Unknown IDs are ignored."""
    session.notifier.remove(toast_id)
