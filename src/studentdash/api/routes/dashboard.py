"""Dashboard overview endpoint."""

from fastapi import APIRouter

from studentdash.api.dependencies import SessionDep
from studentdash.api.models import APIResponse, DashboardResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=APIResponse[DashboardResponse])
async def get_dashboard(session: SessionDep) -> APIResponse[DashboardResponse]:
    """Overview cards, status split and recent activity."""
    return APIResponse(
        data=DashboardResponse(
            stats=session.stats(),
            distribution=session.status_distribution(),
            recent_activity=session.recent_activity(),
        )
    )
