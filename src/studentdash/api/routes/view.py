"""Student table endpoints: filter, sort, paginate."""

from fastapi import APIRouter

from studentdash.api.dependencies import SessionDep
from studentdash.api.models import (
    APIResponse,
    PageRequest,
    SortRequest,
    ViewResponse,
    view_to_response,
)
from studentdash.view import FilterSpec

router = APIRouter(prefix="/view", tags=["view"])


@router.get("", response_model=APIResponse[ViewResponse])
async def get_view(session: SessionDep) -> APIResponse[ViewResponse]:
    """Current page of the student table."""
    return APIResponse(data=view_to_response(session.view(), session))


@router.put("/filter", response_model=APIResponse[ViewResponse])
async def set_filter(filters: FilterSpec, session: SessionDep) -> APIResponse[ViewResponse]:
    """Replace the filter settings; the table returns to page 1."""
    session.set_filter(filters)
    return APIResponse(data=view_to_response(session.view(), session))


@router.put("/sort", response_model=APIResponse[ViewResponse])
async def set_sort(sort: SortRequest, session: SessionDep) -> APIResponse[ViewResponse]:
    """Change the sort order."""
    session.set_sort(sort.field, sort.direction)
    return APIResponse(data=view_to_response(session.view(), session))


@router.put("/page", response_model=APIResponse[ViewResponse])
async def set_page(body: PageRequest, session: SessionDep) -> APIResponse[ViewResponse]:
    """Move to a page; out-of-range pages are clamped."""
    session.set_page(body.page)
    return APIResponse(data=view_to_response(session.view(), session))
