"""Course catalog endpoints."""

from fastapi import APIRouter

from studentdash.api.dependencies import SessionDep
from studentdash.api.models import APIResponse, CatalogResponse
from studentdash.catalog import Course, CourseNotFoundError, TransientFetchError
from studentdash.session import DashboardSession

router = APIRouter(prefix="/courses", tags=["courses"])


def _catalog_response(session: DashboardSession) -> APIResponse[CatalogResponse]:
    catalog = session.catalog
    if catalog.error is not None:
        raise TransientFetchError(catalog.error)
    return APIResponse(data=CatalogResponse(courses=catalog.courses, loading=catalog.loading))


@router.get("", response_model=APIResponse[CatalogResponse])
async def list_courses(session: SessionDep) -> APIResponse[CatalogResponse]:
    """The loaded catalog. Loads it first if no fetch has happened yet."""
    catalog = session.catalog
    if not catalog.courses and not catalog.loading and catalog.error is None:
        await session.load_courses()
    return _catalog_response(session)


@router.post("/retry", response_model=APIResponse[CatalogResponse])
async def retry_courses(session: SessionDep) -> APIResponse[CatalogResponse]:
    """Fetch the catalog again from scratch."""
    await session.retry_catalog_fetch()
    return _catalog_response(session)


@router.get("/{course_id}", response_model=APIResponse[Course])
async def get_course(course_id: str, session: SessionDep) -> APIResponse[Course]:
    """Get a catalog course by ID."""
    course = session.catalog.client.get_course_by_id(course_id)
    if course is None:
        raise CourseNotFoundError(f"Course with id '{course_id}' not found")
    return APIResponse(data=course)
