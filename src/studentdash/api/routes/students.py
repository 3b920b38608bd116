"""Student CRUD endpoints."""

from fastapi import APIRouter, Query, status

from studentdash.api.dependencies import SessionDep
from studentdash.api.exceptions import FormValidationError
from studentdash.api.models import APIResponse, DeleteResponse
from studentdash.students import Student, StudentInput

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[Student]])
async def list_students(session: SessionDep) -> APIResponse[list[Student]]:
    """List all students in stored order."""
    return APIResponse(data=session.list_students())


@router.post(
    "",
    response_model=APIResponse[Student],
    status_code=status.HTTP_201_CREATED,
)
async def create_student(student: StudentInput, session: SessionDep) -> APIResponse[Student]:
    """Create a new student."""
    result = session.save_student(student)
    if not result.ok:
        raise FormValidationError(result.errors)
    return APIResponse(data=result.student)


@router.get("/{student_id}", response_model=APIResponse[Student])
async def get_student(student_id: str, session: SessionDep) -> APIResponse[Student]:
    """Get a student by ID."""
    return APIResponse(data=session.get_student(student_id))


@router.put("/{student_id}", response_model=APIResponse[Student])
async def update_student(
    student_id: str, student: StudentInput, session: SessionDep
) -> APIResponse[Student]:
    """Replace the editable fields of a student."""
    result = session.save_student(student, student_id=student_id)
    if not result.ok:
        raise FormValidationError(result.errors)
    return APIResponse(data=result.student)


@router.delete("/{student_id}", response_model=APIResponse[DeleteResponse])
async def delete_student(
    student_id: str,
    session: SessionDep,
    confirm: bool = Query(default=False, description="Must be true for the delete to happen"),
) -> APIResponse[DeleteResponse]:
    """Delete a student. Without confirmation nothing changes."""
    deleted = session.delete_student(student_id, confirm=lambda _student: confirm)
    return APIResponse(data=DeleteResponse(deleted=deleted))
