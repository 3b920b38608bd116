"""CLI entry point for studentdash."""

from __future__ import annotations

import asyncio
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from studentdash.config import ConfigError, Settings
from studentdash.logging import setup_logging
from studentdash.session import DashboardSession
from studentdash.students import StudentInput, StudentNotFoundError, StudentStatus
from studentdash.view import FilterSpec, SortDirection, SortField, StatusFilter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from studentdash.students import Student


def _load_settings(db_path: str | None) -> Settings:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    if db_path is not None:
        settings.db_path = db_path
    return settings


@contextmanager
def _open_session(db_path: str | None) -> Iterator[DashboardSession]:
    session = DashboardSession.from_settings(_load_settings(db_path))
    try:
        yield session
    finally:
        session.close()


def _load_catalog(session: DashboardSession) -> None:
    asyncio.run(session.load_courses())
    if session.catalog.error:
        click.echo(f"Warning: {session.catalog.error}", err=True)


def _format_row(student: Student) -> str:
    courses = ",".join(student.course_ids) or "-"
    enrolled = student.enrollment_date.strftime("%Y-%m-%d")
    return (
        f"{student.id[:8]}  {student.name:<30} {student.email:<32} "
        f"{student.status:<8} {enrolled}  {courses}"
    )


db_option = click.option(
    "--db",
    "db_path",
    default=None,
    help="SQLite database file (overrides STUDENTDASH_DB_PATH).",
)


@click.group()
@click.version_option(package_name="studentdash")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to the console.")
def main(verbose: bool) -> None:
    """studentdash - manage students, browse courses, watch the numbers."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@db_option
def serve(host: str, port: int, db_path: str | None) -> None:
    """Run the REST API."""
    import uvicorn  # noqa: PLC0415

    from studentdash.api import create_app  # noqa: PLC0415

    app = create_app(_load_settings(db_path))
    uvicorn.run(app, host=host, port=port)


@main.command("students")
@click.option(
    "--status",
    type=click.Choice([s.value for s in StatusFilter]),
    default=StatusFilter.ALL.value,
    show_default=True,
)
@click.option("--course", default="", help="Only students enrolled in this course ID.")
@click.option("--search", default="", help="Match name, email or course name.")
@click.option(
    "--sort",
    "sort_field",
    type=click.Choice([f.value for f in SortField]),
    default=SortField.NAME.value,
    show_default=True,
)
@click.option("--desc", is_flag=True, help="Sort descending.")
@click.option("--page", default=1, show_default=True, type=click.IntRange(min=1))
@db_option
def list_students(
    status: str,
    course: str,
    search: str,
    sort_field: str,
    desc: bool,
    page: int,
    db_path: str | None,
) -> None:
    """Show one page of the student table."""
    with _open_session(db_path) as session:
        if search:
            _load_catalog(session)
        session.set_filter(FilterSpec(status=StatusFilter(status), course=course, search=search))
        session.set_sort(SortField(sort_field), SortDirection.DESC if desc else SortDirection.ASC)
        session.set_page(page)
        result = session.view()
        for student in result.items:
            click.echo(_format_row(student))
        if result.total_count:
            click.echo(
                f"Showing {result.first_index} to {result.last_index} of "
                f"{result.total_count} students (page {result.page}/{result.total_pages})"
            )
        else:
            click.echo("No students found.")


@main.command()
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--course", "course_ids", multiple=True, help="Course ID, repeatable.")
@click.option("--image", "profile_image", default="", help="Profile image URL.")
@click.option("--inactive", is_flag=True, help="Create the student as inactive.")
@db_option
def add(
    name: str,
    email: str,
    course_ids: tuple[str, ...],
    profile_image: str,
    inactive: bool,
    db_path: str | None,
) -> None:
    """Add a student."""
    data = StudentInput(
        name=name,
        email=email,
        course_ids=list(course_ids),
        profile_image=profile_image,
        status=StudentStatus.INACTIVE if inactive else StudentStatus.ACTIVE,
    )
    with _open_session(db_path) as session:
        result = session.save_student(data)
        if not result.ok:
            for field, message in result.errors.items():
                click.echo(f"{field}: {message}", err=True)
            sys.exit(1)
        click.echo(f"{result.student.name} has been added ({result.student.id})")


@main.command()
@click.argument("student_id")
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@db_option
def delete(student_id: str, yes: bool, db_path: str | None) -> None:
    """Delete a student."""
    with _open_session(db_path) as session:

        def confirm(student: Student) -> bool:
            return yes or click.confirm(f"Are you sure you want to delete {student.name}?")

        try:
            deleted = session.delete_student(student_id, confirm)
        except StudentNotFoundError as e:
            click.echo(str(e), err=True)
            sys.exit(1)
        click.echo("Deleted." if deleted else "Cancelled.")


@main.command()
@db_option
def stats(db_path: str | None) -> None:
    """Show dashboard numbers."""
    with _open_session(db_path) as session:
        _load_catalog(session)
        overview = session.stats()
        distribution = session.status_distribution()
        click.echo(f"Total students:   {overview.total_students}")
        click.echo(f"Active courses:   {overview.active_courses}")
        click.echo(f"Completion rate:  {overview.completion_rate}%")
        click.echo(f"New enrollments:  {overview.new_enrollments}")
        click.echo(
            f"Active/inactive:  {distribution.active} ({distribution.active_percentage}%) / "
            f"{distribution.inactive} ({distribution.inactive_percentage}%)"
        )


@main.command()
@db_option
def courses(db_path: str | None) -> None:
    """List the course catalog."""
    with _open_session(db_path) as session:
        _load_catalog(session)
        if session.catalog.error:
            sys.exit(1)
        for course in session.courses:
            click.echo(
                f"{course.id:>3}  {course.name:<30} {course.instructor:<18} "
                f"{course.enrolled_students}/{course.max_students}  {course.duration}"
            )


if __name__ == "__main__":
    main()
