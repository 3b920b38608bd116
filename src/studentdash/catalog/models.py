"""Pydantic models for the course catalog."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Course(BaseModel):
    """Read-only catalog entry.

    ``max_students`` is informational; nothing checks enrollments against it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    instructor: str
    description: str
    duration: str
    category: str
    enrolled_students: int
    max_students: int

    @property
    def seats_left(self) -> int:
        return max(0, self.max_students - self.enrolled_students)
