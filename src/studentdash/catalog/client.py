"""Course catalog client backed by a fixed mock catalog."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence

from studentdash.catalog.exceptions import TransientFetchError
from studentdash.catalog.models import Course

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.8
DEFAULT_FAILURE_RATE = 0.05
FETCH_ERROR_MESSAGE = "Failed to fetch courses. Please try again."

MOCK_COURSES: tuple[Course, ...] = (
    Course(
        id="1",
        name="Introduction to React",
        instructor="Sarah Johnson",
        description="Learn the fundamentals of React including components, state, and props.",
        duration="8 weeks",
        category="Frontend Development",
        enrolled_students=24,
        max_students=30,
    ),
    Course(
        id="2",
        name="Advanced JavaScript",
        instructor="Michael Chen",
        description="Deep dive into ES6+, async programming, and modern JavaScript patterns.",
        duration="10 weeks",
        category="Programming",
        enrolled_students=18,
        max_students=25,
    ),
    Course(
        id="3",
        name="UI/UX Design Principles",
        instructor="Emily Rodriguez",
        description="Master the principles of user interface and user experience design.",
        duration="6 weeks",
        category="Design",
        enrolled_students=15,
        max_students=20,
    ),
    Course(
        id="4",
        name="Node.js Backend Development",
        instructor="David Kim",
        description="Build scalable backend applications with Node.js and Express.",
        duration="12 weeks",
        category="Backend Development",
        enrolled_students=22,
        max_students=28,
    ),
    Course(
        id="5",
        name="Database Design & SQL",
        instructor="Lisa Thompson",
        description="Learn database design principles and master SQL queries.",
        duration="8 weeks",
        category="Database",
        enrolled_students=19,
        max_students=25,
    ),
)


class CourseCatalogClient:
    """Simulated remote course catalog.

    Each fetch waits ``delay`` seconds and then fails with probability
    ``failure_rate``. Successful fetches always return the same catalog.
    """

    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        failure_rate: float = DEFAULT_FAILURE_RATE,
        rng: random.Random | None = None,
        courses: Sequence[Course] = MOCK_COURSES,
    ) -> None:
        """Initialize the client.

        Args:
            delay: Simulated latency in seconds.
            failure_rate: Probability in [0, 1] that a fetch fails.
            rng: Random source for the failure draw.
            courses: Catalog served by this client.
        """
        self.delay = delay
        self.failure_rate = failure_rate
        self._rng = rng if rng is not None else random.Random()
        self._courses = tuple(courses)

    async def fetch_courses(self) -> list[Course]:
        """Fetch the full catalog.

        Returns:
            All catalog courses.

        Raises:
            TransientFetchError: On a simulated failure.
        """
        await asyncio.sleep(self.delay)
        if self._rng.random() < self.failure_rate:
            logger.warning("Simulated catalog fetch failure")
            raise TransientFetchError(FETCH_ERROR_MESSAGE)
        return list(self._courses)

    def get_course_by_id(self, course_id: str) -> Course | None:
        """Look up a course without the simulated network round trip."""
        for course in self._courses:
            if course.id == course_id:
                return course
        return None


class CourseCatalog:
    """Load state of the course catalog as shown to the user.

    Holds the last successfully fetched courses, whether a fetch is in flight
    and the message of the last failure. Fetches cannot be cancelled; when two
    loads overlap, whichever finishes last decides the final state.
    """

    def __init__(self, client: CourseCatalogClient) -> None:
        self._client = client
        self.courses: list[Course] = []
        self.loading = False
        self.error: str | None = None

    @property
    def client(self) -> CourseCatalogClient:
        return self._client

    async def load(self) -> list[Course]:
        """Fetch the catalog and record the outcome.

        Failures are recorded in ``error`` rather than raised.

        Returns:
            The current course list (unchanged on failure).
        """
        self.loading = True
        self.error = None
        try:
            self.courses = await self._client.fetch_courses()
            logger.info("Loaded %d courses", len(self.courses))
        except TransientFetchError as e:
            self.error = str(e)
        finally:
            self.loading = False
        return self.courses

    async def retry(self) -> list[Course]:
        """Re-run the fetch from scratch after a failure."""
        return await self.load()
