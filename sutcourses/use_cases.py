"""Application use cases."""

from __future__ import annotations

from .models import CourseSearch, GroupedCourse
from .scraper import CourseScraper


class SearchCoursesUseCase:
    """Runs course searches against a scraper."""

    def __init__(self, course_scraper: CourseScraper) -> None:
        self.course_scraper = course_scraper

    async def search_courses(self, search: CourseSearch) -> list[GroupedCourse]:
        """Return the grouped courses matching ``search``."""
        return await self.course_scraper.search_courses(search)