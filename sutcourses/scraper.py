"""Course search back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import Optional

import httpx

from .courses_data import scrape_course_data
from .fetch import fetch_html
from .models import CourseSearch, GroupedCourse
from .row_parser import fetch_course_details
from .search_url import build_search_url


class CourseScraper(ABC):
    """Something that can answer a course search."""

    @abstractmethod
    async def search_courses(self, search: CourseSearch) -> list[GroupedCourse]:
        """Return the courses matching ``search``, grouped by code and version."""


class CourseUrlScraper(CourseScraper):
    """Searches courses by scraping the registrar's web pages."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None) -> None:
        self.base_url = base_url
        self.client = client

    async def search_courses(self, search: CourseSearch) -> list[GroupedCourse]:
        url = build_search_url(self.base_url, search)
        html = await fetch_html(url, self.client)
        return await scrape_course_data(
            html, partial(fetch_course_details, client=self.client)
        )