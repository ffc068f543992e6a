"""Construction of the registrar course search URL."""

from __future__ import annotations

import logging

from .models import CourseSearch

logger = logging.getLogger(__name__)

_FACULTY_ID = "all"
_MAX_ROWS = 50


def build_search_url(base_url: str, params: CourseSearch) -> str:
    """Return the search page URL for the given course search."""
    url = (
        f"{base_url}?coursestatus=O00&facultyid={_FACULTY_ID}"
        f"&acadyear={params.acad_year}&semester={params.semester}"
        f"&coursecode={params.course_code}&coursename={params.course_name}"
        f"&maxrow={_MAX_ROWS}"
    )
    logger.info("Url for scrape: %s", url)
    return url