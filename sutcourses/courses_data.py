"""Scraping of the registrar course search table into grouped courses."""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Awaitable, Callable, Iterable, Optional

from .html_utils import parse_document
from .models import (
    Course,
    CourseBase,
    CourseDetailResponse,
    CourseDetails,
    CourseName,
    Exam,
    GroupedCourse,
    Section,
)
from .row_parser import CourseRowParser, fetch_course_details

logger = logging.getLogger(__name__)

_COURSE_ROW = "table:nth-child(2) tr[valign]"

FetchDetails = Callable[[str], Awaitable[Optional[CourseDetailResponse]]]


def extract_base_rows(html: str) -> list[CourseBase]:
    """Read the base data of every course row on a search result page."""
    if not html.strip():
        return []
    document = parse_document(html)
    return [CourseRowParser(row).parse_base_data() for row in document.select(_COURSE_ROW)]


def _copy(items: Optional[list[str]]) -> Optional[list[str]]:
    return list(items) if items is not None else None


def _build_course(base: CourseBase, detail: Optional[CourseDetailResponse]) -> Course:
    details = CourseDetails(
        course_status=detail.course_status if detail else "",
        course_condition=list(detail.course_condition) if detail else None,
        continue_course=list(detail.continue_course) if detail else None,
        equivalent_course=list(detail.equivalent_course) if detail else None,
        mid_exam=detail.midterm if detail else None,
        final_exam=detail.final if detail else None,
    )
    return Course(
        id=str(uuid.uuid4()),
        url=base.url,
        course_code=base.course_code,
        version=base.version,
        course_name_en=detail.course_name_en if detail else "",
        course_name_th=detail.course_name_th if detail else None,
        faculty=detail.faculty if detail else "",
        department=detail.department if detail else "",
        note=base.note,
        professors=base.professors,
        credit=base.credit,
        section=base.section,
        status_section=base.status_section,
        language=base.language,
        degree=base.degree,
        class_schedule=base.class_schedule,
        seat=base.seat,
        details=details,
    )


async def _course_with_details(base: CourseBase, fetch: FetchDetails) -> Course:
    return _build_course(base, await fetch(base.url))


async def scrape_course_data(
    html: str, fetch_details: Optional[FetchDetails] = None
) -> list[GroupedCourse]:
    """Scrape a search page, fetch each course's details and group the sections.

    ``fetch_details`` loads the detail page of a course URL; by default it is
    downloaded from the registrar. Its errors propagate.
    """
    if not html.strip():
        logger.debug("Received empty or whitespace-only HTML for course scraping")
        return []

    fetch = fetch_details or fetch_course_details
    bases = await asyncio.to_thread(extract_base_rows, html)
    courses = await asyncio.gather(*(_course_with_details(base, fetch) for base in bases))
    return group_courses(courses)


def _section(course: Course) -> Section:
    return Section(
        id=course.id,
        url=course.url,
        section=course.section,
        status=course.status_section,
        note=course.note,
        professors=list(course.professors),
        language=course.language,
        seat=course.seat,
        class_schedule=list(course.class_schedule),
        exams=Exam(midterm=course.details.mid_exam, final=course.details.final_exam),
    )


def _new_group(course: Course) -> GroupedCourse:
    return GroupedCourse(
        course_code=course.course_code,
        version=course.version,
        course_name=CourseName(en=course.course_name_en, th=course.course_name_th),
        credit=course.credit,
        degree=course.degree,
        department=course.department,
        faculty=course.faculty,
        course_status=course.details.course_status,
        course_condition=_copy(course.details.course_condition),
        continue_course=_copy(course.details.continue_course),
        equivalent_course=_copy(course.details.equivalent_course),
        sections_count=0,
        sections=[],
    )


def group_courses(courses: Iterable[Course]) -> list[GroupedCourse]:
    """Group course sections by code and version, keeping the first of each section."""
    groups: dict[str, GroupedCourse] = {}
    for course in courses:
        key = f"{course.course_code}-{course.version}"
        group = groups.get(key)
        if group is None:
            group = groups[key] = _new_group(course)
        if all(existing.section != course.section for existing in group.sections):
            group.sections.append(_section(course))
        group.sections_count = len(group.sections)
    return list(groups.values())