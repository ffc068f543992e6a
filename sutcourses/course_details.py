"""Scraping of a single course's detail page."""

from __future__ import annotations

import logging
from itertools import groupby

from bs4 import BeautifulSoup, Tag

from .exam_info import extract_exam_info
from .html_utils import next_element_sibling, parse_document, select_contains
from .models import CourseDetailResponse, CourseRequirements, Exam, ExamInfo

logger = logging.getLogger(__name__)

_COURSE_TABLE = (
    "td:nth-child(3) > table:nth-child(2) > tbody > tr > td:nth-child(2) > table > tbody"
)
_COURSE_NAME_EN = "tr:nth-child(1) > td:nth-child(2) > b > font"
_COURSE_NAME_TH = "tr:nth-child(2) > td:nth-child(2) > font"
_FACULTY = "tr:nth-child(3) > td:nth-child(3) > font"
_COURSE_STATUS = "tr:nth-child(5) > td:nth-child(3) > font"

_NOT_AVAILABLE = "N/A"

_CONDITION_LABEL = "เงื่อนไขรายวิชา"
_CONTINUE_LABEL = "รายวิชาต่อเนื่อง"
_EQUIVALENT_LABEL = "รายวิชาเทียบเท่า"
_MIDTERM_KEYWORD = "สอบกลางภาค"
_FINAL_KEYWORD = "สอบประจำภาค"


class ScrapeError(Exception):
    """Raised when a page lacks the structure the scraper relies on."""


def _first_text(element: Tag) -> str | None:
    return next(iter(element.strings), None)


def _field(table: Tag, selector: str, description: str) -> str:
    element = table.select_one(selector)
    if element is None:
        logger.warning("Could not extract %s", description)
        return _NOT_AVAILABLE
    return element.get_text().strip()


def _split_faculty(faculty_data: str) -> tuple[str, str]:
    faculty, separator, department = faculty_data.partition(", ")
    if not separator:
        return faculty_data, _NOT_AVAILABLE
    return faculty.strip(), department.strip()


def _drop_repeats(items: list[str]) -> list[str]:
    return [item for item, _ in groupby(items)]


def _linked_courses(document: BeautifulSoup, label: str) -> list[str]:
    found: list[str] = []
    for row in document.select("tr"):
        cells = row.select("td")
        if len(cells) < 2:
            continue
        label_text = _first_text(cells[1])
        if label_text is None or label not in label_text:
            continue
        for link in cells[2].select("a"):
            course_id = _first_text(link)
            if course_id is not None:
                found.append(course_id)
    return _drop_repeats(found)


def _requirements(document: BeautifulSoup) -> CourseRequirements:
    return CourseRequirements(
        course_condition=_linked_courses(document, _CONDITION_LABEL),
        continue_course=_linked_courses(document, _CONTINUE_LABEL),
        equivalent_course=_linked_courses(document, _EQUIVALENT_LABEL),
    )


def _exam(document: BeautifulSoup, keyword: str) -> ExamInfo | None:
    for cell in select_contains(document, "td", keyword):
        sibling = next_element_sibling(cell)
        if sibling is None:
            continue
        info = extract_exam_info(" ".join(sibling.strings).strip())
        if info is not None:
            return info
    return None


def _exams(document: BeautifulSoup) -> Exam:
    return Exam(
        midterm=_exam(document, _MIDTERM_KEYWORD),
        final=_exam(document, _FINAL_KEYWORD),
    )


def scrape_course_details(html: str) -> CourseDetailResponse | None:
    """Parse a course detail page; None for an empty page.

    Raises ScrapeError when the course details table is missing.
    """
    if not html.strip():
        logger.debug("Received empty HTML for course details scraping")
        return None

    document = parse_document(html)
    table = document.select_one(_COURSE_TABLE)
    if table is None:
        raise ScrapeError("No course details table found in HTML")

    course_name_en = _field(table, _COURSE_NAME_EN, "English course name")
    course_name_th = _field(table, _COURSE_NAME_TH, "Thai course name")
    faculty_data = _field(table, _FACULTY, "faculty information")
    course_status = _field(table, _COURSE_STATUS, "course status")
    faculty, department = _split_faculty(faculty_data)

    requirements = _requirements(document)
    exams = _exams(document)

    return CourseDetailResponse(
        course_name_en=course_name_en,
        course_name_th=course_name_th,
        faculty=faculty,
        department=department,
        course_status=course_status,
        course_condition=requirements.course_condition,
        continue_course=requirements.continue_course,
        equivalent_course=requirements.equivalent_course,
        midterm=exams.midterm,
        final=exams.final,
    )


def scrape_course_requirements(html: str) -> CourseRequirements:
    """Collect the prerequisite, follow-on and equivalent course codes."""
    return _requirements(parse_document(html))


def scrape_course_exams(html: str) -> Exam:
    """Collect the midterm and final exam schedule of a course page."""
    return _exams(parse_document(html))