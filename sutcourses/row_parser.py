"""Parsing of one row of the registrar's course search table."""

from __future__ import annotations

import re
from dataclasses import replace

import httpx
from bs4 import Tag

from .constants import describe_course_status
from .course_details import scrape_course_details
from .fetch import fetch_html
from .models import ClassSchedule, CourseBase, CourseDetailResponse, Seat
from .string_utils import extract_value_in_brackets, trim_space

_REGISTRAR_URL = "http://reg.sut.ac.th/registrar/"

_COURSE_CODE = "td:nth-child(2)"
_COURSE_LINK = "td:nth-child(2) a"
_PROFESSORS = "td:nth-child(3) font[color='#407060'] li"
_NOTE = "td:nth-child(3) font[color='#660000']"
_CREDIT = "td:nth-child(4)"
_LANGUAGE = "td:nth-child(5)"
_DEGREE = "td:nth-child(8)"
_SECTION = "td:nth-child(8)"
_STATUS = "td:nth-child(12)"
_SEAT_TOTAL = "td:nth-child(9)"
_SEAT_REGISTERED = "td:nth-child(10)"
_SEAT_REMAIN = "td:nth-child(11)"
_ROOMS = "td:nth-child(7) u"
_SCHEDULE = "td:nth-child(7) > font"

_TIME_SLOT = re.compile(r"\d{2}:\d{2}-\d{2}:\d{2}")
_DAY = re.compile(r"Mo|Tu|We|Th|Fr|Sa|Su")


def split_course_code(text: str) -> tuple[str, str]:
    """Split "<code> - <version>" into its two trimmed parts."""
    parts = text.split("-")
    version = parts[1].strip() if len(parts) > 1 else ""
    return parts[0].strip(), version


def parse_schedule_text(text: str) -> list[ClassSchedule]:
    """Pair the days and time slots found in a schedule cell, in order."""
    times = _TIME_SLOT.findall(text)
    days = _DAY.findall(text)
    return [ClassSchedule(day=day, times=slot) for slot, day in zip(times, days)]


class CourseRowParser:
    """Reads the base course data out of one search-result table row."""

    def __init__(self, row: Tag) -> None:
        self.row = row

    def parse_base_data(self) -> CourseBase:
        """Extract everything the row itself shows about one course section."""
        course_code, version = split_course_code(self._text(_COURSE_CODE))
        return CourseBase(
            course_code=course_code,
            version=version,
            url=self._course_url(),
            note=extract_value_in_brackets(self._text(_NOTE)),
            professors=[item.get_text() for item in self.row.select(_PROFESSORS)],
            credit=self._text(_CREDIT),
            section=self._text(_SECTION),
            status_section=describe_course_status(self._text(_STATUS)),
            language=trim_space(self._text(_LANGUAGE).split(":")[0]),
            degree=self._text(_DEGREE),
            class_schedule=self._schedule(),
            seat=Seat(
                total_seat=self._text(_SEAT_TOTAL),
                registered=self._text(_SEAT_REGISTERED),
                remain=self._text(_SEAT_REMAIN),
            ),
        )

    def _text(self, selector: str) -> str:
        element = self.row.select_one(selector)
        return trim_space(element.get_text()) if element is not None else ""

    def _course_url(self) -> str:
        link = self.row.select_one(_COURSE_LINK)
        href = link.get("href") if link is not None else None
        if href is None:
            return ""
        return f"{_REGISTRAR_URL}{href}".strip()

    def _schedule(self) -> list[ClassSchedule]:
        rooms = [trim_space(room.get_text()) for room in self.row.select(_ROOMS)]
        schedules = parse_schedule_text(self._text(_SCHEDULE))
        return [replace(entry, room=room) for entry, room in zip(schedules, rooms)]


async def fetch_course_details(
    url: str, client: httpx.AsyncClient | None = None
) -> CourseDetailResponse | None:
    """Download and parse the detail page of one course."""
    html = await fetch_html(url, client)
    return scrape_course_details(html)