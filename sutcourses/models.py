"""Data records for course searches and scraped course information."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Mapping, Optional

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MAX_SEMESTER = 255


@dataclass
class CourseSearch:
    acad_year: str
    semester: int
    course_code: str
    course_name: str

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "CourseSearch":
        """Build a search from query parameters; raise ValueError if invalid."""
        for name in ("acad_year", "semester", "course_code", "course_name"):
            if name not in query:
                raise ValueError(f"missing field `{name}`")
        semester_text = str(query["semester"])
        if not _UNSIGNED.fullmatch(semester_text) or int(semester_text) > _MAX_SEMESTER:
            raise ValueError(f"invalid semester: {semester_text!r}")
        return cls(
            acad_year=str(query["acad_year"]),
            semester=int(semester_text),
            course_code=str(query["course_code"]),
            course_name=str(query["course_name"]),
        )


@dataclass
class CourseRequirements:
    course_condition: list[str]
    continue_course: list[str]
    equivalent_course: list[str]


@dataclass
class ExamInfo:
    date: str
    month: str
    times: str
    year: str
    room: str


@dataclass
class Exam:
    midterm: Optional[ExamInfo]
    final: Optional[ExamInfo]


@dataclass
class CourseDetailResponse:
    course_name_en: str
    course_name_th: str
    faculty: str
    department: str
    course_status: str
    course_condition: list[str]
    continue_course: list[str]
    equivalent_course: list[str]
    midterm: Optional[ExamInfo]
    final: Optional[ExamInfo]


@dataclass
class CourseTableResponse:
    url: str
    course_code: str
    credit: str


@dataclass
class CourseName:
    en: str
    th: Optional[str]


@dataclass
class ClassSchedule:
    day: str
    times: str
    room: Optional[str] = None


@dataclass
class Seat:
    total_seat: str
    registered: str
    remain: str


@dataclass
class CourseDetails:
    course_status: str
    course_condition: Optional[list[str]]
    continue_course: Optional[list[str]]
    equivalent_course: Optional[list[str]]
    mid_exam: Optional[ExamInfo]
    final_exam: Optional[ExamInfo]


@dataclass
class Course:
    id: str = field(compare=False)
    url: str
    course_code: str
    version: str
    course_name_en: str
    course_name_th: Optional[str]
    faculty: str
    department: str
    note: Optional[str]
    professors: list[str]
    credit: str
    section: str
    status_section: str
    language: str
    degree: str
    class_schedule: list[ClassSchedule]
    seat: Seat
    details: CourseDetails


@dataclass
class CourseBase:
    course_code: str
    version: str
    url: str
    note: Optional[str]
    professors: list[str]
    credit: str
    section: str
    status_section: str
    language: str
    degree: str
    class_schedule: list[ClassSchedule]
    seat: Seat


@dataclass
class Section:
    id: str = field(compare=False)
    url: str = field(compare=False)
    section: str
    status: str
    note: Optional[str]
    professors: list[str]
    language: str
    seat: Seat = field(compare=False)
    class_schedule: list[ClassSchedule]
    exams: Exam


@dataclass
class GroupedCourse:
    course_code: str
    version: str
    course_name: CourseName
    credit: str
    degree: str
    department: str
    faculty: str
    course_status: str
    course_condition: Optional[list[str]]
    continue_course: Optional[list[str]]
    equivalent_course: Optional[list[str]]
    sections_count: int
    sections: list[Section]


def to_json_dict(obj: Any) -> Any:
    """Turn a record, or a list of records, into JSON-ready plain data."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (list, tuple)):
        return [to_json_dict(item) for item in obj]
    return obj