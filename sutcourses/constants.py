"""Lookup tables for registrar course status codes and Thai month names."""

from __future__ import annotations

from types import MappingProxyType

COURSE_STATUS = MappingProxyType(
    {
        "A": "เพิ่มผ่าน WEB ได้เท่านั้น",
        "C": "ปิดไม่รับลง",
        "D": "ถอนผ่าน WEB ได้เท่านั้น",
        "N": "เปิดลงปกติ ทำการโดยเจ้าหน้าที่เท่านั้น",
        "W": "เปิดลงปกติ สามารถลงทะเบียนผ่าน WEB ได้",
        "X": "เปลี่ยนกลุ่มผ่าน WEB ได้เท่านั้น",
    }
)

MONTH_ABBREVIATIONS = MappingProxyType(
    {
        "ม.ค.": "January",
        "ก.พ.": "February",
        "มี.ค.": "March",
        "เม.ย.": "April",
        "พ.ค.": "May",
        "มิ.ย.": "June",
        "ก.ค.": "July",
        "ส.ค.": "August",
        "ก.ย.": "September",
        "ต.ค.": "October",
        "พ.ย.": "November",
        "ธ.ค.": "December",
    }
)

UNKNOWN_STATUS = "Unknown"


def describe_course_status(code: str) -> str:
    """Return the description of a section status code, or "Unknown"."""
    return COURSE_STATUS.get(code, UNKNOWN_STATUS)


def month_name(abbreviation: str) -> str:
    """Return the English month for a Thai abbreviation, else the input."""
    return MONTH_ABBREVIATIONS.get(abbreviation, abbreviation)