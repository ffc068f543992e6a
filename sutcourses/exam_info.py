"""Parsing of the registrar's free-text exam schedule lines."""

from __future__ import annotations

import re

from .constants import month_name
from .models import ExamInfo
from .string_utils import trim_space

_TIME_MARKER = "เวลา"
_TIME_RANGE = re.compile(r"^\d{2}:\d{2}\s*-\s*\d{2}:\d{2}")


def _room_after(text: str, time_range: str) -> str:
    if not time_range:
        # Splitting on an empty separator yields one character per piece,
        # so the second piece is the first character.
        return text[:1].strip()
    pieces = text.split(time_range)
    return pieces[1].strip() if len(pieces) > 1 else ""


def extract_exam_info(raw_text: str) -> ExamInfo | None:
    """Parse "<day> <month> <year> เวลา <hh:mm-hh:mm> <room>" into an ExamInfo."""
    if not raw_text.strip():
        return None

    parts = raw_text.split(_TIME_MARKER)
    if len(parts) < 2:
        return None

    date_part = parts[0].strip()
    time_part = parts[1].strip().replace(" ", "")

    match = _TIME_RANGE.search(time_part)
    time_range = match.group(0) if match else ""
    room = _room_after(time_part, time_range)

    date_fields = date_part.split()
    if len(date_fields) < 3:
        return None

    return ExamInfo(
        date=date_fields[0],
        month=month_name(date_fields[1]),
        times=trim_space(time_range),
        year=date_fields[2],
        room=room,
    )