"""Small text helpers shared by the scrapers."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def extract_value_in_brackets(text: str) -> str | None:
    """Return the trimmed text between the first '(' and the first ')'.

    Returns None when either bracket is missing. Raises ValueError when the
    first ')' comes before the first '('.
    """
    start = text.find("(")
    end = text.find(")")
    if start == -1 or end == -1:
        return None
    if end < start + 1:
        raise ValueError(f"closing bracket precedes opening bracket in {text!r}")
    return text[start + 1 : end].strip()


def trim_space(text: str) -> str:
    """Strip the ends and collapse every whitespace run into one space."""
    return _WHITESPACE_RUN.sub(" ", text.strip())