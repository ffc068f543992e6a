"""HTML parsing and element lookup helpers built on BeautifulSoup."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def parse_document(html: str) -> BeautifulSoup:
    """Parse a whole HTML document the way a browser would."""
    return BeautifulSoup(html, "html5lib")


def select_contains(document: Tag, css_selector: str, text: str) -> list[Tag]:
    """Return the elements matching ``css_selector`` with a text node holding ``text``.

    Raises ValueError when the selector cannot be parsed.
    """
    try:
        elements = document.select(css_selector)
    except Exception as exc:  # the selector engine raises its own syntax error type
        raise ValueError(f"Invalid CSS selector: {css_selector!r}") from exc
    return [
        element
        for element in elements
        if any(text in piece for piece in element.strings)
    ]


def next_element_sibling(element: Tag) -> Tag | None:
    """Return the next sibling that is an element, skipping text and comments."""
    return element.find_next_sibling()