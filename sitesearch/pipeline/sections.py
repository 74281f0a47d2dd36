"""Heading-based section splitting."""

import re
from typing import List

from sitesearch.domain.page import Section

HEADING_RE = re.compile(r"^#{1,6}\s")
HEADING_PREFIX_RE = re.compile(r"^#{1,6}\s*")

# Characters GitHub drops from heading anchors (word chars, "-" and " " survive)
_ANCHOR_STRIP_RE = re.compile(r"[^\w\- ]")


def split_into_sections(raw_text: str) -> List[Section]:
    """Split page text into sections at ATX-style headings.

    Lines before the first heading are dropped. A heading directly followed
    by another heading yields a section with an empty body.

    Args:
        raw_text: Decompressed page markdown

    Returns:
        Sections in document order
    """
    sections: List[Section] = []
    title: str | None = None
    body: list[str] = []

    for line in raw_text.split("\n"):
        if HEADING_RE.match(line):
            if title is not None:
                sections.append(Section(title=title, body_lines=tuple(body)))
            title = HEADING_PREFIX_RE.sub("", line)
            body = []
        elif title is not None:
            body.append(line)

    if title is not None:
        sections.append(Section(title=title, body_lines=tuple(body)))

    return sections


def slug(title: str) -> str:
    """GitHub heading anchor: lowercase, punctuation dropped, each space a hyphen.

    Underscores and hyphen runs are kept as-is, so `__dirname` stays
    `__dirname` and "a - b" becomes "a---b".
    """
    return _ANCHOR_STRIP_RE.sub("", title.lower()).replace(" ", "-")
