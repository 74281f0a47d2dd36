"""Search term highlighting with bounded-length excerpts."""

import html
import re

ELLIPSIS = "..."


class Highlighter:
    """Wraps case-insensitive term matches in a styled HTML tag.

    Every whitespace-separated word of the search term is matched, including
    partial matches inside longer words. Text outside the tags is
    HTML-escaped.
    """

    def __init__(self, css_class: str = "font-bold", html_tag: str = "span"):
        self.css_class = css_class
        self.html_tag = html_tag

    def highlight(self, text: str, term: str) -> "HighlightedText":
        return HighlightedText(self, text, term)

    def find(self, text: str, term: str) -> list[tuple[int, int]]:
        """Return (start, end) spans of term matches in text."""
        words = sorted({w for w in term.split() if w}, key=len, reverse=True)
        if not words:
            return []

        pattern = re.compile("|".join(re.escape(w) for w in words), re.IGNORECASE)
        return [m.span() for m in pattern.finditer(text) if m.end() > m.start()]

    def render(self, text: str, positions: list[tuple[int, int]]) -> str:
        parts = []
        cursor = 0
        for start, end in positions:
            parts.append(html.escape(text[cursor:start]))
            parts.append(
                f'<{self.html_tag} class="{self.css_class}">'
                f"{html.escape(text[start:end])}</{self.html_tag}>"
            )
            cursor = end
        parts.append(html.escape(text[cursor:]))
        return "".join(parts)


class HighlightedText:
    """Result of highlighting one piece of text."""

    def __init__(self, highlighter: Highlighter, text: str, term: str):
        self._highlighter = highlighter
        self.text = text
        self.term = term
        self.positions = highlighter.find(text, term)

    @property
    def html(self) -> str:
        return self._highlighter.render(self.text, self.positions)

    def __str__(self) -> str:
        return self.html

    def trim(self, limit: int, ellipsis: bool = True) -> str:
        """Render at most ``limit`` visible characters around the first match.

        The window is cut from the plain text and highlighted afterwards, so
        a cut never lands inside a tag. Ellipses count towards the limit.

        Args:
            limit: Maximum number of visible characters
            ellipsis: Mark cut sides with "..."

        Returns:
            Highlighted HTML excerpt
        """
        text = self.text
        if len(text) <= limit:
            return self.html

        marker = ELLIPSIS if ellipsis and limit > 2 * len(ELLIPSIS) else ""

        first = self.positions[0][0] if self.positions else 0
        start = max(first - limit // 2, 0)
        # Keep the window full near the end of the text
        start = min(start, len(text) - (limit - len(marker)))

        lead = marker if start > 0 else ""
        end = start + limit - len(lead)
        trail = ""
        if end < len(text):
            trail = marker
            end -= len(trail)

        window = text[start:end]
        rendered = self._highlighter.render(
            window, self._highlighter.find(window, self.term)
        )
        return f"{lead}{rendered}{trail}"
