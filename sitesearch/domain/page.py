"""Page, section and search document entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PageSource:
    """Immutable page record from the content feed.

    Attributes:
        pathname: Site-relative page path (e.g., "learn/getting-started/intro")
        title: Page title
        compressed_content: Base64-encoded, deflate-compressed page markdown
    """

    pathname: str
    title: str
    compressed_content: str | bytes

    @classmethod
    def from_dict(cls, data: dict) -> "PageSource":
        """Create a page from a feed record.

        Args:
            data: Record with ``pathname``, ``title`` and ``content`` keys

        Returns:
            PageSource instance
        """
        return cls(
            pathname=data.get("pathname") or "",
            title=data.get("title") or "",
            compressed_content=data.get("content") or "",
        )

    @property
    def site_section(self) -> str:
        """First segment of the pathname."""
        return self.pathname.split("/")[0]


@dataclass(frozen=True, slots=True)
class Section:
    """Heading-delimited part of a page.

    Attributes:
        title: Heading text without the leading markers
        body_lines: Lines between this heading and the next one
    """

    title: str
    body_lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def content(self) -> str:
        return "\n".join(self.body_lines)


@dataclass(frozen=True, slots=True)
class SearchDocument:
    """Immutable document as ingested by the search index.

    One document is produced per page section.

    Attributes:
        id: Unique document identifier (random UUID)
        path: Page pathname plus section anchor (e.g., "learn/intro#install")
        site_section: First segment of the page pathname
        page_title: Title of the page the section belongs to
        page_section_title: Section heading text
        page_section_content: Section body text
    """

    id: str
    path: str
    site_section: str
    page_title: str
    page_section_title: str
    page_section_content: str

    def to_dict(self) -> dict:
        """Convert document to the index's field naming (JSONL format)."""
        return {
            "id": self.id,
            "path": self.path,
            "siteSection": self.site_section,
            "pageTitle": self.page_title,
            "pageSectionTitle": self.page_section_title,
            "pageSectionContent": self.page_section_content,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchDocument":
        """Create document from an index record.

        Args:
            data: Dictionary with camelCase index fields

        Returns:
            SearchDocument instance
        """
        return cls(
            id=data["id"],
            path=data["path"],
            site_section=data.get("siteSection", ""),
            page_title=data.get("pageTitle", ""),
            page_section_title=data.get("pageSectionTitle", ""),
            page_section_content=data.get("pageSectionContent", ""),
        )
