"""Search document building."""

import uuid
from typing import Iterable, List

from sitesearch.domain.page import PageSource, Section, SearchDocument
from sitesearch.pipeline.decode import inflate
from sitesearch.pipeline.sections import slug, split_into_sections


def build_documents(
    page: PageSource,
    sections: Iterable[Section] | None = None,
) -> List[SearchDocument]:
    """Build one search document per page section.

    Args:
        page: Source page
        sections: Pre-split sections; decoded and split from the page
            content when omitted

    Returns:
        Documents in section order

    Raises:
        DecodeError: If sections are omitted and the page content is corrupt
    """
    if sections is None:
        sections = split_into_sections(inflate(page.compressed_content))

    site_section = page.site_section

    return [
        SearchDocument(
            id=str(uuid.uuid4()),
            path=f"{page.pathname}#{slug(section.title)}",
            site_section=site_section,
            page_title=page.title,
            page_section_title=section.title,
            page_section_content=section.content,
        )
        for section in sections
    ]
