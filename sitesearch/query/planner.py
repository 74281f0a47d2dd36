"""Query planning: UI state -> search request."""

from sitesearch.domain.search import QueryState, SearchRequest
from sitesearch.query.facets import ALL_FACET, FACET_FIELD, FacetMap

RESULT_LIMIT = 8

# Section title > section body > page title
BOOST = {
    "pageSectionTitle": 4,
    "pageSectionContent": 2.5,
    "pageTitle": 1,
}


def _facet_request() -> dict[str, dict]:
    return {FACET_FIELD: {}}


def _section_filter(section: str) -> dict[str, dict]:
    return {FACET_FIELD: {"eq": section}}


def build_search_request(
    state: QueryState,
    facet_map: FacetMap | None = None,
    limit: int = RESULT_LIMIT,
) -> SearchRequest:
    """Build the search request for the current UI state.

    Facet index 0 always means "no filter". Any other index filters
    ``siteSection`` on the facet name at that position, even if that name
    happens to be "all".

    Args:
        state: Current term and selected facet index
        facet_map: Facet map used to resolve the selected index
        limit: Maximum number of hits

    Returns:
        SearchRequest for the search service

    Raises:
        ValueError: If the selected facet index is out of range
    """
    facet_map = facet_map or FacetMap.empty()

    where = None
    if state.selected_facet_index != 0:
        where = _section_filter(facet_map.name_at(state.selected_facet_index))

    return SearchRequest(
        term=state.term,
        limit=limit,
        boost=dict(BOOST),
        facets=_facet_request(),
        where=where,
    )


def build_initial_facets_request(limit: int = RESULT_LIMIT) -> SearchRequest:
    """Empty-term request used to show the initial facet counts."""
    return SearchRequest(term="", limit=limit, facets=_facet_request())


def build_section_request(
    term: str,
    section: str | None = None,
    limit: int = RESULT_LIMIT,
) -> SearchRequest:
    """Build a request for the full search view from a section name.

    The full search view receives the facet name from its URL, so "all"
    (or no section) means unfiltered there.
    """
    where = None
    if section and section != ALL_FACET:
        where = _section_filter(section)

    return SearchRequest(
        term=term,
        limit=limit,
        boost=dict(BOOST),
        facets=_facet_request(),
        where=where,
    )
