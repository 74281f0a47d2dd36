"""Runtime query layer: planning, facets, presentation and control."""

from sitesearch.query.controller import PendingSearch, SearchController, get_initial_facets
from sitesearch.query.facets import ALL_FACET, FACET_FIELD, FacetMap, aggregate_facets
from sitesearch.query.highlight import Highlighter
from sitesearch.query.planner import (
    BOOST,
    RESULT_LIMIT,
    build_initial_facets_request,
    build_search_request,
    build_section_request,
)
from sitesearch.query.presenter import (
    DisplayKind,
    DisplayState,
    ResultItem,
    ResultPresenter,
    derive_breadcrumbs,
    select_display_state,
)

__all__ = [
    # Facets
    "ALL_FACET",
    "FACET_FIELD",
    "FacetMap",
    "aggregate_facets",
    # Planning
    "BOOST",
    "RESULT_LIMIT",
    "build_initial_facets_request",
    "build_search_request",
    "build_section_request",
    # Presentation
    "DisplayKind",
    "DisplayState",
    "Highlighter",
    "ResultItem",
    "ResultPresenter",
    "derive_breadcrumbs",
    "select_display_state",
    # Control
    "PendingSearch",
    "SearchController",
    "get_initial_facets",
]
