"""Site search: section document pipeline and faceted query layer."""

__version__ = "0.1.0"

# Domain entities
from sitesearch.domain import (
    PageSource,
    QueryState,
    SearchDocument,
    SearchRequest,
    SearchResponse,
    Section,
)

# Errors
from sitesearch.errors import DecodeError, FetchError, SearchError, SiteSearchError

# Pipeline components
from sitesearch.pipeline import (
    Config,
    ContentFeed,
    IndexPipeline,
    build_documents,
    inflate,
    run_pipeline,
    split_into_sections,
)

# Search clients
from sitesearch.search import OramaCloudClient, SearchClient

# Query layer
from sitesearch.query import (
    FacetMap,
    SearchController,
    aggregate_facets,
    build_search_request,
    derive_breadcrumbs,
    select_display_state,
)

__all__ = [
    # Domain
    "PageSource",
    "QueryState",
    "SearchDocument",
    "SearchRequest",
    "SearchResponse",
    "Section",
    # Errors
    "DecodeError",
    "FetchError",
    "SearchError",
    "SiteSearchError",
    # Pipeline
    "Config",
    "ContentFeed",
    "IndexPipeline",
    "build_documents",
    "inflate",
    "run_pipeline",
    "split_into_sections",
    # Search
    "OramaCloudClient",
    "SearchClient",
    # Query
    "FacetMap",
    "SearchController",
    "aggregate_facets",
    "build_search_request",
    "derive_breadcrumbs",
    "select_display_state",
]
