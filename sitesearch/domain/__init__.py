"""Domain entities for the site search system.

This module contains immutable data structures shared by the offline
index-build pipeline and the runtime query layer.
"""

from sitesearch.domain.page import PageSource, Section, SearchDocument
from sitesearch.domain.search import (
    QueryState,
    SearchHit,
    SearchRequest,
    SearchResponse,
)

__all__ = [
    "PageSource",
    "Section",
    "SearchDocument",
    "QueryState",
    "SearchHit",
    "SearchRequest",
    "SearchResponse",
]
