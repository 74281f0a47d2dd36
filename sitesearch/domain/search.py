"""Query-side entities exchanged with the search service."""

from dataclasses import dataclass, field
from typing import Any

from sitesearch.domain.page import SearchDocument


@dataclass(frozen=True, slots=True)
class QueryState:
    """UI search state.

    Attributes:
        term: Free-text search term ("" means show initial facets)
        selected_facet_index: Index into the current facet map key order
            (0 is always "all")
    """

    term: str = ""
    selected_facet_index: int = 0


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Structured request for the search service."""

    term: str
    limit: int
    boost: dict[str, float] = field(default_factory=dict)
    facets: dict[str, dict] = field(default_factory=dict)
    where: dict[str, dict] | None = None

    def to_dict(self) -> dict:
        """Convert request to the service's wire format."""
        data: dict[str, Any] = {
            "term": self.term,
            "limit": self.limit,
            "boost": dict(self.boost),
            "facets": {name: dict(opts) for name, opts in self.facets.items()},
        }
        if self.where is not None:
            data["where"] = self.where
        return data


@dataclass(frozen=True, slots=True)
class SearchHit:
    """Single ranked hit."""

    id: str
    document: SearchDocument
    score: float = 0.0


@dataclass(frozen=True, slots=True)
class SearchResponse:
    """Response from the search service.

    Attributes:
        count: Total number of matching documents (not limited)
        hits: Ranked hits, at most ``limit`` of them
        facets: Facet field name -> ordered mapping of value -> count
    """

    count: int
    hits: tuple[SearchHit, ...] = field(default_factory=tuple)
    facets: dict[str, dict[str, int]] = field(default_factory=dict)

    def facet_values(self, field_name: str) -> dict[str, int]:
        return self.facets.get(field_name, {})

    @classmethod
    def from_dict(cls, data: dict) -> "SearchResponse":
        """Create a response from the service's JSON payload.

        Facet value order is kept as returned by the service.

        Args:
            data: ``{count, hits: [{id, document, score}], facets: {field: {values}}}``

        Returns:
            SearchResponse instance
        """
        hits = tuple(
            SearchHit(
                id=hit["id"],
                document=SearchDocument.from_dict({"id": hit["id"], **hit["document"]}),
                score=hit.get("score", 0.0),
            )
            for hit in data.get("hits") or []
        )

        facets: dict[str, dict[str, int]] = {}
        for field_name, facet in (data.get("facets") or {}).items():
            values = (facet or {}).get("values") or {}
            facets[field_name] = {name: int(count) for name, count in values.items()}

        return cls(count=int(data.get("count") or 0), hits=hits, facets=facets)
