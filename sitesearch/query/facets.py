"""Facet aggregation from search responses."""

from typing import Iterator, Mapping

from sitesearch.domain.search import SearchResponse

ALL_FACET = "all"
FACET_FIELD = "siteSection"


class FacetMap:
    """Ordered facet name -> count entries with the "all" entry first.

    Entry order is the display order: the synthetic "all" entry (total
    unfiltered count) followed by the service's per-section counts in the
    order the service returned them. Entries are kept as a sequence, so a
    real section named "all" stays a separate entry instead of overwriting
    the synthetic one.
    """

    __slots__ = ("_entries",)

    def __init__(self, total: int = 0, section_counts: Mapping[str, int] | None = None):
        entries = [(ALL_FACET, total)]
        entries.extend((section_counts or {}).items())
        self._entries: tuple[tuple[str, int], ...] = tuple(entries)

    @classmethod
    def empty(cls) -> "FacetMap":
        return cls(0)

    @property
    def total(self) -> int:
        return self._entries[0][1]

    def names(self) -> list[str]:
        return [name for name, _ in self._entries]

    def items(self) -> list[tuple[str, int]]:
        return list(self._entries)

    def name_at(self, index: int) -> str:
        """Facet name at a display index.

        Raises:
            ValueError: If the index is out of range
        """
        if index < 0 or index >= len(self._entries):
            raise ValueError(
                f"Facet index {index} out of range for {len(self._entries)} facets"
            )
        return self._entries[index][0]

    def get(self, name: str, default: int | None = None) -> int | None:
        for entry_name, count in self._entries:
            if entry_name == name:
                return count
        return default

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __contains__(self, name: object) -> bool:
        return any(entry_name == name for entry_name, _ in self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FacetMap):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"FacetMap({dict(self._entries)!r})"


def aggregate_facets(
    response: SearchResponse | None,
    field_name: str = FACET_FIELD,
) -> FacetMap:
    """Derive the facet map for a search response.

    Args:
        response: Search response (None before the first response arrives)
        field_name: Facet field holding the per-section counts

    Returns:
        FacetMap with "all" mapped to the total count
    """
    if response is None:
        return FacetMap.empty()
    return FacetMap(response.count, response.facet_values(field_name))
