"""Base search client interface."""

from abc import ABC, abstractmethod

from sitesearch.domain.search import SearchRequest, SearchResponse


class SearchClient(ABC):
    """Abstract base class for indexed-search service clients.

    Clients are constructed explicitly and passed to the query layer.
    ``open`` must be called before ``search`` and ``close`` releases any
    background resources.
    """

    @abstractmethod
    def open(self) -> None:
        """Open connections and start background work."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Stop background work and release connections."""
        pass

    @abstractmethod
    def search(self, request: SearchRequest) -> SearchResponse:
        """Run a search request.

        Args:
            request: Structured search request

        Returns:
            SearchResponse from the service

        Raises:
            SearchError: If the transport or service fails
        """
        pass

    def __enter__(self) -> "SearchClient":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
