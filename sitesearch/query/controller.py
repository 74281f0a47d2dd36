"""Event-driven search box controller."""

import logging
from dataclasses import dataclass

from sitesearch.domain.search import QueryState, SearchRequest, SearchResponse
from sitesearch.errors import SearchError
from sitesearch.query.facets import ALL_FACET, FACET_FIELD, FacetMap, aggregate_facets
from sitesearch.query.planner import build_initial_facets_request, build_search_request
from sitesearch.query.presenter import DisplayKind, DisplayState, ResultPresenter
from sitesearch.search.base import SearchClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PendingSearch:
    """A search issued by the controller.

    Attributes:
        seq: Monotonically increasing request sequence number
        request: Request to send to the search service
        state: Query state the request was built from
        facet_name: Facet name the selected index resolved to
    """

    seq: int
    request: SearchRequest
    state: QueryState
    facet_name: str


class SearchController:
    """Turns UI events into search requests and responses into display states.

    Each event issues a new request with a higher sequence number. Only the
    response (or failure) for the latest sequence number is applied; stale
    ones are discarded.
    """

    def __init__(
        self,
        client: SearchClient | None = None,
        presenter: ResultPresenter | None = None,
        facet_field: str = FACET_FIELD,
    ):
        """Initialize controller.

        Args:
            client: Search client used by :meth:`dispatch`
            presenter: Result presenter
            facet_field: Facet field holding per-section counts
        """
        self._client = client
        self._presenter = presenter or ResultPresenter()
        self._facet_field = facet_field

        self._seq = 0
        self._current: PendingSearch | None = None
        self.state = QueryState()
        self.facet_map = FacetMap.empty()
        self.response: SearchResponse | None = None
        self.display_state = DisplayState(kind=DisplayKind.EMPTY)

    @property
    def selected_facet_name(self) -> str:
        if self.state.selected_facet_index >= len(self.facet_map):
            return ALL_FACET
        return self.facet_map.name_at(self.state.selected_facet_index)

    def open(self) -> PendingSearch:
        """Reset state and issue the initial empty-term search for facets."""
        self.reset()
        return self._issue(build_initial_facets_request())

    def reset(self) -> None:
        """Clear term, results and facet selection; in-flight searches go stale."""
        self._seq += 1
        self._current = None
        self.state = QueryState()
        self.facet_map = FacetMap.empty()
        self.response = None
        self.display_state = DisplayState(kind=DisplayKind.EMPTY)

    def on_term_changed(self, term: str) -> PendingSearch:
        self.state = QueryState(term=term, selected_facet_index=self.state.selected_facet_index)
        return self._issue()

    def on_facet_changed(self, index: int) -> PendingSearch:
        """Select a facet by display index.

        Raises:
            ValueError: If the index is out of range for the current facets
        """
        self.facet_map.name_at(index)
        self.state = QueryState(term=self.state.term, selected_facet_index=index)
        return self._issue()

    def on_response_received(self, seq: int, response: SearchResponse) -> bool:
        """Apply a response if it belongs to the latest request.

        Returns:
            True if the response was applied, False if it was stale
        """
        if self._current is None or seq != self._current.seq:
            logger.debug("Discarding stale response %s (current %s)", seq, self._seq)
            return False

        pending = self._current
        self.response = response
        self.facet_map = aggregate_facets(response, self._facet_field)
        self.display_state = self._presenter.select_display_state(
            pending.state.term, response, pending.facet_name
        )
        return True

    def on_search_failed(self, seq: int, error: Exception) -> bool:
        """Show an error state for the latest request, keeping current results.

        Returns:
            True if the failure was applied, False if it was stale
        """
        if self._current is None or seq != self._current.seq:
            logger.debug("Discarding stale failure %s (current %s)", seq, self._seq)
            return False

        logger.warning("Search for %r failed: %s", self._current.state.term, error)
        self.display_state = self._presenter.error_state(
            self._current.state.term, error, self.display_state
        )
        return True

    def dispatch(self, pending: PendingSearch) -> bool:
        """Run a pending search through the injected client.

        Returns:
            True if the outcome was applied to the display state
        """
        if self._client is None:
            raise RuntimeError("SearchController has no search client")

        try:
            response = self._client.search(pending.request)
        except SearchError as e:
            return self.on_search_failed(pending.seq, e)

        return self.on_response_received(pending.seq, response)

    def _issue(self, request: SearchRequest | None = None) -> PendingSearch:
        if self.state.selected_facet_index >= len(self.facet_map):
            # Facets from the latest response no longer contain the selection
            logger.warning(
                "Facet index %s out of range, falling back to all",
                self.state.selected_facet_index,
            )
            self.state = QueryState(term=self.state.term, selected_facet_index=0)

        self._seq += 1
        pending = PendingSearch(
            seq=self._seq,
            request=request or build_search_request(self.state, self.facet_map),
            state=self.state,
            facet_name=self.selected_facet_name,
        )
        self._current = pending
        return pending


def get_initial_facets(client: SearchClient) -> SearchResponse:
    """Fetch facet counts for the empty term (search box opened)."""
    return client.search(build_initial_facets_request())
