"""Result presentation: display states, breadcrumbs and excerpts."""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List
from urllib.parse import urlencode

from sitesearch.domain.search import SearchHit, SearchResponse
from sitesearch.pipeline.config import PresenterConfig
from sitesearch.query.facets import ALL_FACET
from sitesearch.query.highlight import Highlighter
from sitesearch.query.planner import RESULT_LIMIT

_FRAGMENT_RE = re.compile(r"#.+$")


class DisplayKind(str, Enum):
    """Which state the search box should show."""

    EMPTY = "empty"
    NO_RESULTS = "no-results"
    RESULTS = "results"
    RESULTS_WITH_SEE_ALL = "results-with-see-all"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ResultItem:
    """One rendered hit."""

    id: str
    href: str
    title_html: str
    breadcrumbs: tuple[str, ...]
    page_title: str

    @property
    def breadcrumb_text(self) -> str:
        return " > ".join((*self.breadcrumbs, self.page_title))


@dataclass(frozen=True, slots=True)
class DisplayState:
    """What the UI renders for one search.

    Attributes:
        kind: Display state
        term: Term the state was produced for
        count: Total result count reported by the service
        results: Rendered hits (kept on error states from the last good state)
        see_all_url: Link to the full search view, set for
            ``results-with-see-all`` only
        error: Error message for ``error`` states
    """

    kind: DisplayKind
    term: str = ""
    count: int = 0
    results: tuple[ResultItem, ...] = field(default_factory=tuple)
    see_all_url: str | None = None
    error: str | None = None


def derive_breadcrumbs(path: str) -> List[str]:
    """Breadcrumb trail for a document path.

    The fragment and the final segment (the page itself) are dropped, and
    hyphens become spaces.

    Args:
        path: Document path (e.g., "api/http-methods/get-request#usage")

    Returns:
        Crumbs (e.g., ["api", "http methods"])
    """
    segments = _FRAGMENT_RE.sub("", path).split("/")[:-1]
    return [segment.replace("-", " ") for segment in segments if segment]


class ResultPresenter:
    """Maps search responses to display states."""

    def __init__(
        self,
        base_path: str = "/en",
        search_path: str = "/en/search",
        excerpt_chars: int = 125,
        limit: int = RESULT_LIMIT,
        highlighter: Highlighter | None = None,
    ):
        self._base_path = base_path.rstrip("/")
        self._search_path = search_path
        self._excerpt_chars = excerpt_chars
        self._limit = limit
        self._highlighter = highlighter or Highlighter()

    @classmethod
    def from_config(cls, config: PresenterConfig) -> "ResultPresenter":
        return cls(
            base_path=config.base_path,
            search_path=config.search_path,
            excerpt_chars=config.excerpt_chars,
        )

    def select_display_state(
        self,
        term: str,
        response: SearchResponse | None,
        selected_facet_name: str = ALL_FACET,
        limit: int | None = None,
    ) -> DisplayState:
        """Choose the display state for a term and its response.

        Args:
            term: Term the response was produced for
            response: Search response (None if none arrived yet)
            selected_facet_name: Facet used for the "see all" link
            limit: Hits shown per request, if not the presenter default

        Returns:
            DisplayState
        """
        if not term:
            return DisplayState(kind=DisplayKind.EMPTY)

        count = response.count if response is not None else 0
        if count == 0:
            return DisplayState(kind=DisplayKind.NO_RESULTS, term=term)

        results = tuple(self.present_hit(hit, term) for hit in response.hits)

        if count > (limit or self._limit):
            return DisplayState(
                kind=DisplayKind.RESULTS_WITH_SEE_ALL,
                term=term,
                count=count,
                results=results,
                see_all_url=self.see_all_url(term, selected_facet_name),
            )

        return DisplayState(
            kind=DisplayKind.RESULTS, term=term, count=count, results=results
        )

    def error_state(self, term: str, error: Exception, previous: DisplayState) -> DisplayState:
        """Error state that keeps the previously shown results."""
        return replace(
            previous,
            kind=DisplayKind.ERROR,
            term=term,
            error=str(error),
        )

    def present_hit(self, hit: SearchHit, term: str) -> ResultItem:
        document = hit.document
        title_html = self._highlighter.highlight(
            document.page_section_title, term
        ).trim(self._excerpt_chars)

        return ResultItem(
            id=hit.id,
            href=f"{self._base_path}/{document.path}",
            title_html=title_html,
            breadcrumbs=tuple(derive_breadcrumbs(document.path)),
            page_title=document.page_title,
        )

    def see_all_url(self, term: str, facet_name: str) -> str:
        return f"{self._search_path}?{urlencode({'q': term, 'section': facet_name})}"


_default_presenter = ResultPresenter()


def select_display_state(
    term: str,
    response: SearchResponse | None,
    selected_facet_name: str = ALL_FACET,
) -> DisplayState:
    """Choose the display state using the default presenter settings."""
    return _default_presenter.select_display_state(term, response, selected_facet_name)
