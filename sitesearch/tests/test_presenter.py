"""Tests for result presentation."""

import pytest

from sitesearch.errors import SearchError
from sitesearch.pipeline.config import PresenterConfig
from sitesearch.query.presenter import (
    DisplayKind,
    DisplayState,
    ResultPresenter,
    derive_breadcrumbs,
    select_display_state,
)


class TestDeriveBreadcrumbs:
    """Test breadcrumb derivation."""

    def test_fragment_and_page_dropped(self):
        assert derive_breadcrumbs("learn/getting-started#install") == ["learn"]

    def test_hyphens_become_spaces(self):
        assert derive_breadcrumbs("api/http-methods/get-request#usage") == [
            "api",
            "http methods",
        ]

    def test_empty_segments_discarded(self):
        assert derive_breadcrumbs("/learn//modules/intro#x") == ["learn", "modules"]

    def test_single_segment(self):
        assert derive_breadcrumbs("about#team") == []


class TestSelectDisplayState:
    """Test display state selection."""

    def test_empty_term(self, make_response):
        state = select_display_state("", make_response(count=12, facets={"api": 12}), "api")

        assert state.kind == DisplayKind.EMPTY
        assert state.results == ()

    def test_empty_term_without_response(self):
        assert select_display_state("", None).kind == DisplayKind.EMPTY

    def test_no_results(self, make_response):
        state = select_display_state("zzz", make_response(count=0, titles=[]))

        assert state.kind == DisplayKind.NO_RESULTS
        assert state.term == "zzz"

    def test_results(self, make_response):
        state = select_display_state("install", make_response(count=2))

        assert state.kind == DisplayKind.RESULTS
        assert state.count == 2
        assert state.see_all_url is None
        first = state.results[0]
        assert first.id == "doc-0"
        assert first.href == "/en/learn/getting-started/introduction#install-on-linux"
        assert first.title_html == '<span class="font-bold">Install</span> on Linux'
        assert first.breadcrumbs == ("learn", "getting started")
        assert first.breadcrumb_text == "learn > getting started > Introduction to Node.js"

    def test_see_all_above_limit(self, make_response):
        state = select_display_state("promise", make_response(count=12), "api")

        assert state.kind == DisplayKind.RESULTS_WITH_SEE_ALL
        assert state.see_all_url == "/en/search?q=promise&section=api"

    def test_no_see_all_at_limit(self, make_response):
        state = select_display_state("promise", make_response(count=8))

        assert state.kind == DisplayKind.RESULTS

    def test_request_limit_overrides_default(self, make_response):
        presenter = ResultPresenter()

        within = presenter.select_display_state("promise", make_response(count=12), limit=20)
        beyond = presenter.select_display_state("promise", make_response(count=30), limit=20)

        assert within.kind == DisplayKind.RESULTS
        assert within.see_all_url is None
        assert beyond.kind == DisplayKind.RESULTS_WITH_SEE_ALL

    def test_see_all_url_encoded(self):
        presenter = ResultPresenter()

        assert presenter.see_all_url("a b&c", "all") == "/en/search?q=a+b%26c&section=all"


class TestResultPresenter:
    """Test presenter configuration and error states."""

    def test_from_config(self, make_response):
        presenter = ResultPresenter.from_config(
            PresenterConfig(base_path="/de/", search_path="/de/suche", excerpt_chars=10)
        )

        state = presenter.select_display_state(
            "linux", make_response(count=12, titles=["Install on Linux distributions"])
        )

        item = state.results[0]
        assert item.href.startswith("/de/learn/")
        assert state.see_all_url.startswith("/de/suche?")
        assert len(item.title_html.replace('<span class="font-bold">', "").replace("</span>", "")) <= 10

    def test_error_state_keeps_results(self, make_response):
        presenter = ResultPresenter()
        previous = presenter.select_display_state("install", make_response(count=2))

        state = presenter.error_state("install l", SearchError("boom"), previous)

        assert state.kind == DisplayKind.ERROR
        assert state.error == "boom"
        assert state.term == "install l"
        assert state.results == previous.results

    def test_error_state_from_empty(self):
        state = ResultPresenter().error_state(
            "x", SearchError("down"), DisplayState(kind=DisplayKind.EMPTY)
        )

        assert state.kind == DisplayKind.ERROR
        assert state.results == ()

    @pytest.mark.parametrize("kind", list(DisplayKind))
    def test_kind_values(self, kind):
        assert DisplayKind(kind.value) is kind
