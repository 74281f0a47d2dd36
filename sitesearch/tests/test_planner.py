"""Tests for query planning."""

import pytest

from sitesearch.domain.search import QueryState
from sitesearch.query.facets import FacetMap
from sitesearch.query.planner import (
    BOOST,
    RESULT_LIMIT,
    build_initial_facets_request,
    build_search_request,
    build_section_request,
)


@pytest.fixture
def facet_map():
    return FacetMap(20, {"guides": 12, "api": 8})


class TestBuildSearchRequest:
    """Test build_search_request."""

    def test_defaults(self, facet_map):
        request = build_search_request(QueryState(term="promise"), facet_map)

        assert request.term == "promise"
        assert request.limit == RESULT_LIMIT == 8
        assert request.facets == {"siteSection": {}}
        assert request.where is None

    def test_boost_ordering(self, facet_map):
        boost = build_search_request(QueryState(term="x"), facet_map).boost

        assert boost == BOOST
        assert boost["pageSectionTitle"] > boost["pageSectionContent"] > boost["pageTitle"]

    @pytest.mark.parametrize("facets", [
        FacetMap(0),
        FacetMap(20, {"guides": 12, "api": 8}),
        FacetMap(20, {"all": 3, "api": 8}),
    ])
    def test_index_zero_never_filters(self, facets):
        request = build_search_request(QueryState(term="x", selected_facet_index=0), facets)

        assert request.where is None
        assert "where" not in request.to_dict()

    def test_selected_facet_filters_site_section(self, facet_map):
        request = build_search_request(
            QueryState(term="x", selected_facet_index=2), facet_map
        )

        assert request.where == {"siteSection": {"eq": "api"}}

    def test_real_section_named_all_is_filtered(self):
        """Test a non-zero index pointing at a real "all" section filters on it."""
        facets = FacetMap(9, {"learn": 3, "all": 6})

        request = build_search_request(QueryState(term="x", selected_facet_index=2), facets)

        assert request.where == {"siteSection": {"eq": "all"}}

    def test_empty_term_allowed(self, facet_map):
        request = build_search_request(QueryState(term=""), facet_map)

        assert request.term == ""

    def test_out_of_range_index_rejected(self, facet_map):
        with pytest.raises(ValueError, match="out of range"):
            build_search_request(QueryState(term="x", selected_facet_index=3), facet_map)

    def test_missing_facet_map(self):
        request = build_search_request(QueryState(term="x"))

        assert request.where is None


class TestOtherRequests:
    """Test initial facets and full search view requests."""

    def test_initial_facets_request(self):
        request = build_initial_facets_request()

        assert request.term == ""
        assert request.facets == {"siteSection": {}}
        assert request.where is None

    def test_section_request_unfiltered(self):
        assert build_section_request("x").where is None
        assert build_section_request("x", "all").where is None

    def test_section_request_filtered(self):
        request = build_section_request("x", "api", limit=20)

        assert request.where == {"siteSection": {"eq": "api"}}
        assert request.limit == 20
