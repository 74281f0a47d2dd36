"""Tests for domain entities."""

import pytest

from sitesearch.domain.page import PageSource, SearchDocument
from sitesearch.domain.search import SearchRequest, SearchResponse


class TestPageSource:
    """Test PageSource parsing."""

    def test_from_dict(self):
        page = PageSource.from_dict(
            {"pathname": "learn/intro", "title": "Intro", "content": "eJw="}
        )

        assert page.pathname == "learn/intro"
        assert page.title == "Intro"
        assert page.compressed_content == "eJw="
        assert page.site_section == "learn"

    def test_from_dict_missing_fields(self):
        page = PageSource.from_dict({"content": "eJw="})

        assert page.pathname == ""
        assert page.title == ""
        assert page.site_section == ""


class TestSearchDocument:
    """Test SearchDocument serialization."""

    def test_to_dict_uses_index_field_names(self):
        document = SearchDocument(
            id="1",
            path="learn/intro#setup",
            site_section="learn",
            page_title="Intro",
            page_section_title="Setup",
            page_section_content="body",
        )

        assert list(document.to_dict()) == [
            "id",
            "path",
            "siteSection",
            "pageTitle",
            "pageSectionTitle",
            "pageSectionContent",
        ]
        assert SearchDocument.from_dict(document.to_dict()) == document

    def test_immutability(self):
        document = SearchDocument("1", "p#a", "p", "P", "A", "")

        with pytest.raises(Exception):  # FrozenInstanceError
            document.path = "other"


class TestSearchRequest:
    """Test SearchRequest wire format."""

    def test_where_omitted_when_unset(self):
        request = SearchRequest(term="x", limit=8, facets={"siteSection": {}})

        data = request.to_dict()

        assert "where" not in data
        assert data == {
            "term": "x",
            "limit": 8,
            "boost": {},
            "facets": {"siteSection": {}},
        }

    def test_where_included(self):
        request = SearchRequest(
            term="x", limit=8, where={"siteSection": {"eq": "api"}}
        )

        assert request.to_dict()["where"] == {"siteSection": {"eq": "api"}}


class TestSearchResponse:
    """Test SearchResponse parsing."""

    def test_from_dict(self, make_response):
        response = make_response(count=12, facets={"learn": 7, "api": 5})

        assert response.count == 12
        assert len(response.hits) == 2
        assert response.hits[0].id == "doc-0"
        assert response.hits[0].document.id == "doc-0"
        assert response.hits[0].document.site_section == "learn"
        assert response.facet_values("siteSection") == {"learn": 7, "api": 5}

    def test_facet_order_preserved(self):
        response = SearchResponse.from_dict({
            "count": 3,
            "hits": [],
            "facets": {"siteSection": {"values": {"zeta": 1, "alpha": 2}}},
        })

        assert list(response.facet_values("siteSection")) == ["zeta", "alpha"]

    def test_missing_facets(self):
        response = SearchResponse.from_dict({"count": 0, "hits": []})

        assert response.facet_values("siteSection") == {}
