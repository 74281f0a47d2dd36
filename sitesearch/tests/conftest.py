"""Pytest configuration for site search tests."""

import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

from sitesearch.domain.page import PageSource  # noqa: E402
from sitesearch.domain.search import SearchResponse  # noqa: E402
from sitesearch.pipeline.decode import deflate  # noqa: E402


SAMPLE_MARKDOWN = """Intro text before any heading.

# Getting Started

Install the runtime.

## Install on Linux

Use the package manager.
Then verify the version.

## Install on macOS
### Homebrew

brew install node
"""


@pytest.fixture
def sample_markdown():
    """Page markdown with four headings and a preamble."""
    return SAMPLE_MARKDOWN


@pytest.fixture
def sample_page(sample_markdown):
    """PageSource with compressed sample markdown."""
    return PageSource(
        pathname="learn/getting-started/introduction",
        title="Introduction to Node.js",
        compressed_content=deflate(sample_markdown),
    )


@pytest.fixture
def page_records(sample_markdown):
    """Raw page-data feed records."""
    return [
        {
            "pathname": "learn/getting-started/introduction",
            "title": "Introduction to Node.js",
            "content": deflate(sample_markdown),
        },
        {
            "pathname": "about/governance",
            "title": "Project Governance",
            "content": deflate("# Governance\n\nConsensus seeking.\n\n# Members\n"),
        },
        {
            "pathname": "blog/broken",
            "title": "Broken",
            "content": "!!! not base64 !!!",
        },
    ]


def make_response_dict(count=2, facets=None, titles=None):
    """Build a search service payload."""
    titles = titles or ["Install on Linux", "Install on macOS"]
    hits = [
        {
            "id": f"doc-{i}",
            "score": 1.0 / (i + 1),
            "document": {
                "path": f"learn/getting-started/introduction#{title.lower().replace(' ', '-')}",
                "siteSection": "learn",
                "pageTitle": "Introduction to Node.js",
                "pageSectionTitle": title,
                "pageSectionContent": "",
            },
        }
        for i, title in enumerate(titles)
    ]
    data = {"count": count, "hits": hits, "elapsed": {"formatted": "1ms"}}
    if facets is not None:
        data["facets"] = {"siteSection": {"count": len(facets), "values": facets}}
    return data


@pytest.fixture
def make_response_payload():
    """Factory for raw search service payloads."""
    return make_response_dict


@pytest.fixture
def make_response():
    """Factory for SearchResponse objects."""

    def _make(count=2, facets=None, titles=None):
        return SearchResponse.from_dict(make_response_dict(count, facets, titles))

    return _make
