"""Indexed-search service clients."""

from sitesearch.search.base import SearchClient
from sitesearch.search.orama import OramaCloudClient

__all__ = ["SearchClient", "OramaCloudClient"]
