"""Content feed client for rendered page data."""

import logging
from typing import List

import httpx

from sitesearch.domain.page import PageSource
from sitesearch.errors import FetchError

logger = logging.getLogger(__name__)


class ContentFeed:
    """Pull-based client for the site's page-data and API-data collections.

    Both collections are JSON arrays of records exposing ``pathname``,
    ``title`` and base64/deflate ``content``.
    """

    def __init__(
        self,
        base_url: str,
        page_data_path: str = "/page-data",
        api_data_path: str = "/en/next-data/api-data",
        timeout: float = 30.0,
    ):
        """Initialize content feed.

        Args:
            base_url: Base URL of the site's data endpoints
            page_data_path: Path of the page-data collection
            api_data_path: Path of the API-reference collection
            timeout: Request timeout in seconds
        """
        if not base_url:
            raise ValueError("Content feed base URL is required")

        self._base_url = base_url.rstrip("/")
        self._page_data_path = page_data_path
        self._api_data_path = api_data_path
        self._timeout = timeout

    def fetch_pages(self) -> List[PageSource]:
        """Fetch per-page metadata and compressed content."""
        return [PageSource.from_dict(r) for r in self._fetch(self._page_data_path)]

    def fetch_api_pages(self) -> List[PageSource]:
        """Fetch API-reference compressed content."""
        return [PageSource.from_dict(r) for r in self._fetch(self._api_data_path)]

    def _fetch(self, path: str) -> list[dict]:
        """GET a collection and return its records.

        Raises:
            FetchError: On transport failure, non-2xx status or bad payload
        """
        url = f"{self._base_url}{path}"

        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(url)
                response.raise_for_status()
                records = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Feed %s returned %s", url, e.response.status_code)
            raise FetchError(
                url,
                f"Content feed returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Feed %s unreachable: %s", url, e)
            raise FetchError(url, f"Content feed unreachable: {e}") from e
        except ValueError as e:
            raise FetchError(url, f"Content feed returned invalid JSON: {e}") from e

        if not isinstance(records, list):
            raise FetchError(url, "Content feed payload is not a list of records")

        return records
