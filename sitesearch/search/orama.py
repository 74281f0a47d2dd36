"""Orama Cloud search client over HTTP."""

import json
import logging
import threading

import httpx

from sitesearch.domain.search import SearchRequest, SearchResponse
from sitesearch.errors import SearchError
from sitesearch.search.base import SearchClient

logger = logging.getLogger(__name__)


class OramaCloudClient(SearchClient):
    """Client for a hosted Orama Cloud index.

    Searches are posted to ``{endpoint}/search`` with the JSON-encoded query
    in the ``q`` form field. While open, a daemon thread posts to
    ``{endpoint}/health`` every ``heartbeat_interval`` seconds to keep the
    index warm.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        heartbeat_interval: float = 3.5,
        timeout: float = 10.0,
    ):
        """Initialize Orama Cloud client.

        Args:
            endpoint: Index endpoint URL
            api_key: Public search API key
            heartbeat_interval: Seconds between heartbeats (0 disables)
            timeout: Request timeout in seconds
        """
        if not endpoint:
            raise ValueError("Orama endpoint is required")
        if not api_key:
            raise ValueError("Orama API key is required")

        self._endpoint = endpoint.rstrip("/")
        self._api_key = api_key
        self._heartbeat_interval = heartbeat_interval
        self._timeout = timeout

        self._http: httpx.Client | None = None
        self._stop = threading.Event()
        self._heartbeat: threading.Thread | None = None

    @property
    def is_open(self) -> bool:
        return self._http is not None

    def open(self) -> None:
        """Open the HTTP session and start the heartbeat."""
        if self._http is not None:
            return

        self._http = httpx.Client(
            timeout=self._timeout,
            params={"api-key": self._api_key},
        )
        self._stop.clear()

        if self._heartbeat_interval > 0:
            self._heartbeat = threading.Thread(
                target=self._heartbeat_loop,
                name="orama-heartbeat",
                daemon=True,
            )
            self._heartbeat.start()

    def close(self) -> None:
        """Stop the heartbeat and close the HTTP session."""
        self._stop.set()
        if self._heartbeat is not None:
            self._heartbeat.join(timeout=self._timeout)
            self._heartbeat = None
        if self._http is not None:
            self._http.close()
            self._http = None

    def search(self, request: SearchRequest) -> SearchResponse:
        """Run a search request against the hosted index.

        Raises:
            SearchError: If the client is closed, the request fails or the
                service returns a non-2xx status
        """
        if self._http is None:
            raise SearchError("Search client is not open")

        try:
            response = self._http.post(
                f"{self._endpoint}/search",
                data={"q": json.dumps(request.to_dict())},
            )
            response.raise_for_status()
            return SearchResponse.from_dict(response.json())
        except httpx.HTTPStatusError as e:
            raise SearchError(
                f"Search service error: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise SearchError(f"Search request failed: {e}") from e
        except (ValueError, KeyError) as e:
            raise SearchError(f"Malformed search response: {e}") from e

    def _heartbeat_loop(self) -> None:
        while not self._stop.wait(self._heartbeat_interval):
            http = self._http
            if http is None:
                return
            try:
                http.post(f"{self._endpoint}/health")
            except httpx.HTTPError as e:
                logger.warning("Heartbeat failed: %s", e)
