"""Error taxonomy for the site search pipeline and query layer."""


class SiteSearchError(Exception):
    """Base class for all site search errors."""


class FetchError(SiteSearchError):
    """Content feed unreachable or returned a non-2xx status."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{message} ({url})")


class DecodeError(SiteSearchError):
    """Compressed page content is not valid base64/deflate/UTF-8."""


class SearchError(SiteSearchError):
    """Search service transport or service failure."""
