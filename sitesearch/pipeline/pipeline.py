"""Offline index-build pipeline orchestrator."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from tqdm import tqdm

from sitesearch.domain.page import PageSource, SearchDocument
from sitesearch.errors import DecodeError, FetchError
from sitesearch.pipeline.config import Config
from sitesearch.pipeline.decode import inflate
from sitesearch.pipeline.documents import build_documents
from sitesearch.pipeline.export import write_jsonl
from sitesearch.pipeline.feed import ContentFeed
from sitesearch.pipeline.sections import split_into_sections

logger = logging.getLogger(__name__)


class IndexPipeline:
    """Fetch pages, split them into sections and export search documents."""

    def __init__(
        self,
        config: Config | None = None,
        feed: ContentFeed | None = None,
    ):
        """Initialize pipeline.

        Args:
            config: Pipeline configuration (defaults to environment)
            feed: Content feed (built from ``config.feed`` when omitted)
        """
        self._config = config or Config.from_env()
        self._feed = feed

    @property
    def feed(self) -> ContentFeed:
        if self._feed is None:
            feed_config = self._config.feed
            self._feed = ContentFeed(
                base_url=feed_config.base_url,
                page_data_path=feed_config.page_data_path,
                api_data_path=feed_config.api_data_path,
                timeout=feed_config.timeout,
            )
        return self._feed

    def process_page(self, page: PageSource) -> List[SearchDocument]:
        """Decode, split and build documents for a single page.

        Raises:
            DecodeError: If the page content is corrupt
        """
        sections = split_into_sections(inflate(page.compressed_content))
        return build_documents(page, sections)

    def build(
        self,
        pages: Sequence[PageSource],
        show_progress: bool = False,
    ) -> tuple[List[SearchDocument], dict]:
        """Build documents for all pages, skipping undecodable ones.

        Args:
            pages: Pages to process
            show_progress: Show a tqdm progress bar

        Returns:
            Tuple of (documents in page order, statistics dict)
        """
        stats = {
            "pages": len(pages),
            "indexed": 0,
            "skipped": 0,
            "documents": 0,
            "errors": [],
        }

        workers = self._config.pipeline.workers
        if workers > 1:
            executor = ThreadPoolExecutor(max_workers=workers)
            outcomes = executor.map(self._process_safely, pages)
        else:
            executor = None
            outcomes = map(self._process_safely, pages)

        documents: List[SearchDocument] = []
        try:
            for page, result in tqdm(
                zip(pages, outcomes),
                total=len(pages),
                desc="Splitting",
                disable=not show_progress,
            ):
                if isinstance(result, DecodeError):
                    logger.warning("Skipping page %s: %s", page.pathname, result)
                    stats["skipped"] += 1
                    stats["errors"].append({
                        "pathname": page.pathname,
                        "error": str(result),
                    })
                    continue

                stats["indexed"] += 1
                documents.extend(result)
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        stats["documents"] = len(documents)
        return documents, stats

    def run(self, output_path: str | None = None, show_progress: bool = False) -> dict:
        """Fetch the feed, build documents and write them as JSONL.

        Args:
            output_path: Output JSONL path (overrides config)
            show_progress: Show a tqdm progress bar

        Returns:
            Statistics dict

        Raises:
            FetchError: If the page feed cannot be fetched
        """
        pages = self.feed.fetch_pages()
        fetch_errors = []

        api_pages: List[PageSource] = []
        try:
            api_pages = self.feed.fetch_api_pages()
        except FetchError as e:
            logger.error("API data unavailable, continuing with page data: %s", e)
            fetch_errors.append({"pathname": e.url, "error": str(e)})

        if self._config.pipeline.include_api_data:
            pages = pages + api_pages
        else:
            self._log_api_pages(api_pages)

        documents, stats = self.build(pages, show_progress=show_progress)
        stats["errors"] = fetch_errors + stats["errors"]

        path = output_path or self._config.pipeline.output_jsonl
        stats["written"] = write_jsonl(documents, path)
        stats["output"] = path
        return stats

    def _process_safely(self, page: PageSource) -> List[SearchDocument] | DecodeError:
        try:
            return self.process_page(page)
        except DecodeError as e:
            return e

    def _log_api_pages(self, api_pages: Sequence[PageSource]) -> None:
        for page in api_pages:
            try:
                logger.debug("API data %s:\n%s", page.pathname, inflate(page.compressed_content))
            except DecodeError as e:
                logger.warning("Undecodable API data %s: %s", page.pathname, e)


def run_pipeline(
    config: Config | None = None,
    output_jsonl: str = "",
    show_progress: bool = True,
) -> dict:
    """Run the complete pipeline from content feed to JSONL export.

    Args:
        config: Pipeline configuration (defaults to environment)
        output_jsonl: Output JSONL path (overrides config)
        show_progress: Show a tqdm progress bar

    Returns:
        Statistics dict
    """
    pipeline = IndexPipeline(config=config)
    return pipeline.run(output_path=output_jsonl or None, show_progress=show_progress)
