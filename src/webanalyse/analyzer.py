"""Single-page analysis: fetch, extract structure, count links."""

import logging
from typing import Optional

from webanalyse.config import Config
from webanalyse.constants import (
    EMPTY_URL_MESSAGE,
    FETCH_ERROR_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    NOT_OK_RESPONSE_MESSAGE,
)
from webanalyse.exceptions import EmptyURLError, FetchError, NotOkResponseError
from webanalyse.fetcher import PageFetcher
from webanalyse.link_aggregator import LinkAggregator
from webanalyse.link_checker import LinkProber
from webanalyse.models import PageSummary
from webanalyse.page_structure import PageStructureExtractor

logger = logging.getLogger(__name__)


class PageAnalyzer:
    """Produces a PageSummary for a URL."""

    def __init__(
        self,
        config: Optional[Config] = None,
        fetcher: Optional[PageFetcher] = None,
        aggregator: Optional[LinkAggregator] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Analyser configuration (read from the environment if None)
            fetcher: Page fetcher (built from config if None)
            aggregator: Link aggregator (built from config if None)
        """
        self.config = config or Config.from_env()
        self.fetcher = fetcher or PageFetcher(
            user_agent=self.config.user_agent,
            timeout=self.config.fetch_timeout,
        )
        self.aggregator = aggregator or LinkAggregator(
            prober=LinkProber(user_agent=self.config.user_agent),
            probe_timeout=self.config.probe_timeout,
            max_workers=self.config.max_workers,
        )

    def analyse(self, url: Optional[str]) -> PageSummary:
        """Analyse a single page.

        Args:
            url: Page URL

        Returns:
            PageSummary for the page

        Raises:
            EmptyURLError: If no URL was given
            FetchError: If the page could not be fetched
        """
        if url is None or not url.strip():
            raise EmptyURLError(EMPTY_URL_MESSAGE)

        try:
            document = self.fetcher.get_document(url)
        except FetchError as e:
            logger.error(f"error while getting document for the url: {url}, error is: {e}")
            raise

        structure = PageStructureExtractor(document)
        summary = PageSummary(
            url=url,
            title=structure.title(),
            version=structure.version(),
            headings=structure.headings(),
            has_login=structure.has_login_form(),
            links=self.aggregator.aggregate(document, url),
        )
        logger.info(f"Summary generated for url: {url}")
        return summary


def error_message(error: Exception, url: Optional[str] = None) -> str:
    """User-facing message for an analysis failure."""
    if isinstance(error, EmptyURLError):
        return EMPTY_URL_MESSAGE
    if isinstance(error, NotOkResponseError):
        return NOT_OK_RESPONSE_MESSAGE.format(status_code=error.status_code)
    if isinstance(error, FetchError):
        return FETCH_ERROR_MESSAGE.format(url=url or error.url, error=error.message)
    return GENERIC_ERROR_MESSAGE
