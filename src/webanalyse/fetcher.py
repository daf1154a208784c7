"""Fetching and parsing the page under analysis."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from webanalyse.constants import DEFAULT_USER_AGENT, FETCH_TIMEOUT_SECONDS
from webanalyse.exceptions import FetchError, NotOkResponseError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Downloads a single page and parses it into a BeautifulSoup document."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User-Agent header for the request
            timeout: Request timeout in seconds
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout

    def get_document(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and parse the response body.

        Args:
            url: Page URL

        Returns:
            Parsed document

        Raises:
            NotOkResponseError: If the server answers with a status other than 200
            FetchError: If the request fails
        """
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise FetchError(url, f"Request timeout after {self.timeout}s", e) from e
        except (requests.exceptions.RequestException, ValueError) as e:
            raise FetchError(url, str(e), e) from e

        if response.status_code != 200:
            raise NotOkResponseError(url, response.status_code)

        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return BeautifulSoup(response.content, "lxml")
