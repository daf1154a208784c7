"""Reachability probes for external links."""

import logging
from typing import Optional

import requests

from webanalyse.constants import DEFAULT_USER_AGENT, PROBE_TIMEOUT_SECONDS
from webanalyse.models import ProbeResult

logger = logging.getLogger(__name__)


class LinkProber:
    """Checks whether a URL answers a HEAD request with a non-error status.

    Instances hold only immutable settings, so a single prober can be shared
    by every worker thread of a probe pool.
    """

    def __init__(self, user_agent: Optional[str] = None):
        """Initialize the prober.

        Args:
            user_agent: User-Agent header sent with every probe
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT

    def probe(self, url: str, timeout: float = PROBE_TIMEOUT_SECONDS) -> ProbeResult:
        """Probe a single absolute URL.

        Network failures never propagate: they come back as a ProbeResult
        carrying the error text.

        Args:
            url: Absolute http(s) URL to check
            timeout: Request timeout in seconds

        Returns:
            ProbeResult with either the status code or the error
        """
        try:
            response = requests.head(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=timeout,
                allow_redirects=True,
            )
        except requests.exceptions.Timeout:
            logger.warning(f"inaccessible url: {url} timed out after {timeout}s")
            return ProbeResult(url=url, error=f"Request timeout after {timeout}s")
        except (requests.exceptions.RequestException, ValueError) as e:
            # urllib3 rejects some hosts (empty or over-long labels) with a
            # plain ValueError before any request goes out
            logger.warning(f"inaccessible url: {url} with err: {e}")
            return ProbeResult(url=url, error=str(e))

        result = ProbeResult(url=url, status_code=response.status_code)
        if not result.reachable:
            logger.warning(f"inaccessible url: {url} with statuscode: {response.status_code}")
        return result

    def is_accessible(self, url: str, timeout: float = PROBE_TIMEOUT_SECONDS) -> bool:
        return self.probe(url, timeout).reachable


def is_accessible(url: str, timeout: float = PROBE_TIMEOUT_SECONDS) -> bool:
    """Return True when ``url`` answers a HEAD request with a status below 400."""
    return LinkProber().is_accessible(url, timeout)
