"""Link counting for a parsed page.

The aggregator walks every anchor once, in document order. Internal and
external counts are settled during that single-threaded scan; external links
are also queued on a ProbePool, and the inaccessible count is folded in after
the pool has been drained. Counters and the set of seen references are only
ever touched by the scanning thread.
"""

import logging
from typing import Optional, Set

from bs4 import BeautifulSoup

from webanalyse.classifier import classify_link
from webanalyse.constants import PROBE_TIMEOUT_SECONDS
from webanalyse.link_checker import LinkProber
from webanalyse.models import LinkClass, LinkCounters
from webanalyse.worker_pool import ProbePool

logger = logging.getLogger(__name__)


class Deduplicator:
    """Remembers raw hyperlink references seen during one analysis.

    References are compared as exact strings: ``/about`` and ``/about/`` are
    distinct.
    """

    def __init__(self):
        self._seen: Set[str] = set()

    def seen(self, reference: str) -> bool:
        return reference in self._seen

    def mark_seen(self, reference: str) -> None:
        self._seen.add(reference)

    def __len__(self) -> int:
        return len(self._seen)


class LinkAggregator:
    """Counts internal, external and inaccessible links on a page."""

    def __init__(
        self,
        prober: Optional[LinkProber] = None,
        probe_timeout: float = PROBE_TIMEOUT_SECONDS,
        max_workers: Optional[int] = None,
    ):
        """Initialize the aggregator.

        Args:
            prober: Prober used for external links (a default LinkProber if None)
            probe_timeout: Timeout for each probe in seconds
            max_workers: Probe pool size (defaults to the CPU count)
        """
        self.prober = prober or LinkProber()
        self.probe_timeout = probe_timeout
        self.max_workers = max_workers

    def aggregate(self, document: BeautifulSoup, page_url: str) -> LinkCounters:
        """Count the links of ``document``, probing the external ones.

        Args:
            document: Parsed page
            page_url: URL the page was fetched from

        Returns:
            LinkCounters for the page
        """
        dedup = Deduplicator()
        internal = external = inaccessible = 0

        pool = ProbePool(self.max_workers).start()
        try:
            for anchor in document.find_all("a"):
                href = anchor.get("href")
                if href is None or dedup.seen(href):
                    continue
                dedup.mark_seen(href)

                link_class = classify_link(page_url, href)
                if link_class is LinkClass.INTERNAL:
                    internal += 1
                elif link_class is LinkClass.EXTERNAL:
                    external += 1
                    pool.submit(self.prober.probe, href, self.probe_timeout)

            logger.debug(
                f"{page_url}: {len(dedup)} distinct references, "
                f"{pool.pending} external links queued for probing"
            )

            for result in pool.drain_all():
                if not result.reachable:
                    inaccessible += 1
        finally:
            pool.shutdown()

        if pool.failed_tasks:
            logger.warning(
                f"{pool.failed_tasks} probe task(s) failed for {page_url}; "
                "excluded from the inaccessible count"
            )

        return LinkCounters(
            internal=internal,
            external=external,
            inaccessible=inaccessible,
        )
