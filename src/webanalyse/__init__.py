"""Single web page analyser with concurrent link accessibility checks."""

__version__ = "1.0.0"

from webanalyse.analyzer import PageAnalyzer
from webanalyse.classifier import classify_link
from webanalyse.config import Config
from webanalyse.link_aggregator import Deduplicator, LinkAggregator
from webanalyse.link_checker import LinkProber, is_accessible
from webanalyse.models import (
    LinkClass,
    LinkCounters,
    PageSummary,
    ProbeResult,
)
from webanalyse.page_structure import PageStructureExtractor
from webanalyse.worker_pool import ProbePool

__all__ = [
    "PageAnalyzer",
    "classify_link",
    "Config",
    "Deduplicator",
    "LinkAggregator",
    "LinkProber",
    "is_accessible",
    "LinkClass",
    "LinkCounters",
    "PageSummary",
    "ProbeResult",
    "PageStructureExtractor",
    "ProbePool",
]
