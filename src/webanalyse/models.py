"""Data models for page analysis."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from webanalyse.constants import INACCESSIBLE_STATUS_THRESHOLD


class LinkClass(Enum):
    """Classification of a single hyperlink reference."""
    INTERNAL = "internal"
    EXTERNAL = "external"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ParsedAuthority:
    """Scheme and host of a URL; both empty for a relative reference."""
    scheme: str
    host: str

    @property
    def is_relative(self) -> bool:
        return not self.scheme and not self.host


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a reachability probe for one external link.

    Exactly one of ``status_code`` or ``error`` is set: a completed request
    carries its status, a failed one (DNS, refused, timeout, TLS) carries the
    error text. Either kind of failure makes the link unreachable.
    """
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        if self.error is not None or self.status_code is None:
            return False
        return self.status_code < INACCESSIBLE_STATUS_THRESHOLD


@dataclass(frozen=True)
class LinkCounters:
    """Three-way link tally for one analysed page."""
    internal: int = 0
    external: int = 0
    inaccessible: int = 0

    @property
    def total(self) -> int:
        """Distinct, classifiable links seen on the page."""
        return self.internal + self.external


@dataclass(frozen=True)
class PageSummary:
    """Analysis summary of a single page."""
    url: str
    title: str = ""
    version: str = ""
    headings: Mapping[str, int] = field(default_factory=dict)
    has_login: bool = False
    links: LinkCounters = field(default_factory=LinkCounters)

    def __post_init__(self):
        # headings stay read-only after construction
        object.__setattr__(self, "headings", MappingProxyType(dict(self.headings)))

    def to_dict(self) -> dict:
        """Convert the summary to a JSON-serialisable dictionary."""
        return {
            "url": self.url,
            "title": self.title,
            "version": self.version,
            "headings": dict(self.headings),
            "has_login": self.has_login,
            "internal_links": self.links.internal,
            "external_links": self.links.external,
            "inaccessible_links": self.links.inaccessible,
        }
