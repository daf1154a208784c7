"""Hyperlink classification by URL authority.

Rules, applied in order:

- a reference starting with ``mailto:`` is ignored
- a reference that does not parse as a URL is ignored
- a relative reference (no scheme, no host) is internal
- an ``http``/``https`` reference is internal when its host equals the page
  host and external otherwise; subdomains count as different hosts
- everything else (``ftp:``, ``tel:``, ``//host/path`` ...) is ignored

Host comparison is plain string equality on the parsed host (port included,
user-info dropped); no case folding, trailing-dot or default-port
normalisation takes place.
"""

import logging
import re
from urllib.parse import urlsplit

from webanalyse.constants import MAILTO_PREFIX, WEB_SCHEMES
from webanalyse.exceptions import MalformedReferenceError
from webanalyse.models import LinkClass, ParsedAuthority

logger = logging.getLogger(__name__)

# A percent sign not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _has_control_chars(value: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value)


def parse_authority(reference: str) -> ParsedAuthority:
    """Split a URL string into its scheme and host.

    Args:
        reference: Raw URL or hyperlink reference

    Returns:
        ParsedAuthority with lower-case scheme and host as written

    Raises:
        MalformedReferenceError: If the reference is not a valid URL
    """
    if _has_control_chars(reference):
        raise MalformedReferenceError(reference, "invalid control character")

    try:
        parts = urlsplit(reference)
    except ValueError as e:
        raise MalformedReferenceError(reference, str(e)) from e

    if not parts.scheme and ":" in parts.path.split("/", 1)[0]:
        raise MalformedReferenceError(reference, "missing protocol scheme")

    # Query strings are kept raw, everything else must be properly escaped
    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE.search(component):
            raise MalformedReferenceError(reference, "invalid escape")

    host = parts.netloc.rpartition("@")[2]
    return ParsedAuthority(scheme=parts.scheme, host=host)


def page_host(page_url: str) -> str:
    """Host of the analysed page, empty when its URL cannot be parsed."""
    try:
        return parse_authority(page_url).host
    except MalformedReferenceError:
        return ""


def classify_authority(authority: ParsedAuthority, host: str) -> LinkClass:
    """Classify an already-parsed reference against the page host."""
    if authority.is_relative:
        return LinkClass.INTERNAL
    if authority.scheme in WEB_SCHEMES and authority.host:
        if authority.host == host:
            return LinkClass.INTERNAL
        return LinkClass.EXTERNAL
    return LinkClass.IGNORED


def classify_link(page_url: str, reference: str) -> LinkClass:
    """Classify a hyperlink found on ``page_url``.

    Malformed references are logged and reported as ``LinkClass.IGNORED``.

    Args:
        page_url: URL of the page the link was found on
        reference: Raw ``href`` value

    Returns:
        LinkClass for the reference
    """
    if reference.startswith(MAILTO_PREFIX):
        return LinkClass.IGNORED
    try:
        authority = parse_authority(reference)
    except MalformedReferenceError as e:
        logger.warning(f"invalid url : {reference} ({e.reason})")
        return LinkClass.IGNORED
    return classify_authority(authority, page_host(page_url))
