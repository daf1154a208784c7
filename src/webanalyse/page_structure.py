"""Structural facts about a parsed page."""

from collections import Counter
from typing import Dict

from bs4 import BeautifulSoup, Tag

from webanalyse.constants import HEADING_TAGS, PASSWORD_INPUT_SELECTOR


class PageStructureExtractor:
    """Read-only queries over a parsed document. None of them raise."""

    def __init__(self, document: BeautifulSoup):
        self.document = document

    def title(self) -> str:
        """Text of the first <title> element, or an empty string."""
        title = self.document.find("title")
        return title.get_text() if title else ""

    def version(self) -> str:
        """Name of the document's root element, used as a markup version label."""
        root = next(
            (node for node in self.document.contents if isinstance(node, Tag)),
            None,
        )
        return root.name if root is not None else ""

    def headings(self) -> Dict[str, int]:
        """Count of each heading level present on the page, e.g. {"h1": 1, "h2": 3}."""
        counts = Counter(tag.name for tag in self.document.find_all(list(HEADING_TAGS)))
        return {name: counts[name] for name in HEADING_TAGS if counts[name]}

    def has_login_form(self) -> bool:
        """True when the page contains a password input."""
        return self.document.select_one(PASSWORD_INPUT_SELECTOR) is not None
