# tests/test_analyzer.py
"""Tests for the page analyzer."""

import pytest
from bs4 import BeautifulSoup
from unittest.mock import Mock
from webanalyse.analyzer import PageAnalyzer, error_message
from webanalyse.config import Config
from webanalyse.exceptions import EmptyURLError, FetchError, NotOkResponseError
from webanalyse.link_aggregator import LinkAggregator
from webanalyse.models import LinkCounters, ProbeResult

PAGE_HTML = """
<!DOCTYPE html>
<html>
    <head><title>Example Domain</title></head>
    <body>
        <h1>Example</h1>
        <h2>One</h2><h2>Two</h2>
        <form><input type="password" name="pw"></form>
        <a href="/about">About</a>
        <a href="http://example.com/contact">Contact</a>
        <a href="http://other.com/x">Other</a>
        <a href="mailto:a@b.com">Mail</a>
        <a href="/about">About again</a>
    </body>
</html>
"""


class DownProber:
    def probe(self, url, timeout):
        return ProbeResult(url=url, error="Connection refused")


@pytest.fixture
def fetcher():
    fetcher = Mock()
    fetcher.get_document.return_value = BeautifulSoup(PAGE_HTML, "lxml")
    return fetcher


@pytest.fixture
def analyzer(fetcher):
    return PageAnalyzer(
        config=Config(max_workers=2),
        fetcher=fetcher,
        aggregator=LinkAggregator(prober=DownProber(), max_workers=2),
    )


class TestPageAnalyzer:
    """Test cases for PageAnalyzer."""

    def test_analyse(self, analyzer, fetcher):
        summary = analyzer.analyse("http://example.com")

        fetcher.get_document.assert_called_once_with("http://example.com")
        assert summary.url == "http://example.com"
        assert summary.title == "Example Domain"
        assert summary.version == "html"
        assert summary.headings == {"h1": 1, "h2": 2}
        assert summary.has_login is True
        assert summary.links == LinkCounters(internal=2, external=1, inaccessible=1)

    @pytest.mark.parametrize("url", [None, "", "   ", "\t\n"])
    def test_empty_url_raises(self, analyzer, fetcher, url):
        with pytest.raises(EmptyURLError):
            analyzer.analyse(url)
        fetcher.get_document.assert_not_called()

    def test_fetch_error_propagates(self, analyzer, fetcher):
        fetcher.get_document.side_effect = NotOkResponseError("http://example.com", 503)

        with pytest.raises(NotOkResponseError):
            analyzer.analyse("http://example.com")

    def test_builds_collaborators_from_config(self):
        config = Config(user_agent="Custom/2.0", fetch_timeout=7, probe_timeout=3, max_workers=5)

        analyzer = PageAnalyzer(config)

        assert analyzer.fetcher.user_agent == "Custom/2.0"
        assert analyzer.fetcher.timeout == 7
        assert analyzer.aggregator.probe_timeout == 3
        assert analyzer.aggregator.max_workers == 5
        assert analyzer.aggregator.prober.user_agent == "Custom/2.0"


class TestErrorMessage:
    """Test cases for user-facing error messages."""

    def test_empty_url_message(self):
        assert "Please enter one" in error_message(EmptyURLError("empty"))

    def test_not_ok_message(self):
        message = error_message(NotOkResponseError("http://example.com", 404))
        assert message == "Website did not respond properly, errorcode is: 404"

    def test_fetch_error_message(self):
        message = error_message(FetchError("http://x.invalid", "dns failure"), "http://x.invalid")
        assert message == "Could not access the website: http://x.invalid, error is: dns failure"

    def test_unknown_error_message(self):
        assert "Please try again later" in error_message(RuntimeError("?"))
