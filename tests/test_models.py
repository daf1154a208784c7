# tests/test_models.py
"""Tests for analysis data models."""

import dataclasses

import pytest
from webanalyse.models import LinkCounters, PageSummary, ProbeResult


class TestProbeResult:
    """Test cases for ProbeResult."""

    @pytest.mark.parametrize("status", [200, 204, 301, 399])
    def test_status_below_400_is_reachable(self, status):
        assert ProbeResult(url="http://a.com", status_code=status).reachable is True

    @pytest.mark.parametrize("status", [400, 403, 404, 500, 503])
    def test_error_status_is_unreachable(self, status):
        assert ProbeResult(url="http://a.com", status_code=status).reachable is False

    def test_network_error_is_unreachable(self):
        result = ProbeResult(url="http://a.com", error="Connection refused")
        assert result.reachable is False
        assert result.status_code is None

    def test_empty_result_is_unreachable(self):
        assert ProbeResult(url="http://a.com").reachable is False


class TestPageSummary:
    """Test cases for PageSummary and LinkCounters."""

    def test_summary_is_immutable(self):
        summary = PageSummary(url="http://example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.title = "changed"

    def test_headings_are_read_only(self):
        headings = {"h1": 1}
        summary = PageSummary(url="http://example.com", headings=headings)

        headings["h2"] = 3
        with pytest.raises(TypeError):
            summary.headings["h1"] = 5

        assert summary.headings == {"h1": 1}

    def test_counters_total(self):
        counters = LinkCounters(internal=3, external=2, inaccessible=1)
        assert counters.total == 5

    def test_to_dict(self):
        summary = PageSummary(
            url="http://example.com",
            title="Example",
            version="html",
            headings={"h1": 1},
            has_login=True,
            links=LinkCounters(internal=2, external=1, inaccessible=1),
        )
        assert summary.to_dict() == {
            "url": "http://example.com",
            "title": "Example",
            "version": "html",
            "headings": {"h1": 1},
            "has_login": True,
            "internal_links": 2,
            "external_links": 1,
            "inaccessible_links": 1,
        }
