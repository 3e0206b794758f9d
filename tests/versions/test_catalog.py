"""
Tests for the remote version catalog.
"""

import pytest
import responses
from unittest.mock import patch

from requests.exceptions import ConnectTimeout, ConnectionError as RequestsConnectionError

from gvs.core.exceptions import CatalogError, CatalogTimeoutError
from gvs.versions.catalog import (
    CatalogSource,
    HttpListingSource,
    RemoteVersionCatalog,
    extract_versions,
)

LISTING_URL = "https://go.dev/dl/"

SAMPLE_BODY = """
<a class="download" href="/dl/go1.20.src.tar.gz">go1.20.src.tar.gz</a>
<a class="download" href="/dl/go1.20.src.tar.gz">go1.20.src.tar.gz</a>
<a class="download" href="/dl/go1.21.0.src.tar.gz">go1.21.0.src.tar.gz</a>
"""

LISTING_PAGE = """
<html><body>
<a href="/dl/go1.22.1.src.tar.gz">go1.22.1.src.tar.gz</a>
<a href="/dl/go1.22.1.linux-amd64.tar.gz">go1.22.1.linux-amd64.tar.gz</a>
<a href="/dl/go1.22.0.src.tar.gz">go1.22.0.src.tar.gz</a>
<a href="/dl/go1.22rc1.src.tar.gz">go1.22rc1.src.tar.gz</a>
<a href="/dl/go1.21.8.src.tar.gz">go1.21.8.src.tar.gz</a>
<a href="/dl/go1.22.1.src.tar.gz">go1.22.1.src.tar.gz</a>
</body></html>
"""


class StaticSource(CatalogSource):
    def __init__(self, document):
        self.document = document
        self.calls = 0

    def fetch_document(self):
        self.calls += 1
        return self.document


@pytest.mark.unit
class TestExtractVersions:
    def test_limit_one_on_duplicates(self):
        assert extract_versions(SAMPLE_BODY, limit=1) == ["1.20"]

    def test_dedup_preserves_order(self):
        assert extract_versions(SAMPLE_BODY, limit=0) == ["1.20", "1.21.0"]

    def test_unbounded_when_negative(self):
        assert extract_versions(LISTING_PAGE, limit=-1) == ["1.22.1", "1.22.0", "1.21.8"]

    def test_limit_caps_output(self):
        assert extract_versions(LISTING_PAGE, limit=2) == ["1.22.1", "1.22.0"]

    def test_limit_larger_than_matches(self):
        assert extract_versions(LISTING_PAGE, limit=50) == ["1.22.1", "1.22.0", "1.21.8"]

    def test_ignores_binary_archives_and_prereleases(self):
        versions = extract_versions(LISTING_PAGE)
        assert "1.22rc1" not in versions
        assert all(v.count(".") in (1, 2) for v in versions)

    def test_no_matches_is_empty(self):
        assert extract_versions("<html>nothing here</html>", limit=10) == []


class TestRemoteVersionCatalog:
    def test_fetch_top_uses_source(self):
        source = StaticSource(SAMPLE_BODY)
        catalog = RemoteVersionCatalog(source)

        assert catalog.fetch_top(1) == ["1.20"]
        assert source.calls == 1

    def test_empty_document(self):
        assert RemoteVersionCatalog(StaticSource("")).fetch_top(10) == []


class TestHttpListingSource:
    @responses.activate
    def test_fetches_page(self):
        responses.add(responses.GET, LISTING_URL, body=LISTING_PAGE, status=200)

        catalog = RemoteVersionCatalog(HttpListingSource(LISTING_URL, timeout=5))

        assert catalog.fetch_top(10) == ["1.22.1", "1.22.0", "1.21.8"]
        assert len(responses.calls) == 1

    @responses.activate
    def test_timeout_is_hard_failure(self):
        responses.add(responses.GET, LISTING_URL, body=ConnectTimeout("slow"))

        with pytest.raises(CatalogTimeoutError, match="timed out"):
            HttpListingSource(LISTING_URL, timeout=5).fetch_document()

        # No retry
        assert len(responses.calls) == 1

    @responses.activate
    def test_connection_error(self):
        responses.add(responses.GET, LISTING_URL, body=RequestsConnectionError("refused"))

        with pytest.raises(CatalogError, match="failed to get Go versions"):
            HttpListingSource(LISTING_URL).fetch_document()

    @responses.activate
    def test_http_error_status(self):
        responses.add(responses.GET, LISTING_URL, status=503)

        with pytest.raises(CatalogError):
            HttpListingSource(LISTING_URL).fetch_document()

    def test_timeout_passed_to_requests(self):
        with patch("gvs.versions.catalog.requests.get") as mock_get:
            mock_get.return_value.text = SAMPLE_BODY
            HttpListingSource(LISTING_URL, timeout=5).fetch_document()

        mock_get.assert_called_once_with(LISTING_URL, timeout=5)
