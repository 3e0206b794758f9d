"""
Remote version catalog.

Discovers published releases by scanning the download page for source
archive names (``go<version>.src.tar.gz``). Fetching the document and
extracting versions from it are kept apart so the scraping source can be
replaced without touching the dedup/limit logic.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import List

import requests
from requests.exceptions import RequestException, Timeout

from ..core.exceptions import CatalogError, CatalogTimeoutError
from .name import normalize_version

logger = logging.getLogger(__name__)

SOURCE_ARCHIVE_PATTERN = re.compile(r"go(\d+\.\d+(\.\d+)?)\.src\.tar\.gz")


def extract_versions(document: str, limit: int = 0) -> List[str]:
    """
    Extract release versions from a listing document.

    Args:
        document: Listing page text
        limit: Stop after this many distinct versions; ``<= 0`` means no cap

    Returns:
        Bare versions (e.g. ``"1.21.0"``) in first-seen order, without
        duplicates. Empty if nothing matches.

    Example:
        >>> extract_versions("go1.20.src.tar.gz go1.20.src.tar.gz go1.21.0.src.tar.gz")
        ['1.20', '1.21.0']
    """
    seen = set()
    versions = []

    for match in SOURCE_ARCHIVE_PATTERN.finditer(document):
        version = match.group(1)
        canonical = normalize_version(version)
        if canonical in seen:
            continue

        seen.add(canonical)
        versions.append(version)

        if limit > 0 and len(versions) >= limit:
            break

    return versions


class CatalogSource(ABC):
    """Something that can produce the release listing document."""

    @abstractmethod
    def fetch_document(self) -> str:
        """
        Fetch the listing document.

        Raises:
            CatalogError: If the document cannot be retrieved
        """
        pass


class HttpListingSource(CatalogSource):
    """Fetches the listing page with a single GET, no retries."""

    def __init__(self, url: str, timeout: float = 5):
        self.url = url
        self.timeout = timeout

    def fetch_document(self) -> str:
        logger.debug(f"Fetching release listing from {self.url}")

        try:
            # timeout bounds the connect and each read, not the whole transfer
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except Timeout as e:
            raise CatalogTimeoutError(
                f"timed out after {self.timeout}s fetching Go versions from {self.url}"
            ) from e
        except RequestException as e:
            raise CatalogError(f"failed to get Go versions from {self.url}: {e}") from e

        return response.text


class RemoteVersionCatalog:
    """Lists releases available for download."""

    def __init__(self, source: CatalogSource):
        self.source = source

    def fetch_top(self, limit: int = 10) -> List[str]:
        """
        Fetch up to ``limit`` distinct versions in listing order.

        Args:
            limit: Maximum number of versions; ``<= 0`` returns all

        Returns:
            Bare version strings

        Raises:
            CatalogError: On transport failure
            CatalogTimeoutError: If the listing does not answer in time
        """
        document = self.source.fetch_document()
        versions = extract_versions(document, limit)
        logger.debug(f"Found {len(versions)} remote versions (limit={limit})")
        return versions
