"""
Feed model: the set of NVD files to mirror and the per-feed sync results
"""
import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlparse


class FeedFormat(str, Enum):
    """Data format of a feed file."""
    XML_12 = "xml-1.2"
    XML_20 = "xml-2.0"
    JSON_10 = "json-1.0"


CVE_XML_12_MODIFIED_URL = "https://nvd.nist.gov/download/nvdcve-Modified.xml.gz"
CVE_XML_20_MODIFIED_URL = "https://nvd.nist.gov/feeds/xml/cve/nvdcve-2.0-Modified.xml.gz"
CVE_JSON_10_MODIFIED_URL = "https://static.nvd.nist.gov/feeds/json/cve/1.0/nvdcve-1.0-modified.json.gz"

CVE_XML_12_BASE_URL = "https://nvd.nist.gov/download/nvdcve-{year}.xml.gz"
CVE_XML_20_BASE_URL = "https://nvd.nist.gov/feeds/xml/cve/nvdcve-2.0-{year}.xml.gz"
CVE_JSON_10_BASE_URL = "https://static.nvd.nist.gov/feeds/json/cve/1.0/nvdcve-1.0-{year}.json.gz"

MODIFIED_FEEDS = (
    (CVE_XML_12_MODIFIED_URL, FeedFormat.XML_12),
    (CVE_XML_20_MODIFIED_URL, FeedFormat.XML_20),
    (CVE_JSON_10_MODIFIED_URL, FeedFormat.JSON_10),
)

YEARLY_FEEDS = (
    (CVE_XML_12_BASE_URL, FeedFormat.XML_12),
    (CVE_XML_20_BASE_URL, FeedFormat.XML_20),
    (CVE_JSON_10_BASE_URL, FeedFormat.JSON_10),
)


class SyncDecision(str, Enum):
    """What the engine decided to do with a feed."""
    SKIP = "skip"
    FETCH_AND_STORE = "fetch_and_store"


class SyncOutcome(str, Enum):
    """Terminal state of one feed after a sync pass."""
    SKIPPED = "skipped"
    STORED = "stored"
    FETCH_FAILED = "fetch_failed"

    @property
    def decision(self) -> SyncDecision:
        if self is SyncOutcome.SKIPPED:
            return SyncDecision.SKIP
        return SyncDecision.FETCH_AND_STORE


@dataclass(frozen=True)
class FeedSource:
    """A single remote feed file.

    ``filename`` is the last segment of the URL path and doubles as the
    local filename and the S3 object key.
    """

    url: str
    filename: str
    format: Optional[FeedFormat] = None
    year: Optional[int] = None

    @classmethod
    def from_url(cls, url, feed_format=None, year=None) -> "FeedSource":
        """Create a feed source, deriving the filename from the URL path.

        Raises:
            ValueError: If the URL path has no final segment
        """
        filename = posixpath.basename(urlparse(url).path)
        if not filename:
            raise ValueError(f"Cannot derive a filename from {url!r}")
        return cls(url=url, filename=filename, format=feed_format, year=year)

    @property
    def is_modified(self) -> bool:
        return self.year is None


def build_feed_sources(start_year: int, end_year: int) -> Tuple[FeedSource, ...]:
    """Expand the feed URL templates over a year range.

    Order is the three "modified" feeds first, then for each year from
    ``start_year`` to ``end_year`` (inclusive) the XML 1.2, XML 2.0 and
    JSON 1.0 feeds. An empty range yields only the modified feeds.

    Args:
        start_year: First year to mirror
        end_year: Last year to mirror (inclusive)

    Returns:
        Tuple of FeedSource in processing order

    Raises:
        ValueError: If two sources would share a filename
    """
    sources = [FeedSource.from_url(url, fmt) for url, fmt in MODIFIED_FEEDS]

    for year in range(start_year, end_year + 1):
        for template, fmt in YEARLY_FEEDS:
            sources.append(FeedSource.from_url(template.format(year=year), fmt, year))

    seen = set()
    for source in sources:
        if source.filename in seen:
            raise ValueError(f"Duplicate feed filename: {source.filename}")
        seen.add(source.filename)

    return tuple(sources)
