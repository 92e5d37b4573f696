"""
HTTP client for the remote NVD feed files
"""
from typing import Optional

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from ..utils.logger import get_logger

log = get_logger(__name__)

CHUNK_SIZE = 64 * 1024

# Size reported when the HEAD probe fails. A stored object of the same
# size will be treated as current.
PROBE_FAILED_SIZE = 0


class FeedClient:
    """
    Fetches feed metadata and content over HTTP.

    Feed files are gzip archives and are written exactly as served;
    no content decoding is applied.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Initialize feed client.

        Args:
            session: requests session to reuse (a new one is created if None)
            timeout: Per-request timeout in seconds, or None to wait forever
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def probe_size(self, url: str) -> Optional[int]:
        """
        Get the remote size of a feed without downloading it.

        Args:
            url: Feed URL

        Returns:
            Content length in bytes, None if the server did not report one,
            or ``PROBE_FAILED_SIZE`` if the request failed
        """
        try:
            response = self.session.head(url, allow_redirects=True, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            log.warning("Failed to determine content length for %s: %s", url, e)
            return PROBE_FAILED_SIZE

        length = response.headers.get("Content-Length")
        if length is None:
            return None
        try:
            return int(length)
        except ValueError:
            log.debug("Ignoring invalid Content-Length %r for %s", length, url)
            return None

    def download(self, url: str, dest_path: str) -> int:
        """
        Stream a feed to a local file, overwriting it.

        Args:
            url: Feed URL
            dest_path: Local file path

        Returns:
            Number of bytes written

        Raises:
            requests.RequestException: On HTTP or transport failure
            OSError: If the local file cannot be written
        """
        written = 0
        with self.session.get(url, stream=True, timeout=self.timeout) as response:
            response.raise_for_status()
            with open(dest_path, "wb") as fh:
                try:
                    for chunk in response.raw.stream(CHUNK_SIZE, decode_content=False):
                        fh.write(chunk)
                        written += len(chunk)
                except Urllib3HTTPError as e:
                    # Mid-body failures surface from urllib3 directly
                    raise requests.ConnectionError(e) from e
        return written
