"""
Mirror synchronization engine.

Provides :class:`MirrorSyncEngine`, which brings each feed in the S3
bucket up to date with the remote NVD copy. A feed is skipped when the
stored object has the same size as the remote file; otherwise it is
downloaded into the output directory and uploaded to the bucket.
"""
from typing import Iterable, List, Tuple

import requests

from ..models.feed import FeedSource, SyncOutcome
from ..utils.file_utils import get_feed_path
from ..utils.logger import get_logger

log = get_logger(__name__)


class MirrorSyncEngine:
    """Sequentially mirrors feed files into the bucket.

    Args:
        config: MirrorConfig for the run
        feed_client: :class:`~nvdmirror.services.feed_client.FeedClient`
        storage: :class:`~nvdmirror.services.aws.operations.S3Operations`
    """

    def __init__(self, config, feed_client, storage):
        self.config = config
        self.feed_client = feed_client
        self.storage = storage

    def is_current(self, source: FeedSource) -> bool:
        """Check whether the stored object matches the remote feed size.

        Raises:
            ClientError: If the bucket lookup fails for a reason other
                than the object being absent
        """
        stored_size = self.storage.get_object_size(source.filename)
        if stored_size is None:
            return False

        remote_size = self.feed_client.probe_size(source.url)
        log.debug("%s: stored=%s remote=%s", source.filename, stored_size, remote_size)
        return stored_size == remote_size

    def sync(self, source: FeedSource) -> SyncOutcome:
        """Bring a single feed up to date.

        Args:
            source: Feed to mirror

        Returns:
            SyncOutcome for the feed
        """
        if self.is_current(source):
            log.info("Using cached version of %s", source.filename)
            return SyncOutcome.SKIPPED

        local_path = get_feed_path(self.config.output_dir, source.filename)
        log.info("Downloading %s", source.url)
        try:
            size = self.feed_client.download(source.url, local_path)
        except (requests.RequestException, OSError) as e:
            log.error("Download failed : %s", e)
            return SyncOutcome.FETCH_FAILED

        self.storage.upload_file(local_path, source.filename)
        log.info("Stored %s (%d bytes) in bucket %s",
                 source.filename, size, self.config.bucket_name)
        return SyncOutcome.STORED

    def run(self, sources: Iterable[FeedSource]) -> List[Tuple[FeedSource, SyncOutcome]]:
        """Mirror every feed in order, one at a time.

        A failed download only affects its own feed.

        Returns:
            List of (source, outcome) pairs in processing order
        """
        return [(source, self.sync(source)) for source in sources]
