"""
Mirror services for nvd-mirror.

- feed_client - HTTP probe and download of NVD feed files
- aws/ - S3 bucket operations
- sync_engine - per-feed skip / download / upload decisions
"""
from .feed_client import FeedClient
from .sync_engine import MirrorSyncEngine

__all__ = [
    'FeedClient',
    'MirrorSyncEngine',
]
