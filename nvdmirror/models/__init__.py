"""
Data models for nvd-mirror
"""

from .feed import FeedFormat, FeedSource, SyncDecision, SyncOutcome, build_feed_sources

__all__ = ['FeedFormat', 'FeedSource', 'SyncDecision', 'SyncOutcome', 'build_feed_sources']
