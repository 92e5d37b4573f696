"""
AWS S3 service package.

- :mod:`operations` — primitive S3 bucket/object helpers
"""
from .operations import S3Operations

__all__ = [
    'S3Operations',
]
