"""AWS utilities for session management.

This module provides boto3 session and client creation from a
:class:`~nvdmirror.utils.config_loader.MirrorConfig`.
"""
from typing import Optional

import boto3


def create_boto3_session(
    profile_name: Optional[str] = None,
    region_name: Optional[str] = None
):
    """Create a boto3 session.

    When *profile_name* is None the default credential chain is used
    (environment variables, shared config, instance role).

    Args:
        profile_name: Optional AWS profile name
        region_name: Optional AWS region

    Returns:
        boto3.Session object

    Example:
        >>> session = create_boto3_session('mirror', 'us-east-1')
        >>> s3 = session.client('s3')
    """
    return boto3.Session(profile_name=profile_name, region_name=region_name)


def create_s3_client(config):
    """Create the S3 client used by the mirror.

    Args:
        config: MirrorConfig with optional ``aws_profile`` / ``aws_region``

    Returns:
        botocore S3 client
    """
    session = create_boto3_session(config.aws_profile, config.aws_region)
    return session.client('s3')
