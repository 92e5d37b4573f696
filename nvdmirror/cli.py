"""
nvd-mirror - Main CLI interface

Mirrors the NVD CVE data feeds into a local directory and an S3 bucket.
Configuration comes from environment variables; command-line options
override them.
"""
import sys
import argparse
from datetime import datetime
from colorama import init
from . import __version__
from .models.feed import build_feed_sources
from .services.aws.operations import S3Operations
from .services.feed_client import FeedClient
from .services.sync_engine import MirrorSyncEngine
from .utils.aws.aws_utils import create_s3_client
from .utils.config_loader import ConfigLoader, ConfigError
from .utils.logger import get_logger, setup_logging

# Initialize colorama
init(autoreset=True)

log = get_logger(__name__)

EPILOG = """\
Environment:
  BUCKET_NAME       S3 bucket to mirror into (required)
  START_YEAR        First feed year (default: 2002)
  END_YEAR          Last feed year (default: current year)
  OUTPUT_DIR        Local download directory (default: system temp dir)
  AWS_PROFILE       AWS profile to use (default credential chain if unset)
  AWS_REGION        AWS region
  REQUEST_TIMEOUT   HTTP timeout in seconds (default: none)

Examples:
  BUCKET_NAME=nvd-mirror nvd-mirror
  nvd-mirror --bucket nvd-mirror --start-year 2020 --end-year 2021
"""


def create_argument_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog='nvd-mirror',
        description='Mirror NVD CVE data feeds to a local directory and an S3 bucket',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--bucket', dest='bucket_name', help='S3 bucket name')
    parser.add_argument('--start-year', dest='start_year', help='First feed year')
    parser.add_argument('--end-year', dest='end_year', help='Last feed year')
    parser.add_argument('--output-dir', dest='output_dir', help='Local download directory')
    parser.add_argument('--profile', dest='aws_profile', help='AWS profile name')
    parser.add_argument('--region', dest='aws_region', help='AWS region')
    parser.add_argument('--timeout', dest='request_timeout', help='HTTP timeout in seconds')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--quiet', action='store_true', help='Only show warnings and errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _config_overrides(args):
    keys = ('bucket_name', 'start_year', 'end_year', 'output_dir',
            'aws_profile', 'aws_region', 'request_timeout')
    return {key: getattr(args, key) for key in keys}


def build_engine(config, s3_client=None, session=None):
    """Wire up the sync engine and verify the bucket.

    Args:
        config: MirrorConfig
        s3_client: Optional pre-built S3 client
        session: Optional requests session for feed downloads

    Returns:
        MirrorSyncEngine ready to run

    Raises:
        ConfigError: If the bucket does not exist
    """
    storage = S3Operations(config.bucket_name, s3_client or create_s3_client(config))
    if not storage.bucket_exists():
        raise ConfigError(f"S3 bucket {config.bucket_name} does not exist")

    feed_client = FeedClient(session=session, timeout=config.request_timeout)
    return MirrorSyncEngine(config, feed_client, storage)


def main(argv=None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = ConfigLoader.load(_config_overrides(args))
        ConfigLoader.ensure_output_dir(config)
        engine = build_engine(config)
    except ConfigError as e:
        log.error("%s", e)
        return 1

    log.debug("Mirroring %d-%d into %s (bucket %s)",
              config.start_year, config.end_year, config.output_dir, config.bucket_name)
    log.info("Downloading files at %s", datetime.now())

    engine.run(build_feed_sources(config.start_year, config.end_year))
    return 0


if __name__ == '__main__':
    sys.exit(main())
