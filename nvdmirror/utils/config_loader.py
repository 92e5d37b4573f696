"""
Configuration loader for environment variables and CLI overrides
"""
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any, Mapping

from .file_utils import ensure_dir


DEFAULT_START_YEAR = 2002

# Environment variable names for each configuration key. The first name
# that holds a non-empty value wins.
ENV_KEYS: Dict[str, tuple] = {
    "bucket_name": ("BUCKET_NAME", "S3_BUCKET_NAME"),
    "start_year": ("START_YEAR",),
    "end_year": ("END_YEAR",),
    "output_dir": ("OUTPUT_DIR",),
    "aws_profile": ("AWS_PROFILE",),
    "aws_region": ("AWS_REGION", "AWS_DEFAULT_REGION"),
    "request_timeout": ("REQUEST_TIMEOUT",),
}


class ConfigError(Exception):
    """Raised when the mirror cannot start because of bad configuration."""


@dataclass(frozen=True)
class MirrorConfig:
    """Immutable settings for one mirror run."""

    bucket_name: str
    start_year: int
    end_year: int
    output_dir: str
    aws_profile: Optional[str] = None
    aws_region: Optional[str] = None
    request_timeout: Optional[float] = None


class ConfigLoader:
    """Builds a :class:`MirrorConfig` from CLI overrides and the environment."""

    @staticmethod
    def _lookup(key, overrides, environ):
        """
        Resolve a single raw value.

        Explicit overrides take precedence over environment variables.
        Empty strings are treated as unset.

        Args:
            key: Configuration key (see ``ENV_KEYS``)
            overrides: Mapping of key to value from the command line
            environ: Environment mapping

        Returns:
            Raw string value, or None if unset
        """
        value = overrides.get(key)
        if value is not None and str(value) != "":
            return str(value)

        for env_name in ENV_KEYS[key]:
            value = environ.get(env_name)
            if value:
                return value
        return None

    @staticmethod
    def _parse_int(key, raw):
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"{key} must be an integer, got {raw!r}") from None

    @staticmethod
    def load(overrides: Optional[Dict[str, Any]] = None,
             environ: Optional[Mapping[str, str]] = None) -> MirrorConfig:
        """
        Load mirror configuration.

        Args:
            overrides: Values given on the command line, keyed like
                :class:`MirrorConfig` fields. None values are ignored.
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            MirrorConfig instance

        Raises:
            ConfigError: If the bucket name is missing or a number is invalid
        """
        overrides = overrides or {}
        environ = os.environ if environ is None else environ
        lookup = lambda key: ConfigLoader._lookup(key, overrides, environ)  # noqa: E731

        bucket_name = lookup("bucket_name")
        if not bucket_name:
            raise ConfigError(
                "BUCKET_NAME must be defined as environment variable or --bucket option"
            )

        raw = lookup("start_year")
        start_year = ConfigLoader._parse_int("START_YEAR", raw) if raw else DEFAULT_START_YEAR

        raw = lookup("end_year")
        end_year = ConfigLoader._parse_int("END_YEAR", raw) if raw else datetime.now().year

        output_dir = lookup("output_dir") or tempfile.gettempdir()

        raw = lookup("request_timeout")
        request_timeout = None
        if raw:
            try:
                request_timeout = float(raw)
            except ValueError:
                raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {raw!r}") from None

        return MirrorConfig(
            bucket_name=bucket_name,
            start_year=start_year,
            end_year=end_year,
            output_dir=os.path.abspath(output_dir),
            aws_profile=lookup("aws_profile"),
            aws_region=lookup("aws_region"),
            request_timeout=request_timeout,
        )

    @staticmethod
    def ensure_output_dir(config: MirrorConfig) -> str:
        """
        Create the output directory (recursively) if it does not exist.

        Args:
            config: Mirror configuration

        Returns:
            Absolute path to the output directory
        """
        return ensure_dir(config.output_dir)
