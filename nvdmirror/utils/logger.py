"""Centralized logging configuration for nvd-mirror.

Provides coloured console output via *colorama* and supports ``--verbose``
/ ``--quiet`` flags through log-level selection.

Usage::

    from nvdmirror.utils.logger import get_logger

    log = get_logger(__name__)
    log.info("Downloading %s", url)
    log.warning("Failed to determine content length for %s", url)
    log.debug("Remote size: %s", size)  # only shown with --verbose
"""
import logging
import sys

from colorama import Fore, Style

__all__ = ["get_logger", "setup_logging"]

# ---------------------------------------------------------------------------
# Custom formatter that injects colorama colours per level
# ---------------------------------------------------------------------------

_LEVEL_COLOURS = {
    logging.DEBUG: Fore.WHITE,
    logging.INFO: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColouredFormatter(logging.Formatter):
    """Formatter that prepends coloured level tags to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        colour = _LEVEL_COLOURS.get(record.levelno, "")
        msg = super().format(record)
        return f"{colour}[{record.levelname}]{Style.RESET_ALL} {msg}"


# ---------------------------------------------------------------------------
# Module-level setup
# ---------------------------------------------------------------------------

_ROOT_LOGGER_NAME = "nvdmirror"
_configured = False


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root *nvdmirror* logger.

    Progress is reported on standard output, so the handler writes to
    ``sys.stdout`` rather than stderr.

    Args:
        verbose: If *True*, set level to ``DEBUG``.
        quiet: If *True*, set level to ``WARNING`` (overrides *verbose*).
    """
    global _configured  # noqa: PLW0603

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColouredFormatter("%(message)s"))
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            handler.setLevel(level)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the *nvdmirror* namespace.

    If :func:`setup_logging` has not been called yet, a default
    ``INFO``-level configuration is applied automatically.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    if not _configured:
        setup_logging()

    if not name.startswith(_ROOT_LOGGER_NAME):
        name = f"{_ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
