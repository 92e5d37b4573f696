"""
Tests for logging setup.
"""

import logging

from nvdmirror.utils.logger import ColouredFormatter, get_logger, setup_logging


class TestLogger:
    """Tests for the nvdmirror logger helpers."""

    def test_names_are_namespaced(self):
        assert get_logger("feeds").name == "nvdmirror.feeds"
        assert get_logger("nvdmirror.cli").name == "nvdmirror.cli"

    def test_levels(self):
        setup_logging(quiet=True)
        assert logging.getLogger("nvdmirror").level == logging.WARNING
        setup_logging(verbose=True)
        assert logging.getLogger("nvdmirror").level == logging.DEBUG
        setup_logging()
        assert logging.getLogger("nvdmirror").level == logging.INFO

    def test_single_handler_after_repeated_setup(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("nvdmirror").handlers) == 1

    def test_formatter_tags_level(self):
        record = logging.LogRecord("nvdmirror", logging.ERROR, __file__, 1, "Download failed", None, None)
        assert "[ERROR]" in ColouredFormatter("%(message)s").format(record)
