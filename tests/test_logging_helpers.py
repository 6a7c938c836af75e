"""Tests for logging helper utilities."""

import logging

from utils.logging_helpers import log_error_section, log_info_header, log_warning_section

logger = logging.getLogger("dtrscan.tests")


class TestLogSections:
    """Tests for sectioned log output."""

    def test_error_section(self, caplog):
        """Test error sections are framed and keep blank lines."""
        log_error_section("Error getting namespaces.", ["first", "", "second"], logger=logger, width=10)
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["=" * 10, "Error getting namespaces.", "first", "", "second", "=" * 10]
        assert all(r.levelno == logging.ERROR for r in caplog.records)

    def test_warning_section(self, caplog):
        """Test warning sections log at WARNING level."""
        log_warning_section("Dry run", ["no scans"], logger=logger)
        assert [r.levelno for r in caplog.records] == [logging.WARNING] * 4

    def test_info_header(self, caplog):
        """Test headers use the given separator character."""
        with caplog.at_level(logging.INFO):
            log_info_header("Sweeping", logger=logger, width=5, char="-")
        assert [r.getMessage() for r in caplog.records] == ["-----", "Sweeping", "-----"]

    def test_defaults_to_root_logger(self, caplog):
        """Test sections without an explicit logger go to the root logger."""
        log_error_section("Error getting namespaces.", ["missing"])
        assert [r.name for r in caplog.records] == ["root"] * 4
        assert caplog.records[0].getMessage() == "=" * 60
