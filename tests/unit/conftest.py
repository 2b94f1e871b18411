"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are faked.
Unit tests should be fast and isolated, never touching the network.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest

from nsadmin.cli.output import OutputSink, PrintFormat


# =============================================================================
# Output Fixtures
# =============================================================================


@pytest.fixture
def normal_sink() -> OutputSink:
    """Sink rendering human-readable output."""
    return OutputSink(PrintFormat.NORMAL)


@pytest.fixture
def json_sink() -> OutputSink:
    """Sink rendering JSON output."""
    return OutputSink(PrintFormat.JSON)


# =============================================================================
# Payload Fixtures
# =============================================================================


@pytest.fixture
def stats_payload() -> dict[str, Any]:
    """Stats body as returned by the admin API."""
    return {
        "rows_read_count": 10,
        "rows_written_count": 2,
        "storage_bytes_used": 4096,
        "write_requests_delegated": 1,
        "replication_index": 7,
        "top_queries": [
            {"rows_written": 0, "rows_read": 8, "query": "SELECT * FROM users"},
            {"rows_written": 2, "rows_read": 2, "query": "INSERT INTO users VALUES (?)"},
        ],
    }


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("nsadmin.cli.client.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger
