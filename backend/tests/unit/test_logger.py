"""
Unit tests for logging setup.

WHAT: Test handler installation, levels and chat room/connection context
WHY: Interleaved chat logs are only useful if each line names its room
HOW: Run setup_logging into a tmp file and inspect root handlers and records
"""

import logging

import pytest

from marketchat.utils.logger import ChatContextFilter, chat_logger, get_logger, setup_logging


@pytest.fixture
def installed(tmp_path):
    """Collect handlers installed during a test and remove them afterwards."""
    handlers = []
    root_level = logging.getLogger().level

    def _setup(level="INFO"):
        result = setup_logging(level=level, log_file=str(tmp_path / "logs" / "chat.log"))
        handlers[:] = result
        return result

    yield _setup

    root = logging.getLogger()
    for handler in handlers:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(root_level)


def _ours(handlers):
    return [h for h in handlers if getattr(h, "_marketchat_handler", False)]


@pytest.mark.unit
class TestSetupLogging:
    """Handler installation."""

    def test_installs_console_and_file_handlers(self, installed, tmp_path):
        handlers = installed()

        assert len(handlers) == 2
        assert (tmp_path / "logs" / "chat.log").exists()
        assert all(h in logging.getLogger().handlers for h in handlers)

    def test_console_follows_configured_level(self, installed):
        console, file_handler = installed(level="WARNING")

        assert console.level == logging.WARNING
        assert file_handler.level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_second_call_replaces_previous_handlers(self, installed):
        first = installed()
        second = installed()

        root_handlers = _ours(logging.getLogger().handlers)
        assert len(root_handlers) == 2
        assert all(h in root_handlers for h in second)
        assert not any(h in root_handlers for h in first)

    def test_foreign_handlers_survive(self, installed):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            installed()
            installed()
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)


@pytest.mark.unit
class TestChatContext:
    """Room/connection fields on log records."""

    def test_chat_logger_tags_records(self, caplog):
        log = chat_logger(get_logger("marketchat.tests.chat"), "p2", "c1")

        with caplog.at_level(logging.INFO, logger="marketchat.tests.chat"):
            log.info("Vendor joined chat room")

        record = caplog.records[-1]
        assert record.room == "p2"
        assert record.conn == "c1"
        assert record.getMessage() == "Vendor joined chat room"

    def test_connection_is_optional(self, caplog):
        log = chat_logger(get_logger("marketchat.tests.chat"), "p2")

        with caplog.at_level(logging.INFO, logger="marketchat.tests.chat"):
            log.info("Room emptied")

        assert caplog.records[-1].conn == "-"

    def test_records_without_context_still_format(self, installed):
        console, _ = installed()
        record = logging.LogRecord("marketchat.main", logging.INFO, __file__, 1, "Starting", None, None)

        assert ChatContextFilter().filter(record) is True
        line = console.format(record)

        assert "[room=- conn=-] Starting" in line

    def test_context_appears_in_formatted_line(self, installed):
        console, _ = installed()
        record = logging.LogRecord("marketchat.realtime", logging.INFO, __file__, 1, "Deal finalized", None, None)
        record.room = "p2"
        record.conn = "c9"

        assert "[room=p2 conn=c9] Deal finalized" in console.format(record)
