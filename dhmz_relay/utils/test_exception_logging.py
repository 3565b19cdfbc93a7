import logging
from unittest.mock import Mock

import httpx

from dhmz_relay.relay.fetcher import UpstreamUnavailable
from dhmz_relay.utils.exception_logging import (
    format_exception_message,
    log_exception_with_details,
)


class BrokenStrException(Exception):
    """An exception that breaks when __str__ is called."""

    def __str__(self):
        raise RuntimeError("Cannot convert to string!")

    def __repr__(self):
        return "BrokenStrException(cannot convert to string)"


class BrokenReprException(Exception):
    """An exception that breaks when both __str__ and __repr__ are called."""

    def __str__(self):
        raise RuntimeError("Cannot convert to string!")

    def __repr__(self):
        raise RuntimeError("Cannot convert to repr!")


def _chained_unavailable() -> UpstreamUnavailable:
    try:
        try:
            raise httpx.ConnectError("connection refused")
        except httpx.ConnectError as e:
            raise UpstreamUnavailable("https://upstream.example/feed.xml", "ConnectError") from e
    except UpstreamUnavailable as e:
        return e


class TestFormatExceptionMessage:
    def test_includes_prefix_type_and_message(self):
        message = format_exception_message("[Relay]", ValueError("bad value"))
        assert message == "[Relay] ValueError: bad value"

    def test_includes_chained_cause(self):
        message = format_exception_message("[Relay]", _chained_unavailable())

        assert message.startswith("[Relay] UpstreamUnavailable: Upstream https://upstream.example/feed.xml")
        assert "(caused by ConnectError: connection refused)" in message

    def test_broken_str_falls_back_to_repr(self):
        message = format_exception_message("[Relay]", BrokenStrException())
        assert "BrokenStrException(cannot convert to string)" in message

    def test_broken_repr_falls_back_to_type_name(self):
        message = format_exception_message("[Relay]", BrokenReprException())
        assert "<BrokenReprException object (string conversion failed)>" in message

    def test_none_exception(self):
        assert format_exception_message("[Relay]", None) == "[Relay] Exception: None"


class TestLogExceptionWithDetails:
    def test_logs_at_requested_level(self):
        logger = Mock(spec=logging.Logger)

        log_exception_with_details(logger, "[Relay]", _chained_unavailable(), level=logging.WARNING)

        logger.log.assert_called_once()
        level, message = logger.log.call_args[0]
        assert level == logging.WARNING
        assert "UpstreamUnavailable" in message
        assert logger.log.call_args[1]["exc_info"] is False

    def test_traceback_attached_on_request(self):
        logger = Mock(spec=logging.Logger)
        error = ValueError("boom")

        log_exception_with_details(logger, "[Relay]", error, include_traceback=True)

        assert logger.log.call_args[1]["exc_info"] is error

    def test_logger_failure_is_swallowed(self):
        logger = Mock(spec=logging.Logger)
        logger.log.side_effect = RuntimeError("handler exploded")

        # Must not raise
        log_exception_with_details(logger, "[Relay]", ValueError("boom"))

        assert logger.log.call_count == 2

    def test_writes_to_real_logger(self, caplog):
        logger = logging.getLogger("dhmz_relay.test")
        with caplog.at_level(logging.WARNING, logger="dhmz_relay.test"):
            log_exception_with_details(logger, "[Relay]", BrokenReprException(), level=logging.WARNING)

        assert "[Relay] BrokenReprException" in caplog.text
