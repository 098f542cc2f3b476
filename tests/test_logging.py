"""Tests for request logging."""

import logging
from unittest.mock import patch

from core.config import Settings
from core.logging import LOGGER_NAME, log_request, setup_logging


class TestLogRequest:

    def test_level_follows_status(self, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        log_request("POST", "/api/connect", 200, 12.4)
        log_request("POST", "/api/getTableInfo", 404, 3)
        log_request("POST", "/api/runQuery", 500, 40)

        assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING, logging.ERROR]
        assert caplog.records[0].getMessage() == "POST /api/connect 200 in 12ms"

    def test_setup_accepts_level_names(self):
        assert setup_logging("debug").level == logging.DEBUG
        assert setup_logging("nonsense").level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING


class TestLoggingMiddleware:

    def test_only_api_calls_are_logged(self, client):
        with patch("middleware.logging.log_request") as logged:
            client.get("/health")
            client.get("/api/loadData")

        assert [c.args[:3] for c in logged.call_args_list] == [("GET", "/api/loadData", 200)]

    def test_slow_calls_warn(self, client):
        with patch("middleware.logging.get_settings", return_value=Settings(slow_request_ms=1000)), \
                patch("middleware.logging.perf_counter", side_effect=[10.0, 12.5]), \
                patch("middleware.logging.log_warning") as warned:
            client.get("/api/loadData")

        assert warned.call_count == 1
        assert warned.call_args.args[0] == "Slow request /api/loadData took 2500ms"
