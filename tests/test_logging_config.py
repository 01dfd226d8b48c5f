"""
Test suite for structured logging setup
"""

import json
import logging
import sys

from core_money.config import CoreMoneyConfig
from core_money.logging_config import JSONFormatter, get_logger, setup_logging, setup_logging_from_config
from core_money.exchange import Exchange, ExchangeRate
from core_money.iso import EUR, USD


class TestJSONFormatter:
    """Test JSON log records"""

    def test_format(self):
        record = logging.LogRecord(
            name="core_money.exchange", level=logging.INFO, pathname=__file__, lineno=1,
            msg="Rate %s set", args=("USD/EUR",), exc_info=None,
        )
        record.currency = "USD"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "core_money.exchange"
        assert entry["message"] == "Rate USD/EUR set"
        assert entry["currency"] == "USD"
        assert "operation" not in entry
        assert "timestamp" in entry

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                name="core_money", level=logging.ERROR, pathname=__file__, lineno=1,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetupLogging:
    """Test logger configuration"""

    def teardown_method(self):
        """Detach handlers installed by the tests"""
        logger = logging.getLogger("core_money")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_single_handler(self):
        setup_logging("DEBUG")
        logger = setup_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_text_format(self):
        logger = setup_logging(log_format="text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "money.log"
        setup_logging("DEBUG", log_file=str(log_file))

        exchange = Exchange()
        exchange.set_rate(ExchangeRate(USD, EUR, "0.85"))

        for handler in get_logger().handlers:
            handler.flush()
        lines = log_file.read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["logger"] == "core_money.exchange"
        assert "USD -> EUR" in entry["message"]

    def test_from_config(self):
        logger = setup_logging_from_config(CoreMoneyConfig(log_level="ERROR", log_format="text"))
        assert logger.name == "core_money"
        assert logger.level == logging.ERROR
