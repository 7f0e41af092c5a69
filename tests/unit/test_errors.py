"""Unit tests for error types and logging setup."""

import structlog

from aggregation.config import AggregationConfig
from shared.utils.errors import (
    ConfigurationError,
    DataProcessingError,
    UnsupportedOperationError,
    ValidationError,
    create_error_context,
)
from shared.utils import logging as logging_utils
from shared.utils.logging import add_indicator_name, configure_logging, get_logger, setup_logging


class TestErrors:
    """Test structured errors."""

    def test_configuration_error_details(self):
        error = ConfigurationError("bad period", config_key="period", config_value=0)

        assert isinstance(error, DataProcessingError)
        assert error.to_dict() == {
            "error_code": "CONFIGURATION_ERROR",
            "message": "bad period",
            "details": {"config_key": "period", "config_value": "0"},
        }

    def test_unsupported_operation_with_context(self):
        context = create_error_context("aggregation", "reader", instrument_id="CO2")
        error = UnsupportedOperationError(
            "no reader", operation="reader", data_type="RenkoBar", context=context
        )
        data = error.to_dict()

        assert data["error_code"] == "UNSUPPORTED_OPERATION"
        assert data["context"]["instrument_id"] == "CO2"
        assert data["context"]["metadata"] == {}

    def test_validation_error_field(self):
        error = ValidationError("missing", field="open_price")

        assert error.details == {"field": "open_price"}
        assert str(error) == "missing"


class TestLogging:
    """Test structured logging helpers."""

    def test_setup_and_bind(self):
        setup_logging("aggregation", log_level="debug", format_type="console")
        logger = add_indicator_name(get_logger("test"), "BOL(20,2)")

        logger.debug("indicator_ready", samples=20)
        assert structlog.is_configured()

    def test_configure_from_service_config(self, clean_env, monkeypatch):
        """Observability settings from the environment reach setup_logging."""
        clean_env.setenv("DATA_PROC_LOG_LEVEL", "warning")
        clean_env.setenv("DATA_PROC_LOG_FORMAT", "console")
        config = AggregationConfig()
        calls = []
        monkeypatch.setattr(
            logging_utils, "setup_logging", lambda *args, **kwargs: calls.append((args, kwargs))
        )

        configure_logging(config)

        assert calls == [
            (("aggregation",), {"log_level": "warning", "format_type": "console"})
        ]

    def test_configure_with_defaults(self, test_config):
        configure_logging(test_config)

        assert structlog.is_configured()
