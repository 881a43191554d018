"""
Tests for the logging configuration.
"""

import json
import logging

from bookkeeper.config import Settings
from bookkeeper.logging_config import JsonFormatter, get_logging_config


def make_record(**extra):
    record = logging.LogRecord(
        name="bookkeeper.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="document %s",
        args=("posted",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:

    def test_formats_message(self):
        data = json.loads(JsonFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "bookkeeper.test"
        assert data["message"] == "document posted"
        assert data["location"]["line"] == 10

    def test_includes_extra_fields(self):
        data = json.loads(JsonFormatter().format(
            make_record(owner_id=7, document_name="JE1")
        ))
        assert data["extra"] == {"owner_id": 7, "document_name": "JE1"}

    def test_unserializable_extra_is_stringified(self):
        data = json.loads(JsonFormatter().format(make_record(thing=object())))
        assert data["extra"]["thing"].startswith("<object")


class TestLoggingConfig:

    def test_json_format(self):
        settings = Settings()
        settings.LOG_FORMAT = "json"
        config = get_logging_config(settings)
        assert config["formatters"]["default"]["()"].endswith("JsonFormatter")

    def test_sql_echo_raises_engine_logger_level(self):
        settings = Settings()
        settings.SQL_ECHO = True
        config = get_logging_config(settings)
        assert config["loggers"]["sqlalchemy.engine"]["level"] == "INFO"

        settings.SQL_ECHO = False
        config = get_logging_config(settings)
        assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"

    def test_console_format(self):
        settings = Settings()
        settings.LOG_FORMAT = "console"
        settings.LOG_LEVEL = "warning"
        config = get_logging_config(settings)

        assert "format" in config["formatters"]["default"]
        assert config["loggers"]["bookkeeper"]["level"] == "WARNING"
