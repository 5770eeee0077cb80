import io
import json
import logging

import pytest

from aoai_cli.app_logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {"name": "aoai_cli.test", "levelname": "ERROR", "msg": "call failed: %s", "args": ("401",), "deployment": "gpt-4o"}
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "aoai_cli.test"
    assert payload["message"] == "call failed: 401"
    assert payload["deployment"] == "gpt-4o"
    assert "msg" not in payload
    assert payload["ts"].endswith("Z")


def test_configure_logging_plain(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    stream = io.StringIO()

    configure_logging(stream=stream)
    logging.getLogger("aoai_cli.sample").debug("hello")

    assert logging.getLogger().level == logging.DEBUG
    assert "DEBUG aoai_cli.sample: hello" in stream.getvalue()


def test_configure_logging_json_from_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    stream = io.StringIO()

    configure_logging(stream=stream)
    logging.getLogger("aoai_cli.sample").error("boom")

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "boom"
    assert logging.getLogger("openai").level == logging.WARNING
