from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; only caller-supplied ``extra`` keys are emitted.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
  def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
    payload: dict[str, Any] = {
      "ts": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
    }
    if record.exc_info:
      payload["exc_info"] = self.formatException(record.exc_info)
    for key, value in getattr(record, "__dict__", {}).items():
      if key.startswith("_"):
        continue
      if key in payload or key in _RESERVED_ATTRS:
        continue
      if isinstance(value, (str, int, float, bool)) or value is None:
        payload[key] = value
    return json.dumps(payload, ensure_ascii=False)


def _log_level() -> str:
  return os.getenv("LOG_LEVEL", "INFO").upper()


def _structured_default() -> bool:
  return os.getenv("LOG_FORMAT", "plain").strip().lower() == "json"


def configure_logging(structured: bool | None = None, stream: TextIO | None = None) -> None:
  root = logging.getLogger()
  for handler in list(root.handlers):  # reset existing handlers
    root.removeHandler(handler)

  root.setLevel(_log_level())
  stream_handler = logging.StreamHandler(stream or sys.stderr)
  if structured is None:
    structured = _structured_default()
  if structured:
    stream_handler.setFormatter(JsonFormatter())
  else:
    stream_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
  root.addHandler(stream_handler)

  # Reduce noisy third-party loggers if present.
  logging.getLogger("openai").setLevel(logging.WARNING)
  logging.getLogger("httpx").setLevel(logging.WARNING)
  logging.getLogger("azure").setLevel(logging.WARNING)
