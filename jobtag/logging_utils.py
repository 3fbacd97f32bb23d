from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import JobIdSettings

_LOG_STD_KEYS = {
    'name','msg','args','levelname','levelno','pathname','filename','module','exc_info','exc_text',
    'stack_info','lineno','funcName','created','msecs','relativeCreated','thread','threadName',
    'processName','process','asctime','taskName','message'
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _LOG_STD_KEYS or k.startswith('_'):
                continue
            if isinstance(v, (str, int, float, bool)) or v is None:
                payload[k] = v
            elif isinstance(v, (list, dict)):
                try:
                    json.dumps(v)
                except (TypeError, ValueError):
                    continue
                payload[k] = v
        return json.dumps(payload, ensure_ascii=False)


class JsonLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges call-site `extra` over the static fields."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def _build_handler(logger: logging.Logger) -> logging.Handler:
    if os.getenv("LOG_JSON_TO_FILE", "").strip().lower() not in {"1", "true", "yes"}:
        # host application's logging config decides where records go
        return logging.NullHandler()

    log_path = Path(os.getenv("LOG_FILE", "logs/jobtag.jsonl"))
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError:
        handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.propagate = False
    return handler


def get_json_logger(
    name: str,
    *,
    level: int | None = None,
    static_fields: dict[str, Any] | None = None,
) -> JsonLoggerAdapter:
    """Create or fetch a JSON logger with static fields.

    On first creation the level comes from JobIdSettings (JOBTAG_LOG_LEVEL)
    unless `level` is given.

    By default records propagate to the host's handlers and nothing is
    written by jobtag itself. Env overrides:
      - LOG_JSON_TO_FILE: when truthy ("1", "true", "yes"), write JSON lines to a
        file and stop propagating. Falls back to stderr if the file cannot be opened.
      - LOG_FILE: path to JSONL log file (default: "logs/jobtag.jsonl").

    Every record carries ``component="jobtag"`` unless overridden.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(JobIdSettings().level if level is None else level)
        logger.addHandler(_build_handler(logger))
    elif level is not None:
        logger.setLevel(level)

    fields: dict[str, Any] = {"component": "jobtag"}
    fields.update(static_fields or {})
    _cid = os.getenv("CORRELATION_ID", "").strip()
    if _cid and "correlation_id" not in fields:
        fields["correlation_id"] = _cid
    return JsonLoggerAdapter(logger, extra=fields)
