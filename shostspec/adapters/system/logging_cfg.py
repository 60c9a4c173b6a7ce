# /shostspec/adapters/system/logging_cfg.py
from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

DEFAULT_LEVEL = logging.WARNING


class JSONHandler(logging.StreamHandler):
    """One JSON object per record: level, msg, logger, then the record's ``extra`` dict."""

    def emit(self, record: logging.LogRecord) -> None:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = logging.Formatter().formatException(record.exc_info)
        self.stream.write(json.dumps(payload, default=str) + "\n")
        self.flush()


def resolve_level(level: int | str) -> tuple[int, bool]:
    """Map a level name or number to a logging level; unknown names give (DEFAULT_LEVEL, False)."""
    if isinstance(level, int):
        return level, True
    known = logging.getLevelNamesMapping()
    name = level.strip().upper()
    if name in known:
        return known[name], True
    return DEFAULT_LEVEL, False


def configure_logger(level: int | str = DEFAULT_LEVEL, stream: TextIO | None = None) -> None:
    # default stream is stderr; stdout holds the host list
    resolved, ok = resolve_level(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolved)
    root.addHandler(JSONHandler(stream=stream if stream is not None else sys.stderr))

    if not ok:
        logging.getLogger("adapter.logging").warning(
            "log_level.unknown",
            extra={"extra": {"value": level, "using": logging.getLevelName(resolved)}},
        )
