"""Structured JSON logging set up for the interpreter."""

from __future__ import annotations

import json
import logging
import os
import socket
from datetime import datetime, timezone
from typing import Optional, TextIO

FILTER_ENV_VAR = "SIMIAN_LOG"
TRACE = 5

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}

_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _bunyan_level(levelno: int) -> int:
    if levelno <= TRACE:
        return 10
    if levelno <= logging.DEBUG:
        return 20
    if levelno <= logging.INFO:
        return 30
    if levelno <= logging.WARNING:
        return 40
    if levelno <= logging.ERROR:
        return 50
    return 60


class JsonFormatter(logging.Formatter):
    """Formats each record as one Bunyan-style JSON object."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self._hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "v": 0,
            "name": self.name,
            "msg": record.getMessage(),
            "level": _bunyan_level(record.levelno),
            "hostname": self._hostname,
            "pid": record.process if record.process is not None else os.getpid(),
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "target": record.name,
            "line": record.lineno,
            "file": record.pathname,
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _parse_filter(spec: str, target: str) -> Optional[int]:
    """Read a comma-separated filter such as ``info,app=debug``."""
    general: Optional[int] = None
    scoped: Optional[int] = None
    for directive in spec.split(","):
        directive = directive.strip()
        if not directive:
            continue
        scope, sep, level_name = directive.rpartition("=")
        level = _LEVELS.get(level_name.strip().lower())
        if level is None:
            continue
        if not sep:
            general = level
        elif scope.strip() == target:
            scoped = level
    return scoped if scoped is not None else general


def get_subscriber(name: str, env_filter: str, sink: TextIO) -> logging.Handler:
    """Build a JSON handler writing to ``sink``.

    The level comes from the SIMIAN_LOG environment variable when it holds a
    usable filter, otherwise from ``env_filter``; ERROR if neither does.
    """
    level = None
    from_env = os.environ.get(FILTER_ENV_VAR)
    if from_env is not None:
        level = _parse_filter(from_env, name)
    if level is None:
        level = _parse_filter(env_filter, name)
    if level is None:
        level = logging.ERROR

    handler = logging.StreamHandler(sink)
    handler.setFormatter(JsonFormatter(name))
    handler.setLevel(level)
    return handler


def init_subscriber(subscriber: logging.Handler) -> None:
    """Install ``subscriber`` on the root logger; only one may be installed."""
    root = logging.getLogger()
    if any(isinstance(h.formatter, JsonFormatter) for h in root.handlers):
        raise RuntimeError("a global subscriber has already been set")
    root.addHandler(subscriber)
    root.setLevel(subscriber.level)