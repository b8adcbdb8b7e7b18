"""Minimal structured logging helper.

Emits one line of key=value pairs (or a JSON object) per event with a
timestamp, level and logger name. Lines go to stderr so commands that print
level JSON on stdout stay pipeable.

Usage:
    from mazeforge.logging_utils import get_logger
    log = get_logger("mazeforge.maze")
    log.info(event="level_accepted", level=1, attempt=2)

Environment:
    MAZEFORGE_LOG_LEVEL  debug|info|warn|error (default info)
    MAZEFORGE_LOG_JSON   1/true/yes/on for JSON lines

None values are dropped; strings have spaces replaced with underscores.
Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZEFORGE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("MAZEFORGE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def set_level(name: str) -> None:
    """Change the process-wide threshold (unknown names fall back to info)."""
    global CURRENT_LEVEL
    CURRENT_LEVEL = LEVELS.get(str(name).lower(), 20)


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazeforge"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazeforge")
