"""Leveled, timestamped key/value loggers writing logfmt or JSON lines."""

from __future__ import annotations

import json
import os
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, TextIO

import yaml

_LEVELS = {"debug": 0, "info": 1, "warn": 2, "error": 3}
_FORMATS = ("logfmt", "json")
_MISSING = "(MISSING)"

Sink = Callable[[list], Any]


class _Level(str):
    """A level value attached to a log entry."""


class AllowedLevel:
    """The minimum level a log entry must have to be written."""

    def __init__(self, value: str | None = None) -> None:
        self._name = ""
        if value is not None:
            self.set(value)

    def set(self, s: str) -> None:
        """Change the allowed level; raise ValueError for unknown levels."""
        if s not in _LEVELS:
            raise ValueError(f'unrecognized log level "{s}"')
        self._name = s

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"AllowedLevel({self._name!r})"

    @property
    def rank(self) -> int:
        return _LEVELS.get(self._name, 0)

    @classmethod
    def from_yaml(cls, text: str | bytes) -> "AllowedLevel":
        """Decode a YAML scalar; an empty document gives an unset level."""
        value = yaml.load(text, Loader=yaml.BaseLoader)
        if value is None or value == "":
            return cls()
        if not isinstance(value, str):
            raise ValueError("log level must be a YAML scalar")
        return cls(value)


class AllowedFormat:
    """The output format of a logger: logfmt or json."""

    def __init__(self, value: str | None = None) -> None:
        self._name = ""
        if value is not None:
            self.set(value)

    def set(self, s: str) -> None:
        """Change the format; raise ValueError for unknown formats."""
        if s not in _FORMATS:
            raise ValueError(f'unrecognized log format "{s}"')
        self._name = s

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"AllowedFormat({self._name!r})"


@dataclass
class Config:
    """Settings for building a logger."""

    level: AllowedLevel | None = None
    format: AllowedFormat | None = None


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _caller() -> str:
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return "???"
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


def _logfmt_value(value: Any) -> str:
    text = "null" if value is None else str(value)
    if text == "":
        return ""
    if any(ch <= " " or ch in '="\\' or not ch.isprintable() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _json_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float)) and not isinstance(value, _Level):
        return value
    return str(value)


class _StreamSink:
    """Writes each entry as one line to a text stream."""

    def __init__(self, stream: TextIO, as_json: bool) -> None:
        self._stream = stream
        self._as_json = as_json
        self._lock = threading.Lock()

    def __call__(self, keyvals: list) -> None:
        pairs = list(zip(keyvals[::2], keyvals[1::2]))
        if self._as_json:
            line = json.dumps({str(k): _json_value(v) for k, v in pairs})
        else:
            line = " ".join(f"{_logfmt_value(k)}={_logfmt_value(v)}" for k, v in pairs)
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()


class Logger:
    """A key/value logger annotating each entry with a timestamp and caller."""

    def __init__(self, base: Sink, level: AllowedLevel | None = None) -> None:
        self.base = base
        self._level = level

    def _allowed(self, keyvals: list) -> bool:
        if self._level is None:
            return True
        for value in keyvals[1::2]:
            if isinstance(value, _Level):
                return _LEVELS[value] >= self._level.rank
        return True

    def log(self, *args: Any) -> None:
        """Write one entry made of alternating keys and values."""
        keyvals = list(args)
        if len(keyvals) % 2:
            keyvals.append(_MISSING)
        if not self._allowed(keyvals):
            return
        self.base(["ts", _timestamp(), "caller", _caller(), *keyvals])

    def debug(self, *args: Any) -> None:
        """Write an entry at debug level."""
        self.log("level", _Level("debug"), *args)

    def info(self, *args: Any) -> None:
        """Write an entry at info level."""
        self.log("level", _Level("info"), *args)

    def warn(self, *args: Any) -> None:
        """Write an entry at warn level."""
        self.log("level", _Level("warn"), *args)

    def error(self, *args: Any) -> None:
        """Write an entry at error level."""
        self.log("level", _Level("error"), *args)


class DynamicLogger(Logger):
    """A logger whose level can be changed while it is in use."""

    def __init__(self, base: Sink, level: AllowedLevel | None = None) -> None:
        super().__init__(base)
        self._lock = threading.RLock()
        if level is not None:
            self.set_level(level)

    def log(self, *args: Any) -> None:
        with self._lock:
            super().log(*args)

    def set_level(self, level: AllowedLevel | None) -> None:
        """Change the level; ``None`` lets every entry through."""
        with self._lock:
            if level is None:
                self._level = None
                return
            if self._level is not None and str(self._level) != str(level):
                self.base(
                    ["msg", "Log level changed", "prev", str(self._level), "current", str(level)]
                )
            self._level = level


def _sink(config: Config, stream: TextIO | None) -> _StreamSink:
    as_json = config.format is not None and str(config.format) == "json"
    return _StreamSink(stream if stream is not None else sys.stderr, as_json)


def new(config: Config, stream: TextIO | None = None) -> Logger:
    """Return a logger writing to ``stream`` (standard error by default)."""
    return Logger(_sink(config, stream), config.level)


def new_dynamic(config: Config, stream: TextIO | None = None) -> DynamicLogger:
    """Return a logger whose level can be changed later."""
    return DynamicLogger(_sink(config, stream), config.level)