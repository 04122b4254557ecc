"""Tagged, structured logging for the plugin process.

stdout carries the JSON-RPC conversation with the host, so records are only
ever written to stderr or to a log file under the user data directory.
Timestamped files are rotated; ``dev.log`` is appended to across runs.
"""

import json
import os
import platform
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO

from ..core.global_paths import GlobalPath

MAX_LOG_FILES = 10
TIMESTAMPED_LOG_GLOB = "????-??-??T??????.log"


class LogLevel(str, Enum):
    """Log severity levels, lowest first."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def priority(self) -> int:
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        text = value.strip().upper()
        if text == "WARNING":
            text = "WARN"
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid log level: {value}") from None


class LogFormat(str, Enum):
    """Record layout."""
    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


@dataclass
class LogConfig:
    """Process-wide sink settings."""
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: bool = False
    log_file_path: Optional[str] = None
    handle: Optional[TextIO] = None


_config = LogConfig()
_last_timestamp = time.time()

_RESERVED = ("time", "delta_ms", "level", "msg")


def _describe(value: Any) -> Any:
    if isinstance(value, BaseException):
        text = str(value) or type(value).__name__
        cause, depth = value.__cause__, 0
        while cause is not None and depth < 10:
            text += f" Caused by: {cause}"
            cause, depth = cause.__cause__, depth + 1
        return text
    if value is None or isinstance(value, (bool, int, float, dict, list, tuple)):
        return value
    return str(value)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    text = str(value)
    if not text or "=" in text or any(ch.isspace() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _fields(record: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_scalar(value)}" for key, value in record.items() if key not in _RESERVED)


def _render_kv(record: Dict[str, Any]) -> str:
    head = f"{record['time']} +{record['delta_ms']}ms level={record['level']} msg={_scalar(record['msg'])}"
    tail = _fields(record)
    return f"{head} {tail}" if tail else head


def _render_json(record: Dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


def _render_pretty(record: Dict[str, Any]) -> str:
    tail = _fields(record)
    text = f"{record['time']} {record['level'].upper()} {record['msg'] or ''}"
    if tail:
        text += f" ({tail})"
    return f"{text} +{record['delta_ms']}ms"


_RENDERERS: Dict[LogFormat, Callable[[Dict[str, Any]], str]] = {
    LogFormat.KV: _render_kv,
    LogFormat.JSON: _render_json,
    LogFormat.PRETTY: _render_pretty,
}


def _emit(line: str) -> None:
    # stderr may have been pointed at stdout; that stream belongs to the host
    if _config.console and sys.stderr is not sys.stdout:
        sys.stderr.write(line)
        sys.stderr.flush()
    if _config.file and _config.handle is not None:
        _config.handle.write(line)
        _config.handle.flush()


@dataclass
class LogTimer:
    """Logs a completed record with the elapsed milliseconds on exit."""
    logger: "Logger"
    message: str
    extra: Dict[str, Any]
    start_time: float = field(default_factory=time.time)

    def stop(self) -> None:
        elapsed = int((time.time() - self.start_time) * 1000)
        self.logger.info(self.message, {**self.extra, "status": "completed", "duration": elapsed})

    def __enter__(self) -> "LogTimer":
        return self

    def __exit__(self, *args) -> None:
        self.stop()


class Logger:
    """Attaches its tags to every record it writes."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _record(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        global _last_timestamp

        now = time.time()
        record: Dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "delta_ms": int((now - _last_timestamp) * 1000),
            "level": level.value.lower(),
            "msg": _describe(message),
        }
        _last_timestamp = now
        for key, value in {**self.tags, **(extra or {})}.items():
            if value is not None:
                record[key] = _describe(value)
        return record

    def _log(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        if level.priority < _config.level.priority:
            return
        _emit(_RENDERERS[_config.format](self._record(level, message, extra)) + "\n")

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.ERROR, message, extra)

    def time(self, message: str, extra: Optional[Dict[str, Any]] = None) -> LogTimer:
        """Log ``message`` as started now and as completed when the block exits."""
        extra = extra or {}
        self.info(message, {**extra, "status": "started"})
        return LogTimer(logger=self, message=message, extra=extra)


class Log:
    """Logger factory and process-wide sink configuration."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Return the logger for ``tags["service"]``, creating it once.

        Loggers without a string service are not cached.
        """
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags=tags)
        return cls._loggers.setdefault(service, Logger(tags=tags))

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file: bool | None = None,
        dev: bool = False,
    ) -> None:
        """Set the level and layout and (re)open the sinks.

        Args:
            level: Minimum level to emit
            format: Record layout
            console: Write records to stderr
            file: Write records to a log file under the data directory
            dev: Append to ``dev.log`` instead of opening a timestamped file
        """
        for name, value in (("level", level), ("format", format), ("console", console), ("file", file)):
            if value is not None:
                setattr(_config, name, value)

        cls.close()
        _config.log_file_path = None
        if not _config.file:
            return

        log_dir = Path(GlobalPath.log())
        log_dir.mkdir(parents=True, exist_ok=True)
        if dev:
            path = log_dir / "dev.log"
        else:
            path = log_dir / f"{datetime.now().strftime('%Y-%m-%dT%H%M%S')}.log"

        _config.handle = path.open("a" if dev else "w", encoding="utf-8")
        _config.log_file_path = str(path)
        cls._rotate(log_dir)

    @classmethod
    def session(cls, command: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Write the record that opens a plugin session, so runs can be told apart in ``dev.log``."""
        cls.create({"service": "session"}).info("session started", {
            "command": command,
            "pid": os.getpid(),
            "python": platform.python_version(),
            "log_file": cls.file() or None,
            **(extra or {}),
        })

    @classmethod
    def file(cls) -> str:
        """Path of the open log file, or an empty string."""
        return _config.log_file_path or ""

    @classmethod
    def _rotate(cls, log_dir: Path) -> None:
        """Keep the newest ``MAX_LOG_FILES`` timestamped files, the open one included."""
        stale = sorted(log_dir.glob(TIMESTAMPED_LOG_GLOB), key=lambda p: p.stat().st_mtime)[:-MAX_LOG_FILES]
        for path in stale:
            if str(path) != _config.log_file_path:
                path.unlink(missing_ok=True)

    @classmethod
    def close(cls) -> None:
        if _config.handle is not None:
            _config.handle.close()
            _config.handle = None
