"""Library logging with a pluggable callback and a stderr fallback.

Messages go to a private logger. When a callback is installed, every record
is formatted and handed to it. Without a callback, records go to a coloured
stderr fallback unless that is disabled. If colour output is requested
before the logger is first created, records go straight to stderr instead.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Callable, Optional


class LogLevel(IntEnum):
    """Severity of a log record."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5
    OFF = 6


@dataclass(frozen=True)
class SourceLoc:
    """Where a log record was produced."""

    filename: str = ""
    line: int = 0
    function: str = ""


LogCallback = Callable[[LogLevel, SourceLoc, str, Any], None]

LOGGER_NAME = "cckit_private"
MAX_MESSAGE_LENGTH = 4095
DEFAULT_LEVEL = LogLevel.INFO
FALLBACK_LEVEL = LogLevel.INFO

_STD_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.OFF: logging.CRITICAL + 10,
}
_FROM_STD = {value: key for key, value in _STD_LEVELS.items()}

_NAMES = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.CRITICAL: "critical",
    LogLevel.OFF: "off",
}
_COLORS = {
    LogLevel.TRACE: "\033[37m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARN: "\033[33m\033[1m",
    LogLevel.ERROR: "\033[31m\033[1m",
    LogLevel.CRITICAL: "\033[1m\033[41m",
    LogLevel.OFF: "",
}
_RESET = "\033[m"

_FALLBACK_WARNING = (
    "[CCKIT Warning] No log callback set.\n"
    "Using internal colored console logger.\n"
    "Call set_log_callback() to integrate with your logging system (e.g., GUI).\n"
    "[CCKIT Note] Logging inside callbacks is detected and will be output "
    "to stderr to avoid deadlock.\n"
)


class _State:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.callback: Optional[LogCallback] = None
        self.context: Any = None
        self.enable_color = False
        self.fallback_disabled = False
        self.warning_shown = False
        self.handler: Optional[_SinkHandler] = None


_state = _State()
_local = threading.local()


def _to_cckit(levelno: int) -> LogLevel:
    return _FROM_STD.get(levelno, LogLevel.INFO)


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def _write_stderr(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def _format(created: float, level: LogLevel, loc: Optional[SourceLoc], payload: str,
            time_format: str, color: bool) -> str:
    stamp = datetime.fromtimestamp(created).strftime(time_format)
    name = _NAMES[level]
    if color and _COLORS[level]:
        name = f"{_COLORS[level]}{name}{_RESET}"
    where = ""
    if loc is not None and loc.filename:
        where = f" [{os.path.basename(loc.filename)}:{loc.line}]"
    return f"[{stamp}] [{name}]{where} {payload}\n"


def _record_loc(record: logging.LogRecord) -> SourceLoc:
    loc = getattr(record, "cckit_loc", None)
    if loc is not None:
        return loc
    return SourceLoc(os.path.basename(record.pathname or ""), record.lineno, record.funcName or "")


def _write_fallback(created: float, level: LogLevel, payload: str) -> None:
    if _STD_LEVELS[level] < _STD_LEVELS[FALLBACK_LEVEL]:
        return
    with _state.lock:
        show_warning = not _state.warning_shown and _state.callback is None
        _state.warning_shown = True
    if show_warning:
        _write_stderr(_FALLBACK_WARNING)
    _write_stderr(_format(created, level, None, payload, "%H:%M:%S", _stderr_is_tty()))


class _SinkHandler(logging.Handler):
    """Routes records to the callback, the fallback or straight to stderr."""

    def __init__(self, color: bool) -> None:
        super().__init__()
        self.color = color

    def emit(self, record: logging.LogRecord) -> None:
        level = _to_cckit(record.levelno)
        loc = _record_loc(record)
        payload = record.getMessage()

        if self.color:
            _write_stderr(
                _format(record.created, level, loc, payload, "%Y-%m-%d %H:%M:%S", _stderr_is_tty())
            )
            return

        if getattr(_local, "in_callback", False):
            _write_stderr(f"[CCKIT Recursive] {payload}\n")
            return

        callback, context = _state.callback, _state.context
        if callback is not None:
            text = _format(record.created, level, loc, payload, "%Y-%m-%d %H:%M:%S", False)
            _local.in_callback = True
            try:
                callback(level, loc, text, context)
            finally:
                _local.in_callback = False
        elif not _state.fallback_disabled:
            _write_fallback(record.created, level, payload)


def _internal_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    with _state.lock:
        if _state.handler is None:
            for old in list(logger.handlers):
                logger.removeHandler(old)
            handler = _SinkHandler(_state.enable_color)
            logger.addHandler(handler)
            logger.propagate = False
            logger.setLevel(_STD_LEVELS[DEFAULT_LEVEL])
            _state.handler = handler
    return logger


def _make_record(logger: logging.Logger, level: LogLevel, msg: str,
                 loc: Optional[SourceLoc]) -> logging.LogRecord:
    loc = loc if loc is not None else SourceLoc()
    return logger.makeRecord(
        logger.name,
        _STD_LEVELS[level],
        loc.filename,
        loc.line,
        msg,
        (),
        None,
        func=loc.function,
        extra={"cckit_loc": loc},
    )


def _emit(level: LogLevel, msg: str) -> None:
    logger = _internal_logger()
    if logger.isEnabledFor(_STD_LEVELS[level]):
        logger.handle(_make_record(logger, level, str(msg), None))


# ----------------------------------------------------------------------
# Callback control
# ----------------------------------------------------------------------


def set_log_callback(callback: Optional[LogCallback] = None, context: Any = None,
                     enable_color: bool = False) -> None:
    """Install (or clear, with None) the callback that receives log records.

    ``enable_color`` only takes effect if the logger has not been created yet.
    """
    with _state.lock:
        _state.callback = callback
        _state.context = context
        _state.enable_color = bool(enable_color)
    _internal_logger()


def get_log_callback() -> Optional[LogCallback]:
    return _state.callback


def get_callback_context() -> Any:
    return _state.context


def get_logger() -> logging.Logger:
    """The private logger that all records pass through."""
    return _internal_logger()


# ----------------------------------------------------------------------
# Level and fallback control
# ----------------------------------------------------------------------


def get_level() -> LogLevel:
    return _to_cckit(_internal_logger().level)


def set_level(level: LogLevel) -> None:
    """Set the minimum level; raises ValueError for an unknown level."""
    _internal_logger().setLevel(_STD_LEVELS[LogLevel(level)])


def disable_fallback() -> None:
    _state.fallback_disabled = True


def enable_fallback() -> None:
    _state.fallback_disabled = False


# ----------------------------------------------------------------------
# Logging functions
# ----------------------------------------------------------------------


def trace(msg: str) -> None:
    _emit(LogLevel.TRACE, msg)


def debug(msg: str) -> None:
    _emit(LogLevel.DEBUG, msg)


def info(msg: str) -> None:
    _emit(LogLevel.INFO, msg)


def warn(msg: str) -> None:
    _emit(LogLevel.WARN, msg)


def error(msg: str) -> None:
    _emit(LogLevel.ERROR, msg)


def critical(msg: str) -> None:
    _emit(LogLevel.CRITICAL, msg)


def log(level: LogLevel, msg: str, loc: Optional[SourceLoc] = None) -> None:
    """Log with a source location, written to the sink regardless of the logger's level."""
    logger = _internal_logger()
    handler = _state.handler
    if handler is None:
        return
    handler.handle(_make_record(logger, LogLevel(level), str(msg), loc))


def logf(level: LogLevel, loc: Optional[SourceLoc], fmt: Optional[str], *args: Any) -> None:
    """printf-style variant of :func:`log`; the message is cut to 4095 characters."""
    if fmt is None:
        return
    message = fmt % args
    log(level, message[:MAX_MESSAGE_LENGTH], loc)


# ----------------------------------------------------------------------
# Lifecycle
# ----------------------------------------------------------------------


def initialize() -> None:
    _internal_logger()


def shutdown() -> None:
    """Clear the callback and release the logger; it is recreated on next use."""
    with _state.lock:
        _state.callback = None
        _state.context = None
        handler = _state.handler
        _state.handler = None
        _state.enable_color = False
        _state.warning_shown = False
    if handler is not None:
        handler.flush()
        logging.getLogger(LOGGER_NAME).removeHandler(handler)
        handler.close()


def flush() -> None:
    _internal_logger()
    handler = _state.handler
    if handler is not None:
        handler.flush()
    sys.stderr.flush()