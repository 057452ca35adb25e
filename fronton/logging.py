"""
Fronton Logging

Per-module console logging shared by the match core and the pygame host.
Every line reads `[module] LEVEL: message`.

Usage:
    from fronton.logging import get_logger

    log = get_logger('match_state')
    log.debug("spawned %r", ball)
    log.info("match over %s", score)

Configuration:
    Environment variables (read once on import):
        FRONTON_LOG_LEVEL=DEBUG          # Global default level
        FRONTON_LOG_MATCH_STATE=TRACE    # Level for one module
        FRONTON_LOG_SOUNDS=OFF

    Or from the command line (`fronton --log-level DEBUG`), which calls
    configure_logging().
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


# Label printed for each level
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

_ENV_PREFIX = 'FRONTON_LOG_'

_default_level = LogLevel.INFO
_module_levels: Dict[str, LogLevel] = {}


def parse_level(name: str) -> LogLevel:
    """Map a level name (any case, WARN accepted) to a LogLevel; INFO if unknown."""
    key = name.strip().upper()
    if key == 'WARN':
        key = 'WARNING'
    return LogLevel.__members__.get(key, LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Set the default level and, optionally, per-module overrides.

    Args:
        level: Default level name for every module
        modules: module name -> level name
    """
    global _default_level
    _default_level = parse_level(level)
    for module, module_level in (modules or {}).items():
        _module_levels[module.lower()] = parse_level(module_level)


def load_env_config() -> None:
    """Apply FRONTON_LOG_LEVEL and every FRONTON_LOG_<MODULE> variable."""
    global _default_level
    for key, value in os.environ.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        name = key[len(_ENV_PREFIX):].lower()
        if name == 'level':
            _default_level = parse_level(value)
        else:
            _module_levels[name] = parse_level(value)


load_env_config()


class FrontonLogger:
    """Console logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower()

    @property
    def level(self) -> LogLevel:
        """Effective level: the module override, else the default."""
        return _module_levels.get(self._key, _default_level)

    def _emit(self, level: LogLevel, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        """Per-frame detail (frame events, touch zones)."""
        self._emit(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._emit(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._emit(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._emit(LogLevel.WARNING, msg, args)

    def exception(self, msg: str, *args) -> None:
        """Log an error followed by the traceback being handled."""
        self._emit(LogLevel.ERROR, msg, args)
        for line in traceback.format_exc().rstrip().splitlines():
            self._emit(LogLevel.ERROR, "  %s", (line,))


@lru_cache(maxsize=None)
def get_logger(module: str) -> FrontonLogger:
    """Return the shared logger for a module name."""
    return FrontonLogger(module)
