"""femtologging helpers shared by the catalogue layers.

Storage, services and the HTTP adapter all log through these wrappers, so
level handling and percent-style formatting stay uniform.

Examples
--------
Configure logging and emit a message:

>>> level, used_default = configure_logging("DEBUG")
>>> log_info(get_logger(__name__), "Saved show %s", show_id)
"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger


class LogLevel(enum.StrEnum):
    """Log levels accepted by ``configure_logging``."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Configure femtologging and report the level that took effect.

    Parameters
    ----------
    level : str | None
        Level name from configuration. Case and surrounding whitespace are
        ignored.
    force : bool, optional
        Replace handlers that are already installed.

    Returns
    -------
    tuple[str, bool]
        ``(effective_level, used_default)``. ``used_default`` is True when
        ``level`` was missing or unknown and INFO was used in its place.
    """
    requested = level.strip().upper() if level else ""
    used_default = requested not in LogLevel.__members__
    effective = LogLevel.INFO if used_default else LogLevel(requested)
    basicConfig(level=effective, force=force)
    return (effective, used_default)


class _SupportsLog(typ.Protocol):
    """Structural type for femtologging loggers."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> None: ...


def _emit(
    logger: _SupportsLog,
    level: LogLevel,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    message = template % args if args else template
    logger.log(level, message, exc_info=exc_info, stack_info=False)


def log_debug(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit a DEBUG message."""
    _emit(logger, LogLevel.DEBUG, template, args, exc_info)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit an INFO message.

    Parameters
    ----------
    logger : _SupportsLog
        Logger returned by ``get_logger``.
    template : str
        Percent-style format string.
    *args : object
        Values interpolated into ``template``.
    exc_info : object | None, optional
        Exception info attached to the record.

    Raises
    ------
    TypeError
        If ``template`` and ``args`` do not line up.
    """
    _emit(logger, LogLevel.INFO, template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit a WARNING message."""
    _emit(logger, LogLevel.WARNING, template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit an ERROR message.

    ``exc_info`` should be the caught exception when logging from an
    ``except`` block so the traceback reaches the handler.
    """
    _emit(logger, LogLevel.ERROR, template, args, exc_info)


__all__ = (
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
)
