"""
Exception logging helpers that stay quiet about their own failures.

Relay failures are logged while a response is being built, so these helpers
never raise, whatever the exception or the log handler does.
"""

import logging


def _safe_str(obj) -> str:
    """
    Convert an object to string, falling back to repr and then to the type name.

    Args:
        obj: The object to convert

    Returns:
        A printable representation that never raises
    """
    try:
        return str(obj)
    except Exception:
        try:
            return repr(obj)
        except Exception:
            return f"<{type(obj).__name__} object (string conversion failed)>"


def format_exception_message(prefix: str, exception: Exception) -> str:
    """Build the ``"<prefix> <Type>: <message>"`` line used for relay failures."""
    safe_prefix = _safe_str(prefix) if prefix is not None else ""
    if exception is None:
        return f"{safe_prefix} Exception: None".strip()

    cause = exception.__cause__
    message = f"{safe_prefix} {type(exception).__name__}: {_safe_str(exception)}"
    if cause is not None:
        message += f" (caused by {type(cause).__name__}: {_safe_str(cause)})"
    return message.strip()


def log_exception_with_details(
    logger: logging.Logger,
    prefix: str,
    exception: Exception,
    level: int = logging.ERROR,
    include_traceback: bool = False,
) -> None:
    """
    Log an exception, including its chained cause, without ever raising.

    Args:
        logger: The logger instance to use
        prefix: Prefix for the log message (e.g. "[Relay]")
        exception: The exception to log
        level: The logging level to use (default: ERROR)
        include_traceback: Attach the traceback via ``exc_info``
    """
    try:
        message = format_exception_message(prefix, exception)
    except Exception:
        message = f"{prefix} Exception (formatting failed)"

    try:
        exc_info = exception if (include_traceback and exception is not None) else False
        logger.log(level, message, exc_info=exc_info)
    except Exception:
        try:
            logger.log(level, f"{prefix} Exception (logging failed)")
        except Exception:
            # Nothing left to report through
            return
