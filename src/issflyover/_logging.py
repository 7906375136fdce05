"""Call logging for the fly-over leaf lookups and the orchestrator."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.expanduser("~"), ".issflyover", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_file_handler(logger: logging.Logger) -> bool:
    # Other handlers (e.g. pytest log capture) may already be attached
    log_file = os.path.abspath(_LOG_FILE)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == log_file
        for h in logger.handlers
    )


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("issflyover.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _has_file_handler(_logger):
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _item_count(result: Any) -> int:
    return len(result) if isinstance(result, list) else 1


def log_api_call(fn: F) -> F:
    """Decorator that logs leaf lookups (sync or async) to the API log file."""

    def on_call(arg_str: str) -> None:
        _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)

    def on_ok(arg_str: str, result: Any, elapsed: float) -> None:
        _get_logger().info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _item_count(result), elapsed,
        )

    def on_fail(arg_str: str, exc: Exception, elapsed: float) -> None:
        _get_logger().error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
        )

    return _instrument(fn, on_call, on_ok, on_fail)


def log_service_call(fn: F) -> F:
    """Decorator that logs orchestrator calls (sync or async) to the API log file."""

    def on_call(arg_str: str) -> None:
        _get_logger().info("SERVICE CALL: %s(%s)", fn.__qualname__, arg_str)

    def on_ok(arg_str: str, result: Any, elapsed: float) -> None:
        _get_logger().info("SERVICE OK: %s -> %.3fs", fn.__qualname__, elapsed)

    def on_fail(arg_str: str, exc: Exception, elapsed: float) -> None:
        _get_logger().error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            fn.__qualname__, type(exc).__name__, exc, elapsed,
        )

    return _instrument(fn, on_call, on_ok, on_fail)


def _instrument(
    fn: F,
    on_call: Callable[[str], None],
    on_ok: Callable[[str, Any, float], None],
    on_fail: Callable[[str, Exception, float], None],
) -> F:
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _arg_summary(args, kwargs)
            on_call(arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                on_fail(arg_str, exc, time.monotonic() - start)
                raise
            on_ok(arg_str, result, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _arg_summary(args, kwargs)
        on_call(arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            on_fail(arg_str, exc, time.monotonic() - start)
            raise
        on_ok(arg_str, result, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
