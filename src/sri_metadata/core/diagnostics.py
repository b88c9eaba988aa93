"""
Internal diagnostics for sri-metadata.

Diagnostics are structured dicts written as JSON lines to stderr. They are
off unless ``core.internal_logging_enabled`` is set, and they never raise or
influence parsing results.
"""

from __future__ import annotations

import sys
import time
from typing import Any, Callable

import orjson

DiagnosticWriter = Callable[[dict[str, Any]], None]

# Cached on first use; tests reset this to None
_internal_logging_enabled: bool | None = None
_rate_limit_seconds: float = 5.0
_last_emitted: dict[str, float] = {}


def _default_writer(payload: dict[str, Any]) -> None:
    sys.stderr.write(orjson.dumps(payload, default=str).decode("utf-8") + "\n")


_writer: DiagnosticWriter = _default_writer


def _is_enabled() -> bool:
    global _internal_logging_enabled, _rate_limit_seconds
    if _internal_logging_enabled is None:
        try:
            from .settings import Settings

            core = Settings().core
            _internal_logging_enabled = core.internal_logging_enabled
            _rate_limit_seconds = core.diagnostics_rate_limit_seconds
        except Exception:
            # Misconfigured environment must not break parsing
            _internal_logging_enabled = False
    return _internal_logging_enabled


def _rate_limited(key: str | None) -> bool:
    if key is None:
        return False
    now = time.monotonic()
    last = _last_emitted.get(key)
    if last is not None and now - last < _rate_limit_seconds:
        return True
    _last_emitted[key] = now
    return False


def emit(
    level: str,
    component: str,
    message: str,
    *,
    _rate_limit_key: str | None = None,
    **fields: Any,
) -> None:
    """Emit a diagnostic if internal logging is enabled."""
    if not _is_enabled():
        return
    if _rate_limited(_rate_limit_key):
        return
    payload: dict[str, Any] = {
        "timestamp": time.time(),
        "level": level,
        "component": component,
        "message": message,
    }
    payload.update(fields)
    try:
        _writer(payload)
    except Exception:
        pass


def warn(
    component: str,
    message: str,
    *,
    _rate_limit_key: str | None = None,
    **fields: Any,
) -> None:
    emit("WARN", component, message, _rate_limit_key=_rate_limit_key, **fields)


def debug(
    component: str,
    message: str,
    *,
    _rate_limit_key: str | None = None,
    **fields: Any,
) -> None:
    emit("DEBUG", component, message, _rate_limit_key=_rate_limit_key, **fields)


def set_writer_for_tests(writer: DiagnosticWriter) -> None:
    """Replace the diagnostics writer (tests only)."""
    global _writer
    _writer = writer


def _reset_for_tests() -> None:
    global _internal_logging_enabled, _writer, _rate_limit_seconds
    _internal_logging_enabled = None
    _rate_limit_seconds = 5.0
    _writer = _default_writer
    _last_emitted.clear()
