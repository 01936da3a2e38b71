from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_LOG_PATH: str | None = None
_GLEAM_FILE_HANDLER: logging.Handler | None = None
_NULL_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Configure Python stdlib logging to write to `log_path` (no stderr handler).

    Idempotent per-process: if already configured for the same file, no-op.
    """
    global _CONFIGURED_LOG_PATH, _GLEAM_FILE_HANDLER

    resolved = str(Path(log_path).resolve())
    if _CONFIGURED_LOG_PATH == resolved and _GLEAM_FILE_HANDLER is not None:
        return

    Path(resolved).parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    # Keep stdout/stderr clean for JSON output. FileHandler is also a
    # StreamHandler, so only the console streams are removed.
    for h in list(root.handlers):
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) in (sys.stdout, sys.stderr):
            root.removeHandler(h)
            h.close()

    if _GLEAM_FILE_HANDLER is not None:
        root.removeHandler(_GLEAM_FILE_HANDLER)
        _GLEAM_FILE_HANDLER.close()
        _GLEAM_FILE_HANDLER = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(_level_from_name(level))
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(fh)

    _GLEAM_FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handlers installed by this module."""
    global _CONFIGURED_LOG_PATH, _GLEAM_FILE_HANDLER, _NULL_HANDLER
    root = logging.getLogger()
    for h in (_GLEAM_FILE_HANDLER, _NULL_HANDLER):
        if h is not None:
            root.removeHandler(h)
            h.close()
    _CONFIGURED_LOG_PATH = None
    _GLEAM_FILE_HANDLER = None
    _NULL_HANDLER = None


def suppress_lastresort() -> None:
    """Prevent logging's implicit lastResort handler from writing to stderr.

    When the root logger has no handlers, WARNING+ records go to stderr.
    Installing a NullHandler keeps CLI output (and ``--json`` output in
    particular) free of log noise without changing logger levels.
    """
    global _NULL_HANDLER

    root = logging.getLogger()
    if root.handlers or _NULL_HANDLER is not None:
        return
    _NULL_HANDLER = logging.NullHandler()
    root.addHandler(_NULL_HANDLER)


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests", "suppress_lastresort"]
