"""Unified CLI output formatting utilities.

Every command prints through :class:`OutputFormatter` so JSON and text
modes stay consistent.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from rich.console import Console

from gleam.core.exceptions import GleamError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2, console: Optional[Console] = None):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
            console: rich console for styled text (defaults to stdout)
        """
        self.json_mode = json_mode
        self.indent = indent
        self._console = console

    @property
    def console(self) -> Console:
        # Created lazily so it binds to the sys.stdout active at print time.
        if self._console is None:
            self._console = Console(highlight=False)
        return self._console

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
            status: Status string for JSON output
        """
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {"error": error_code, "message": msg}
            if isinstance(error, GleamError):
                output["detail"] = error.to_json_error()
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)

    def rich(self, renderable: Any) -> None:
        """Print a rich renderable (styled text) in text mode."""
        self.console.print(renderable, end="", soft_wrap=True)


__all__ = ["OutputFormatter"]
