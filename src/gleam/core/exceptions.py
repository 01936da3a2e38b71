from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence


class GleamError(Exception):
    """Base exception for Gleam."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class GitError(GleamError, RuntimeError):
    """Raised when a git subcommand could not be run or did not succeed."""

    def __init__(
        self,
        message: str = "",
        *,
        argv: Sequence[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        self.argv = list(argv or [])
        if self.argv:
            ctx["argv"] = self.argv
        GleamError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)


class GitLaunchError(GitError):
    """The git executable could not be started (missing binary, bad cwd)."""


class GitCommandError(GitError):
    """git exited with a non-zero status."""

    def __init__(
        self,
        message: str = "",
        *,
        argv: Sequence[str] | None = None,
        returncode: Optional[int] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if returncode is not None:
            ctx["returncode"] = returncode
        super().__init__(message, argv=argv, context=ctx)
        self.returncode = returncode


class GitTimeoutError(GitError):
    """git did not finish within the configured timeout."""


class CommitDraftError(GleamError, ValueError):
    """Raised when a commit draft cannot be turned into a commit message."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GleamError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigValidationError(GleamError, ValueError):
    """Raised when merged configuration does not match the bundled schema."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GleamError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "GleamError",
    "GitError",
    "GitLaunchError",
    "GitCommandError",
    "GitTimeoutError",
    "CommitDraftError",
    "ConfigValidationError",
]
