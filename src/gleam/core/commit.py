"""Commit message composition."""
from __future__ import annotations

from dataclasses import dataclass

from gleam.core.exceptions import CommitDraftError
from gleam.core.git.runner import RepositoryCommandRunner


@dataclass(frozen=True)
class CommitDraft:
    """Summary line plus optional description, as typed into the composer."""

    summary: str = ""
    description: str = ""

    @property
    def is_ready(self) -> bool:
        """True when the summary has text, i.e. the commit action is enabled."""
        return bool(self.summary.strip())

    def message(self) -> str:
        """Return the full commit message.

        The description, when present, is separated from the summary by a
        blank line.

        Raises:
            CommitDraftError: If the summary is empty or whitespace only
        """
        if not self.is_ready:
            raise CommitDraftError("Commit summary is required")
        summary = self.summary.strip()
        description = self.description.strip()
        if description:
            return f"{summary}\n\n{description}"
        return summary


def commit_draft(runner: RepositoryCommandRunner, draft: CommitDraft) -> str:
    """Commit the staged changes with ``draft``'s message and return the message."""
    message = draft.message()
    runner.commit(message)
    return message


__all__ = ["CommitDraft", "commit_draft"]
