"""Diff view model: classify unified diff lines and render them with rich."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Optional

from rich.text import Text

_FILE_HEADER_PREFIXES = (
    "diff --git ",
    "index ",
    "--- ",
    "+++ ",
    "new file mode ",
    "deleted file mode ",
    "old mode ",
    "new mode ",
    "similarity index ",
    "rename from ",
    "rename to ",
    "Binary files ",
)


class DiffLineKind(str, Enum):
    FILE_HEADER = "file_header"
    HUNK = "hunk"
    ADDED = "added"
    REMOVED = "removed"
    META = "meta"
    CONTEXT = "context"


@dataclass(frozen=True)
class DiffLine:
    number: int
    kind: DiffLineKind
    text: str


@dataclass(frozen=True)
class DiffStat:
    files: int
    added: int
    removed: int


def classify_line(line: str, *, in_hunk: bool = True) -> DiffLineKind:
    """Return the kind of a single unified-diff line.

    ``--- ``/``+++ `` lines are file headers outside a hunk and
    removed/added lines inside one.
    """
    if line.startswith("@@"):
        return DiffLineKind.HUNK
    if line.startswith("\\"):
        return DiffLineKind.META
    if line.startswith("diff --git "):
        return DiffLineKind.FILE_HEADER
    if not in_hunk and line.startswith(_FILE_HEADER_PREFIXES):
        return DiffLineKind.FILE_HEADER
    if line.startswith("+"):
        return DiffLineKind.ADDED
    if line.startswith("-"):
        return DiffLineKind.REMOVED
    return DiffLineKind.CONTEXT


def parse_diff(text: str) -> List[DiffLine]:
    """Split diff text into numbered, classified lines (1-based)."""
    if not text:
        return []
    lines: List[DiffLine] = []
    in_hunk = False
    # git terminates diff lines with "\n" only; other line breaks are content.
    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()
    for number, raw in enumerate(raw_lines, start=1):
        if raw.startswith("diff --git "):
            in_hunk = False
        kind = classify_line(raw, in_hunk=in_hunk)
        if kind is DiffLineKind.HUNK:
            in_hunk = True
        lines.append(DiffLine(number=number, kind=kind, text=raw))
    return lines


def summarize(lines: Iterable[DiffLine]) -> DiffStat:
    files = added = removed = 0
    for line in lines:
        if line.kind is DiffLineKind.FILE_HEADER and line.text.startswith("diff --git "):
            files += 1
        elif line.kind is DiffLineKind.ADDED:
            added += 1
        elif line.kind is DiffLineKind.REMOVED:
            removed += 1
    return DiffStat(files=files, added=added, removed=removed)


def render_diff(
    lines: List[DiffLine],
    styles: Optional[Mapping[str, str]] = None,
    *,
    line_numbers: bool = True,
) -> Text:
    """Render classified lines as a styled :class:`rich.text.Text`.

    Args:
        lines: Output of :func:`parse_diff`
        styles: rich style per ``DiffLineKind`` value; missing kinds are unstyled
        line_numbers: Prefix each line with its right-aligned number
    """
    styles = styles or {}
    width = len(str(lines[-1].number)) if lines else 1
    out = Text()
    for line in lines:
        if line_numbers:
            out.append(f"{line.number:>{width}} ", style="dim")
        out.append(line.text, style=styles.get(line.kind.value, "") or "")
        out.append("\n")
    return out


__all__ = [
    "DiffLine",
    "DiffLineKind",
    "DiffStat",
    "classify_line",
    "parse_diff",
    "render_diff",
    "summarize",
]
