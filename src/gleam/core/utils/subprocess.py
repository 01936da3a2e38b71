from __future__ import annotations

"""Subprocess helpers for running the git executable.

This module is the single place where Gleam spawns processes:
- No shell=True (arguments are passed as a list)
- stdout captured as text, stderr discarded
- Optional timeout that terminates the whole process group
"""

import logging
import os
import signal
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional, Sequence

from gleam.core.exceptions import GitCommandError, GitLaunchError, GitTimeoutError

logger = logging.getLogger(__name__)


def _popen_process_group_kwargs() -> dict[str, Any]:
    if os.name == "posix":
        return {"start_new_session": True}
    if os.name == "nt":
        creationflags = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", None)
        if isinstance(creationflags, int):
            return {"creationflags": creationflags}
    return {}


def _terminate_process_group(proc: subprocess.Popen[Any]) -> None:
    if proc.poll() is not None:
        return
    if os.name == "posix":
        try:
            os.killpg(proc.pid, signal.SIGTERM)
        except OSError:
            proc.terminate()
        try:
            proc.wait(timeout=0.2)
        except subprocess.TimeoutExpired:
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except OSError:
                proc.kill()
            proc.wait()
        return

    proc.kill()
    proc.wait()


def _to_cwd(cwd: Optional[Path | str]) -> Optional[str]:
    """Convert Path or str cwd to str for subprocess."""
    if cwd is None:
        return None
    return str(cwd)


def run_git_command(
    args: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    git_binary: str = "git",
    timeout: Optional[float] = None,
) -> str:
    """Run ``git <args...>`` and return its standard output.

    Args:
        args: Subcommand and its arguments (without the executable)
        cwd: Working directory for the process
        git_binary: git executable name or path
        timeout: Seconds to wait before terminating git; ``None`` waits forever

    Returns:
        Captured stdout decoded as UTF-8 (undecodable bytes replaced).

    Raises:
        GitLaunchError: git could not be started
        GitCommandError: git exited with a non-zero status
        GitTimeoutError: git did not exit within ``timeout``
    """
    argv: List[str] = [git_binary, *[str(a) for a in args]]
    start = perf_counter()
    logger.debug("git start: argv=%s cwd=%s", argv, cwd)

    try:
        proc = subprocess.Popen(
            argv,
            cwd=_to_cwd(cwd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            **_popen_process_group_kwargs(),
        )
    except OSError as exc:
        logger.debug("git launch failed: argv=%s cwd=%s error=%s", argv, cwd, exc)
        raise GitLaunchError(
            f"Unable to run {argv[0]!r} in {cwd}: {exc}",
            argv=argv,
            context={"cwd": _to_cwd(cwd)},
        ) from exc

    try:
        stdout, _ = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        _terminate_process_group(proc)
        # A grandchild outside the process group may still hold stdout open.
        try:
            proc.communicate(timeout=0.2)
        except subprocess.TimeoutExpired:
            if proc.stdout is not None:
                proc.stdout.close()
            proc.wait()
        logger.debug("git timeout: argv=%s after %.1fs", argv, timeout)
        raise GitTimeoutError(
            f"{' '.join(argv)} timed out after {timeout}s",
            argv=argv,
            context={"cwd": _to_cwd(cwd), "timeout": timeout},
        ) from exc

    duration_ms = (perf_counter() - start) * 1000.0
    logger.debug(
        "git end: argv=%s returncode=%s duration_ms=%.1f",
        argv,
        proc.returncode,
        duration_ms,
    )

    if proc.returncode != 0:
        raise GitCommandError(
            f"{' '.join(argv)} failed with exit status {proc.returncode}",
            argv=argv,
            returncode=proc.returncode,
            context={"cwd": _to_cwd(cwd)},
        )
    return stdout or ""


__all__ = ["run_git_command"]
