from __future__ import annotations

import threading

import pytest

from gleam.core.background import BackgroundRunner, CancellationToken


def test_submit_returns_result() -> None:
    with BackgroundRunner(max_workers=1) as bg:
        future = bg.submit(lambda a, b=0: a + b, 2, b=3)
        assert future.result(timeout=10) == 5


def test_on_done_receives_finished_future() -> None:
    seen = []
    with BackgroundRunner() as bg:
        bg.submit(lambda: "ok", on_done=lambda f: seen.append(f.result()))
    assert seen == ["ok"]


def test_exception_is_set_on_future() -> None:
    def boom() -> None:
        raise ValueError("nope")

    errors = []
    with BackgroundRunner() as bg:
        future = bg.submit(boom, on_done=lambda f: errors.append(f.exception()))
        with pytest.raises(ValueError, match="nope"):
            future.result(timeout=10)

    assert isinstance(errors[0], ValueError)


def test_cancelled_token_prevents_start() -> None:
    token = CancellationToken()
    token.cancel()
    calls = []

    with BackgroundRunner() as bg:
        future = bg.submit(calls.append, 1, token=token, on_done=calls.append)

    assert future.cancelled()
    assert calls == []


def test_cancel_while_running_skips_callback() -> None:
    started = threading.Event()
    release = threading.Event()
    token = CancellationToken()
    callbacks = []

    def work() -> str:
        started.set()
        release.wait(timeout=10)
        return "done"

    with BackgroundRunner(max_workers=1) as bg:
        future = bg.submit(work, token=token, on_done=callbacks.append)
        assert started.wait(timeout=10)
        token.cancel()
        release.set()
        assert future.result(timeout=10) == "done"

    assert callbacks == []


def test_callback_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    def bad_callback(_future) -> None:
        raise RuntimeError("callback broke")

    with BackgroundRunner() as bg:
        future = bg.submit(lambda: 1, on_done=bad_callback)

    assert future.result() == 1
    assert "Background completion callback failed" in caplog.text


def test_from_config_reads_worker_count(isolated_project_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLEAM_REFRESH__MAX_WORKERS", "3")

    runner = BackgroundRunner.from_config(isolated_project_env)
    try:
        assert runner.max_workers == 3
    finally:
        runner.shutdown()
