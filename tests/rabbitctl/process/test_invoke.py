from __future__ import annotations

import json
import os
import sys
import time
from datetime import timedelta
from pathlib import Path

import anyio
import pytest

from rabbitctl.command import InvalidOption
from rabbitctl.process import LaunchFailed, invoke

pytestmark = pytest.mark.anyio

PYTHON = sys.executable


def _script(source: str) -> list[str]:
    return ["-c", source]


async def test_captures_both_streams():
    result = await invoke(
        PYTHON,
        _script("import sys; print('out'); print('err', file=sys.stderr)"),
        timeout=10,
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "out"
    assert result.stderr.strip() == "err"
    assert not result.timed_out
    assert result.success
    assert result.args[0] == PYTHON


async def test_non_zero_exit_is_returned_not_raised():
    result = await invoke(
        PYTHON,
        _script("import sys; sys.stderr.write('boom'); sys.exit(1)"),
        timeout=10,
    )

    assert result.exit_code == 1
    assert result.stderr == "boom"
    assert not result.timed_out
    assert not result.success


async def test_timeout_kills_process_and_keeps_partial_output():
    source = (
        "import os, sys, time\n"
        "print(os.getpid(), flush=True)\n"
        "time.sleep(30)\n"
    )

    start = time.monotonic()
    result = await invoke(PYTHON, _script(source), timeout=1)
    elapsed = time.monotonic() - start

    assert result.timed_out
    assert not result.success
    assert elapsed <= 1.5

    pid = int(result.stdout.strip())
    with pytest.raises(ProcessLookupError):
        os.kill(pid, 0)


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="reads /proc")
async def test_timeout_kills_grandchildren():
    source = (
        "import subprocess, sys, time\n"
        "child = subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(30)'])\n"
        "print(child.pid, flush=True)\n"
        "time.sleep(30)\n"
    )

    result = await invoke(PYTHON, _script(source), timeout=1)

    assert result.timed_out
    grandchild = int(result.stdout.strip())
    for _ in range(50):
        if not _is_running(grandchild):
            break
        await anyio.sleep(0.05)
    else:
        pytest.fail("grandchild process survived the timeout")


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="reads /proc")
async def test_exited_parent_keeps_exit_code_and_lingering_child_is_killed():
    source = (
        "import subprocess, sys\n"
        "child = subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(30)'])\n"
        "print(child.pid, flush=True)\n"
    )

    start = time.monotonic()
    result = await invoke(PYTHON, _script(source), timeout=1)
    elapsed = time.monotonic() - start

    assert result.exit_code == 0
    assert not result.timed_out
    assert result.success
    assert elapsed <= 1.5

    grandchild = int(result.stdout.strip())
    for _ in range(50):
        if not _is_running(grandchild):
            break
        await anyio.sleep(0.05)
    else:
        pytest.fail("lingering child survived after its parent exited")


async def test_accepts_timedelta():
    result = await invoke(PYTHON, _script("print('ok')"), timeout=timedelta(seconds=5))
    assert result.stdout.strip() == "ok"


async def test_large_output_on_both_streams_does_not_deadlock():
    source = (
        "import sys\n"
        "chunk = 'x' * 1024\n"
        "for _ in range(512):\n"
        "    sys.stdout.write(chunk)\n"
        "    sys.stderr.write(chunk)\n"
    )

    result = await invoke(PYTHON, _script(source), timeout=20)

    assert not result.timed_out
    assert len(result.stdout) == 512 * 1024
    assert len(result.stderr) == 512 * 1024


async def test_shell_metacharacters_reach_child_literally(tmp_path: Path):
    marker = tmp_path / "marker"
    payload = f"; touch {marker}"

    result = await invoke(
        PYTHON,
        [*_script("import json, sys; print(json.dumps(sys.argv[1:]))"), payload, "$(id)"],
        timeout=10,
    )

    assert json.loads(result.stdout) == [payload, "$(id)"]
    assert not marker.exists()


async def test_missing_executable_fails_to_launch(tmp_path: Path):
    with pytest.raises(LaunchFailed) as exc_info:
        await invoke(tmp_path / "does-not-exist", ["status"], timeout=5)

    assert "status" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.skipif(os.name != "posix", reason="exec permission bits are POSIX only")
async def test_non_executable_file_fails_to_launch(tmp_path: Path):
    path = tmp_path / "not-executable"
    path.write_text("#!/bin/sh\necho hi\n")
    path.chmod(0o644)

    with pytest.raises(LaunchFailed):
        await invoke(path, [], timeout=5)


@pytest.mark.parametrize("timeout", [0, -1, timedelta(0)])
async def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(InvalidOption):
        await invoke(PYTHON, _script("print('never')"), timeout=timeout)


async def test_caller_cancellation_returns_promptly():
    start = time.monotonic()
    with anyio.move_on_after(0.5):
        await invoke(PYTHON, _script("import time; time.sleep(30)"), timeout=30)

    assert time.monotonic() - start < 2


def _is_running(pid: int) -> bool:
    # an orphaned zombie may linger if nothing reaps it
    try:
        stat = Path(f"/proc/{pid}/stat").read_text()
    except FileNotFoundError:
        return False
    state = stat.rsplit(")", 1)[1].split()[0]
    return state not in {"Z", "X"}
