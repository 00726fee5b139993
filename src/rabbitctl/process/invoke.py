from __future__ import annotations

import os
import shlex
import signal
import subprocess
from collections.abc import Sequence
from contextlib import suppress
from datetime import timedelta
from pathlib import Path
from typing import Final

import anyio
from anyio.abc import ByteReceiveStream, Process
from loguru import logger

from rabbitctl.command.exceptions import InvalidOption

from .exceptions import LaunchFailed
from .schema import ExecutionResult

_POSIX: Final = os.name == "posix"
DRAIN_GRACE: Final = 0.25
"""Seconds allowed for collecting buffered output after a timed-out process is killed."""


async def invoke(
    path: str | Path,
    args: Sequence[str],
    timeout: timedelta | float,
    *,
    encoding: str = "utf-8",
) -> ExecutionResult:
    """Run `path` with `args` and capture both output streams.

    Standard output and standard error are drained concurrently while
    waiting for exit. If the process outlives `timeout` its whole process
    group is killed and the partial output is returned with
    ``timed_out=True``. A process that exits in time but leaves descendants
    holding its pipes keeps its exit status; the descendants are killed.
    A non-zero exit status is reported, not raised.
    """
    seconds = _to_seconds(timeout)
    argv = [str(path), *args]
    logger.debug("Running: {}", shlex.join(argv))

    try:
        process = await anyio.open_process(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=_POSIX,
        )
    except OSError as exc:
        raise LaunchFailed(argv, exc.strerror or str(exc)) from exc

    stdout = bytearray()
    stderr = bytearray()
    timed_out = False
    finished = False
    try:
        with anyio.move_on_after(seconds) as scope:
            await _communicate(process, stdout, stderr)

        if scope.cancelled_caught:
            # the leader may have exited while a descendant keeps the pipes open
            timed_out = process.returncode is None
            if timed_out:
                logger.warning("Timed out after {}s: {}", seconds, shlex.join(argv))
            else:
                logger.debug("Killing leftover processes of: {}", shlex.join(argv))
            _kill(process)
            with anyio.CancelScope(
                shield=True, deadline=anyio.current_time() + DRAIN_GRACE
            ):
                await _communicate(process, stdout, stderr)
        finished = True
    finally:
        # also reached when the caller is cancelled
        if not finished:
            _kill(process)
        with anyio.CancelScope(shield=True):
            await process.aclose()

    exit_code = process.returncode if process.returncode is not None else -1
    if exit_code != 0 and not timed_out:
        logger.debug("Exited with code {}: {}", exit_code, shlex.join(argv))

    return ExecutionResult(
        args=argv,
        exit_code=exit_code,
        stdout=stdout.decode(encoding, errors="replace"),
        stderr=stderr.decode(encoding, errors="replace"),
        timed_out=timed_out,
    )


async def _communicate(process: Process, stdout: bytearray, stderr: bytearray) -> None:
    async with anyio.create_task_group() as tg:
        tg.start_soon(_drain, process.stdout, stdout)
        tg.start_soon(_drain, process.stderr, stderr)
    await process.wait()


async def _drain(stream: ByteReceiveStream | None, sink: bytearray) -> None:
    if stream is None:
        return
    async for chunk in stream:
        sink.extend(chunk)


def _kill(process: Process) -> None:
    # the process group can outlive its leader
    with suppress(ProcessLookupError):
        if _POSIX:
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()


def _to_seconds(timeout: timedelta | float) -> float:
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else timeout
    if isinstance(seconds, bool) or seconds <= 0:
        raise InvalidOption(f"timeout must be positive, got {timeout!r}")
    return float(seconds)
