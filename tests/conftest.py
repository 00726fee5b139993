from __future__ import annotations

import json
import stat
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from attrs import define

from rabbitctl.config import RabbitCtlSettings
from rabbitctl.process import locator

FAKE_TOOL_SOURCE = """\
import json
import os
import sys
import time

args = sys.argv[1:]
with open(os.environ["FAKE_TOOL_LOG"], "a", encoding="utf-8") as log:
    log.write(json.dumps(args) + "\\n")

with open(os.environ["FAKE_TOOL_RESPONSES"], encoding="utf-8") as f:
    responses = json.load(f)

for arg in args:
    if arg in responses:
        response = responses[arg]
        time.sleep(response["delay"])
        sys.stdout.write(response["stdout"])
        sys.stderr.write(response["stderr"])
        sys.exit(response["exit_code"])
"""


@define
class FakeTool:
    """Executable script standing in for rabbitmqctl / rabbitmq-plugins.

    It records every argv it is called with and answers verbs with canned
    output registered through `respond`.
    """

    path: Path
    log: Path
    responses: Path

    def respond(
        self,
        verb: str,
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        delay: float = 0,
    ) -> None:
        data = json.loads(self.responses.read_text(encoding="utf-8"))
        data[verb] = {
            "stdout": stdout,
            "stderr": stderr,
            "exit_code": exit_code,
            "delay": delay,
        }
        self.responses.write_text(json.dumps(data), encoding="utf-8")

    @property
    def calls(self) -> list[list[str]]:
        if not self.log.exists():
            return []
        lines = self.log.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines]

    def settings(self) -> RabbitCtlSettings:
        return RabbitCtlSettings(ctl_tool=str(self.path), plugins_tool=str(self.path))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_locator_cache() -> Iterator[None]:
    locator.clear_cache()
    yield
    locator.clear_cache()


@pytest.fixture
def fake_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeTool:
    if sys.platform == "win32":
        pytest.skip("fake tool relies on a shebang script")

    path = tmp_path / "fake-rabbitmqctl"
    path.write_text(f"#!{sys.executable}\n{FAKE_TOOL_SOURCE}", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    log = tmp_path / "calls.jsonl"
    responses = tmp_path / "responses.json"
    responses.write_text("{}", encoding="utf-8")

    monkeypatch.setenv("FAKE_TOOL_LOG", str(log))
    monkeypatch.setenv("FAKE_TOOL_RESPONSES", str(responses))
    return FakeTool(path=path, log=log, responses=responses)
