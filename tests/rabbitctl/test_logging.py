from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from rabbitctl import RabbitCtl
from rabbitctl.logging import setup_logging


@pytest.fixture
def enabled_logging(capsys: pytest.CaptureFixture[str]) -> Iterator[None]:
    setup_logging("DEBUG")
    yield
    logger.remove()
    logger.disable("rabbitctl")


@pytest.mark.anyio
@pytest.mark.usefixtures("enabled_logging")
async def test_commands_are_logged_with_verb(fake_tool, capsys):
    ctl = RabbitCtl(settings=fake_tool.settings())

    await ctl.trace_off()

    err = capsys.readouterr().err
    assert "Running:" in err
    assert ":trace_off - " in err
