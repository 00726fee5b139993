from __future__ import annotations

import os
import shutil
from functools import cache
from pathlib import Path

from loguru import logger

from .exceptions import ToolNotFound


def resolve(name: str, search_path: str | None = None) -> Path:
    """Locate an executable by name or explicit path.

    Names containing a path separator are checked in place; bare names are
    looked up on `search_path` (``os.pathsep`` separated) or ``PATH``.
    Successful lookups are cached, failures are retried on the next call.
    """
    if not name:
        raise ToolNotFound(name, search_path)
    return _resolve(name, search_path)


@cache
def _resolve(name: str, search_path: str | None) -> Path:
    if os.sep in name or (os.altsep and os.altsep in name):
        path = Path(name).expanduser()
        if path.is_file() and os.access(path, os.X_OK):
            return path.resolve()
        raise ToolNotFound(name, search_path)

    found = shutil.which(name, path=search_path)
    if found is None:
        raise ToolNotFound(name, search_path)

    logger.debug("Resolved {} to {}", name, found)
    return Path(found)


def clear_cache() -> None:
    _resolve.cache_clear()
