from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping

from ccshim.config import CONFIG_ENV_KEYS


def set_env(values: Mapping[str, str | None]) -> dict[str, str | None]:
    previous = {key: os.environ.get(key) for key in values}
    for key, value in values.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value
    return previous


def restore_env(previous: Mapping[str, str | None]) -> None:
    for key, value in previous.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@contextmanager
def shim_env_scope(values: Mapping[str, str | None]) -> Iterator[None]:
    """Run with every CCSHIM_* variable cleared except ``values``."""
    scoped: dict[str, str | None] = {key: None for key in CONFIG_ENV_KEYS}
    scoped.update(values)
    previous = set_env(scoped)
    try:
        yield
    finally:
        restore_env(previous)
