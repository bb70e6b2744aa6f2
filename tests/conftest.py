from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from ccshim.config import FlagGroups, ShimConfig
from ccshim.logconfig import remove_handlers


@pytest.fixture(autouse=True)
def _drop_log_handler():
    yield
    remove_handlers()


@pytest.fixture
def flag_groups() -> FlagGroups:
    return FlagGroups(
        ldflags=("-L/prefix/lib",),
        cflags=("-std=c11",),
        cxxflags=("-std=c++17",),
        fflags=("-ffree-form",),
        cppflags=("-I/prefix/include",),
    )


@pytest.fixture
def make_config(flag_groups: FlagGroups):
    def _make(**overrides: object) -> ShimConfig:
        values: dict[str, object] = {
            "flags": flag_groups,
            "prefix": "/prefix",
            "platform": "linux",
        }
        values.update(overrides)
        return ShimConfig(**values)  # type: ignore[arg-type]

    return _make
