from __future__ import annotations

import os
import shlex
from typing import Mapping

_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _environ(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def env_text(
    name: str,
    *,
    environ: Mapping[str, str] | None = None,
    default: str = "",
) -> str:
    return _environ(environ).get(name, default).strip()


def env_optional_text(
    name: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    text = env_text(name, environ=environ)
    return text or None


def env_enabled_flag(
    name: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    return env_text(name, environ=environ).lower() in _TRUTHY_VALUES


def env_token_list(
    name: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Split a flag group variable with shell quoting rules.

    ``-I"/opt/my dir/include"`` stays one token. Token order is kept.
    """
    text = env_text(name, environ=environ)
    if not text:
        return ()
    return tuple(shlex.split(text))


def env_path_list(
    name: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    text = _environ(environ).get(name, "")
    if not text:
        return ()
    return tuple(entry for entry in text.split(os.pathsep) if entry)
