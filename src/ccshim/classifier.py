"""Map the basename the tool was started as to a toolchain role and language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ccshim.config import CC_OVERRIDE_ENV, CXX_OVERRIDE_ENV, FC_OVERRIDE_ENV, ShimConfig
from ccshim.exceptions import UnrecognizedCommandError
from ccshim.model import Classification, Language, Role


@dataclass(frozen=True)
class CommandSpec:
    role_seed: Role | None = None
    language: Language | None = None
    # Config key of the compiler override consulted for generic names.
    override_key: str | None = None


_C_GENERIC = CommandSpec(language=Language.C, override_key=CC_OVERRIDE_ENV)
_CXX_GENERIC = CommandSpec(language=Language.CXX, override_key=CXX_OVERRIDE_ENV)
_FORTRAN_GENERIC = CommandSpec(language=Language.FORTRAN, override_key=FC_OVERRIDE_ENV)
_C_NAMED = CommandSpec(language=Language.C)
_CXX_NAMED = CommandSpec(language=Language.CXX)
_FORTRAN_NAMED = CommandSpec(language=Language.FORTRAN)

COMMAND_TABLE: Mapping[str, CommandSpec] = {
    "cpp": CommandSpec(role_seed=Role.PREPROCESS),
    "cc": _C_GENERIC,
    "c89": _C_GENERIC,
    "c99": _C_GENERIC,
    "c++": _CXX_GENERIC,
    "ftn": _FORTRAN_GENERIC,
    "f90": _FORTRAN_GENERIC,
    "fc": _FORTRAN_GENERIC,
    "f95": _FORTRAN_GENERIC,
    "f77": _FORTRAN_GENERIC,
    "gcc": _C_NAMED,
    "clang": _C_NAMED,
    "g++": _CXX_NAMED,
    "clang++": _CXX_NAMED,
    "gfortran": _FORTRAN_NAMED,
    "ld": CommandSpec(role_seed=Role.LINK),
}


def recognized_names() -> tuple[str, ...]:
    return tuple(COMMAND_TABLE)


def classify_command(name: str, config: ShimConfig) -> Classification:
    """Return the role seed, language and underlying command for ``name``.

    Matching is exact and case-sensitive against the table above; any other
    name raises :class:`UnrecognizedCommandError`.
    """
    entry = COMMAND_TABLE.get(name)
    if entry is None:
        raise UnrecognizedCommandError(name)
    command = config.override_for(entry.override_key) or name
    return Classification(role_seed=entry.role_seed, language=entry.language, command=command)
