from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os
from typing import Sequence


class Role(str, Enum):
    """Toolchain phase requested by an invocation.

    Values are the short tags written to the debug trace.
    """

    VCHECK = "vcheck"
    PREPROCESS = "cpp"
    COMPILE = "cc"
    ASSEMBLE = "as"
    LINK = "ld"
    COMPILE_AND_LINK = "ccld"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS: dict[Role, str] = {
    Role.VCHECK: "vcheck",
    Role.PREPROCESS: "preprocess",
    Role.COMPILE: "compile",
    Role.ASSEMBLE: "assemble",
    Role.LINK: "link",
    Role.COMPILE_AND_LINK: "compile-and-link",
}

LINKING_ROLES: frozenset[Role] = frozenset({Role.LINK, Role.COMPILE_AND_LINK})
COMPILING_ROLES: frozenset[Role] = frozenset({Role.COMPILE, Role.COMPILE_AND_LINK})
PREPROCESSING_ROLES: frozenset[Role] = frozenset(
    {Role.PREPROCESS, Role.ASSEMBLE, Role.COMPILE, Role.COMPILE_AND_LINK}
)


class Language(str, Enum):
    C = "C"
    CXX = "C++"
    FORTRAN = "Fortran"


@dataclass(frozen=True)
class Invocation:
    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> Invocation:
        if not argv:
            return cls(name="")
        return cls(name=os.path.basename(argv[0]), args=tuple(argv[1:]))


@dataclass(frozen=True)
class Classification:
    role_seed: Role | None
    language: Language | None
    command: str


@dataclass(frozen=True)
class Resolution:
    role: Role
    language: Language | None
