"""Assemble the final argument vector from the configured flag groups.

Groups are prepended one at a time, so the group computed last ends up
first. The resulting outermost-first order is::

    rpath, Fortran flags, preprocessor flags, C or C++ flags, linker flags, original args

Some compilers give later ``-I``/``-L`` entries priority, so this order is
part of the contract and must not be rearranged.
"""

from __future__ import annotations

from typing import Sequence

from ccshim.config import ShimConfig
from ccshim.model import COMPILING_ROLES, LINKING_ROLES, PREPROCESSING_ROLES, Language, Role
from ccshim.rpath import rpath_flags


def language_flags(language: Language | None, config: ShimConfig) -> tuple[str, ...]:
    if language is Language.C:
        return config.flags.cflags
    if language is Language.CXX:
        return config.flags.cxxflags
    return ()


def inject_flags(
    role: Role,
    language: Language | None,
    args: Sequence[str],
    config: ShimConfig,
    *,
    rpath: bool,
) -> list[str]:
    final = list(args)
    if role is Role.VCHECK:
        return final
    if role in LINKING_ROLES:
        final = [*config.flags.ldflags, *final]
    if role in COMPILING_ROLES:
        final = [*language_flags(language, config), *final]
    if role in PREPROCESSING_ROLES:
        final = [*config.flags.cppflags, *final]
    if role in COMPILING_ROLES and language is Language.FORTRAN:
        final = [*config.flags.fflags, *final]
    if rpath:
        final = [*rpath_flags(role, config), *final]
    return final
