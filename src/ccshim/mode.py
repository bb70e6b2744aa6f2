"""Resolve the toolchain role and refine the language from the argument list.

The role scan is a single left-to-right pass over two states:

``SEEKING``
    Looking for ``-E``/``-S``/``-c`` (each ends the scan) or ``-x``.
``EXPECT_LANGUAGE_TAG``
    The previous argument was ``-x``; the current one is a language tag.

Language tags never end the scan. ``-E``/``-S``/``-c`` are checked before the
tag, so ``-x -c`` still selects ``compile``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ccshim.model import Classification, Language, Resolution, Role

VERSION_QUERY_ARGS: frozenset[str] = frozenset({"-v", "-V", "--version", "-dumpversion"})

TERMINAL_ARGS: dict[str, Role] = {
    "-E": Role.PREPROCESS,
    "-S": Role.ASSEMBLE,
    "-c": Role.COMPILE,
}

LANGUAGE_MARKER = "-x"


@dataclass(frozen=True)
class TagEffect:
    role: Role | None = None
    language: Language | None = None


LANGUAGE_TAGS: dict[str, TagEffect] = {
    "c++-header": TagEffect(role=Role.COMPILE, language=Language.CXX),
    "c-header": TagEffect(role=Role.COMPILE, language=Language.C),
    "c++": TagEffect(language=Language.CXX),
    "c++-cpp-output": TagEffect(language=Language.CXX),
    "c": TagEffect(language=Language.C),
    "cpp-output": TagEffect(language=Language.C),
    "assembler": TagEffect(role=Role.ASSEMBLE),
    "assembler-with-cpp": TagEffect(role=Role.PREPROCESS),
}

_FORTRAN_TAG_PREFIXES: tuple[str, ...] = ("f77", "f90")
_HEADER_TAGS: frozenset[str] = frozenset({"c++-header", "c-header"})


class ScanState(Enum):
    SEEKING = "seeking"
    EXPECT_LANGUAGE_TAG = "expect-language-tag"


def tag_effect(tag: str) -> TagEffect | None:
    effect = LANGUAGE_TAGS.get(tag)
    if effect is not None:
        return effect
    if tag.startswith(_FORTRAN_TAG_PREFIXES):
        return TagEffect(language=Language.FORTRAN)
    return None


def is_version_query(args: Sequence[str]) -> bool:
    return any(arg in VERSION_QUERY_ARGS for arg in args)


def scan_role_and_language(
    args: Sequence[str],
    language: Language | None,
) -> Resolution:
    role = Role.COMPILE_AND_LINK
    # A header tag pins the role to compile; later tags only move the language.
    role_pinned = False
    state = ScanState.SEEKING
    for arg in args:
        terminal = TERMINAL_ARGS.get(arg)
        if terminal is not None:
            role = terminal
            break
        if arg == LANGUAGE_MARKER:
            state = ScanState.EXPECT_LANGUAGE_TAG
            continue
        if state is ScanState.EXPECT_LANGUAGE_TAG:
            effect = tag_effect(arg)
            if effect is not None:
                if effect.role is not None and not role_pinned:
                    role = effect.role
                    role_pinned = arg in _HEADER_TAGS
                if effect.language is not None:
                    language = effect.language
        state = ScanState.SEEKING
    return Resolution(role=role, language=language)


def resolve_mode(args: Sequence[str], classification: Classification) -> Resolution:
    if classification.role_seed is not None:
        return Resolution(role=classification.role_seed, language=classification.language)
    if is_version_query(args):
        return Resolution(role=Role.VCHECK, language=classification.language)
    return scan_role_and_language(args, classification.language)
