from __future__ import annotations

import os
from typing import Iterable, Sequence

# Both spell "current directory" in PATH lookups.
CURRENT_DIRECTORY_ENTRIES: tuple[str, ...] = (".", "")


def split_search_path(text: str) -> list[str]:
    # Keep empty entries: they are meaningful and must be filtered explicitly.
    if text == "":
        return []
    return text.split(os.pathsep)


def join_search_path(entries: Sequence[str]) -> str:
    return os.pathsep.join(entries)


def self_directories(argv0: str, extra: Iterable[str] = ()) -> frozenset[str]:
    """Directories that resolve back to this interposer.

    The directory of ``argv0`` is included both as given and made absolute,
    since either spelling may appear on PATH.
    """
    dirs: set[str] = set(CURRENT_DIRECTORY_ENTRIES)
    install_dir = os.path.dirname(argv0)
    if install_dir:
        dirs.add(install_dir)
        dirs.add(os.path.abspath(install_dir))
    dirs.update(entry for entry in extra)
    return frozenset(dirs)


def sanitize_search_path(
    entries: Sequence[str],
    self_dirs: Iterable[str],
) -> list[str]:
    excluded = frozenset(self_dirs)
    return [entry for entry in entries if entry not in excluded]


def sanitized_search_path_text(
    search_path: str,
    argv0: str,
    extra: Iterable[str] = (),
) -> str:
    return join_search_path(
        sanitize_search_path(
            split_search_path(search_path),
            self_directories(argv0, extra),
        )
    )
