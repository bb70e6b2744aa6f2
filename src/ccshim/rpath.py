from __future__ import annotations

from typing import Sequence

from ccshim.config import ShimConfig
from ccshim.model import LINKING_ROLES, Role

# Spellings of "merge relocatable objects" that the Darwin linker rejects
# in combination with -rpath.
MERGE_FLAG_BY_ROLE: dict[Role, str] = {
    Role.LINK: "-r",
    Role.COMPILE_AND_LINK: "-Wl,-r",
}


def rpath_allowed(role: Role, args: Sequence[str], config: ShimConfig) -> bool:
    if role not in LINKING_ROLES:
        return False
    if not config.rpath_enabled or config.library_dir is None:
        return False
    if config.is_darwin and MERGE_FLAG_BY_ROLE[role] in args:
        return False
    return True


def rpath_flags(role: Role, config: ShimConfig) -> list[str]:
    library_dir = config.library_dir
    if library_dir is None or role not in LINKING_ROLES:
        return []
    if role is Role.LINK:
        return ["-rpath", library_dir]
    return [f"-Wl,-rpath,{library_dir}"]
