from __future__ import annotations

from dataclasses import dataclass
import os
import sys
from typing import Mapping

from ccshim.runtime import env_policy

CC_OVERRIDE_ENV = "CCSHIM_CC"
CXX_OVERRIDE_ENV = "CCSHIM_CXX"
FC_OVERRIDE_ENV = "CCSHIM_FC"
LDFLAGS_ENV = "CCSHIM_LDFLAGS"
CFLAGS_ENV = "CCSHIM_CFLAGS"
CXXFLAGS_ENV = "CCSHIM_CXXFLAGS"
FFLAGS_ENV = "CCSHIM_FFLAGS"
CPPFLAGS_ENV = "CCSHIM_CPPFLAGS"
PREFIX_ENV = "CCSHIM_PREFIX"
NO_RPATH_ENV = "CCSHIM_NO_RPATH"
NO_CCACHE_ENV = "CCSHIM_NO_CCACHE"
DEBUG_ENV = "CCSHIM_DEBUG"
ENV_PATH_ENV = "CCSHIM_ENV_PATH"

CONFIG_ENV_KEYS: tuple[str, ...] = (
    CC_OVERRIDE_ENV,
    CXX_OVERRIDE_ENV,
    FC_OVERRIDE_ENV,
    LDFLAGS_ENV,
    CFLAGS_ENV,
    CXXFLAGS_ENV,
    FFLAGS_ENV,
    CPPFLAGS_ENV,
    PREFIX_ENV,
    NO_RPATH_ENV,
    NO_CCACHE_ENV,
    DEBUG_ENV,
    ENV_PATH_ENV,
)


@dataclass(frozen=True)
class FlagGroups:
    ldflags: tuple[str, ...] = ()
    cflags: tuple[str, ...] = ()
    cxxflags: tuple[str, ...] = ()
    fflags: tuple[str, ...] = ()
    cppflags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ShimConfig:
    """Everything the interposer reads from its environment, read once."""

    cc: str | None = None
    cxx: str | None = None
    fc: str | None = None
    flags: FlagGroups = FlagGroups()
    prefix: str | None = None
    rpath_enabled: bool = True
    ccache_enabled: bool = True
    debug: bool = False
    wrapper_dirs: tuple[str, ...] = ()
    search_path: str = ""
    platform: str = sys.platform

    @property
    def is_darwin(self) -> bool:
        return self.platform == "darwin"

    def override_for(self, key: str | None) -> str | None:
        if key is None:
            return None
        return {
            CC_OVERRIDE_ENV: self.cc,
            CXX_OVERRIDE_ENV: self.cxx,
            FC_OVERRIDE_ENV: self.fc,
        }.get(key)

    @property
    def library_dir(self) -> str | None:
        if self.prefix is None:
            return None
        return os.path.join(self.prefix, "lib")

    @property
    def ccache_path(self) -> str | None:
        if self.prefix is None:
            return None
        return os.path.join(self.prefix, "bin", "ccache")


def flag_groups_from_env(environ: Mapping[str, str] | None = None) -> FlagGroups:
    return FlagGroups(
        ldflags=env_policy.env_token_list(LDFLAGS_ENV, environ=environ),
        cflags=env_policy.env_token_list(CFLAGS_ENV, environ=environ),
        cxxflags=env_policy.env_token_list(CXXFLAGS_ENV, environ=environ),
        fflags=env_policy.env_token_list(FFLAGS_ENV, environ=environ),
        cppflags=env_policy.env_token_list(CPPFLAGS_ENV, environ=environ),
    )


def config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
) -> ShimConfig:
    env = os.environ if environ is None else environ
    return ShimConfig(
        cc=env_policy.env_optional_text(CC_OVERRIDE_ENV, environ=env),
        cxx=env_policy.env_optional_text(CXX_OVERRIDE_ENV, environ=env),
        fc=env_policy.env_optional_text(FC_OVERRIDE_ENV, environ=env),
        flags=flag_groups_from_env(env),
        prefix=env_policy.env_optional_text(PREFIX_ENV, environ=env),
        rpath_enabled=not env_policy.env_enabled_flag(NO_RPATH_ENV, environ=env),
        ccache_enabled=not env_policy.env_enabled_flag(NO_CCACHE_ENV, environ=env),
        debug=env_policy.env_enabled_flag(DEBUG_ENV, environ=env),
        wrapper_dirs=env_policy.env_path_list(ENV_PATH_ENV, environ=env),
        search_path=env.get("PATH", ""),
        platform=platform if platform is not None else sys.platform,
    )
