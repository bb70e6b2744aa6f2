from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import shlex
import shutil
import subprocess
from typing import TYPE_CHECKING, Callable, Mapping, NoReturn, Sequence

from ccshim.config import ShimConfig
from ccshim.exceptions import ShimError, ToolchainNotExecutableError, ToolchainNotFoundError
from ccshim.model import COMPILING_ROLES, Role

if TYPE_CHECKING:
    from ccshim.plan import InvocationPlan

logger = logging.getLogger(__name__)

ExecFn = Callable[[str, Sequence[str], Mapping[str, str]], NoReturn]
SpawnFn = Callable[..., subprocess.CompletedProcess]
WhichFn = Callable[[str, str], "str | None"]


def default_is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _which(command: str, search_path: str) -> str | None:
    return shutil.which(command, path=search_path)


@dataclass(frozen=True)
class DispatchDeps:
    exec_fn: ExecFn = os.execve
    spawn: SpawnFn = subprocess.run
    which: WhichFn = _which
    replace_process: bool = os.name == "posix"


def accelerator_for(
    role: Role,
    config: ShimConfig,
    *,
    is_executable: Callable[[str], bool] = default_is_executable,
) -> str | None:
    if role not in COMPILING_ROLES or not config.ccache_enabled:
        return None
    path = config.ccache_path
    if path is None or not is_executable(path):
        return None
    return path


def trace_plan(plan: InvocationPlan) -> None:
    if not plan.debug:
        return
    tag = plan.role.value
    logger.debug("[%s] in:  %s", tag, shlex.join(plan.original_argv()))
    logger.debug("[%s] out: %s", tag, shlex.join(plan.exec_argv()))


def dispatch_environment(
    plan: InvocationPlan,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    env = dict(os.environ if environ is None else environ)
    env["PATH"] = plan.search_path
    return env


def dispatch(
    plan: InvocationPlan,
    deps: DispatchDeps | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Hand the invocation to the real toolchain.

    With process replacement available this does not return: the toolchain
    takes over the process id, streams and exit status. Otherwise the child
    is run to completion and its exit code is returned unchanged for the
    caller to exit with.
    """
    deps = deps or DispatchDeps()
    trace_plan(plan)
    argv = plan.exec_argv()
    executable = deps.which(argv[0], plan.search_path)
    if executable is None:
        raise ToolchainNotFoundError(argv[0], plan.search_path)
    env = dispatch_environment(plan, environ)
    try:
        if not deps.replace_process:
            completed = deps.spawn([executable, *argv[1:]], env=env, check=False)
            return int(completed.returncode)
        deps.exec_fn(executable, argv, env)
    except FileNotFoundError as exc:
        raise ToolchainNotFoundError(argv[0], plan.search_path) from exc
    except OSError as exc:
        raise ToolchainNotExecutableError(argv[0], exc.strerror or str(exc)) from exc
    raise ShimError(f"process replacement with {executable} returned")
