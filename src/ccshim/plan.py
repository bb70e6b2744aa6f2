from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ccshim.classifier import classify_command
from ccshim.config import ShimConfig
from ccshim.dispatch import accelerator_for, default_is_executable
from ccshim.inject import inject_flags
from ccshim.mode import resolve_mode
from ccshim.model import Invocation, Language, Role
from ccshim.rpath import rpath_allowed
from ccshim.runtime.path_policy import sanitized_search_path_text


@dataclass(frozen=True)
class InvocationPlan:
    """Resolved invocation, built once and handed unchanged to dispatch."""

    invocation: Invocation
    command: str
    role: Role
    language: Language | None
    rpath: bool
    accelerator: str | None
    final_args: tuple[str, ...]
    search_path: str
    debug: bool = False

    def exec_argv(self) -> list[str]:
        head = [self.accelerator] if self.accelerator is not None else []
        return [*head, self.command, *self.final_args]

    def original_argv(self) -> list[str]:
        return [self.command, *self.invocation.args]


def plan_invocation(
    invocation: Invocation,
    config: ShimConfig,
    *,
    argv0: str | None = None,
    is_executable: Callable[[str], bool] = default_is_executable,
) -> InvocationPlan:
    classification = classify_command(invocation.name, config)
    resolution = resolve_mode(invocation.args, classification)
    rpath = rpath_allowed(resolution.role, invocation.args, config)
    final_args = inject_flags(
        resolution.role,
        resolution.language,
        invocation.args,
        config,
        rpath=rpath,
    )
    search_path = sanitized_search_path_text(
        config.search_path,
        argv0 if argv0 is not None else invocation.name,
        config.wrapper_dirs,
    )
    return InvocationPlan(
        invocation=invocation,
        command=classification.command,
        role=resolution.role,
        language=resolution.language,
        rpath=rpath,
        accelerator=accelerator_for(resolution.role, config, is_executable=is_executable),
        final_args=tuple(final_args),
        search_path=search_path,
        debug=config.debug,
    )
