from __future__ import annotations

import os
from pathlib import Path
import shlex
import shutil
import sys
from typing import List, Mapping, Optional, Sequence

import typer

from ccshim import __version__
from ccshim.classifier import recognized_names
from ccshim.config import config_from_env
from ccshim.dispatch import DispatchDeps, dispatch
from ccshim.exceptions import ShimError
from ccshim.logconfig import configure_logging
from ccshim.model import Invocation
from ccshim.plan import plan_invocation
from ccshim.schema import InvocationPlanDTO

MANAGEMENT_NAME = "ccshim"

app = typer.Typer(add_completion=False, help="Compiler-invocation interposer.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{MANAGEMENT_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    del version


@app.command("names")
def names_command() -> None:
    """List the toolchain names the interposer answers to."""
    for name in recognized_names():
        typer.echo(name)


def _sibling_argv0(name: str) -> str:
    # Links installed by `ccshim link` sit next to the running executable.
    return os.path.join(os.path.dirname(os.path.abspath(sys.argv[0])), name)


@app.command(
    "explain",
    context_settings={"ignore_unknown_options": True},
)
def explain_command(
    name: str = typer.Argument(..., help="Toolchain name to simulate, e.g. c++."),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Arguments for the toolchain; put them after -- to be safe.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit the plan as JSON."),
) -> None:
    """Show the command that would run, without running it."""
    config = config_from_env()
    try:
        plan = plan_invocation(
            Invocation(name=name, args=tuple(args or ())),
            config,
            argv0=_sibling_argv0(name),
        )
    except ShimError as exc:
        typer.echo(f"{MANAGEMENT_NAME}: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code)
    if json_output:
        typer.echo(InvocationPlanDTO.from_plan(plan).model_dump_json(indent=2))
        return
    typer.echo(f"[{plan.role.value}] {shlex.join(plan.exec_argv())}")


def _default_link_target() -> str:
    found = shutil.which(MANAGEMENT_NAME)
    if found is not None:
        return found
    return os.path.abspath(sys.argv[0])


@app.command("link")
def link_command(
    directory: Path = typer.Argument(..., help="Directory to populate with symlinks."),
    target: Optional[Path] = typer.Option(
        None,
        "--target",
        help="Executable the links point at (defaults to the installed ccshim).",
    ),
    force: bool = typer.Option(False, "--force", help="Replace existing entries."),
) -> None:
    """Install the interposer under every recognized toolchain name."""
    link_target = str(target) if target is not None else _default_link_target()
    directory.mkdir(parents=True, exist_ok=True)
    for name in recognized_names():
        link_path = directory / name
        if link_path.exists() or link_path.is_symlink():
            if not force:
                typer.echo(f"skip {link_path} (exists)")
                continue
            link_path.unlink()
        link_path.symlink_to(link_target)
        typer.echo(f"link {link_path} -> {link_target}")


def interpose(
    argv: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
    deps: DispatchDeps | None = None,
    platform: str | None = None,
) -> int:
    config = config_from_env(environ, platform=platform)
    configure_logging(config.debug)
    try:
        plan = plan_invocation(
            Invocation.from_argv(argv),
            config,
            argv0=argv[0] if argv else "",
        )
        return dispatch(plan, deps, environ=environ)
    except ShimError as exc:
        typer.echo(f"{MANAGEMENT_NAME}: {exc}", err=True)
        return exc.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    name = os.path.basename(argv[0]) if argv else MANAGEMENT_NAME
    if name == MANAGEMENT_NAME:
        app(args=argv[1:], prog_name=MANAGEMENT_NAME)
        return 0
    return interpose(argv)
