from __future__ import annotations

import os

import pytest

from ccshim.exceptions import UnrecognizedCommandError
from ccshim.model import Invocation, Language, Role
from ccshim.plan import plan_invocation


def _never_executable(path: str) -> bool:
    return False


def _always_executable(path: str) -> bool:
    return True


def test_cxx_compile_example(make_config) -> None:
    invocation = Invocation.from_argv(["/wrap/c++", "-c", "foo.cpp", "-o", "foo.o"])
    plan = plan_invocation(invocation, make_config(), is_executable=_never_executable)
    assert plan.role is Role.COMPILE
    assert plan.language is Language.CXX
    assert plan.rpath is False
    assert plan.final_args == (
        "-I/prefix/include",
        "-std=c++17",
        "-c",
        "foo.cpp",
        "-o",
        "foo.o",
    )


def test_ld_example(make_config) -> None:
    invocation = Invocation.from_argv(["ld", "-o", "a.out", "a.o"])
    plan = plan_invocation(invocation, make_config(), is_executable=_never_executable)
    assert plan.role is Role.LINK
    assert plan.exec_argv() == [
        "ld",
        "-rpath",
        "/prefix/lib",
        "-L/prefix/lib",
        "-o",
        "a.out",
        "a.o",
    ]


def test_darwin_partial_link_omits_rpath(make_config) -> None:
    config = make_config(platform="darwin")
    ld = plan_invocation(Invocation("ld", ("-r", "a.o")), config, is_executable=_never_executable)
    assert "-rpath" not in ld.final_args
    cc = plan_invocation(
        Invocation("cc", ("-Wl,-r", "a.o")), config, is_executable=_never_executable
    )
    assert not any(arg.startswith("-Wl,-rpath") for arg in cc.final_args)


@pytest.mark.parametrize("flag", ["-v", "-V", "--version", "-dumpversion"])
def test_version_query_passes_args_verbatim(make_config, flag: str) -> None:
    args = ("-c", "foo.c", flag)
    plan = plan_invocation(Invocation("gcc", args), make_config(), is_executable=_always_executable)
    assert plan.role is Role.VCHECK
    assert plan.final_args == args
    assert plan.accelerator is None
    assert plan.exec_argv() == ["gcc", *args]


def test_accelerator_prefixes_compile(make_config) -> None:
    plan = plan_invocation(
        Invocation("cc", ("-c", "x.c")),
        make_config(cc="/usr/bin/gcc-13"),
        is_executable=_always_executable,
    )
    assert plan.accelerator == os.path.join("/prefix", "bin", "ccache")
    assert plan.exec_argv()[:2] == [plan.accelerator, "/usr/bin/gcc-13"]


def test_accelerator_can_be_disabled(make_config) -> None:
    plan = plan_invocation(
        Invocation("cc", ("-c", "x.c")),
        make_config(ccache_enabled=False),
        is_executable=_always_executable,
    )
    assert plan.accelerator is None


def test_accelerator_not_used_for_link_or_preprocess(make_config) -> None:
    for invocation in (Invocation("ld", ("a.o",)), Invocation("cpp", ("x.c",))):
        plan = plan_invocation(invocation, make_config(), is_executable=_always_executable)
        assert plan.accelerator is None


def test_search_path_is_sanitized(make_config) -> None:
    search_path = os.pathsep.join(["/wrap", "/usr/bin", ".", "", "/bin"])
    plan = plan_invocation(
        Invocation.from_argv(["/wrap/gcc", "x.c"]),
        make_config(search_path=search_path),
        argv0="/wrap/gcc",
        is_executable=_never_executable,
    )
    assert plan.search_path == os.pathsep.join(["/usr/bin", "/bin"])


def test_unrecognized_name_builds_no_plan(make_config) -> None:
    with pytest.raises(UnrecognizedCommandError):
        plan_invocation(Invocation("rustc", ("x.rs",)), make_config())


def test_original_argv_for_trace(make_config) -> None:
    plan = plan_invocation(
        Invocation("gfortran", ("-c", "m.f90")), make_config(), is_executable=_never_executable
    )
    assert plan.original_argv() == ["gfortran", "-c", "m.f90"]
    assert plan.final_args == ("-ffree-form", "-I/prefix/include", "-c", "m.f90")
