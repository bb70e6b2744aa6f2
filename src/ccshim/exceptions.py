"""Error types raised before the real toolchain takes over."""

from __future__ import annotations

EXIT_UNRECOGNIZED_COMMAND = 1
EXIT_TOOLCHAIN_NOT_EXECUTABLE = 126
EXIT_TOOLCHAIN_NOT_FOUND = 127


class ShimError(RuntimeError):
    """Base error for failures the interposer reports itself.

    Once the underlying toolchain is running, its exit status is the only
    result; these errors cover what happens before that point.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UnrecognizedCommandError(ShimError):
    """Invoked under a basename that maps to no toolchain role."""

    exit_code = EXIT_UNRECOGNIZED_COMMAND

    def __init__(self, name: str):
        super().__init__(f"unrecognized toolchain command: {name!r}")
        self.name = name


class ToolchainNotFoundError(ShimError):
    """The underlying command could not be resolved on the sanitized path."""

    exit_code = EXIT_TOOLCHAIN_NOT_FOUND

    def __init__(self, command: str, search_path: str):
        super().__init__(f"{command}: command not found (PATH={search_path})")
        self.command = command
        self.search_path = search_path


class ToolchainNotExecutableError(ShimError):
    """The underlying command was found but the OS refused to run it."""

    exit_code = EXIT_TOOLCHAIN_NOT_EXECUTABLE

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: cannot execute: {reason}")
        self.command = command
        self.reason = reason
