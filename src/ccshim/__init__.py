"""ccshim package root."""

from ccshim.exceptions import (
    ShimError,
    ToolchainNotExecutableError,
    ToolchainNotFoundError,
    UnrecognizedCommandError,
)
from ccshim.model import Invocation, Language, Role

__all__ = [
    "__version__",
    "Invocation",
    "Language",
    "Role",
    "ShimError",
    "ToolchainNotExecutableError",
    "ToolchainNotFoundError",
    "UnrecognizedCommandError",
]

__version__ = "0.1.0"
