"""gcd-tool - Greatest common divisor of unsigned integers from the command line."""

from gcd_tool.core import (
    ArgumentParseError,
    GcdConfig,
    GcdPreconditionError,
    GcdReport,
    gcd,
    gcd_fold,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentParseError",
    "GcdConfig",
    "GcdPreconditionError",
    "GcdReport",
    "gcd",
    "gcd_fold",
]
