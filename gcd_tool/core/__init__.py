"""Core modules for gcd-tool.

Primary modules:
- collector: Parse command-line arguments into unsigned integers
- reducer: Euclid's gcd and the left fold over a sequence
- config: Runtime configuration (GcdConfig)
- types: Type definitions (CollectResult, GcdReport, errors)
"""

from gcd_tool.core.collector import collect_arguments, parse_uint
from gcd_tool.core.config import GcdConfig
from gcd_tool.core.reducer import fold_steps, gcd, gcd_fold
from gcd_tool.core.types import (
    ArgumentParseError,
    CollectResult,
    CollectStatus,
    FoldStep,
    GcdPreconditionError,
    GcdReport,
)

__all__ = [
    # Types
    "ArgumentParseError",
    "CollectResult",
    "CollectStatus",
    "FoldStep",
    "GcdPreconditionError",
    "GcdReport",
    # Config
    "GcdConfig",
    # Primary modules
    "collect_arguments",
    "fold_steps",
    "gcd",
    "gcd_fold",
    "parse_uint",
]
