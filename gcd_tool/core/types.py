"""Core type definitions for gcd-tool."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

# Largest value an argument may hold (unsigned 64-bit)
U64_MAX = 2**64 - 1

PARSE_ERROR_MESSAGE = "Error parsing the argument"
USAGE_MESSAGE = "Usage: gcd <UINT>+"


class ArgumentParseError(ValueError):
    """An argument is not a valid unsigned 64-bit integer."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"{PARSE_ERROR_MESSAGE}: {argument!r} ({reason})")


class GcdPreconditionError(AssertionError):
    """The GCD operation was called with operands outside its contract.

    This signals a defect in the caller, not bad user input.
    """


class CollectStatus(str, Enum):
    """Status of argument collection."""

    SUCCESS = "success"
    ERROR = "error"


class CollectResult(BaseModel):
    """Result of collecting command-line arguments into integers."""

    status: CollectStatus = CollectStatus.SUCCESS
    message: str = ""
    numbers: tuple[int, ...] = ()
    argument: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == CollectStatus.SUCCESS

    @classmethod
    def success(cls, numbers: tuple[int, ...]) -> CollectResult:
        """Create a success result."""
        return cls(status=CollectStatus.SUCCESS, numbers=numbers)

    @classmethod
    def error(cls, message: str, argument: str | None = None) -> CollectResult:
        """Create an error result."""
        return cls(status=CollectStatus.ERROR, message=message, argument=argument)


class FoldStep(BaseModel):
    """One step of folding gcd over a sequence."""

    accumulator: int
    operand: int
    result: int


class GcdReport(BaseModel):
    """The input sequence together with its greatest common divisor."""

    numbers: tuple[int, ...]
    divisor: int

    def __str__(self) -> str:
        """Format the report line printed on success."""
        listing = ", ".join(str(n) for n in self.numbers)
        return f"The greatest common divisor of [{listing}] is {self.divisor}"
