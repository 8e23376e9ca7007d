"""GCD reducer: Euclid's algorithm and a left fold over a sequence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gcd_tool.core.types import U64_MAX, FoldStep, GcdPreconditionError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _check_operand(name: str, value: int) -> None:
    if value == 0:
        raise GcdPreconditionError(f"gcd precondition violated: {name} != 0 (got {name}=0)")
    if value < 0 or value > U64_MAX:
        raise GcdPreconditionError(
            f"gcd precondition violated: 0 < {name} <= {U64_MAX} (got {name}={value})"
        )


def gcd(n: int, m: int) -> int:
    """
    Return the greatest common divisor of two non-zero unsigned integers.

    Uses the Euclidean algorithm: order the pair so the smaller value is
    the divisor, replace the larger with the remainder, and repeat until the
    remainder is zero.

    Raises:
        GcdPreconditionError: If either operand is zero or outside the
            unsigned 64-bit range
    """
    _check_operand("n", n)
    _check_operand("m", m)

    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n


def _combine(a: int, b: int, zero_as_identity: bool) -> int:
    if zero_as_identity:
        if a == 0:
            return b
        if b == 0:
            return a
    return gcd(a, b)


def fold_steps(numbers: Sequence[int], zero_as_identity: bool = False) -> list[FoldStep]:
    """
    Fold gcd over numbers from left to right, recording each step.

    Args:
        numbers: Non-empty sequence of unsigned integers
        zero_as_identity: Treat 0 as the identity (gcd(0, b) == b) instead
            of passing it to gcd and failing its precondition

    Returns:
        One FoldStep per element after the first

    Raises:
        ValueError: If numbers is empty
        GcdPreconditionError: If a zero reaches gcd in strict mode
    """
    if not numbers:
        raise ValueError("cannot fold gcd over an empty sequence")

    steps: list[FoldStep] = []
    d = numbers[0]
    for m in numbers[1:]:
        result = _combine(d, m, zero_as_identity)
        logger.debug("gcd(%d, %d) = %d", d, m, result)
        steps.append(FoldStep(accumulator=d, operand=m, result=result))
        d = result
    return steps


def gcd_fold(numbers: Sequence[int], zero_as_identity: bool = False) -> int:
    """Return the gcd of every value in numbers, folding left to right."""
    steps = fold_steps(numbers, zero_as_identity=zero_as_identity)
    return steps[-1].result if steps else numbers[0]
