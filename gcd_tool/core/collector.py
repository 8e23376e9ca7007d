"""Argument collector.

Turns raw command-line strings into an ordered sequence of unsigned 64-bit
integers, stopping at the first argument that does not parse.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from gcd_tool.core.types import (
    PARSE_ERROR_MESSAGE,
    U64_MAX,
    ArgumentParseError,
    CollectResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# ASCII digits only
_UINT_PATTERN = re.compile(r"\+?[0-9]+")

_U64_MAX_DIGITS = len(str(U64_MAX))


def parse_uint(text: str) -> int:
    """
    Parse a base-10 unsigned 64-bit integer.

    A single leading '+' is allowed. Whitespace, '-', underscores and
    anything that is not an ASCII digit are rejected.

    Args:
        text: The argument to parse

    Returns:
        The parsed value

    Raises:
        ArgumentParseError: If the text is empty, malformed, or out of range
    """
    if not text:
        raise ArgumentParseError(text, "empty")

    if _UINT_PATTERN.fullmatch(text) is None:
        raise ArgumentParseError(text, "invalid digit")

    # Bound the digit count before int()
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > _U64_MAX_DIGITS:
        raise ArgumentParseError(text, "overflow")

    value = int(digits)
    if value > U64_MAX:
        raise ArgumentParseError(text, "overflow")

    return value


def collect_arguments(args: Iterable[str]) -> CollectResult:
    """
    Collect arguments into an integer sequence, preserving order.

    Returns an error result as soon as one argument fails to parse; later
    arguments are not looked at. An empty argument list is a success with an
    empty sequence.
    """
    numbers: list[int] = []

    for arg in args:
        try:
            numbers.append(parse_uint(arg))
        except ArgumentParseError as e:
            logger.debug("Rejected argument %r: %s", arg, e.reason)
            return CollectResult.error(
                message=f"{PARSE_ERROR_MESSAGE}: {arg!r} is not an unsigned 64-bit integer ({e.reason})",
                argument=arg,
            )

    logger.debug("Collected %d argument(s)", len(numbers))
    return CollectResult.success(tuple(numbers))
