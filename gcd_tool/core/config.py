"""Runtime configuration for gcd-tool."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_ZERO_IDENTITY = "GCD_ZERO_IDENTITY"
ENV_LOG_LEVEL = "GCD_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class GcdConfig(BaseModel):
    """Configuration for a gcd run."""

    # Treat 0 as the identity element instead of failing the gcd precondition
    zero_as_identity: bool = False

    # Standard logging level name
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GcdConfig:
        """Build a config from environment variables (default: os.environ)."""
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}
        if ENV_ZERO_IDENTITY in environ:
            values["zero_as_identity"] = environ[ENV_ZERO_IDENTITY].strip().lower() in _TRUE_VALUES
        if ENV_LOG_LEVEL in environ:
            values["log_level"] = environ[ENV_LOG_LEVEL]
        return cls(**values)
