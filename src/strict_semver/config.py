# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ALLOW_PARTIAL_ENV = "STRICT_SEMVER_ALLOW_PARTIAL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how version strings are parsed.

    Attributes:
        allow_partial: Accept ``MAJOR`` and ``MAJOR.MINOR`` strings, filling
            the missing components with 0. Off by default: SemVer 2.0.0
            requires all three components.
    """

    allow_partial: bool = False

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables.

        Raises:
            ConfigError: If a variable holds an unrecognized value
        """
        raw = os.getenv(ALLOW_PARTIAL_ENV, "")
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            allow_partial = True
        elif value in _FALSE_VALUES:
            allow_partial = False
        else:
            raise ConfigError(f"{ALLOW_PARTIAL_ENV} must be a boolean, got {raw!r}")

        logger.debug("Loaded parser config from environment: allow_partial=%s", allow_partial)
        return cls(allow_partial=allow_partial)


DEFAULT_CONFIG = ParserConfig()
