# SPDX-License-Identifier: MIT
"""Strict SemVer 2.0.0 parsing and precedence comparison.

This package parses version strings with a single-pass scanner that
validates the SemVer 2.0.0 grammar as it reads, and orders the resulting
versions by SemVer precedence.

Example:
    >>> from strict_semver import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0-01")
    False
    >>>
    >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
    1
"""

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    ParseError,
    ValidationError,
)
from .config import (
    ParserConfig,
    ConfigError,
    DEFAULT_CONFIG,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare,
    compare_versions,
    version_key,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "ParseError",
    "ValidationError",
    # Configuration
    "ParserConfig",
    "ConfigError",
    "DEFAULT_CONFIG",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    # Version comparison
    "compare",
    "compare_versions",
    "version_key",
]
