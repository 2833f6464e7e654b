# SPDX-License-Identifier: MIT
"""Semantic version value object and parsing.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +001
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import InvalidVersionError, ParseError, ValidationError
from .precedence import compare_precedence
from .scanner import ScannedVersion, Scanner, read_identifiers

logger = logging.getLogger(__name__)


def _validate_identifiers(
    name: str, value: Optional[str], check_leading_zeros: bool
) -> tuple[str, tuple[str, ...]]:
    if value is None or value == "":
        return "", ()
    if not isinstance(value, str):
        raise ValidationError(name, value, f"must be a string, got {type(value).__name__}")
    try:
        identifiers = read_identifiers(value, 0, len(value), check_leading_zeros)
    except ParseError as e:
        raise ValidationError(name, value, e.detail) from e
    return value, identifiers


@dataclass(frozen=True, slots=True)
class Version:
    """A validated semantic version.

    Equality, hashing and ordering use major, minor, patch and pre-release
    only. Build metadata and the original text are kept for display.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers joined by dots, "" when absent
        build: Build metadata identifiers joined by dots, "" when absent
        prerelease_identifiers: Pre-release split on dots
        build_identifiers: Build metadata split on dots
        original_text: The parsed string, or the canonical form when the
            version was assembled from components

    Raises:
        ValidationError: If a component is out of range or malformed
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = ""
    build: Optional[str] = field(default="", compare=False)
    prerelease_identifiers: tuple[str, ...] = field(
        default=(), init=False, compare=False, repr=False
    )
    build_identifiers: tuple[str, ...] = field(
        default=(), init=False, compare=False, repr=False
    )
    original_text: str = field(default="", init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    name, value, f"must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ValidationError(name, value, "must not be negative")

        prerelease, prerelease_identifiers = _validate_identifiers(
            "prerelease", self.prerelease, check_leading_zeros=True
        )
        build, build_identifiers = _validate_identifiers(
            "build", self.build, check_leading_zeros=False
        )

        object.__setattr__(self, "prerelease", prerelease)
        object.__setattr__(self, "build", build)
        object.__setattr__(self, "prerelease_identifiers", prerelease_identifiers)
        object.__setattr__(self, "build_identifiers", build_identifiers)
        object.__setattr__(self, "original_text", str(self))

    @classmethod
    def parse(cls, version_string: str, config: Optional[ParserConfig] = None) -> "Version":
        """Parse a version string. See ``parse_version``."""
        return parse_version(version_string, config)

    @classmethod
    def _from_scan(cls, text: str, scanned: ScannedVersion) -> "Version":
        version = cls(*scanned)
        object.__setattr__(version, "original_text", text)
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def compare(self, other: "Version") -> int:
        """Compare precedence with another Version.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        return compare_precedence(
            self.core, self.prerelease_identifiers, other.core, other.prerelease_identifiers
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Parser options; strict SemVer 2.0.0 when omitted

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1").prerelease_identifiers
        ('alpha', '1')

        >>> str(parse_version("2", ParserConfig(allow_partial=True)))
        '2.0.0'
    """
    if version_string is None:
        raise ParseError("", "empty version")
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string),
            f"version must be a string, got {type(version_string).__name__}",
        )
    if not version_string.strip():
        raise ParseError(version_string, "empty version")

    config = config or DEFAULT_CONFIG
    scanned = Scanner(version_string, allow_partial=config.allow_partial).scan()
    return Version._from_scan(version_string, scanned)


def is_valid_semver(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string, config)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e)
        return False
    return True
