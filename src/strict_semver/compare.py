# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers < alphanumeric identifiers,
fewer identifiers < more identifiers, any pre-release < release.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Union

from .precedence import precedence_key
from .semver import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(version)


def compare(a: Version, b: Version) -> int:
    """Compare two parsed versions.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b

    Raises:
        TypeError: If either argument is not a Version
    """
    for value in (a, b):
        if not isinstance(value, Version):
            raise TypeError(f"Expected Version, got {type(value).__name__}")
    return a.compare(b)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)
    return precedence_key(v.core, v.prerelease_identifiers)
