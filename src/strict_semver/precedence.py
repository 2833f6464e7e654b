# SPDX-License-Identifier: MIT
"""SemVer precedence rules over already-validated fields.

Build metadata never takes part in precedence. Identifiers are compared
as ASCII strings, never with locale-aware collation.
"""

from __future__ import annotations

from typing import Sequence

from .scanner import is_numeric_identifier


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare numerically and always sort before
    alphanumeric ones. Alphanumeric identifiers compare by ASCII value.

    Returns:
        -1, 0 or 1
    """
    a_numeric = is_numeric_identifier(a)
    b_numeric = is_numeric_identifier(b)

    if a_numeric and b_numeric:
        return _cmp(int(a), int(b))
    if a_numeric:
        return -1
    if b_numeric:
        return 1
    return _cmp(a, b)


def compare_prerelease(a: Sequence[str], b: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence means "no pre-release", which outranks any
    pre-release (1.0.0 > 1.0.0-alpha).

    Returns:
        -1, 0 or 1
    """
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1

    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result:
            return result

    # All shared identifiers equal - the longer sequence has higher precedence
    return _cmp(len(a), len(b))


def compare_precedence(
    a_core: tuple[int, int, int],
    a_prerelease: Sequence[str],
    b_core: tuple[int, int, int],
    b_prerelease: Sequence[str],
) -> int:
    """Compare (major, minor, patch) cores, then pre-release identifiers."""
    for left, right in zip(a_core, b_core):
        if left != right:
            return -1 if left < right else 1
    return compare_prerelease(a_prerelease, b_prerelease)


def precedence_key(core: tuple[int, int, int], prerelease: Sequence[str]) -> tuple:
    """Build a tuple whose natural ordering matches ``compare_precedence``.

    Releases get ``(1,)`` so they sort after every pre-release of the same
    core. Each numeric identifier becomes ``(0, value, "")`` and each
    alphanumeric one ``(1, 0, text)``, so numeric identifiers sort first
    and a shorter sequence sorts before any longer one it prefixes.
    """
    if not prerelease:
        return (*core, (1,))

    parts = tuple(
        (0, int(identifier), "") if is_numeric_identifier(identifier) else (1, 0, identifier)
        for identifier in prerelease
    )
    return (*core, (0, parts))
