# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing or constructing versions."""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Base class for every version error raised by this package."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class ParseError(InvalidVersionError):
    """Raised when a version string violates the SemVer 2.0.0 grammar.

    Attributes:
        version: The text being scanned
        position: 0-based index of the fault, or None for whole-input errors
        character: The offending character, or None at end of input
        fragment: The offending substring (e.g. an identifier), if any
        reason: Short description without location details
        detail: Reason with character, fragment and position, without the input
    """

    def __init__(
        self,
        version: str,
        reason: str,
        position: Optional[int] = None,
        character: Optional[str] = None,
        fragment: Optional[str] = None,
    ):
        self.reason = reason
        self.position = position
        self.character = character
        self.fragment = fragment

        detail = reason
        if character is not None:
            detail += f" {character!r}"
        if fragment is not None:
            detail += f" in {fragment!r}"
        if position is not None:
            detail += f" at position {position}"
        self.detail = detail
        super().__init__(version, f"{detail}: {version!r}")


class ValidationError(InvalidVersionError):
    """Raised when a Version is assembled from invalid components.

    Attributes:
        field: Name of the rejected component ("major", "prerelease", ...)
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(str(value), f"Invalid {field} {value!r}: {reason}")
