# SPDX-License-Identifier: MIT
"""Single-pass scanner for the SemVer 2.0.0 grammar.

The scanner walks the input once, left to right, validating as it goes:

    MAJOR "." MINOR "." PATCH [ "-" PRERELEASE ] [ "+" BUILD ]

Identifier runs (pre-release and build metadata) are checked by
``read_identifiers``, which is also what ``Version`` uses to validate
components handed to it directly, so both paths enforce the same rules.
"""

from __future__ import annotations

import string
from typing import NamedTuple, Optional

from .errors import ParseError

_DIGITS = frozenset(string.digits)
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")
_NUMBER_TERMINATORS = frozenset(".-+")


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists only of ASCII digits."""
    return bool(identifier) and all(c in _DIGITS for c in identifier)


def read_identifiers(
    text: str,
    start: int,
    stop: int,
    check_leading_zeros: bool,
) -> tuple[str, ...]:
    """Validate the dot-separated identifier run ``text[start:stop]``.

    Args:
        text: The full string being validated (used for error context)
        start: Index of the first character of the run
        stop: Index one past the last character of the run
        check_leading_zeros: Reject all-digit identifiers with a leading
            zero. True for pre-release, False for build metadata.

    Returns:
        The identifiers in order.

    Raises:
        ParseError: On an empty identifier, a character outside
            ``[0-9A-Za-z-]``, or a leading zero when checked.
    """
    identifiers = []
    begin = start
    pos = start
    while True:
        if pos == stop or text[pos] == ".":
            if pos == begin:
                raise ParseError(text, "empty identifier", position=pos)
            identifier = text[begin:pos]
            if (
                check_leading_zeros
                and len(identifier) > 1
                and identifier[0] == "0"
                and is_numeric_identifier(identifier)
            ):
                raise ParseError(
                    text,
                    "leading zero in numeric identifier",
                    position=begin,
                    fragment=identifier,
                )
            identifiers.append(identifier)
            if pos == stop:
                break
            begin = pos + 1
        elif text[pos] not in _IDENTIFIER_CHARS:
            raise ParseError(
                text,
                "invalid identifier character",
                position=pos,
                character=text[pos],
            )
        pos += 1
    return tuple(identifiers)


class ScannedVersion(NamedTuple):
    """Raw fields produced by a successful scan."""

    major: int
    minor: int
    patch: int
    prerelease: str
    build: str


class Scanner:
    """Position-tracking cursor over a version string.

    Args:
        text: The version string to scan
        allow_partial: Accept ``MAJOR`` and ``MAJOR.MINOR`` forms, with the
            missing components defaulting to 0
    """

    def __init__(self, text: str, allow_partial: bool = False) -> None:
        self.text = text
        self.pos = 0
        self.allow_partial = allow_partial

    @property
    def eof(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        """Return the current character without consuming it."""
        return None if self.eof else self.text[self.pos]

    def accept(self, char: str) -> bool:
        """Consume ``char`` if it is the current character."""
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def unexpected(self) -> ParseError:
        return ParseError(
            self.text,
            "unexpected character",
            position=self.pos,
            character=self.text[self.pos],
        )

    def read_number(self, component: str) -> int:
        """Read a numeric version component.

        Stops before ``.``, ``-``, ``+`` or end of input.
        """
        start = self.pos
        value = 0
        while not self.eof:
            c = self.text[self.pos]
            if c in _DIGITS:
                value = value * 10 + (ord(c) - ord("0"))
                self.pos += 1
            elif c in _NUMBER_TERMINATORS:
                break
            else:
                raise self.unexpected()

        if self.pos == start:
            if self.eof:
                raise ParseError(
                    self.text, f"missing {component} version", position=self.pos
                )
            raise ParseError(
                self.text,
                f"expected {component} version number, found",
                position=self.pos,
                character=self.peek(),
            )
        if self.pos - start > 1 and self.text[start] == "0":
            raise ParseError(
                self.text,
                f"leading zero in {component} version",
                position=start,
                fragment=self.text[start : self.pos],
            )
        return value

    def read_run(self, terminator: Optional[str], check_leading_zeros: bool) -> str:
        """Read a dot-separated identifier run up to ``terminator`` or end."""
        stop = len(self.text)
        if terminator is not None:
            found = self.text.find(terminator, self.pos)
            if found != -1:
                stop = found

        start = self.pos
        read_identifiers(self.text, start, stop, check_leading_zeros)
        self.pos = stop
        return self.text[start:stop]

    def _require_dot(self, component: str) -> bool:
        if self.accept("."):
            return True
        if self.allow_partial:
            return False
        if self.eof:
            raise ParseError(
                self.text, f"missing {component} version", position=self.pos
            )
        raise ParseError(
            self.text,
            f"expected '.' before {component} version, found",
            position=self.pos,
            character=self.peek(),
        )

    def scan(self) -> ScannedVersion:
        """Scan the whole input.

        Raises:
            ParseError: If the input does not match the grammar
        """
        major = self.read_number("major")
        minor = patch = 0
        if self._require_dot("minor"):
            minor = self.read_number("minor")
            if self._require_dot("patch"):
                patch = self.read_number("patch")

        prerelease = build = ""
        if self.accept("-"):
            prerelease = self.read_run("+", check_leading_zeros=True)
        if self.accept("+"):
            build = self.read_run(None, check_leading_zeros=False)
        if not self.eof:
            raise self.unexpected()

        return ScannedVersion(major, minor, patch, prerelease, build)
