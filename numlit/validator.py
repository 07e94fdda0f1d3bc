"""Syntax checks for number literals, without computing their values."""

from __future__ import annotations

from enum import Enum, auto

_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")
_BIN_DIGITS = frozenset("01")
_SEPARATOR = "'"


class _Section(Enum):
    INTEGER = auto()
    FRACTION = auto()
    EXPONENT = auto()


def _validate_sections(
    text: str, first: int, section_size: int, exponent_marks: str, mantissa_digits
) -> bool:
    """Walk ``<integer>[.<fraction>][<mark>[sign]<exponent>]`` from ``first``."""
    section = _Section.INTEGER
    skip_next = False

    for index, char in enumerate(text[first:], start=first):
        if skip_next:
            skip_next = False
            continue

        if char == _SEPARATOR:
            if text[index - 1] == _SEPARATOR:
                return False
            continue

        digits = _DEC_DIGITS if section is _Section.EXPONENT else mantissa_digits
        if char in digits:
            section_size += 1
            continue

        if char == ".":
            if section is not _Section.INTEGER or section_size == 0:
                return False
            section = _Section.FRACTION
            section_size = 0
            continue

        if char in exponent_marks:
            if section is _Section.EXPONENT or section_size == 0:
                return False
            if index + 1 >= len(text):
                return False
            if text[index + 1] in "+-":
                skip_next = True
            section = _Section.EXPONENT
            section_size = 0
            continue

        return False

    return section_size != 0


def validate_dec(text: str) -> bool:
    """Check ``<integer>[.<fraction>][e|E[sign]<exponent>]`` in decimal."""
    if not text or text[0] not in _DEC_DIGITS:
        return False
    return _validate_sections(text, 1, 1, "eE", _DEC_DIGITS)


def validate_hex(text: str) -> bool:
    """Check ``0x<integer>[.<fraction>][p|P[sign]<exponent>]`` with a decimal exponent."""
    if not text.startswith(("0x", "0X")):
        return False
    if len(text) == 2:
        return False
    return _validate_sections(text, 2, 0, "pP", _HEX_DIGITS)


def _validate_plain(text: str, prefixes: tuple[str, str], digits) -> bool:
    if not text.startswith(prefixes):
        return False
    if len(text) == 2:
        return False
    for index, char in enumerate(text[2:], start=2):
        if char == _SEPARATOR:
            if text[index - 1] == _SEPARATOR:
                return False
            continue
        if char not in digits:
            return False
    return True


def validate_oct(text: str) -> bool:
    """Check a ``0o`` prefixed octal literal."""
    return _validate_plain(text, ("0o", "0O"), _OCT_DIGITS)


def validate_bin(text: str) -> bool:
    """Check a ``0b`` prefixed binary literal."""
    return _validate_plain(text, ("0b", "0B"), _BIN_DIGITS)


def valid_integer(text: str) -> bool:
    """Check an optionally signed integer literal in any supported radix."""
    if not text or " " in text:
        return False

    if text.startswith(("-", "+")):
        text = text[1:]

    allowed = _DEC_DIGITS
    if text.startswith(("0x", "0X")):
        allowed = _HEX_DIGITS
        text = text[2:]
    elif text.startswith(("0o", "0O")):
        allowed = _OCT_DIGITS
        text = text[2:]
    elif text.startswith(("0b", "0B")):
        allowed = _BIN_DIGITS
        text = text[2:]

    if not text:
        return False
    return all(char in allowed for char in text)