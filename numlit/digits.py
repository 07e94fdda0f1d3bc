"""Digit-level parsing of integer literals with optional ``'`` separators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UINT64_MAX = (1 << 64) - 1
_INT64_LIMIT = 1 << 63

DEC_DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"
SEPARATOR = "'"


class NumKind(Enum):
    """Kind of a number literal; the value is its radix."""

    DECIMAL = 10
    HEX = 16
    OCTAL = 8
    BINARY = 2

    @property
    def base(self) -> int:
        return self.value


_PREFIXES = (
    (NumKind.HEX, ("0x", "0X")),
    (NumKind.OCTAL, ("0o", "0O")),
    (NumKind.BINARY, ("0b", "0B")),
)


@dataclass(frozen=True)
class _DigitSpec:
    digits: str
    name: str
    overflow: str
    empty: str


_SPECS = {
    NumKind.HEX: _DigitSpec(
        HEX_DIGITS, "hex", "hex literal overflow: ", "Invalid hex literal: "
    ),
    NumKind.DECIMAL: _DigitSpec(
        DEC_DIGITS,
        "decimal",
        "decimal literal overflow: '",
        "Invalid decimal literal: '",
    ),
    NumKind.OCTAL: _DigitSpec(
        "01234567", "octal", "octal literal overflow: '", "Invalid octal literal: '"
    ),
    NumKind.BINARY: _DigitSpec(
        "01", "binary", "binary literal overflow: ", "Invalid binary literal: '"
    ),
}


def starts_with(text: str, prefix: str) -> bool:
    """Return True if ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def numkind(text: str) -> NumKind:
    """Detect the kind of literal from its prefix; anything unprefixed is decimal."""
    for kind, prefixes in _PREFIXES:
        if text.startswith(prefixes):
            return kind
    return NumKind.DECIMAL


def start_diagnostics(text: str) -> list[str]:
    """Return the complaints about how ``text`` starts, empty if none."""
    if not text:
        return ["Invalid argument: empty string"]
    if (
        numkind(text) is NumKind.DECIMAL
        and text[0] not in DEC_DIGITS
        and text[0] != "."
    ):
        return [f"Invalid number start in: {text}"]
    return []


def _parse_digits(text: str, start: int, end: int | None, kind: NumKind) -> int:
    if end is None:
        end = len(text)
    if end > len(text):
        raise ValueError("end argument is bigger than the string length")

    spec = _SPECS[kind]
    base = kind.base
    result = 0
    valid = False

    for char in text[start:end]:
        if char == SEPARATOR:
            continue
        if char not in spec.digits:
            raise ValueError(f"Invalid {spec.name} digit '{char}' in literal: {text}")
        result = result * base + int(char, base)
        if result > UINT64_MAX:
            raise OverflowError(spec.overflow + text)
        valid = True

    if not valid:
        raise ValueError(spec.empty + text)
    return result


def parse_hex(text: str, start: int = 0, end: int | None = None) -> int:
    """Parse hexadecimal digits of ``text[start:end]`` as an unsigned 64-bit value."""
    return _parse_digits(text, start, end, NumKind.HEX)


def parse_dec(text: str, start: int = 0, end: int | None = None) -> int:
    """Parse decimal digits of ``text[start:end]`` as an unsigned 64-bit value."""
    return _parse_digits(text, start, end, NumKind.DECIMAL)


def parse_oct(text: str, start: int = 0, end: int | None = None) -> int:
    """Parse octal digits of ``text[start:end]`` as an unsigned 64-bit value."""
    return _parse_digits(text, start, end, NumKind.OCTAL)


def parse_bin(text: str, start: int = 0, end: int | None = None) -> int:
    """Parse binary digits of ``text[start:end]`` as an unsigned 64-bit value."""
    return _parse_digits(text, start, end, NumKind.BINARY)


def parse_integer(text: str) -> int:
    """Parse a prefixed integer literal into a signed 64-bit value.

    Values above the signed range wrap around in two's complement.
    """
    if not text:
        raise ValueError("Invalid argument: empty string")

    kind = numkind(text)
    start = 0 if kind is NumKind.DECIMAL else 2
    if len(text) == start:
        raise ValueError("error, invalid integer")

    value = _parse_digits(text, start, len(text), kind)
    if value >= _INT64_LIMIT:
        value -= 1 << 64
    return value