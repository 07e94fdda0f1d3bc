"""Parsing of decimal and hexadecimal floating point literals."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from numlit.digits import (
    DEC_DIGITS,
    HEX_DIGITS,
    SEPARATOR,
    UINT64_MAX,
    NumKind,
    numkind,
    parse_dec,
    parse_hex,
    start_diagnostics,
)

FRACTION_DIGITS_MAX = 18

_logger = logging.getLogger(__name__)


class Level(Enum):
    """Severity of a reported problem, valued as a :mod:`logging` level."""

    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    WARNING = logging.WARNING


@dataclass(frozen=True)
class FloatScan:
    """Value of a literal together with every problem found while scanning it."""

    value: float
    messages: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.messages

    def __float__(self) -> float:
        return self.value


class _Section(Enum):
    INTEGER = auto()
    FRACTION = auto()
    EXPONENT = auto()


_Complain = Callable[[str, type], None]


def _raise(message: str, error: type) -> None:
    raise error(message)


def _report(message: str, error: type) -> None:
    _logger.log(Level.ERROR.value, message)


def _find(text: str, char: str, start: int) -> int | None:
    index = text.find(char, start)
    return None if index < 0 else index


def _scale(mantissa: float, base: int, exponent: int) -> float:
    try:
        factor = float(base) ** exponent
    except OverflowError:
        factor = math.inf
    return mantissa * factor


def _decode(text: str, complain: _Complain) -> float:
    if not text:
        complain("Invalid floating point literal: empty string", ValueError)

    kind = numkind(text)
    current = 0 if kind is NumKind.DECIMAL else 2
    hexadecimal = kind is NumKind.HEX

    if len(text) == current:
        complain(f"invalid floating point literal: {text}", ValueError)
    elif kind in (NumKind.OCTAL, NumKind.BINARY):
        complain(f"float literals must be either Hex or Decimal: {text}", ValueError)
    elif text[-1] not in (HEX_DIGITS if hexadecimal else DEC_DIGITS):
        complain(f"Invalid floating point end: {text}", ValueError)

    mark = "e" if kind is NumKind.DECIMAL else "p"
    dot = _find(text, ".", current)
    exp_at = _find(text, mark, current)
    if exp_at is None:
        exp_at = _find(text, mark.upper(), current)

    if dot is not None and _find(text, ".", dot + 1) is not None:
        complain(f"Too many '.' in floating point literal: {text}", ValueError)
    if exp_at is not None and (
        _find(text, mark, exp_at + 1) is not None
        or _find(text, mark.upper(), exp_at + 1) is not None
    ):
        complain(
            f"Too many scientific notations in floating point literal: {text}",
            ValueError,
        )

    if dot is not None and exp_at is not None:
        if dot + 1 == exp_at:
            complain("Scientific notation can't come after a '.'", ValueError)
        if exp_at < dot:
            complain("Scientific notation can't be before the '.'", ValueError)

    integer = 0
    if dot != 0:
        integer_end = min(i for i in (dot, exp_at, len(text)) if i is not None)
        if kind is NumKind.DECIMAL:
            integer = parse_dec(text, current, integer_end)
        elif hexadecimal:
            integer = parse_hex(text, current, integer_end)
        current = integer_end
    current += 1

    if dot is None and exp_at is None:
        return float(integer)

    fraction = 0
    fraction_size = 0
    base = 10 if kind is NumKind.DECIMAL else 16
    if dot is not None:
        fraction_end = len(text) if exp_at is None else min(exp_at, len(text))
        end = fraction_end
        fraction_size = end - current
        if fraction_size > FRACTION_DIGITS_MAX or fraction_size < 0:
            fraction_size = FRACTION_DIGITS_MAX
            end = current + fraction_size
        if kind is NumKind.DECIMAL:
            fraction = parse_dec(text, current, end)
        elif hexadecimal:
            fraction = parse_hex(text, current, end)
        current = fraction_end + 1

    mantissa = integer + fraction / base**fraction_size
    if current >= len(text):
        return mantissa

    negative = False
    if text[current] in ("-", "+"):
        negative = text[current] == "-"
        current += 1

    exponent = parse_dec(text, current, len(text))
    if negative:
        exponent = -exponent

    result = _scale(mantissa, 10 if kind is NumKind.DECIMAL else 2, exponent)
    if not math.isfinite(result):
        complain(f"floating point literal overflow: {text}", OverflowError)
    return result


def parse_floating_point(text: str) -> float:
    """Parse a decimal or ``0x`` hexadecimal float literal, raising on any problem.

    Raises ValueError for malformed literals and OverflowError for values
    that are not finite.
    """
    return _decode(text, _raise)


def parse_float(text: str) -> float:
    """Parse a float literal, logging structural problems instead of raising.

    Malformed digits still raise ValueError, as there is no value to return.
    """
    return _decode(text, _report)


def _digit_value(char: str) -> int:
    if char in DEC_DIGITS:
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    return ord(char) - ord("A") + 10


def scan_float(text: str) -> FloatScan:
    """Scan a float literal in one pass, collecting every problem found."""
    messages = list(start_diagnostics(text))
    kind = numkind(text)
    hexadecimal = kind is NumKind.HEX
    mark = "p" if hexadecimal else "e"
    marks = (mark, mark.upper())
    current = 2 if hexadecimal else 0
    digits = HEX_DIGITS if hexadecimal else DEC_DIGITS
    base = kind.value

    if kind not in (NumKind.DECIMAL, NumKind.HEX):
        messages.append(
            f"floating point literals must be either Hex or Decimal: {text}"
        )
    if len(text) == current:
        messages.append(f"invalid floating point literal: {text}")

    empty_section = f"Invalid float literal, empty sections are not allowed: {text}"
    integer = fraction = exponent = 0
    fraction_size = 0
    section = _Section.INTEGER
    section_size: int | None = None
    negative = False
    tmp = 0
    skip_next = False

    for index, char in enumerate(text[current:], start=current):
        if skip_next:
            skip_next = False
            continue

        if char == SEPARATOR:
            if index == 0:
                messages.append(
                    f"separators are not allowed at the beginning of a literal: {text}"
                )
            elif text[index - 1] not in digits:
                messages.append(f"Only one separator at a time is allowed: {text}")
            continue

        if char == ".":
            if section is not _Section.INTEGER:
                messages.append(f"Invalid Integer section in float literal: {text}")
            if section_size == 0:
                messages.append(empty_section)
            integer, tmp = tmp, 0
            section = _Section.FRACTION
            section_size = 0
            continue

        if char in marks:
            if section is _Section.EXPONENT:
                messages.append(f"Invalid Exponent Sections in float literal: {text}")
            if section_size == 0:
                messages.append(empty_section)
            following = text[index + 1 : index + 2]
            if not following:
                messages.append(
                    f"Float literals can't end with a scientific notation: {text}"
                )
            if following in ("+", "-"):
                negative = following == "-"
                skip_next = True
            if section is _Section.FRACTION:
                fraction = tmp
            else:
                integer = tmp
            tmp = 0
            section = _Section.EXPONENT
            section_size = 0
            continue

        found = False
        if section is _Section.EXPONENT and char not in DEC_DIGITS:
            messages.append(f"Exponent must be a valid decimal: {text}")
            found = True
        if hexadecimal and char not in HEX_DIGITS:
            messages.append(f"Invalid digit in hex literal: {text}")
            found = True
        if kind is NumKind.DECIMAL and char not in DEC_DIGITS:
            messages.append(f"Invalid digit in decimal literal: {text}")
            found = True
        if found:
            continue

        digit = _digit_value(char)
        if tmp > (UINT64_MAX - digit) // base:
            messages.append(f"float literal overflow: {text}")

        if fraction_size >= FRACTION_DIGITS_MAX:
            continue
        if section is _Section.FRACTION:
            fraction_size += 1

        tmp = (tmp * base + digit) & UINT64_MAX
        section_size = (section_size or 0) + 1

    if section_size == 0:
        messages.append(empty_section)

    if section is _Section.INTEGER:
        integer = tmp
    elif section is _Section.FRACTION:
        fraction = tmp
    else:
        exponent = tmp

    if negative:
        exponent = -exponent

    mantissa = integer + fraction / base**fraction_size
    value = _scale(mantissa, 2 if hexadecimal else 10, exponent)
    if not math.isfinite(value):
        messages.append(f"float literal overflow: {text}")

    return FloatScan(value, tuple(messages))