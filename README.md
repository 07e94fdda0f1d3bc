# numlit

Parsing and validation of numeric literals as written in source code:
decimal, hexadecimal (`0x`), octal (`0o`) and binary (`0b`) integers, and
decimal or hexadecimal floating-point literals with an optional fraction and
exponent (`e`/`E` for decimal, `p`/`P` for hexadecimal, the exponent itself
always written in decimal). A `'` may be used as a digit separator.

The package has three modules: `numlit.digits`, `numlit.floats` and
`numlit.validator`.

## Installation

```
pip install .
```

## Integers (`numlit.digits`)

```python
from numlit.digits import parse_integer, numkind, NumKind

parse_integer("0x1F")       # 31
parse_integer("0b1010")     # 10
parse_integer("0o17")       # 15
parse_integer("1'000'000")  # 1000000
numkind("0xFF")             # NumKind.HEX
NumKind.HEX.base            # 16
```

`parse_integer` takes an unsigned literal. Invalid digits, a bare prefix or an
empty string raise `ValueError`; a value that does not fit in 64 unsigned bits
raises `OverflowError`. Values at or above 2**63 wrap around to negative
numbers, as a signed 64-bit integer would.

The per-base helpers `parse_dec`, `parse_hex`, `parse_oct` and `parse_bin`
take the text and optional `start` and `end` indices and parse only
`text[start:end]` (the whole text by default), returning the unsigned value.
They skip separators, raise `ValueError` on a bad digit or when there are no
digits at all, and `OverflowError` above 64 bits.

`numkind` looks only at the prefix; anything without `0x`, `0o` or `0b`
counts as decimal. `start_diagnostics` returns a list of complaints about how
a literal begins (empty, or a decimal literal starting with neither a digit
nor `.`), and an empty list when there are none. `starts_with` is a plain
prefix test.

## Floating point (`numlit.floats`)

```python
from numlit.floats import parse_floating_point, parse_float, scan_float

parse_floating_point("1.5")      # 1.5
parse_floating_point("2.5e2")    # 250.0
parse_floating_point("0x1.8p1")  # 3.0

result = scan_float("1.5e2")
result.value    # 150.0
result.ok       # True
result.messages # ()
float(result)   # 150.0
```

- `parse_floating_point` raises `ValueError` for a malformed literal (octal or
  binary prefix, bad last character, more than one `.` or exponent mark, an
  exponent directly after or before the `.`) and `OverflowError` when the
  result is not finite.
- `parse_float` makes the same structural checks but logs each problem at
  `ERROR` level on the `numlit.floats` logger and carries on. Bad digits still
  raise `ValueError`, since there is then no value to return.
- `scan_float` walks the literal one character at a time and never raises. It
  returns a `FloatScan` holding the computed `value` and a tuple of every
  problem found in `messages`; `ok` is true when there are none.

Fractions keep at most 18 digits; further digits are ignored.

`Level` names the severities `ERROR`, `FATAL` and `WARNING`, each valued as the
matching `logging` level.

## Validation (`numlit.validator`)

```python
from numlit.validator import validate_dec, validate_hex, validate_oct, validate_bin, valid_integer

validate_dec("1.5e-3")    # True
validate_hex("0x1.8p1")   # True
validate_oct("0o78")      # False
validate_bin("0b1''0")    # False, separators may not repeat
valid_integer("-0x1F")    # True
```

The validators return `True` or `False` and never raise. `validate_dec`,
`validate_hex`, `validate_oct` and `validate_bin` accept `'` separators but not
two in a row. `valid_integer` accepts an optional leading `+` or `-` and any of
the four prefixes, but no separators and no spaces.

## What it does not do

This is a library only: there is no command-line tool, and nothing here reads
input files or prints results. Float values are Python `float`s (double
precision).

## Running the tests

```
pip install .[test]
pytest
```