"""Parsing and validation of C-style integer and floating point literals."""

__version__ = "0.1.0"
__all__ = ["digits", "validator", "floats"]