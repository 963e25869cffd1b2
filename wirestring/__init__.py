"""Mutable device-style strings, number formatting and parsing helpers, and binary constants."""

__version__ = "0.1.0"
__all__ = ["arduino_string", "constants", "conversions"]