"""Utility helpers for escaping, encoding detection and output."""

from mdliteral.utils.escape import DEFAULT_UNSAFE_PATTERNS, UnsafePattern, safe

__all__ = ["DEFAULT_UNSAFE_PATTERNS", "UnsafePattern", "safe"]
