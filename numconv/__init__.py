"""Number-to-text conversions: 32-bit integers in any radix and fixed-width floats."""

__version__ = "0.1.0"
__all__ = ["noniso"]