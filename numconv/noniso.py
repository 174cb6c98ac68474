"""Integer and floating-point to text conversions in the style of the
classic non-ISO C helpers (``itoa``, ``ltoa``, ``utoa``, ``ultoa``, ``dtostrf``).

Integers are treated as 32-bit machine words: values outside the range of
the nominal C type wrap around the same way a C conversion would.
"""

from __future__ import annotations

__all__ = ["itoa", "ltoa", "utoa", "ultoa", "dtostrf"]

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_SIGN_BIT = 1 << (_WORD_BITS - 1)
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIN_RADIX = 2
_MAX_RADIX = len(_DIGITS)


def _check_radix(radix: int) -> None:
    if not _MIN_RADIX <= radix <= _MAX_RADIX:
        raise ValueError(
            f"radix must be between {_MIN_RADIX} and {_MAX_RADIX}, got {radix}"
        )


def _as_signed(value: int) -> int:
    word = value & _WORD_MASK
    return word - (1 << _WORD_BITS) if word & _SIGN_BIT else word


def _as_unsigned(value: int) -> int:
    return value & _WORD_MASK


def _digits(value: int, radix: int) -> str:
    """Render a non-negative integer in ``radix`` with lower-case digits."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, remainder = divmod(value, radix)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def ltoa(value: int, radix: int) -> str:
    """Convert a signed 32-bit integer to text in ``radix``.

    Only base 10 renders negative numbers with a leading minus sign; in any
    other base a negative value is shown as its two's-complement word.
    """
    _check_radix(radix)
    signed = _as_signed(value)
    if radix == 10 and signed < 0:
        return "-" + _digits(-signed, radix)
    return _digits(_as_unsigned(signed), radix)


def itoa(value: int, radix: int) -> str:
    """Convert a signed ``int`` to text in ``radix``; same rules as :func:`ltoa`."""
    return ltoa(value, radix)


def ultoa(value: int, radix: int) -> str:
    """Convert an unsigned 32-bit integer to text in ``radix``."""
    _check_radix(radix)
    return _digits(_as_unsigned(value), radix)


def utoa(value: int, radix: int) -> str:
    """Convert an unsigned ``int`` to text in ``radix``; same rules as :func:`ultoa`."""
    return ultoa(value, radix)


def dtostrf(val: float, width: int, prec: int) -> str:
    """Format ``val`` as fixed-point with at least ``width`` characters and
    ``prec`` digits after the decimal point.

    ``width`` behaves as a signed char (negative means left-justified) and
    ``prec`` as an unsigned char.
    """
    width = ((width + 128) & 0xFF) - 128
    prec &= 0xFF
    return "%*.*f" % (width, prec, float(val))