# numconv

Small helpers for turning numbers into text the way common microcontroller
runtimes do. Everything lives in the `numconv.noniso` module.

- `itoa(value, radix)` / `ltoa(value, radix)` render a signed 32-bit integer
  in any radix from 2 to 36, with lower-case digits. A minus sign is only
  written in radix 10; in any other radix a negative value is shown as its
  32-bit two's-complement word (so `ltoa(-1, 16)` gives `'ffffffff'`).
- `utoa(value, radix)` / `ultoa(value, radix)` render an unsigned 32-bit
  integer in any radix from 2 to 36.
- `dtostrf(val, width, prec)` formats a float as fixed-point, right-aligned
  in at least `width` characters with `prec` digits after the point. A
  negative `width` aligns it to the left.

Integers are treated as 32-bit machine words: a value outside the range of
the nominal C type wraps around as a C conversion would. For `dtostrf`,
`width` wraps like a signed char (-128..127) and `prec` like an unsigned
char (0..255).

A radix outside 2..36 raises `ValueError`.

## Installation

```
pip install numconv
```

## Usage

```python
from numconv.noniso import itoa, ltoa, utoa, ultoa, dtostrf

itoa(45, 16)            # '2d'
itoa(255, 2)            # '11111111'
ltoa(-1000, 10)         # '-1000'
ltoa(-1, 16)            # 'ffffffff'
ultoa(20000, 10)        # '20000'
utoa(2**32, 10)         # '0'
dtostrf(5.698, 5, 3)    # '5.698'
dtostrf(3.14159, 8, 2)  # '    3.14'
dtostrf(3.14159, -8, 2) # '3.14    '
```

## Running the tests

```
pip install -e ".[test]"
pytest
```