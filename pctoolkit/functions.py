"""General helpers: string conversion, number parsing, bit tests and formatting."""

from __future__ import annotations

import re
import struct
import sys
from typing import IO, Optional

_UINT_MASK = 0xFFFFFFFF
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ANY_INT = re.compile(r"[+-]?\d+")


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scan_int(text: Optional[str]) -> Optional[int]:
    """Read a leading decimal integer the way ``%d`` does, or return None."""
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def string_length(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def reverse(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def ftoa(n: float, afterpoint: int = 0) -> str:
    """Render a single-precision float as a sign character, integer part and
    ``afterpoint`` truncated fractional digits (the sign is ``' '`` or ``'-'``)."""
    n = _to_float32(n)
    sign = "-" if n < 0 else " "
    n = abs(n)
    ipart = int(n)
    fpart = _to_float32(n - ipart)
    text = f"{sign}{ipart}"
    if afterpoint > 0:
        frac = int(fpart * 10.0 ** afterpoint)
        text += f".{frac:0{afterpoint}d}"
    return text


def read_line(stream: IO[str]) -> Optional[str]:
    """Read one line without its newline; None when the stream is exhausted."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_all(stream: IO[str]) -> Optional[str]:
    """Read the rest of the stream; None when nothing is left."""
    data = stream.read()
    return data or None


def tokenize(line: str, parser: str) -> list[str]:
    """Split ``line`` on any character of ``parser``, dropping empty tokens."""
    if not parser:
        return [line] if line else []
    pattern = "[" + re.escape(parser) + "]+"
    return [token for token in re.split(pattern, line) if token]


def getnum(x: Optional[str]) -> int:
    """Leading signed 32-bit integer of ``x``, or 0 when there is none."""
    value = _scan_int(x)
    return 0 if value is None else _wrap_int32(value)


def getnumv2(x: Optional[str]) -> int:
    """Leading integer of ``x`` taken as an unsigned 32-bit value, or 0."""
    value = _scan_int(x)
    return 0 if value is None else value & _UINT_MASK


def read_int(nmin: int, nmax: int, stream: Optional[IO[str]] = None) -> int:
    """Read integers from ``stream`` until one lies in ``[nmin, nmax]``.

    Characters that do not start an integer are skipped. Raises EOFError when
    the stream ends first.
    """
    source = sys.stdin if stream is None else stream
    for line in source:
        for match in _ANY_INT.finditer(line):
            num = _wrap_int32(int(match.group()))
            if nmin <= num <= nmax:
                return num
    raise EOFError("stream ended before an integer in range was read")


def pinmatch(match: int, pin: int, hl: int) -> int:
    """Test the bits of ``match`` in ``pin``.

    With ``hl`` true, return ``match`` when all those bits are high, else 0.
    With ``hl`` false, return ``match`` when all those bits are low, else 0.
    """
    match &= _UINT_MASK
    result = match & pin & _UINT_MASK
    if hl:
        return result if result == match else 0
    return 0 if result else match


def lh(xi: int, xf: int) -> int:
    """Bits that went from low to high between ``xi`` and ``xf``."""
    return (xf ^ xi) & xf & _UINT_MASK


def hl(xi: int, xf: int) -> int:
    """Bits that went from high to low between ``xi`` and ``xf``."""
    return (xf ^ xi) & xi & _UINT_MASK


def diff(xi: int, xf: int) -> int:
    """Bits that changed between ``xi`` and ``xf``."""
    return (xi ^ xf) & _UINT_MASK


def print_binary(n_bits: int, number: int) -> str:
    """The lowest ``n_bits`` bits of ``number``, most significant first."""
    if n_bits < 1:
        raise ValueError("n_bits must be at least 1")
    return format(number & ((1 << n_bits) - 1), f"0{n_bits}b")


def decimal_binary(n: int) -> int:
    """Number whose decimal digits spell the binary form of ``n`` (unsigned 32-bit)."""
    n &= _UINT_MASK
    return int(format(n, "b")) & _UINT_MASK


def binary_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits (unsigned 32-bit)."""
    n &= _UINT_MASK
    total = sum(int(digit) << i for i, digit in enumerate(reversed(str(n))))
    return total & _UINT_MASK


def strflip(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def format_c(fmt: str, *args: object) -> str:
    """Format ``args`` with a printf-style ``fmt``; raises ValueError on a bad format."""
    try:
        return fmt % args
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot format {fmt!r}: {exc}") from exc