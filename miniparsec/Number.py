import math
from functools import reduce
from typing import List, Tuple

from .Char import char, one_of, satisfy
from .Combinators import alt, option, right, seq
from .Parsec import Parsec
from .Prim import many1

# (negative, digits, power): the number is (-1 if negative) * digits * 10**power
Scaled = Tuple[bool, int, int]

_LOG10_2 = math.log10(2)


def _fold_digits(ds: List[int]) -> int:
    return reduce(lambda n, d: n * 10 + d, ds, 0)


def _to_float(negative: bool, digits: int, power: int) -> float:
    """
    digits * 10**power rounded once to the nearest float. Values past the
    float range become inf, values below the smallest subnormal become 0.0.
    """
    sign = -1.0 if negative else 1.0
    if digits == 0:
        return math.copysign(0.0, sign)
    # log10 of the result lies within one of this estimate
    magnitude = digits.bit_length() * _LOG10_2 + power
    if magnitude > 310:
        return math.copysign(math.inf, sign)
    if magnitude < -330:
        return math.copysign(0.0, sign)
    try:
        if power >= 0:
            value = float(digits * 10 ** power)
        else:
            # int / int is correctly rounded
            value = digits / 10 ** -power
    except OverflowError:
        value = math.inf
    return math.copysign(value, sign)


def digit() -> Parsec[int]:
    """Parses an ASCII digit and returns its numeric value."""
    return satisfy(lambda c: '0' <= c <= '9').map(lambda c: ord(c) - ord('0'))


def natural() -> Parsec[int]:
    """One or more digits, read as a base-10 integer."""
    return many1(digit()).map(_fold_digits)


def integer() -> Parsec[int]:
    """A natural number with an optional leading minus sign."""
    return alt(right(char('-'), natural()).map(lambda n: -n), natural())


def _unsigned_scaled() -> Parsec[Tuple[int, int]]:
    # "12.25" is (1225, -2): the fraction digits d1..dk are worth d1/10 + ... + dk/10**k
    fraction = right(char('.'), many1(digit()))
    return seq(many1(digit()), option([], fraction),
               lambda ws, fs: (_fold_digits(ws + fs), -len(fs)))


def _scaled() -> Parsec[Scaled]:
    unsigned = _unsigned_scaled()
    return alt(right(char('-'), unsigned).map(lambda m: (True,) + m),
               unsigned.map(lambda m: (False,) + m))


def decimal() -> Parsec[float]:
    """
    An integer optionally followed by '.' and one or more digits, as a float.
    A '.' with no digits after it is left unconsumed. The sign covers the
    fractional part too, so "-1.5" is -1.5.
    """
    return _scaled().map(lambda s: _to_float(*s))


def exponent() -> Parsec[int]:
    """'e' or 'E', an optional sign, then the power of ten."""
    sign = option('+', one_of("+-"))
    return right(one_of("eE"), seq(sign, natural(), lambda s, n: -n if s == '-' else n))


def scientific() -> Parsec[float]:
    """A decimal with an optional exponent, as in "6.02e23"."""
    return seq(_scaled(), option(0, exponent()),
               lambda s, e: _to_float(s[0], s[1], s[2] + e))
