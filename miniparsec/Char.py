from typing import Callable, Iterable, List

from .Parsec import Error, Ok, ParseResult, Parsec, State, T
from .Prim import any_char, many, pure

WHITESPACE = " \t\n\r"


# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool]) -> Parsec[str]:
    """Succeeds for any character where f returns True. Returns the parsed character.

    A rejected character is reported at the position it was read from, not
    after it.
    """
    next_char = any_char()

    def parse(state: State) -> ParseResult[str]:
        res = next_char.parse_fn(state)
        if isinstance(res, Error):
            return res
        if not f(res.value):
            return Error([f"unexpected {res.value}"], state)
        return res
    return Parsec(parse)


def char(c: str) -> Parsec[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c)


def one_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    charset = frozenset(cs)
    return satisfy(lambda c: c in charset)


def none_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    charset = frozenset(cs)
    return satisfy(lambda c: c not in charset)


def string(s: str) -> Parsec[str]:
    """Parses the exact string s and returns it.

    Stops at the first mismatching character and reports that character's
    failure.
    """
    if not s:
        return pure("")
    chars: List[Parsec[str]] = [char(c) for c in s]

    def parse(state: State) -> ParseResult[str]:
        current = state
        for p in chars:
            res = p.parse_fn(current)
            if isinstance(res, Error):
                return res
            current = res.state
        return Ok(s, current)
    return Parsec(parse)


def space() -> Parsec[str]:
    """Parses a whitespace character and returns it."""
    return one_of(WHITESPACE)


def spaces() -> Parsec[List[str]]:
    """Parses zero or more whitespace characters."""
    return many(space())


def trim(p: Parsec[T]) -> Parsec[T]:
    """Run p with any surrounding whitespace skipped on both sides."""
    skip_ws = spaces().parse_fn
    run_p = p.parse_fn

    def parse(state: State) -> ParseResult[T]:
        res = run_p(skip_ws(state).state)
        if isinstance(res, Error):
            return res
        return Ok(res.value, skip_ws(res.state).state)
    return Parsec(parse)
