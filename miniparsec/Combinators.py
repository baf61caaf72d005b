import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from .Parsec import Error, Ok, ParseResult, Parsec, State, T, U
from .Prim import fail, many, pure

V = TypeVar('V')

log = logging.getLogger(__name__)


# 1. choice: Tries parsers in order until one succeeds
def choice(parsers: Sequence[Parsec[T]]) -> Parsec[T]:
    """
    Applies a list of parsers in order, each from the same starting state,
    until one succeeds. If none does, the last parser's failure is returned.
    """
    if not parsers:
        return fail("no alternatives")
    first, *rest = [p.parse_fn for p in parsers]

    def parse(state: State) -> ParseResult[T]:
        res = first(state)
        for run in rest:
            if isinstance(res, Ok):
                break
            res = run(state)
        return res
    return Parsec(parse)


def alt(*parsers: Parsec[T]) -> Parsec[T]:
    """Variadic form of `choice`."""
    return choice(parsers)


# 2. seq: Runs two parsers in order and combines their values
def seq(pa: Parsec[T], pb: Parsec[U], f: Callable[[T, U], V]) -> Parsec[V]:
    """
    Parses pa then pb, returning f(a, b). Input consumed by pa is not given
    back when pb fails.
    """
    run_a, run_b = pa.parse_fn, pb.parse_fn

    def parse(state: State) -> ParseResult[V]:
        res_a = run_a(state)
        if isinstance(res_a, Error):
            return res_a
        res_b = run_b(res_a.state)
        if isinstance(res_b, Error):
            return res_b
        return Ok(f(res_a.value, res_b.value), res_b.state)
    return Parsec(parse)


# 3. left / right: Sequence keeping one side
def left(pa: Parsec[T], pb: Parsec[Any]) -> Parsec[T]:
    return seq(pa, pb, lambda a, _: a)


def right(pa: Parsec[Any], pb: Parsec[U]) -> Parsec[U]:
    return seq(pa, pb, lambda _, b: b)


# 4. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parsec[Any], close: Parsec[Any], p: Parsec[T]) -> Parsec[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    run_open, run_p, run_close = open.parse_fn, p.parse_fn, close.parse_fn

    # Same result as right(open, left(p, close)), in one closure
    def parse(state: State) -> ParseResult[T]:
        res_open = run_open(state)
        if isinstance(res_open, Error):
            return res_open
        res = run_p(res_open.state)
        if isinstance(res, Error):
            return res
        res_close = run_close(res.state)
        if isinstance(res_close, Error):
            return res_close
        return Ok(res.value, res_close.state)
    return Parsec(parse)


# 5. cons: Prepends one parsed value to a parsed list
def cons(p: Parsec[T], ps: Parsec[List[T]]) -> Parsec[List[T]]:
    return seq(p, ps, lambda x, xs: [x] + xs)


# 6. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parsec[T]) -> Parsec[T]:
    """
    Tries parser p; returns its result if successful, else x.
    """
    return p | pure(x)


# 7. optionMaybe: Tries a parser, returning Optional[T]
def option_maybe(p: Parsec[T]) -> Parsec[Optional[T]]:
    return p | pure(None)


# 8. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    A separator must be followed by another p.
    """
    return cons(p, many(right(sep, p)))


# 9. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    return sep_by1(p, sep) | pure([])


# 10. pair: Keeps both values as a tuple
def pair(pa: Parsec[T], pb: Parsec[U]) -> Parsec[Tuple[T, U]]:
    return seq(pa, pb, lambda a, b: (a, b))


# 11. parserTrace: Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parsec[None]:
    def parse(state: State) -> ParseResult[None]:
        rest = state.remaining()
        log.debug("%s: %r%s at position %d",
                  label_str, rest[:30], '...' if len(rest) > 30 else '', state.pos)
        return Ok(None, state)
    return Parsec(parse)


# 12. parserTraced: Debugging parser that logs entry and failure of p
def parser_traced(label_str: str, p: Parsec[T]) -> Parsec[T]:
    enter = parser_trace(label_str)

    def parse(state: State) -> ParseResult[T]:
        enter.parse_fn(state)
        res = p.parse_fn(state)
        if isinstance(res, Error):
            log.debug("%s failed at position %d: expecting %s",
                      label_str, res.pos, ', '.join(res.expected))
        return res
    return Parsec(parse)
