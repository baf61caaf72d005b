from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .Parsec import Error, Ok, ParseError, ParseResult, Parsec, State, T

ItemType = TypeVar('ItemType')
AccType = TypeVar('AccType')


def pure(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: State) -> ParseResult[T]:
        return Ok(value, state)
    return Parsec(parse)


def fail(msg: str) -> Parsec[Any]:
    """A parser that always fails with a message."""
    def parse(state: State) -> ParseResult[Any]:
        return Error([msg], state)
    return Parsec(parse)


def lazy(thunk: Callable[[], Parsec[T]]) -> Parsec[T]:
    """Defer building a parser until it is run.

    Needed for recursive grammars: a rule that refers to itself, or to a rule
    defined further down, would otherwise recurse forever while being built.
    """
    def parse(state: State) -> ParseResult[T]:
        return thunk().parse_fn(state)
    return Parsec(parse)


def any_char() -> Parsec[str]:
    """Consume and return a single character, failing only at end of input."""
    def parse(state: State) -> ParseResult[str]:
        if state.at_end():
            return Error(["end of file"], state)
        return Ok(state.input[state.pos], state.advance())
    return Parsec(parse)


def eof() -> Parsec[None]:
    """Succeed, consuming nothing, only when no input remains."""
    def parse(state: State) -> ParseResult[None]:
        if state.at_end():
            return Ok(None, state)
        return Error(["expect end of file"], state)
    return Parsec(parse)


def _many_accum(
    acc_func: Callable[[ItemType, AccType], AccType],
    p: Parsec[ItemType],
    empty_acc_value: AccType
) -> Parsec[AccType]:
    # Iterative so that long repetitions do not hit the recursion limit.
    # A p that succeeds without consuming input loops forever; grammars must not
    # hand such a parser to many.
    run_p = p.parse_fn

    def parse_accum(state_outer: State) -> ParseResult[AccType]:
        current_acc = empty_acc_value
        accum_state = state_outer

        while True:
            res_p = run_p(accum_state)
            if isinstance(res_p, Error):
                # The failed attempt is forgotten; resume from the last success
                return Ok(current_acc, accum_state)
            current_acc = acc_func(res_p.value, current_acc)
            accum_state = res_p.state
    return Parsec(parse_accum)


def many(p: Parsec[T]) -> Parsec[List[T]]:
    """Parse zero or more occurrences of `p`. Always succeeds."""
    def acc_list_append(item: T, lst: List[T]) -> List[T]:
        lst.append(item)
        return lst

    def parse(state: State) -> ParseResult[List[T]]:
        # A fresh accumulator per run keeps the parser reusable
        return _many_accum(acc_list_append, p, []).parse_fn(state)
    return Parsec(parse)


def many1(p: Parsec[T]) -> Parsec[List[T]]:
    """Parse one or more occurrences of `p`."""
    return p.bind(lambda x: many(p).map(lambda xs: [x] + xs))


some = many1


def skip_many(p: Parsec[Any]) -> Parsec[None]:
    """Skips zero or more occurrences of `p`."""
    return _many_accum(lambda item, acc_val: None, p, None)


def parse(parser: Parsec[T], input_str: str) -> ParseResult[T]:
    """Run `parser` on `input_str` starting at position 0."""
    return parser(State(input_str, 0))


def run_parser(parser: Parsec[T], input_str: str) -> Tuple[Optional[T], Optional[ParseError]]:
    result = parse(parser, input_str)
    if isinstance(result, Error):
        return None, ParseError.from_result(result)
    return result.value, None
