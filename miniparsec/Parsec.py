from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class State:
    """Parser state: the shared input text and an offset into it."""
    input: str = field(repr=False)  # Never copied, every State of a parse references the same str
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.input)

    def advance(self, n: int = 1) -> 'State':
        return State(self.input, min(self.pos + n, len(self.input)))

    def remaining(self) -> str:
        return self.input[self.pos:]


@dataclass
class Ok(Generic[T]):
    """Successful reply: the produced value and the state to resume from."""
    value: T
    state: State = field(compare=False)

    @property
    def success(self) -> bool:
        return True

    @property
    def pos(self) -> int:
        return self.state.pos


@dataclass
class Error:
    """Failed reply: what was expected and where the failure was detected."""
    expected: List[str]
    state: State = field(compare=False)

    @property
    def success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    @property
    def pos(self) -> int:
        return self.state.pos


ParseResult = Union[Ok[T], Error]
# Equality never looks at the state: Ok(1, s1) == Ok(1, s2) whatever s1 and s2 are.


@dataclass
class ParseError:
    """User-facing description of a failed parse."""
    pos: int
    expected: List[str] = field(default_factory=list)

    @classmethod
    def from_result(cls, err: Error) -> 'ParseError':
        return cls(err.pos, list(err.expected))

    def __str__(self) -> str:
        if not self.expected:
            return f"Parse error at position {self.pos}"
        return f"Parse error at position {self.pos}: {'; '.join(self.expected)}"


class Parsec(Generic[T]):
    """A parser: a pure function from State to ParseResult.

    Parsers are plain values. They can be stored, passed around and run any
    number of times on the same state, always giving the same result.
    """
    def __init__(self, parse_fn: Callable[[State], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, state: State) -> ParseResult[T]:
        return self.parse_fn(state)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        def parse(state: State) -> ParseResult[U]:
            res = self.parse_fn(state)
            if isinstance(res, Error):
                return res  # Failures carry no value, so they pass through as is
            return Ok(f(res.value), res.state)
        return Parsec(parse)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        def parse(state: State) -> ParseResult[U]:
            res = self.parse_fn(state)
            if isinstance(res, Error):
                return res
            return f(res.value).parse_fn(res.state)
        return Parsec(parse)

    # Alternative (<|>)
    def __or__(self, other: 'Parsec[T]') -> 'Parsec[T]':
        def parse(state: State) -> ParseResult[T]:
            res = self.parse_fn(state)
            if isinstance(res, Ok):
                return res
            # The right branch always restarts from the original state
            return other.parse_fn(state)
        return Parsec(parse)

    # Sequence (&), keeping both values as a pair
    def __and__(self, other: 'Parsec[U]') -> 'Parsec[Tuple[T, U]]':
        def parse(state: State) -> ParseResult[Tuple[T, U]]:
            res1 = self.parse_fn(state)
            if isinstance(res1, Error):
                return res1
            res2 = other.parse_fn(res1.state)
            if isinstance(res2, Error):
                return res2
            return Ok((res1.value, res2.value), res2.state)
        return Parsec(parse)

    # Sequence (*>)
    def __gt__(self, other: 'Parsec[U]') -> 'Parsec[U]':
        def parse(state: State) -> ParseResult[U]:
            res1 = self.parse_fn(state)
            if isinstance(res1, Error):
                return res1
            return other.parse_fn(res1.state)
        return Parsec(parse)

    # Sequence (<*)
    def __lt__(self, other: 'Parsec[Any]') -> 'Parsec[T]':
        def parse(state: State) -> ParseResult[T]:
            res1 = self.parse_fn(state)
            if isinstance(res1, Error):
                return res1
            res2 = other.parse_fn(res1.state)
            if isinstance(res2, Error):
                return res2
            return Ok(res1.value, res2.state)
        return Parsec(parse)

    # `p >> q` sequences and keeps q's value, `p >> f` is bind
    def __rshift__(self, other: Union['Parsec[U]', Callable[[T], 'Parsec[U]']]) -> 'Parsec[U]':
        if isinstance(other, Parsec):
            return self > other
        return self.bind(other)

    # Label (<?>)
    def label(self, msg: str) -> 'Parsec[T]':
        """Replace the expectations of a failure that made no progress."""
        def parse(state: State) -> ParseResult[T]:
            res = self.parse_fn(state)
            if isinstance(res, Error) and res.state.pos == state.pos:
                return Error([msg], res.state)
            return res
        return Parsec(parse)
