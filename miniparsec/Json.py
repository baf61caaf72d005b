"""JSON values and a JSON grammar built from the miniparsec combinators."""
import logging
import math
from functools import lru_cache
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

from .Char import char, satisfy, string, trim
from .Combinators import between, choice, pair, right, seq
from .Parsec import Error, ParseError, Parsec
from .Prim import any_char, eof, lazy, many, parse, pure
from .Number import scientific

log = logging.getLogger(__name__)

# Escape codes understood after a backslash; any other character stands for itself
ESCAPES = {
    '0': '\0',
    'b': '\b',
    't': '\t',
    'n': '\n',
    'v': '\v',
    'f': '\f',
    'r': '\r',
}

# Used by to_json(), which must produce text the grammar reads back unchanged
_ENCODE = {v: '\\' + k for k, v in ESCAPES.items()}
_ENCODE.update({'"': '\\"', '\\': '\\\\'})


def _quote(s: str) -> str:
    return '"' + ''.join(_ENCODE.get(c, c) for c in s) + '"'


def _format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class JsonValue:
    """Base class of the six JSON value cases."""

    def to_json(self) -> str:
        """Valid JSON text for this value."""
        raise NotImplementedError

    def to_python(self) -> Any:
        """This value as plain Python data."""
        raise NotImplementedError


@dataclass
class JsonNull(JsonValue):
    def __str__(self) -> str:
        return "null"

    def to_json(self) -> str:
        return "null"

    def to_python(self) -> None:
        return None


@dataclass
class JsonBool(JsonValue):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def to_json(self) -> str:
        return str(self)

    def to_python(self) -> bool:
        return self.value


@dataclass
class JsonNumber(JsonValue):
    value: float

    def __str__(self) -> str:
        return _format_number(self.value)

    def to_json(self) -> str:
        if not math.isfinite(self.value):
            raise ValueError(f"{self.value!r} has no JSON representation")
        return _format_number(self.value)

    def to_python(self) -> float:
        return self.value


@dataclass
class JsonString(JsonValue):
    value: str

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        return _quote(self.value)

    def to_python(self) -> str:
        return self.value


@dataclass
class JsonArray(JsonValue):
    items: List[JsonValue] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def to_json(self) -> str:
        return "[" + ", ".join(v.to_json() for v in self.items) + "]"

    def to_python(self) -> List[Any]:
        return [v.to_python() for v in self.items]


@dataclass
class JsonObject(JsonValue):
    """A key-sorted mapping. Later duplicates of a key replace earlier ones."""
    members: Dict[str, JsonValue] = field(default_factory=dict)

    def __post_init__(self):
        self.members = dict(sorted(self.members.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, JsonValue]]) -> 'JsonObject':
        members: Dict[str, JsonValue] = {}
        for key, value in pairs:
            members[key] = value
        return cls(members)

    def __str__(self) -> str:
        return "{" + ", ".join(f'"{k}" : {v}' for k, v in self.members.items()) + "}"

    def to_json(self) -> str:
        return "{" + ", ".join(f"{_quote(k)}: {v.to_json()}" for k, v in self.members.items()) + "}"

    def to_python(self) -> Dict[str, Any]:
        return {k: v.to_python() for k, v in self.members.items()}


class JsonDecodeError(ValueError):
    """Raised by loads() when the text is not a JSON document."""

    def __init__(self, error: ParseError):
        super().__init__(str(error))
        self.pos = error.pos
        self.expected = error.expected


# --- Grammar ---

def json_null() -> Parsec[JsonValue]:
    return trim(string("null").map(lambda _: JsonNull()))


def json_bool() -> Parsec[JsonValue]:
    return trim(
        string("true").map(lambda _: JsonBool(True))
        | string("false").map(lambda _: JsonBool(False))
    )


def json_number() -> Parsec[JsonValue]:
    return trim(scientific().map(JsonNumber))


def escaped_char() -> Parsec[str]:
    """The character after a backslash, translated through ESCAPES."""
    return any_char().map(lambda c: ESCAPES.get(c, c))


def string_literal() -> Parsec[str]:
    body = many(right(char('\\'), escaped_char()) | satisfy(lambda c: c != '"'))
    return trim(between(char('"'), char('"'), body.map(''.join)))


def json_string() -> Parsec[JsonValue]:
    return string_literal().map(JsonString)


@lru_cache(maxsize=None)
def json_array() -> Parsec[JsonValue]:
    value = lazy(json_value)
    items = seq(value, many(right(char(','), value)), lambda x, xs: JsonArray([x] + xs))
    empty = pure(None).map(lambda _: JsonArray())
    # Both brackets are trimmed, so "[ ]" is an empty array
    return between(trim(char('[')), trim(char(']')), items | empty)


def key_value() -> Parsec[Tuple[str, JsonValue]]:
    return pair(string_literal(), right(char(':'), lazy(json_value)))


@lru_cache(maxsize=None)
def json_object() -> Parsec[JsonValue]:
    member = key_value()
    members = seq(member, many(right(char(','), member)),
                  lambda x, xs: JsonObject.from_pairs([x] + xs))
    empty = pure(None).map(lambda _: JsonObject())
    return between(trim(char('{')), trim(char('}')), members | empty)


@lru_cache(maxsize=None)
def json_value() -> Parsec[JsonValue]:
    """Any JSON value, with surrounding whitespace."""
    return choice([
        json_null(),
        json_bool(),
        json_number(),
        json_string(),
        lazy(json_array),
        lazy(json_object),
    ])


def json_document() -> Parsec[JsonValue]:
    """A JSON value that must span the whole input."""
    return json_value() < eof()


def loads(text: str) -> JsonValue:
    """Parse a complete JSON document, raising JsonDecodeError on failure."""
    try:
        result = parse(json_document(), text)
    except RecursionError:
        log.debug("rejected JSON document: nested too deeply")
        raise JsonDecodeError(ParseError(0, ["document nested too deeply"])) from None
    if isinstance(result, Error):
        error = ParseError.from_result(result)
        log.debug("rejected JSON document: %s", error)
        raise JsonDecodeError(error)
    return result.value
