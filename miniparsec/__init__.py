# Core
from .Parsec import Parsec, State, Ok, Error, ParseResult, ParseError
from .Prim import parse, run_parser, pure, fail, lazy, any_char, eof, many, many1, some, skip_many

# Characters
from .Char import satisfy, char, one_of, none_of, string, space, spaces, trim, WHITESPACE

# Combinators
from .Combinators import (
    choice, alt, seq, left, right, between, cons, pair,
    option, option_maybe, sep_by, sep_by1,
    parser_trace, parser_traced
)

# Numbers
from .Number import digit, natural, integer, decimal, exponent, scientific

# JSON
from .Json import (
    JsonValue, JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject,
    JsonDecodeError, json_value, json_document, loads
)
