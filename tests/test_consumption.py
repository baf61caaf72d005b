# tests/test_consumption.py
from conftest import assert_result_eq
from miniparsec.Char import char
from miniparsec.Combinators import between, left, right, seq
from miniparsec.Parsec import Error, State


def test_choice_restarts_after_consumption():
    """
    (char('a') >> char('b')) | char('a')
    Input: 'ac'

    1. First parser matches 'a', then fails on 'c'.
    2. <|> runs the second branch from the original state.
    3. Second branch matches 'a'.
    4. Result: Success 'a', resuming at 'c'.
    """
    parser = (char("a") >> char("b")) | char("a")

    state = State("ac")
    result = parser(state)

    assert result.value == "a"
    assert result.state.pos == 1
    assert result.state.remaining() == "c"


def test_sequence_commits_on_consumption():
    """
    seq(char('a'), char('b'))
    Input: 'ac'

    The failure is reported where 'b' was expected; the 'a' is not given back.
    """
    parser = seq(char("a"), char("b"), lambda a, b: a + b)

    result = parser(State("ac"))

    assert isinstance(result, Error)
    assert result.expected == ["unexpected c"]
    assert result.state.pos == 1


def test_choice_reports_last_branch_failure():
    parser = (char("a") >> char("b")) | char("x")

    result = parser(State("ac"))

    assert isinstance(result, Error)
    # Only the last alternative's complaint survives
    assert result.expected == ["unexpected a"]
    assert result.state.pos == 0


def test_between_matches_explicit_sequence():
    state = State("(a)")
    expected = right(char("("), left(char("a"), char(")")))(state)
    assert_result_eq(between(char("("), char(")"), char("a"))(state), expected)
    assert expected.state.pos == 3
