# tests/conftest.py
import pytest

from miniparsec.Parsec import Error, Ok, ParseResult, State


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults, positions included.
    """
    assert res1 == res2
    assert res1.state.pos == res2.state.pos, f"Position mismatch: {res1.state.pos} != {res2.state.pos}"
    if isinstance(res1, Ok):
        assert isinstance(res2, Ok), "Reply mismatch: Ok vs Error"
    else:
        assert isinstance(res2, Error), "Reply mismatch: Error vs Ok"


@pytest.fixture
def initial_state():
    def _make(input_data, pos=0):
        return State(input_data, pos)

    return _make
