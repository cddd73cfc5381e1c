# tests/conftest.py
import pytest

from bitparsec.Parsec import ParseState


def assert_state_eq(state1: ParseState, state2: ParseState):
    """
    Deep comparison of two ParseStates.
    """
    assert state1.failed == state2.failed, f"Failure mismatch: {state1.failed} != {state2.failed}"
    assert state1.cursor == state2.cursor, f"Cursor mismatch: {state1.cursor} != {state2.cursor}"
    assert state1.result == state2.result
    assert state1.error_message == state2.error_message


@pytest.fixture
def initial_state():
    def _make(input_data, cursor=0):
        return ParseState(input_data, cursor)

    return _make
