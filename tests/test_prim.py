from hypothesis import given, strategies as st

from bitparsec.Char import char, digits, letters, string
from bitparsec.Combinators import sequence_of
from bitparsec.Prim import fail, lazy, many, many_strict, run_parser, succeed


# --- succeed / fail ---

def test_succeed_does_not_consume():
    state = run_parser(succeed(42), "abc")
    assert not state.failed
    assert state.result == 42
    assert state.cursor == 0

def test_fail_does_not_consume():
    state = run_parser(fail("nope"), "abc")
    assert state.failed
    assert state.error_message == "nope"
    assert state.error.cursor == 0
    assert state.cursor == 0

def test_run_parser_initial_state():
    state = run_parser(succeed(None), "")
    assert state.input == ""
    assert state.cursor == 0
    assert state.result is None
    assert not state.failed

# --- many ---

@given(st.integers(min_value=0, max_value=50), st.text(alphabet="bc"))
def test_many(n, rest):
    state = run_parser(many(char('a')), "a" * n + rest)
    assert not state.failed
    assert state.result == ['a'] * n
    assert state.cursor == n

def test_many_never_fails():
    state = run_parser(many(digits()), "abc")
    assert not state.failed
    assert state.result == []
    assert state.cursor == 0

def test_many_discards_failed_attempt():
    # The third attempt consumes "ab" and then fails; it must leave no trace
    p = many(sequence_of([string("ab"), string("c")]))
    state = run_parser(p, "abcabcabd")
    assert state.result == [["ab", "c"], ["ab", "c"]]
    assert state.cursor == 6
    assert not state.failed

def test_many_stops_on_zero_width_success():
    state = run_parser(many(succeed(1)), "abc")
    assert state.result == []
    assert state.cursor == 0

    state = run_parser(many(string("")), "abc")
    assert state.result == []

# --- many_strict ---

def test_many_strict():
    p = many_strict(char('a'))
    assert run_parser(p, "aaa").result == ['a', 'a', 'a']
    assert run_parser(p, "a").result == ['a']

    # Fails on 0
    state = run_parser(p, "b")
    assert state.failed
    assert state.error_message == "many_strict: couldn't match anything at index 0"

def test_many_strict_reports_start_index():
    p = sequence_of([letters(), many_strict(digits())])
    state = run_parser(p, "abc!")
    assert state.failed
    assert state.error_message == "many_strict: couldn't match anything at index 3"

# --- lazy ---

def test_lazy_defers_construction():
    built = []

    def thunk():
        built.append(True)
        return digits()

    p = lazy(thunk)
    assert built == []

    assert run_parser(p, "12").result == "12"
    assert run_parser(p, "34").result == "34"
    assert built == [True]  # resolved once, then reused

def test_lazy_forward_reference():
    # 'word' is referenced before it is bound
    words = lazy(lambda: many(word))
    word = sequence_of([letters(), string(" ")]).map(lambda results: results[0])
    assert run_parser(words, "to be or ").result == ["to", "be", "or"]
