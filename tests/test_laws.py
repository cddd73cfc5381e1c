# tests/test_laws.py
from hypothesis import given, strategies as st
from bitparsec.Char import digits
from bitparsec.Parsec import ParseState
from bitparsec.Prim import succeed, fail
from conftest import assert_state_eq

# Strategy to generate arbitrary values
vals = st.integers() | st.text()

def run_p(p, input_str=""):
    """Helper to run a parser on a fresh state"""
    return p(ParseState(input_str))

# 1. Left Identity: return a >>= f  === f a
@given(vals)
def test_monad_left_identity(v):
    f = lambda x: succeed([x, x])

    lhs = succeed(v).chain(f)
    rhs = f(v)

    # We compare the final states of running the parsers
    assert_state_eq(run_p(lhs), run_p(rhs))

# 2. Right Identity: m >>= return === m
@given(st.text(alphabet="0123456789ab"))
def test_monad_right_identity(text):
    m = digits()

    lhs = m.chain(succeed)
    rhs = m

    assert_state_eq(run_p(lhs, text), run_p(rhs, text))

# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers())
def test_monad_associativity(v):
    m = succeed(v)
    f = lambda x: succeed(x + 1)
    g = lambda y: succeed(y * 2)

    lhs = m.chain(f).chain(g)
    rhs = m.chain(lambda x: f(x).chain(g))

    assert_state_eq(run_p(lhs), run_p(rhs))

# 4. Failure is a left zero: fail >>= f === fail
@given(st.text())
def test_fail_left_zero(msg):
    f = lambda x: succeed(x)
    assert run_p(fail(msg).chain(f)) == run_p(fail(msg))

# 5. Functor identity and composition
@given(st.text(alphabet="0123456789ab"))
def test_map_laws(text):
    p = digits()
    assert run_p(p.map(lambda x: x), text) == run_p(p, text)

    f = lambda s: len(s)
    g = lambda n: n * 3
    assert run_p(p.map(f).map(g), text) == run_p(p.map(lambda s: g(f(s))), text)
