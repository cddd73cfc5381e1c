"""Parsers for bit-addressable binary input.

The input is any bytes-like object (`bytes`, `bytearray`, a byte-format
`memoryview`) and the cursor counts bits, most significant bit first:
bit 0 is the top bit of byte 0, bit 8 the top bit of byte 1.
"""
from typing import List, Union

from .Parsec import Parser, ParseState
from .Prim import succeed, fail
from .Combinators import sequence_of


def _bit(state: ParseState) -> ParseState[int]:
    data, cursor = state.input, state.cursor
    byte_index = cursor // 8
    if byte_index >= len(data):
        return state.with_error(f"bit: unexpected end of input at index {cursor}")
    value = (data[byte_index] >> (7 - cursor % 8)) & 1
    return state.advance(cursor + 1, value)


_BIT = Parser(_bit, "bit")


def bit() -> Parser[int]:
    """Reads one bit and returns it as 0 or 1."""
    return _BIT


def _expect_bit(expected: int, name: str) -> Parser[int]:
    def parse(state: ParseState) -> ParseState[int]:
        next_state = _BIT(state)
        if next_state.failed:
            return next_state
        if next_state.result != expected:
            return next_state.with_error(
                f"{name}: expected {expected}, but got {next_state.result} at index {state.cursor}")
        return next_state
    return Parser(parse, name)


def bit_zero() -> Parser[int]:
    """Reads one bit and fails unless it is 0."""
    return _expect_bit(0, "bit_zero")


def bit_one() -> Parser[int]:
    """Reads one bit and fails unless it is 1."""
    return _expect_bit(1, "bit_one")


def _unsigned(bits: List[int]) -> int:
    value = 0
    for b in bits:
        value = (value << 1) | b
    return value


def _signed(bits: List[int]) -> int:
    if bits[0] == 0:
        return _unsigned(bits)
    # two's complement: complement every bit, add one, negate
    return -(_unsigned([b ^ 1 for b in bits]) + 1)


def uint(n: int) -> Parser[int]:
    """Reads `n` bits as an unsigned big-endian integer."""
    if n <= 0:
        raise ValueError(f"uint: n must be larger than 0, got {n}")
    return sequence_of([_BIT] * n).map(_unsigned).named(f"uint({n})")


def sint(n: int) -> Parser[int]:
    """Reads `n` bits as a two's-complement signed integer.

    >>> sint(8).parse(bytes([200]))
    -56
    """
    if n <= 0:
        raise ValueError(f"sint: n must be larger than 0, got {n}")
    return sequence_of([_BIT] * n).map(_signed).named(f"sint({n})")


def raw_string(s: Union[str, bytes]) -> Parser[List[int]]:
    """Matches the bytes of `s` one by one, eight bits at a time.

    A `str` is matched character by character, so every character must fit
    in one byte. The result is the list of matched byte values.
    """
    if not s:
        raise ValueError("raw_string: s must not be empty")
    codes = list(s) if isinstance(s, (bytes, bytearray)) else [ord(c) for c in s]
    for code in codes:
        if code > 0xFF:
            raise ValueError(f"raw_string: {chr(code)!r} does not fit in a single byte")

    def expect(code: int) -> Parser[int]:
        def check(observed: int) -> Parser[int]:
            if observed == code:
                return succeed(code)
            return fail(f"raw_string: expected character '{chr(code)}', got '{chr(observed)}'")
        return uint(8).chain(check)

    return sequence_of([expect(code) for code in codes]).named(f"raw_string({s!r})")
