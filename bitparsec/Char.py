import re
from typing import Optional

from .Parsec import Parser, ParseState

# How much of the remaining input a mismatch message shows
PREVIEW_LENGTH = 10


def _preview(target: str, cursor: int) -> str:
    shown = target[cursor:cursor + PREVIEW_LENGTH]
    if len(target) - cursor > PREVIEW_LENGTH:
        shown += "..."
    return shown


# 1. string: Parses a literal string
def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it.

    The empty string always matches, consuming nothing.
    """
    def parse(state: ParseState) -> ParseState[str]:
        target, cursor = state.input, state.cursor
        if not s:
            return state.advance(cursor, s)
        if cursor >= len(target):
            return state.with_error(f"string: expected '{s}', but got unexpected end of input")
        if target.startswith(s, cursor):
            return state.advance(cursor + len(s), s)
        return state.with_error(f"string: expected '{s}', but got '{_preview(target, cursor)}'")
    return Parser(parse, f"string({s!r})")


# 2. char: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    if len(c) != 1:
        raise ValueError(f"char: expected a single character, got {c!r}")
    return string(c).error_map(lambda _, cursor: f"char: expected '{c}' at index {cursor}").named(f"char({c!r})")


# 3. regex: Core function for character classes
def regex(pattern: str, name: Optional[str] = None) -> Parser[str]:
    """Matches `pattern` at the cursor and returns the longest match.

    Fails at end of input and when the match would be empty.
    """
    compiled = re.compile(pattern)
    label = name or f"regex({pattern!r})"

    def parse(state: ParseState) -> ParseState[str]:
        target, cursor = state.input, state.cursor
        if cursor >= len(target):
            return state.with_error(f"{label}: unexpected end of input")
        match = compiled.match(target, cursor)
        if match is None or not match.group(0):
            return state.with_error(f"{label}: couldn't match {label} at index {cursor}")
        return state.advance(match.end(), match.group(0))
    return Parser(parse, label)


# 4. letters: Parses a run of ASCII letters
def letters() -> Parser[str]:
    """Parses one or more ASCII letters and returns them."""
    return regex(r"[A-Za-z]+", "letters")


# 5. digits: Parses a run of ASCII digits
def digits() -> Parser[str]:
    """Parses one or more ASCII digits and returns them."""
    return regex(r"[0-9]+", "digits")


# 6. endOfInput: Succeeds only when nothing is left
def end_of_input() -> Parser[None]:
    """Succeeds with None only at the end of the input.

    The end is the character count for text and the bit count for bytes.
    """
    def parse(state: ParseState) -> ParseState[None]:
        target = state.input
        size = len(target) if isinstance(target, str) else memoryview(target).nbytes * 8
        if state.cursor >= size:
            return state.with_result(None)
        return state.with_error(f"end_of_input: expected end of input at index {state.cursor}")
    return Parser(parse, "end_of_input")
