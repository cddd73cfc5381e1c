from dataclasses import dataclass
from typing import Any, Callable, Generic, List
from .Parsec import Parser, ParseState, T, log


# 1. sequenceOf: Runs parsers one after another
def sequence_of(parsers: List[Parser[Any]]) -> Parser[List[Any]]:
    """
    Applies each parser in order, threading the state through.
    Returns the list of their results, or the first failure as-is.
    """
    def parse(state: ParseState) -> ParseState[List[Any]]:
        results = []
        next_state = state
        for p in parsers:
            next_state = p(next_state)
            if next_state.failed:
                return next_state
            results.append(next_state.result)
        return next_state.with_result(results)
    return Parser(parse, f"sequence_of({', '.join(p.name for p in parsers)})")


# 2. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order, each from the same starting state.
    Returns the first success; the first match wins, not the longest.
    """
    def parse(state: ParseState) -> ParseState[T]:
        for p in parsers:
            next_state = p(state)
            if not next_state.failed:
                return next_state
        return state.with_error(f"choice: unable to match any parser at index {state.cursor}")
    return Parser(parse, f"choice({' | '.join(p.name for p in parsers)})")


# 3. between: Parses a value wrapped in brackets
def between(left: Parser[Any], right: Parser[Any]) -> Callable[[Parser[T]], Parser[T]]:
    """
    between(left, right)(content) parses left, content and right, returning
    the result of content only.
    """
    def wrap(content: Parser[T]) -> Parser[T]:
        return sequence_of([left, content, right]).map(lambda results: results[1]).named(
            f"between({left.name}, {right.name})({content.name})")
    return wrap


# 4. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(separator: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    sep_by(separator)(value) parses value, separator, value, ... and returns
    the list of values. Always succeeds. A separator that is not followed by
    a value is left unconsumed.
    """
    def wrap(value: Parser[T]) -> Parser[List[T]]:
        def parse(state: ParseState) -> ParseState[List[T]]:
            results: List[T] = []
            # state after the last matched value; a separator is only kept once a value follows it
            end_state = state
            next_state = state
            while True:
                value_state = value(next_state)
                if value_state.failed:
                    break
                results.append(value_state.result)
                end_state = value_state
                separator_state = separator(value_state)
                if separator_state.failed or separator_state.cursor == next_state.cursor:
                    break
                next_state = separator_state
            return end_state.with_result(results)
        return Parser(parse, f"sep_by({separator.name})({value.name})")
    return wrap


# 5. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(separator: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    Like sep_by, but fails unless at least one value is parsed.
    """
    def wrap(value: Parser[T]) -> Parser[List[T]]:
        separated = sep_by(separator)(value)

        def parse(state: ParseState) -> ParseState[List[T]]:
            next_state = separated(state)
            if not next_state.result:
                return next_state.with_error(f"sep_by1: unable to match any input at index {state.cursor}")
            return next_state
        return Parser(parse, f"sep_by1({separator.name})({value.name})")
    return wrap


@dataclass(frozen=True)
class Tagged(Generic[T]):
    """A result labelled with the name of the rule that produced it."""
    name: str
    value: T


# 6. tag: Labels results, for use with Parser.map
def tag(name: str) -> Callable[[T], Tagged[T]]:
    """
    tag('Version') is a function wrapping a value as Tagged('Version', value).
    """
    return lambda value: Tagged(name, value)


# 7. trace: Logs the remaining input
def trace(label: str) -> Parser[Any]:
    """Logs the cursor and upcoming input; passes the state through unchanged."""
    def parse(state: ParseState) -> ParseState[Any]:
        upcoming = state.input[state.cursor:state.cursor + 30] if isinstance(state.input, str) else \
            bytes(state.input[state.cursor // 8:state.cursor // 8 + 30])
        log.info("%s: %r at index %d", label, upcoming, state.cursor)
        return state
    return Parser(parse, f"trace({label!r})")


# 8. traced: Logs entry into a parser and its failure
def traced(label: str, p: Parser[T]) -> Parser[T]:
    enter = trace(label)

    def parse(state: ParseState) -> ParseState[T]:
        next_state = p(enter(state))
        if next_state.failed:
            log.info("%s failed: %s", label, next_state.error_message)
        return next_state
    return Parser(parse, f"traced({label!r}, {p.name})")
