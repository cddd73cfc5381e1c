from .Parsec import Parser, ParseState, T, log
from typing import Any, Callable, List


def succeed(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: ParseState) -> ParseState[T]:
        return state.with_result(value)
    return Parser(parse, f"succeed({value!r})")


def fail(msg: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    def parse(state: ParseState) -> ParseState[Any]:
        return state.with_error(msg)
    return Parser(parse, f"fail({msg!r})")


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first applied.

    Lets a rule refer to itself, or to a rule defined further down:

        value = lazy(lambda: choice([digits(), array]))
        array = between(string('['), string(']'))(sep_by(string(','))(value))

    The parser the thunk returns is cached and reused afterwards. There is no
    lock: runs sharing the parser from several threads may each call the
    thunk on first use, which is harmless as long as the thunk only builds
    and returns a parser.
    """
    resolved: List[Parser[T]] = []

    def parse(state: ParseState) -> ParseState[T]:
        if not resolved:
            resolved.append(thunk())
        return resolved[0](state)
    return Parser(parse, "lazy(...)")


def many(p: Parser[T]) -> Parser[List[T]]:
    """Parse zero or more occurrences of `p`.

    Always succeeds. The failed attempt that ends the repetition is discarded,
    and so is an attempt that succeeds without moving the cursor, since
    repeating it could never terminate.
    """
    def parse(state: ParseState) -> ParseState[List[T]]:
        results: List[T] = []
        current_state = state
        while True:
            next_state = p(current_state)
            if next_state.failed:
                break
            if next_state.cursor == current_state.cursor:
                log.debug("many: %s matched without consuming input at index %d, stopping",
                          p.name, current_state.cursor)
                break
            results.append(next_state.result)
            current_state = next_state
        return current_state.with_result(results)
    return Parser(parse, f"many({p.name})")


def many_strict(p: Parser[T]) -> Parser[List[T]]:
    """Parse one or more occurrences of `p`."""
    repeated = many(p)

    def parse(state: ParseState) -> ParseState[List[T]]:
        next_state = repeated(state)
        if not next_state.result:
            return next_state.with_error(f"many_strict: couldn't match anything at index {state.cursor}")
        return next_state
    return Parser(parse, f"many_strict({p.name})")


def run_parser(parser: Parser[T], target: Any) -> ParseState[T]:
    """Run `parser` over `target` from index 0 and return the final state.

    `target` is a string for text grammars and a bytes-like object for binary
    ones. Check `state.failed` before using `state.result`.
    """
    return parser.run(target)
