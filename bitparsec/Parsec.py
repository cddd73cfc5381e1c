import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

log = logging.getLogger("bitparsec")

# When True, every parser application is logged at DEBUG level.
debug = False


def set_debug(enabled: bool = True) -> None:
    """Turn the parsing log on or off.

    The library installs no handlers, so configure logging as usual:

        import logging
        logging.basicConfig(level=logging.DEBUG)
        bitparsec.set_debug()
    """
    global debug
    debug = enabled


@dataclass(frozen=True)
class ParseError:
    """A parse failure: the message and the cursor it was raised at."""
    cursor: int
    message: str

    def __str__(self) -> str:
        return f"Parse error at index {self.cursor}: {self.message}"


@dataclass(frozen=True)
class ParseState(Generic[T]):
    """Immutable snapshot threaded through a parse.

    `input` is shared by every state of a parse and never mutated. `cursor`
    counts characters for text input and bits for binary input.
    """
    input: Any
    cursor: int = 0
    result: Optional[T] = None
    error: Optional[ParseError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def advance(self, cursor: int, result: U) -> 'ParseState[U]':
        """Successful step: move to `cursor` and store `result`."""
        return replace(self, cursor=cursor, result=result)

    def with_result(self, result: U) -> 'ParseState[U]':
        return replace(self, result=result)

    def with_error(self, message: str) -> 'ParseState[T]':
        """Failed step: cursor and result are kept as they are."""
        return replace(self, error=ParseError(self.cursor, message))


class ParseFailure(Exception):
    """Raised by `Parser.parse` when the final state is a failure."""

    def __init__(self, state: ParseState):
        super().__init__(str(state.error))
        self.state = state
        self.error = state.error


class Parser(Generic[T]):
    """A named transformation from one ParseState to the next.

    Parsers are built once and may be applied any number of times. Applying a
    parser to a state that has already failed returns that state untouched, so
    no combinator can move a failed parse forward.
    """

    def __init__(self, transform: Callable[[ParseState], ParseState], name: Optional[str] = None):
        self.transform = transform
        self.name = name or getattr(transform, "__name__", "parser")

    def __call__(self, state: ParseState) -> ParseState[T]:
        if state.failed:
            return state
        if not debug:
            return self.transform(state)

        log.debug("trying %s at index %d", self.name, state.cursor)
        next_state = self.transform(state)
        if next_state.failed:
            log.debug("failed %s: %s", self.name, next_state.error_message)
        else:
            log.debug("matched %s, %r, new index = %d", self.name, next_state.result, next_state.cursor)
        return next_state

    def __repr__(self) -> str:
        return f"Parser({self.name})"

    def named(self, name: str) -> 'Parser[T]':
        """Same parser under a new name (used in the debug log)."""
        return Parser(self.transform, name)

    def run(self, target: Any) -> ParseState[T]:
        """Parse `target` from index 0 and return the final state, failed or not.

        Recursive grammars nest one Python call chain per level, so input nested
        deeper than the interpreter's recursion limit allows is reported as a
        failed state rather than raised.
        """
        state = ParseState(target)
        try:
            return self(state)
        except RecursionError:
            log.debug("%s exceeded the recursion limit", self.name)
            return state.with_error("maximum nesting depth exceeded while parsing from index 0")

    def parse(self, target: Any) -> T:
        """Parse `target` and return the result, raising ParseFailure on failure."""
        state = self.run(target)
        if state.failed:
            raise ParseFailure(state)
        return state.result

    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        """Replace a successful result with f(result)."""
        def parse(state: ParseState) -> ParseState[U]:
            next_state = self(state)
            if next_state.failed:
                return next_state
            return next_state.with_result(f(next_state.result))
        return Parser(parse, self.name)

    def error_map(self, f: Callable[[str, int], str]) -> 'Parser[T]':
        """Replace a failure message with f(message, cursor)."""
        def parse(state: ParseState) -> ParseState[T]:
            next_state = self(state)
            if not next_state.failed:
                return next_state
            error = next_state.error
            return replace(next_state, error=ParseError(error.cursor, f(error.message, error.cursor)))
        return Parser(parse, self.name)

    # Monadic bind (>>=)
    def chain(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        """Pick the next parser from this parser's result and continue with it."""
        def parse(state: ParseState) -> ParseState[U]:
            next_state = self(state)
            if next_state.failed:
                return next_state
            next_parser: 'Parser[U]' = f(next_state.result)
            return next_parser(next_state)
        return Parser(parse, f"{self.name} >>= ...")

    bind = chain

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.chain(f)

    # Ordered choice (<|>)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        from .Combinators import choice
        return choice([self, other])
