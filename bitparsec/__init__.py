# Core
from .Parsec import Parser, ParseState, ParseError, ParseFailure, set_debug
from .Prim import run_parser, succeed, fail, lazy, many, many_strict

# Characters
from .Char import string, char, regex, letters, digits, end_of_input

# Combinators
from .Combinators import (
    sequence_of, choice, between, sep_by, sep_by1,
    Tagged, tag, trace, traced
)

# Binary
from .Binary import bit, bit_zero, bit_one, uint, sint, raw_string
