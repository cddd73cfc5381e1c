from bitparsec import (
    ParseFailure, between, choice, digits, lazy, sequence_of, string,
)

# Prefix arithmetic: (op a b), where a and b are numbers or nested operations.
#   (+ (* 10 2) (- 10 2))  ->  28

# 1. Grammar
number = digits().map(lambda d: {"type": "number", "value": int(d)})

operator = choice([string("+"), string("-"), string("*"), string("/")])

parens = between(string("("), string(")"))

# 'expression' refers to 'operation', which is defined below and refers back
# to 'expression', so it has to be resolved lazily.
expression = lazy(lambda: choice([number, operation]))

operation = parens(sequence_of([operator, string(" "), expression, string(" "), expression])).map(
    lambda results: {
        "type": "operation",
        "value": {"op": results[0], "a": results[2], "b": results[4]},
    }
)

# 2. Evaluation
OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


def evaluate(node):
    if node["type"] == "number":
        return node["value"]
    op = node["value"]
    return OPERATIONS[op["op"]](evaluate(op["a"]), evaluate(op["b"]))


def interpret(program: str):
    """Parse and evaluate a program; raises ParseFailure on bad syntax."""
    return evaluate(expression.parse(program))


if __name__ == "__main__":
    for program in ["(+ (* 10 2) (- 10 2))", "(/ 9 (- 4 1))", "(+ 1 x)"]:
        try:
            print(f"{program:<25} -> {interpret(program)}")
        except ParseFailure as e:
            print(f"{program:<25} -> {e}")
