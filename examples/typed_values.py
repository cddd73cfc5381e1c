from bitparsec import (
    between, choice, digits, lazy, letters, run_parser, sep_by, sequence_of, string,
)

# 1. Typed values, where the type prefix decides how the rest is parsed:
#   string:hello    -> {'type': 'string', 'value': 'hello'}
#   number:42       -> {'type': 'number', 'value': 42}
#   diceroll:2d8    -> {'type': 'diceroll', 'value': [2, 8]}
string_value = letters().map(lambda result: {"type": "string", "value": result})

number_value = digits().map(lambda result: {"type": "number", "value": int(result)})

dice_roll_value = sequence_of([digits(), string("d"), digits()]).map(
    lambda results: {"type": "diceroll", "value": [int(results[0]), int(results[2])]}
)


def value_for(type_name: str):
    if type_name == "string":
        return string_value
    if type_name == "number":
        return number_value
    return dice_roll_value


typed_value = sequence_of([letters(), string(":")]).map(lambda results: results[0]).chain(value_for)

# 2. Nested arrays of digits: [1,[2,[3],4],5]
square_brackets = between(string("["), string("]"))
comma_separated = sep_by(string(","))

value = lazy(lambda: choice([digits(), array]))
array = square_brackets(comma_separated(value))


if __name__ == "__main__":
    for text in ["string:hello", "number:42", "diceroll:1d20"]:
        print(f"{text:<15} -> {run_parser(typed_value, text).result}")

    print(run_parser(value, "[1,[2,[3],4],5]").result)
