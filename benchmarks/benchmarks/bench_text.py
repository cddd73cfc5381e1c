from bitparsec.Char import char, digits, string
from bitparsec.Combinators import between, choice, sep_by
from bitparsec.Prim import lazy, many, run_parser


class TimeText:
    def setup(self):
        self.repeated = many(char("a"))
        self.numbers = sep_by(string(","))(digits())
        value = lazy(lambda: choice([digits(), array]))
        array = between(string("["), string("]"))(sep_by(string(","))(value))
        self.nested = value

        self.letters_input = "a" * 10000
        self.numbers_input = ",".join(str(n) for n in range(5000))
        self.nested_input = "[1,[2,[3],4],5]," * 500
        self.nested_input = "[" + self.nested_input.rstrip(",") + "]"

    def time_many_char(self):
        run_parser(self.repeated, self.letters_input)

    def time_sep_by_digits(self):
        run_parser(self.numbers, self.numbers_input)

    def time_nested_arrays(self):
        run_parser(self.nested, self.nested_input)
