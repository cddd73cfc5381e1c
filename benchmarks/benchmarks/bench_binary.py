from bitparsec.Binary import sint, uint
from bitparsec.Prim import many, run_parser


class TimeBinary:
    def setup(self):
        self.bytes_parser = many(uint(8))
        self.words_parser = many(sint(32))
        self.small = bytes(range(256)) * 4
        self.large = bytes(range(256)) * 64

    def time_uint8_small(self):
        run_parser(self.bytes_parser, self.small)

    def time_uint8_large(self):
        run_parser(self.bytes_parser, self.large)

    def time_sint32_large(self):
        run_parser(self.words_parser, self.large)
