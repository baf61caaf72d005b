from miniparsec.Char import char, spaces, trim
from miniparsec.Combinators import sep_by
from miniparsec.Number import natural
from miniparsec.Prim import many, run_parser, skip_many


class TimeRepetition:
    def setup(self):
        self.chars = many(char("a"))
        self.skipped = skip_many(char("a"))
        self.numbers = sep_by(trim(natural()), char(","))
        self.blank = spaces()
        self.run_of_a = "a" * 50000
        self.number_list = ", ".join(str(i) for i in range(5000))
        self.whitespace = " \t\n" * 20000

    def time_many_collects(self):
        run_parser(self.chars, self.run_of_a)

    def time_skip_many(self):
        run_parser(self.skipped, self.run_of_a)

    def time_sep_by_numbers(self):
        run_parser(self.numbers, self.number_list)

    def time_spaces(self):
        run_parser(self.blank, self.whitespace)
