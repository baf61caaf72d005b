from miniparsec.Json import json_document
from miniparsec.Prim import run_parser


class TimeJson:
    def setup(self):
        self.parser = json_document()
        row = '{"id": 12, "name": "item", "tags": ["a", "b"], "price": 9.75, "active": true}'
        self.flat = "[" + ", ".join(str(i) for i in range(1000)) + "]"
        self.records = "[" + ", ".join([row] * 200) + "]"
        self.nested = "[" * 50 + "]" * 50

    def time_flat_array(self):
        run_parser(self.parser, self.flat)

    def time_records(self):
        run_parser(self.parser, self.records)

    def time_nested(self):
        run_parser(self.parser, self.nested)
