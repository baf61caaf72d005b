import argparse
import logging
import sys

from miniparsec.Combinators import parser_traced
from miniparsec.Json import json_document
from miniparsec.Prim import run_parser


def main(argv=None):
    cli = argparse.ArgumentParser(description="Parse a JSON document and print it back.")
    cli.add_argument("path", nargs="?", help="file to read; stdin when omitted")
    cli.add_argument("--debug", action="store_true", help="log parser tracing")
    cli.add_argument("--json", action="store_true", help="print valid JSON instead of the display form")
    args = cli.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    if args.path:
        with open(args.path) as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    parser = json_document()
    if args.debug:
        parser = parser_traced("document", parser)

    value, err = run_parser(parser, text)
    if err:
        print("Parsing Failed:", err, file=sys.stderr)
        return 1

    print(value.to_json() if args.json else value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
