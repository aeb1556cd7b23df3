import argparse
import sys
from typing import Optional

from .Config import *
from .number_list import format_numbers, heap_sort_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="heapsort", description="Sort a list of numbers with a binary max-heap.")
    parser.add_argument("numbers", nargs="?", default="", help=f"numbers separated by `{INPUT_SEPARATOR}`, e.g. 5,3,8,1")
    parser.add_argument("--separator", default=INPUT_SEPARATOR, help="separator between numbers")
    parser.add_argument("--descending", action="store_true", help="print values in pop order (largest first)")
    parser.add_argument("--stats", action="store_true", help="write comparison statistics of the heap algorithms")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.stats:
        from .generate_statistics import generate_statistics, save_result

        save_result(generate_statistics())
        return 0

    result, errors = heap_sort_text(args.numbers, args.separator)
    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    if args.descending:
        result.reverse()
    print(format_numbers(result, args.separator))
    return 0
