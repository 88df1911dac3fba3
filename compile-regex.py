#!/bin/env python3

import argparse
import logging
import sys

import minire.compiler as compiler
from minire.errors import CompileError

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile a regex and optionally match it against some text."
    )
    parser.add_argument("regex", help="Regex to compile")
    parser.add_argument("out_file", nargs="?", help="Write the compiled code here instead of stdout")
    parser.add_argument("--match", metavar="TEXT", help="Print the start and length of the first match in TEXT")
    parser.add_argument(
        "--replace",
        metavar="REPLACEMENT",
        help="With --match, print TEXT with the first match replaced by REPLACEMENT",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level",
    )
    args = parser.parse_args(argv)

    if args.replace is not None and args.match is None:
        parser.error("--replace requires --match")

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s"
    )

    try:
        if args.match is None:
            code = compiler.compile_wrapper(args.regex)
        else:
            pattern = compiler.compile_regex(args.regex)
    except CompileError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.match is None:
        if args.out_file is None:
            print(code)
        else:
            with open(args.out_file, "w", encoding="utf-8") as f:
                f.write(code)
        return 0

    if args.replace is not None:
        replaced = pattern.replace_first(args.match, args.replace)
        if replaced is None:
            return 1
        print(replaced)
        return 0

    found = pattern.run(args.match)
    if found is None:
        return 1
    print(f"{found[0]} {found[1]}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
