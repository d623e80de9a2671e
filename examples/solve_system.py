#!/usr/bin/env python3
"""
Solve an augmented linear system exactly and print every row operation.

Matrix input is one row per line, cells separated by spaces/commas, e.g.

    2  1 -1 |   8
   -3 -1  2 | -11
   -2  1  2 |  -3

Usage:
  python solve_system.py system.txt
  python solve_system.py --rows "1 1/2 3; 2 1 7"
  python solve_system.py system.txt --json
  python solve_system.py system.txt --draw out/system
"""

import argparse
import json
import logging
import os
import sys

from rreftools import (
    ValidationError,
    draw_steps,
    parse_matrix_text,
    result_to_text,
    solve_rref,
)

SUBSCRIPTS_DEFAULT = os.environ.get("RREFTOOLS_SUBSCRIPTS", "0") not in ("", "0", "false", "no")


def main():
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[1])
    parser.add_argument('path', nargs='?', default=None,
                        help='file with one matrix row per line (default: stdin)')
    parser.add_argument('--rows', type=str, default=None,
                        help='inline matrix, rows separated by ";"')
    parser.add_argument('--json', action='store_true',
                        help='print the result dict as JSON instead of the report')
    parser.add_argument('--subscripts', action=argparse.BooleanOptionalAction,
                        default=SUBSCRIPTS_DEFAULT,
                        help='name variables x₁, x₂, ... (env: RREFTOOLS_SUBSCRIPTS)')
    parser.add_argument('--draw', type=str, default=None, metavar='PREFIX',
                        help='save one PNG per step as PREFIX_step{i}.png')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level="DEBUG" if args.verbose else "WARNING")

    if args.rows is not None:
        text = args.rows.replace(";", "\n")
    elif args.path is not None:
        with open(args.path) as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    try:
        result = solve_rref(parse_matrix_text(text), subscripts=args.subscripts)
    except ValidationError as e:
        print(f"Invalid matrix: {e}", file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(result_to_text(result))

    if args.draw:
        paths = draw_steps(result, save_prefix=args.draw)
        print(f"Saved {len(paths)} figures to {args.draw}_step*.png")


if __name__ == '__main__':
    main()
