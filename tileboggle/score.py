#!/usr/bin/env python
"""Score tile boards, one per line, tiles separated by spaces."""

import argparse
import fileinput
import sys
import time

from tileboggle.args import add_standard_args, get_boggler_from_args


def main():
    parser = argparse.ArgumentParser(description="Score tile boards")
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing boards, or stdin"
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )

    args = parser.parse_args()
    boggler = get_boggler_from_args(args)

    start_s = time.time()
    n = 0
    for line in fileinput.input(files=args.files):
        board = line.strip()
        if not board:
            continue
        boggler.set_board(board.split())
        words = boggler.get_all_scoreable_words(args.min_length, prune=args.prune)
        score = boggler.get_score_for_words(words, args.min_length)
        print(f"{board}: {score}")
        if args.print_words:
            print("\n".join(words))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
