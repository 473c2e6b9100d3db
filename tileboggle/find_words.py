#!/usr/bin/env python
"""Find words on a tile board and print their paths."""

import argparse

from tileboggle.args import add_standard_args, get_boggler_from_args
from tileboggle.errors import InputError


def format_path(boggler, path: list[int]):
    return " ".join(
        "{}@{},{}".format(boggler.board.tile(i), *boggler.board.position(i))
        for i in path
    )


def main():
    parser = argparse.ArgumentParser(description="Find words on a tile board")
    add_standard_args(parser, progress=True)
    parser.add_argument(
        "--board",
        type=str,
        default=None,
        help="Space-separated tiles in row-major order, e.g. 'A B QU D'. "
        "Uses the default 4x4 board if omitted.",
    )
    parser.add_argument(
        "words",
        metavar="WORD",
        nargs="*",
        help="Words to look for. If omitted, print every scorable word.",
    )
    args = parser.parse_args()

    boggler = get_boggler_from_args(args)
    if args.board is not None:
        try:
            boggler.set_board(args.board.split())
        except InputError as e:
            parser.error(str(e))
    print(boggler.get_board())

    if args.words:
        for word in args.words:
            path = boggler.is_on_board(word)
            if path:
                print(f"{word}: {path} {format_path(boggler, path)}")
            else:
                print(f"{word}: not found")
        return

    words = boggler.get_all_scoreable_words(
        args.min_length, prune=args.prune, progress=args.progress
    )
    for word in words:
        print(f"{word}: {boggler.is_on_board(word)}")
    score = boggler.get_score_for_words(words, args.min_length)
    print(f"{len(words)} words, score: {score}")


if __name__ == "__main__":
    main()
