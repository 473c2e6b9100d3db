"""Standard command-line arguments shared across tools."""

import argparse

from tileboggle.boggler import TileBoggler
from tileboggle.lexicon import Lexicon


def add_standard_args(parser: argparse.ArgumentParser, *, progress=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file. The first token on each line is the word.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=3,
        help="Minimum number of characters for a word to score.",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Walk the board with prefix pruning rather than checking every "
        "dictionary word. Same results, usually much faster for big dictionaries.",
    )

    if progress:
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a progress bar while checking dictionary words.",
        )


def get_lexicon_from_args(args: argparse.Namespace):
    lexicon = Lexicon.create_from_file(args.dictionary)
    assert len(lexicon)
    return lexicon


def get_boggler_from_args(args: argparse.Namespace):
    return TileBoggler(get_lexicon_from_args(args))
